"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 1 000-key nested, 10 000-key deeply nested.
Each tier also provides the path of a leaf-parent node to edit.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_document(num_keys: int) -> dict[str, Any]:
    """Generate a flat dict with deterministic scalar values."""
    return {f"key_{i}": f"value_{i}" for i in range(num_keys)}


def generate_nested_document(sections: int, groups: int, leaves: int) -> dict[str, Any]:
    """Generate sections -> list of groups -> leaf dicts.

    Leaves mix every scalar kind plus one nested array per group so that the
    normalizer has container rows to skip.
    """
    return {
        f"section_{i}": [
            {
                **{f"field_{i}_{j}_{k}": k for k in range(leaves)},
                "label": f"group {i}.{j}",
                "active": j % 2 == 0,
                "note": None,
                "history": list(range(leaves)),
            }
            for j in range(groups)
        ]
        for i in range(sections)
    }


@pytest.fixture
def doc_10key() -> tuple[dict[str, Any], list[str | int]]:
    """10-key flat document; edits a root member."""
    return generate_flat_document(10), ["key_5"]


@pytest.fixture
def doc_1000key() -> tuple[dict[str, Any], list[str | int]]:
    """~1 000 keys: 10 sections x 10 groups x 10 keys."""
    return generate_nested_document(10, 10, 6), ["section_5", 5]


@pytest.fixture
def doc_10000key() -> tuple[dict[str, Any], list[str | int]]:
    """~10 000 keys: 20 sections x 50 groups x 10 keys."""
    return generate_nested_document(20, 50, 6), ["section_19", 49]
