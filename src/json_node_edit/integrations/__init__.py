"""Integrations subpackage for json-node-edit.

Contains the pytest plugin, auto-discovered via the pytest11 entry point
declared in pyproject.toml.
"""

from __future__ import annotations

__all__: list[str] = []
