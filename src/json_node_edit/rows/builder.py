"""Row builder: derives a node's rows from the JSON value it displays.

Mirrors how the graph view lays a document out:

- an object node shows one keyed row per member, in key order;
- an array shows one keyless row per element;
- a scalar (root value or bare array element) shows a single keyless row.

Container members are kept as ARRAY / OBJECT rows holding the nested value;
they are rendered as separate child nodes and skipped by the normalizer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_node_edit.paths.mutator import get_at_path
from json_node_edit.paths.segments import PathSegment
from json_node_edit.rows.nodes import NodeRow, RowType, SelectedNode

__all__ = ["build_rows", "row_type_of", "select_node"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


def row_type_of(value: JsonValue) -> RowType:
    """Return the RowType for a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # CRITICAL: bool MUST be checked before int, bool subclasses int in Python
    if isinstance(value, bool):
        return RowType.BOOLEAN
    if value is None:
        return RowType.NULL
    if isinstance(value, str):
        return RowType.STRING
    if isinstance(value, (int, float)):
        return RowType.NUMBER
    if isinstance(value, dict):
        return RowType.OBJECT
    if isinstance(value, list):
        return RowType.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def build_rows(value: JsonValue) -> tuple[NodeRow, ...]:
    """Return the rows a node displaying ``value`` shows."""
    if isinstance(value, dict):
        return tuple(
            NodeRow(key=key, value=member, type=row_type_of(member))
            for key, member in value.items()
        )
    if isinstance(value, list):
        return tuple(
            NodeRow(key=None, value=item, type=row_type_of(item)) for item in value
        )
    return (NodeRow(key=None, value=value, type=row_type_of(value)),)


def select_node(
    document: JsonValue, path: Sequence[PathSegment] | None = None
) -> SelectedNode:
    """Resolve ``path`` in ``document`` and snapshot the node found there.

    Raises:
        PathTraversalError: If the path does not resolve.
        TypeError: If the value at the path is not valid JSON.
    """
    value = get_at_path(document, path)
    return SelectedNode(rows=build_rows(value), path=tuple(path or ()))
