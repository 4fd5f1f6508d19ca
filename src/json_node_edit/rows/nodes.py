"""NodeRow, SelectedNode and RowType for the row view of a JSON node.

A node of the rendered document is displayed as an ordered list of rows.
Object nodes carry one keyed row per member; bare array elements and root
scalars carry a single keyless row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_node_edit.paths.segments import Path


class RowType(StrEnum):
    """Closed set of value kinds a row can display.

    StrEnum values are the lowercased member names, so ``RowType.ARRAY ==
    "array"`` and plain strings can be used wherever a RowType is expected.
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One visualized field of a node.

    Attributes:
        key:   Object key of the member, or None for a bare array element or
               root scalar.
        value: The scalar value, or the nested container for ARRAY / OBJECT
               rows.
        type:  Which kind of value the row shows (see RowType).
    """

    key: str | None
    value: Any
    type: RowType | str


@dataclass(frozen=True, slots=True)
class SelectedNode:
    """Read-only snapshot of the node under edit: its rows and its path."""

    rows: tuple[NodeRow, ...] = ()
    path: Path = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the snapshot stays frozen.
        object.__setattr__(self, "rows", tuple(self.rows))
        object.__setattr__(self, "path", tuple(self.path))
