"""JSON node edit - view, normalize and commit edits to one node of a JSON document."""

from __future__ import annotations

from json_node_edit.api import (
    apply_edit,
    build_rows,
    format_path,
    get_at_path,
    normalize_rows,
    select_node,
    update_at_path,
)
from json_node_edit.config import EditorConfig
from json_node_edit.paths.mutator import PathTraversalError
from json_node_edit.result import Committed, ParseFailure, SaveResult, TraversalFailure
from json_node_edit.rows.nodes import NodeRow, RowType, SelectedNode
from json_node_edit.session import EditSession, SessionState
from json_node_edit.stores import InMemoryDocumentStore, RecordingNotifier

__version__: str = "0.1.0"
__all__: list[str] = [
    "Committed",
    "EditSession",
    "EditorConfig",
    "InMemoryDocumentStore",
    "NodeRow",
    "ParseFailure",
    "PathTraversalError",
    "RecordingNotifier",
    "RowType",
    "SaveResult",
    "SelectedNode",
    "SessionState",
    "TraversalFailure",
    "apply_edit",
    "build_rows",
    "format_path",
    "get_at_path",
    "normalize_rows",
    "select_node",
    "update_at_path",
]
