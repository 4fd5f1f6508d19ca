"""Rows subpackage: the row view of a node and its normalized text.

Re-exports:
- NodeRow / SelectedNode / RowType: row data model
- build_rows / select_node: derive rows from a JSON value or a document path
- normalize_rows: canonical editable text for a node's rows
"""

from json_node_edit.rows.builder import build_rows, row_type_of, select_node
from json_node_edit.rows.nodes import NodeRow, RowType, SelectedNode
from json_node_edit.rows.normalizer import normalize_rows, plain_text

__all__ = [
    "NodeRow",
    "RowType",
    "SelectedNode",
    "build_rows",
    "normalize_rows",
    "plain_text",
    "row_type_of",
    "select_node",
]
