"""Public API functions for json-node-edit.

The three pure operations (normalize, format, mutate) are re-exported here
together with ``apply_edit``, a one-shot helper for callers that hold the
document text themselves and do not need a session.  None of these functions
keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

from json_node_edit.codec import dump_json, parse_json
from json_node_edit.config import EditorConfig
from json_node_edit.paths.formatter import format_path
from json_node_edit.paths.mutator import get_at_path, update_at_path
from json_node_edit.paths.segments import PathSegment
from json_node_edit.rows.builder import build_rows, select_node
from json_node_edit.rows.normalizer import normalize_rows

__all__ = [
    "apply_edit",
    "build_rows",
    "format_path",
    "get_at_path",
    "normalize_rows",
    "select_node",
    "update_at_path",
]


def apply_edit(
    document_text: str,
    path: Sequence[PathSegment] | None,
    edited_text: str,
    config: EditorConfig | None = None,
) -> str:
    """Place the JSON in ``edited_text`` at ``path`` and return the new document text.

    Args:
        document_text: Serialized current document.
        path:          Location of the edited node.  None or empty is the root.
        edited_text:   The user's edited node text.
        config:        Serialization settings.  Defaults to ``EditorConfig()``.

    Returns:
        The serialized new document, pretty-printed with ``config.indent``.

    Raises:
        json.JSONDecodeError: If either text is not valid JSON (including
            the non-standard NaN and Infinity constants).
        PathTraversalError: If the path does not resolve in the document.
    """
    value = parse_json(edited_text)
    document = parse_json(document_text)
    updated = update_at_path(document, path, value)
    return dump_json(updated, config)
