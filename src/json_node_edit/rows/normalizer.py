"""Normalizer: turns a node's rows into canonical, editable text.

Three cases, checked in order:

1. No rows -> the empty object text ``{}``.
2. A single keyless row (a bare array element or root scalar) -> the value
   in plain text form, not JSON-quoted.
3. Anything else -> the keyed, non-container rows as a pretty-printed JSON
   object, keys in row order.  ARRAY and OBJECT rows are skipped because
   they are rendered as separate child nodes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_node_edit.codec import dump_json
from json_node_edit.config import EditorConfig
from json_node_edit.rows.nodes import NodeRow, RowType

__all__ = ["EMPTY_OBJECT_TEXT", "normalize_rows", "plain_text"]

EMPTY_OBJECT_TEXT = "{}"
_CONTAINER_TYPES = (RowType.ARRAY, RowType.OBJECT)

# Integral floats below this magnitude are written out in full.
_FULL_DIGITS_LIMIT = 1e21


def _number_text(value: int | float) -> str:
    """Plain form of a number: ``1e16`` reads as ``10000000000000000``.

    Integral floats below 1e21 drop the exponent and the ``.0`` suffix; other
    floats keep Python's shortest repr (``1e-07``, ``2.5``).
    """
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) < _FULL_DIGITS_LIMIT
    ):
        return str(int(value))
    return str(value)


def plain_text(value: Any, config: EditorConfig | None = None) -> str:
    """Render a single value the way it reads in the node view.

    Strings are returned verbatim.  bool MUST be checked before numbers:
    ``str(True)`` is "True", while the JSON spelling is "true".  A nested
    container has no plain form of its own and is written as pretty-printed
    JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number_text(value)
    if isinstance(value, (dict, list)):
        return dump_json(value, config)
    return str(value)


def normalize_rows(
    rows: Sequence[NodeRow] | None,
    config: EditorConfig | None = None,
) -> str:
    """Return the canonical editable text for a node's rows.

    Args:
        rows:   The node's rows in display order.  None is treated as empty.
        config: Serialization settings.  Defaults to ``EditorConfig()``.

    Returns:
        ``"{}"`` for no rows, the plain text for a single keyless row,
        otherwise a pretty-printed JSON object of the keyed scalar rows.
        Numbers inside the object keep JSON number syntax (``1e+16``).
    """
    if not rows:
        return EMPTY_OBJECT_TEXT

    if len(rows) == 1 and not rows[0].key:
        return plain_text(rows[0].value, config)

    obj: dict[str, Any] = {}
    for row in rows:
        # Plain string tags compare equal to RowType members (StrEnum).
        if row.type in _CONTAINER_TYPES:
            continue
        if row.key:
            obj[row.key] = row.value

    return dump_json(obj, config)
