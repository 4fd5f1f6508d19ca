"""Path formatter: renders a node path as a ``$``-rooted bracket expression.

``["customer", 0]`` renders as ``$["customer"][0]``.  Key segments are
wrapped in double quotes verbatim; embedded quote characters are NOT escaped,
so a key containing ``"`` yields an ambiguous display string.
"""

from __future__ import annotations

from collections.abc import Sequence

from json_node_edit.paths.segments import PathSegment

__all__ = ["ROOT", "format_path"]

ROOT = "$"


def _format_segment(segment: PathSegment) -> str:
    # bool subclasses int but is never an array index; quote it like a key.
    if isinstance(segment, int) and not isinstance(segment, bool):
        return f"[{segment}]"
    return f'["{segment}"]'


def format_path(path: Sequence[PathSegment] | None) -> str:
    """Return the display string for a node path.

    Args:
        path: Ordered object-key / array-index segments.  None or empty means
              the document root.

    Returns:
        ``"$"`` for the root, otherwise ``"$"`` followed by one bracket group
        per segment with no separator between groups.
    """
    if not path:
        return ROOT
    return ROOT + "".join(_format_segment(seg) for seg in path)
