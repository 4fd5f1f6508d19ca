"""Path mutator: copy-on-write assignment into a JSON document.

``update_at_path`` never modifies the document it is given.  A non-empty path
deep-copies the whole document, descends through every segment but the last,
and assigns the new value at the last one.  An empty path replaces the root.

Traversal is strict: ``int`` segments only index lists, ``str`` segments only
key dicts, and the final segment must already exist: the mutator replaces a
node, it never adds one.  Any segment that does not resolve raises
``PathTraversalError``, which signals that the path is stale relative to the
document (for example a selection captured before the document changed
shape).
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from json_node_edit.paths.formatter import format_path
from json_node_edit.paths.segments import PathSegment

__all__ = ["PathTraversalError", "get_at_path", "update_at_path"]


class PathTraversalError(LookupError):
    """A path segment does not resolve inside the document.

    Attributes:
        path:  The full path that was being walked.
        depth: Index of the segment that failed to resolve.
    """

    def __init__(self, path: Sequence[PathSegment], depth: int, reason: str) -> None:
        self.path = tuple(path)
        self.depth = depth
        self.reason = reason
        super().__init__(
            f"{format_path(self.path)}: segment {depth} "
            f"({self.path[depth]!r}) {reason}"
        )


def _is_index(segment: PathSegment) -> bool:
    return isinstance(segment, int) and not isinstance(segment, bool)


def _check_segment(container: Any, path: Sequence[PathSegment], depth: int) -> None:
    """Raise PathTraversalError unless ``path[depth]`` names an existing member."""
    segment = path[depth]
    if isinstance(container, dict):
        if not isinstance(segment, str):
            raise PathTraversalError(path, depth, "is not a key of an object")
        if segment not in container:
            raise PathTraversalError(path, depth, "is missing from the object")
        return
    if isinstance(container, list):
        if not _is_index(segment):
            raise PathTraversalError(path, depth, "is not an index of an array")
        if not 0 <= segment < len(container):
            raise PathTraversalError(
                path, depth, f"is out of range for an array of {len(container)}"
            )
        return
    raise PathTraversalError(
        path, depth, f"addresses a {type(container).__name__}, not a container"
    )


def _descend(document: Any, path: Sequence[PathSegment], stop: int) -> Any:
    """Walk ``path[:stop]`` from ``document`` and return the value reached."""
    current = document
    for depth in range(stop):
        _check_segment(current, path, depth)
        current = current[path[depth]]
    return current


def get_at_path(document: Any, path: Sequence[PathSegment] | None) -> Any:
    """Return the value at ``path`` inside ``document``.

    Args:
        document: Any JSON value.
        path:     Segments to follow.  None or empty returns ``document``.

    Raises:
        PathTraversalError: If any segment does not resolve.
    """
    if not path:
        return document
    return _descend(document, path, len(path))


def update_at_path(
    document: Any,
    path: Sequence[PathSegment] | None,
    value: Any,
) -> Any:
    """Return a new document with ``value`` placed at ``path``.

    Args:
        document: The current JSON document.  Never modified.
        path:     Location to replace.  None or empty replaces the root.
        value:    The new JSON value.

    Returns:
        ``value`` itself for the root path; otherwise a deep copy of
        ``document`` holding ``value`` at ``path``.

    Raises:
        PathTraversalError: If the path does not resolve in ``document``.
    """
    if not path:
        return value

    # Validate against the original before copying.
    parent = _descend(document, path, len(path) - 1)
    _check_segment(parent, path, len(path) - 1)

    updated = copy.deepcopy(document)
    target = _descend(updated, path, len(path) - 1)
    target[path[-1]] = value
    return updated
