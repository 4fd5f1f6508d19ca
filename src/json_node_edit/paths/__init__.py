"""Path subpackage: display formatting and copy-on-write mutation.

Re-exports:
- PathSegment / Path: segment types
- format_path: renders a path as ``$["key"][0]``
- get_at_path / update_at_path: strict traversal and copy-on-write assignment
- PathTraversalError: raised when a path does not resolve
"""

from json_node_edit.paths.formatter import format_path
from json_node_edit.paths.mutator import (
    PathTraversalError,
    get_at_path,
    update_at_path,
)
from json_node_edit.paths.segments import Path, PathSegment

__all__ = [
    "Path",
    "PathSegment",
    "PathTraversalError",
    "format_path",
    "get_at_path",
    "update_at_path",
]
