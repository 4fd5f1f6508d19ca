"""Path segment types.

A path is an ordered tuple of segments from the document root: ``int`` for
an array index, ``str`` for an object key.  The empty tuple is the root.
"""

from __future__ import annotations

PathSegment = int | str
Path = tuple[PathSegment, ...]
