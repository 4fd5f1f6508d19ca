"""Result types returned by ``EditSession.save()``.

A save either commits or fails with one of two recoverable failures.  The
session converts parse and traversal exceptions into these values at its
boundary, so callers branch on the result instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_node_edit.paths.segments import Path

__all__ = ["Committed", "ParseFailure", "SaveResult", "TraversalFailure"]


@dataclass(frozen=True, slots=True)
class Committed:
    """The edit was written to the document store.

    Attributes:
        document: The new document value.
        text:     The serialized text handed to ``DocumentStore.write``.
    """

    document: Any
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Edited text (or the stored document) is not valid JSON.

    Attributes:
        reason:  Human-readable description for the failure notice.
        line:    1-based line of the syntax error.
        column:  1-based column of the syntax error.
    """

    reason: str
    line: int
    column: int

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TraversalFailure:
    """The node's path no longer resolves in the current document.

    Attributes:
        reason: Human-readable description for the failure notice.
        path:   The stale path.
        depth:  Index of the first segment that failed to resolve.
    """

    reason: str
    path: Path
    depth: int

    @property
    def ok(self) -> bool:
        return False


SaveResult = Committed | ParseFailure | TraversalFailure
