"""Collaborator Protocols for the edit session.

The session talks to its surroundings only through these structural
interfaces.  Any object with conformant methods passes ``isinstance`` checks,
no inheritance required.

Example::

    from json_node_edit.protocols import DocumentStore

    class FileStore:
        def __init__(self, path):
            self._path = path

        def read(self) -> str:
            return self._path.read_text(encoding="utf-8")

        def write(self, text: str) -> None:
            self._path.write_text(text, encoding="utf-8")

    assert isinstance(FileStore(p), DocumentStore)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """Owner of the serialized document text.

    ``read`` returns the current text; ``write`` replaces it as a whole.  The
    session calls ``read`` once per save and ``write`` only on commit.
    """

    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Sink for user-visible outcome notices."""

    def success(self, message: str) -> None: ...

    def failure(self, message: str) -> None: ...
