"""In-memory collaborators satisfying the session Protocols.

Used by the test suite and the pytest plugin, and handy for hosting views
that keep the document text themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["InMemoryDocumentStore", "RecordingNotifier"]


@dataclass
class InMemoryDocumentStore:
    """Holds the document text in memory and counts writes."""

    text: str = "{}"
    writes: int = 0

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


@dataclass
class RecordingNotifier:
    """Records every notice in arrival order."""

    successes: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def failure(self, message: str) -> None:
        self.failures.append(message)
