"""EditorConfig: serialization settings shared by the normalizer and session.

EditorConfig is a frozen (immutable) dataclass.  Pass it explicitly; every
public entry point treats ``config=None`` as ``EditorConfig()``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable serialization settings.

    Attributes:
        indent: Spaces per indentation level for pretty-printed JSON (>= 0).
            Used both for the normalized node text and for the document text
            written back to the store.  Default 2.
        ensure_ascii: When True, non-ASCII characters are escaped as
            ``\\uXXXX`` in serialized output.  Default False (UTF-8 text).
    """

    indent: int = 2
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
