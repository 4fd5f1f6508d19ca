"""DocumentCache: LRU-backed parsing proxy for any DocumentStore.

Wraps any DocumentStore-conformant object and memoizes the parsed value of
the text it returns.  Re-reading unchanged text (every re-render of the
selected node, every save against the same document) skips parsing.
LRU eviction occurs silently when ``max_size`` is exceeded.

Parsed values are shared between callers and MUST be treated as read-only.
``update_at_path`` deep-copies before it writes, so the session never
mutates a cached entry.

Example::

    from json_node_edit.cache import DocumentCache
    from json_node_edit.stores import InMemoryDocumentStore

    cache = DocumentCache(InMemoryDocumentStore('{"a": 1}'), max_size=8)
    doc = cache.load()        # parses
    doc_again = cache.load()  # served from memory, same object
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from json_node_edit.codec import parse_json

if TYPE_CHECKING:
    from json_node_edit.protocols import DocumentStore

__all__ = ["DocumentCache"]


class DocumentCache:
    """LRU-backed caching proxy around any DocumentStore.

    Satisfies the ``DocumentStore`` Protocol structurally: ``read`` and
    ``write`` pass straight through to the wrapped store.  Each instance
    maintains its own ``LRUCache`` keyed by document text.

    Args:
        store: Any object satisfying the ``DocumentStore`` Protocol.
        max_size: Maximum number of parsed documents to hold.  Defaults to 8.
    """

    def __init__(self, store: DocumentStore, max_size: int = 8) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._store: Any = store
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # DocumentStore Protocol surface
    # ------------------------------------------------------------------

    def read(self) -> str:
        return str(self._store.read())

    def write(self, text: str) -> None:
        self._store.write(text)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def load(self) -> Any:
        """Read the store and return the parsed document.

        Raises:
            json.JSONDecodeError: If the stored text is not valid JSON
                (including NaN and Infinity constants).
                Failed parses are not cached.
        """
        text = self.read()
        if text not in self._cache:
            self._cache[text] = parse_json(text)
        return self._cache[text]
