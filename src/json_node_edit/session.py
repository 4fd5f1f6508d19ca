"""EditSession: the view/edit state machine around one selected node.

The session wires the normalizer, the path formatter and the path mutator to
three explicit collaborators: a ``DocumentStore`` holding the document text,
a ``Notifier`` receiving outcome notices, and the ``SelectedNode`` being
edited.  There is no process-wide state; every session owns its context.

States::

    VIEWING --start_editing()--> EDITING --save() ok / cancel()--> VIEWING

Failure handling:
- Parse and traversal errors are caught in ``save()`` and returned as
  ``ParseFailure`` / ``TraversalFailure``.  The session stays in EDITING with
  the user's text untouched, the store is not written, and the notifier gets
  a failure notice.
- On success the whole new document is written in one ``write`` call, the
  session returns to VIEWING, the edit surface closes and the notifier gets a
  success notice.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_node_edit.cache import DocumentCache
from json_node_edit.codec import dump_json, parse_json
from json_node_edit.config import EditorConfig
from json_node_edit.paths.formatter import format_path
from json_node_edit.paths.mutator import PathTraversalError, update_at_path
from json_node_edit.result import (
    Committed,
    ParseFailure,
    SaveResult,
    TraversalFailure,
)
from json_node_edit.rows.builder import select_node
from json_node_edit.rows.nodes import SelectedNode
from json_node_edit.rows.normalizer import normalize_rows

if TYPE_CHECKING:
    from collections.abc import Sequence

    from json_node_edit.protocols import DocumentStore, Notifier
    from json_node_edit.paths.segments import PathSegment

__all__ = ["EditSession", "SessionState"]

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Node updated successfully!"


class SessionState(StrEnum):
    """Whether the node is shown read-only or its text is being edited."""

    VIEWING = auto()
    EDITING = auto()


class EditSession:
    """Edit session for a single selected node.

    Example::

        from json_node_edit import EditSession, InMemoryDocumentStore, RecordingNotifier

        store = InMemoryDocumentStore('{"customer": {"name": "Ann", "age": 30}}')
        session = EditSession(store, RecordingNotifier())
        session.select_path(["customer"])
        session.start_editing()
        session.edit('{"name": "Ann", "age": 31}')
        result = session.save()
        assert result.ok
    """

    def __init__(
        self,
        store: DocumentStore,
        notifier: Notifier,
        node: SelectedNode | None = None,
        config: EditorConfig | None = None,
    ) -> None:
        """Initialise the session in VIEWING state.

        Args:
            store:    Owner of the serialized document text.
            notifier: Receives success / failure notices.
            node:     Initially selected node.  Defaults to an empty root node.
            config:   Serialization settings.  Defaults to ``EditorConfig()``.
        """
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._store = store
        self._documents = DocumentCache(store)
        self._notifier = notifier
        self._node: SelectedNode = node if node is not None else SelectedNode()
        self._state = SessionState.VIEWING
        self._text = normalize_rows(self._node.rows, self._config)
        self._open = True

    # ------------------------------------------------------------------
    # Read-only view state
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def node(self) -> SelectedNode:
        return self._node

    @property
    def is_open(self) -> bool:
        """False once a save has committed and the edit surface was closed."""
        return self._open

    @property
    def text(self) -> str:
        """The edit buffer (normalized node text while viewing)."""
        return self._text

    @property
    def display_text(self) -> str:
        """Normalized content of the selected node, recomputed on each read."""
        return normalize_rows(self._node.rows, self._config)

    @property
    def path_text(self) -> str:
        return format_path(self._node.path)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, node: SelectedNode) -> None:
        """Replace the selected node; any unsaved edit is dropped."""
        if self._state is SessionState.EDITING:
            logger.debug("selection changed while editing %s", self.path_text)
        self._node = node
        self._reset()
        self._open = True

    def select_path(self, path: Sequence[PathSegment] | None) -> SelectedNode:
        """Select the node at ``path`` in the current stored document.

        Raises:
            json.JSONDecodeError: If the stored text is not valid JSON.
            PathTraversalError: If the path does not resolve.
        """
        node = select_node(self._documents.load(), path)
        self.select(node)
        return node

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_editing(self) -> None:
        self._text = normalize_rows(self._node.rows, self._config)
        self._state = SessionState.EDITING
        logger.debug("editing %s", self.path_text)

    def edit(self, text: str) -> None:
        """Replace the edit buffer with ``text``."""
        if self._state is not SessionState.EDITING:
            msg = "edit() requires an active edit; call start_editing() first"
            raise RuntimeError(msg)
        self._text = text

    def cancel(self) -> None:
        """Discard the edit buffer and return to VIEWING.  The store is untouched."""
        logger.debug("edit of %s cancelled", self.path_text)
        self._reset()

    def close(self) -> None:
        """Close the edit surface, discarding any unsaved edit."""
        self._reset()
        self._open = False

    def save(self) -> SaveResult:
        """Commit the edit buffer into the document at the node's path.

        The parsed edit replaces the whole node.  Saving an object node whose
        edit text omitted nested array or object members (see
        ``normalize_rows``) therefore drops those members from the document.

        Returns:
            ``Committed`` on success, ``ParseFailure`` when the edit buffer or
            the stored document is not valid JSON, ``TraversalFailure`` when
            the node's path no longer resolves.  Failures leave the store,
            the state and the edit buffer unchanged.

        Raises:
            RuntimeError: If called while not editing.
        """
        if self._state is not SessionState.EDITING:
            msg = "save() requires an active edit; call start_editing() first"
            raise RuntimeError(msg)

        try:
            value = parse_json(self._text)
        except json.JSONDecodeError as exc:
            return self._fail(
                ParseFailure(
                    reason=f"Invalid JSON format: {exc.msg}",
                    line=exc.lineno,
                    column=exc.colno,
                )
            )

        try:
            document: Any = self._documents.load()
        except json.JSONDecodeError as exc:
            return self._fail(
                ParseFailure(
                    reason=f"Stored document is not valid JSON: {exc.msg}",
                    line=exc.lineno,
                    column=exc.colno,
                )
            )

        try:
            updated = update_at_path(document, self._node.path, value)
        except PathTraversalError as exc:
            return self._fail(
                TraversalFailure(
                    reason=f"Node no longer exists in the document: {exc}",
                    path=exc.path,
                    depth=exc.depth,
                )
            )

        text = dump_json(updated, self._config)
        self._documents.write(text)
        logger.info("updated node at %s", self.path_text)

        self._state = SessionState.VIEWING
        self._open = False
        self._notifier.success(SUCCESS_MESSAGE)
        return Committed(document=updated, text=text)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._text = normalize_rows(self._node.rows, self._config)
        self._state = SessionState.VIEWING

    def _fail(self, failure: ParseFailure | TraversalFailure) -> SaveResult:
        logger.warning("save of %s failed: %s", self.path_text, failure.reason)
        self._notifier.failure(failure.reason)
        return failure
