"""Tests for the EditSession state machine.

Covers VIEWING/EDITING transitions, cancel, re-selection, successful save
(store written once, surface closed, success notice) and both recoverable
failures (store untouched, still editing, text kept, failure notice).
"""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from json_node_edit.config import EditorConfig
from json_node_edit.result import Committed, ParseFailure, TraversalFailure
from json_node_edit.rows.nodes import NodeRow, RowType, SelectedNode
from json_node_edit.session import SUCCESS_MESSAGE, EditSession, SessionState
from json_node_edit.stores import InMemoryDocumentStore, RecordingNotifier

DOCUMENT: dict[str, Any] = {
    "customer": {"name": "Ann", "age": 30},
    "orders": [{"id": 1}, 7],
}

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore(json.dumps(DOCUMENT, indent=2))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def session(store: InMemoryDocumentStore, notifier: RecordingNotifier) -> EditSession:
    session = EditSession(store, notifier)
    session.select_path(["customer"])
    return session


# ---------------------------------------------------------------------------
# Viewing
# ---------------------------------------------------------------------------


class TestViewing:
    def test_initial_state(self, session: EditSession) -> None:
        assert session.state is SessionState.VIEWING
        assert session.is_open

    def test_display_text_is_normalized(self, session: EditSession) -> None:
        assert session.display_text == json.dumps({"name": "Ann", "age": 30}, indent=2)
        assert session.text == session.display_text

    def test_path_text(self, session: EditSession) -> None:
        assert session.path_text == '$["customer"]'

    def test_default_node_is_empty_root(
        self, store: InMemoryDocumentStore, notifier: RecordingNotifier
    ) -> None:
        session = EditSession(store, notifier)
        assert session.display_text == "{}"
        assert session.path_text == "$"

    def test_collaborators_exposed(
        self,
        session: EditSession,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
    ) -> None:
        assert session.store is store
        assert session.notifier is notifier


# ---------------------------------------------------------------------------
# Editing transitions
# ---------------------------------------------------------------------------


class TestTransitions:
    def test_start_editing_snapshots_text(self, session: EditSession) -> None:
        session.start_editing()
        assert session.state is SessionState.EDITING
        assert session.text == session.display_text

    def test_edit_replaces_buffer(self, session: EditSession) -> None:
        session.start_editing()
        session.edit('{"name": "Bo"}')
        assert session.text == '{"name": "Bo"}'

    def test_edit_requires_editing(self, session: EditSession) -> None:
        with pytest.raises(RuntimeError, match="start_editing"):
            session.edit("1")

    def test_save_requires_editing(self, session: EditSession) -> None:
        with pytest.raises(RuntimeError, match="start_editing"):
            session.save()

    def test_cancel_restores_normalized_text(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        session.edit("garbage")
        session.cancel()
        assert session.state is SessionState.VIEWING
        assert session.text == session.display_text
        assert store.writes == 0

    def test_cancel_after_failed_save_discards_text(self, session: EditSession) -> None:
        session.start_editing()
        session.edit("{invalid")
        session.save()
        session.cancel()
        assert session.text == session.display_text

    def test_reselect_while_editing_resets(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        session.edit('{"name": "stale"}')
        session.select_path(["orders", 1])
        assert session.state is SessionState.VIEWING
        assert session.text == "7"
        assert session.path_text == '$["orders"][1]'
        assert store.writes == 0

    def test_select_explicit_node(self, session: EditSession) -> None:
        node = SelectedNode(rows=[NodeRow(None, True, RowType.BOOLEAN)], path=["x"])
        session.select(node)
        assert session.node is node
        assert session.text == "true"

    def test_close_discards_edit(self, session: EditSession) -> None:
        session.start_editing()
        session.edit("1")
        session.close()
        assert not session.is_open
        assert session.state is SessionState.VIEWING
        assert session.text == session.display_text


# ---------------------------------------------------------------------------
# Save: success
# ---------------------------------------------------------------------------


class TestSaveSuccess:
    def test_commits_into_document(
        self,
        session: EditSession,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
    ) -> None:
        session.start_editing()
        session.edit('{"name": "Ann", "age": 31}')
        result = session.save()

        assert isinstance(result, Committed)
        assert result.document == {
            "customer": {"name": "Ann", "age": 31},
            "orders": [{"id": 1}, 7],
        }
        assert json.loads(store.text) == result.document
        assert store.text == result.text
        assert store.writes == 1
        assert notifier.successes == [SUCCESS_MESSAGE]
        assert notifier.failures == []

    def test_returns_to_viewing_and_closes(self, session: EditSession) -> None:
        session.start_editing()
        session.edit('{"name": "Ann"}')
        session.save()
        assert session.state is SessionState.VIEWING
        assert not session.is_open

    def test_written_text_is_pretty_printed(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        session.edit("{}")
        session.save()
        assert store.text == json.dumps(
            {"customer": {}, "orders": [{"id": 1}, 7]}, indent=2
        )

    def test_custom_indent_used_for_store(
        self, store: InMemoryDocumentStore, notifier: RecordingNotifier
    ) -> None:
        session = EditSession(store, notifier, config=EditorConfig(indent=0))
        session.select_path(["orders", 1])
        session.start_editing()
        session.edit("8")
        session.save()
        assert store.text == json.dumps(
            {"customer": {"name": "Ann", "age": 30}, "orders": [{"id": 1}, 8]},
            indent=0,
        )

    def test_root_replacement(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.select_path(None)
        session.start_editing()
        session.edit("[1, 2]")
        result = session.save()
        assert result.ok
        assert json.loads(store.text) == [1, 2]

    def test_reads_document_fresh_at_save(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        session.edit('{"name": "Ann", "age": 31}')
        # Another writer changes a sibling after the node was selected.
        store.text = json.dumps({"customer": {}, "orders": []})
        result = session.save()
        assert isinstance(result, Committed)
        assert result.document == {
            "customer": {"name": "Ann", "age": 31},
            "orders": [],
        }

    def test_logs_commit(
        self, session: EditSession, caplog: pytest.LogCaptureFixture
    ) -> None:
        session.start_editing()
        with caplog.at_level(logging.INFO, logger="json_node_edit.session"):
            session.save()
        assert 'updated node at $["customer"]' in caplog.text

    def test_object_save_replaces_hidden_container_members(
        self, notifier: RecordingNotifier
    ) -> None:
        store = InMemoryDocumentStore(
            json.dumps({"orders": [{"id": 1, "items": ["pen"], "meta": {"x": 1}}]})
        )
        session = EditSession(store, notifier)
        session.select_path(["orders", 0])
        assert session.text == json.dumps({"id": 1}, indent=2)
        session.start_editing()
        result = session.save()
        assert isinstance(result, Committed)
        # Container members are not part of the edit text, so they are gone.
        assert json.loads(store.text) == {"orders": [{"id": 1}]}


# ---------------------------------------------------------------------------
# Save: failures
# ---------------------------------------------------------------------------


class TestSaveParseFailure:
    def test_invalid_text(
        self,
        session: EditSession,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
    ) -> None:
        before = store.text
        session.start_editing()
        session.edit("{invalid")
        result = session.save()

        assert isinstance(result, ParseFailure)
        assert result.line == 1
        assert result.reason.startswith("Invalid JSON format")
        assert store.text == before
        assert store.writes == 0
        assert session.state is SessionState.EDITING
        assert session.text == "{invalid"
        assert session.is_open
        assert notifier.failures == [result.reason]
        assert notifier.successes == []

    def test_unquoted_string_scalar_is_a_parse_error(
        self, session: EditSession
    ) -> None:
        session.select_path(["customer", "name"])
        assert session.text == "Ann"
        session.start_editing()
        assert isinstance(session.save(), ParseFailure)

    def test_corrupt_stored_document(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        store.text = "{broken"
        result = session.save()
        assert isinstance(result, ParseFailure)
        assert result.reason.startswith("Stored document is not valid JSON")
        assert store.text == "{broken"

    @pytest.mark.parametrize(
        "edited", ['{"age": NaN}', '{"limit": Infinity}', "-Infinity"]
    )
    def test_non_standard_constants_rejected(
        self,
        session: EditSession,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
        edited: str,
    ) -> None:
        before = store.text
        session.start_editing()
        session.edit(edited)
        result = session.save()

        assert isinstance(result, ParseFailure)
        assert "Non-standard JSON constant" in result.reason
        assert store.text == before
        assert store.writes == 0
        assert session.state is SessionState.EDITING
        assert notifier.failures == [result.reason]

    def test_stored_document_with_nan(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        store.text = '{"customer": {"age": NaN}}'
        result = session.save()
        assert isinstance(result, ParseFailure)
        assert result.reason.startswith("Stored document is not valid JSON")
        assert store.writes == 0

    def test_retry_after_fix_succeeds(
        self, session: EditSession, store: InMemoryDocumentStore
    ) -> None:
        session.start_editing()
        session.edit("{invalid")
        assert not session.save().ok
        session.edit('{"fixed": true}')
        assert session.save().ok
        assert json.loads(store.text)["customer"] == {"fixed": True}

    def test_logs_warning(
        self, session: EditSession, caplog: pytest.LogCaptureFixture
    ) -> None:
        session.start_editing()
        session.edit("{invalid")
        with caplog.at_level(logging.WARNING, logger="json_node_edit.session"):
            session.save()
        assert "failed" in caplog.text


class TestSaveTraversalFailure:
    def test_stale_path(
        self,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
    ) -> None:
        session = EditSession(store, notifier)
        session.select_path(["orders", 0])
        session.start_editing()
        session.edit('{"id": 2}')
        # The document shrinks after the selection was captured.
        store.text = json.dumps({"customer": {}, "orders": []})

        result = session.save()

        assert isinstance(result, TraversalFailure)
        assert result.path == ("orders", 0)
        assert result.depth == 1
        assert store.writes == 0
        assert session.state is SessionState.EDITING
        assert session.text == '{"id": 2}'
        assert notifier.failures == [result.reason]

    def test_selection_path_missing(
        self, store: InMemoryDocumentStore, notifier: RecordingNotifier
    ) -> None:
        node = SelectedNode(rows=[NodeRow("a", 1, RowType.NUMBER)], path=["gone", "a"])
        session = EditSession(store, notifier, node=node)
        session.start_editing()
        result = session.save()
        assert isinstance(result, TraversalFailure)
        assert '$["gone"]["a"]' in result.reason

    def test_renamed_key_is_not_recreated(
        self,
        session: EditSession,
        store: InMemoryDocumentStore,
        notifier: RecordingNotifier,
    ) -> None:
        session.start_editing()
        session.edit('{"name": "Ann", "age": 31}')
        # Another writer renames the selected member.
        renamed = json.dumps({"client": {"name": "Ann", "age": 30}, "orders": []})
        store.text = renamed

        result = session.save()

        assert isinstance(result, TraversalFailure)
        assert result.path == ("customer",)
        assert result.depth == 0
        assert store.text == renamed
        assert store.writes == 0
        assert notifier.successes == []
