"""pytest plugin for json-node-edit.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from json_node_edit import (
    EditorConfig,
    EditSession,
    InMemoryDocumentStore,
    RecordingNotifier,
)
from json_node_edit.codec import dump_json
from json_node_edit.paths.segments import PathSegment


@pytest.fixture
def node_edit_session() -> Any:
    """Fixture that returns a factory for in-memory edit sessions.

    The fixture is function-scoped: every call of the factory builds a fresh
    ``InMemoryDocumentStore`` and ``RecordingNotifier``, reachable afterwards
    as ``session.store`` and ``session.notifier``.

    Usage in tests::

        def test_bump_age(node_edit_session):
            session = node_edit_session({"customer": {"age": 30}}, ["customer"])
            session.start_editing()
            session.edit('{"age": 31}')
            assert session.save().ok
            assert json.loads(session.store.text) == {"customer": {"age": 31}}

    Returns:
        A callable ``_make(document, path=None, config=None) -> EditSession``
        with the node at ``path`` already selected.
    """

    def _make(
        document: Any,
        path: Sequence[PathSegment] | None = None,
        config: EditorConfig | None = None,
    ) -> EditSession:
        cfg = config if config is not None else EditorConfig()
        store = InMemoryDocumentStore(dump_json(document, cfg))
        session = EditSession(store, RecordingNotifier(), config=cfg)
        session.select_path(path)
        return session

    return _make
