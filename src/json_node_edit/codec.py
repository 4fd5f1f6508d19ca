"""Strict JSON text codec shared by the session, the cache and the API.

Python's ``json`` module reads and writes the non-standard constants
``NaN``, ``Infinity`` and ``-Infinity``.  They are not JSON, so ``parse_json``
rejects them with the same ``json.JSONDecodeError`` a syntax error raises and
``dump_json`` refuses to emit them.
"""

from __future__ import annotations

import json
from typing import Any

from json_node_edit.config import EditorConfig

__all__ = ["dump_json", "parse_json"]


class _NonStandardConstant(Exception):
    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


def _reject_constant(token: str) -> Any:
    raise _NonStandardConstant(token)


def parse_json(text: str) -> Any:
    """Parse ``text`` as standard JSON.

    Raises:
        json.JSONDecodeError: On a syntax error or a ``NaN`` / ``Infinity`` /
            ``-Infinity`` token.  For the constants the reported position is
            the first occurrence of the token in ``text``.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except _NonStandardConstant as exc:
        msg = f"Non-standard JSON constant {exc.token}"
        raise json.JSONDecodeError(msg, text, max(text.find(exc.token), 0)) from None


def dump_json(value: Any, config: EditorConfig | None = None) -> str:
    """Serialize ``value`` as pretty-printed JSON using ``config``.

    Raises:
        ValueError: If ``value`` holds a non-finite float.
    """
    cfg = config if config is not None else EditorConfig()
    return json.dumps(
        value, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii, allow_nan=False
    )
