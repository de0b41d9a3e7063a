"""MessageCatalog: maps error codes to message templates."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


class MessageCatalog:
    """
    Read-only lookup of message templates by error code.

    Falls back to the rule's own message when the code is unknown.

    Usage::

        catalog = MessageCatalog({"invalid_email": "#{propValue} is not an e-mail"})
        catalog.get("invalid_email", "#{field} is invalid")
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages: dict[str, str] = dict(messages or {})

    @classmethod
    def from_json(cls, path: str | Path) -> MessageCatalog:
        """Load a catalog from a UTF-8 JSON object of ``code -> template``."""
        data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Message catalog {path} must be a JSON object")
        return cls({str(code): str(text) for code, text in data.items()})

    def get(self, code: str, fallback: str) -> str:
        return self._messages.get(code, fallback)

    def merge(self, other: MessageCatalog | Mapping[str, str]) -> MessageCatalog:
        """Return a new catalog with *other*'s entries laid over this one."""
        entries = other._messages if isinstance(other, MessageCatalog) else other
        return MessageCatalog({**self._messages, **entries})

    def __contains__(self, code: object) -> bool:
        return code in self._messages

    def __len__(self) -> int:
        return len(self._messages)
