"""Presence validators: not_null, not_blank, not_empty."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..registry import Validator


class NotNullValidator(Validator):
    name = "not_null"

    def is_valid(self, value: Any, _rule_value: Any) -> bool:
        return value is not None


class NotBlankValidator(Validator):
    """True for strings with at least one non-whitespace character."""

    name = "not_blank"

    def is_valid(self, value: Any, _rule_value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""


class NotEmptyValidator(Validator):
    """False for None, empty strings and empty collections."""

    name = "not_empty"

    def is_valid(self, value: Any, _rule_value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, Sized):
            return len(value) > 0
        return True
