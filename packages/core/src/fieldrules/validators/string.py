"""String validators: length, regex, email."""

from __future__ import annotations

import re
from collections.abc import Sized
from functools import lru_cache
from typing import Any

from ..registry import Validator
from .bounds import parse_bounds, within

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class LengthValidator(Validator):
    """``len(value)`` within ``(min, max)``; either bound may be ``None``."""

    name = "length"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        low, high = parse_bounds(rule_value)
        return within(len(value), low, high)


class PatternValidator(Validator):
    """The whole string must match the rule's regular expression."""

    name = "regex"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        if not isinstance(value, str):
            return False
        pattern = rule_value if isinstance(rule_value, re.Pattern) else _compile(str(rule_value))
        return pattern.fullmatch(value) is not None


class EmailValidator(Validator):
    name = "email"

    def is_valid(self, value: Any, _rule_value: Any) -> bool:
        return isinstance(value, str) and EMAIL_RE.match(value) is not None
