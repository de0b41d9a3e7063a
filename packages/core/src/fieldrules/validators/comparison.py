"""Comparison validators: range, one_of, equals."""

from __future__ import annotations

from typing import Any

from ..registry import Validator
from .bounds import parse_bounds, within


class RangeValidator(Validator):
    """Value within ``(min, max)``, inclusive; works for any ordered type."""

    name = "range"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        if value is None:
            return False
        low, high = parse_bounds(rule_value)
        return within(value, low, high)


class OneOfValidator(Validator):
    name = "one_of"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        try:
            return value in rule_value
        except TypeError:
            return False


class EqualsValidator(Validator):
    name = "equals"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        return bool(value == rule_value)
