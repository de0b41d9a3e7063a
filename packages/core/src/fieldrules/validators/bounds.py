"""Parsing of ``(min, max)`` rule values shared by length and range checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def parse_bounds(rule_value: Any) -> tuple[Any, Any]:
    """
    Parse a bounds configuration into ``(low, high)``.

    Supports:
    - ``(min, max)`` tuples or lists, ``None`` for an open bound
    - ``{"min": ..., "max": ...}`` mappings
    """
    if isinstance(rule_value, Mapping):
        return rule_value.get("min"), rule_value.get("max")
    if isinstance(rule_value, list | tuple) and len(rule_value) == 2:
        return rule_value[0], rule_value[1]
    raise ValueError(f"Expected (min, max) bounds, got {rule_value!r}")


def within(value: Any, low: Any, high: Any) -> bool:
    try:
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
    except TypeError:
        return False
    return True
