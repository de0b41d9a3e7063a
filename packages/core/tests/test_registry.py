from __future__ import annotations

import re
from typing import Any

import pytest

from fieldrules import Validator, ValidatorNotFoundError, ValidatorRegistry
from fieldrules.validators import (
    EmailValidator,
    EqualsValidator,
    LengthValidator,
    NotBlankValidator,
    NotEmptyValidator,
    NotNullValidator,
    OneOfValidator,
    PatternValidator,
    RangeValidator,
)
from fieldrules.validators.bounds import parse_bounds

# --- Test Models ---


class AlwaysTrue(Validator):
    name = "always"

    def is_valid(self, value: Any, rule_value: Any) -> bool:
        return True


class Nameless(Validator):
    def is_valid(self, value: Any, rule_value: Any) -> bool:
        return True


# -- registry ----------------------------------------------------------------


def test_default_registry_contents(registry):
    assert registry.supported_validators == {
        "not_null",
        "not_blank",
        "not_empty",
        "length",
        "regex",
        "email",
        "range",
        "one_of",
        "equals",
    }


def test_default_registries_are_independent(registry):
    registry.register(AlwaysTrue)
    from fieldrules import build_default_registry

    assert not build_default_registry().has("always")


def test_create_by_key(registry):
    assert isinstance(registry.create("email"), EmailValidator)


def test_create_by_class_bypasses_registry():
    assert isinstance(ValidatorRegistry().create(AlwaysTrue), AlwaysTrue)


def test_register_factory_and_unregister():
    registry = ValidatorRegistry()
    shared = AlwaysTrue()
    registry.register_factory("shared", lambda: shared)

    assert registry.create("shared") is shared
    registry.unregister("shared")
    assert registry.get("shared") is None


def test_register_requires_name():
    with pytest.raises(ValueError):
        ValidatorRegistry().register(Nameless)


def test_unknown_key_suggests(registry):
    with pytest.raises(ValidatorNotFoundError) as exc_info:
        registry.create("lenght")
    err = exc_info.value
    assert "length" in err.suggestions
    assert err.to_dict()["error"] == "VALIDATOR_NOT_FOUND"


# -- built-in validators -----------------------------------------------------


@pytest.mark.parametrize(
    ("validator", "value", "rule_value", "expected"),
    [
        (NotNullValidator(), 0, None, True),
        (NotNullValidator(), None, None, False),
        (NotBlankValidator(), "x", None, True),
        (NotBlankValidator(), "   ", None, False),
        (NotBlankValidator(), None, None, False),
        (NotEmptyValidator(), [0], None, True),
        (NotEmptyValidator(), {}, None, False),
        (NotEmptyValidator(), "", None, False),
        (NotEmptyValidator(), 0, None, True),
        (LengthValidator(), "abc", (1, 3), True),
        (LengthValidator(), "abcd", (1, 3), False),
        (LengthValidator(), [1, 2], {"min": 3}, False),
        (LengthValidator(), "abc", (None, None), True),
        (LengthValidator(), 123, (1, 3), False),
        (PatternValidator(), "12345", r"\d{5}", True),
        (PatternValidator(), "123456", r"\d{5}", False),
        (PatternValidator(), "ab", re.compile("a."), True),
        (PatternValidator(), 12345, r"\d{5}", False),
        (EmailValidator(), "ana@example.org", None, True),
        (EmailValidator(), "not-an-email", None, False),
        (EmailValidator(), "a b@example.org", None, False),
        (RangeValidator(), 5, (1, 10), True),
        (RangeValidator(), 10, (1, 10), True),
        (RangeValidator(), 11, (1, 10), False),
        (RangeValidator(), "b", ("a", "c"), True),
        (RangeValidator(), "x", (1, 10), False),
        (RangeValidator(), None, (1, 10), False),
        (OneOfValidator(), "red", ["red", "blue"], True),
        (OneOfValidator(), "green", ("red", "blue"), False),
        (OneOfValidator(), "red", None, False),
        (EqualsValidator(), 1, 1, True),
        (EqualsValidator(), 1, "1", False),
    ],
)
def test_builtin_validators(validator, value, rule_value, expected):
    assert validator.is_valid(value, rule_value) is expected


def test_malformed_bounds():
    with pytest.raises(ValueError):
        parse_bounds(5)
