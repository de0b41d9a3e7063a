"""
Ready-made rule descriptors for the built-in validators.

Each is a :class:`~fieldrules.metadata.Validate` with its validator,
code and message preset.  Extra fields (``min``, ``max``, ...) are
available to message templates as ``#{min}``, ``#{max}``::

    name: Annotated[str, Length(min=2, max=40)]
    # -> "name must have between 2 and 40 characters"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .metadata import Validate


@dataclass(frozen=True, kw_only=True)
class Required(Validate):
    validator: str | Callable[..., Any] | None = "not_null"
    code: str = "required"
    message: str = "#{field} is required"


@dataclass(frozen=True, kw_only=True)
class NotBlank(Validate):
    validator: str | Callable[..., Any] | None = "not_blank"
    code: str = "blank"
    message: str = "#{field} must not be blank"


@dataclass(frozen=True, kw_only=True)
class NotEmpty(Validate):
    validator: str | Callable[..., Any] | None = "not_empty"
    code: str = "empty"
    message: str = "#{field} must not be empty"


@dataclass(frozen=True, kw_only=True)
class _Bounded(Validate):
    """Rule whose ``value`` is derived from ``min``/``max``."""

    min: Any = None
    max: Any = None

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", (self.min, self.max))
        super().__post_init__()


@dataclass(frozen=True, kw_only=True)
class Length(_Bounded):
    validator: str | Callable[..., Any] | None = "length"
    code: str = "invalid_length"
    message: str = "#{field} must have between #{min} and #{max} characters"


@dataclass(frozen=True, kw_only=True)
class Range(_Bounded):
    validator: str | Callable[..., Any] | None = "range"
    code: str = "out_of_range"
    message: str = "#{field} must be between #{min} and #{max}"


@dataclass(frozen=True, kw_only=True)
class Pattern(Validate):
    validator: str | Callable[..., Any] | None = "regex"
    code: str = "invalid_format"
    message: str = "#{field} has an invalid format"


@dataclass(frozen=True, kw_only=True)
class Email(Validate):
    validator: str | Callable[..., Any] | None = "email"
    code: str = "invalid_email"
    message: str = "#{field} is not a valid e-mail address"


@dataclass(frozen=True, kw_only=True)
class OneOf(Validate):
    validator: str | Callable[..., Any] | None = "one_of"
    code: str = "not_allowed"
    message: str = "#{field} must be one of the allowed values"


@dataclass(frozen=True, kw_only=True)
class Equals(Validate):
    validator: str | Callable[..., Any] | None = "equals"
    code: str = "not_equal"
    message: str = "#{field} must equal #{value}"


@dataclass(frozen=True, kw_only=True)
class Valid(Validate):
    """Validate the field's value as a nested entity."""

    is_class: bool = True
    code: str = "required"
    message: str = "#{field} is required"
