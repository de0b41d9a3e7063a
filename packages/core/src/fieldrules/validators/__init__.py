"""
Built-in leaf validators.

Usage::

    from fieldrules.validators import build_default_registry

    registry = build_default_registry()
    registry.create("email").is_valid("a@b.io", None)  # True
"""

from __future__ import annotations

from ..registry import ValidatorRegistry
from .comparison import EqualsValidator, OneOfValidator, RangeValidator
from .presence import NotBlankValidator, NotEmptyValidator, NotNullValidator
from .string import EmailValidator, LengthValidator, PatternValidator


def build_default_registry() -> ValidatorRegistry:
    """
    Create a registry with all built-in validators.

    Returns a fresh instance on every call, so callers may register their
    own validators without affecting other verifiers.
    """
    registry = ValidatorRegistry()
    registry.register_all(
        # Presence
        NotNullValidator,
        NotBlankValidator,
        NotEmptyValidator,
        # String
        LengthValidator,
        PatternValidator,
        EmailValidator,
        # Comparison
        RangeValidator,
        OneOfValidator,
        EqualsValidator,
    )
    return registry


__all__ = [
    "build_default_registry",
    "EmailValidator",
    "EqualsValidator",
    "LengthValidator",
    "NotBlankValidator",
    "NotEmptyValidator",
    "NotNullValidator",
    "OneOfValidator",
    "PatternValidator",
    "RangeValidator",
]
