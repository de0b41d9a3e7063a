"""
Field-rules exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``FieldRulesError`` and provide
``to_dict()`` for API-friendly error responses.

Rule failures are *not* exceptions: they are collected as
:class:`~fieldrules.result.ValidationError` records.  The classes here
describe structural problems (bad metadata, missing accessors, unknown
validators) and the aggregate :class:`ValidationFailed`.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .result import ValidationError


class FieldRulesError(Exception):
    """Base exception for all field-rules errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ResolutionError(FieldRulesError):
    """
    A field's value cannot be obtained.

    Raised in accessor mode when the owner type has no accessor for a
    non-public field.  Suggests similarly named callables.

    Example error message::

        Cannot resolve field '_mail' on 'User': no accessor 'get_mail'.
        Did you mean: get_email?
    """

    def __init__(
        self,
        field: str,
        owner: str,
        accessor: str | None = None,
        available: Sequence[str] = (),
        reason: str | None = None,
    ) -> None:
        self.field = field
        self.owner = owner
        self.accessor = accessor
        self.suggestions = (
            get_close_matches(accessor, list(available), n=3, cutoff=0.6)
            if accessor
            else []
        )

        message = f"Cannot resolve field '{field}' on '{owner}'"
        if reason:
            message += f": {reason}"
        elif accessor:
            message += f": no accessor '{accessor}'"
        message += "."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESOLUTION_ERROR",
            "field": self.field,
            "owner": self.owner,
            "accessor": self.accessor,
            "suggestions": self.suggestions,
        }


class ValidatorNotFoundError(FieldRulesError):
    """
    Unknown validator key referenced by a rule.

    Provides fuzzy-matched suggestions for likely intended keys.
    """

    def __init__(self, name: str, valid_names: Sequence[str]) -> None:
        self.name = name
        self.valid_names = list(valid_names)
        self.suggestions = get_close_matches(name, self.valid_names, n=3, cutoff=0.6)

        message = f"Unknown validator: '{name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if self.valid_names:
            message += f" Registered validators: {', '.join(sorted(self.valid_names)[:10])}"
            if len(self.valid_names) > 10:
                message += ", ..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATOR_NOT_FOUND",
            "validator": self.name,
            "suggestions": self.suggestions,
            "valid_validators": sorted(self.valid_names),
        }


class InjectionError(FieldRulesError):
    """A validator or skip unit could not receive its bound parameters."""

    def __init__(self, unit: str, reason: str) -> None:
        self.unit = unit
        self.reason = reason
        super().__init__(f"Cannot inject parameters into '{unit}': {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INJECTION_ERROR",
            "unit": self.unit,
            "reason": self.reason,
        }


class RecursionLimitError(FieldRulesError):
    """Nested validation went deeper than the engine allows."""

    def __init__(self, message: str, path: Sequence[str]) -> None:
        self.path = list(path)
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RECURSION_LIMIT",
            "message": str(self),
            "path": self.path,
        }


class DepthExceededError(RecursionLimitError):
    """Nesting depth of ``is_class`` rules exceeded ``max_depth``."""

    def __init__(self, max_depth: int, path: Sequence[str]) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Nested validation exceeded max_depth={max_depth} "
            f"at '{'.'.join(path)}'",
            path,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "DEPTH_EXCEEDED",
            "max_depth": self.max_depth,
            "path": self.path,
        }


class CycleDetectedError(RecursionLimitError):
    """A nested entity refers back to an object already being validated."""

    def __init__(self, owner: str, path: Sequence[str]) -> None:
        self.owner = owner
        super().__init__(
            f"Cycle detected: '{owner}' is already being validated "
            f"(path '{'.'.join(path)}')",
            path,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CYCLE_DETECTED",
            "owner": self.owner,
            "path": self.path,
        }


class ValidationFailed(FieldRulesError):
    """
    Raised by ``validate_error`` when at least one rule failed.

    Carries the full, ordered error sequence.
    """

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        summary = "; ".join(e.message for e in self.errors[:3])
        if count > 3:
            summary += "; ..."
        super().__init__(f"Validation failed with {count} {noun}: {summary}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": [e.to_dict() for e in self.errors],
        }


class MetadataError(FieldRulesError):
    """Rule metadata of a type cannot be read (e.g. unresolvable annotations)."""

    def __init__(self, owner: str, reason: str) -> None:
        self.owner = owner
        self.reason = reason
        super().__init__(f"Cannot read validation metadata of '{owner}': {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "METADATA_ERROR",
            "owner": self.owner,
            "reason": self.reason,
        }
