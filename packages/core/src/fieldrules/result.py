"""ValidationError: one failed rule, recorded as data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def default_fields_factory() -> dict[str, Any]:
    """Factory for the mutable ``fields`` default of :class:`ValidationError`."""
    return {}


@dataclass(frozen=True)
class ValidationError:
    """The outcome of a single failed rule.

    ``fields`` holds every value used while resolving ``code`` and
    ``message``: the rule descriptor's own fields, ``field``, ``class``
    and the validation context.  Rules may name a subclass as their error
    kind; it is constructed as ``kind(code, message, fields)``.

    Usage::

        error = ValidationError("invalid_email", "email is invalid", {"field": "email"})
        error.field  # "email"
    """

    code: str
    message: str
    fields: dict[str, Any] = field(default_factory=default_fields_factory, compare=False)

    @property
    def field(self) -> str | None:
        """Name of the field whose rule failed."""
        return self.fields.get("field")

    @property
    def owner(self) -> str | None:
        """Short name of the type that declared the field."""
        return self.fields.get("class")

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "field": self.field,
            "class": self.owner,
        }

    def __str__(self) -> str:
        return self.message
