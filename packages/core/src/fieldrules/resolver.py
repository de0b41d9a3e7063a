"""
ValueResolver: read a field's current value from its owner.

Three strategies, chosen per field:

- public field (name without a leading underscore): read it directly;
- accessor mode (the default): call the zero-argument accessor named by
  :func:`accessor_name`, e.g. ``_first_name`` -> ``get_first_name()``;
- direct mode: read the non-public attribute as-is.

The same strategy applies to entity fields and to a rule descriptor's
own fields.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import ResolutionError

if TYPE_CHECKING:
    from .metadata import FieldDescriptor

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_MISSING = object()


def accessor_name(field_name: str) -> str:
    """Accessor method name for *field_name*.

    Leading underscores are dropped and camelCase becomes snake_case::

        accessor_name("_email")     -> "get_email"
        accessor_name("firstName")  -> "get_first_name"
        accessor_name("__HTTPCode") -> "get_http_code"
    """
    bare = field_name.lstrip("_")
    snake = _CAMEL_BOUNDARY_RE.sub("_", bare).lower()
    return f"get_{snake}"


class ValueResolver:
    """Reads field values honouring visibility."""

    def __init__(self, by_accessor: bool = True) -> None:
        self.by_accessor = by_accessor

    def resolve(self, field: FieldDescriptor, owner_type: type, instance: Any) -> Any:
        if field.is_public:
            return self._read(field.name, instance)

        if self.by_accessor:
            return self._call_accessor(field.name, owner_type, instance)

        return self._read(field.name, instance)

    # -- strategies ----------------------------------------------------------

    @staticmethod
    def _read(name: str, instance: Any) -> Any:
        if isinstance(instance, Mapping):
            return instance.get(name)
        value = getattr(instance, name, _MISSING)
        if value is _MISSING:
            # Declared but never assigned: treat as unset, like a null property.
            return None
        return value

    @staticmethod
    def _call_accessor(name: str, owner_type: type, instance: Any) -> Any:
        method_name = accessor_name(name)
        method = getattr(instance, method_name, _MISSING)
        if method is _MISSING:
            available = [
                attr
                for attr in dir(owner_type)
                if not attr.startswith("__") and callable(getattr(owner_type, attr, None))
            ]
            raise ResolutionError(
                name, owner_type.__name__, accessor=method_name, available=available
            )
        if not callable(method):
            raise ResolutionError(
                name,
                owner_type.__name__,
                accessor=method_name,
                reason=f"'{method_name}' is not callable",
            )
        return method()
