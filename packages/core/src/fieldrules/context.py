"""
ValidatorArgs: the ordered context threaded through a validation pass.

The context is append-only: every ``merge`` returns a new instance, so a
nested validation or a single validator invocation can never leak keys
back into the caller's view.  Within one pass the verifier rebinds its
local reference after each param-export, which is what lets a field
parameterise the rules of the fields declared after it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

#: Key under which the entity being validated is exposed to validators.
OBJECT_KEY = "object"
#: Key under which the working context itself is exposed to validators.
VALIDATOR_ARGS_KEY = "validatorArgs"
#: Key under which the field's resolved value is exposed to templates.
PROP_VALUE_KEY = "propValue"


class ValidatorArgs(Mapping[str, Any]):
    """Immutable ordered ``str -> Any`` mapping.

    Usage::

        args = ValidatorArgs({"tenant": "acme"})
        args = args.merge(locale="pt_BR")
        list(args)  # ["tenant", "locale"]
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}

    @classmethod
    def of(cls, args: Mapping[str, Any] | None) -> ValidatorArgs:
        """Coerce *args* into a ``ValidatorArgs`` (no copy if it already is one)."""
        if isinstance(args, ValidatorArgs):
            return args
        return cls(args)

    # -- Mapping -------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ValidatorArgs({self._data!r})"

    # -- derivation ----------------------------------------------------------

    def merge(
        self, other: Mapping[str, Any] | None = None, **values: Any
    ) -> ValidatorArgs:
        """Return a new context with *other* and *values* laid over this one.

        Existing keys keep their position; new keys are appended.
        """
        merged = dict(self._data)
        if other:
            merged.update(other)
        merged.update(values)
        return ValidatorArgs(merged)

    def with_value(self, key: str, value: Any) -> ValidatorArgs:
        return self.merge({key: value})

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, mutable copy."""
        return dict(self._data)
