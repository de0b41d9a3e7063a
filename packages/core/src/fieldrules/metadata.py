"""
Declarative rule metadata and its discovery.

Rules live next to the fields they check, attached with
:data:`typing.Annotated`::

    @dataclass
    class User:
        email: Annotated[str, Email(), Param("mail")]
        address: Annotated[Address | None, Valid()] = None

:class:`Validate` is the rule descriptor, :class:`Param` the
parameter-export descriptor.  A :class:`MetadataProvider` turns a type
into its ordered :class:`FieldDescriptor` list; the verifier never looks
at annotations itself.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import threading
import typing
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar, Protocol, runtime_checkable

from .exceptions import MetadataError
from .result import ValidationError

logger = logging.getLogger("fieldrules.metadata")


class FieldVisibility(str, Enum):
    """How a field is exposed by its owner."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class Param:
    """
    Parameter-export descriptor.

    On an entity field: merge the field's value into the validation
    context under ``key`` (default: the field name) before the rules of
    later fields run.

    On a validator or skip-unit field: receive ``context[key]``; with no
    key, receive the whole context dictionary.
    """

    key: str | None = None


@dataclass(frozen=True, kw_only=True)
class Validate:
    """
    Rule descriptor.

    Exactly one of ``validator`` and ``is_class`` must be set: a rule
    either runs a leaf validator or recurses into the field's value.

    Attributes:
        validator: Registry key, or a validator class / zero-arg factory.
        value: Rule configuration handed to ``is_valid(value, rule_value)``.
        code: Error code template.
        message: Message template (may be remapped by the catalog).
        errors: Error kind, called as ``errors(code, message, fields)``.
        skip_if_null: Bypass the rule when the value is ``None``.
        skip_if_blank: Bypass the rule when the value is ``""``.
        skip_if_empty: Bypass the rule when the value is an empty collection.
        skip_if: :class:`~fieldrules.skip.SkipUnit` subclass deciding bypass.
        is_class: Validate the field's value as a nested entity.
    """

    validator: str | Callable[..., Any] | None = None
    value: Any = None
    code: str = "invalid"
    message: str = "#{field} is invalid"
    errors: Callable[..., Any] = ValidationError
    skip_if_null: bool = False
    skip_if_blank: bool = False
    skip_if_empty: bool = False
    skip_if: type | None = None
    is_class: bool = False

    def __post_init__(self) -> None:
        if self.is_class and self.validator is not None:
            raise ValueError(
                f"{type(self).__name__}: 'is_class' and 'validator' are mutually exclusive"
            )
        if not self.is_class and self.validator is None:
            raise ValueError(
                f"{type(self).__name__}: either 'validator' or 'is_class' is required"
            )


def descriptor_fields(rule: Validate) -> tuple[str, ...]:
    """Names of the rule descriptor's own declared fields, in order."""
    return tuple(f.name for f in dataclasses.fields(rule))


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of an entity type, with the metadata attached to it."""

    name: str
    owner: type
    visibility: FieldVisibility = FieldVisibility.PUBLIC
    rules: tuple[Validate, ...] = ()
    param: Param | None = None

    @property
    def is_public(self) -> bool:
        return self.visibility is FieldVisibility.PUBLIC

    @property
    def export_key(self) -> str | None:
        """Context key this field's value is exported under, if any."""
        if self.param is None:
            return None
        return self.param.key or self.name

    @classmethod
    def create(
        cls,
        name: str,
        owner: type,
        metadata: typing.Iterable[Any] = (),
    ) -> FieldDescriptor:
        rules: list[Validate] = []
        param: Param | None = None
        for item in metadata:
            if isinstance(item, Validate):
                rules.append(item)
            elif isinstance(item, Param) and param is None:
                param = item
        visibility = (
            FieldVisibility.PRIVATE if name.startswith("_") else FieldVisibility.PUBLIC
        )
        return cls(
            name=name,
            owner=owner,
            visibility=visibility,
            rules=tuple(rules),
            param=param,
        )


@runtime_checkable
class MetadataProvider(Protocol):
    """Lookup of the ordered fields of a type and the metadata on them."""

    def fields(self, owner: type) -> tuple[FieldDescriptor, ...]:
        ...


class AnnotatedMetadataProvider:
    """
    Reads rules from ``Annotated`` type hints.

    Works for plain annotated classes, dataclasses and pydantic models.
    Fields are listed base classes first, in declaration order; a field
    redeclared by a subclass keeps its original position.  ``ClassVar``
    annotations are not fields.

    Results are cached per type.
    """

    def __init__(self) -> None:
        self._cache: weakref.WeakKeyDictionary[type, tuple[FieldDescriptor, ...]] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def fields(self, owner: type) -> tuple[FieldDescriptor, ...]:
        cached = self._cache.get(owner)
        if cached is not None:
            return cached
        collected = self._collect(owner)
        with self._lock:
            self._cache[owner] = collected
        return collected

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    # -- collection ----------------------------------------------------------

    def _collect(self, owner: type) -> tuple[FieldDescriptor, ...]:
        model_fields = getattr(owner, "model_fields", None)
        if isinstance(model_fields, dict):
            descriptors = tuple(
                FieldDescriptor.create(name, owner, getattr(info, "metadata", ()))
                for name, info in model_fields.items()
            )
        else:
            descriptors = self._collect_annotated(owner)
        logger.debug(
            "Collected %d field(s) of %s (%d with rules)",
            len(descriptors),
            owner.__name__,
            sum(1 for d in descriptors if d.rules),
        )
        return descriptors

    def _collect_annotated(self, owner: type) -> tuple[FieldDescriptor, ...]:
        try:
            hints = typing.get_type_hints(owner, include_extras=True)
        except (NameError, TypeError) as exc:
            raise MetadataError(owner.__name__, str(exc)) from exc

        names: list[str] = []
        for klass in reversed(owner.__mro__):
            if klass is object:
                continue
            for name in inspect.get_annotations(klass):
                if name not in names:
                    names.append(name)

        descriptors: list[FieldDescriptor] = []
        for name in names:
            hint = hints.get(name)
            if _is_class_var(hint):
                continue
            metadata = getattr(hint, "__metadata__", ()) if _is_annotated(hint) else ()
            descriptors.append(FieldDescriptor.create(name, owner, metadata))
        return tuple(descriptors)


def _is_annotated(hint: Any) -> bool:
    return typing.get_origin(hint) is Annotated


def _is_class_var(hint: Any) -> bool:
    if _is_annotated(hint):
        hint = typing.get_args(hint)[0]
    return hint is ClassVar or typing.get_origin(hint) is ClassVar
