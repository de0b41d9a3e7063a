"""
Skip units and the evaluation of a rule's skip conditions.

The checks run in a fixed order and stop at the first hit: null, blank,
empty, then the delegated ``skip_if`` unit.  The cheap checks always run
before a skip unit is built.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sized
from typing import TYPE_CHECKING, Any, ClassVar

from .exceptions import InjectionError
from .injection import FULL_CONTEXT_ATTRIBUTE

if TYPE_CHECKING:
    from .injection import ParamBinder
    from .metadata import Validate

logger = logging.getLogger("fieldrules.skip")


class SkipUnit(ABC):
    """
    Predicate deciding whether a rule is bypassed.

    Skip units are built in two phases by :class:`SkipUnitBuilder`: the
    bound params are collected first and passed to the constructor as
    keyword arguments.  The default constructor stores them as
    attributes; dataclass skip units get theirs from ``@dataclass``.

    Usage::

        class UnlessDraft(SkipUnit):
            status: Annotated[str | None, Param("status")] = None

            def is_valid(self, value, context):
                return self.status == "draft"
    """

    wants_full_context: ClassVar[bool] = False

    def __init__(self, **params: Any) -> None:
        for name, value in params.items():
            setattr(self, name, value)

    @abstractmethod
    def is_valid(self, value: Any, context: Mapping[str, Any]) -> bool:
        """Return True to skip the rule for *value*."""
        ...


class SkipUnitBuilder:
    """Collects a skip unit's params, then constructs it."""

    def __init__(self, unit_type: type[SkipUnit]) -> None:
        self._unit_type = unit_type
        self._params: dict[str, Any] = {}

    def bind(self, name: str, value: Any) -> SkipUnitBuilder:
        self._params[name] = value
        return self

    def bind_all(self, pairs: list[tuple[str, Any]]) -> SkipUnitBuilder:
        for name, value in pairs:
            self.bind(name, value)
        return self

    def build(self) -> SkipUnit:
        params = dict(self._params)
        deferred: dict[str, Any] = {}
        if FULL_CONTEXT_ATTRIBUTE in params and not _accepts_keyword(
            self._unit_type, FULL_CONTEXT_ATTRIBUTE
        ):
            deferred[FULL_CONTEXT_ATTRIBUTE] = params.pop(FULL_CONTEXT_ATTRIBUTE)

        try:
            unit = self._unit_type(**params)
            for name, value in deferred.items():
                object.__setattr__(unit, name, value)
        except (AttributeError, TypeError) as exc:
            raise InjectionError(self._unit_type.__name__, str(exc)) from exc
        return unit


def _accepts_keyword(unit_type: type, name: str) -> bool:
    try:
        parameters = inspect.signature(unit_type).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(
        param.name == name or param.kind is inspect.Parameter.VAR_KEYWORD
        for param in parameters
    )


def is_empty_collection(value: Any) -> bool:
    return isinstance(value, Sized) and not isinstance(value, str) and len(value) == 0


class SkipEvaluator:
    """Decides whether a rule must be bypassed for a value."""

    def __init__(self, binder: ParamBinder) -> None:
        self._binder = binder

    def should_skip(
        self,
        rule: Validate,
        value: Any,
        context: Mapping[str, Any],
        entity: Any = None,
    ) -> bool:
        reason = self._skip_reason(rule, value, context, entity)
        if reason is not None:
            logger.debug("Skipping %s: %s", type(rule).__name__, reason)
            return True
        return False

    def build_unit(
        self, unit_type: type[SkipUnit], entity: Any, context: Mapping[str, Any]
    ) -> SkipUnit:
        bindings = self._binder.bindings(unit_type, entity, context)
        return SkipUnitBuilder(unit_type).bind_all(bindings).build()

    def _skip_reason(
        self,
        rule: Validate,
        value: Any,
        context: Mapping[str, Any],
        entity: Any,
    ) -> str | None:
        if value is None and rule.skip_if_null:
            return "value is null"
        if isinstance(value, str) and value == "" and rule.skip_if_blank:
            return "value is blank"
        if rule.skip_if_empty and is_empty_collection(value):
            return "value is empty"
        if rule.skip_if is not None:
            unit = self.build_unit(rule.skip_if, entity, context)
            if unit.is_valid(value, context):
                return f"{rule.skip_if.__name__} matched"
        return None
