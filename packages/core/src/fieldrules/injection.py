"""
Parameter injection and leaf-validator invocation.

A validator declares what it needs from the validation context on its
own attributes::

    class MinAge(Validator):
        name = "min_age"
        minimum: Annotated[int, Param("min_age")] = 0

Keyed params receive ``context[key]`` (``None`` when absent); keyless
params receive the whole lookup dictionary, which also carries
``object`` (the entity) and ``validatorArgs`` (the working context).
The ``wants_full_context`` marker binds that same dictionary to
``context``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .context import OBJECT_KEY, PROP_VALUE_KEY, VALIDATOR_ARGS_KEY, ValidatorArgs
from .exceptions import InjectionError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .metadata import FieldDescriptor, MetadataProvider, Validate
    from .registry import ValidatorRegistry
    from .resolver import ValueResolver

logger = logging.getLogger("fieldrules.injection")

#: Attribute receiving the full context on units with ``wants_full_context``.
FULL_CONTEXT_ATTRIBUTE = "context"

_UNRESOLVED = object()


class ParamBinder:
    """Works out which context values a validator or skip unit receives."""

    def __init__(self, metadata: MetadataProvider) -> None:
        self._metadata = metadata

    def bindings(
        self,
        unit_type: type,
        entity: Any,
        context: Mapping[str, Any],
    ) -> list[tuple[str, Any]]:
        """Return ``(attribute, value)`` pairs for *unit_type*."""
        working = ValidatorArgs.of(context)
        lookup = working.merge({OBJECT_KEY: entity, VALIDATOR_ARGS_KEY: working})
        full = lookup.to_dict()

        pairs: list[tuple[str, Any]] = []
        for field in self._metadata.fields(unit_type):
            if field.param is None:
                continue
            if not field.param.key:
                pairs.append((field.name, full))
            else:
                pairs.append((field.name, lookup.get(field.param.key)))

        if getattr(unit_type, "wants_full_context", False):
            pairs.append((FULL_CONTEXT_ATTRIBUTE, full))
        return pairs

    def inject(self, unit: Any, entity: Any, context: Mapping[str, Any]) -> None:
        """Set the bound values directly on an already constructed *unit*."""
        for attribute, value in self.bindings(type(unit), entity, context):
            try:
                object.__setattr__(unit, attribute, value)
            except (AttributeError, TypeError) as exc:
                raise InjectionError(type(unit).__name__, str(exc)) from exc


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of one leaf-validator call."""

    passed: bool
    context: ValidatorArgs


class ValidatorInvoker:
    """Creates a rule's validator, injects its params and runs it."""

    def __init__(
        self,
        registry: ValidatorRegistry,
        binder: ParamBinder,
        resolver: ValueResolver,
    ) -> None:
        self._registry = registry
        self._binder = binder
        self._resolver = resolver

    def invoke(
        self,
        rule: Validate,
        field: FieldDescriptor,
        entity: Any,
        context: Mapping[str, Any],
        value: Any = _UNRESOLVED,
    ) -> InvocationResult:
        """
        Run *rule* against *field* of *entity*.

        Returns:
            The pass/fail flag and the context to format an error with:
            the incoming context plus ``object`` and ``propValue``.
        """
        assert rule.validator is not None
        validator = self._registry.create(rule.validator)
        working = ValidatorArgs.of(context)
        self._binder.inject(validator, entity, working)

        if value is _UNRESOLVED:
            value = self._resolver.resolve(field, type(entity), entity)

        passed = bool(validator.is_valid(value, rule.value))
        logger.debug(
            "%s.%s: %s %s",
            type(entity).__name__,
            field.name,
            type(validator).__name__,
            "passed" if passed else "failed",
        )
        return InvocationResult(
            passed=passed,
            context=working.merge({OBJECT_KEY: entity, PROP_VALUE_KEY: value}),
        )
