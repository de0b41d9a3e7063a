"""
ValidatorVerifier: walks an entity's fields and applies their rules.

For each field, in declaration order:

1. a ``Param`` export merges the field's value into the context, visible
   to every rule evaluated after it;
2. each rule is checked against its skip conditions, then either
   recurses into the value (``is_class``) or runs its leaf validator.

Every failure is collected; one failing rule never stops the others.
Structural problems (missing accessor, unknown validator, recursion
limits) raise immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .config import VerifierConfig
from .context import ValidatorArgs
from .exceptions import CycleDetectedError, DepthExceededError, FieldRulesError, ValidationFailed
from .formatting import ErrorFormatter
from .injection import ParamBinder, ValidatorInvoker
from .messages import MessageCatalog
from .metadata import AnnotatedMetadataProvider, MetadataProvider
from .resolver import ValueResolver
from .skip import SkipEvaluator
from .validators import build_default_registry

if TYPE_CHECKING:
    from .metadata import FieldDescriptor, Validate
    from .registry import ValidatorRegistry

logger = logging.getLogger("fieldrules.verifier")


class _Pass:
    """Recursion bookkeeping for one top-level ``validate`` call."""

    __slots__ = ("active", "path")

    def __init__(self) -> None:
        self.path: list[str] = []
        self.active: set[int] = set()


class ValidatorVerifier:
    """
    Validates entities against the rules declared on their fields.

    Usage::

        verifier = ValidatorVerifier()
        errors = verifier.validate(user, {"tenant": "acme"})
        verifier.validate_error(user)  # raises ValidationFailed
    """

    def __init__(
        self,
        config: VerifierConfig | None = None,
        *,
        messages: MessageCatalog | Mapping[str, str] | None = None,
        registry: ValidatorRegistry | None = None,
        metadata: MetadataProvider | None = None,
    ) -> None:
        self.config = config or VerifierConfig()
        if isinstance(messages, MessageCatalog):
            self.messages = messages
        else:
            self.messages = MessageCatalog(messages)
        self.registry = registry if registry is not None else build_default_registry()
        self.metadata = metadata or AnnotatedMetadataProvider()

        self._resolver = ValueResolver(by_accessor=self.config.by_accessor)
        binder = ParamBinder(self.metadata)
        self._skip = SkipEvaluator(binder)
        self._invoker = ValidatorInvoker(self.registry, binder, self._resolver)
        self._formatter = ErrorFormatter(self.messages, self._resolver)

    # -- public API ----------------------------------------------------------

    def validate(self, entity: Any, args: Mapping[str, Any] | None = None) -> list[Any]:
        """Return every rule failure of *entity*, in evaluation order."""
        state = _Pass()
        state.active.add(id(entity))
        try:
            return self._validate(entity, ValidatorArgs.of(args), state)
        except FieldRulesError as exc:
            logger.error("Validation of %s aborted: %s", type(entity).__name__, exc)
            raise

    def validate_error(self, entity: Any, args: Mapping[str, Any] | None = None) -> None:
        """
        Validate *entity* and raise if anything failed.

        Raises:
            ValidationFailed: Carrying every error, in evaluation order.
        """
        errors = self.validate(entity, args)
        if errors:
            logger.info("%s failed validation with %d error(s)", type(entity).__name__, len(errors))
            raise ValidationFailed(errors)

    def is_valid(self, entity: Any, args: Mapping[str, Any] | None = None) -> bool:
        """True when *entity* has no rule failures."""
        return not self.validate(entity, args)

    # -- traversal -----------------------------------------------------------

    def _validate(self, entity: Any, args: ValidatorArgs, state: _Pass) -> list[Any]:
        owner = type(entity)
        errors: list[Any] = []

        for field in self.metadata.fields(owner):
            if field.export_key is not None:
                exported = self._resolver.resolve(field, owner, entity)
                args = args.with_value(field.export_key, exported)

            for rule in field.rules:
                value = self._resolver.resolve(field, owner, entity)
                if self._skip.should_skip(rule, value, args, entity):
                    continue

                if rule.is_class:
                    errors.extend(self._validate_nested(rule, field, owner, value, args, state))
                    continue

                result = self._invoker.invoke(rule, field, entity, args, value)
                if not result.passed:
                    errors.append(self._formatter.build_error(rule, field, owner, result.context))

        return errors

    def _validate_nested(
        self,
        rule: Validate,
        field: FieldDescriptor,
        owner: type,
        value: Any,
        args: ValidatorArgs,
        state: _Pass,
    ) -> list[Any]:
        if value is None:
            return [self._formatter.build_error(rule, field, owner, args)]

        state.path.append(field.name)
        try:
            max_depth = self.config.max_depth
            if max_depth is not None and len(state.path) > max_depth:
                raise DepthExceededError(max_depth, state.path)
            if self.config.detect_cycles and id(value) in state.active:
                raise CycleDetectedError(type(value).__name__, state.path)

            logger.debug("Descending into %s.%s", owner.__name__, field.name)
            state.active.add(id(value))
            try:
                return self._validate(value, args, state)
            finally:
                state.active.discard(id(value))
        finally:
            state.path.pop()
