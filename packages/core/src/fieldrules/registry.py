"""
Leaf validator contract and the registry that creates validators.

Rules reference validators by key; the registry maps each key to a
factory.  A rule may also name a validator class (or any zero-argument
factory) directly, in which case the registry is bypassed.

New validators are added by subclassing :class:`Validator` and
registering via ``register()`` or ``register_factory()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from .exceptions import ValidatorNotFoundError

ValidatorFactory = Callable[[], "Validator"]


class Validator(ABC):
    """
    Strategy interface for one leaf check.

    Validators are instantiated once per rule invocation.  Parameters
    are injected after construction: attributes annotated with
    ``Annotated[..., Param("key")]`` receive ``context[key]``, and when
    ``wants_full_context`` is set the whole context dictionary is bound
    to ``self.context``.
    """

    #: Registry key.
    name: ClassVar[str] = ""
    #: Receive the full working context in ``self.context``.
    wants_full_context: ClassVar[bool] = False

    context: dict[str, Any] | None = None

    @abstractmethod
    def is_valid(self, value: Any, rule_value: Any) -> bool:
        """
        Check *value*.

        Args:
            value: The field's resolved value.
            rule_value: The rule's ``value`` configuration.

        Returns:
            True if the value passes.
        """
        ...


class ValidatorRegistry:
    """
    Registry of validator factories keyed by name.

    Usage::

        registry = ValidatorRegistry()
        registry.register(EmailFormat)

        validator = registry.create("email")
    """

    def __init__(self) -> None:
        self._factories: dict[str, ValidatorFactory] = {}

    # -- registration --------------------------------------------------------

    def register(self, validator_cls: type[Validator]) -> None:
        """Register a validator class under its ``name``."""
        if not validator_cls.name:
            raise ValueError(f"{validator_cls.__name__} has no registry name")
        self._factories[validator_cls.name] = validator_cls

    def register_all(self, *validator_classes: type[Validator]) -> None:
        """Register multiple validator classes at once."""
        for cls in validator_classes:
            self.register(cls)

    def register_factory(self, name: str, factory: ValidatorFactory) -> None:
        """Register an arbitrary zero-argument factory under *name*."""
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        """Remove a validator from the registry."""
        self._factories.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> ValidatorFactory | None:
        """Return the registered factory or ``None``."""
        return self._factories.get(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    @property
    def supported_validators(self) -> set[str]:
        return set(self._factories.keys())

    # -- creation ------------------------------------------------------------

    def create(self, ref: str | Callable[[], Any]) -> Any:
        """
        Build a validator from a rule's ``validator`` reference.

        Raises:
            ValidatorNotFoundError: If *ref* is a key that is not registered.
        """
        if isinstance(ref, str):
            factory = self.get(ref)
            if factory is None:
                raise ValidatorNotFoundError(ref, list(self._factories))
            return factory()
        return ref()
