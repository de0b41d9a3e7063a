"""fieldrules: declarative, metadata-driven validation of Python objects.

Rules are declared next to the fields they check; a
:class:`ValidatorVerifier` walks an object's fields, applies the rules,
recurses into nested objects and returns a flat list of failures.
"""

from __future__ import annotations

from .config import VerifierConfig
from .context import ValidatorArgs
from .exceptions import (
    CycleDetectedError,
    DepthExceededError,
    FieldRulesError,
    InjectionError,
    MetadataError,
    RecursionLimitError,
    ResolutionError,
    ValidationFailed,
    ValidatorNotFoundError,
)
from .formatting import ErrorFormatter, display_value, render_template
from .injection import InvocationResult, ParamBinder, ValidatorInvoker
from .messages import MessageCatalog
from .metadata import (
    AnnotatedMetadataProvider,
    FieldDescriptor,
    FieldVisibility,
    MetadataProvider,
    Param,
    Validate,
)
from .registry import Validator, ValidatorRegistry
from .resolver import ValueResolver, accessor_name
from .result import ValidationError
from .rules import (
    Email,
    Equals,
    Length,
    NotBlank,
    NotEmpty,
    OneOf,
    Pattern,
    Range,
    Required,
    Valid,
)
from .skip import SkipEvaluator, SkipUnit, SkipUnitBuilder
from .validators import build_default_registry
from .verifier import ValidatorVerifier

__all__ = [
    # Engine
    "ValidatorVerifier",
    "VerifierConfig",
    "ValidatorArgs",
    # Metadata
    "Validate",
    "Param",
    "FieldDescriptor",
    "FieldVisibility",
    "MetadataProvider",
    "AnnotatedMetadataProvider",
    # Rule descriptors
    "Required",
    "NotBlank",
    "NotEmpty",
    "Length",
    "Range",
    "Pattern",
    "Email",
    "OneOf",
    "Equals",
    "Valid",
    # Validators / skip units
    "Validator",
    "ValidatorRegistry",
    "build_default_registry",
    "SkipUnit",
    "SkipUnitBuilder",
    "SkipEvaluator",
    # Components
    "ValueResolver",
    "accessor_name",
    "ParamBinder",
    "ValidatorInvoker",
    "InvocationResult",
    "ErrorFormatter",
    "MessageCatalog",
    "render_template",
    "display_value",
    # Results and errors
    "ValidationError",
    "FieldRulesError",
    "ResolutionError",
    "ValidatorNotFoundError",
    "InjectionError",
    "MetadataError",
    "RecursionLimitError",
    "DepthExceededError",
    "CycleDetectedError",
    "ValidationFailed",
]
