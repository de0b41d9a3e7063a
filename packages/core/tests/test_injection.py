from dataclasses import dataclass
from typing import Annotated, Any

import pytest

from fieldrules import (
    FieldDescriptor,
    InjectionError,
    NotBlank,
    Param,
    ParamBinder,
    Validate,
    ValidatorArgs,
    ValidatorInvoker,
    Validator,
    ValidatorVerifier,
    ValueResolver,
)

# --- Test Models ---


class Recorder(Validator):
    name = "recorder"
    wants_full_context = True

    everything: Annotated[dict[str, Any] | None, Param()] = None
    tenant: Annotated[str | None, Param("tenant")] = None
    missing: Annotated[Any, Param("nowhere")] = "unset"
    _limit: Annotated[int | None, Param("limit")] = None

    def is_valid(self, value, rule_value):
        return value == rule_value


@dataclass
class Recorded:
    value: Annotated[str, Validate(validator="recorder", value="ok")]


class EmptyKey(Validator):
    name = "empty_key"

    got: Annotated[Any, Param("")] = None

    def is_valid(self, value, rule_value):
        return True


class Sealed:
    __slots__ = ()

    key: Annotated[int, Param("key")]


# -- ParamBinder -------------------------------------------------------------


def test_bindings(metadata):
    entity = Recorded(value="ok")
    context = ValidatorArgs({"tenant": "acme", "limit": 3})

    pairs = dict(ParamBinder(metadata).bindings(Recorder, entity, context))

    assert pairs["tenant"] == "acme"
    assert pairs["missing"] is None
    assert pairs["_limit"] == 3
    assert pairs["everything"]["object"] is entity
    assert pairs["everything"]["validatorArgs"] == context
    assert pairs["context"] == pairs["everything"]


def test_empty_param_key_binds_whole_context(metadata):
    entity = object()

    pairs = dict(ParamBinder(metadata).bindings(EmptyKey, entity, {"tenant": "acme"}))

    assert pairs["got"]["tenant"] == "acme"
    assert pairs["got"]["object"] is entity


def test_inject_bypasses_visibility(metadata):
    recorder = Recorder()
    ParamBinder(metadata).inject(recorder, object(), {"limit": 7})
    assert recorder._limit == 7


def test_inject_failure(metadata):
    with pytest.raises(InjectionError) as exc_info:
        ParamBinder(metadata).inject(Sealed(), object(), {"key": 1})
    assert exc_info.value.unit == "Sealed"


# -- ValidatorInvoker --------------------------------------------------------


def test_invoke_returns_enriched_context(registry, metadata):
    registry.register(Recorder)
    invoker = ValidatorInvoker(registry, ParamBinder(metadata), ValueResolver())
    entity = Recorded(value="bad")
    field = metadata.fields(Recorded)[0]

    result = invoker.invoke(field.rules[0], field, entity, ValidatorArgs({"tenant": "acme"}))

    assert result.passed is False
    assert list(result.context) == ["tenant", "object", "propValue"]
    assert result.context["propValue"] == "bad"
    assert result.context["object"] is entity


def test_invoke_uses_given_value(registry, metadata):
    invoker = ValidatorInvoker(registry, ParamBinder(metadata), ValueResolver())
    field = FieldDescriptor.create("title", object, [NotBlank()])

    result = invoker.invoke(field.rules[0], field, object(), {}, "given")

    assert result.passed is True
    assert result.context["propValue"] == "given"


def test_fresh_validator_per_invocation(registry):
    created = []

    def factory():
        recorder = Recorder()
        created.append(recorder)
        return recorder

    registry.register_factory("recorder", factory)
    verifier = ValidatorVerifier(registry=registry)

    verifier.validate(Recorded(value="ok"), {"tenant": "a"})
    verifier.validate(Recorded(value="ok"), {"tenant": "b"})

    assert [p.tenant for p in created] == ["a", "b"]
    assert created[0].context["tenant"] == "a"
