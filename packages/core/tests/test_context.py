from __future__ import annotations

from fieldrules import ValidatorArgs


def test_merge_returns_new_context():
    base = ValidatorArgs({"a": 1})

    merged = base.merge({"b": 2})

    assert dict(base) == {"a": 1}
    assert dict(merged) == {"a": 1, "b": 2}


def test_merge_keeps_position_of_existing_keys():
    args = ValidatorArgs({"a": 1, "b": 2}).merge({"a": 3}, c=4)
    assert list(args.items()) == [("a", 3), ("b", 2), ("c", 4)]


def test_with_value():
    assert ValidatorArgs().with_value("k", None)["k"] is None


def test_of_coerces_without_copying():
    args = ValidatorArgs({"a": 1})
    assert ValidatorArgs.of(args) is args
    assert ValidatorArgs.of(None) == {}
    assert ValidatorArgs.of({"a": 1}) == args


def test_to_dict_is_a_copy():
    args = ValidatorArgs({"a": 1})
    copy = args.to_dict()
    copy["a"] = 2
    assert args["a"] == 1


def test_repr():
    assert repr(ValidatorArgs({"a": 1})) == "ValidatorArgs({'a': 1})"
