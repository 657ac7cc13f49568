"""Unit tests for prompting validators.

Covers declared type checks at construction time and value kind checks on
bound values at render time.
"""

from __future__ import annotations

import datetime as dt
from types import SimpleNamespace

import pytest

from dotprompt.prompting.errors import InvalidParameterTypeError, TypeMismatchError
from dotprompt.prompting.models import InputSchema
from dotprompt.prompting.validators import (
    VALID_DATA_TYPES,
    binding_key,
    is_optional,
    validate_bindings,
    validate_parameter_types,
)


class UInt16(int):
    dtype = SimpleNamespace(kind="u")


@pytest.mark.unit
def test_optional_marker_helpers() -> None:
    assert binding_key("style?") == "style"
    assert binding_key("style") == "style"
    assert is_optional("style?")
    assert not is_optional("style")


@pytest.mark.unit
def test_validate_parameter_types_accepts_vocabulary() -> None:
    schema = InputSchema(parameters={f"p_{t}": t for t in VALID_DATA_TYPES})
    validate_parameter_types(schema)  # should not raise


@pytest.mark.unit
def test_validate_parameter_types_rejects_unknown() -> None:
    schema = InputSchema(parameters={"ok": "string", "oops": "cat"})
    with pytest.raises(InvalidParameterTypeError, match="parameter oops: cat"):
        validate_parameter_types(schema, prompt_name="p")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("declared", "value"),
    [
        ("string", "Arthur Dent"),
        ("number", 42),
        ("number", -1),
        ("number", 4.2),
        ("bool", False),
        ("datetime", dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.timezone.utc)),
        ("object", "{SEP:true}"),
    ],
)
def test_validate_bindings_accepts_matching_kinds(declared: str, value) -> None:
    schema = InputSchema(parameters={"param": declared})
    validate_bindings(schema, {"param": value})  # should not raise


@pytest.mark.unit
@pytest.mark.parametrize(
    ("declared", "value"),
    [
        ("string", 1),
        ("number", "42"),
        ("number", True),
        ("number", UInt16(8)),
        ("number", None),
        ("bool", "nope"),
        ("bool", 1),
        ("datetime", "2024-02-01"),
        ("datetime", dt.date(2024, 2, 1)),
    ],
)
def test_validate_bindings_rejects_mismatches(declared: str, value) -> None:
    schema = InputSchema(parameters={"param": declared})
    with pytest.raises(TypeMismatchError) as ei:
        validate_bindings(schema, {"param": value})
    assert ei.value.key == "param"
    assert ei.value.expected_type == declared
    assert str(ei.value) == f"parameter param is not a {declared}"


@pytest.mark.unit
def test_optional_parameters_are_type_checked() -> None:
    schema = InputSchema(parameters={"age?": "number"})
    with pytest.raises(TypeMismatchError, match="parameter age is not a number"):
        validate_bindings(schema, {"age": "forty-two"})


@pytest.mark.unit
def test_first_violation_wins() -> None:
    schema = InputSchema(parameters={"a": "string", "b": "bool"})
    with pytest.raises(TypeMismatchError) as ei:
        validate_bindings(schema, {"a": 1, "b": "x"})
    assert ei.value.key == "a"
