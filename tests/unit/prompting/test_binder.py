"""Unit tests for parameter binding."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from dotprompt.prompting.binder import bind_parameters
from dotprompt.prompting.errors import MissingParameterError
from dotprompt.prompting.models import InputSchema


@dataclass
class Point:
    y: int
    x: int


@pytest.mark.unit
def test_required_parameter_without_value_or_default() -> None:
    schema = InputSchema(parameters={"topic": "string"})
    with pytest.raises(MissingParameterError) as ei:
        bind_parameters(schema, {})
    assert ei.value.key == "topic"
    assert str(ei.value) == "no value provided for parameter topic"


@pytest.mark.unit
def test_none_values_behave_like_empty_mapping() -> None:
    schema = InputSchema(parameters={"country": "string"}, default={"country": "Malta"})
    assert bind_parameters(schema, None) == {"country": "Malta"}
    assert bind_parameters(schema, {}) == {"country": "Malta"}


@pytest.mark.unit
def test_caller_value_wins_over_default() -> None:
    schema = InputSchema(parameters={"country": "string"}, default={"country": "Malta"})
    assert bind_parameters(schema, {"country": "Italy"}) == {"country": "Italy"}


@pytest.mark.unit
def test_optional_parameter_is_omitted() -> None:
    schema = InputSchema(parameters={"topic": "string", "style?": "string"})
    bindings = bind_parameters(schema, {"topic": "penguins"})
    assert bindings == {"topic": "penguins"}
    assert "style" not in bindings
    assert "style?" not in bindings


@pytest.mark.unit
def test_optional_parameter_uses_default_and_value() -> None:
    schema = InputSchema(parameters={"style?": "string"}, default={"style": "pirate"})
    assert bind_parameters(schema, {}) == {"style": "pirate"}
    assert bind_parameters(schema, {"style": "poet"}) == {"style": "poet"}


@pytest.mark.unit
def test_undeclared_values_are_ignored() -> None:
    schema = InputSchema(parameters={"country": "string"})
    bindings = bind_parameters(schema, {"country": "Antarctica", "unused": "value"})
    assert bindings == {"country": "Antarctica"}


@pytest.mark.unit
def test_non_object_values_pass_through_unchanged() -> None:
    schema = InputSchema(parameters={"age": "number"})
    assert bind_parameters(schema, {"age": "42"}) == {"age": "42"}


@pytest.mark.unit
def test_object_values_are_stringified() -> None:
    schema = InputSchema(parameters={"point": "object", "label?": "OBJECT"})
    bindings = bind_parameters(schema, {"point": Point(y=2, x=1), "label": "as-is"})
    assert bindings == {"point": "{x:1 y:2}", "label": "as-is"}


@pytest.mark.unit
def test_object_defaults_are_not_stringified() -> None:
    schema = InputSchema(parameters={"meta?": "object"}, default={"meta": {"a": 1}})
    assert bind_parameters(schema, {}) == {"meta": {"a": 1}}


@pytest.mark.unit
def test_missing_parameter_error_carries_prompt_name() -> None:
    schema = InputSchema(parameters={"name": "string"})
    with pytest.raises(MissingParameterError) as ei:
        bind_parameters(schema, {"not": "this"}, prompt_name="required-parameters")
    assert ei.value.prompt_name == "required-parameters"
