"""Unit tests for canonical prompt file serialization."""

from __future__ import annotations

import datetime as dt

import pytest
import yaml

from dotprompt.prompting.errors import SerializationError
from dotprompt.prompting.models import PromptFile


@pytest.mark.unit
def test_serialize_omits_unset_fields() -> None:
    prompt_file = PromptFile(
        name="serialize-test",
        model="gpt-4o",
        config={
            "outputFormat": "json",
            "input": {"parameters": {"param1": "number"}},
        },
        prompts={"system": "system", "user": "user"},
    )

    expected = (
        b"name: serialize-test\n"
        b"model: gpt-4o\n"
        b"config:\n"
        b"  outputFormat: json\n"
        b"  input:\n"
        b"    parameters:\n"
        b"      param1: number\n"
        b"prompts:\n"
        b"  system: system\n"
        b"  user: user\n"
    )
    assert prompt_file.serialize() == expected


@pytest.mark.unit
def test_serialize_includes_reconciled_output(load_prompt) -> None:
    document = yaml.safe_load(load_prompt("with-name-json.prompt").serialize())

    assert document["config"]["outputFormat"] == "json"
    assert document["config"]["output"] == {"format": "json"}
    assert "model" not in document
    assert "system" not in document["prompts"]
    assert "fewShots" not in document
    assert "temperature" not in document["config"]
    assert "maxTokens" not in document["config"]
    assert "default" not in document["config"]["input"]


@pytest.mark.unit
def test_multiline_templates_use_literal_blocks(load_prompt) -> None:
    text = load_prompt("basic.prompt").serialize().decode("utf-8")
    assert "  user: |\n    I am looking at going on holiday to {{ country }}" in text


@pytest.mark.unit
@pytest.mark.parametrize(
    "file_name",
    [
        "basic.prompt",
        "basic-fsp.prompt",
        "basic-sp-template.prompt",
        "json-missing-messages.prompt",
        "multiline-name.prompt",
        "param-types.prompt",
        "with-name-json.prompt",
    ],
)
def test_round_trip(load_prompt, file_name: str) -> None:
    original = load_prompt(file_name)
    restored = PromptFile.from_bytes(original.name, original.serialize())
    assert restored.model_dump() == original.model_dump()


@pytest.mark.unit
def test_round_trip_keeps_typed_defaults() -> None:
    data = (
        b"config:\n"
        b"  temperature: 0.25\n"
        b"  input:\n"
        b"    parameters:\n"
        b"      when?: datetime\n"
        b"      count?: number\n"
        b"      strict?: bool\n"
        b"    default:\n"
        b"      when: 2024-01-02T03:04:05Z\n"
        b"      count: 3\n"
        b"      strict: false\n"
        b"prompts:\n"
        b"  user: 'yes'\n"
    )
    original = PromptFile.from_bytes("typed", data)
    assert isinstance(original.config.input.default["when"], dt.datetime)

    restored = PromptFile.from_bytes("other-name", original.serialize())
    assert restored.model_dump() == original.model_dump()
    assert restored.prompts.user == "yes"


@pytest.mark.unit
def test_to_file_writes_serialization(tmp_path, load_prompt) -> None:
    prompt_file = load_prompt("basic-fsp.prompt")
    path = tmp_path / "out.prompt"

    prompt_file.to_file(path)

    assert path.read_bytes() == prompt_file.serialize()
    assert PromptFile.from_file(path).model_dump() == prompt_file.model_dump()


@pytest.mark.unit
def test_unencodable_default_raises() -> None:
    prompt_file = PromptFile(
        name="bad",
        config={"input": {"parameters": {"x?": "object"}, "default": {"x": object()}}},
        prompts={"user": "x"},
    )
    with pytest.raises(SerializationError, match="failed to marshal prompt file"):
        prompt_file.serialize()


@pytest.mark.unit
def test_to_file_reports_write_errors(tmp_path, load_prompt) -> None:
    with pytest.raises(SerializationError, match="failed to write prompt file"):
        load_prompt("basic.prompt").to_file(tmp_path / "missing" / "out.prompt")
