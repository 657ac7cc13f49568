"""Canonical YAML serialization of prompt files.

The output decodes back into an equal prompt file. Unset optional values
(temperature, max tokens, model, system prompt, defaults, few-shots) are left
out instead of being written as empty placeholders.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from .errors import SerializationError

if TYPE_CHECKING:
    from .models import PromptFile

_INDENT = 2


class _PromptDumper(yaml.SafeDumper):
    """Safe dumper writing multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_PromptDumper.add_representer(str, _represent_str)


def _prune_empty(document: dict[str, Any]) -> dict[str, Any]:
    for key in ("name", "model", "fewShots"):
        if not document.get(key):
            document.pop(key, None)

    prompts = document.get("prompts", {})
    if not prompts.get("system"):
        prompts.pop("system", None)

    schema = document.get("config", {}).get("input", {})
    if not schema.get("default"):
        schema.pop("default", None)
    return document


def to_document(prompt_file: PromptFile) -> dict[str, Any]:
    """Return the plain mapping written by :func:`serialize_prompt_file`."""
    document = prompt_file.model_dump(by_alias=True, exclude_none=True)
    return _prune_empty(document)


def serialize_prompt_file(prompt_file: PromptFile) -> bytes:
    """Encode a prompt file as YAML.

    Raises:
        SerializationError: If the document holds values YAML cannot encode.
    """
    try:
        text = yaml.dump(
            to_document(prompt_file),
            Dumper=_PromptDumper,
            indent=_INDENT,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(
            f"failed to marshal prompt file: {exc}",
            prompt_name=prompt_file.name,
            cause=exc,
        ) from exc
    return text.encode("utf-8")


def write_prompt_file(prompt_file: PromptFile, path: str | Path) -> None:
    """Serialize a prompt file and write it to ``path``.

    Raises:
        SerializationError: If encoding or writing fails.
    """
    content = serialize_prompt_file(prompt_file)
    try:
        Path(path).write_bytes(content)
    except OSError as exc:
        raise SerializationError(
            f"failed to write prompt file: {exc}",
            prompt_name=prompt_file.name,
            cause=exc,
        ) from exc


__all__ = ["serialize_prompt_file", "to_document", "write_prompt_file"]
