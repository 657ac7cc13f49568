"""Prompt generation: bind, validate, then render."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .binder import bind_parameters
from .errors import RenderError
from .renderer import JinjaRenderer, TemplateRenderer
from .validators import validate_bindings

if TYPE_CHECKING:
    from .models import PromptFile

JSON_INSTRUCTION = "Please provide the response in JSON"


def system_template(prompt_file: PromptFile) -> str:
    """Return the raw system template, with the JSON instruction if needed.

    The instruction is appended only when the output format is JSON and
    neither the raw system nor the raw user template mentions "json".
    """
    template = prompt_file.prompts.system
    if prompt_file.config.output_format != "json":
        return template
    if "json" in template.lower() or "json" in prompt_file.prompts.user.lower():
        return template
    if not template:
        return JSON_INSTRUCTION
    return f"{template} {JSON_INSTRUCTION}"


def generate_prompt(
    template: str,
    prompt_file: PromptFile,
    values: Mapping[str, Any] | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``template`` against the prompt file's parameter schema.

    Args:
        template: Raw template text.
        prompt_file: Prompt file owning the schema.
        values: Caller-supplied parameter values.
        renderer: Template engine; a new :class:`JinjaRenderer` when omitted.

    Returns:
        Rendered prompt text.

    Raises:
        MissingParameterError: A required parameter could not be resolved.
        TypeMismatchError: A bound value does not match its declared type.
        RenderError: The template engine failed.
    """
    schema = prompt_file.config.input
    bindings = bind_parameters(schema, values, prompt_name=prompt_file.name)
    validate_bindings(schema, bindings, prompt_name=prompt_file.name)

    renderer = renderer or JinjaRenderer()
    try:
        return renderer.render(template, bindings)
    except Exception as exc:  # noqa: BLE001 - any engine failure becomes RenderError
        raise RenderError(exc, prompt_name=prompt_file.name) from exc


__all__ = ["JSON_INSTRUCTION", "generate_prompt", "system_template"]
