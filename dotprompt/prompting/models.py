"""Prompt file models.

Defines the Pydantic models for a prompt file: metadata, generation config,
parameter schema, prompt templates and few-shot examples. YAML keys use the
camelCase aliases (``maxTokens``, ``outputFormat``, ``fewShots``); unknown
keys are ignored.

A :class:`PromptFile` is built with :meth:`PromptFile.from_bytes` (or
:meth:`PromptFile.from_file`), which validates it completely before
returning. It is treated as read-only afterwards.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import yaml
from loguru import logger
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from dotprompt.config import settings

from .errors import EmptyNameError, MissingUserTemplateError, ParseError
from .generator import generate_prompt, system_template
from .naming import clean_name, fallback_name
from .renderer import TemplateRenderer
from .serializer import serialize_prompt_file, write_prompt_file
from .validators import validate_parameter_types


class OutputFormat(str, Enum):
    """Expected format of the model response."""

    TEXT = "text"
    JSON = "json"


def _parse_output_format(value: Any) -> Any:
    if isinstance(value, OutputFormat):
        return value
    if isinstance(value, str):
        try:
            return OutputFormat(value.lower())
        except ValueError:
            pass
    raise ValueError(f"invalid output format: {value}")


def _none_as_empty(value: Any) -> Any:
    return {} if value is None else value


def _scalar_as_text(value: Any) -> Any:
    """Return YAML number and boolean scalars as text; other values unchanged."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


OutputFormatField = Annotated[OutputFormat, BeforeValidator(_parse_output_format)]


class _PromptModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class InputSchema(_PromptModel):
    """Declared parameters and their defaults.

    Attributes:
        parameters: Parameter key to declared type. A trailing ``?`` on the
            key marks the parameter optional.
        default: Default values keyed by the parameter name without ``?``.
    """

    parameters: dict[str, str] = Field(default_factory=dict)
    default: dict[str, Any] = Field(default_factory=dict)

    @field_validator("parameters", mode="before")
    @classmethod
    def parameter_types_as_text(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return _none_as_empty(value)
        return {
            _scalar_as_text(key): _scalar_as_text(declared)
            for key, declared in value.items()
        }

    @field_validator("default", mode="before")
    @classmethod
    def none_as_empty_mapping(cls, value: Any) -> Any:
        return _none_as_empty(value)


class OutputSchema(_PromptModel):
    """Nested output settings (``config.output``)."""

    format: OutputFormatField = OutputFormat.TEXT

    @field_serializer("format")
    def serialize_format(self, value: OutputFormat) -> str:
        return value.value


class PromptConfig(_PromptModel):
    """Generation settings and the input schema of a prompt file."""

    temperature: float | None = None
    max_tokens: int | None = Field(default=None, alias="maxTokens")
    output_format: OutputFormatField = Field(
        default=OutputFormat.TEXT, alias="outputFormat"
    )
    input: InputSchema = Field(default_factory=InputSchema)
    output: OutputSchema | None = None

    @field_validator("input", mode="before")
    @classmethod
    def none_as_default_input(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_serializer("output_format")
    def serialize_output_format(self, value: OutputFormat) -> str:
        return value.value

    def reconcile_output_format(self, prompt_name: str = "") -> None:
        """Make ``output.format`` and ``outputFormat`` agree.

        A missing ``output`` section is created from the legacy
        ``outputFormat`` field. Otherwise the nested value wins and is copied
        over the legacy field.
        """
        if self.output is None:
            self.output = OutputSchema(format=self.output_format)
            return
        if (
            "output_format" in self.model_fields_set
            and self.output_format != self.output.format
            and settings.warn_on_format_conflict
        ):
            logger.warning(
                "Prompt file '{}' declares outputFormat={} but output.format={}; "
                "using {}",
                prompt_name,
                self.output_format.value,
                self.output.format.value,
                self.output.format.value,
            )
        self.output_format = self.output.format


class Prompts(_PromptModel):
    """System and user prompt templates."""

    system: str = ""
    user: str = ""

    @field_validator("system", "user", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Any:
        return _scalar_as_text(value)


class FewShotPromptPair(_PromptModel):
    """An example user prompt and the expected response, used verbatim."""

    user: str
    response: str

    @field_validator("user", "response", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Any:
        return _scalar_as_text(value)


class PromptFile(_PromptModel):
    """A complete prompt definition.

    Attributes:
        name: Canonical name, unique within a collection.
        model: Optional model hint, passed through unvalidated.
        config: Generation settings and parameter schema.
        prompts: System and user templates.
        few_shots: Example user/response pairs.
    """

    name: str = ""
    model: str = ""
    config: PromptConfig = Field(default_factory=PromptConfig)
    prompts: Prompts = Field(default_factory=Prompts)
    few_shots: list[FewShotPromptPair] = Field(default_factory=list, alias="fewShots")

    @field_validator("name", "model", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Any:
        return _scalar_as_text(value)

    @field_validator("config", "prompts", mode="before")
    @classmethod
    def none_as_default_section(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("few_shots", mode="before")
    @classmethod
    def none_as_no_examples(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_bytes(cls, name: str, data: bytes | str) -> PromptFile:
        """Decode and validate a prompt file.

        Args:
            name: Fallback name used when the document does not declare one.
            data: Raw YAML content.

        Returns:
            A fully validated PromptFile.

        Raises:
            ParseError: When the content is not a valid prompt file document.
            MissingUserTemplateError: When ``prompts.user`` is empty.
            EmptyNameError: When the name is empty once cleaned.
            InvalidParameterTypeError: When a parameter type is unsupported.
        """
        try:
            raw = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise ParseError(exc, prompt_name=name) from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            exc = TypeError(f"expected a mapping, got {type(raw).__name__}")
            raise ParseError(exc, prompt_name=name) from exc

        try:
            prompt_file = cls.model_validate(raw, by_alias=True, by_name=False)
        except ValidationError as exc:
            raise ParseError(exc, prompt_name=name) from exc

        if not prompt_file.prompts.user:
            raise MissingUserTemplateError(prompt_name=prompt_file.name or name)

        raw_name = prompt_file.name or name
        prompt_file.name = clean_name(raw_name)
        if not prompt_file.name:
            raise EmptyNameError(raw_name)

        validate_parameter_types(prompt_file.config.input, prompt_name=prompt_file.name)
        prompt_file.config.reconcile_output_format(prompt_file.name)

        logger.debug(
            "Loaded prompt file '{}' ({} parameters, {} few-shot examples)",
            prompt_file.name,
            len(prompt_file.config.input.parameters),
            len(prompt_file.few_shots),
        )
        return prompt_file

    @classmethod
    def from_file(cls, path: str | Path) -> PromptFile:
        """Read a prompt file from disk.

        The file name, lower-cased and without the prompt file extension, is the
        fallback name.
        ``OSError`` from reading the file propagates unchanged.
        """
        path = Path(path)
        return cls.from_bytes(fallback_name(path.name), path.read_bytes())

    @property
    def output_format(self) -> OutputFormat:
        """Authoritative output format after reconciliation."""
        return self.config.output_format

    def get_system_prompt(
        self,
        values: dict[str, Any] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> str:
        """Render the system prompt.

        When the output format is JSON and neither template mentions JSON, an
        instruction asking for a JSON response is appended.
        """
        return generate_prompt(system_template(self), self, values, renderer)

    def get_user_prompt(
        self,
        values: dict[str, Any] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> str:
        """Render the user prompt."""
        return generate_prompt(self.prompts.user, self, values, renderer)

    def serialize(self) -> bytes:
        """Return the canonical YAML encoding of this prompt file."""
        return serialize_prompt_file(self)

    def to_file(self, path: str | Path) -> None:
        """Write the canonical YAML encoding of this prompt file to ``path``."""
        write_prompt_file(self, path)


__all__ = [
    "FewShotPromptPair",
    "InputSchema",
    "OutputFormat",
    "OutputSchema",
    "PromptConfig",
    "PromptFile",
    "Prompts",
]
