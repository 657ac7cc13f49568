"""Exception hierarchy for prompt file processing.

All errors derive from :class:`PromptError` so callers can catch a single
type. Errors that wrap a lower-level failure keep it on ``cause`` and are
raised with ``from`` so the traceback chain is preserved.
"""

from __future__ import annotations


class PromptError(Exception):
    """Base error for prompt file construction, binding and rendering."""

    def __init__(
        self,
        message: str,
        *,
        prompt_name: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.prompt_name = prompt_name
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ParseError(PromptError):
    """Raised when prompt file content cannot be decoded."""

    def __init__(self, cause: BaseException, *, prompt_name: str | None = None):
        super().__init__(
            f"failed to parse prompt file: {cause}",
            prompt_name=prompt_name,
            cause=cause,
        )


class MissingUserTemplateError(PromptError):
    """Raised when a prompt file has no user prompt template."""

    def __init__(self, *, prompt_name: str | None = None) -> None:
        super().__init__(
            "no user prompt template was provided in the prompt file",
            prompt_name=prompt_name,
        )


class EmptyNameError(PromptError):
    """Raised when the prompt file name is empty after cleaning."""

    def __init__(self, raw_name: str = "") -> None:
        super().__init__("the prompt file name, once cleaned, is empty")
        self.raw_name = raw_name


class InvalidParameterTypeError(PromptError):
    """Raised when a parameter declares a type outside the supported set."""

    def __init__(
        self, key: str, declared_type: str, *, prompt_name: str | None = None
    ) -> None:
        super().__init__(
            f"invalid data type for parameter {key}: {declared_type}",
            prompt_name=prompt_name,
        )
        self.key = key
        self.declared_type = declared_type


class MissingParameterError(PromptError):
    """Raised when a required parameter has neither a value nor a default."""

    def __init__(self, key: str, *, prompt_name: str | None = None) -> None:
        super().__init__(
            f"no value provided for parameter {key}", prompt_name=prompt_name
        )
        self.key = key


class TypeMismatchError(PromptError):
    """Raised when a bound value does not match its declared type."""

    def __init__(
        self, key: str, expected_type: str, *, prompt_name: str | None = None
    ) -> None:
        super().__init__(
            f"parameter {key} is not a {expected_type}", prompt_name=prompt_name
        )
        self.key = key
        self.expected_type = expected_type


class RenderError(PromptError):
    """Raised when the template engine fails to render a prompt."""

    def __init__(self, cause: BaseException, *, prompt_name: str | None = None):
        super().__init__(
            f"failed to render prompt: {cause}", prompt_name=prompt_name, cause=cause
        )


class DuplicateNameError(PromptError):
    """Raised when two prompt files in one collection share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate prompt file name: {name}", prompt_name=name)
        self.name = name


class SerializationError(PromptError):
    """Raised when a prompt file cannot be encoded or written."""


__all__ = [
    "DuplicateNameError",
    "EmptyNameError",
    "InvalidParameterTypeError",
    "MissingParameterError",
    "MissingUserTemplateError",
    "ParseError",
    "PromptError",
    "RenderError",
    "SerializationError",
    "TypeMismatchError",
]
