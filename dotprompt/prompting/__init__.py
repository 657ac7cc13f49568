"""Prompting public API.

Load declarative prompt files, bind and validate their parameters and render
system/user prompts with Jinja2.
"""

from .binder import bind_parameters
from .errors import (
    DuplicateNameError,
    EmptyNameError,
    InvalidParameterTypeError,
    MissingParameterError,
    MissingUserTemplateError,
    ParseError,
    PromptError,
    RenderError,
    SerializationError,
    TypeMismatchError,
)
from .loader import Loader, SourceLoader, StaticLoader
from .models import (
    FewShotPromptPair,
    InputSchema,
    OutputFormat,
    OutputSchema,
    PromptConfig,
    PromptFile,
    Prompts,
)
from .naming import clean_name
from .registry import PromptManager
from .renderer import JinjaRenderer, TemplateRenderer
from .validators import validate_bindings

__all__ = [
    "DuplicateNameError",
    "EmptyNameError",
    "FewShotPromptPair",
    "InputSchema",
    "InvalidParameterTypeError",
    "JinjaRenderer",
    "Loader",
    "MissingParameterError",
    "MissingUserTemplateError",
    "OutputFormat",
    "OutputSchema",
    "ParseError",
    "PromptConfig",
    "PromptError",
    "PromptFile",
    "PromptManager",
    "Prompts",
    "RenderError",
    "SerializationError",
    "SourceLoader",
    "StaticLoader",
    "TemplateRenderer",
    "TypeMismatchError",
    "bind_parameters",
    "clean_name",
    "validate_bindings",
]
