"""dotprompt: declarative prompt files rendered with validated parameters."""

from .prompting import (
    OutputFormat,
    PromptError,
    PromptFile,
    PromptManager,
    SourceLoader,
)

__version__ = "0.1.0"

__all__ = [
    "OutputFormat",
    "PromptError",
    "PromptFile",
    "PromptManager",
    "SourceLoader",
    "__version__",
]
