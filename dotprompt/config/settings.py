"""dotprompt configuration using Pydantic Settings v2.

Settings map to environment variables with the ``DOTPROMPT_`` prefix.

Usage:
    from dotprompt.config.settings import settings
    print(settings.log_level)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DotPromptSettings(BaseSettings):
    """Runtime configuration for prompt loading and rendering."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DOTPROMPT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)

    # Prompt files
    prompt_file_extension: str = Field(
        default=".prompt",
        description="Extension stripped from file names to derive fallback prompt names",
    )
    warn_on_format_conflict: bool = Field(
        default=True,
        description=(
            "Log a warning when config.outputFormat and config.output.format "
            "disagree (the nested value always wins)"
        ),
    )

    # Rendering
    strict_undefined: bool = Field(
        default=False,
        description="Fail rendering when a template references an unbound name",
    )


settings = DotPromptSettings()
