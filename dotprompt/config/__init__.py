"""Configuration interface for dotprompt.

Usage:
    from dotprompt.config import settings
"""

from .settings import DotPromptSettings, settings

__all__ = [
    "DotPromptSettings",
    "settings",
]
