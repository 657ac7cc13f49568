"""Shared utilities for dotprompt."""

from .monitoring import setup_logging

__all__ = ["setup_logging"]
