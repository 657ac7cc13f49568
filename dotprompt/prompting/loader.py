"""Prompt file loaders.

A loader hands the registry a list of constructed prompt files. The core does
not walk directories; :class:`SourceLoader` builds prompt files from
``(identifier, content)`` pairs supplied by the caller, however they were
obtained.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from loguru import logger

from .models import PromptFile
from .naming import fallback_name


@runtime_checkable
class Loader(Protocol):
    """Source of prompt files for a :class:`~dotprompt.prompting.registry.PromptManager`."""

    def load(self) -> list[PromptFile]:
        """Return every prompt file this loader knows about."""
        ...


class SourceLoader:
    """Loader building prompt files from in-memory ``(identifier, content)`` pairs.

    Construction errors are not collected: the first invalid source aborts
    :meth:`load` with its :class:`~dotprompt.prompting.errors.PromptError`.
    """

    def __init__(self, sources: Iterable[tuple[str, bytes | str]]) -> None:
        self._sources = list(sources)

    def __len__(self) -> int:
        return len(self._sources)

    def load(self) -> list[PromptFile]:
        """Construct a prompt file for every source, in order."""
        prompt_files = [
            PromptFile.from_bytes(fallback_name(identifier), content)
            for identifier, content in self._sources
        ]
        logger.debug("Loaded {} prompt file(s) from sources", len(prompt_files))
        return prompt_files


class StaticLoader:
    """Loader returning already-constructed prompt files."""

    def __init__(self, prompt_files: Iterable[PromptFile]) -> None:
        self._prompt_files = list(prompt_files)

    def load(self) -> list[PromptFile]:
        """Return the prompt files given at construction."""
        return list(self._prompt_files)


__all__ = ["Loader", "SourceLoader", "StaticLoader", "fallback_name"]
