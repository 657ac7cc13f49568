"""Prompt file registry.

Maps canonical prompt names to prompt files loaded through a
:class:`~dotprompt.prompting.loader.Loader`. Names must be unique.
"""

from __future__ import annotations

from loguru import logger

from .errors import DuplicateNameError, PromptError
from .loader import Loader
from .models import PromptFile


class PromptManager:
    """Name to prompt file lookup built once from a loader."""

    def __init__(self, prompt_files: dict[str, PromptFile] | None = None) -> None:
        self.prompt_files: dict[str, PromptFile] = dict(prompt_files or {})

    @classmethod
    def from_loader(cls, loader: Loader | None) -> PromptManager:
        """Load every prompt file from ``loader`` and index it by name.

        Errors raised by the loader propagate unchanged.

        Raises:
            PromptError: When ``loader`` is None.
            DuplicateNameError: When two prompt files share a name.
        """
        if loader is None:
            raise PromptError("loader cannot be None")

        prompt_files: dict[str, PromptFile] = {}
        for prompt_file in loader.load():
            if prompt_file.name in prompt_files:
                raise DuplicateNameError(prompt_file.name)
            prompt_files[prompt_file.name] = prompt_file

        logger.info("Prompt registry built with {} prompt file(s)", len(prompt_files))
        return cls(prompt_files)

    def get_prompt_file(self, name: str) -> PromptFile | None:
        """Return the prompt file called ``name``, or None."""
        return self.prompt_files.get(name)

    def list_prompt_file_names(self) -> list[str]:
        """Return the names of all registered prompt files, sorted."""
        return sorted(self.prompt_files)

    def __contains__(self, name: object) -> bool:
        return name in self.prompt_files

    def __len__(self) -> int:
        return len(self.prompt_files)


__all__ = ["PromptManager"]
