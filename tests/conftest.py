"""Top-level pytest configuration for shared fixtures.

Provides access to the prompt file fixtures under ``tests/fixtures/prompts``
and a Loguru sink that records messages emitted during a test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger

from dotprompt.prompting.models import PromptFile

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "prompts"


@pytest.fixture
def prompts_dir() -> Path:
    """Directory holding the fixture prompt files."""
    return FIXTURES_DIR


@pytest.fixture
def load_prompt() -> Callable[[str], PromptFile]:
    """Factory loading a fixture prompt file by file name."""

    def _load(file_name: str) -> PromptFile:
        return PromptFile.from_file(FIXTURES_DIR / file_name)

    return _load


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect Loguru messages (level DEBUG and above) emitted by the test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
