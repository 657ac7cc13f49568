"""Prompt file name normalization."""

from __future__ import annotations

import re
from pathlib import PurePath

from dotprompt.config import settings

_INVALID_CHARS_RE = re.compile(r"[^A-Za-z0-9 \-\r\n]+")
_MULTI_WHITESPACE_RE = re.compile(r"[\s\r\n]+")


def clean_name(name: str) -> str:
    """Return the canonical form of a prompt file name.

    Characters other than ASCII letters, digits, spaces, hyphens and line
    breaks are removed, whitespace runs become a single hyphen, surrounding
    hyphens are trimmed and the result is lower-cased. The result may be
    empty; callers decide whether that is acceptable.

    Args:
        name: Human-supplied or filename-derived name.

    Returns:
        Normalized name.
    """
    stripped = _INVALID_CHARS_RE.sub("", name)
    hyphenated = _MULTI_WHITESPACE_RE.sub("-", stripped).strip("-")
    return hyphenated.lower()


def fallback_name(identifier: str) -> str:
    """Derive a fallback prompt name from a file name or source identifier.

    The final path component is lower-cased and the configured prompt file
    extension (``settings.prompt_file_extension``) is removed when present
    (``"greetings/Hello.prompt"`` -> ``"hello"``). Other extensions are kept
    and later cleaned with the rest of the name.
    """
    base = PurePath(identifier).name.lower()
    extension = settings.prompt_file_extension.lower()
    if extension and base.endswith(extension) and base != extension:
        return base[: -len(extension)]
    return base


__all__ = ["clean_name", "fallback_name"]
