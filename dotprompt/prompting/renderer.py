"""Prompt rendering using Jinja2.

Templates use ``{{ name }}`` substitution and ``{% if name %}`` blocks. A new
sandboxed environment is created for every render so no engine state is
shared between callers.
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from jinja2 import StrictUndefined, Undefined
from jinja2.sandbox import SandboxedEnvironment

from dotprompt.config import settings

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


@runtime_checkable
class TemplateRenderer(Protocol):
    """Anything able to expand a template string with bindings."""

    def render(self, template: str, bindings: Mapping[str, Any]) -> str:
        """Return the rendered template text."""
        ...


def format_date(value: Any, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Jinja filter formatting datetimes with ``strftime`` directives.

    Non-date values are returned as text unchanged.
    """
    if isinstance(value, (_dt.datetime, _dt.date)):
        return value.strftime(fmt)
    return str(value)


class JinjaRenderer:
    """Default :class:`TemplateRenderer` backed by a sandboxed Jinja2 engine.

    Args:
        strict_undefined: Raise on names missing from the bindings instead of
            rendering them as empty text. Defaults to the
            ``strict_undefined`` setting.
    """

    def __init__(self, strict_undefined: bool | None = None) -> None:
        if strict_undefined is None:
            strict_undefined = settings.strict_undefined
        self.strict_undefined = strict_undefined

    def compile_environment(self) -> SandboxedEnvironment:
        """Create a fresh environment for a single render."""
        env = SandboxedEnvironment(  # noqa: S701 Plain text, not HTML
            autoescape=False,
            undefined=StrictUndefined if self.strict_undefined else Undefined,
            keep_trailing_newline=True,
        )
        env.filters["date"] = format_date
        return env

    def render(self, template: str, bindings: Mapping[str, Any]) -> str:
        """Render ``template`` with ``bindings``.

        Jinja2 exceptions propagate; the prompt generator wraps them.
        """
        return self.compile_environment().from_string(template).render(dict(bindings))


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "JinjaRenderer",
    "TemplateRenderer",
    "format_date",
]
