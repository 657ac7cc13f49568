"""Parameter binding.

Resolves the values handed to the template engine for a single render from
the declared input schema, the caller-supplied values and the schema
defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import MissingParameterError
from .validators import binding_key, is_optional
from .values import stringify_object

if TYPE_CHECKING:
    from .models import InputSchema


def bind_parameters(
    schema: InputSchema,
    values: Mapping[str, Any] | None = None,
    prompt_name: str | None = None,
) -> dict[str, Any]:
    """Build the binding set for one render.

    For each declared parameter, in order of preference:

    1. a caller value is bound (``object`` parameters are stringified),
    2. otherwise the schema default is bound,
    3. otherwise a required parameter raises, and an optional one is left
       out of the bindings entirely.

    Caller values for undeclared names are ignored.

    Args:
        schema: Input schema of the prompt file.
        values: Caller-supplied values; ``None`` is the same as ``{}``.
        prompt_name: Used for error context only.

    Returns:
        Mapping of parameter name (without ``?``) to value.

    Raises:
        MissingParameterError: When a required parameter cannot be resolved.
    """
    values = values or {}
    bindings: dict[str, Any] = {}

    for key, declared_type in schema.parameters.items():
        name = binding_key(key)
        if name in values:
            value = values[name]
            if declared_type.lower() == "object":
                value = stringify_object(value)
            bindings[name] = value
        elif name in schema.default:
            bindings[name] = schema.default[name]
        elif not is_optional(key):
            raise MissingParameterError(key, prompt_name=prompt_name)

    return bindings


__all__ = ["bind_parameters"]
