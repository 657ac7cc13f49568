"""Parameter schema and binding validators.

``validate_parameter_types`` runs once when a prompt file is constructed;
``validate_bindings`` runs on every render, after binding.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import InvalidParameterTypeError, TypeMismatchError
from .values import ValueKind, classify_value

if TYPE_CHECKING:
    from .models import InputSchema

OPTIONAL_SUFFIX = "?"

VALID_DATA_TYPES: frozenset[str] = frozenset(
    {"string", "number", "bool", "datetime", "object"}
)

# Value kinds accepted for each declared type. ``object`` values are already
# text by the time they are validated, so the type has no entry.
_ACCEPTED_KINDS: dict[str, frozenset[ValueKind]] = {
    "string": frozenset({ValueKind.STRING}),
    # Unsigned machine integers are deliberately not accepted.
    "number": frozenset({ValueKind.INTEGER, ValueKind.FLOAT}),
    "bool": frozenset({ValueKind.BOOL}),
    "datetime": frozenset({ValueKind.TIMESTAMP}),
}


def binding_key(key: str) -> str:
    """Return the parameter key without its optional marker."""
    return key.removesuffix(OPTIONAL_SUFFIX)


def is_optional(key: str) -> bool:
    """Return True when the declared key carries the optional marker."""
    return key.endswith(OPTIONAL_SUFFIX)


def validate_parameter_types(
    schema: InputSchema, prompt_name: str | None = None
) -> None:
    """Check every declared parameter type against the supported set.

    Raises:
        InvalidParameterTypeError: For the first unsupported type found.
    """
    for key, declared_type in schema.parameters.items():
        if declared_type not in VALID_DATA_TYPES:
            raise InvalidParameterTypeError(
                key, declared_type, prompt_name=prompt_name
            )


def validate_bindings(
    schema: InputSchema,
    bindings: Mapping[str, Any],
    prompt_name: str | None = None,
) -> None:
    """Check bound values against their declared types.

    Args:
        schema: Input schema of the prompt file.
        bindings: Resolved values keyed by parameter name without ``?``.
        prompt_name: Used for error context only.

    Raises:
        TypeMismatchError: For the first value whose kind does not match.
    """
    declared = {binding_key(k): t.lower() for k, t in schema.parameters.items()}
    for key, value in bindings.items():
        expected_type = declared.get(key)
        accepted = _ACCEPTED_KINDS.get(expected_type or "")
        if accepted is None:
            continue
        if classify_value(value) not in accepted:
            raise TypeMismatchError(key, expected_type, prompt_name=prompt_name)


__all__ = [
    "OPTIONAL_SUFFIX",
    "VALID_DATA_TYPES",
    "binding_key",
    "is_optional",
    "validate_bindings",
    "validate_parameter_types",
]
