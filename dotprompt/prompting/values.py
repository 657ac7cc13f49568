"""Runtime value kinds and object stringification.

Caller-supplied parameter values have no declared Python type. They are
classified into a small set of :class:`ValueKind` tags which the validator
matches on, and ``object`` parameters are reduced to text here before they
reach the template engine.
"""

from __future__ import annotations

import dataclasses
import datetime as _dt
import numbers
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


class ValueKind(str, Enum):
    """Tag describing the runtime shape of a parameter value."""

    NULL = "null"
    STRING = "string"
    BOOL = "bool"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    TIMESTAMP = "timestamp"
    STRUCTURED = "structured"


def _dtype_kind(value: Any) -> str | None:
    # numpy and similar array scalars expose their machine type on ``dtype``
    return getattr(getattr(value, "dtype", None), "kind", None)


def classify_value(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of a runtime value.

    ``bool`` is checked before the numeric tower because it subclasses
    ``int``. Unsigned machine integers (e.g. ``numpy.uint8``) get their own
    kind so they can be told apart from signed integers.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool) or _dtype_kind(value) == "b":
        return ValueKind.BOOL
    if isinstance(value, _dt.datetime):
        return ValueKind.TIMESTAMP
    if isinstance(value, numbers.Integral):
        return ValueKind.UNSIGNED if _dtype_kind(value) == "u" else ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    return ValueKind.STRUCTURED


def is_stringable(value: Any) -> bool:
    """Return True when the value's class defines its own ``__str__``.

    Plain containers, dataclasses and ordinary objects only inherit
    ``object.__str__`` and are dumped field by field instead.
    """
    return any("__str__" in vars(klass) for klass in type(value).__mro__[:-1])


def _fields_of(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    slots = getattr(type(value), "__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return {name: getattr(value, name) for name in slots if hasattr(value, name)}


def dump_fields(value: Any) -> str:
    """Render a structured value as ``{key:value ...}`` with sorted keys."""
    fields = _fields_of(value)
    parts = [f"{key}:{stringify_object(fields[key])}" for key in sorted(fields)]
    return "{" + " ".join(parts) + "}"


def stringify_object(value: Any) -> str:
    """Reduce an ``object`` parameter value to text.

    Scalars are printed directly (booleans as ``true``/``false``), sequences
    as ``[a b c]``, values whose class defines ``__str__`` use it verbatim and
    anything else is rendered with :func:`dump_fields`.
    """
    kind = classify_value(value)
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NULL:
        return "<nil>"
    if kind is not ValueKind.STRUCTURED:
        return str(value)
    if isinstance(value, _SEQUENCE_TYPES):
        items = sorted(value, key=repr) if isinstance(value, (set, frozenset)) else value
        return "[" + " ".join(stringify_object(item) for item in items) + "]"
    if is_stringable(value):
        return str(value)
    return dump_fields(value)


__all__ = [
    "ValueKind",
    "classify_value",
    "dump_fields",
    "is_stringable",
    "stringify_object",
]
