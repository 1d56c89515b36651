"""Value classification and coercion rules shared by every ContextMap accessor."""

from __future__ import annotations

import types
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from .errors import InvalidTypeDescriptorError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TypeDescriptor = type | tuple[type, ...]


class ValueKind(str, Enum):
    NULL = "null"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OBJECT = "object"


def classify(value: Any) -> ValueKind:
    """Map a stored value onto its kind. bool is checked before int since bool subclasses int."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OBJECT


def in_range(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def check_type_descriptor(target_type: Any) -> tuple[type, ...]:
    """Normalize a type descriptor to a tuple of classes or raise InvalidTypeDescriptorError."""
    candidates = target_type if isinstance(target_type, tuple) else (target_type,)
    if not candidates:
        raise InvalidTypeDescriptorError("Type descriptor tuple must not be empty")
    for t in candidates:
        # Parameterized generics such as list[str] cannot be used with isinstance
        if not isinstance(t, type) or isinstance(t, types.GenericAlias):
            raise InvalidTypeDescriptorError(f"Not a class: {t!r}")
    return candidates


def _matches(value: Any, t: type) -> bool:
    kind = classify(value)
    if kind is ValueKind.BOOLEAN and t in (int, float):
        return False
    if kind is ValueKind.INTEGER and t is float:
        return in_range(value, INT64_MIN, INT64_MAX)
    return isinstance(value, t)


def is_compatible(value: Any, target_type: TypeDescriptor) -> bool:
    return any(_matches(value, t) for t in check_type_descriptor(target_type))


def coerce(value: Any, target_type: TypeDescriptor) -> Any:
    """Return value converted to target_type. Callers must check is_compatible first."""
    candidates = check_type_descriptor(target_type)
    if classify(value) is ValueKind.INTEGER and not isinstance(value, candidates):
        return float(value)
    return value
