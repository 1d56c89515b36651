"""Context map: typed, insertion-ordered heterogeneous key-value store."""

from .context import ContextMap
from .converters import register_converter, to_map, unregister_converter
from .errors import (
    ContextMapError,
    InvalidKeyError,
    InvalidMappingError,
    InvalidTypeDescriptorError,
)
from .optional import OptionalValue
from .values import ValueKind, classify

__all__ = [
    "ContextMap",
    "OptionalValue",
    "ValueKind",
    "classify",
    "to_map",
    "register_converter",
    "unregister_converter",
    "ContextMapError",
    "InvalidKeyError",
    "InvalidMappingError",
    "InvalidTypeDescriptorError",
]
