"""Object -> mapping conversion for feeding structured values into a ContextMap.

Resolution order for `to_map(source)`:
- None -> None
- a converter registered for type(source) or one of its bases
- pydantic models -> `model_dump()`
- dataclass instances -> pydantic `TypeAdapter` dump
- string-keyed mappings (including ContextMap) -> shallow dict copy

Anything else raises InvalidMappingError.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, TypeAdapter

from .errors import InvalidMappingError, InvalidTypeDescriptorError

Converter = Callable[[Any], Mapping[str, Any]]

_converters: dict[type, Converter] = {}


def register_converter(cls: type, fn: Converter) -> None:
    """Register an explicit converter for cls and its subclasses."""
    if not isinstance(cls, type):
        raise InvalidTypeDescriptorError(f"Converter target must be a class, got {cls!r}")
    _converters[cls] = fn


def unregister_converter(cls: type) -> None:
    _converters.pop(cls, None)


def _find_converter(cls: type) -> Converter | None:
    for base in cls.__mro__:
        fn = _converters.get(base)
        if fn is not None:
            return fn
    return None


def _as_str_keyed(mapping: Mapping[Any, Any], origin: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in mapping.items():
        if not isinstance(k, str):
            raise InvalidMappingError(f"{origin} produced a non-str key: {k!r}")
        out[k] = v
    return out


def to_map(source: Any) -> dict[str, Any] | None:
    if source is None:
        return None

    fn = _find_converter(type(source))
    if fn is not None:
        result = fn(source)
        if not isinstance(result, Mapping):
            raise InvalidMappingError(
                f"Converter for {type(source).__name__} returned {type(result).__name__}, not a mapping"
            )
        return _as_str_keyed(result, f"Converter for {type(source).__name__}")

    if isinstance(source, BaseModel):
        return source.model_dump()
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return TypeAdapter(type(source)).dump_python(source)
    if isinstance(source, Mapping):
        return _as_str_keyed(source, type(source).__name__)

    raise InvalidMappingError(f"Cannot convert {type(source).__name__} to a mapping")
