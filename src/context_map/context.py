"""Context map - insertion-ordered, string-keyed store with typed, non-raising accessors."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping, MutableMapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from .errors import InvalidKeyError, InvalidMappingError
from .log import get_logger
from .optional import OptionalValue
from .values import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    TypeDescriptor,
    ValueKind,
    check_type_descriptor,
    classify,
    coerce,
    in_range,
    is_compatible,
)

T = TypeVar("T")

logger = get_logger(__name__)

_MISSING = object()


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(f"Context map keys must be str, got {type(key).__name__}")
    return key


def _check_mapping(mapping: Any) -> Mapping[str, Any]:
    if not isinstance(mapping, Mapping):
        raise InvalidMappingError(f"Expected a mapping, got {type(mapping).__name__}")
    for k in mapping:
        if not isinstance(k, str):
            raise InvalidMappingError(f"Mapping keys must be str, got {type(k).__name__}: {k!r}")
    return mapping


class _FrozenList(Sequence):
    """Read-only view over a snapshot list; compares equal to lists and tuples with the same items."""

    __slots__ = ("_items",)

    def __init__(self, items: list[Any]) -> None:
        self._items = items

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _FrozenList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._items)


def _freeze(value: Any, memo: dict[int, Any] | None = None) -> Any:
    """Read-only snapshot of mappings and lists, recursively. Other values are shared."""
    if memo is None:
        memo = {}
    if id(value) in memo:
        return memo[id(value)]
    if isinstance(value, Mapping):
        entries: dict[str, Any] = {}
        frozen = memo[id(value)] = MappingProxyType(entries)
        for k, v in value.items():
            entries[k] = _freeze(v, memo)
        return frozen
    if type(value) in (list, tuple):
        items: list[Any] = []
        frozen = memo[id(value)] = _FrozenList(items)
        items.extend(_freeze(v, memo) for v in value)
        return frozen
    return value


def _thaw(value: Any, memo: dict[int, Any]) -> Any:
    """Copy mapping and list containers into plain dicts and lists. Leaf values stay shared."""
    if id(value) in memo:
        return memo[id(value)]
    if isinstance(value, Mapping):
        entries: dict[str, Any] = {}
        memo[id(value)] = entries
        for k, v in value.items():
            entries[k] = _thaw(v, memo)
        return entries
    if type(value) in (list, tuple) or isinstance(value, _FrozenList):
        items: list[Any] = []
        memo[id(value)] = items
        items.extend(_thaw(v, memo) for v in value)
        return tuple(items) if type(value) is tuple else items
    return value


def _detach(value: Any, target_type: TypeDescriptor) -> Any:
    """Coerce a compatible value so that it shares no mutable container with the map."""
    kind = classify(value)
    if kind is ValueKind.SEQUENCE and type(value) in (list, tuple):
        return _thaw(value, {})
    if kind is not ValueKind.MAPPING:
        return coerce(value, target_type)

    frozen = _freeze(value)
    if is_compatible(frozen, target_type):
        return frozen
    entries = _thaw(value, {})
    if is_compatible(entries, target_type):
        return entries
    if isinstance(value, ContextMap):
        return ContextMap().put_all(entries)
    if isinstance(value, MutableMapping):
        # Concrete mapping subclass requested (OrderedDict, defaultdict, ...)
        shallow = copy.copy(value)
        shallow.update(entries)
        return shallow
    return value


class ContextMap(Mapping[str, Any]):
    """Heterogeneous key-value store for context-like data.

    Reads never raise for a missing key or a stored value of the wrong type:
    typed getters fall back to a default, the rest return None or an empty
    OptionalValue. Not thread-safe; share it through as_read_only_map().
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @classmethod
    def of(cls, mapping: Mapping[str, Any]) -> ContextMap:
        return cls().put_all(mapping)

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ContextMap({self._values!r})"

    # Mutation

    def put(self, key: str, value: Any) -> ContextMap:
        self._values[_check_key(key)] = value
        return self

    def put_all(self, mapping: Mapping[str, Any]) -> ContextMap:
        self._values.update(_check_mapping(mapping))
        return self

    # Typed retrieval

    def _lookup(self, key: str, expected: str, *accepted: ValueKind) -> Any:
        v = self._values.get(key, _MISSING)
        if v is _MISSING:
            return _MISSING
        if classify(v) not in accepted:
            self._log_mismatch(key, expected, v)
            return _MISSING
        return v

    def _log_mismatch(self, key: str, expected: str, value: Any) -> None:
        logger.debug(
            "context_map.type_mismatch",
            key=key,
            expected=expected,
            actual=classify(value).value,
        )

    def get_string(self, key: str, default: str = "") -> str:
        v = self._lookup(key, "string", ValueKind.STRING)
        return default if v is _MISSING else v

    def get_int(self, key: str, default: int = 0) -> int:
        v = self._lookup(key, "int", ValueKind.INTEGER)
        if v is _MISSING:
            return default
        if not in_range(v, INT32_MIN, INT32_MAX):
            self._log_mismatch(key, "int", v)
            return default
        return v

    def get_long(self, key: str, default: int = 0) -> int:
        v = self._lookup(key, "long", ValueKind.INTEGER)
        if v is _MISSING:
            return default
        if not in_range(v, INT64_MIN, INT64_MAX):
            self._log_mismatch(key, "long", v)
            return default
        return v

    def get_double(self, key: str, default: float = 0.0) -> float:
        v = self._lookup(key, "double", ValueKind.FLOAT, ValueKind.INTEGER)
        if v is _MISSING:
            return default
        if not is_compatible(v, float):
            self._log_mismatch(key, "double", v)
            return default
        return float(v)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        v = self._lookup(key, "boolean", ValueKind.BOOLEAN)
        return default if v is _MISSING else v

    # Generic / optional retrieval

    def get_object(self, key: str, target_type: type[T] | TypeDescriptor) -> T | None:
        check_type_descriptor(target_type)
        v = self._values.get(key, _MISSING)
        if v is _MISSING:
            return None
        if not is_compatible(v, target_type):
            self._log_mismatch(key, repr(target_type), v)
            return None
        return _detach(v, target_type)

    def get_optional(self, key: str, target_type: type[T] | TypeDescriptor) -> OptionalValue[T]:
        check_type_descriptor(target_type)
        v = self._values.get(key, _MISSING)
        if v is _MISSING:
            return OptionalValue.empty()
        if not is_compatible(v, target_type):
            self._log_mismatch(key, repr(target_type), v)
            return OptionalValue.empty()
        return OptionalValue.of(_detach(v, target_type))

    # Collection-shaped retrieval

    def get_list(self, key: str, element_type: type[T] | TypeDescriptor) -> list[T] | None:
        check_type_descriptor(element_type)
        v = self._lookup(key, "list", ValueKind.SEQUENCE)
        if v is _MISSING:
            return None
        if not all(is_compatible(item, element_type) for item in v):
            self._log_mismatch(key, f"list[{element_type!r}]", v)
            return None
        return [_detach(item, element_type) for item in v]

    def get_map(self, key: str) -> Mapping[str, Any] | None:
        v = self._lookup(key, "map", ValueKind.MAPPING)
        if v is _MISSING:
            return None
        return _freeze(v)

    # Predicates

    def contains_key(self, key: str) -> bool:
        return key in self._values

    def has_text(self, key: str) -> bool:
        v = self._values.get(key)
        return isinstance(v, str) and bool(v.strip())

    # Export

    def as_read_only_map(self) -> Mapping[str, Any]:
        """Snapshot of the current entries in insertion order; later puts are not reflected."""
        return _freeze(self._values)
