"""Present/absent container returned by ContextMap.get_optional."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class OptionalValue(Generic[T]):
    """A value that may be absent. A present value may itself be None only if the caller asked for NoneType."""

    value: T | None = None
    present: bool = False

    @classmethod
    def of(cls, value: T) -> OptionalValue[T]:
        return cls(value=value, present=True)

    @classmethod
    def empty(cls) -> OptionalValue[Any]:
        return _EMPTY

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> T:
        if not self.present:
            raise LookupError("OptionalValue is empty")
        return self.value  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        return self.value if self.present else default  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> OptionalValue[U]:
        if not self.present:
            return _EMPTY
        return OptionalValue.of(fn(self.value))  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        return f"OptionalValue.of({self.value!r})" if self.present else "OptionalValue.empty()"


_EMPTY: OptionalValue[Any] = OptionalValue()
