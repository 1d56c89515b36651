"""Pydantic models for sample record payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Person(BaseModel):
    """Immutable, validated record compared by value."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int

    @field_validator("age")
    @classmethod
    def _age_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Age cannot be negative")
        return v

    def describe(self) -> str:
        return f"Name: {self.name}, Age: {self.age}"

    @staticmethod
    def record_info() -> str:
        return "Records are concise immutable classes for carrying data."
