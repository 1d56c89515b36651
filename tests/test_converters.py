from dataclasses import dataclass

import pytest

from context_map import (
    ContextMap,
    InvalidMappingError,
    InvalidTypeDescriptorError,
    register_converter,
    to_map,
    unregister_converter,
)
from context_map.models import Person


@dataclass
class Address:
    city: str
    zip_code: str


@dataclass
class Customer:
    name: str
    address: Address


class Token:
    def __init__(self, value: str) -> None:
        self.value = value


class RefreshToken(Token):
    pass


def test_none_converts_to_none():
    assert to_map(None) is None


def test_pydantic_model():
    assert to_map(Person(name="Hong Gildong", age=30)) == {"name": "Hong Gildong", "age": 30}


def test_nested_dataclass():
    c = Customer(name="Kim", address=Address(city="Seoul", zip_code="04524"))
    assert to_map(c) == {"name": "Kim", "address": {"city": "Seoul", "zip_code": "04524"}}


def test_mapping_is_shallow_copied():
    source = {"a": [1]}
    out = to_map(source)
    assert out == source and out is not source
    assert out["a"] is source["a"]


def test_context_map_converts_to_dict():
    assert to_map(ContextMap().put("a", 1)) == {"a": 1}


def test_unsupported_sources_raise():
    with pytest.raises(InvalidMappingError):
        to_map(42)
    with pytest.raises(InvalidMappingError):
        to_map({1: "a"})
    with pytest.raises(InvalidMappingError):
        to_map(Customer)


def test_registered_converter_applies_to_subclasses():
    register_converter(Token, lambda t: {"token": t.value})
    assert to_map(Token("abc")) == {"token": "abc"}
    assert to_map(RefreshToken("r")) == {"token": "r"}

    unregister_converter(Token)
    with pytest.raises(InvalidMappingError):
        to_map(Token("abc"))


def test_registered_converter_must_return_mapping():
    register_converter(Token, lambda t: [t.value])
    with pytest.raises(InvalidMappingError):
        to_map(Token("abc"))


def test_register_converter_requires_class():
    with pytest.raises(InvalidTypeDescriptorError):
        register_converter("Token", lambda t: {})  # type: ignore[arg-type]


def test_converted_object_feeds_context_map():
    ctx = ContextMap.of(to_map(Person(name="Hong Gildong", age=30)))
    assert ctx.get_string("name") == "Hong Gildong"
    assert ctx.get_int("age") == 30
