"""Visitor pattern: deserializers that build values through visitors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


class DeserializeError(Exception):
    """A deserializer cannot handle the requested input form."""


class Visitor(ABC):
    """Turns a list of integers into a value of some type."""

    @abstractmethod
    def visit_vec(self, values: Sequence[int]) -> Any:
        """Build a value from the integers."""


@dataclass
class TwoValuesStruct(Visitor):
    """Two named integer values."""

    a: int = 0
    b: int = 0

    def visit_vec(self, values: Sequence[int]) -> TwoValuesStruct:
        return TwoValuesStruct(a=values[0], b=values[1])


@dataclass
class TwoValuesArray(Visitor):
    """Two integer values held as a pair."""

    ab: tuple[int, int] = (0, 0)

    def visit_vec(self, values: Sequence[int]) -> TwoValuesArray:
        return TwoValuesArray(ab=(values[0], values[1]))


def _parse_i32(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


class Deserializer:
    """Parses input with a visitor; input forms it lacks raise DeserializeError."""

    def __init__(self, visitor: Visitor) -> None:
        self.visitor = visitor

    def parse_str(self, text: str) -> Any:
        raise DeserializeError("parse_str is unimplemented")

    def parse_vec(self, values: Sequence[int]) -> Any:
        raise DeserializeError("parse_vec is unimplemented")


class StringDeserializer(Deserializer):
    """Reads whitespace-separated integers from a string."""

    def parse_str(self, text: str) -> Any:
        values = [_parse_i32(token) for token in text.split()]
        return self.visitor.visit_vec(values)


class VecDeserializer(Deserializer):
    """Takes a ready list of integers."""

    def parse_vec(self, values: Sequence[int]) -> Any:
        return self.visitor.visit_vec(list(values))


def demo() -> None:
    print(StringDeserializer(TwoValuesStruct()).parse_str("123 456"))
    print(VecDeserializer(TwoValuesStruct()).parse_vec([123, 456]))

    deserializer = VecDeserializer(TwoValuesArray())
    print(deserializer.parse_vec([123, 456]))
    try:
        deserializer.parse_str("123 456")
    except DeserializeError as error:
        print(f"Error: {error}")