"""
  Value domain for Schemer.

Every form the reader produces and every result the evaluator returns is one
of the frozen variants below. The family is closed: code that dispatches on
values matches these classes and nothing else.

    - Atom        -> symbol name
    - List        -> tuple of values (proper list)
    - DottedList  -> tuple of values plus a tail value
    - Number      -> int (the only variant arithmetic accepts)
    - String      -> str
    - Bool        -> bool
    - Character   -> one-character str
    - Float       -> float
    - Ratio       -> fractions.Fraction
    - Complex     -> complex
    - Vector      -> tuple of values, indexed from 0
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable

from schemer.errors import SchemerValueError


class Value:
    """Base class of all Schemer values. str() gives the concrete syntax."""

    __slots__ = ()

    def __str__(self) -> str:
        from schemer.printer import render
        return render(self)


def _freeze(owner: Value, field_name: str, items: Iterable[Value]) -> None:
    # Composite values own an immutable copy of their elements
    object.__setattr__(owner, field_name, tuple(items))


@dataclass(frozen=True)
class Atom(Value):
    name: str


@dataclass(frozen=True)
class List(Value):
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        _freeze(self, "items", self.items)


@dataclass(frozen=True)
class DottedList(Value):
    items: tuple[Value, ...]
    tail: Value

    def __post_init__(self):
        _freeze(self, "items", self.items)


@dataclass(frozen=True)
class Number(Value):
    value: int


@dataclass(frozen=True)
class String(Value):
    value: str


@dataclass(frozen=True)
class Bool(Value):
    value: bool


@dataclass(frozen=True)
class Character(Value):
    value: str

    def __post_init__(self):
        if len(self.value) != 1:
            raise SchemerValueError(f"Character expects exactly one char, got {self.value!r}")


@dataclass(frozen=True)
class Float(Value):
    value: float


@dataclass(frozen=True)
class Ratio(Value):
    value: Fraction


@dataclass(frozen=True)
class Complex(Value):
    value: complex


@dataclass(frozen=True)
class Vector(Value):
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        _freeze(self, "items", self.items)

    @classmethod
    def from_array(cls, bounds: tuple[int, int], items: Iterable[Value]) -> Vector:
        """Build a vector from inclusive (low, high) index bounds.

        The bounds must start at 0 and span exactly the supplied elements.
        """
        items = tuple(items)
        low, high = bounds
        if low != 0 or high - low + 1 != len(items):
            raise SchemerValueError(
                f"Vector bounds {bounds} do not match {len(items)} element(s)"
            )
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def ref(self, index: int) -> Value:
        if not 0 <= index < len(self.items):
            raise SchemerValueError(
                f"Vector index {index} outside [0, {len(self.items) - 1}]"
            )
        return self.items[index]


TRUE = Bool(True)
FALSE = Bool(False)
