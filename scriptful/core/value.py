"""
Scriptful Value Model

A Value is one of four primitive kinds that can live in a Stack:
- Boolean: True or False
- Float: IEEE-754 binary64
- Integer: signed 128-bit two's complement
- String: UTF-8 text of any length

Arithmetic is intentionally loose. Operator systems decide when it is legal;
this layer only guarantees well-defined results for homogeneous or
numeric-promoted operands, and raises ValueTypeError for everything else.

Key classes:
- ValueKind: Discriminates the four variants
- Value: Base class carrying arithmetic and equality
- Boolean, Float, Integer, String: The variants
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from scriptful.core.errors import IntegerOverflowError, ValueTypeError

I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1

# Squared absolute difference under which two floats compare equal
FLOAT_TOLERANCE = 1e-19


class ValueKind(Enum):
    BOOLEAN = "bool"
    FLOAT = "float"
    INTEGER = "int"
    STRING = "str"


class Value:
    """
    Base class of the primitive value kinds.

    Values are immutable, so cloning is sharing. They are deliberately not
    hashable because float equality is approximate.
    """

    kind: ClassVar[ValueKind]
    value: Any

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> Value:
        raise ValueTypeError(f"Type of {self!r} cannot be negated")

    def __add__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        if isinstance(self, Boolean) and isinstance(other, Boolean):
            return Boolean(self.value or other.value)
        if _is_numeric(self) and _is_numeric(other):
            if isinstance(self, Integer) and isinstance(other, Integer):
                return Integer(self.value + other.value)
            return Float(float(self.value) + float(other.value))
        raise ValueTypeError(f"Types of {self!r} and {other!r} cannot be added together")

    def __mul__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        if isinstance(self, Boolean) and isinstance(other, Boolean):
            return Boolean(self.value and other.value)
        if _is_numeric(self) and _is_numeric(other):
            if isinstance(self, Integer) and isinstance(other, Integer):
                return Integer(self.value * other.value)
            return Float(float(self.value) * float(other.value))
        raise ValueTypeError(f"Types of {self!r} and {other!r} cannot be multiplied together")

    def __sub__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        return self + (-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if _is_numeric(self) and _is_numeric(other):
            if isinstance(self, Integer) and isinstance(other, Integer):
                return self.value == other.value
            return floats_close(float(self.value), float(other.value))
        if type(self) is not type(other):
            return False
        return self.value == other.value


@dataclass(frozen=True, eq=False)
class Boolean(Value):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise ValueTypeError(f"Boolean requires a bool, got {type(self.value).__name__}")

    def __neg__(self) -> Value:
        return Boolean(not self.value)


@dataclass(frozen=True, eq=False)
class Float(Value):
    value: float
    kind: ClassVar[ValueKind] = ValueKind.FLOAT

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueTypeError(f"Float requires a float, got {type(self.value).__name__}")
        try:
            object.__setattr__(self, "value", float(self.value))
        except OverflowError:
            raise ValueTypeError(f"Integer {self.value} is too large for a Float") from None

    def __neg__(self) -> Value:
        return Float(-self.value)


@dataclass(frozen=True, eq=False)
class Integer(Value):
    value: int
    kind: ClassVar[ValueKind] = ValueKind.INTEGER

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueTypeError(f"Integer requires an int, got {type(self.value).__name__}")
        if not I128_MIN <= self.value <= I128_MAX:
            raise IntegerOverflowError(f"Integer {self.value} does not fit in 128 bits")

    def __neg__(self) -> Value:
        return Integer(-self.value)


@dataclass(frozen=True, eq=False)
class String(Value):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueTypeError(f"String requires a str, got {type(self.value).__name__}")


def _is_numeric(value: Value) -> bool:
    return isinstance(value, (Integer, Float))


def floats_close(a: float, b: float) -> bool:
    """Approximate float equality on the squared absolute difference."""
    if a == b:
        return True
    diff = a - b
    return diff * diff < FLOAT_TOLERANCE
