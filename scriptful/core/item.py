"""
Scriptful Items and Scripts

An Item is each one of the entities a Script is made of: either an operator
(any caller-defined opcode, typically an IntEnum member) or a value pushed
onto the stack. A Script is just an ordered list of Items.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, TypeVar

Op = TypeVar("Op")
V = TypeVar("V")


class ItemKind(Enum):
    OPERATOR = "OPERATOR"
    VALUE = "VALUE"


@dataclass(frozen=True)
class Item(Generic[Op, V]):
    """Either Operator(op) or Value(v); equality is variant-wise."""
    kind: ItemKind
    payload: Any

    @classmethod
    def operator(cls, op: Op) -> "Item[Op, V]":
        return cls(ItemKind.OPERATOR, op)

    @classmethod
    def value(cls, value: V) -> "Item[Op, V]":
        return cls(ItemKind.VALUE, value)

    @property
    def is_operator(self) -> bool:
        return self.kind is ItemKind.OPERATOR

    @property
    def is_value(self) -> bool:
        return self.kind is ItemKind.VALUE

    def __repr__(self) -> str:
        name = "Operator" if self.is_operator else "Value"
        return f"{name}({self.payload!r})"


Script = List[Item]
