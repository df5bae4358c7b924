"""
Scriptful Stack

An ordered sequence of values operated in a LIFO way. Every Stack comprises
two sub-stacks:
- main: the surface operators work on, and the only one `length` reports
- alt: a clipboard reachable only through pop_into_alt / push_from_alt
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from scriptful.core.errors import StackOverflowError, StackUnderflowError

V = TypeVar("V")


class Stack(Generic[V]):
    """
    Dual LIFO container of values.

    Args:
        max_size: Optional cap on the main sub-stack length
    """

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size
        self._main: List[V] = []
        self._alt: List[V] = []

    def length(self) -> int:
        """Number of values in the main sub-stack."""
        return len(self._main)

    def __len__(self) -> int:
        return len(self._main)

    def alt_length(self) -> int:
        return len(self._alt)

    def push(self, value: V) -> None:
        """Put a value on top of the main sub-stack."""
        if self.max_size is not None and len(self._main) >= self.max_size:
            raise StackOverflowError(f"Stack is full ({self.max_size} values)")
        self._main.append(value)

    def pop(self) -> V:
        """Remove and return the topmost value of the main sub-stack."""
        if not self._main:
            raise StackUnderflowError("Cannot pop from an empty stack")
        return self._main.pop()

    def topmost(self) -> Optional[V]:
        """The topmost value of the main sub-stack, or None when empty."""
        return self._main[-1] if self._main else None

    def pop_into_alt(self) -> None:
        """Move the topmost main value onto the alt sub-stack."""
        if not self._main:
            raise StackUnderflowError("Cannot move a value into alt from an empty stack")
        self._alt.append(self._main.pop())

    def push_from_alt(self) -> None:
        """Move the topmost alt value back onto the main sub-stack."""
        if not self._alt:
            raise StackUnderflowError("Cannot move a value from an empty alt stack")
        self.push(self._alt[-1])
        self._alt.pop()

    def values(self) -> List[V]:
        """Copy of the main sub-stack, bottom first."""
        return list(self._main)

    def __repr__(self) -> str:
        return f"Stack(main={self._main!r}, alt={self._alt!r})"
