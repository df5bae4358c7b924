"""
Scriptful Condition Stack

Conceptually a vector of booleans, one per open IF/ELSE block, telling
whether execution is in the taken or the untaken branch of that level.

Levels cannot be observed individually. Only two questions are ever asked:
is the stack empty, and is every level taken. So the booleans are never
materialised; the stack keeps its would-be size and the position of the
first false level. Every operation is O(1), which rules out the quadratic
slowdown of scripts that nest deeply and toggle repeatedly.

See Bitcoin Core's ConditionStack (src/script/interpreter.cpp) and
https://bitslog.com/2017/04/17/new-quadratic-delays-in-bitcoin-scripts/
"""

from __future__ import annotations

from typing import Any, Dict

from scriptful.core.errors import ConditionStackError

U32_MAX = 0xFFFFFFFF

# Sentinel for "no false level present"
NO_FALSE = U32_MAX


class ConditionStack:
    """Compressed stack of branch conditions."""

    def __init__(self):
        self.stack_size = 0
        self.first_false_pos = NO_FALSE

    def is_empty(self) -> bool:
        return self.stack_size == 0

    def all_true(self) -> bool:
        return self.first_false_pos == NO_FALSE

    def push(self, condition: bool) -> None:
        if self.stack_size >= U32_MAX:
            raise ConditionStackError("Condition stack is too deep")
        if self.first_false_pos == NO_FALSE and not condition:
            # All levels were true; the new top is the first false one.
            self.first_false_pos = self.stack_size
        self.stack_size += 1

    def pop(self) -> None:
        if self.stack_size == 0:
            raise ConditionStackError("Cannot pop from an empty condition stack")
        self.stack_size -= 1
        if self.first_false_pos == self.stack_size:
            # Popping the first false level leaves only true ones.
            self.first_false_pos = NO_FALSE

    def toggle_top(self) -> None:
        if self.stack_size == 0:
            raise ConditionStackError("Cannot toggle an empty condition stack")
        top = self.stack_size - 1
        if self.first_false_pos == NO_FALSE:
            self.first_false_pos = top
        elif self.first_false_pos == top:
            self.first_false_pos = NO_FALSE
        # Toggling any other level is unobservable.

    def __len__(self) -> int:
        return self.stack_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stack_size": self.stack_size,
            "first_false_pos": None if self.all_true() else self.first_false_pos,
        }

    def __repr__(self) -> str:
        return f"ConditionStack(stack_size={self.stack_size}, first_false_pos={self.first_false_pos})"
