"""
Scriptful Machine

Drives evaluation of scripts. A Machine owns one Stack and one
ConditionStack and holds a reference to an operator system: a plain
function that decides how each operator mutates them.

    def op_sys(stack: Stack, operator: Op, conditions: ConditionStack) -> None

The operator system reports failures by raising. The machine itself
originates no semantic errors; it surfaces whatever the stack, the values or
the operator system raise and leaves its state as the failing step left it.

Key classes:
- MachineConfig: Optional limits for a machine
- Machine: The evaluation driver
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from scriptful.core.condition_stack import ConditionStack
from scriptful.core.errors import StepLimitExceeded
from scriptful.core.item import Item
from scriptful.core.stack import Stack

logger = logging.getLogger(__name__)

V = TypeVar("V")

OperatorSystem = Callable[[Stack, Any, ConditionStack], None]


@dataclass
class MachineConfig:
    """Configuration for a Machine."""
    max_stack_size: Optional[int] = None
    max_steps: Optional[int] = None


class Machine(Generic[V]):
    """
    A wrapper around a Stack that evaluates Items and Scripts.

    Values are pushed only while every open conditional level is taken;
    operators always reach the operator system so that control-flow
    operators can track nesting inside untaken branches too.
    """

    def __init__(self, op_sys: OperatorSystem, config: Optional[MachineConfig] = None):
        self.op_sys = op_sys
        self.config = config or MachineConfig()
        self._stack: Stack[V] = Stack(max_size=self.config.max_stack_size)
        self._conditions = ConditionStack()
        self.steps = 0

    @property
    def stack(self) -> Stack[V]:
        return self._stack

    @property
    def condition_stack(self) -> ConditionStack:
        return self._conditions

    def operate(self, item: Item) -> Optional[V]:
        """
        Evaluate a single Item.

        Returns:
            The topmost value after evaluation, or None if the stack is empty
        """
        if self.config.max_steps is not None and self.steps >= self.config.max_steps:
            raise StepLimitExceeded(f"Step limit of {self.config.max_steps} reached")
        self.steps += 1

        if item.is_operator:
            logger.debug("step %d: operator %r", self.steps, item.payload)
            self.op_sys(self._stack, item.payload, self._conditions)
        elif self._conditions.all_true():
            self._stack.push(item.payload)
        else:
            logger.debug("step %d: skipped %r in inactive branch", self.steps, item.payload)

        return self._stack.topmost()

    def run_script(self, script: Iterable[Item]) -> Optional[V]:
        """
        Evaluate every Item of a Script in order.

        Stops at the first failing Item and re-raises its error; nothing is
        rolled back.
        """
        for item in script:
            self.operate(item)
        return self._stack.topmost()

    def stack_length(self) -> int:
        return self._stack.length()

    def __repr__(self) -> str:
        return f"Machine(stack={self._stack!r}, conditions={self._conditions!r})"
