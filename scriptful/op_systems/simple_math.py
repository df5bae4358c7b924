"""
Simple Math Operator System

Arithmetic over the Value kinds plus conditional blocks and alt-stack
shuffling. Binary operators pop `a` (the top) and then `b`, and push
`a <op> b`.

Opcodes are stable: they are what the simple codec puts on the wire.
"""

from __future__ import annotations

from enum import IntEnum

from scriptful.core.condition_stack import ConditionStack
from scriptful.core.stack import Stack
from scriptful.core.value import Boolean, Float, Integer, String, Value


class MathOperator(IntEnum):
    Add = 0x00
    Equal = 0x01
    Mul = 0x02
    Not = 0x03
    Sub = 0x04
    If = 0x05
    Else = 0x06
    EndIf = 0x07
    ToAlt = 0x08
    FromAlt = 0x09
    Dup = 0x0A
    Drop = 0x0B


def is_truthy(value: Value) -> bool:
    """Zero, empty string and false are falsy; everything else is truthy."""
    if isinstance(value, Boolean):
        return value.value
    if isinstance(value, (Integer, Float)):
        return value.value != 0
    if isinstance(value, String):
        return value.value != ""
    return True


def simple_math_op_sys(stack: Stack, operator: MathOperator, conditions: ConditionStack) -> None:
    # Control flow is tracked even inside untaken branches.
    if operator == MathOperator.If:
        if conditions.all_true():
            conditions.push(is_truthy(stack.pop()))
        else:
            conditions.push(False)
        return
    if operator == MathOperator.Else:
        conditions.toggle_top()
        return
    if operator == MathOperator.EndIf:
        conditions.pop()
        return

    if not conditions.all_true():
        return

    if operator == MathOperator.Add:
        a = stack.pop()
        b = stack.pop()
        stack.push(a + b)
    elif operator == MathOperator.Equal:
        a = stack.pop()
        b = stack.pop()
        stack.push(Boolean(a == b))
    elif operator == MathOperator.Mul:
        a = stack.pop()
        b = stack.pop()
        stack.push(a * b)
    elif operator == MathOperator.Not:
        x = stack.pop()
        stack.push(-x)
    elif operator == MathOperator.Sub:
        a = stack.pop()
        b = stack.pop()
        stack.push(a - b)
    elif operator == MathOperator.ToAlt:
        stack.pop_into_alt()
    elif operator == MathOperator.FromAlt:
        stack.push_from_alt()
    elif operator == MathOperator.Dup:
        top = stack.pop()
        stack.push(top)
        stack.push(top)
    elif operator == MathOperator.Drop:
        stack.pop()
    else:
        raise ValueError(f"Unsupported operator {operator!r}")
