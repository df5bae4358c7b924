"""
Scriptful Execution Core

- Value: primitive data a Stack holds
- Item / Script: operators and values in evaluation order
- Stack: main and alt sub-stacks
- ConditionStack: compressed IF/ELSE nesting state
- Machine: drives a Script through an operator system
"""

from scriptful.core.value import Value, ValueKind, Boolean, Float, Integer, String
from scriptful.core.item import Item, ItemKind, Script
from scriptful.core.stack import Stack
from scriptful.core.condition_stack import ConditionStack
from scriptful.core.machine import Machine, MachineConfig, OperatorSystem

__all__ = [
    "Value",
    "ValueKind",
    "Boolean",
    "Float",
    "Integer",
    "String",
    "Item",
    "ItemKind",
    "Script",
    "Stack",
    "ConditionStack",
    "Machine",
    "MachineConfig",
    "OperatorSystem",
]
