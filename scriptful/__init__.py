"""
Scriptful - a minimalist stack machine

Interprets scripts written in small domain-specific languages, in the spirit
of Forth and Bitcoin Script.

Exports:
- Value kinds: Boolean, Float, Integer, String
- Item / Script: what scripts are made of
- Stack, ConditionStack, Machine, MachineConfig: the execution core
- encode / decode: the simple binary codec
"""

from scriptful.core import (
    Boolean,
    ConditionStack,
    Float,
    Integer,
    Item,
    ItemKind,
    Machine,
    MachineConfig,
    OperatorSystem,
    Script,
    Stack,
    String,
    Value,
    ValueKind,
)
from scriptful.core.errors import (
    ScriptfulError,
    ExecutionError,
    StackUnderflowError,
    StackOverflowError,
    StepLimitExceeded,
    ConditionStackError,
    ValueTypeError,
    IntegerOverflowError,
    CodecError,
    EncodingError,
    DecodingError,
    EofError,
    UnknownDiscriminantError,
    UnknownOpcodeError,
    InvalidUtf8Error,
)
from scriptful.codecs import decode, encode

__version__ = "1.0.0"

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
    "encode",
    "decode",
    "ScriptfulError",
    "ExecutionError",
    "StackUnderflowError",
    "StackOverflowError",
    "StepLimitExceeded",
    "ConditionStackError",
    "ValueTypeError",
    "IntegerOverflowError",
    "CodecError",
    "EncodingError",
    "DecodingError",
    "EofError",
    "UnknownDiscriminantError",
    "UnknownOpcodeError",
    "InvalidUtf8Error",
]
