"""
Scriptful Error Model

Every defined failure of the interpreter and the codecs is raised as a
subclass of ScriptfulError. Operator systems may raise anything they like;
the machine propagates it unchanged.

Key classes:
- ExecutionError: Failures while evaluating a script
- CodecError: Failures while encoding or decoding a script
"""

from __future__ import annotations


class ScriptfulError(Exception):
    """Base class for all scriptful errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


# -----------------------------
# Execution
# -----------------------------

class ExecutionError(ScriptfulError):
    """Raised while operating a stack or machine."""


class StackUnderflowError(ExecutionError):
    """Pop, peek or transfer on an empty sub-stack."""


class StackOverflowError(ExecutionError):
    """Push beyond the configured main stack capacity."""


class StepLimitExceeded(ExecutionError):
    """The machine evaluated more items than its configuration allows."""


class ConditionStackError(ExecutionError):
    """Pop or toggle on an empty condition stack."""


class ValueTypeError(ExecutionError, TypeError):
    """Arithmetic or negation on incompatible value kinds."""


class IntegerOverflowError(ExecutionError, OverflowError):
    """Integer result outside the signed 128-bit range."""


# -----------------------------
# Codecs
# -----------------------------

class CodecError(ScriptfulError):
    """Raised by script codecs."""


class EncodingError(CodecError):
    """An item cannot be represented in the wire format."""


class DecodingError(CodecError):
    """Malformed input bytes."""


class EofError(DecodingError):
    """The decoder needs more bytes than are available."""


class UnknownDiscriminantError(DecodingError):
    """The first byte of a value lies outside the defined ranges."""


class UnknownOpcodeError(DecodingError):
    """The operator table does not recognise an opcode."""


class InvalidUtf8Error(DecodingError):
    """A string body is not valid UTF-8."""
