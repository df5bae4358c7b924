"""Decoder side of the simple script codec."""

from __future__ import annotations

import logging
import struct
from typing import Any, Callable, List, Mapping, Optional, Union

from scriptful.codecs.simple import (
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    FLOAT,
    INTEGER_BASE,
    INTEGER_MAX,
    INTEGER_MIN,
    INTEGER_WIDTH,
    OPERATOR_BASE,
    STRING_BASE,
    STRING_EMPTY,
    STRING_MAX,
)
from scriptful.core.errors import (
    EofError,
    InvalidUtf8Error,
    UnknownDiscriminantError,
    UnknownOpcodeError,
)
from scriptful.core.item import Item, Script
from scriptful.core.value import Boolean, Float, Integer, String, Value

logger = logging.getLogger(__name__)

# Maps an opcode (discriminant - 0x80) to an operator. An IntEnum class works as is.
OperatorTable = Union[Callable[[int], Any], Mapping[int, Any]]


class ScriptDecoder:
    """
    Single-pass decoder over a byte buffer with a read cursor.

    Args:
        data: The encoded script
        operators: Opcode table for the caller's operator kind
    """

    def __init__(self, data: bytes, operators: Optional[OperatorTable] = None):
        self.data = bytes(data)
        self.cursor = 0
        self.operators = operators

    def bytes_left(self) -> int:
        return len(self.data) - self.cursor

    def peek_byte(self) -> int:
        if self.cursor >= len(self.data):
            raise EofError("Decoder cursor hit end of data")
        return self.data[self.cursor]

    def read_byte(self) -> int:
        byte = self.peek_byte()
        self.cursor += 1
        return byte

    def read_bytes(self, length: int) -> bytes:
        if length > self.bytes_left():
            raise EofError(
                f"Decoder cursor hit end of data when reading {length} bytes, "
                f"while only {self.bytes_left()} were left"
            )
        chunk = self.data[self.cursor:self.cursor + length]
        self.cursor += length
        return chunk

    def decode_script(self) -> Script:
        script: Script = []
        while self.bytes_left() > 0:
            script.append(self.decode_item())
        return script

    def decode_item(self) -> Item:
        logger.debug("item at offset %d", self.cursor)
        if self.peek_byte() < OPERATOR_BASE:
            return Item.value(self.decode_value())
        return Item.operator(self.decode_operator())

    def decode_operator(self) -> Any:
        opcode = self.read_byte() - OPERATOR_BASE
        if self.operators is None:
            raise UnknownOpcodeError(f"No operator table to decode opcode {opcode:#04x}")
        try:
            if isinstance(self.operators, Mapping):
                return self.operators[opcode]
            return self.operators(opcode)
        except (KeyError, ValueError):
            raise UnknownOpcodeError(f"Unsupported operator opcode {opcode:#04x}") from None

    def decode_value(self) -> Value:
        discriminant = self.peek_byte()

        if discriminant == BOOLEAN_FALSE:
            self.read_byte()
            return Boolean(False)
        if discriminant == BOOLEAN_TRUE:
            self.read_byte()
            return Boolean(True)
        if discriminant == FLOAT:
            return Float(self.decode_f64())
        if INTEGER_MIN <= discriminant <= INTEGER_MAX:
            return Integer(self.decode_i128())
        if STRING_EMPTY <= discriminant <= STRING_MAX:
            return String(self.decode_string())

        raise UnknownDiscriminantError(f"Unsupported value discriminant {discriminant:#04x}")

    def decode_f64(self) -> float:
        self.read_byte()
        return struct.unpack("<d", self.read_bytes(8))[0]

    def decode_i128(self) -> int:
        length = self.read_byte() - INTEGER_BASE
        body = self.read_bytes(length)
        # Short bodies only ever hold non-negative numbers, so zero-filling
        # the high bytes is exact; a full body carries its own sign.
        return int.from_bytes(body.ljust(INTEGER_WIDTH, b"\x00"), "little", signed=True)

    def decode_string(self) -> str:
        length_length = self.read_byte() - STRING_BASE
        if length_length == 0:
            return ""
        length = int.from_bytes(self.read_bytes(length_length), "little")
        payload = self.read_bytes(length)
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUtf8Error("Not a valid UTF-8 string") from None


def decode(data: bytes, operators: Optional[OperatorTable] = None) -> Script:
    """Decode a whole script, failing on any unparseable byte."""
    return ScriptDecoder(data, operators).decode_script()
