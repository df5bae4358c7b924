"""Encoder side of the simple script codec."""

from __future__ import annotations

import operator as _operator
import struct
from typing import Any, Iterable

from scriptful.codecs.simple import (
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    FLOAT,
    INTEGER_MIN,
    INTEGER_WIDTH,
    OPCODE_MAX,
    OPERATOR_BASE,
    STRING_BASE,
    STRING_EMPTY,
    significant_bytes_count,
)
from scriptful.core.errors import EncodingError
from scriptful.core.item import Item
from scriptful.core.value import Boolean, Float, Integer, String, Value


class ScriptEncoder:
    """Appends item encodings to a growable byte buffer."""

    def __init__(self):
        self._data = bytearray()

    def data(self) -> bytes:
        return bytes(self._data)

    def write_u8(self, byte: int) -> None:
        self._data.append(byte)

    def write_bytes(self, data: bytes) -> None:
        self._data.extend(data)

    def encode_script(self, script: Iterable[Item]) -> None:
        for item in script:
            self.encode_item(item)

    def encode_item(self, item: Item) -> None:
        if item.is_operator:
            self.encode_operator(item.payload)
        else:
            self.encode_value(item.payload)

    def encode_operator(self, op: Any) -> None:
        """Emit 0x80 + opcode; `op` is an int-like opcode such as an IntEnum member."""
        opcode = getattr(op, "opcode", op)
        if isinstance(opcode, bool):
            raise EncodingError(f"Operator {op!r} has no integer opcode")
        try:
            opcode = _operator.index(opcode)
        except TypeError:
            raise EncodingError(f"Operator {op!r} has no integer opcode") from None
        if not 0 <= opcode <= OPCODE_MAX:
            raise EncodingError(f"Opcode {opcode} of {op!r} is outside 0..{OPCODE_MAX:#x}")
        self.write_u8(OPERATOR_BASE + opcode)

    def encode_value(self, value: Value) -> None:
        if isinstance(value, Boolean):
            self.write_u8(BOOLEAN_TRUE if value.value else BOOLEAN_FALSE)
        elif isinstance(value, Float):
            self.write_u8(FLOAT)
            self.write_bytes(struct.pack("<d", value.value))
        elif isinstance(value, Integer):
            self.encode_i128(value.value)
        elif isinstance(value, String):
            self.encode_string(value.value)
        else:
            raise EncodingError(f"Cannot encode {value!r} with the simple codec")

    def encode_i128(self, number: int) -> None:
        count = significant_bytes_count(number)
        body = number.to_bytes(INTEGER_WIDTH, "little", signed=True)
        self.write_u8(INTEGER_MIN + count)
        self.write_bytes(body[:count + 1])

    def encode_string(self, text: str) -> None:
        if not text:
            self.write_u8(STRING_EMPTY)
            return
        try:
            payload = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"String is not encodable as UTF-8: {e}") from e
        length_length = 1 + significant_bytes_count(len(payload))
        self.write_u8(STRING_BASE + length_length)
        self.write_bytes(len(payload).to_bytes(length_length, "little"))
        self.write_bytes(payload)


def encode(script: Iterable[Item]) -> bytes:
    """Encode a whole script. An empty script encodes to no bytes."""
    encoder = ScriptEncoder()
    encoder.encode_script(script)
    return encoder.data()
