"""
Simple Script Codec

A compact, self-delimiting binary format for scripts over the Value kinds.
The first byte of every item (the discriminant) tells both its kind and, for
variable-size kinds, how long it is:

| Discriminant | Item                                                     |
|--------------|----------------------------------------------------------|
| 00 / 01      | Boolean false / true                                     |
| 02           | Float, 8 bytes little-endian binary64                    |
| 03..12       | Integer, (d - 02) bytes little-endian two's complement   |
| 13           | Empty string                                             |
| 14..79       | String, (d - 13) length bytes, then the UTF-8 payload    |
| 80..FF       | Operator with opcode (d - 80)                            |

| Value                | Encoding                             |
|----------------------|--------------------------------------|
| `false`              | `00`                                 |
| `3.14`               | `021F85EB51B81E0940`                 |
| `255`                | `03FF`                               |
| `999999999999999999` | `0AFFFF63A7B3B6E00D`                 |
| `i128 min`           | `1200000000000000000000000000000080` |
| `i128 max`           | `12FFFFFFFFFFFFFFFFFFFFFFFFFFFFFF7F` |
| `""`                 | `13`                                 |
| `"Hello, World!"`    | `140D48656C6C6F2C20576F726C6421`     |

There is no framing: a script is the concatenation of its items.
"""

from __future__ import annotations

BOOLEAN_FALSE = 0x00
BOOLEAN_TRUE = 0x01
FLOAT = 0x02
INTEGER_BASE = 0x02
INTEGER_MIN = 0x03
INTEGER_MAX = 0x12
STRING_EMPTY = 0x13
STRING_BASE = 0x13
STRING_MAX = 0x79
OPERATOR_BASE = 0x80
OPCODE_MAX = 0x7F

INTEGER_WIDTH = 16


def significant_bytes_count(value: int) -> int:
    """
    Tell how many bytes beyond the first a number needs.

    Non-negative numbers take the fewest little-endian bytes that hold them
    with nothing left above, so that zero-filling restores them exactly.
    Negative numbers always take the full 16 bytes, as their high bytes are
    never zero.
    """
    if value < 0:
        return INTEGER_WIDTH - 1
    count = 0
    value >>= 8
    while value and count < INTEGER_WIDTH - 1:
        value >>= 8
        count += 1
    return count


from scriptful.codecs.simple.enc import ScriptEncoder, encode  # noqa: E402
from scriptful.codecs.simple.dec import ScriptDecoder, decode  # noqa: E402

__all__ = [
    "significant_bytes_count",
    "ScriptEncoder",
    "ScriptDecoder",
    "encode",
    "decode",
]
