"""
Scriptful Codecs

Ways to encode and decode scripts, into and from compact binary formats or
JSON documents.

- simple: the self-delimiting binary codec over the Value kinds
- schema: pydantic models for scripts written as JSON
"""

from scriptful.codecs.simple import (
    ScriptDecoder,
    ScriptEncoder,
    decode,
    encode,
    significant_bytes_count,
)
from scriptful.core.errors import (
    CodecError,
    DecodingError,
    EncodingError,
    EofError,
    InvalidUtf8Error,
    UnknownDiscriminantError,
    UnknownOpcodeError,
)

__all__ = [
    "encode",
    "decode",
    "ScriptEncoder",
    "ScriptDecoder",
    "significant_bytes_count",
    "CodecError",
    "DecodingError",
    "EncodingError",
    "EofError",
    "InvalidUtf8Error",
    "UnknownDiscriminantError",
    "UnknownOpcodeError",
]
