"""Test the simple binary script codec."""
import pytest
import random
import struct
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scriptful.codecs import decode, encode, significant_bytes_count
from scriptful.codecs.simple import ScriptDecoder
from scriptful.core.errors import (
    EncodingError,
    EofError,
    InvalidUtf8Error,
    UnknownDiscriminantError,
    UnknownOpcodeError,
)
from scriptful.core.item import Item
from scriptful.core.value import I128_MAX, I128_MIN, Boolean, Float, Integer, String
from scriptful.op_systems.pokemon import Creature
from scriptful.op_systems.simple_math import MathOperator


def encode_value(value) -> bytes:
    return encode([Item.value(value)])


class TestWireVectors:
    """Known encodings of single values."""

    @pytest.mark.parametrize("value,expected", [
        (Boolean(False), "00"),
        (Boolean(True), "01"),
        (Float(3.14), "021f85eb51b81e0940"),
        (Integer(0), "0300"),
        (Integer(255), "03ff"),
        (Integer(999999999999999999), "0affff63a7b3b6e00d"),
        (Integer(I128_MAX), "12" + "ff" * 15 + "7f"),
        (Integer(I128_MIN), "12" + "00" * 15 + "80"),
        (String(""), "13"),
        (String("Hello, World!"), "140d48656c6c6f2c20576f726c6421"),
    ])
    def test_encoding(self, value, expected):
        assert encode_value(value).hex() == expected

    def test_example_script_encoding(self, example_script, example_bytes):
        assert encode(example_script) == example_bytes

    def test_example_script_decoding(self, example_script, example_bytes):
        assert decode(example_bytes, MathOperator) == example_script

    def test_empty_script(self):
        assert encode([]) == b""
        assert decode(b"", MathOperator) == []

    def test_operator_encoding(self):
        assert encode([Item.operator(op) for op in MathOperator]) == bytes(0x80 + op for op in MathOperator)


class TestSignificantBytes:
    """Tests for the integer length rule."""

    @pytest.mark.parametrize("value,count", [
        (0, 0), (1, 0), (255, 0), (256, 1), (511, 1), (65535, 1), (65536, 2),
        (99999999, 3), (999999999999999999, 7), (I128_MAX, 15), (-1, 15), (I128_MIN, 15),
    ])
    def test_count(self, value, count):
        assert significant_bytes_count(value) == count

    @pytest.mark.parametrize("value", [0, 1, 127, 128, 255, 256, 257, 65536, 1 << 64, I128_MAX, -1, -256, I128_MIN])
    def test_encoded_length(self, value):
        """Test every integer encodes to 2 + significant bytes."""
        assert len(encode_value(Integer(value))) == 2 + significant_bytes_count(value)


class TestIntegerBoundaries:
    """Boundaries where zero-filling could corrupt a short body."""

    @pytest.mark.parametrize("value", [
        128, 256, 511, 32768, 65536, (1 << 64), (1 << 120), (1 << 126),
    ])
    def test_powers_round_trip(self, value):
        """Test values whose high body byte would otherwise be dropped."""
        assert decode(encode_value(Integer(value))) == [Item.value(Integer(value))]

    @pytest.mark.parametrize("value", [-1, -128, -255, -256, -(1 << 64), I128_MIN])
    def test_negatives_use_full_width(self, value):
        """Test negatives carry all 16 bytes so their sign survives decoding."""
        encoded = encode_value(Integer(value))
        assert encoded[0] == 0x12
        assert len(encoded) == 17
        assert decode(encoded) == [Item.value(Integer(value))]

    def test_short_body_is_never_negative(self):
        """Test a short body with its high bit set decodes as non-negative."""
        assert decode(bytes([0x03, 0xFF])) == [Item.value(Integer(255))]
        assert decode(bytes([0x04, 0x00, 0x80])) == [Item.value(Integer(0x8000))]


class TestRoundTrips:
    """Random scripts survive encode/decode and bytes are canonical."""

    @staticmethod
    def random_item(rng):
        kind = rng.randrange(6)
        if kind == 0:
            return Item.value(Boolean(rng.random() < 0.5))
        if kind == 1:
            return Item.value(Float(rng.uniform(-1e12, 1e12)))
        if kind == 2:
            bits = rng.choice([8, 16, 64, 127])
            return Item.value(Integer(rng.randint(-(1 << bits), (1 << bits) - 1)))
        if kind == 3:
            length = rng.choice([0, 1, 10, 300])
            return Item.value(String("".join(rng.choice("añ€𝄞z ") for _ in range(length))))
        return Item.operator(rng.choice(list(MathOperator)))

    @pytest.mark.parametrize("seed", range(10))
    def test_script_round_trip(self, seed):
        rng = random.Random(seed)
        script = [self.random_item(rng) for _ in range(40)]
        encoded = encode(script)
        decoded = decode(encoded, MathOperator)
        assert decoded == script
        assert encode(decoded) == encoded

    def test_float_bit_pattern_preserved(self):
        for number in (0.0, -0.0, 1e-300, float("inf"), float("-inf")):
            encoded = encode_value(Float(number))
            assert encoded[1:] == struct.pack("<d", number)
            assert encode(decode(encoded)) == encoded

    def test_long_string_length_prefix(self):
        """Test a 300-byte string uses a 2-byte length."""
        text = "x" * 300
        encoded = encode_value(String(text))
        assert encoded[:3] == bytes([0x15, 0x2C, 0x01])
        assert decode(encoded) == [Item.value(String(text))]

    def test_multibyte_utf8(self):
        encoded = encode_value(String("ñ"))
        assert encoded == bytes([0x14, 0x02, 0xC3, 0xB1])


class TestDecodingErrors:
    """Malformed input raises typed errors instead of crashing."""

    def test_truncated_float(self):
        with pytest.raises(EofError):
            decode(bytes([0x02, 0x1F, 0x85]))

    def test_truncated_integer(self):
        with pytest.raises(EofError):
            decode(bytes([0x05, 0x01]))

    def test_truncated_string_length(self):
        with pytest.raises(EofError):
            decode(bytes([0x15, 0x01]))

    def test_truncated_string_payload(self):
        with pytest.raises(EofError):
            decode(bytes([0x14, 0x05, 0x61, 0x62]))

    def test_wide_string_length_prefix(self):
        """Test a ten-byte length prefix is read as one unsigned integer."""
        with pytest.raises(EofError):
            decode(bytes([0x1D] + [0xFF] * 10 + [0x61, 0x62]))
        short = bytes([0x1D, 0x02] + [0x00] * 9 + [0x61, 0x62])
        assert decode(short) == [Item.value(String("ab"))]

    def test_error_after_valid_items(self):
        """Test trailing garbage fails the whole decode."""
        with pytest.raises(EofError):
            decode(bytes([0x01, 0x03, 0x07, 0x02]))

    @pytest.mark.parametrize("byte", [0x7A, 0x7B, 0x7F])
    def test_unknown_discriminant(self, byte):
        with pytest.raises(UnknownDiscriminantError):
            decode(bytes([byte]))

    def test_unknown_opcode(self):
        with pytest.raises(UnknownOpcodeError):
            decode(bytes([0x80 + 0x7F]), MathOperator)

    def test_operator_without_table(self):
        with pytest.raises(UnknownOpcodeError):
            decode(bytes([0x80]))

    def test_mapping_operator_table(self):
        assert decode(bytes([0x81]), {1: "equal"}) == [Item.operator("equal")]
        with pytest.raises(UnknownOpcodeError):
            decode(bytes([0x82]), {1: "equal"})

    def test_invalid_utf8(self):
        with pytest.raises(InvalidUtf8Error):
            decode(bytes([0x14, 0x02, 0xC3, 0x28]))

    def test_errors_carry_messages(self):
        with pytest.raises(EofError) as exc_info:
            decode(bytes([0x02]))
        assert "end of data" in str(exc_info.value)


class TestDecoderPrimitives:
    """Tests for cursor handling."""

    def test_peek_does_not_advance(self):
        decoder = ScriptDecoder(bytes([0x01, 0x00]))
        assert decoder.peek_byte() == 0x01
        assert decoder.bytes_left() == 2
        assert decoder.read_byte() == 0x01
        assert decoder.bytes_left() == 1

    def test_read_bytes_past_end(self):
        decoder = ScriptDecoder(bytes([0x01]))
        with pytest.raises(EofError):
            decoder.read_bytes(2)
        assert decoder.cursor == 0

    def test_peek_at_end(self):
        with pytest.raises(EofError):
            ScriptDecoder(b"").peek_byte()


class TestEncodingErrors:
    """Items the wire format cannot represent."""

    def test_custom_value_kind(self):
        with pytest.raises(EncodingError):
            encode([Item.value(Creature.Bulbasaur)])

    def test_opcode_out_of_range(self):
        with pytest.raises(EncodingError):
            encode([Item.operator(0x80)])

    def test_operator_without_opcode(self):
        with pytest.raises(EncodingError):
            encode([Item.operator("Add")])

    @pytest.mark.parametrize("op", [True, False])
    def test_bool_is_not_an_opcode(self, op):
        with pytest.raises(EncodingError):
            encode([Item.operator(op)])

    def test_lone_surrogate(self):
        with pytest.raises(EncodingError):
            encode_value(String("\ud800"))
