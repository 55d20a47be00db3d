# tests/unit/test_encoding.py
import pytest

from visprint.domain import encoding
from visprint.domain.errors import ConfigurationError, MalformedFingerprintError


@pytest.mark.parametrize(
    "grid, expected", [(2, 1), (3, 3), (5, 7), (8, 16), (16, 64), (32, 256)]
)
def test_hex_length_is_ceil_of_bits_over_four(grid, expected):
    assert encoding.hex_length(grid) == expected


def test_hex_length_rejects_tiny_grid():
    with pytest.raises(ConfigurationError):
        encoding.hex_length(1)


def test_encode_is_msb_first_row_major():
    # block (0,0) set -> top bit of the first hex digit
    bits = [True] + [False] * 15
    assert encoding.encode_bits(bits, 4) == "8000"
    # last block set -> lowest bit
    bits = [False] * 15 + [True]
    assert encoding.encode_bits(bits, 4) == "0001"


def test_encode_pads_when_bits_not_multiple_of_four():
    # 9 bits -> 3 hex chars, padding sits in front of block (0,0)
    bits = [True] + [False] * 8
    assert encoding.encode_bits(bits, 3) == "100"


def test_encode_rejects_wrong_bit_count():
    with pytest.raises(ValueError):
        encoding.encode_bits([True, False], 4)


def test_decode_inverts_encode():
    bits = [i % 3 == 0 for i in range(64)]
    text = encoding.encode_bits(bits, 8)
    value = encoding.decode_hex(text, 8)
    assert list(encoding.unpack_bits(value, 8)) == bits


def test_decode_accepts_upper_case():
    assert encoding.decode_hex("00FF", 4) == 0xFF


def test_decode_rejects_wrong_length():
    with pytest.raises(MalformedFingerprintError) as exc:
        encoding.decode_hex("abc", 4)
    assert "expected 4" in str(exc.value)
    assert "got 3" in str(exc.value)


def test_decode_rejects_non_hex():
    with pytest.raises(MalformedFingerprintError, match="non-hex"):
        encoding.decode_hex("00zz", 4)


def test_decode_rejects_padding_bits():
    # grid 3 has 9 bits; "fff" would need 12
    with pytest.raises(MalformedFingerprintError, match="padding"):
        encoding.decode_hex("fff", 3)
    assert encoding.decode_hex("1ff", 3) == 0x1FF


def test_decode_rejects_non_string():
    with pytest.raises(MalformedFingerprintError):
        encoding.decode_hex(1234, 4)
