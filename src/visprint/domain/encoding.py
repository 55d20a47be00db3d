# Licensed under the Apache License, Version 2.0
"""
Hex codec for fingerprints.

Bits are packed most-significant first in row-major block order, so block
(0,0) is the top bit of the integer and the rendered hex string is left-padded
with zeros to ``ceil(N*N/4)`` characters.
"""
from __future__ import annotations

import string
from typing import Iterable

from .errors import ConfigurationError, MalformedFingerprintError

_HEX_DIGITS = frozenset(string.hexdigits)


def check_grid_size(grid_size: int) -> int:
    if isinstance(grid_size, bool) or not isinstance(grid_size, int):
        raise ConfigurationError(
            f"grid size must be an integer, got {type(grid_size).__name__}"
        )
    if grid_size < 2:
        raise ConfigurationError(f"grid size must be >= 2, got {grid_size}")
    return grid_size


def hex_length(grid_size: int) -> int:
    """Number of hex characters in a fingerprint for an N x N grid."""
    bits = check_grid_size(grid_size) ** 2
    return (bits + 3) // 4


def pack_bits(bits: Iterable[bool]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


def encode_bits(bits: Iterable[bool], grid_size: int) -> str:
    """Pack row-major bits into the fixed-length lowercase hex form."""
    bits = list(bits)
    expected = check_grid_size(grid_size) ** 2
    if len(bits) != expected:
        raise ValueError(f"expected {expected} bits for grid {grid_size}, got {len(bits)}")
    return format_value(pack_bits(bits), grid_size)


def format_value(value: int, grid_size: int) -> str:
    return f"{value:0{hex_length(grid_size)}x}"


def decode_hex(text: str, grid_size: int) -> int:
    """
    Inverse of ``encode_bits``: return the packed integer for ``text``.

    Raises:
        MalformedFingerprintError: wrong length, non-hex characters, or bits
            set in the zero padding ahead of the first block.
    """
    expected = hex_length(grid_size)
    if not isinstance(text, str):
        raise MalformedFingerprintError(
            f"fingerprint must be a str, got {type(text).__name__}"
        )
    if len(text) != expected:
        raise MalformedFingerprintError(
            f"expected {expected} hex characters for grid {grid_size}, got {len(text)}"
        )
    bad = sorted({c for c in text if c not in _HEX_DIGITS})
    if bad:
        raise MalformedFingerprintError(
            f"non-hex character(s) in fingerprint: {''.join(bad)!r}"
        )
    value = int(text, 16)
    if value >> (grid_size * grid_size):
        raise MalformedFingerprintError(
            f"padding bits set: value exceeds {grid_size * grid_size} bits"
        )
    return value


def unpack_bits(value: int, grid_size: int) -> tuple[bool, ...]:
    total = grid_size * grid_size
    return tuple(bool((value >> (total - 1 - i)) & 1) for i in range(total))
