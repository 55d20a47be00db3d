# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from . import encoding
from .errors import MalformedFingerprintError

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class PixelBuffer:
    """
    Decoded RGBA image handed in by an external decoder.

    ``data`` holds ``width * height`` pixels, four bytes each (R, G, B, A),
    row-major. Validation happens in the fingerprint generator so that a bad
    buffer fails before any work starts.
    """

    width: int
    height: int
    data: BytesLike

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels) -> "PixelBuffer":
        """Build a buffer from an iterable of (r, g, b, a) tuples."""
        raw = bytearray()
        for px in pixels:
            raw.extend(px)
        return cls(width, height, bytes(raw))

    @property
    def expected_size(self) -> int:
        return self.width * self.height * 4


@dataclass(frozen=True)
class Fingerprint:
    """
    Block-average hash of an image: ``grid_size ** 2`` bits, row-major.

    ``value`` reads the bits as an unsigned integer with block (0,0) as the
    most significant bit.
    """

    grid_size: int
    value: int

    def __post_init__(self) -> None:
        encoding.check_grid_size(self.grid_size)
        if self.value < 0 or self.value >> self.bit_length:
            raise MalformedFingerprintError(
                f"value does not fit in {self.bit_length} bits"
            )

    @property
    def bit_length(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def hex_length(self) -> int:
        return encoding.hex_length(self.grid_size)

    def to_hex(self) -> str:
        return encoding.format_value(self.value, self.grid_size)

    def bits(self) -> tuple[bool, ...]:
        return encoding.unpack_bits(self.value, self.grid_size)

    @classmethod
    def from_hex(cls, text: str, grid_size: int = 16) -> "Fingerprint":
        return cls(grid_size, encoding.decode_hex(text, grid_size))

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class SimilarityResult:
    """Outcome of comparing two fingerprints of the same grid size."""

    a: Fingerprint
    b: Fingerprint
    distance_bits: int
    similarity: float
    is_duplicate: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "distance_bits": self.distance_bits,
            "similarity": self.similarity,
            "is_duplicate": self.is_duplicate,
        }
