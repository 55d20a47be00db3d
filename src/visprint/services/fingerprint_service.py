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

import logging
import statistics
from fractions import Fraction
from operator import add
from typing import Optional

from ..domain import encoding
from ..domain.errors import ImageTooSmallError, InvalidImageError, VisprintError
from ..domain.models import Fingerprint, PixelBuffer

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 16


def block_bounds(length: int, grid_size: int) -> list[tuple[int, int]]:
    """
    Split ``length`` pixels into ``grid_size`` spans [start, stop).

    Span i covers ``floor(i*length/N)`` to ``floor((i+1)*length/N)``, so the
    remainder pixels are spread across the grid with no gaps or overlaps.
    """
    cuts = [i * length // grid_size for i in range(grid_size + 1)]
    return list(zip(cuts[:-1], cuts[1:]))


def _validate(pixels: PixelBuffer, grid_size: int) -> None:
    encoding.check_grid_size(grid_size)
    width, height = pixels.width, pixels.height
    if width < 1 or height < 1:
        raise InvalidImageError(f"image has zero dimension: {width}x{height}")
    data = pixels.data
    if data is None or len(data) == 0:
        raise InvalidImageError("pixel buffer is empty")
    if len(data) != pixels.expected_size:
        raise InvalidImageError(
            f"pixel buffer for {width}x{height} RGBA must hold "
            f"{pixels.expected_size} bytes, got {len(data)}"
        )
    if width < grid_size or height < grid_size:
        raise ImageTooSmallError(
            f"image {width}x{height} is smaller than grid {grid_size}x{grid_size}"
        )


def block_intensities(pixels: PixelBuffer, grid_size: int) -> list[Fraction]:
    """
    Mean luminance of each grid block, row-major.

    Luminance is the unweighted mean of R, G and B; alpha is ignored. Values
    are exact fractions so equal block means compare equal.
    """
    width = pixels.width
    stride = width * 4
    data = pixels.data
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)
    cols = block_bounds(width, grid_size)
    rows = block_bounds(pixels.height, grid_size)

    out: list[Fraction] = []
    for y0, y1 in rows:
        sums = [0] * grid_size
        for y in range(y0, y1):
            row = data[y * stride:(y + 1) * stride]
            lum = list(map(add, map(add, row[0::4], row[1::4]), row[2::4]))
            for i, (x0, x1) in enumerate(cols):
                sums[i] += sum(lum[x0:x1])
        for i, (x0, x1) in enumerate(cols):
            count = (x1 - x0) * (y1 - y0)
            out.append(Fraction(sums[i], 3 * count))
    return out


def generate_fingerprint(
    pixels: PixelBuffer, grid_size: int = DEFAULT_GRID_SIZE
) -> Fingerprint:
    """
    Compute the block-average hash of ``pixels``.

    Each of the ``grid_size ** 2`` blocks contributes one bit: 1 when its mean
    luminance is strictly greater than the median over all blocks, 0
    otherwise (ties included). A uniform image therefore hashes to all zeros.

    Raises:
        ConfigurationError: grid_size < 2.
        InvalidImageError: zero-dimension, empty or wrongly sized buffer.
        ImageTooSmallError: width or height smaller than grid_size.
    """
    _validate(pixels, grid_size)

    intensities = block_intensities(pixels, grid_size)
    median = statistics.median(intensities)
    value = encoding.pack_bits(v > median for v in intensities)

    fp = Fingerprint(grid_size, value)
    logger.debug(
        "fingerprint %dx%d grid=%d -> %s", pixels.width, pixels.height, grid_size, fp
    )
    return fp


def fingerprint_or_none(
    pixels: PixelBuffer, grid_size: int = DEFAULT_GRID_SIZE
) -> Optional[Fingerprint]:
    """
    Best-effort variant for callers that degrade to "no fingerprint".
    Returns None (and logs) instead of raising a domain error.
    """
    try:
        return generate_fingerprint(pixels, grid_size)
    except VisprintError as e:
        logger.warning("fingerprinting skipped: %s", e)
        return None
