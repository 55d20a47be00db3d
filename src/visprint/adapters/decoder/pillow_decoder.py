# Licensed under the Apache License, Version 2.0
from __future__ import annotations
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ...domain.errors import DecodeError
from ...domain.models import PixelBuffer
from ...ports.decoder import DecoderPort

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".bmp",
        ".gif",
        ".tif",
        ".tiff",
        ".webp",
    }
)


def pixel_buffer_from_image(im: Image.Image) -> PixelBuffer:
    """Convert an open Pillow image (any mode) to an RGBA PixelBuffer."""
    if im.mode != "RGBA":
        im = im.convert("RGBA")
    width, height = im.size
    return PixelBuffer(width, height, im.tobytes())


class PillowDecoder(DecoderPort):
    """
    Decodes JPEG/PNG/TIFF/WEBP/... via Pillow. Animated formats use the first frame.
    """

    @property
    def name(self) -> str:
        return "pillow"

    def supports(self, path: Path) -> bool:
        # extension check keeps us from opening every file in a tree with Pillow
        return Path(path).suffix.lower() in IMAGE_SUFFIXES

    def decode(self, path: Path) -> PixelBuffer:
        p = Path(path)
        try:
            with Image.open(p) as im:
                buf = pixel_buffer_from_image(im)
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise DecodeError(f"cannot decode {p}: {e}") from e
        logger.debug("decoded %s (%dx%d)", p, buf.width, buf.height)
        return buf
