from .errors import (
    ConfigurationError,
    DecodeError,
    ImageTooSmallError,
    IncompatibleFingerprintError,
    InvalidImageError,
    MalformedFingerprintError,
    VisprintError,
)
from .models import Fingerprint, PixelBuffer, SimilarityResult

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "Fingerprint",
    "ImageTooSmallError",
    "IncompatibleFingerprintError",
    "InvalidImageError",
    "MalformedFingerprintError",
    "PixelBuffer",
    "SimilarityResult",
    "VisprintError",
]
