"""Perceptual image fingerprinting and near-duplicate detection."""

from .domain import (
    ConfigurationError,
    DecodeError,
    Fingerprint,
    ImageTooSmallError,
    IncompatibleFingerprintError,
    InvalidImageError,
    MalformedFingerprintError,
    PixelBuffer,
    SimilarityResult,
    VisprintError,
)
from .services.compare_service import compare, hamming_distance
from .services.fingerprint_service import fingerprint_or_none, generate_fingerprint

__version__ = "0.1.0"

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
    "compare",
    "fingerprint_or_none",
    "generate_fingerprint",
    "hamming_distance",
]
