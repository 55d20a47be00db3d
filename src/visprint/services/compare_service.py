# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from numbers import Real

from ..domain.errors import IncompatibleFingerprintError
from ..domain.models import Fingerprint, SimilarityResult

DEFAULT_THRESHOLD = 0.10


def hamming_distance(a: Fingerprint, b: Fingerprint) -> int:
    """Number of differing bits between two fingerprints of the same grid."""
    if a.grid_size != b.grid_size:
        raise IncompatibleFingerprintError(
            f"cannot compare grid {a.grid_size} fingerprint with grid {b.grid_size}"
        )
    return (a.value ^ b.value).bit_count()


def compare(
    a: Fingerprint, b: Fingerprint, threshold: Real = DEFAULT_THRESHOLD
) -> SimilarityResult:
    """
    Compare two fingerprints.

    ``threshold`` is a fraction of the total bit count: the pair is a
    duplicate candidate when ``distance <= threshold * N * N``.
    """
    distance = hamming_distance(a, b)
    total = a.bit_length
    return SimilarityResult(
        a=a,
        b=b,
        distance_bits=distance,
        similarity=1 - distance / total,
        is_duplicate=distance <= threshold * total,
    )
