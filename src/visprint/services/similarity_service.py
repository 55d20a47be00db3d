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

import logging
from dataclasses import dataclass
from typing import Iterator, Mapping

from ..domain.models import Fingerprint
from .compare_service import DEFAULT_THRESHOLD, compare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarityEdge:
    """A near-duplicate relationship between two labelled images."""
    label_a: str
    label_b: str
    distance_bits: int
    similarity: float


class SimilarityService:
    """
    All-pairs near-duplicate detection over a set of labelled fingerprints.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        self._threshold = threshold

    def compute(self, fingerprints: Mapping[str, Fingerprint]) -> Iterator[SimilarityEdge]:
        """
        Yield a SimilarityEdge for every duplicate-candidate pair.

        Notes:
          * Labels are visited in sorted order, and label_a < label_b, so output is deterministic.
          * Fingerprints whose grid size differs from the first one are skipped.
          * O(M^2); there is no bucketing index here.
        """
        items = sorted(fingerprints.items())
        if not items:
            return
        grid = items[0][1].grid_size
        usable = []
        for label, fp in items:
            if fp.grid_size != grid:
                logger.warning(
                    "skipping %s: grid %d does not match %d", label, fp.grid_size, grid
                )
                continue
            usable.append((label, fp))

        for i, (label_a, fp_a) in enumerate(usable):
            for label_b, fp_b in usable[i + 1:]:
                result = compare(fp_a, fp_b, self._threshold)
                if result.is_duplicate:
                    logger.debug(
                        "near-duplicate %s ~ %s (distance: %d)",
                        label_a, label_b, result.distance_bits,
                    )
                    yield SimilarityEdge(
                        label_a, label_b, result.distance_bits, result.similarity
                    )
