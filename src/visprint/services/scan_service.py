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

import fnmatch
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from ..domain.errors import DecodeError
from ..domain.models import Fingerprint
from ..ports.decoder import DecoderPort
from .fingerprint_service import DEFAULT_GRID_SIZE, fingerprint_or_none

logger = logging.getLogger(__name__)


class ScanService:
    """
    Fingerprints every decodable image under a directory:
      - walks the tree (a single file is accepted as well)
      - decodes via the DecoderPort
      - fingerprints best-effort; failures are logged and the file is skipped
    """

    def __init__(
        self,
        decoder: DecoderPort,
        *,
        grid_size: int = DEFAULT_GRID_SIZE,
        ignore_patterns: Optional[Iterable[str]] = None,
    ) -> None:
        self._decoder = decoder
        self._grid_size = grid_size
        self._ignore_patterns = tuple(ignore_patterns or ())

    def _ignored(self, path: Path) -> bool:
        name = str(path)
        return any(fnmatch.fnmatch(name, pat) for pat in self._ignore_patterns)

    def _walk(self, root: Path) -> Iterator[Path]:
        if root.is_file():
            yield root
            return
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            d = Path(dirpath)
            for name in sorted(filenames):
                yield d / name

    def scan(self, root: Path) -> Dict[str, Fingerprint]:
        """
        Scan the tree rooted at `root`.

        Returns:
            Mapping of file path (str) to its Fingerprint, for files that hashed.
        """
        root = Path(root)
        out: Dict[str, Fingerprint] = {}
        skipped = 0

        for p in self._walk(root):
            if self._ignored(p) or not self._decoder.supports(p):
                continue

            try:
                pixels = self._decoder.decode(p)
            except DecodeError as e:
                logger.warning("ScanService.scan: %s", e)
                skipped += 1
                continue

            fp = fingerprint_or_none(pixels, self._grid_size)
            if fp is None:
                logger.info("ScanService.scan: no fingerprint for %s", p)
                skipped += 1
                continue
            out[str(p)] = fp

        logger.info("Scanned %s: %d fingerprinted, %d skipped", root, len(out), skipped)
        return out
