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

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, List

from .similarity_service import SimilarityEdge

FORMATS = ("json", "ndjson", "csv")

CSV_FIELDS = ["label_a", "label_b", "distance_bits", "similarity"]


class ReportService:
    """
    Writes near-duplicate edges as JSON, NDJSON or CSV.

    Notes:
      - JSON (default): one array of edge objects.
      - NDJSON: one edge object per line.
      - CSV: header plus one row per edge, stable column order.
    """

    def write_edges(
        self, edges: Iterable[SimilarityEdge], out: Path, fmt: str = "json"
    ) -> Path:
        """
        Write `edges` to `out` in the specified format.

        Returns:
            The path written.

        Raises:
            ValueError: if an unsupported format is requested.
        """
        fmt = (fmt or "json").lower()
        if fmt not in FORMATS:
            raise ValueError(f"Unsupported format: {fmt}")
        rows: List[dict[str, Any]] = [asdict(e) for e in edges]

        out = Path(out)
        out.parent.mkdir(parents=True, exist_ok=True)

        if fmt == "json":
            out.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")
        elif fmt == "ndjson":
            text = "\n".join(json.dumps(r, ensure_ascii=False) for r in rows)
            out.write_text(text + ("\n" if text else ""), encoding="utf-8")
        else:
            with open(out, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
                writer.writeheader()
                writer.writerows(rows)
        return out
