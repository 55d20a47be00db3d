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
from pathlib import Path
from typing import Optional

import typer

from ..adapters.decoder.pillow_decoder import PillowDecoder
from ..config import Settings
from ..domain.errors import VisprintError
from ..domain.models import Fingerprint
from ..logging_config import setup_logging
from ..services import ReportService, ScanService, SimilarityService
from ..services.compare_service import compare as compare_fingerprints
from ..services.fingerprint_service import generate_fingerprint
from ..services.report_service import FORMATS

setup_logging()

app = typer.Typer(help="visprint CLI - perceptual image fingerprints and near-duplicate detection")

logger = logging.getLogger(__name__)


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except VisprintError as e:
        raise typer.BadParameter(str(e))


def _fail(e: Exception) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _check_threshold(threshold: Optional[float]) -> Optional[float]:
    if threshold is not None and not 0.0 <= threshold <= 1.0:
        raise typer.BadParameter("--threshold must be within [0, 1]")
    return threshold


def _set_verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


@app.command()
def fingerprint(
    path: Path = typer.Option(
        ...,
        "--path",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Image file to fingerprint",
    ),
    grid: Optional[int] = typer.Option(
        None, "--grid", min=2, help="Grid dimension N (N*N bits). Default 16."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the hex fingerprint of an image.
    """
    _set_verbose(verbose)
    settings = _settings()
    grid_size = grid or settings.grid_size
    try:
        pixels = PillowDecoder().decode(path)
        fp = generate_fingerprint(pixels, grid_size)
    except VisprintError as e:
        _fail(e)
    typer.echo(fp.to_hex())


@app.command()
def compare(
    hex_a: str = typer.Argument(..., help="First fingerprint (hex)"),
    hex_b: str = typer.Argument(..., help="Second fingerprint (hex)"),
    grid: Optional[int] = typer.Option(None, "--grid", min=2, help="Grid dimension N"),
    grid_b: Optional[int] = typer.Option(
        None, "--grid-b", min=2, help="Grid dimension of the second fingerprint, if different"
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        callback=_check_threshold,
        help="Duplicate threshold as a fraction of total bits. Default 0.10.",
    ),
):
    """
    Compare two fingerprints and print distance, similarity and verdict.
    """
    settings = _settings()
    grid_a = grid or settings.grid_size
    try:
        a = Fingerprint.from_hex(hex_a, grid_a)
        b = Fingerprint.from_hex(hex_b, grid_b or grid_a)
        result = compare_fingerprints(
            a, b, settings.threshold if threshold is None else threshold
        )
    except VisprintError as e:
        _fail(e)
    verdict = "duplicate" if result.is_duplicate else "distinct"
    typer.echo(
        f"distance={result.distance_bits} similarity={result.similarity:.4f} {verdict}"
    )


@app.command()
def scan(
    path: Path = typer.Option(
        ...,
        "--path",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory to scan",
    ),
    grid: Optional[int] = typer.Option(None, "--grid", min=2, help="Grid dimension N"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", callback=_check_threshold, help="Duplicate threshold fraction"
    ),
    fmt: str = typer.Option("json", "--fmt", help="Output format.", case_sensitive=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        help="Write report to this path. If a directory is provided, the file will be named "
        "'near_duplicates.<fmt>' inside it. Defaults to './near_duplicates.<fmt>'.",
        resolve_path=True,
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress the final summary line."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Fingerprint every image under a directory and write a near-duplicate report.
    """
    _set_verbose(verbose)
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise typer.BadParameter(
            f"Unknown format: {fmt}. Valid options: {', '.join(FORMATS)}"
        )
    settings = _settings()

    scanner = ScanService(PillowDecoder(), grid_size=grid or settings.grid_size)
    fingerprints = scanner.scan(path)
    similarity = SimilarityService(settings.threshold if threshold is None else threshold)
    edges = list(similarity.compute(fingerprints))

    if out is None:
        target = Path(f"near_duplicates.{fmt}")
    elif out.exists() and out.is_dir():
        target = out / f"near_duplicates.{fmt}"
    else:
        target = out

    written = ReportService().write_edges(edges, target, fmt=fmt)
    if not quiet:
        typer.echo(
            f"Scanned {path}; fingerprinted {len(fingerprints)} images; "
            f"{len(edges)} near-duplicate pairs; report: {written}"
        )
