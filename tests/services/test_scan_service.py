# tests/services/test_scan_service.py
from pathlib import Path

from PIL import Image

from visprint.adapters.decoder.pillow_decoder import PillowDecoder
from visprint.domain.errors import DecodeError
from visprint.domain.models import PixelBuffer
from visprint.ports.decoder import DecoderPort
from visprint.services.scan_service import ScanService


def _split_image(path: Path, size=(32, 32)) -> Path:
    img = Image.new("RGB", size, (0, 0, 0))
    img.paste((255, 255, 255), (size[0] // 2, 0, size[0], size[1]))
    img.save(path, format="PNG")
    return path


def _populate(root: Path) -> None:
    root.mkdir()
    (root / "nested").mkdir()
    _split_image(root / "a.png")
    _split_image(root / "nested" / "b.png")
    Image.new("RGB", (4, 4), (9, 9, 9)).save(root / "tiny.png")
    (root / "broken.png").write_text("not an image")
    (root / "notes.txt").write_text("hello")


def test_scan_fingerprints_decodable_images(tmp_path: Path):
    root = tmp_path / "data"
    _populate(root)

    result = ScanService(PillowDecoder()).scan(root)

    assert set(result) == {str(root / "a.png"), str(root / "nested" / "b.png")}
    assert {fp.to_hex() for fp in result.values()} == {"00ff" * 16}


def test_scan_respects_ignore_patterns(tmp_path: Path):
    root = tmp_path / "data"
    _populate(root)

    result = ScanService(PillowDecoder(), ignore_patterns=["*b.png"]).scan(root)

    assert set(result) == {str(root / "a.png")}


def test_scan_single_file_with_grid(tmp_path: Path):
    p = _split_image(tmp_path / "one.png")
    result = ScanService(PillowDecoder(), grid_size=4).scan(p)
    assert result == {str(p): result[str(p)]}
    assert result[str(p)].to_hex() == "3333"


class FlakyDecoder(DecoderPort):
    """Raises DecodeError for files named bad*, returns a flat gray buffer otherwise."""

    def __init__(self):
        self.calls = 0

    @property
    def name(self) -> str:
        return "flaky"

    def supports(self, path: Path) -> bool:
        return True

    def decode(self, path: Path) -> PixelBuffer:
        self.calls += 1
        if path.name.startswith("bad"):
            raise DecodeError(f"cannot decode {path}")
        return PixelBuffer(16, 16, bytes((50, 50, 50, 255)) * 256)


def test_scan_skips_decode_errors(tmp_path: Path):
    (tmp_path / "bad1.raw").write_text("x")
    (tmp_path / "good.raw").write_text("x")
    dec = FlakyDecoder()

    result = ScanService(dec).scan(tmp_path)

    assert dec.calls == 2
    assert list(result) == [str(tmp_path / "good.raw")]
    assert result[str(tmp_path / "good.raw")].value == 0
