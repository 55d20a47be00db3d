import json
from pathlib import Path

from PIL import Image
from typer.testing import CliRunner

from visprint.cli.app import app

runner = CliRunner()


def _make_images(root: Path) -> None:
    root.mkdir(parents=True)
    (root / "nested").mkdir()
    for name in ("a.png", "nested/b.png"):
        img = Image.new("RGB", (48, 48), (10, 10, 10))
        img.paste((240, 240, 240), (24, 0, 48, 48))
        img.save(root / name)
    img = Image.new("RGB", (48, 48), (10, 10, 10))
    img.paste((240, 240, 240), (0, 0, 48, 24))
    img.save(root / "c.png")
    (root / "readme.txt").write_text("not an image")


def test_cli_scan_writes_near_duplicates(tmp_path: Path):
    root = tmp_path / "data"
    _make_images(root)
    out = tmp_path / "near.json"

    r = runner.invoke(app, ["scan", "--path", str(root), "--out", str(out)])
    assert r.exit_code == 0, r.output
    assert "fingerprinted 3 images" in r.output

    edges = json.loads(out.read_text())
    assert len(edges) == 1
    resolved = root.resolve()
    assert {edges[0]["label_a"], edges[0]["label_b"]} == {
        str(resolved / "a.png"),
        str(resolved / "nested" / "b.png"),
    }
    assert edges[0]["distance_bits"] == 0


def test_cli_scan_into_directory_as_csv(tmp_path: Path):
    root = tmp_path / "data"
    _make_images(root)
    out_dir = tmp_path / "reports"
    out_dir.mkdir()

    r = runner.invoke(
        app, ["scan", "--path", str(root), "--out", str(out_dir), "--fmt", "CSV", "--quiet"]
    )
    assert r.exit_code == 0, r.output
    assert "near-duplicate pairs" not in r.output
    target = out_dir / "near_duplicates.csv"
    assert target.exists()
    assert target.read_text().splitlines()[0] == "label_a,label_b,distance_bits,similarity"


def test_cli_scan_unknown_format(tmp_path: Path):
    root = tmp_path / "data"
    _make_images(root)
    r = runner.invoke(app, ["scan", "--path", str(root), "--fmt", "xml"])
    assert r.exit_code != 0
    assert "Unknown format" in r.output
