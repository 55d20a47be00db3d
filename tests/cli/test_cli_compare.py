# tests/cli/test_cli_compare.py
from typer.testing import CliRunner
from visprint.cli.app import app

runner = CliRunner()


def test_compare_identical():
    r = runner.invoke(app, ["compare", "0" * 64, "0" * 64])
    assert r.exit_code == 0, r.output
    assert "distance=0 similarity=1.0000 duplicate" in r.output


def test_compare_distinct_with_threshold():
    r = runner.invoke(
        app, ["compare", "00ff" * 16, "ffff" * 8 + "0000" * 8, "--threshold", "0.4"]
    )
    assert r.exit_code == 0, r.output
    assert "distance=128 similarity=0.5000 distinct" in r.output


def test_compare_smaller_grid():
    r = runner.invoke(app, ["compare", "000f", "0000", "--grid", "4"])
    assert r.exit_code == 0, r.output
    assert "distance=4" in r.output


def test_compare_malformed_fails_cleanly():
    r = runner.invoke(app, ["compare", "xyz", "0" * 64])
    assert r.exit_code == 1
    assert "expected 64 hex characters" in r.output


def test_compare_grid_mismatch_fails_cleanly():
    r = runner.invoke(
        app, ["compare", "0" * 16, "0" * 64, "--grid", "8", "--grid-b", "16"]
    )
    assert r.exit_code == 1
    assert "cannot compare" in r.output


def test_compare_threshold_out_of_range():
    r = runner.invoke(app, ["compare", "0" * 64, "0" * 64, "--threshold", "2"])
    assert r.exit_code != 0
