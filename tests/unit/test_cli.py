"""Unit tests for the command-line interface."""

import json
import logging

import pytest
import structlog
from fontTools.ttLib import TTFont
from typer.testing import CliRunner

from strokefont import __version__
from strokefont.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the handlers a CLI run installs on the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def snapshot_file(tmp_path, capital_a_stroke):
    path = tmp_path / "strokes.json"
    data = {
        "A": [capital_a_stroke.to_dict()],
        "o": [],
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCli:
    """Tests for the strokefont CLI."""

    def test_version(self):
        """Test --version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_build(self, snapshot_file, tmp_path):
        """Test building a font file."""
        out = tmp_path / "dist"
        result = runner.invoke(
            app,
            ["build", str(snapshot_file), "-o", str(out), "--family", "My Hand", "--quiet"],
        )

        assert result.exit_code == 0, result.output
        font = TTFont(out / "MyHand-Regular.ttf")
        assert font.getGlyphOrder() == [".notdef", "space", "A"]

    def test_build_with_bold(self, snapshot_file, tmp_path):
        """Test that --include-bold writes both variants."""
        result = runner.invoke(
            app,
            ["build", str(snapshot_file), "-o", str(tmp_path), "--include-bold", "--auto-scale", "-q"],
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "MyCustomFont-Regular.ttf").exists()
        assert (tmp_path / "MyCustomFont-Bold.ttf").exists()

    def test_build_missing_snapshot(self, tmp_path):
        """Test the exit code for a missing snapshot."""
        result = runner.invoke(app, ["build", str(tmp_path / "nope.json"), "-q"])
        assert result.exit_code == 1

    def test_build_malformed_stroke(self, tmp_path):
        """Test that a stroke that is not an object is a clean load error."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"A": [[{"x": 1, "y": 2}]]}), encoding="utf-8")

        result = runner.invoke(app, ["build", str(path), "-q"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_verbose_and_quiet_conflict(self, snapshot_file):
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["build", str(snapshot_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_coverage(self, snapshot_file):
        """Test the coverage table."""
        result = runner.invoke(app, ["coverage", str(snapshot_file), "--verbose"])
        assert result.exit_code == 0
        assert "Uppercase" in result.output
        assert "1/26" in result.output
