"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from substring.bounds import UNBOUNDED, Excluded, Included, UnitRange
from substring.cli import _build_range, _setup_logging, app

runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("substring.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("substring.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestBuildRange:
    """Tests for _build_range helper."""

    def test_unbounded(self) -> None:
        assert _build_range(None, None, False, False) == UnitRange(UNBOUNDED, UNBOUNDED)

    def test_default_bounds(self) -> None:
        """Start is inclusive and end exclusive unless flagged otherwise."""
        assert _build_range(2, 5, False, False) == UnitRange(Included(2), Excluded(5))

    def test_flagged_bounds(self) -> None:
        assert _build_range(2, 5, True, True) == UnitRange(Excluded(2), Included(5))


class TestSliceCommand:
    """Tests for the slice command."""

    def test_slice_text(self) -> None:
        result = runner.invoke(app, ["slice", "fõøbα®", "--start", "2", "--end", "5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "øbα"

    def test_slice_out_of_range(self) -> None:
        """Out-of-range positions are not an error."""
        result = runner.invoke(app, ["slice", "foobar", "--start", "6", "--end", "10"])
        assert result.exit_code == 0
        assert result.stdout.strip() == ""

    def test_slice_inclusive_end(self) -> None:
        result = runner.invoke(app, ["slice", "foobar", "--end", "3", "--inclusive-end"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "foob"

    def test_slice_exclusive_start(self) -> None:
        result = runner.invoke(app, ["slice", "foobar", "-s", "3", "--exclusive-start"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "ar"

    def test_slice_offsets(self) -> None:
        """--offsets prints the byte range of the slice."""
        result = runner.invoke(
            app, ["slice", "fõøbα®", "--start", "2", "--end", "5", "--offsets"]
        )
        assert result.exit_code == 0
        assert "bytes 3..8 of 10" in result.stdout

    def test_slice_file(self, tmp_path: Path) -> None:
        """Text can be read from a UTF-8 file."""
        path = tmp_path / "text.txt"
        path.write_bytes("fõøbα®".encode("utf-8"))

        result = runner.invoke(app, ["slice", "--file", str(path), "--start", "4"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "α®"

    def test_slice_invalid_file(self, tmp_path: Path) -> None:
        """A file that is not UTF-8 is rejected."""
        path = tmp_path / "latin1.txt"
        path.write_bytes("fõø".encode("latin-1"))

        result = runner.invoke(app, ["slice", "--file", str(path)])
        assert result.exit_code != 0

    def test_slice_text_and_file(self, tmp_path: Path) -> None:
        path = tmp_path / "text.txt"
        path.write_text("foo", encoding="utf-8")

        result = runner.invoke(app, ["slice", "bar", "--file", str(path)])
        assert result.exit_code != 0

    def test_slice_missing_text(self) -> None:
        result = runner.invoke(app, ["slice", "--start", "1"])
        assert result.exit_code != 0

    def test_slice_negative_start(self) -> None:
        result = runner.invoke(app, ["slice", "foobar", "--start", "-1"])
        assert result.exit_code != 0

    def test_slice_unknown_unit(self) -> None:
        result = runner.invoke(app, ["slice", "foobar", "--unit", "word"])
        assert result.exit_code != 0

    def test_slice_wider_than_console(self) -> None:
        """Long slices are printed on one line, unwrapped."""
        text = "word " * 40 + "end"
        result = runner.invoke(app, ["slice", text])
        assert result.exit_code == 0
        assert result.stdout.rstrip("\n") == text

    def test_slice_undecodable_argument(self) -> None:
        """Arguments carrying undecodable bytes are rejected as invalid UTF-8."""
        result = runner.invoke(app, ["slice", "ab\udcffcd", "--end", "2"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeEncodeError)

    def test_slice_graphemes_without_regex(self) -> None:
        """A missing grapheme capability is a usage error with an install hint."""
        with patch("substring.cli.grapheme_available", return_value=False):
            result = runner.invoke(app, ["slice", "foobar", "--unit", "grapheme"])
        assert result.exit_code == 2

    def test_slice_graphemes(self) -> None:
        pytest.importorskip("regex")
        result = runner.invoke(
            app,
            ["slice", "fooba\u0303r", "--start", "3", "--end", "5", "--unit", "grapheme"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "ba\u0303"


class TestUnitsCommand:
    """Tests for the units command."""

    def test_units_table(self) -> None:
        result = runner.invoke(app, ["units", "fõ"])
        assert result.exit_code == 0
        assert "U+0066" in result.stdout
        assert "U+00F5" in result.stdout

    def test_units_graphemes(self) -> None:
        """A grapheme row lists every code point of the cluster."""
        pytest.importorskip("regex")
        result = runner.invoke(app, ["units", "a\u0303", "--unit", "grapheme"])
        assert result.exit_code == 0
        assert "U+0061 U+0303" in result.stdout

    def test_units_empty(self) -> None:
        result = runner.invoke(app, ["units", ""])
        assert result.exit_code == 0
        assert "No units found" in result.stdout


class TestCountCommand:
    """Tests for the count command."""

    def test_count_characters(self) -> None:
        result = runner.invoke(app, ["count", "fõøbα®"])
        assert result.exit_code == 0
        assert "6 char units, 10 bytes" in result.stdout

    def test_count_verbose(self) -> None:
        """Verbose flag is accepted."""
        with patch("substring.cli.logging.basicConfig") as mock_config:
            result = runner.invoke(app, ["count", "foobar", "--verbose"])
        assert result.exit_code == 0
        assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_count_graphemes(self) -> None:
        pytest.importorskip("regex")
        result = runner.invoke(app, ["count", "fooba\u0303r", "--unit", "grapheme"])
        assert result.exit_code == 0
        assert "6 grapheme units, 8 bytes" in result.stdout
