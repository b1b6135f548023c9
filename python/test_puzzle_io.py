"""Tests for shared solver input handling."""

import logging
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from grid_parser import cell_converter
from grid_types import OutOfBounds
from puzzle_io import NoInputFound, NoSolutionFound, load_first_map, run_solver

CONVERT = cell_converter({".": 0, "#": 1})


class TestLoadFirstMap:
    """Tests for picking the first parseable input."""

    def test_first_good_file(self, tmp_path: Path) -> None:
        first = tmp_path / "a.txt"
        first.write_text("#.\n.#\n")
        second = tmp_path / "b.txt"
        second.write_text("##\n##\n")

        grid = load_first_map([first, second], CONVERT)
        assert grid.render() == "10\n01"

    def test_skips_unparseable(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        bad = tmp_path / "bad.txt"
        bad.write_text("#?\n")
        good = tmp_path / "good.txt"
        good.write_text("#\n")

        with caplog.at_level(logging.WARNING, logger="puzzle_io"):
            grid = load_first_map([str(bad), str(good)], CONVERT)

        assert grid.count(1) == 1
        assert f"Skipping file {bad}: Parse error:" in caplog.text

    def test_nothing_parses(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.txt"
        bad.write_text("#\n##\n")
        with pytest.raises(NoInputFound):
            load_first_map([bad], CONVERT)

    def test_no_paths(self) -> None:
        with pytest.raises(NoInputFound):
            load_first_map([], CONVERT)

    def test_missing_file_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_first_map([tmp_path / "missing.txt"], CONVERT)


class TestRunSolver:
    """Tests for top-level error reporting."""

    @staticmethod
    def console() -> tuple[Console, StringIO]:
        buffer = StringIO()
        return Console(file=buffer, width=120, color_system=None), buffer

    def test_success(self) -> None:
        console, buffer = self.console()
        assert run_solver(lambda: None, console) == 0
        assert buffer.getvalue() == ""

    @pytest.mark.parametrize(
        "error,message",
        [
            (NoInputFound(), "ERROR: No valid inputs found"),
            (NoSolutionFound(), "ERROR: No solution found."),
            (OutOfBounds(4, 2), "ERROR: Coordinates (4, 2) are outside the map"),
            (FileNotFoundError("nope.txt"), "ERROR: nope.txt"),
        ],
    )
    def test_reports_errors(self, error: Exception, message: str) -> None:
        def solve() -> None:
            raise error

        console, buffer = self.console()
        assert run_solver(solve, console) == 1
        assert buffer.getvalue().strip() == message

    def test_other_errors_propagate(self) -> None:
        def solve() -> None:
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            run_solver(solve)
