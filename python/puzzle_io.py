"""
Input loading and top-level error reporting shared by the puzzle solvers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from rich.console import Console

from grid_map import Map
from grid_parser import parse_map
from grid_types import CharToCell, MapOperationError, MapParseError

logger = logging.getLogger(__name__)

__all__ = [
    "PuzzleError",
    "NoInputFound",
    "NoSolutionFound",
    "configure_logging",
    "load_first_map",
    "run_solver",
]


class PuzzleError(Exception):
    """Base class for solver-level failures."""


class NoInputFound(PuzzleError):
    def __init__(self) -> None:
        super().__init__("No valid inputs found")


class NoSolutionFound(PuzzleError):
    def __init__(self) -> None:
        super().__init__("No solution found.")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def load_first_map(paths: Iterable[str | Path], convert: CharToCell) -> Map:
    """
    Return the map from the first file that parses.

    Files that fail to parse are logged and skipped. Read errors propagate.

    Raises:
        NoInputFound: If no file yields a map
    """
    for path in paths:
        contents = Path(path).read_text()
        try:
            grid = parse_map(contents, convert)
        except MapParseError as e:
            logger.warning("Skipping file %s: Parse error: %s", path, e)
            continue
        logger.debug("Loaded %dx%d map from %s", grid.width, grid.height, path)
        return grid

    raise NoInputFound()


def run_solver(solve: Callable[[], None], console: Console | None = None) -> int:
    """Run a solver body, reporting failures as ``ERROR: ...``. Returns an exit status."""
    try:
        solve()
    except (PuzzleError, MapParseError, MapOperationError, OSError) as e:
        (console or Console(stderr=True)).print(f"ERROR: {e}", style="bold red", markup=False, highlight=False)
        return 1
    return 0
