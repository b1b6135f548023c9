#!/usr/bin/env python3
"""
Seat-occupancy cellular automaton over a ferry waiting area.

Every generation is computed from a snapshot of the previous one:
- An empty seat with no occupied neighbours becomes occupied
- An occupied seat with at least ``tolerance`` occupied neighbours empties
- Floor never changes
The simulation stops once a generation reproduces itself.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Sequence

import simple_chalk as chalk  # type: ignore[import-untyped]

from ascii_render import Colorizer, render_maps_flow
from grid_map import Map
from grid_parser import enum_converter, enum_to_char
from puzzle_io import configure_logging, load_first_map, run_solver

logger = logging.getLogger(__name__)

__all__ = [
    "Seat",
    "ViewStrategy",
    "SeatingRules",
    "ADJACENT_RULES",
    "SIGHT_RULES",
    "occupied_neighbours",
    "step",
    "evolve",
    "stable_occupancy",
    "seat_color",
    "main",
]


class Seat(Enum):
    FLOOR = "."
    EMPTY = "L"
    TAKEN = "#"

    def is_seat(self) -> bool:
        return self is not Seat.FLOOR


class ViewStrategy(Enum):
    """Which seats count as neighbours."""

    ADJACENT = "adjacent"  # The 8 touching cells
    LINE_OF_SIGHT = "sight"  # First seat visible in each of the 8 directions


@dataclass(frozen=True)
class SeatingRules:
    """Rules governing one seating simulation."""

    tolerance: int = 4
    view: ViewStrategy = ViewStrategy.ADJACENT


ADJACENT_RULES = SeatingRules(tolerance=4, view=ViewStrategy.ADJACENT)
SIGHT_RULES = SeatingRules(tolerance=5, view=ViewStrategy.LINE_OF_SIGHT)


def occupied_neighbours(grid: Map, x: int, y: int, rules: SeatingRules) -> int:
    if rules.view is ViewStrategy.LINE_OF_SIGHT:
        neighbours = grid.adjacents_until(x, y, Seat.is_seat)
    else:
        neighbours = grid.adjacents(x, y)
    return sum(1 for seat in neighbours if seat is Seat.TAKEN)


def step(grid: Map, rules: SeatingRules) -> Map:
    """Compute the next generation; ``grid`` is left untouched."""
    next_grid = grid.copy()

    for x, y, seat in grid.locations():
        if seat is Seat.FLOOR:
            continue
        taken = occupied_neighbours(grid, x, y, rules)
        if seat is Seat.EMPTY and taken == 0:
            next_grid.set(x, y, Seat.TAKEN)
        elif seat is Seat.TAKEN and taken >= rules.tolerance:
            next_grid.set(x, y, Seat.EMPTY)

    return next_grid


def evolve(grid: Map, rules: SeatingRules = ADJACENT_RULES) -> Iterator[Map]:
    """
    Yield successive generations, starting with ``grid`` itself.

    The last generation yielded is the stable one. The caller's map is
    never mutated.
    """
    current = grid.copy()
    while True:
        next_grid = step(current, rules)
        yield current
        if next_grid == current:
            return
        current = next_grid


def stable_occupancy(grid: Map, rules: SeatingRules = ADJACENT_RULES) -> tuple[int, int]:
    """Run to stability. Returns (number of generations, occupied seats)."""
    generations = 0
    final = grid
    for generations, final in enumerate(evolve(grid, rules), start=1):
        pass
    return generations, final.count(Seat.TAKEN)


_SEAT_COLORS: dict[Seat, Colorizer] = {
    Seat.FLOOR: chalk.blue,
    Seat.EMPTY: chalk.green,
    Seat.TAKEN: chalk.red,
}


def seat_color(seat: Seat) -> Colorizer:
    return _SEAT_COLORS[seat]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate seat occupancy until it stabilises.")
    parser.add_argument("inputs", nargs="+", help="seat layout files; the first that parses is used")
    parser.add_argument("--tolerance", type=int, help="run a single simulation with this tolerance")
    parser.add_argument(
        "--view",
        choices=[v.value for v in ViewStrategy],
        default=ViewStrategy.ADJACENT.value,
        help="neighbour rule for --tolerance runs (default: adjacent)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print every generation")
    parser.add_argument("--no-color", action="store_true", help="plain output for the final layouts")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _simulate(label: str, grid: Map, rules: SeatingRules, quiet: bool) -> Map:
    final = grid
    generations = 0
    for idx, generation in enumerate(evolve(grid, rules)):
        final = generation
        generations = idx + 1
        logger.debug("%s: generation %d has %d occupied seats", label, idx, generation.count(Seat.TAKEN))
        if not quiet:
            print(f"{label} map, step #{idx}")
            generation.print(enum_to_char)
            print(f"# of occupied seats: {generation.count(Seat.TAKEN)}\n")
    logger.info("%s map stable after %d generations", label, generations)
    print(f"{label} map settles with {final.count(Seat.TAKEN)} occupied seats")
    return final


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.tolerance is not None:
        runs = {"Custom": SeatingRules(args.tolerance, ViewStrategy(args.view))}
    else:
        runs = {"Base": ADJACENT_RULES, "Extended": SIGHT_RULES}

    def solve() -> None:
        grid = load_first_map(args.inputs, enum_converter(Seat))
        finals = {label: _simulate(label, grid, rules, args.quiet) for label, rules in runs.items()}
        color_fn: Callable[[Seat], Colorizer] | None = None if args.no_color else seat_color
        print(render_maps_flow(finals, enum_to_char, color_fn=color_fn))

    return run_solver(solve)


if __name__ == "__main__":
    sys.exit(main())
