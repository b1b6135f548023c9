#!/usr/bin/env python3
"""
Interactive viewer for the seating automaton.
Display a seat layout and step through its generations with keyboard commands.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_map
from grid_map import Map
from grid_parser import enum_converter, enum_to_char
from puzzle_io import configure_logging, load_first_map, run_solver
from seating import ADJACENT_RULES, SIGHT_RULES, Seat, SeatingRules, seat_color, step

logger = logging.getLogger(__name__)

PRESETS: tuple[tuple[str, SeatingRules], ...] = (
    ("adjacent", ADJACENT_RULES),
    ("line of sight", SIGHT_RULES),
)


class SeatingViewer:
    """Step through seating generations one key press at a time."""

    def __init__(self, grid: Map) -> None:
        self.original = grid
        self.grid = grid.copy()
        self.generation = 0
        self.stable = False
        self.preset = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def rules(self) -> SeatingRules:
        return PRESETS[self.preset][1]

    def generate_display(self) -> Panel:
        """Generate the current display with map and status."""
        name, rules = PRESETS[self.preset]

        status = Text()
        status.append("Rules: ", style="bold")
        status.append(f"{name} (tolerance {rules.tolerance})\n")
        status.append("Generation: ", style="bold")
        status.append(f"{self.generation}{' (stable)' if self.stable else ''}\n")
        status.append("Occupied: ", style="bold")
        status.append(f"{self.grid.count(Seat.TAKEN)}\n\n")

        map_text = "\n".join(render_map(self.grid, enum_to_char, color_fn=seat_color))
        status.append(Text.from_ansi(map_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N / Space - Next generation\n")
        status.append("  M - Switch rules (restarts)\n")
        status.append("  R - Reset to original layout\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Seating Automaton", border_style="green", width=max(80, self.grid.width + 6))

    def advance(self) -> None:
        if self.stable:
            self.status_message = f"Already stable at generation {self.generation}"
            return

        next_grid = step(self.grid, self.rules)
        if next_grid == self.grid:
            self.stable = True
            self.status_message = f"✓ Stable with {self.grid.count(Seat.TAKEN)} occupied seats"
        else:
            self.grid = next_grid
            self.generation += 1
            self.status_message = f"Advanced to generation {self.generation}"
        logger.debug("generation %d, stable=%s", self.generation, self.stable)

    def reset(self) -> None:
        """Reset the layout to its original state."""
        self.grid = self.original.copy()
        self.generation = 0
        self.stable = False
        self.status_message = "Layout reset to original state"

    def switch_rules(self) -> None:
        self.preset = (self.preset + 1) % len(PRESETS)
        self.reset()
        self.status_message = f"Switched to {PRESETS[self.preset][0]} rules"

    def run(self) -> None:
        """Run the viewer until the user quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "n" or key == " ":
                        self.advance()
                    elif key.lower() == "m":
                        self.switch_rules()
                    elif key.lower() == "r":
                        self.reset()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Step through seating generations interactively.")
    parser.add_argument("inputs", nargs="+", help="seat layout files; the first that parses is used")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    def solve() -> None:
        SeatingViewer(load_first_map(args.inputs, enum_converter(Seat))).run()

    return run_solver(solve)


if __name__ == "__main__":
    sys.exit(main())
