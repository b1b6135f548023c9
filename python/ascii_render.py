"""
ASCII rendering for maps.

Provides two rendering approaches:
1. Boxed rendering of a single map, with optional per-cell colouring and
   highlighted positions
2. Flow rendering - several titled maps laid out side by side
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Mapping

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_map import Map
from grid_types import CellToChar

logger = logging.getLogger(__name__)

__all__ = ["Colorizer", "render_map", "render_maps_flow"]

Colorizer = Callable[[str], str]


def render_map(
    grid: Map,
    to_char: CellToChar = str,
    title: str | None = None,
    cell_width: int = 1,
    highlight: Collection[tuple[int, int]] | None = None,
    color_fn: Callable[[Any], Colorizer] | None = None,
) -> list[str]:
    """
    Render a map inside a box-drawing border.

    Args:
        grid: The map to render
        to_char: Converts a cell to its display character
        title: Optional title centred in the top border
        cell_width: Characters per cell (default 1)
        highlight: Optional (x, y) positions drawn on a white background
        color_fn: Optional function returning a colouriser for a cell

    Returns:
        List of strings representing the rendered lines
    """
    highlighted = set(highlight) if highlight else set()
    box_width = grid.width * cell_width + 2

    top = "┌" + "─" * (box_width - 2) + "┐"
    if title:
        label = f" {title} "
        if len(label) <= box_width - 2:
            start = (box_width - len(label)) // 2
            top = "┌" + "─" * (start - 1) + label + "─" * (box_width - start - len(label) - 1) + "┐"

    lines = [top]
    line_parts: list[str] = []

    for x, y, cell in grid.locations():
        if x == 0:
            line_parts = ["│"]

        char = to_char(cell)
        content = char if cell_width == 1 else char.center(cell_width)

        if (x, y) in highlighted:
            content = chalk.bgWhite.black(content)
        elif color_fn is not None:
            content = color_fn(cell)(content)

        line_parts.append(content)

        if x == grid.width - 1:
            line_parts.append("│")
            lines.append("".join(line_parts))

    lines.append("└" + "─" * (box_width - 2) + "┘")
    return lines


def render_maps_flow(
    maps: Mapping[str, Map],
    to_char: CellToChar = str,
    terminal_width: int = 120,
    cell_width: int = 1,
    color_fn: Callable[[Any], Colorizer] | None = None,
) -> str:
    """
    Render several maps in flow layout (as many per row as fit).

    Args:
        maps: Titles mapped to the maps to render, in display order
        to_char: Converts a cell to its display character
        terminal_width: Maximum width for layout (default 120)
        cell_width: Characters per cell (default 1)
        color_fn: Optional function returning a colouriser for a cell

    Returns:
        Rendered string with all maps in flow layout
    """
    rendered: dict[str, list[str]] = {}
    widths: dict[str, int] = {}

    for title, grid in maps.items():
        rendered[title] = render_map(grid, to_char, title, cell_width, color_fn=color_fn)
        # ANSI codes inflate len(), so measure from the map itself
        widths[title] = grid.width * cell_width + 2

    output_lines: list[str] = []
    spacing = 2

    row_titles: list[str] = []
    row_width = 0

    for title in rendered:
        needed = widths[title] + (spacing if row_titles else 0)

        if row_titles and row_width + needed > terminal_width:
            _flush_row(row_titles, rendered, widths, output_lines, spacing)
            row_titles = []
            row_width = 0
            needed = widths[title]

        row_titles.append(title)
        row_width += needed

    if row_titles:
        _flush_row(row_titles, rendered, widths, output_lines, spacing)

    logger.debug("render_maps_flow: %d maps, %d lines", len(rendered), len(output_lines))
    return "\n".join(output_lines)


def _flush_row(
    titles: list[str],
    rendered: dict[str, list[str]],
    widths: dict[str, int],
    output_lines: list[str],
    spacing: int,
) -> None:
    """Helper to flush a row of maps to output_lines."""
    height = max(len(rendered[t]) for t in titles)

    for line_idx in range(height):
        parts = []
        for title in titles:
            lines = rendered[title]
            parts.append(lines[line_idx] if line_idx < len(lines) else " " * widths[title])
        output_lines.append((" " * spacing).join(parts))

    output_lines.append("")
