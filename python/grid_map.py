"""
Fixed-size 2D map of caller-defined cells.

Supports wrapped and strict lookup, single-cell mutation, directional ray
queries and row-major iteration. Cells are treated as immutable values
(typically Enum members), so lookups hand them out directly.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence

from grid_types import (
    CellPredicate,
    CellToChar,
    CharToCell,
    Direction,
    EmptyMap,
    OutOfBounds,
    UnevenLines,
)

__all__ = ["Map", "Location"]

# (x, y, cell) triple yielded by Map.locations()
Location = tuple[int, int, Any]


def _always(cell: Any) -> bool:
    return True


class Map:
    """A rectangular grid of cells, indexed as (x, y) with y growing downward."""

    __slots__ = ("_width", "_height", "_rows")

    def __init__(self, rows: Iterable[Sequence[Any]]) -> None:
        data = [list(row) for row in rows]
        if not any(data):
            raise EmptyMap()

        width = len(data[0])
        for y, row in enumerate(data):
            if len(row) != width:
                raise UnevenLines(y, width, len(row))

        self._width = width
        self._height = len(data)
        self._rows = data

    @classmethod
    def parse(cls, text: str, convert: CharToCell) -> Map:
        """Build a map from text, one character per cell. See grid_parser.parse_map."""
        from grid_parser import parse_map

        return parse_map(text, convert)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def at(self, x: int, y: int) -> Any | None:
        """Look up a cell, wrapping x around the width. None if y is off the map."""
        if not 0 <= y < self._height:
            return None
        return self._rows[y][x % self._width]

    def at_unwrapped(self, x: int, y: int) -> Any | None:
        """Look up a cell without wrapping. None if (x, y) is off the map."""
        if not self.in_bounds(x, y):
            return None
        return self._rows[y][x]

    def set(self, x: int, y: int, value: Any) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y)
        self._rows[y][x] = value

    def row(self, y: int) -> tuple[Any, ...]:
        if not 0 <= y < self._height:
            raise OutOfBounds(0, y)
        return tuple(self._rows[y])

    # -------------------------------------------------------------------------
    # Ray queries
    # -------------------------------------------------------------------------

    def view(self, x: int, y: int, direction: Direction, predicate: CellPredicate = _always) -> Any | None:
        """
        Cast a ray from (x, y) and return the first cell the predicate accepts.

        The origin itself is never examined. Returns None once the ray
        leaves the map without a match.
        """
        dx, dy = direction.run, direction.rise
        cx, cy = x + dx, y + dy
        while self.in_bounds(cx, cy):
            cell = self._rows[cy][cx]
            if predicate(cell):
                return cell
            cx += dx
            cy += dy
        return None

    def adjacents_until(self, x: int, y: int, predicate: CellPredicate) -> list[Any]:
        """Nearest accepted cell in each of the 8 directions (NW, N, NE, W, E, SW, S, SE)."""
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y)

        found = []
        for direction in Direction:
            cell = self.view(x, y, direction, predicate)
            if cell is not None:
                found.append(cell)
        return found

    def adjacents(self, x: int, y: int) -> list[Any]:
        """Immediate 8-neighbours of (x, y) that lie on the map."""
        return self.adjacents_until(x, y, _always)

    # -------------------------------------------------------------------------
    # Whole-map operations
    # -------------------------------------------------------------------------

    def locations(self) -> Iterator[Location]:
        """Yield (x, y, cell) for every cell in row-major order."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def count(self, value: Any) -> int:
        return sum(1 for _, _, cell in self.locations() if cell == value)

    def copy(self) -> Map:
        """Return an independent copy; mutating one never affects the other."""
        clone = Map.__new__(Map)
        clone._width = self._width
        clone._height = self._height
        clone._rows = [row[:] for row in self._rows]
        return clone

    __copy__ = copy

    def render(self, to_char: CellToChar = str) -> str:
        """Render as text, one row per line."""
        return "\n".join("".join(to_char(cell) for cell in row) for row in self._rows)

    def print(self, to_char: CellToChar = str) -> None:
        print(self.render(to_char))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Map(width={self._width}, height={self._height})"
