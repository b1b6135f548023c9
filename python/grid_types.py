"""
Shared type definitions for the gridmap system.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

__all__ = [
    "Direction",
    "CharToCell",
    "CellToChar",
    "CellPredicate",
    "MapParseError",
    "UnexpectedCharacter",
    "UnevenLines",
    "EmptyMap",
    "MapOperationError",
    "OutOfBounds",
]


class Direction(Enum):
    """Compass direction for ray queries, valued as (rise, run)."""

    NW = (-1, -1)
    N = (-1, 0)  # Up (decreasing y)
    NE = (-1, 1)
    W = (0, -1)
    E = (0, 1)
    SW = (1, -1)
    S = (1, 0)  # Down (increasing y)
    SE = (1, 1)

    @property
    def rise(self) -> int:
        return self.value[0]

    @property
    def run(self) -> int:
        return self.value[1]


# Conversion callbacks supplied by callers at parse and print time
CharToCell = Callable[[str], Any]
CellToChar = Callable[[Any], str]
CellPredicate = Callable[[Any], bool]


# =============================================================================
# Errors
# =============================================================================


class MapParseError(ValueError):
    """Base class for failures turning text into a map."""


class UnexpectedCharacter(MapParseError):
    """A source character has no cell mapping."""

    def __init__(self, char: str, row: int | None = None, col: int | None = None) -> None:
        self.char = char
        self.row = row
        self.col = col
        message = f"Unexpected character parsing map: {char!r}"
        if row is not None and col is not None:
            message += f"\n  Row {row}, column {col}"
        super().__init__(message)


class UnevenLines(MapParseError):
    """A row's length differs from the width set by row 0."""

    def __init__(self, row: int, expected: int | None = None, actual: int | None = None) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        message = f"Map has uneven width at line {row}"
        if expected is not None and actual is not None:
            message += (
                f"\n  Expected: {expected} columns (from row 0)"
                f"\n  Row {row}: {actual} columns"
            )
        super().__init__(message)


class EmptyMap(MapParseError):
    """No rows to build a map from."""

    def __init__(self) -> None:
        super().__init__("Map has no rows")


class MapOperationError(Exception):
    """Base class for failures operating on an existing map."""


class OutOfBounds(MapOperationError, IndexError):
    """Coordinates fall outside the map."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Coordinates ({x}, {y}) are outside the map")
