"""
Map parsing utilities.

Text format:
- One row per line, no delimiters between columns
- Each character is turned into a cell by a caller-supplied conversion
- All rows must convert to the same number of cells
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from grid_map import Map
from grid_types import CharToCell, EmptyMap, UnevenLines, UnexpectedCharacter

__all__ = ["parse_map", "cell_converter", "enum_converter", "enum_to_char"]


def parse_map(text: str, convert: CharToCell) -> Map:
    """
    Parse a map from a block of text.

    Each line becomes a row and each character is passed to ``convert``.
    Parsing stops at the first failure; no partial map is returned.

    Example:
        parse_map("#.#\\n...", {"#": "tree", ".": "open"}.__getitem__)
        Creates a 3x2 map whose (0, 0) cell is "tree".

    Args:
        text: Rows separated by newlines (a trailing newline is fine)
        convert: Maps one character to a cell. May raise UnexpectedCharacter;
                 a ValueError or KeyError is reported as UnexpectedCharacter too.

    Returns:
        The parsed Map

    Raises:
        UnexpectedCharacter: If a character has no cell mapping
        UnevenLines: If a row's length differs from row 0 (zero-based index)
        EmptyMap: If the text holds no cells
    """
    rows: list[list[Any]] = []
    width = 0

    for row_idx, line in enumerate(_split_rows(text)):
        cells: list[Any] = []

        for col_idx, char in enumerate(line):
            try:
                cells.append(convert(char))
            except (ValueError, KeyError) as exc:
                raise UnexpectedCharacter(char, row_idx, col_idx) from exc

        if row_idx == 0:
            width = len(cells)
        elif len(cells) != width:
            raise UnevenLines(row_idx, width, len(cells))

        rows.append(cells)

    if not rows or width == 0:
        raise EmptyMap()

    return Map(rows)


def _split_rows(text: str) -> list[str]:
    """Split into rows on newlines only; a trailing carriage return per line is dropped."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def cell_converter(table: Mapping[str, Any]) -> CharToCell:
    """
    Build a conversion from an explicit character table.

    Example:
        convert = cell_converter({".": Square.OPEN, "#": Square.TREE})
    """

    def convert(char: str) -> Any:
        try:
            return table[char]
        except KeyError:
            raise UnexpectedCharacter(char) from None

    return convert


def enum_converter(enum_type: type[Enum]) -> CharToCell:
    """Build a conversion for an Enum whose member values are display characters."""

    def convert(char: str) -> Enum:
        try:
            return enum_type(char)
        except ValueError:
            raise UnexpectedCharacter(char) from None

    return convert


def enum_to_char(cell: Enum) -> str:
    """Display a character-valued Enum member as its value."""
    return str(cell.value)

