"""Tests for ascii_render module."""

import simple_chalk as chalk  # type: ignore[import-untyped]

from ascii_render import render_map, render_maps_flow
from grid_map import Map


class TestRenderMap:
    """Tests for boxed single-map rendering."""

    def test_plain_box(self) -> None:
        grid = Map([["a", "b"], ["c", "d"]])
        assert render_map(grid) == [
            "┌──┐",
            "│ab│",
            "│cd│",
            "└──┘",
        ]

    def test_title_centred(self) -> None:
        grid = Map([list("abcdefgh")])
        lines = render_map(grid, title="hi")
        assert lines[0] == "┌── hi ──┐"
        assert len(lines[0]) == len(lines[-1])

    def test_title_too_long_is_dropped(self) -> None:
        grid = Map([["a"]])
        assert render_map(grid, title="much too long")[0] == "┌─┐"

    def test_cell_width(self) -> None:
        grid = Map([["a", "b"]])
        assert render_map(grid, cell_width=3)[1] == "│ a  b │"

    def test_to_char(self) -> None:
        grid = Map([[0, 1], [1, 0]])
        lines = render_map(grid, lambda cell: "#" if cell else ".")
        assert lines[1:3] == ["│.#│", "│#.│"]

    def test_highlight(self) -> None:
        """Highlighted positions are drawn inverted; others are untouched."""
        grid = Map([["a", "b"], ["c", "d"]])
        lines = render_map(grid, highlight={(1, 0)})
        assert lines[1] == "│a" + chalk.bgWhite.black("b") + "│"
        assert lines[2] == "│cd│"

    def test_color_fn(self) -> None:
        grid = Map([["a", "b"]])
        lines = render_map(grid, color_fn=lambda cell: chalk.red if cell == "a" else (lambda s: s))
        assert lines[1] == "│" + chalk.red("a") + "b│"


class TestRenderMapsFlow:
    """Tests for flow layout of several maps."""

    def test_side_by_side(self) -> None:
        maps = {
            "A": Map([["1", "2", "3"]]),
            "B": Map([["4", "5", "6"]]),
        }
        output = render_maps_flow(maps)
        lines = output.split("\n")
        assert lines[0] == "┌ A ┐  ┌ B ┐"
        assert lines[1] == "│123│  │456│"
        assert lines[2] == "└───┘  └───┘"

    def test_wraps_rows(self) -> None:
        """Maps that do not fit start a new row."""
        maps = {
            "A": Map([["1", "2", "3"]]),
            "B": Map([["4", "5", "6"]]),
        }
        lines = render_maps_flow(maps, terminal_width=8).split("\n")
        assert lines[1] == "│123│"
        assert lines[5] == "│456│"

    def test_pads_shorter_maps(self) -> None:
        maps = {
            "A": Map([["1"], ["2"]]),
            "B": Map([["3"]]),
        }
        lines = render_maps_flow(maps).split("\n")
        assert lines[2] == "│2│  └─┘"
        assert lines[3] == "└─┘     "
