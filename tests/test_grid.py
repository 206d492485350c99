"""Tests for the grid model."""

import logging

import pytest

from labyrinth.core.grid import (
    PATH_MARKER,
    Cell,
    CellType,
    Direction,
    Grid,
    GridError,
    MalformedInputError,
    UnknownSymbolError,
    classify_char,
)


class TestClassifyChar:
    """Tests for character classification."""

    @pytest.mark.parametrize(
        "char, expected",
        [
            ("_", CellType.EMPTY),
            ("#", CellType.WALL),
            ("S", CellType.START),
            ("E", CellType.FINISH),
            ("*", CellType.PATH),
        ],
    )
    def test_known_symbols(self, char, expected):
        """Test that each symbol maps to its cell type."""
        assert classify_char(char) == expected
        assert CellType.from_char(char) == expected

    @pytest.mark.parametrize("char", ["X", ".", " ", "s", "e", "?"])
    def test_unknown_symbol_raises_error(self, char):
        """Test that characters outside the symbol set are rejected."""
        with pytest.raises(UnknownSymbolError, match="Unknown symbol"):
            classify_char(char)

    def test_unknown_symbol_is_grid_error(self):
        """Test that UnknownSymbolError belongs to the GridError family."""
        with pytest.raises(GridError):
            classify_char("?")


class TestCell:
    """Tests for cell coordinates."""

    def test_structural_equality(self):
        """Test that cells compare by value."""
        assert Cell(1, 2) == Cell(1, 2)
        assert Cell(1, 2) != Cell(2, 1)
        assert len({Cell(0, 0), Cell(0, 0)}) == 1

    def test_move(self):
        """Test moving in each direction."""
        cell = Cell(2, 2)
        assert cell.move(Direction.EAST) == Cell(2, 3)
        assert cell.move(Direction.SOUTH) == Cell(3, 2)
        assert cell.move(Direction.WEST) == Cell(2, 1)
        assert cell.move(Direction.NORTH) == Cell(1, 2)

    def test_to_dict(self):
        """Test Cell.to_dict() method."""
        assert Cell(3, 4).to_dict() == {"row": 3, "col": 4}


class TestGridLoad:
    """Tests for loading grids."""

    def test_load_dimensions_and_endpoints(self, sample_maze_lines):
        """Test that loading records size, start and finish."""
        grid = Grid.from_lines(sample_maze_lines)

        assert grid.rows == 5
        assert grid.cols == 5
        assert grid.start == Cell(1, 1)
        assert grid.finish == Cell(3, 3)

    def test_load_from_text(self):
        """Test that text with a trailing newline loads like its lines."""
        grid = Grid.from_text("S__\n_#_\n__E\n")

        assert grid.rows == 3
        assert grid.cols == 3
        assert grid.serialize() == ["S__", "_#_", "__E"]

    def test_load_from_text_with_crlf(self):
        """Test that Windows line endings are accepted."""
        grid = Grid.from_text("S_\r\n_E\r\n")
        assert grid.serialize() == ["S_", "_E"]

    @pytest.mark.parametrize("text", ["S_E\x0b", "S_E\x0c", "S_E\x85", "S_E "])
    def test_line_separator_lookalikes_are_unknown_symbols(self, text):
        """Test that only '\\n' ends a row; other separators are cells."""
        with pytest.raises(UnknownSymbolError) as exc_info:
            Grid.from_text(text)

        assert exc_info.value.cell == Cell(0, 3)

    def test_group_separator_does_not_split_row(self):
        """Test that '\\x1c' inside a line is rejected, not turned into a row break."""
        with pytest.raises(UnknownSymbolError) as exc_info:
            Grid.from_text("S_E\x1c___")

        assert exc_info.value.char == "\x1c"

    def test_lone_carriage_return_is_unknown_symbol(self):
        """Test that '\\r' not followed by '\\n' is not a line break."""
        with pytest.raises(UnknownSymbolError):
            Grid.from_text("S_\r_E")

    def test_only_one_trailing_newline_dropped(self):
        """Test that a blank last row is kept and makes the grid jagged."""
        assert Grid.from_text("S_E\n").rows == 1
        with pytest.raises(MalformedInputError):
            Grid.from_text("S_E\n\n")

    def test_empty_input_gives_empty_grid(self):
        """Test that empty input is a 0x0 grid without endpoints."""
        grid = Grid.from_lines([])

        assert grid.rows == 0
        assert grid.cols == 0
        assert grid.start is None
        assert grid.finish is None
        assert grid.serialize() == []

    def test_missing_endpoints_are_none(self):
        """Test that a grid without S or E still loads."""
        grid = Grid.from_lines(["___", "_#_"])
        assert grid.start is None
        assert grid.finish is None

    def test_unknown_symbol_reports_position(self):
        """Test that an unknown character is reported with its coordinate."""
        with pytest.raises(UnknownSymbolError) as exc_info:
            Grid.from_lines(["S__", "_X_", "__E"])

        assert exc_info.value.char == "X"
        assert exc_info.value.cell == Cell(1, 1)
        assert "(1, 1)" in str(exc_info.value)

    def test_jagged_rows_raise_error(self):
        """Test that rows of different length are rejected."""
        with pytest.raises(MalformedInputError, match="Row 1 has 2 columns, expected 3"):
            Grid.from_lines(["S__", "__", "__E"])

    def test_non_string_row_raises_error(self):
        """Test that rows must be strings."""
        with pytest.raises(MalformedInputError):
            Grid.from_lines(["S_E", None])

    def test_constructor_accepts_strings(self):
        """Test that Grid() takes string rows and they can be coloured."""
        grid = Grid(["S_E"])
        grid.color(Cell(0, 1))

        assert grid.serialize() == ["S*E"]

    def test_constructor_copies_rows(self):
        """Test that colouring leaves the caller's rows untouched."""
        rows = [list("S_E")]
        grid = Grid(rows)
        grid.color(Cell(0, 1))

        assert rows == [["S", "_", "E"]]
        assert grid.serialize() == ["S*E"]

    def test_duplicate_start_last_wins(self, caplog):
        """Test that the last scanned start is kept and a warning logged."""
        with caplog.at_level(logging.WARNING, logger="labyrinth.core.grid"):
            grid = Grid.from_lines(["S_S", "__E"])

        assert grid.start == Cell(0, 2)
        assert "Multiple start cells" in caplog.text

    def test_duplicate_finish_last_wins(self):
        """Test that the last scanned finish is kept."""
        grid = Grid.from_lines(["E_S", "__E"])
        assert grid.finish == Cell(1, 2)

    def test_round_trip(self, sample_maze_lines):
        """Test that loading serialized output gives an identical grid."""
        grid = Grid.from_lines(sample_maze_lines)
        again = Grid.from_lines(grid.serialize())

        assert again == grid
        assert again.start == grid.start
        assert again.finish == grid.finish


class TestGridQueries:
    """Tests for bounds and type lookups."""

    def test_in_bounds(self):
        """Test bounds checks on all four edges."""
        grid = Grid.from_lines(["S__", "__E"])

        assert grid.in_bounds(Cell(0, 0))
        assert grid.in_bounds(Cell(1, 2))
        assert not grid.in_bounds(Cell(-1, 0))
        assert not grid.in_bounds(Cell(0, -1))
        assert not grid.in_bounds(Cell(2, 0))
        assert not grid.in_bounds(Cell(0, 3))

    def test_in_bounds_empty_grid(self):
        """Test that nothing is in bounds on an empty grid."""
        assert not Grid.from_lines([]).in_bounds(Cell(0, 0))

    def test_cell_type(self, sample_maze_lines):
        """Test typed lookup of stored characters."""
        grid = Grid.from_lines(sample_maze_lines)

        assert grid.cell_type(Cell(0, 0)) == CellType.WALL
        assert grid.cell_type(Cell(1, 1)) == CellType.START
        assert grid.cell_type(Cell(1, 2)) == CellType.EMPTY
        assert grid.cell_type(Cell(3, 3)) == CellType.FINISH

    def test_count(self, sample_maze_lines):
        """Test counting cells by type."""
        grid = Grid.from_lines(sample_maze_lines)

        assert grid.count(CellType.START) == 1
        assert grid.count(CellType.EMPTY) == 6
        assert grid.count(CellType.PATH) == 0

    def test_to_dict(self):
        """Test Grid.to_dict() summary."""
        grid = Grid.from_lines(["S_E"])
        assert grid.to_dict() == {
            "rows": 1,
            "cols": 3,
            "start": {"row": 0, "col": 0},
            "finish": {"row": 0, "col": 2},
        }


class TestGridColor:
    """Tests for path colouring."""

    def test_color_overwrites_cell(self):
        """Test that colouring replaces the stored character."""
        grid = Grid.from_lines(["S__E"])
        grid.color(Cell(0, 1))

        assert grid.char_at(Cell(0, 1)) == PATH_MARKER
        assert grid.cell_type(Cell(0, 1)) == CellType.PATH
        assert grid.serialize() == ["S*_E"]
        assert grid.to_text() == "S*_E"

    def test_color_keeps_dimensions(self):
        """Test that colouring never changes grid size."""
        grid = Grid.from_lines(["S_", "_E"])
        grid.color(Cell(0, 1))
        grid.color(Cell(1, 0))

        assert (grid.rows, grid.cols) == (2, 2)
        assert grid.serialize() == ["S*", "*E"]
