"""
Test suite for the grid engine.

Covers placement, the eight-direction word scan, clearing and gravity.
"""

import pytest

from src.engine import Grid, ColumnFullError, InvalidColumnError, DIRECTIONS
from src.words import Dictionary


def cats_dictionary() -> Dictionary:
    return Dictionary.from_words(["cats"])


class TestGridConstruction:
    """Test cases for building grids."""

    def test_empty_grid(self):
        """A new grid has every cell empty."""
        grid = Grid.empty(7, 7)
        assert grid.rows == 7
        assert grid.cols == 7
        assert grid.is_empty()
        assert all(len(row) == 7 for row in grid.cells)

    def test_non_square_grid(self):
        """Rows and columns are independent."""
        grid = Grid.empty(5, 9)
        assert len(grid.cells) == 5
        assert len(grid.cells[0]) == 9

    def test_row_count_mismatch_fails(self):
        """Cells that don't match the declared row count are rejected."""
        with pytest.raises(ValueError):
            Grid(rows=3, cols=2, cells=[[None, None]])

    def test_ragged_rows_fail(self):
        """Rows of different widths are rejected."""
        with pytest.raises(ValueError):
            Grid(rows=2, cols=2, cells=[[None, None], [None]])

    def test_invalid_cell_value_fails(self):
        """Cells must hold a single letter."""
        with pytest.raises(ValueError):
            Grid(rows=1, cols=2, cells=[["AB", None]])

    def test_non_ascii_cell_fails(self):
        """Accented and other non-ASCII letters are not grid letters."""
        with pytest.raises(ValueError):
            Grid(rows=1, cols=2, cells=[["é", None]])
        with pytest.raises(ValueError):
            Grid(rows=1, cols=2, cells=[["ß", None]])

    def test_zero_dimension_fails(self):
        """A grid needs at least one row and one column."""
        with pytest.raises(ValueError):
            Grid.empty(0, 7)

    def test_lowercase_cells_are_uppercased(self):
        """Letters are stored uppercase."""
        grid = Grid(rows=1, cols=2, cells=[["a", None]])
        assert grid.get(0, 0) == "A"

    def test_from_rows(self):
        """Build a grid from strings with '.' for blanks."""
        grid = Grid.from_rows(["..", "AB"])
        assert grid.cells == [[None, None], ["A", "B"]]


class TestPlacement:
    """Test cases for dropping letters into columns."""

    def test_letter_lands_on_floor(self):
        """A letter dropped into an empty column lands in the bottom row."""
        grid = Grid.empty(7, 7)
        row = grid.place(2, "A")
        assert row == 6
        assert grid.get(6, 2) == "A"

    def test_letters_stack(self):
        """Successive letters stack upward."""
        grid = Grid.empty(7, 7)
        assert grid.place(0, "A") == 6
        assert grid.place(0, "B") == 5
        assert grid.place(0, "C") == 4
        assert grid.column_letters(0) == ["C", "B", "A"]

    def test_full_column_raises_and_leaves_grid_unchanged(self):
        """Placing into a full column signals ColumnFullError without mutating."""
        grid = Grid.empty(3, 3)
        for letter in "XYZ":
            grid.place(1, letter)
        before = grid.copy_cells()

        with pytest.raises(ColumnFullError) as exc_info:
            grid.place(1, "Q")

        assert exc_info.value.column == 1
        assert grid.cells == before

    def test_out_of_range_column_raises(self):
        """Columns outside the grid are rejected."""
        grid = Grid.empty(3, 3)
        with pytest.raises(InvalidColumnError):
            grid.place(3, "A")
        with pytest.raises(InvalidColumnError):
            grid.place(-1, "A")
        assert grid.is_empty()

    def test_lowercase_letter_is_uppercased(self):
        grid = Grid.empty(2, 2)
        grid.place(0, "q")
        assert grid.get(1, 0) == "Q"

    def test_non_letter_rejected(self):
        """Only single letters can be placed."""
        grid = Grid.empty(2, 2)
        with pytest.raises(ValueError):
            grid.place(0, "1")
        with pytest.raises(ValueError):
            grid.place(0, "AB")

    def test_non_ascii_letter_rejected(self):
        """A letter that uppercases to two characters never reaches a cell."""
        grid = Grid.empty(2, 2)
        with pytest.raises(ValueError):
            grid.place(0, "ß")
        with pytest.raises(ValueError):
            grid.place(0, "é")
        assert grid.is_empty()

    def test_placement_keeps_grid_settled(self):
        """Placed letters never float."""
        grid = Grid.empty(4, 4)
        for column in (0, 1, 1, 3, 0, 1):
            grid.place(column, "A")
        assert grid.is_settled()

    def test_is_full(self):
        grid = Grid.empty(2, 2)
        for column in (0, 0, 1):
            grid.place(column, "A")
        assert not grid.is_full()
        grid.place(1, "A")
        assert grid.is_full()


class TestWordScan:
    """Test cases for finding words along rays."""

    def test_eight_directions(self):
        """All eight ray directions are scanned."""
        assert len(DIRECTIONS) == 8
        assert len(set(DIRECTIONS)) == 8

    def test_empty_grid_has_no_matches(self):
        """Scanning an empty grid returns nothing."""
        grid = Grid.empty(7, 7)
        assert grid.find_words(cats_dictionary(), 4) == []

    def test_horizontal_word(self):
        """CATS reading right from (3, 0) is found with exactly its four cells."""
        grid = Grid.empty(7, 7)
        for x, letter in enumerate("CATS"):
            grid.cells[3][x] = letter

        matches = grid.find_words(cats_dictionary(), 4)

        assert len(matches) == 1
        assert matches[0].word == "CATS"
        assert matches[0].positions == [(3, 0), (3, 1), (3, 2), (3, 3)]

    def test_reversed_word_read_leftward(self):
        """STAC on the grid reads CATS from the rightmost cell going left."""
        grid = Grid.empty(7, 7)
        for x, letter in enumerate("STAC"):
            grid.cells[3][x] = letter

        matches = grid.find_words(cats_dictionary(), 4)

        assert len(matches) == 1
        assert matches[0].word == "CATS"
        assert matches[0].positions == [(3, 3), (3, 2), (3, 1), (3, 0)]

    def test_vertical_word_read_upward(self):
        """Letters stacked C, A, T, S from the floor read upward."""
        grid = Grid.empty(7, 7)
        for letter in "CATS":
            grid.place(0, letter)

        matches = grid.find_words(cats_dictionary(), 4)

        assert [m.word for m in matches] == ["CATS"]
        assert matches[0].positions == [(6, 0), (5, 0), (4, 0), (3, 0)]

    def test_vertical_word_read_downward(self):
        grid = Grid.from_rows(["C...", "A...", "T...", "S..."])
        matches = grid.find_words(cats_dictionary(), 4)
        assert matches[0].positions == [(0, 0), (1, 0), (2, 0), (3, 0)]

    def test_diagonal_word(self):
        """Diagonal runs are found."""
        grid = Grid.from_rows([
            "C...",
            ".A..",
            "..T.",
            "...S",
        ])
        matches = grid.find_words(cats_dictionary(), 4)
        assert len(matches) == 1
        assert matches[0].positions == [(0, 0), (1, 1), (2, 2), (3, 3)]

    def test_anti_diagonal_word_read_upward(self):
        """Up-right diagonal runs are found."""
        grid = Grid.from_rows([
            "...S",
            "..T.",
            ".A..",
            "C...",
        ])
        matches = grid.find_words(cats_dictionary(), 4)
        assert len(matches) == 1
        assert matches[0].positions == [(3, 0), (2, 1), (1, 2), (0, 3)]

    def test_scan_is_case_insensitive(self):
        """Dictionary lookups ignore case."""
        grid = Grid.from_rows(["CATS"])
        dictionary = Dictionary.from_words(["Cats"])
        assert [m.word for m in grid.find_words(dictionary, 4)] == ["CATS"]

    def test_no_false_positives(self):
        """A grid with no dictionary run yields no matches."""
        grid = Grid.from_rows([
            "XQZJ",
            "VKQX",
            "ZJVK",
            "QXZJ",
        ])
        dictionary = Dictionary.from_words(["cats", "word", "dogs"])
        assert grid.find_words(dictionary, 4) == []

    def test_short_words_ignored(self):
        """Runs shorter than the minimum length never match."""
        grid = Grid.from_rows(["CAT."])
        dictionary = Dictionary.from_words(["cat"])
        assert grid.find_words(dictionary, 4) == []
        assert [m.word for m in grid.find_words(dictionary, 3)] == ["CAT"]

    def test_gap_ends_run(self):
        """Empty cells break a run."""
        grid = Grid.from_rows(["CA.TS"])
        assert grid.find_words(cats_dictionary(), 4) == []

    def test_longer_word_from_same_origin(self):
        """The ray keeps walking after a hit to find longer words."""
        grid = Grid.from_rows(["WORDS"])
        dictionary = Dictionary.from_words(["word", "words"])

        matches = grid.find_words(dictionary, 4)

        assert [m.word for m in matches] == ["WORD", "WORDS"]
        assert matches[0].positions == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert matches[1].positions == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]

    def test_overlapping_words_share_cells(self):
        """Words crossing at a cell are both reported."""
        grid = Grid.from_rows([
            "...S",
            "...G",
            "...O",
            "WORD",
        ])
        dictionary = Dictionary.from_words(["word", "dogs"])

        matches = grid.find_words(dictionary, 4)
        found = {m.word: m.positions for m in matches}

        assert set(found) == {"WORD", "DOGS"}
        assert found["DOGS"] == [(3, 3), (2, 3), (1, 3), (0, 3)]
        union = {pos for m in matches for pos in m.positions}
        assert len(union) == 7

    def test_palindrome_found_both_ways(self):
        """A palindrome is reported once per reading direction."""
        grid = Grid.from_rows(["NOON"])
        dictionary = Dictionary.from_words(["noon"])
        matches = grid.find_words(dictionary, 4)
        assert len(matches) == 2
        assert {pos for m in matches for pos in m.positions} == {(0, 0), (0, 1), (0, 2), (0, 3)}


class TestClearAndGravity:
    """Test cases for removing cells and settling columns."""

    def test_gravity_idempotent_on_settled_grid(self):
        """Settling a gap-free grid changes nothing."""
        grid = Grid.from_rows([
            "....",
            ".B..",
            ".AC.",
            "XYZW",
        ])
        before = grid.copy_cells()
        grid.apply_gravity()
        assert grid.cells == before
        grid.apply_gravity()
        assert grid.cells == before

    def test_gravity_preserves_order(self):
        """Survivors keep their top-to-bottom order."""
        grid = Grid.from_rows([".", "A", ".", "B", ".", "C", "."])
        grid.apply_gravity()
        assert grid.column_letters(0) == ["A", "B", "C"]
        assert grid.render() == "\n".join([".", ".", ".", ".", "A", "B", "C"])

    def test_clear_and_settle(self):
        """Clearing a row lets the letters above drop into place."""
        grid = Grid.from_rows([
            "....",
            ".X..",
            ".A..",
            "WORD",
        ])
        grid.clear_and_settle([(3, 0), (3, 1), (3, 2), (3, 3)])
        assert grid.render() == "\n".join([
            "....",
            "....",
            ".X..",
            ".A..",
        ])
        assert grid.is_settled()

    def test_clear_middle_of_column(self):
        """Removing a middle cell closes the gap without reordering."""
        grid = Grid.from_rows(["A", "B", "C", "D"])
        grid.clear_and_settle([(1, 0)])
        assert grid.column_letters(0) == ["A", "C", "D"]
        assert grid.get(0, 0) is None

    def test_clear_leaves_other_columns_alone(self):
        grid = Grid.from_rows([
            "A..",
            "B.E",
            "CDF",
        ])
        grid.clear_and_settle([(2, 1)])
        assert grid.render() == "\n".join(["A..", "B.E", "C.F"])

    def test_clear_out_of_bounds_fails(self):
        grid = Grid.empty(2, 2)
        with pytest.raises(ValueError):
            grid.clear([(2, 0)])

    def test_is_settled_detects_floating_letters(self):
        assert not Grid.from_rows(["A", "."]).is_settled()
        assert Grid.from_rows([".", "A"]).is_settled()
