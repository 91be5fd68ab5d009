"""Grid state, placement, word scanning and gravity."""

from typing import Iterable, List, Optional, Protocol, Tuple
from pydantic import BaseModel, Field, model_validator

from .errors import ColumnFullError, GridShapeError, InvalidColumnError
from .models import Cell, Match, Position


# Ray directions as (d_row, d_col)
DIRECTIONS: List[Tuple[int, int]] = [
    (0, 1),    # Right
    (1, 0),    # Down
    (1, 1),    # Down-right
    (1, -1),   # Down-left
    (0, -1),   # Left
    (-1, 0),   # Up
    (-1, 1),   # Up-right
    (-1, -1),  # Up-left
]


class WordChecker(Protocol):
    def is_valid(self, word: str) -> bool: ...


class Grid(BaseModel):
    """
    Fixed-size letter grid.

    Row 0 is the top of the grid, row ``rows - 1`` is the floor. Empty cells
    hold ``None``; filled cells hold a single uppercase letter.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        cells: The cell matrix, indexed ``cells[row][col]``
    """

    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    cells: List[List[Cell]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> "Grid":
        if not self.cells:
            self.cells = [[None] * self.cols for _ in range(self.rows)]

        if len(self.cells) != self.rows:
            raise GridShapeError(
                f"Grid has {len(self.cells)} rows, expected {self.rows}"
            )
        for y, row in enumerate(self.cells):
            if len(row) != self.cols:
                raise GridShapeError(
                    f"Row {y} has {len(row)} cells, expected {self.cols}"
                )
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                if len(cell) != 1 or not (cell.isascii() and cell.isalpha()):
                    raise GridShapeError(f"Invalid cell value {cell!r} at ({y}, {x})")
                row[x] = cell.upper()
        return self

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """Create a grid with every cell empty."""
        return cls(rows=rows, cols=cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def check_column(self, column: int) -> None:
        """Raise InvalidColumnError unless ``column`` is inside the grid."""
        if not 0 <= column < self.cols:
            raise InvalidColumnError(column, self.cols)

    def is_column_full(self, column: int) -> bool:
        self.check_column(column)
        return all(self.cells[y][column] is not None for y in range(self.rows))

    def is_full(self) -> bool:
        return all(self.is_column_full(x) for x in range(self.cols))

    def is_empty(self) -> bool:
        return all(cell is None for row in self.cells for cell in row)

    def place(self, column: int, letter: str) -> int:
        """
        Drop a letter into a column.

        The letter lands in the lowest empty cell of the column.

        Args:
            column: Column index
            letter: A single letter

        Returns:
            The row the letter landed in

        Raises:
            InvalidColumnError: If the column is outside the grid
            ColumnFullError: If the column has no empty cell
        """
        self.check_column(column)
        if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            raise ValueError(f"Cannot place {letter!r}: expected a single letter")

        for y in range(self.rows - 1, -1, -1):
            if self.cells[y][column] is None:
                self.cells[y][column] = letter.upper()
                return y

        raise ColumnFullError(column)

    def find_words(self, dictionary: WordChecker, min_length: int) -> List[Match]:
        """
        Find every dictionary word readable along a straight ray.

        Every cell is tried as an origin in all eight directions. A ray keeps
        extending after a hit, so a longer word from the same origin is also
        reported. Matches may share cells.

        Args:
            dictionary: Anything with a case-insensitive ``is_valid(word)``
            min_length: Shortest run that counts as a word

        Returns:
            List of matches in scan order
        """
        matches: List[Match] = []

        for y in range(self.rows):
            for x in range(self.cols):
                if self.cells[y][x] is None:
                    continue
                for dy, dx in DIRECTIONS:
                    word = ""
                    positions: List[Position] = []
                    ny, nx = y, x

                    while self.in_bounds(ny, nx) and self.cells[ny][nx] is not None:
                        word += self.cells[ny][nx]
                        positions.append((ny, nx))

                        if len(word) >= min_length and dictionary.is_valid(word):
                            matches.append(Match(word=word, positions=list(positions)))

                        ny += dy
                        nx += dx

        return matches

    def clear(self, positions: Iterable[Position]) -> None:
        """Empty the given cells. Gravity is not applied."""
        for y, x in positions:
            if not self.in_bounds(y, x):
                raise GridShapeError(f"Position ({y}, {x}) is outside the grid")
            self.cells[y][x] = None

    def apply_gravity(self) -> None:
        """Settle every column so its letters rest on the floor, keeping their order."""
        for x in range(self.cols):
            letters = [self.cells[y][x] for y in range(self.rows) if self.cells[y][x] is not None]
            gap = self.rows - len(letters)
            for y in range(self.rows):
                self.cells[y][x] = None if y < gap else letters[y - gap]

    def clear_and_settle(self, positions: Iterable[Position]) -> None:
        self.clear(positions)
        self.apply_gravity()

    def is_settled(self) -> bool:
        """True when no column has an empty cell below a letter."""
        for x in range(self.cols):
            seen_letter = False
            for y in range(self.rows):
                if self.cells[y][x] is not None:
                    seen_letter = True
                elif seen_letter:
                    return False
        return True

    def column_letters(self, column: int) -> List[str]:
        """Letters in a column, top to bottom."""
        self.check_column(column)
        return [self.cells[y][column] for y in range(self.rows) if self.cells[y][column] is not None]

    def copy_cells(self) -> List[List[Cell]]:
        return [row.copy() for row in self.cells]

    def render(self, empty: str = ".") -> str:
        """Render the grid to a string, one line per row."""
        return "\n".join(
            "".join(cell or empty for cell in row)
            for row in self.cells
        )

    @classmethod
    def from_rows(cls, rows: List[str], empty: Optional[str] = ".") -> "Grid":
        """Build a grid from equal-length strings, ``empty`` marking blank cells."""
        cells = [[None if ch == empty else ch for ch in line] for line in rows]
        return cls(rows=len(cells), cols=len(cells[0]) if cells else 0, cells=cells)
