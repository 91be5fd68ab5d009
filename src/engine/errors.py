"""Exceptions raised by the grid engine and game session."""


class WordFallError(ValueError):
    """Base class for game engine errors."""


class GridShapeError(WordFallError):
    """The cell matrix does not match the configured grid dimensions."""


class InvalidColumnError(WordFallError):
    """A column index outside the grid was supplied."""

    def __init__(self, column: int, cols: int):
        self.column = column
        self.cols = cols
        super().__init__(f"Column {column} is out of range (expected 0-{cols - 1})")


class ColumnFullError(WordFallError):
    """Placement was attempted into a column with no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class InvalidDirectionError(WordFallError):
    """A cursor move other than -1 or +1 was requested."""

    def __init__(self, direction: int):
        self.direction = direction
        super().__init__(f"Cursor direction must be -1 or 1, got {direction}")


class LayoutError(WordFallError):
    """A text grid layout could not be parsed."""
