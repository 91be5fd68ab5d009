"""Grid simulation core for Word Fall."""

from .models import (
    Position,
    Cell,
    ClearMode,
    TurnState,
    ActionName,
    GameConfig,
    Match,
    ActionError,
    GameSnapshot,
    ActionResult,
)
from .errors import (
    WordFallError,
    GridShapeError,
    InvalidColumnError,
    ColumnFullError,
    InvalidDirectionError,
    LayoutError,
)
from .grid import Grid, DIRECTIONS
from .parsing import parse_layout, extract_layout_content
from .session import GameSession

__all__ = [
    # Models
    "Position",
    "Cell",
    "ClearMode",
    "TurnState",
    "ActionName",
    "GameConfig",
    "Match",
    "ActionError",
    "GameSnapshot",
    "ActionResult",
    # Errors
    "WordFallError",
    "GridShapeError",
    "InvalidColumnError",
    "ColumnFullError",
    "InvalidDirectionError",
    "LayoutError",
    # Grid
    "Grid",
    "DIRECTIONS",
    "parse_layout",
    "extract_layout_content",
    # Turn controller
    "GameSession",
]
