"""
Pydantic models for the game engine.

Configuration, word matches, snapshots and action results live here. The
logic classes (Grid, GameSession) remain in their respective files.
"""

from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field, ConfigDict


# Type aliases
Position = Tuple[int, int]  # (row, col)
Cell = Optional[str]
ClearMode = Literal["dismiss", "auto"]
TurnState = Literal["IDLE", "AWAITING_CLEAR"]
ActionName = Literal["SELECT_COLUMN", "MOVE_CURSOR", "DROP", "NEW_GAME"]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    model_config = ConfigDict(extra='forbid')

    rows: int = Field(default=7, ge=1)
    cols: int = Field(default=7, ge=1)
    min_word_length: int = Field(default=4, ge=1)
    clear_mode: ClearMode = "dismiss"
    auto_clear_delay: float = Field(default=0.0, ge=0.0)  # Seconds, auto mode only
    wrap_cursor: bool = True
    alphabet_padding: int = Field(default=0, ge=0)
    start_column: Optional[int] = Field(default=None, ge=0)
    seed: Optional[int] = None
    wordlist: Optional[str] = None  # Bundled list when unset


class Match(BaseModel):
    """A dictionary word found on the grid, with its cells in reading order."""
    word: str
    positions: List[Position] = Field(default_factory=list)


class ActionError(BaseModel):
    """Why an action was rejected."""
    code: str
    message: str


class GameSnapshot(BaseModel):
    """Read-only view of a session handed to the presentation layer."""
    grid: List[List[Cell]]
    cursor_column: int
    current_letter: str
    target_words: List[str] = Field(default_factory=list)
    highlighted_positions: List[Position] = Field(default_factory=list)
    pending_clear: bool = False
    board_full: bool = False

    def is_highlighted(self, row: int, col: int) -> bool:
        return (row, col) in self.highlighted_positions


class ActionResult(BaseModel):
    """Outcome of a single player action."""
    action: ActionName
    accepted: bool = True
    placed_at: Optional[Position] = None
    letter: Optional[str] = None  # The letter placed, if any
    matches: List[Match] = Field(default_factory=list)
    cleared: List[Position] = Field(default_factory=list)
    error: Optional[ActionError] = None
    snapshot: GameSnapshot
