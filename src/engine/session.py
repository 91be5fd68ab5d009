"""
Game session: the turn controller between the presentation layer and the grid.

Every player input maps to one action method. Each action runs to completion
synchronously and returns an ActionResult carrying the post-action snapshot.
"""

import logging
import time
from typing import Callable, List, Optional, Set
from pydantic import BaseModel, Field, ConfigDict

from .errors import ColumnFullError, GridShapeError, InvalidColumnError, InvalidDirectionError
from .grid import Grid
from .models import (
    ActionError,
    ActionName,
    ActionResult,
    GameConfig,
    GameSnapshot,
    Match,
    Position,
    TurnState,
)
from ..words import Dictionary, RandomSource, next_letter, select_target_words

logger = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    Manages one game of Word Fall.

    Sequences placement, word scan, highlight, clear and gravity. While a
    highlight is showing the session is AWAITING_CLEAR; with
    ``clear_mode="dismiss"`` the next column pick, drop or cursor move clears
    it instead of doing its usual job. With ``clear_mode="auto"`` the clear
    runs inside the placing action, after the highlight snapshot has been
    published and the configured pause has elapsed.

    Attributes:
        config: Session configuration
        dictionary: Word oracle used by the scan and target selection
        rng: Source of every random choice
        grid: The letter grid
        cursor_column: Column the cursor is over
        current_letter: Letter waiting to be dropped
        target_words: Display words chosen at game start
        highlighted: Cells of the words found by the last scan
        pending_matches: The words found by the last scan
        on_snapshot: Optional callback receiving every published snapshot
        sleep: Pause function used for the auto-clear delay
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    dictionary: Dictionary
    rng: RandomSource
    grid: Optional[Grid] = None
    cursor_column: int = 0
    current_letter: str = ""
    target_words: List[str] = Field(default_factory=list)
    highlighted: Set[Position] = Field(default_factory=set)
    pending_matches: List[Match] = Field(default_factory=list)
    on_snapshot: Optional[Callable[[GameSnapshot], None]] = None
    sleep: Callable[[float], None] = time.sleep

    def model_post_init(self, __context) -> None:
        """Build the grid and deal the first letter after model creation."""
        if self.grid is None:
            self.grid = Grid.empty(self.config.rows, self.config.cols)
        elif (self.grid.rows, self.grid.cols) != (self.config.rows, self.config.cols):
            raise GridShapeError(
                f"Grid is {self.grid.rows}x{self.grid.cols}, "
                f"config expects {self.config.rows}x{self.config.cols}"
            )
        if self.config.start_column is not None and self.config.start_column >= self.config.cols:
            raise GridShapeError(
                f"start_column {self.config.start_column} is outside a "
                f"{self.config.cols}-column grid"
            )

        self.cursor_column = self._start_column()
        if not self.target_words:
            self.target_words = select_target_words(
                self.dictionary, self.rng, self.config.min_word_length
            )
        if not self.current_letter:
            self._draw_letter()

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        rng: Optional[RandomSource] = None,
        **kwargs
    ) -> "GameSession":
        """
        Factory method to create a session with its collaborators.

        Args:
            config: Optional GameConfig (defaults are used when omitted)
            dictionary: Word oracle; loaded from ``config.wordlist`` or the
                bundled list when omitted
            rng: Random source; seeded from ``config.seed`` when omitted
            **kwargs: Other GameSession fields (grid, on_snapshot, sleep)

        Returns:
            A ready-to-play GameSession
        """
        if config is None:
            config = GameConfig()
        if dictionary is None:
            dictionary = (
                Dictionary.from_file(config.wordlist) if config.wordlist
                else Dictionary.default()
            )
        if rng is None:
            rng = RandomSource(config.seed)

        return cls(config=config, dictionary=dictionary, rng=rng, **kwargs)

    @property
    def state(self) -> TurnState:
        return "AWAITING_CLEAR" if self.highlighted else "IDLE"

    @property
    def pending_clear(self) -> bool:
        """Whether a found word is highlighted and waiting to be cleared."""
        return bool(self.highlighted)

    def snapshot(self) -> GameSnapshot:
        """Copy of the current state for rendering."""
        return GameSnapshot(
            grid=self.grid.copy_cells(),
            cursor_column=self.cursor_column,
            current_letter=self.current_letter,
            target_words=list(self.target_words),
            highlighted_positions=sorted(self.highlighted),
            pending_clear=self.pending_clear,
            board_full=self.grid.is_full(),
        )

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def select_column(self, column: int) -> ActionResult:
        """Drop the current letter into ``column``, or dismiss a pending highlight."""
        return self._select("SELECT_COLUMN", column)

    def drop_current(self) -> ActionResult:
        """Drop the current letter into the cursor column."""
        return self._select("DROP", self.cursor_column)

    def move_cursor(self, direction: int) -> ActionResult:
        """
        Move the cursor one column left (-1) or right (+1).

        Wraps around the edges unless ``config.wrap_cursor`` is off, in
        which case it stops at them. Dismisses a pending highlight instead of
        moving.
        """
        if direction not in (-1, 1):
            return self._reject(
                "MOVE_CURSOR", "INVALID_DIRECTION", str(InvalidDirectionError(direction))
            )

        if self.pending_clear:
            return self._dismiss("MOVE_CURSOR")

        cols = self.config.cols
        target = self.cursor_column + direction
        if self.config.wrap_cursor:
            target = (target + cols) % cols
        else:
            target = min(max(target, 0), cols - 1)

        self.cursor_column = target
        return self._publish(ActionResult(action="MOVE_CURSOR", snapshot=self.snapshot()))

    def new_game(self) -> ActionResult:
        """Empty the grid and start over with new target words and letter."""
        self.grid = Grid.empty(self.config.rows, self.config.cols)
        self.highlighted = set()
        self.pending_matches = []
        self.cursor_column = self._start_column()
        self.target_words = select_target_words(
            self.dictionary, self.rng, self.config.min_word_length
        )
        self._draw_letter()
        logger.info("New %dx%d game started", self.config.rows, self.config.cols)
        return self._publish(ActionResult(action="NEW_GAME", snapshot=self.snapshot()))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _start_column(self) -> int:
        if self.config.start_column is not None:
            return self.config.start_column
        return self.config.cols // 2

    def _draw_letter(self) -> None:
        self.current_letter = next_letter(
            self.target_words, self.rng, self.config.alphabet_padding
        )

    def _select(self, action: ActionName, column: int) -> ActionResult:
        try:
            self.grid.check_column(column)
        except InvalidColumnError as e:
            return self._reject(action, "INVALID_COLUMN", str(e))

        if self.pending_clear:
            self.cursor_column = column
            return self._dismiss(action)

        letter = self.current_letter
        try:
            row = self.grid.place(column, letter)
        except ColumnFullError as e:
            logger.info("Rejected %s: %s", action, e)
            return self._reject(action, "COLUMN_FULL", str(e))

        self.cursor_column = column
        logger.debug("Placed %s at (%d, %d)", letter, row, column)

        matches = self.grid.find_words(self.dictionary, self.config.min_word_length)
        if not matches:
            self._draw_letter()
            return self._publish(ActionResult(
                action=action,
                placed_at=(row, column),
                letter=letter,
                snapshot=self.snapshot(),
            ))

        self.pending_matches = matches
        self.highlighted = {pos for match in matches for pos in match.positions}
        logger.info(
            "Found %d word(s): %s",
            len(matches),
            ", ".join(match.word for match in matches),
        )

        cleared: List[Position] = []
        if self.config.clear_mode == "auto":
            self._emit(self.snapshot())
            if self.config.auto_clear_delay > 0:
                self.sleep(self.config.auto_clear_delay)
            cleared = self._resolve()

        return self._publish(ActionResult(
            action=action,
            placed_at=(row, column),
            letter=letter,
            matches=matches,
            cleared=cleared,
            snapshot=self.snapshot(),
        ))

    def _resolve(self) -> List[Position]:
        """Clear highlighted cells, settle the columns and deal the next letter."""
        cleared = sorted(self.highlighted)
        self.grid.clear_and_settle(cleared)
        self.highlighted = set()
        self.pending_matches = []
        self._draw_letter()
        logger.debug("Cleared %d cell(s)", len(cleared))
        return cleared

    def _dismiss(self, action: ActionName) -> ActionResult:
        cleared = self._resolve()
        return self._publish(ActionResult(action=action, cleared=cleared, snapshot=self.snapshot()))

    def _reject(self, action: ActionName, code: str, message: str) -> ActionResult:
        return self._publish(ActionResult(
            action=action,
            accepted=False,
            error=ActionError(code=code, message=message),
            snapshot=self.snapshot(),
        ))

    def _emit(self, snapshot: GameSnapshot) -> None:
        if self.on_snapshot:
            self.on_snapshot(snapshot)

    def _publish(self, result: ActionResult) -> ActionResult:
        self._emit(result.snapshot)
        return result
