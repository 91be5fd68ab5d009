"""Test helpers: a predictable random source and a letter-drop shortcut."""

from typing import List

from src.engine import GameSession
from src.words import RandomSource


class SequenceRandom(RandomSource):
    """RandomSource that replays a fixed list of draws, each taken modulo n."""

    def __init__(self, values: List[int]):
        super().__init__(seed=0)
        self.values = values
        self.calls = 0

    def uniform(self, n: int) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % n


def drop(session: GameSession, column: int, letter: str):
    """Set the pending letter and drop it into a column."""
    session.current_letter = letter
    return session.select_column(column)
