"""Seedable random source behind every draw in the game."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """
    Seedable source of uniform random integers.

    Every random choice in the game goes through ``uniform`` so tests can
    substitute a fixed sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError(f"uniform() needs a positive bound, got {n}")
        return self._rng.randrange(n)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.uniform(len(items))]
