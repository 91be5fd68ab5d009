"""Shared fixtures: a tiny dictionary and a session factory."""

from typing import Optional

import pytest

from src.engine import GameConfig, GameSession
from src.words import Dictionary, RandomSource
from tests.helpers import SequenceRandom


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary.from_words(["cat", "cats", "word", "words", "dogs", "house", "elephant"])


@pytest.fixture
def make_session(dictionary):
    """Build a session with deterministic draws; config fields as kwargs."""
    def _make(
        rng: Optional[RandomSource] = None,
        on_snapshot=None,
        sleep=None,
        grid=None,
        **config_kwargs
    ) -> GameSession:
        extra = {}
        if on_snapshot is not None:
            extra["on_snapshot"] = on_snapshot
        if sleep is not None:
            extra["sleep"] = sleep
        return GameSession.create(
            config=GameConfig(**config_kwargs),
            dictionary=dictionary,
            rng=rng or SequenceRandom([0]),
            grid=grid,
            **extra
        )
    return _make
