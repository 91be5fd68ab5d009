"""Target word selection for a new game."""

import logging
from typing import List, Optional, Tuple

from .dictionary import Dictionary
from .random_source import RandomSource

logger = logging.getLogger(__name__)


# (min_length, max_length) per class; None means unbounded
LENGTH_CLASSES: List[Tuple[int, Optional[int]]] = [
    (3, 4),    # Short
    (5, 7),    # Medium
    (8, None), # Long
]


def select_target_words(
    dictionary: Dictionary,
    rng: RandomSource,
    min_word_length: int = 1,
) -> List[str]:
    """
    Choose one short, one medium and one long word, uppercased.

    Words shorter than ``min_word_length`` are never chosen, so every target
    can be cleared from the grid. A length class with no eligible words
    contributes nothing, so an empty dictionary yields an empty list.
    """
    targets: List[str] = []
    for min_length, max_length in LENGTH_CLASSES:
        lower = max(min_length, min_word_length)
        pool = dictionary.words_between(lower, max_length)
        if not pool:
            logger.debug("No words of length %s-%s in %s", lower, max_length or "", dictionary.source)
            continue
        targets.append(rng.choice(pool).upper())

    logger.info("Selected target words: %s", ", ".join(targets) or "(none)")
    return targets
