"""Next-letter generation biased toward the target words."""

from typing import List

from .random_source import RandomSource


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def letter_pool(target_words: List[str], alphabet_padding: int = 0) -> str:
    """All letters of the target words, plus ``alphabet_padding`` copies of A-Z."""
    letters = "".join(ch for word in target_words for ch in word.upper() if ch in ALPHABET)
    return letters + ALPHABET * alphabet_padding


def next_letter(
    target_words: List[str],
    rng: RandomSource,
    alphabet_padding: int = 0,
) -> str:
    """
    Draw the next letter to drop.

    Picks uniformly from the target-word letter pool, so letters that appear
    in the targets (and appear often) come up more. An empty pool falls back
    to a uniform pick over the alphabet.
    """
    pool = letter_pool(target_words, alphabet_padding)
    if not pool:
        pool = ALPHABET
    return rng.choice(pool)
