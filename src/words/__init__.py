"""Word list, target selection and letter generation for Word Fall."""

from .dictionary import Dictionary, DictionaryLoadError, DEFAULT_WORDLIST
from .random_source import RandomSource
from .selector import select_target_words, LENGTH_CLASSES
from .letters import next_letter, letter_pool, ALPHABET

__all__ = [
    # Dictionary
    "Dictionary",
    "DictionaryLoadError",
    "DEFAULT_WORDLIST",
    # Randomness
    "RandomSource",
    # Target words
    "select_target_words",
    "LENGTH_CLASSES",
    # Letters
    "next_letter",
    "letter_pool",
    "ALPHABET",
]
