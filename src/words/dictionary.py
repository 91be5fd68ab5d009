"""
Word list loading and case-insensitive lookup.

The game checks every run it reads off the grid against a fixed word set
supplied at startup. A small English list ships in ``data/wordlist.txt``.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple
from pydantic import BaseModel, Field, PrivateAttr

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = Path(__file__).parent / "data" / "wordlist.txt"


class DictionaryLoadError(ValueError):
    """The word list file is missing or unreadable."""


def normalize_words(entries: Iterable[object]) -> Tuple[List[str], int]:
    """
    Lowercase and deduplicate raw word-list entries.

    Returns:
        Tuple of (sorted unique words, number of entries skipped)
    """
    words: Set[str] = set()
    skipped = 0
    for entry in entries:
        if not isinstance(entry, str):
            skipped += 1
            continue
        word = entry.strip().lower()
        if not word:
            continue
        if not word.isalpha() or not word.isascii():
            skipped += 1
            continue
        words.add(word)
    return sorted(words), skipped


class Dictionary(BaseModel):
    """
    Fixed set of valid words.

    Attributes:
        words: Sorted, lowercase, unique words
        source: Where the words were loaded from, for logging
    """

    words: List[str] = Field(default_factory=list)
    source: str = "<memory>"
    _lookup: Set[str] = PrivateAttr(default_factory=set)

    def model_post_init(self, __context) -> None:
        """Build the lookup set after model creation."""
        self._lookup = set(self.words)

    @classmethod
    def from_words(cls, entries: Iterable[object], source: str = "<memory>") -> "Dictionary":
        """Build a dictionary from any iterable of strings."""
        words, skipped = normalize_words(entries)
        if skipped:
            logger.warning("Skipped %d malformed entries in %s", skipped, source)
        logger.info("Loaded %d words from %s", len(words), source)
        return cls(words=words, source=source)

    @classmethod
    def from_file(cls, path: str | Path) -> "Dictionary":
        """
        Load a word list file.

        ``.json`` files must hold a JSON array of strings. Any other file is
        read as one word per line, with ``#`` starting a comment line.

        Raises:
            DictionaryLoadError: If the file is missing or not a usable list
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryLoadError(f"Word list not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Cannot read word list {path}: {e}") from e

        if path.suffix.lower() == ".json":
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise DictionaryLoadError(f"Invalid JSON in {path}: {e}") from e
            if not isinstance(data, list):
                raise DictionaryLoadError(f"Expected a JSON array of words in {path}")
            entries = data
        else:
            entries = [
                line for line in text.splitlines()
                if not line.lstrip().startswith("#")
            ]

        return cls.from_words(entries, source=str(path))

    @classmethod
    def default(cls) -> "Dictionary":
        """Load the bundled word list."""
        return cls.from_file(DEFAULT_WORDLIST)

    def is_valid(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self._lookup

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)

    def words_between(self, min_length: int, max_length: Optional[int] = None) -> List[str]:
        """Words whose length falls in ``[min_length, max_length]``, in sorted order."""
        return [
            w for w in self.words
            if len(w) >= min_length and (max_length is None or len(w) <= max_length)
        ]
