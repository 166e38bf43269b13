"""
Lexicon Service - Word list used to validate OCR text.

The word list is loaded on first use and never modified afterwards, so a
single instance can be shared by all worker threads.
"""
import logging
import threading
from typing import FrozenSet, Iterable, Optional

from core.constants import DEFAULT_DICTIONARY_PATH, DEFAULT_EXTRA_WORDS
from core.exceptions import DictionaryUnavailableError
from utils.text_utils import split_words

logger = logging.getLogger(__name__)


class Lexicon:
    """Case-insensitive word list with lazy, thread-safe loading."""

    def __init__(
        self,
        words_path: str = DEFAULT_DICTIONARY_PATH,
        extra_words: Iterable[str] = DEFAULT_EXTRA_WORDS
    ):
        """
        Initialize lexicon.

        Args:
            words_path: Path to a newline-separated word list
            extra_words: Domain terms added to the word list
        """
        self.words_path = words_path
        self.extra_words = tuple(extra_words)
        self._words: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._words is not None

    def _load(self) -> FrozenSet[str]:
        try:
            with open(self.words_path, encoding="utf-8", errors="replace") as f:
                words = {line.strip().lower() for line in f if line.strip()}
        except OSError as e:
            raise DictionaryUnavailableError(
                f"cannot load word list {self.words_path}: {e}"
            ) from e

        words.update(word.lower() for word in self.extra_words)
        logger.info("Loaded %d words from %s", len(words), self.words_path)
        return frozenset(words)

    @property
    def words(self) -> FrozenSet[str]:
        """Word set, loaded at most once."""
        if self._words is None:
            with self._lock:
                if self._words is None:
                    self._words = self._load()
        return self._words

    def is_known(self, word: str) -> bool:
        """Check whether a single word is in the list."""
        return word.lower() in self.words

    def is_fully_known(self, text: str) -> bool:
        """
        Check whether every word of a text is known.

        Text without any words (empty or punctuation only) is fully known.
        """
        return all(self.is_known(word) for word in split_words(text))

    def __contains__(self, word: str) -> bool:
        return self.is_known(word)
