"""
Word Source

Supplies the daily secret word and validates candidate guesses against the
dictionary.
"""

import hashlib
import threading
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import (
    DEFAULT_ANSWERS_FILE, DEFAULT_DICTIONARY_FILE, WORD_LENGTH,
    get_word_statistics, load_word_list, validate_word_list_integrity
)


class WordSource:
    """
    Daily word selection and guess validation.

    The daily word is a pure function of the calendar date: the SHA-256 digest
    of the ISO date indexes the answer list. Results are memoised per date.
    """

    def __init__(self, answers: Iterable[str], dictionary: Iterable[str] = (),
                 word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self.answers: List[str] = [self.normalize(word) for word in answers]
        validate_word_list_integrity(self.answers, word_length)

        # Every answer is always a valid guess
        self.dictionary = frozenset(self.normalize(word) for word in dictionary) | frozenset(self.answers)

        self._daily_cache: Dict[date, str] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def from_files(cls, answers_file: str = DEFAULT_ANSWERS_FILE,
                   dictionary_file: Optional[str] = DEFAULT_DICTIONARY_FILE,
                   word_length: int = WORD_LENGTH) -> "WordSource":
        """Load the answer and dictionary lists from JSON files."""
        answers = load_word_list(answers_file, word_length)
        dictionary = load_word_list(dictionary_file, word_length) if dictionary_file else []
        return cls(answers, dictionary, word_length)

    @staticmethod
    def normalize(candidate: str) -> str:
        return candidate.strip().upper()

    @staticmethod
    def today() -> date:
        """Current calendar date. Days roll over at midnight UTC."""
        return datetime.now(timezone.utc).date()

    def daily_word(self, day: date) -> str:
        with self._cache_lock:
            word = self._daily_cache.get(day)
            if word is None:
                word = self._word_for_date(day)
                self._daily_cache[day] = word
            return word

    def today_word(self) -> str:
        return self.daily_word(self.today())

    def _word_for_date(self, day: date) -> str:
        digest = hashlib.sha256(day.isoformat().encode('utf-8')).hexdigest()
        return self.answers[int(digest, 16) % len(self.answers)]

    def is_valid_guess(self, candidate: str) -> bool:
        return self.rejection_reason(candidate) is None

    def rejection_reason(self, candidate) -> Optional[str]:
        """
        Explain why ``candidate`` is not an acceptable guess.

        Returns:
            None if the guess is acceptable, otherwise a message for the player
        """
        if not candidate or not isinstance(candidate, str):
            return "Guess must be a valid string"

        word = self.normalize(candidate)

        if len(word) != self.word_length:
            return f"Guess must be exactly {self.word_length} letters"

        if not word.isalpha():
            return "Guess must contain only letters"

        if word not in self.dictionary:
            return "Word not in word list"

        return None

    def statistics(self) -> Dict:
        stats = get_word_statistics(self.answers)
        stats['dictionary_size'] = len(self.dictionary)
        return stats


# Global service instance
_word_source = None


def get_word_source() -> Optional[WordSource]:
    """Get the global word source instance."""
    return _word_source


def initialize_word_source(answers_file: str = DEFAULT_ANSWERS_FILE,
                           dictionary_file: Optional[str] = DEFAULT_DICTIONARY_FILE,
                           word_length: int = WORD_LENGTH) -> WordSource:
    """Initialize the global word source. Raises InvalidWordList on a bad list."""
    global _word_source
    _word_source = WordSource.from_files(answers_file, dictionary_file, word_length)
    return _word_source
