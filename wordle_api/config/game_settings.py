"""
Game Configuration Constants Module

This module defines all game configuration constants and the loaders for the
answer and dictionary word lists. Word lists live as JSON arrays next to this
module and can be replaced through configuration.
"""

import json
import os
from typing import Dict, Final, List, Optional

from ..errors import InvalidWordList

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

WORD_LENGTH: Final[int] = 5

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))
DEFAULT_ANSWERS_FILE: Final[str] = os.path.join(CONFIG_DIR, 'answers.json')
DEFAULT_DICTIONARY_FILE: Final[str] = os.path.join(CONFIG_DIR, 'dictionary.json')


def load_word_list(json_file_path: str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words
        word_length: Required length of every word

    Returns:
        List[str]: Upper-cased words in file order

    Raises:
        InvalidWordList: If the file is missing, malformed, empty or holds invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise InvalidWordList(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise InvalidWordList(f"Invalid JSON in {os.path.basename(json_file_path)}: {e}")

    if not isinstance(word_list, list):
        raise InvalidWordList("JSON file must contain an array of words")

    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates a word list.

    1. The list is not empty
    2. Every word is exactly ``word_length`` characters
    3. Only alphabetic characters are used

    Duplicates are tolerated; the daily index is taken over the list as given.

    Raises:
        InvalidWordList: If any check fails
    """
    if not words:
        raise InvalidWordList("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise InvalidWordList(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise InvalidWordList(f"Word at index {index} '{word}' contains non-alphabetic characters")

    return True


def get_word_statistics(words: Optional[List[str]]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count and the five most common letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
