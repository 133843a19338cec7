"""
Guess Evaluator

Scores a guess against the secret word letter by letter.
"""

from collections import Counter
from typing import List, Optional, Tuple

from ..errors import InvalidGuessLength
from ..models.game import LetterResult


def evaluate(secret: str, guess: str) -> Tuple[LetterResult, ...]:
    """
    Two-pass Wordle scoring.

    Exact position matches are marked first and consume their letter from
    the secret. Remaining guess letters are then marked WRONG_POSITION left
    to right while the secret still has an unconsumed copy of that letter,
    otherwise WRONG. A letter never scores more CORRECT/WRONG_POSITION
    results than it has occurrences in the secret.

    Raises:
        InvalidGuessLength: If the guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise InvalidGuessLength(
            f"Guess has {len(guess)} letters, secret word has {len(secret)}"
        )

    results: List[Optional[LetterResult]] = [None] * len(guess)
    available = Counter(secret)

    # First pass: exact matches
    for i, (guess_char, secret_char) in enumerate(zip(guess, secret)):
        if guess_char == secret_char:
            results[i] = LetterResult.CORRECT
            available[guess_char] -= 1

    # Second pass: present letters in the wrong place
    for i, guess_char in enumerate(guess):
        if results[i] is not None:
            continue
        if available[guess_char] > 0:
            results[i] = LetterResult.WRONG_POSITION
            available[guess_char] -= 1
        else:
            results[i] = LetterResult.WRONG

    return tuple(results)
