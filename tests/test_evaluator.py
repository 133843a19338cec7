"""
Tests for the guess evaluator.
"""

from collections import Counter
from itertools import product

import pytest

from wordle_api.errors import InvalidGuessLength
from wordle_api.models.game import LetterResult
from wordle_api.services.evaluator import evaluate

C = LetterResult.CORRECT
P = LetterResult.WRONG_POSITION
W = LetterResult.WRONG


def test_exact_match_is_all_correct():
    assert evaluate("CRANE", "CRANE") == (C, C, C, C, C)


def test_mixed_feedback():
    # T absent, R placed, A and C present elsewhere, E placed
    assert evaluate("CRANE", "TRACE") == (W, C, P, P, C)


def test_no_common_letters():
    assert evaluate("CRANE", "LIGHT") == (W, W, W, W, W)


def test_duplicate_guess_letters_respect_secret_budget():
    # ALLOY has two L's: one exact match at index 2, one left for index 0
    assert evaluate("ALLOY", "LOLLY") == (P, P, C, W, C)


def test_repeated_letter_scored_once_when_secret_has_one():
    # Exact match on the last E uses the only E in CRANE
    assert evaluate("CRANE", "EERIE") == (W, W, P, W, C)


def test_first_unplaced_copy_gets_wrong_position():
    assert evaluate("HOUSE", "SLEEP") == (P, W, P, W, W)


def test_length_mismatch_is_rejected():
    with pytest.raises(InvalidGuessLength):
        evaluate("CRANE", "CRAN")


def test_evaluation_is_deterministic():
    first = evaluate("ALLOY", "LOLLY")
    assert all(evaluate("ALLOY", "LOLLY") == first for _ in range(10))


@pytest.mark.parametrize("secret", ["ALLOY", "CRANE", "EERIE", "LOLLY", "SISSY"])
def test_letter_count_conservation(secret):
    words = ["ALLOY", "CRANE", "EERIE", "LOLLY", "SISSY", "TRACE", "SLEEP", "YIELD"]
    secret_counts = Counter(secret)
    for guess in words:
        results = evaluate(secret, guess)
        scored = Counter(letter for letter, result in zip(guess, results) if result is not W)
        for letter, count in scored.items():
            assert count <= secret_counts[letter], (secret, guess, letter)


def test_correct_results_match_positions():
    words = ["ALLOY", "CRANE", "LOLLY", "TRACE"]
    for secret, guess in product(words, repeat=2):
        results = evaluate(secret, guess)
        for i, result in enumerate(results):
            assert (result is C) == (secret[i] == guess[i])
