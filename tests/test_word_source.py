"""
Tests for daily word selection and guess validation.
"""

import hashlib
import json
from datetime import date

import pytest

from wordle_api.errors import InvalidWordList
from wordle_api.services.word_source import WordSource

ANSWERS = ["CRANE", "ALLOY", "LIGHT", "HOUSE", "TRACE"]


def test_daily_word_is_stable_across_instances():
    day = date(2025, 3, 14)
    # A fresh instance stands in for a process restart
    assert WordSource(ANSWERS).daily_word(day) == WordSource(ANSWERS).daily_word(day)


def test_daily_word_indexes_answers_by_date_digest():
    day = date(2024, 12, 31)
    digest = int(hashlib.sha256(b"2024-12-31").hexdigest(), 16)
    assert WordSource(ANSWERS).daily_word(day) == ANSWERS[digest % len(ANSWERS)]


def test_daily_word_is_memoised_per_date():
    source = WordSource(ANSWERS)
    day = date(2025, 1, 1)
    word = source.daily_word(day)
    assert source._daily_cache == {day: word}
    assert source.daily_word(day) == word


def test_words_are_normalised_to_upper_case():
    source = WordSource(["crane "], ["trace"])
    assert source.answers == ["CRANE"]
    assert source.is_valid_guess("Trace")
    assert source.is_valid_guess(" crane ")


@pytest.mark.parametrize("candidate, reason", [
    ("CRAN", "Guess must be exactly 5 letters"),
    ("CRANES", "Guess must be exactly 5 letters"),
    ("CR4NE", "Guess must contain only letters"),
    ("ZZZZZ", "Word not in word list"),
    ("", "Guess must be a valid string"),
    (None, "Guess must be a valid string"),
])
def test_rejection_reasons(candidate, reason):
    source = WordSource(ANSWERS, ["SLATE"])
    assert source.rejection_reason(candidate) == reason
    assert not source.is_valid_guess(candidate)


def test_answers_are_always_valid_guesses():
    source = WordSource(ANSWERS, ["SLATE"])
    assert all(source.is_valid_guess(word) for word in ANSWERS)
    assert source.is_valid_guess("SLATE")


def test_empty_answer_list_is_fatal():
    with pytest.raises(InvalidWordList):
        WordSource([])


def test_malformed_answer_is_fatal():
    with pytest.raises(InvalidWordList):
        WordSource(["CRANE", "TOOLONG"])


def test_from_files_reports_bad_json(tmp_path):
    answers = tmp_path / "answers.json"
    answers.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidWordList):
        WordSource.from_files(str(answers), None)


def test_from_files_loads_lists(tmp_path):
    answers = tmp_path / "answers.json"
    dictionary = tmp_path / "dictionary.json"
    answers.write_text(json.dumps(["crane", "alloy"]), encoding="utf-8")
    dictionary.write_text(json.dumps(["lolly"]), encoding="utf-8")

    source = WordSource.from_files(str(answers), str(dictionary))
    assert source.answers == ["CRANE", "ALLOY"]
    assert source.dictionary == {"CRANE", "ALLOY", "LOLLY"}


def test_packaged_word_lists_load():
    source = WordSource.from_files()
    assert len(source.answers) > 100
    assert source.is_valid_guess("CRANE")
    assert source.is_valid_guess("LOLLY")
    assert source.today_word() in source.answers
    assert source.statistics()["total_words"] == len(source.answers)
