"""
Game Data Models

Contains all game-related data structures and enums.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class LetterResult(Enum):
    """Feedback for one guessed letter."""
    CORRECT = "Correct"
    WRONG_POSITION = "WrongPosition"
    WRONG = "Wrong"


class GameStatus(Enum):
    IN_PROGRESS = "InProgress"
    WON = "Won"
    LOST = "Lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


# Keyboard tracking: a letter's status only ever moves up this ranking
UNUSED = "Unused"
_LETTER_PRIORITY = {
    UNUSED: 0,
    LetterResult.WRONG.value: 1,
    LetterResult.WRONG_POSITION.value: 2,
    LetterResult.CORRECT.value: 3,
}

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_game_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Guess:
    """One evaluated attempt."""
    word: str
    results: Tuple[LetterResult, ...]
    created_at: datetime = field(default_factory=utc_now)

    def letters(self) -> Iterator[Tuple[str, LetterResult]]:
        return zip(self.word, self.results)

    @property
    def is_all_correct(self) -> bool:
        return all(result is LetterResult.CORRECT for result in self.results)


@dataclass(frozen=True)
class Game:
    """
    Server-side game record.

    Instances are never mutated; every transition builds a new value, so a
    stored game is always either the state before or after a guess.
    """
    id: str
    owner_id: str
    secret_word: str
    day: date
    max_attempts: int
    guesses: Tuple[Guess, ...] = ()
    status: GameStatus = GameStatus.IN_PROGRESS
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def attempts_used(self) -> int:
        return len(self.guesses)

    @property
    def attempts_remaining(self) -> int:
        return max(self.max_attempts - len(self.guesses), 0)

    @property
    def is_completed(self) -> bool:
        return self.status.is_terminal

    def with_new_id(self) -> "Game":
        return replace(self, id=new_game_id())

    def with_guess(self, guess: Guess) -> "Game":
        """Return a copy with ``guess`` appended and the status recomputed."""
        guesses = self.guesses + (guess,)
        if guess.is_all_correct:
            status = GameStatus.WON
        elif len(guesses) >= self.max_attempts:
            status = GameStatus.LOST
        else:
            status = GameStatus.IN_PROGRESS
        return replace(self, guesses=guesses, status=status, updated_at=guess.created_at)

    def letter_status(self) -> Dict[str, str]:
        """Best known feedback per letter across all guesses."""
        status = {letter: UNUSED for letter in ALPHABET}
        for guess in self.guesses:
            for letter, result in guess.letters():
                current = status.get(letter, UNUSED)
                if _LETTER_PRIORITY[result.value] > _LETTER_PRIORITY[current]:
                    status[letter] = result.value
        return status


@dataclass
class LetterFeedback:
    letter: str
    result: str


@dataclass
class GuessView:
    word: str
    letters: List[LetterFeedback]


@dataclass
class GameView:
    """Client-facing projection of a game. ``secret_word`` is only set once the game is over."""
    id: str
    day: str
    attempts_used: int
    attempts_remaining: int
    max_attempts: int
    status: str
    guesses: List[GuessView]
    letter_status: Dict[str, str]
    secret_word: Optional[str] = None

    @classmethod
    def from_game(cls, game: Game) -> "GameView":
        guesses = [
            GuessView(
                word=guess.word,
                letters=[LetterFeedback(letter, result.value) for letter, result in guess.letters()],
            )
            for guess in game.guesses
        ]
        return cls(
            id=game.id,
            day=game.day.isoformat(),
            attempts_used=game.attempts_used,
            attempts_remaining=game.attempts_remaining,
            max_attempts=game.max_attempts,
            status=game.status.value,
            guesses=guesses,
            letter_status=game.letter_status(),
            secret_word=game.secret_word if game.is_completed else None,
        )
