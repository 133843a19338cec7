"""
Game Service

Contains the game state machine and the game intents (new game, guess,
fetch) built on top of the word source and the game repository.
"""

import logging
from datetime import date
from typing import Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..errors import DailyGameExists, DuplicateId, GameAlreadyCompleted, GameNotFound, InvalidGuess
from ..models.game import Game, GameView, Guess, LetterResult, new_game_id
from ..models.user import UserStats
from ..repository.base import GameRepository
from .evaluator import evaluate
from .word_source import WordSource

logger = logging.getLogger(__name__)

MAX_ID_RETRIES = 5


class GameService:
    """
    Core game service.

    This class handles:
    - Game construction with the daily word
    - Guess validation, evaluation and status transitions
    - Projection of games without exposing the answer before the game ends
    - Orchestration of the intents against the game repository
    """

    def __init__(self, word_source: WordSource, repository: GameRepository,
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_source = word_source
        self.repository = repository
        self.max_attempts = max_attempts

    # State machine

    def new_game(self, owner_id: str, day: Optional[date] = None) -> Game:
        """Construct an unsaved game for ``day`` (today by default)."""
        day = day or self.word_source.today()
        return Game(
            id=new_game_id(),
            owner_id=owner_id,
            secret_word=self.word_source.daily_word(day),
            day=day,
            max_attempts=self.max_attempts,
        )

    def submit_guess(self, game: Game, candidate: str) -> Tuple[Game, Tuple[LetterResult, ...]]:
        """
        Apply one guess to ``game``.

        Args:
            game: Current game value (left untouched)
            candidate: Raw guess text from the player

        Returns:
            Tuple of (updated game, per-letter results)

        Raises:
            GameAlreadyCompleted: If the game is already won or lost
            InvalidGuess: If the word source rejects the candidate
        """
        if game.is_completed:
            raise GameAlreadyCompleted()

        reason = self.word_source.rejection_reason(candidate)
        if reason:
            raise InvalidGuess(reason)

        word = self.word_source.normalize(candidate)
        results = evaluate(game.secret_word, word)
        return game.with_guess(Guess(word=word, results=results)), results

    def view_game(self, game: Game) -> GameView:
        return GameView.from_game(game)

    # Intents

    def create_game(self, owner_id: str) -> Tuple[GameView, bool]:
        """
        Start today's game for ``owner_id``.

        An owner plays one game per day; if today's game already exists it is
        returned instead of drawing a new one. A request that loses the race
        to store it also gets the stored game back.

        Returns:
            Tuple of (game view, whether a new game was created)
        """
        day = self.word_source.today()
        existing = self.repository.find_for_owner(owner_id, day)
        if existing is not None:
            return self.view_game(existing), False

        game = self.new_game(owner_id, day)
        for _ in range(MAX_ID_RETRIES):
            try:
                self.repository.create(game)
                return self.view_game(game), True
            except DailyGameExists:
                # A concurrent request stored today's game first
                existing = self.repository.find_for_owner(owner_id, day)
                if existing is not None:
                    return self.view_game(existing), False
            except DuplicateId:
                logger.warning("Game id collision on %s, drawing a new id", game.id)
                game = game.with_new_id()

        raise DuplicateId(f"Could not allocate a game id after {MAX_ID_RETRIES} attempts")

    def make_guess(self, game_id: str, owner_id: str, guess_text: str) -> GameView:
        """
        Submit a guess against a stored game.

        Every accepted submission consumes an attempt; retried requests are
        not deduplicated.
        """
        def mutation(game: Game) -> Game:
            self._check_owner(game, owner_id)
            updated, _ = self.submit_guess(game, guess_text)
            return updated

        return self.view_game(self.repository.update(game_id, mutation))

    def get_game(self, game_id: str, owner_id: str) -> GameView:
        game = self.repository.get(game_id)
        self._check_owner(game, owner_id)
        return self.view_game(game)

    def get_user_stats(self, owner_id: str) -> UserStats:
        return UserStats.from_games(self.repository.list_for_owner(owner_id))

    @staticmethod
    def _check_owner(game: Game, owner_id: str) -> None:
        # Other players' games are reported as missing
        if game.owner_id != owner_id:
            raise GameNotFound()


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource, repository: GameRepository,
                            max_attempts: int = MAX_ATTEMPTS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, repository, max_attempts)
    return _game_service
