"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable

from .game import Game, GameStatus


@dataclass
class UserStats:
    """User statistics data model."""
    games_played: int = 0
    games_won: int = 0
    games_in_progress: int = 0
    total_guesses: int = 0
    average_guesses: float = 0.0
    guess_distribution: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_games(cls, games: Iterable[Game]) -> "UserStats":
        """Aggregate statistics over an owner's games. Unfinished games are counted separately."""
        stats = cls()
        for game in games:
            if not game.is_completed:
                stats.games_in_progress += 1
                continue

            stats.games_played += 1
            stats.total_guesses += game.attempts_used
            if game.status is GameStatus.WON:
                stats.games_won += 1
                key = str(game.attempts_used)
                stats.guess_distribution[key] = stats.guess_distribution.get(key, 0) + 1

        if stats.games_played:
            stats.average_guesses = round(stats.total_guesses / stats.games_played, 2)
        return stats
