"""
Game Repository Interface
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, List, Optional

from ..models.game import Game

GameMutation = Callable[[Game], Game]


class GameRepository(ABC):
    """
    Storage for game records.

    ``update`` guarantees at most one mutation in flight per game id. A
    mutation that raises leaves the stored game unchanged; games with
    different ids never block each other.
    """

    @abstractmethod
    def create(self, game: Game) -> str:
        """
        Store a new game.

        Raises:
            DuplicateId: If the id is taken
            DailyGameExists: If the owner already has a game for that day
        """

    @abstractmethod
    def get(self, game_id: str) -> Game:
        """Raises GameNotFound if absent."""

    @abstractmethod
    def update(self, game_id: str, mutation: GameMutation) -> Game:
        """Apply ``mutation`` to the stored game and store its result."""

    @abstractmethod
    def find_for_owner(self, owner_id: str, day: date) -> Optional[Game]:
        """The owner's game for ``day``, if one exists."""

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> List[Game]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> int:
        """Remove every game and return how many were removed."""
