"""
In-Memory Game Repository

Useful for development, tests and single-process deployments.
"""

import threading
from datetime import date
from typing import Dict, List, Optional, Tuple

from ..errors import DailyGameExists, DuplicateId, GameNotFound
from ..models.game import Game
from .base import GameMutation, GameRepository


class InMemoryGameRepository(GameRepository):
    """
    Games keyed by id, each with its own lock.

    ``_registry_lock`` only guards the dicts and is never held while a
    mutation runs, so updates on different games proceed in parallel. Stored
    games are immutable values replaced in a single assignment; readers see
    either the old or the new game. An owner holds at most one game per day.
    """

    def __init__(self):
        self._games: Dict[str, Game] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._daily: Dict[Tuple[str, date], str] = {}
        self._registry_lock = threading.Lock()

    def create(self, game: Game) -> str:
        with self._registry_lock:
            if game.id in self._games:
                raise DuplicateId(f"Game id {game.id} already exists")
            if (game.owner_id, game.day) in self._daily:
                raise DailyGameExists()
            self._games[game.id] = game
            self._locks[game.id] = threading.Lock()
            self._daily[(game.owner_id, game.day)] = game.id
        return game.id

    def get(self, game_id: str) -> Game:
        with self._registry_lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFound()
        return game

    def update(self, game_id: str, mutation: GameMutation) -> Game:
        with self._registry_lock:
            lock = self._locks.get(game_id)
        if lock is None:
            raise GameNotFound()

        with lock:
            current = self.get(game_id)
            updated = mutation(current)
            with self._registry_lock:
                # Cleared while the mutation ran
                if self._locks.get(game_id) is not lock:
                    raise GameNotFound()
                self._games[game_id] = updated
        return updated

    def find_for_owner(self, owner_id: str, day: date) -> Optional[Game]:
        with self._registry_lock:
            game_id = self._daily.get((owner_id, day))
            return self._games.get(game_id) if game_id else None

    def list_for_owner(self, owner_id: str) -> List[Game]:
        with self._registry_lock:
            games = list(self._games.values())
        return sorted((g for g in games if g.owner_id == owner_id), key=lambda g: g.created_at)

    def count(self) -> int:
        with self._registry_lock:
            return len(self._games)

    def clear(self) -> int:
        with self._registry_lock:
            cleared = len(self._games)
            self._games.clear()
            self._locks.clear()
            self._daily.clear()
        return cleared
