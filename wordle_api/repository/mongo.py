"""
MongoDB Game Repository

Durable game storage. Each game is one document carrying a ``version``
counter; updates are compare-and-swap on that counter, so concurrent guesses
on one game serialize without any lock shared between games.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..errors import DailyGameExists, DuplicateId, GameNotFound, RepositoryError
from ..models.game import Game, GameStatus, Guess, LetterResult
from .base import GameMutation, GameRepository

logger = logging.getLogger(__name__)

MAX_UPDATE_RETRIES = 10
DAILY_INDEX = "owner_id_1_day_1"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _is_daily_collision(error: DuplicateKeyError) -> bool:
    """Whether an insert clashed on the owner/day index rather than on the id."""
    key_pattern = (error.details or {}).get("keyPattern") or {}
    return "owner_id" in key_pattern or DAILY_INDEX in str(error)


def to_document(game: Game, version: int = 0) -> Dict[str, Any]:
    return {
        "_id": game.id,
        "owner_id": game.owner_id,
        "secret_word": game.secret_word,
        "day": game.day.isoformat(),
        "max_attempts": game.max_attempts,
        "guesses": [
            {
                "word": guess.word,
                "results": [result.value for result in guess.results],
                "created_at": guess.created_at,
            }
            for guess in game.guesses
        ],
        "status": game.status.value,
        "created_at": game.created_at,
        "updated_at": game.updated_at,
        "version": version,
    }


def from_document(doc: Dict[str, Any]) -> Game:
    guesses = tuple(
        Guess(
            word=g["word"],
            results=tuple(LetterResult(r) for r in g["results"]),
            created_at=_as_utc(g["created_at"]),
        )
        for g in doc.get("guesses", [])
    )
    return Game(
        id=doc["_id"],
        owner_id=doc["owner_id"],
        secret_word=doc["secret_word"],
        day=date.fromisoformat(doc["day"]),
        max_attempts=doc["max_attempts"],
        guesses=guesses,
        status=GameStatus(doc["status"]),
        created_at=_as_utc(doc["created_at"]),
        updated_at=_as_utc(doc["updated_at"]),
    )


class MongoGameRepository(GameRepository):
    """Game repository backed by a MongoDB collection."""

    def __init__(self, collection, max_retries: int = MAX_UPDATE_RETRIES):
        self.collection = collection
        self.max_retries = max_retries

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str = "wordle_game") -> "MongoGameRepository":
        """
        Connect to MongoDB and prepare the games collection.

        Raises:
            RepositoryError: If the server cannot be reached
        """
        try:
            client = MongoClient(mongo_uri, server_api=ServerApi('1'), tz_aware=True)
            client.admin.command('ping')
            collection = client[db_name].games
            collection.create_index(
                [("owner_id", ASCENDING), ("day", ASCENDING)], name=DAILY_INDEX, unique=True
            )
        except PyMongoError as e:
            raise RepositoryError(f"MongoDB connection error: {e}")

        logger.info("Connected to MongoDB database '%s'", db_name)
        return cls(collection)

    def create(self, game: Game) -> str:
        try:
            self.collection.insert_one(to_document(game))
        except DuplicateKeyError as e:
            if _is_daily_collision(e):
                raise DailyGameExists()
            raise DuplicateId(f"Game id {game.id} already exists")
        except PyMongoError as e:
            raise RepositoryError(f"Failed to store game: {e}")
        return game.id

    def _find(self, game_id: str) -> Dict[str, Any]:
        try:
            doc = self.collection.find_one({"_id": game_id})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load game: {e}")
        if doc is None:
            raise GameNotFound()
        return doc

    def get(self, game_id: str) -> Game:
        return from_document(self._find(game_id))

    def update(self, game_id: str, mutation: GameMutation) -> Game:
        for attempt in range(1, self.max_retries + 1):
            doc = self._find(game_id)
            version = doc.get("version", 0)
            updated = mutation(from_document(doc))

            try:
                result = self.collection.replace_one(
                    {"_id": game_id, "version": version},
                    to_document(updated, version + 1),
                )
            except PyMongoError as e:
                raise RepositoryError(f"Failed to update game: {e}")

            if result.matched_count == 1:
                return updated

            logger.info("Concurrent update on game %s, retrying (attempt %d)", game_id, attempt)

        raise RepositoryError(f"Game {game_id} is being updated by too many requests")

    def find_for_owner(self, owner_id: str, day: date) -> Optional[Game]:
        try:
            doc = self.collection.find_one({"owner_id": owner_id, "day": day.isoformat()})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load game: {e}")
        return from_document(doc) if doc else None

    def list_for_owner(self, owner_id: str) -> List[Game]:
        try:
            docs = list(self.collection.find({"owner_id": owner_id}).sort("created_at", ASCENDING))
        except PyMongoError as e:
            raise RepositoryError(f"Failed to list games: {e}")
        return [from_document(doc) for doc in docs]

    def count(self) -> int:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to count games: {e}")

    def clear(self) -> int:
        try:
            return self.collection.delete_many({}).deleted_count
        except PyMongoError as e:
            raise RepositoryError(f"Failed to clear games: {e}")
