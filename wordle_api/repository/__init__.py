"""
Repository Package

Game storage backends.
"""

from .base import GameRepository
from .memory import InMemoryGameRepository
from .mongo import MongoGameRepository


def create_repository(config_class) -> GameRepository:
    """Build the repository selected by ``STORAGE_BACKEND``."""
    backend = (config_class.STORAGE_BACKEND or 'memory').lower()
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("STORAGE_BACKEND=mongo requires MONGO_URI")
        return MongoGameRepository.from_uri(config_class.MONGO_URI, config_class.MONGO_DB)
    if backend == 'memory':
        return InMemoryGameRepository()
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = ['GameRepository', 'InMemoryGameRepository', 'MongoGameRepository', 'create_repository']
