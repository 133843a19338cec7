"""
Services Package

Contains all business logic and service classes.
"""

from .auth_service import AuthService, get_auth_service
from .evaluator import evaluate
from .game_service import GameService, get_game_service
from .word_source import WordSource, get_word_source

__all__ = [
    'AuthService', 'get_auth_service',
    'GameService', 'get_game_service',
    'WordSource', 'get_word_source',
    'evaluate'
]
