"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Game, GameStatus, GameView, Guess, LetterResult
from .user import UserStats

__all__ = ['Game', 'GameStatus', 'GameView', 'Guess', 'LetterResult', 'UserStats']
