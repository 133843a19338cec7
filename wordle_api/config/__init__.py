"""
Configuration Package

Contains all configuration-related files and settings.

- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, word list loading and validation
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ATTEMPTS, WORD_LENGTH, load_word_list, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ATTEMPTS', 'WORD_LENGTH', 'load_word_list', 'validate_word_list_integrity',
    'get_word_statistics'
]
