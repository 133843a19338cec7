"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_ANSWERS_FILE, DEFAULT_DICTIONARY_FILE, MAX_ATTEMPTS, WORD_LENGTH

load_dotenv(os.getenv('WORDLE_ENV_FILE', '.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', 'False')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8080))

    # Storage Settings
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'memory')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'wordle_game')

    # Authentication Settings ("secret", "rsa" or "ed25519")
    JWT_AUTH_TYPE = os.getenv('JWT_AUTH_TYPE', 'secret')
    JWT_SECRET = os.getenv('JWT_SECRET')
    JWT_PUBLIC_KEY = os.getenv('JWT_PUBLIC_KEY')
    JWT_PUBLIC_KEY_FILE = os.getenv('JWT_PUBLIC_KEY_FILE')
    JWT_ISSUER = os.getenv('JWT_ISSUER', 'wordle')
    JWT_AUDIENCE = os.getenv('JWT_AUDIENCE', 'users')

    # Game Settings
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', MAX_ATTEMPTS))
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', WORD_LENGTH))
    ANSWERS_FILE = os.getenv('ANSWERS_FILE', DEFAULT_ANSWERS_FILE)
    DICTIONARY_FILE = os.getenv('DICTIONARY_FILE', DEFAULT_DICTIONARY_FILE)

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    @classmethod
    def jwt_key(cls) -> str:
        """Key used to verify token signatures for the configured auth type."""
        if cls.JWT_AUTH_TYPE == 'secret':
            return cls.JWT_SECRET or ''
        if cls.JWT_PUBLIC_KEY:
            return cls.JWT_PUBLIC_KEY
        if cls.JWT_PUBLIC_KEY_FILE:
            with open(cls.JWT_PUBLIC_KEY_FILE, 'r', encoding='utf-8') as f:
                return f.read()
        return ''


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORAGE_BACKEND = 'memory'
    JWT_AUTH_TYPE = 'secret'
    JWT_SECRET = 'testing-secret-key-with-at-least-32-bytes'
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
