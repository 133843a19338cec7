"""
Wordle API Server - Main Entry Point

Initializes all services and starts the Flask-SocketIO application.
"""

import sys
from . import create_app
from .config import Config
from .errors import InvalidWordList, RepositoryError
from .repository import create_repository
from .services.auth_service import initialize_auth_service
from .services.game_service import initialize_game_service
from .services.word_source import initialize_word_source
from .utils.game_logger import game_logger


def initialize_services(config_class=Config):
    """
    Initialize the word source, repository, auth and game services.

    Raises:
        InvalidWordList: If the configured word lists are unusable
        RepositoryError: If the storage backend cannot be reached
    """
    word_source = initialize_word_source(
        config_class.ANSWERS_FILE, config_class.DICTIONARY_FILE, config_class.WORD_LENGTH
    )
    print(f"✓ Word source loaded ({len(word_source.answers)} answers, {len(word_source.dictionary)} valid guesses)")

    repository = create_repository(config_class)
    print(f"✓ Game repository ready ({config_class.STORAGE_BACKEND})")

    auth_service = initialize_auth_service(
        config_class.jwt_key(), config_class.JWT_AUTH_TYPE,
        config_class.JWT_ISSUER, config_class.JWT_AUDIENCE
    )
    if auth_service:
        print("✓ Authentication service initialized successfully")
    else:
        print("✗ Authentication service unavailable, game endpoints will reject requests")

    game_service = initialize_game_service(word_source, repository, config_class.MAX_ATTEMPTS)
    print("✓ Game service initialized successfully")

    return game_service, auth_service


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        game_logger.setup(Config.LOG_DIR, Config.LOG_LEVEL)
        initialize_services(Config)

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle API starting")

        print(f"\nStarting Wordle API on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except (InvalidWordList, RepositoryError, ValueError) as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle API shutting down (KeyboardInterrupt)")


if __name__ == '__main__':
    main()
