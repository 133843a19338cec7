"""
Wordle API Application Package

REST and WebSocket backend for a daily word-guessing game: one secret word
per day, letter-by-letter feedback, and per-game state tracked until the game
is won or lost.
"""

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config
from .errors import WordleError

__version__ = '0.1.0'


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Services are initialized separately (see ``wordle_api.main``) and looked
    up by the controllers at request time.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.setup(config_class.LOG_DIR, config_class.LOG_LEVEL)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.game_controller import game_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(game_bp, url_prefix='/api')

    @app.errorhandler(WordleError)
    def handle_wordle_error(error):
        return jsonify(error.to_dict()), error.status_code

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
