"""
Error Types

All errors raised by the game core and its collaborators. Each error carries
the HTTP status the transport layer reports it with.
"""


class WordleError(Exception):
    """Base class for every error the API reports to a caller."""

    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'success': False, 'error': self.message}


class InvalidWordList(WordleError):
    """Configured word list is empty or malformed. Fatal at startup."""
    status_code = 500
    default_message = "Word list is invalid"


class InvalidGuess(WordleError):
    status_code = 400
    default_message = "Invalid guess"


class InvalidGuessLength(WordleError):
    """Guess and secret differ in length."""
    status_code = 400
    default_message = "Guess length does not match the secret word"


class GameNotFound(WordleError):
    status_code = 404
    default_message = "Game not found"


class GameAlreadyCompleted(WordleError):
    status_code = 400
    default_message = "Game is already over"


class DuplicateId(WordleError):
    """Identifier collision on create. Retried internally, never reported."""
    status_code = 500
    default_message = "Duplicate game identifier"


class Unauthorized(WordleError):
    status_code = 401
    default_message = "Authorization token required"


class RepositoryError(WordleError):
    """Persistence backend failure."""
    status_code = 503
    default_message = "Game storage unavailable"


class DailyGameExists(WordleError):
    """Owner already has a game for that day. Resolved by returning it, never reported."""
    status_code = 409
    default_message = "A game already exists for this day"
