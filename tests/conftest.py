"""
Pytest configuration for the Wordle API.

Services run against a tiny fixed word list so the daily word is known:
the answer list holds only CRANE, so every game's secret is CRANE.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from wordle_api import create_app
from wordle_api.config import TestingConfig
from wordle_api.repository import InMemoryGameRepository
from wordle_api.services import auth_service as auth_service_module
from wordle_api.services import game_service as game_service_module
from wordle_api.services.auth_service import AuthService
from wordle_api.services.game_service import GameService
from wordle_api.services.word_source import WordSource

ANSWERS = ["CRANE"]
DICTIONARY = ["TRACE", "LIGHT", "ALLOY", "LOLLY", "EERIE", "SLATE", "HOUSE"]


@pytest.fixture
def word_source():
    return WordSource(ANSWERS, DICTIONARY)


@pytest.fixture
def repository():
    return InMemoryGameRepository()


@pytest.fixture
def game_service(word_source, repository):
    return GameService(word_source, repository, max_attempts=6)


@pytest.fixture
def auth_service():
    return AuthService(
        TestingConfig.JWT_SECRET, "secret", TestingConfig.JWT_ISSUER, TestingConfig.JWT_AUDIENCE
    )


@pytest.fixture
def make_token():
    """Factory for HS256 tokens signed with the testing secret."""
    def _make_token(sub="player-1", username="alice", secret=TestingConfig.JWT_SECRET,
                    expires_in=3600, **claims):
        now = datetime.now(timezone.utc)
        payload = {
            "sub": sub,
            "username": username,
            "iat": now,
            "exp": now + timedelta(seconds=expires_in),
            "iss": TestingConfig.JWT_ISSUER,
            "aud": TestingConfig.JWT_AUDIENCE,
        }
        payload.update(claims)
        payload = {key: value for key, value in payload.items() if value is not None}
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def app_and_socketio(monkeypatch, game_service, auth_service):
    monkeypatch.setattr(game_service_module, "_game_service", game_service)
    monkeypatch.setattr(auth_service_module, "_auth_service", auth_service)
    return create_app(TestingConfig)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(sub="player-1", username="alice"):
        return {"Authorization": f"Bearer {make_token(sub=sub, username=username)}"}

    return _auth_headers
