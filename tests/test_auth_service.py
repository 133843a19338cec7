"""
Tests for bearer token verification.
"""

import pytest

from wordle_api.config import TestingConfig
from wordle_api.services.auth_service import AuthService


def test_valid_token(auth_service, make_token):
    result = auth_service.verify_token(make_token(sub="player-7", username="bob"))
    assert result == {"success": True, "user": {"id": "player-7", "username": "bob"}}


def test_username_defaults_to_subject(auth_service, make_token):
    result = auth_service.verify_token(make_token(sub="player-7", username=None))
    assert result["user"]["username"] == "player-7"


def test_expired_token(auth_service, make_token):
    result = auth_service.verify_token(make_token(expires_in=-60))
    assert result == {"success": False, "error": "Token has expired"}


def test_wrong_signature(auth_service, make_token):
    token = make_token(secret="another-secret-key-with-at-least-32-bytes")
    assert auth_service.verify_token(token) == {"success": False, "error": "Invalid token"}


def test_wrong_audience(auth_service, make_token):
    result = auth_service.verify_token(make_token(aud="somebody-else"))
    assert not result["success"]


def test_wrong_issuer(auth_service, make_token):
    result = auth_service.verify_token(make_token(iss="somebody-else"))
    assert not result["success"]


def test_missing_subject(auth_service, make_token):
    result = auth_service.verify_token(make_token(sub=None))
    assert not result["success"]


def test_issuer_and_audience_checks_can_be_disabled(make_token):
    service = AuthService(TestingConfig.JWT_SECRET, "secret", issuer="", audience="")
    assert service.verify_token(make_token(iss="anyone", aud="anything"))["success"]


def test_missing_token(auth_service):
    assert auth_service.verify_token("") == {"success": False, "error": "Token is required"}


def test_unsupported_auth_type():
    with pytest.raises(ValueError):
        AuthService("key", auth_type="hmac")


def test_missing_key():
    with pytest.raises(ValueError):
        AuthService("", auth_type="secret")
