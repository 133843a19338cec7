"""
Authentication Service

Verifies bearer JWTs issued by an external identity provider and turns them
into an authenticated user identity. Token issuance and credential storage
live with the identity provider.
"""

from typing import Any, Dict, Optional

import jwt

ALGORITHMS = {
    "secret": "HS256",
    "rsa": "RS256",
    "ed25519": "EdDSA",
}

REQUIRED_CLAIMS = ["exp", "sub", "iat"]


class AuthService:
    """
    JWT verification for protected endpoints.
    """

    def __init__(self, key: str, auth_type: str = "secret",
                 issuer: Optional[str] = None, audience: Optional[str] = None):
        """
        Args:
            key: Shared secret (``secret``) or PEM public key (``rsa``, ``ed25519``)
            auth_type: Signature scheme of the identity provider
            issuer: Expected ``iss`` claim, empty to skip the check
            audience: Expected ``aud`` claim, empty to skip the check
        """
        if auth_type not in ALGORITHMS:
            raise ValueError(f"Unsupported JWT auth type: {auth_type}")
        if not key:
            raise ValueError("JWT verification key is not configured")

        self.key = key
        self.auth_type = auth_type
        self.algorithm = ALGORITHMS[auth_type]
        self.issuer = issuer or None
        self.audience = audience or None

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dictionary with success status and user data or error
        """
        if not token:
            return {"success": False, "error": "Token is required"}

        try:
            payload = jwt.decode(
                token,
                self.key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_aud": self.audience is not None,
                    "verify_iss": self.issuer is not None,
                },
            )
        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Invalid token"}

        user_id = payload.get("sub")
        if not user_id:
            return {"success": False, "error": "Invalid token payload"}

        return {
            "success": True,
            "user": {
                "id": str(user_id),
                "username": payload.get("username") or str(user_id),
            }
        }


# Global service instance
_auth_service = None


def get_auth_service() -> Optional[AuthService]:
    """Get the global auth service instance."""
    return _auth_service


def initialize_auth_service(key: str, auth_type: str = "secret",
                            issuer: Optional[str] = None,
                            audience: Optional[str] = None) -> Optional[AuthService]:
    """Initialize the global auth service instance."""
    global _auth_service
    try:
        _auth_service = AuthService(key, auth_type, issuer, audience)
    except ValueError as e:
        print(f"Failed to initialize authentication service: {e}")
        _auth_service = None
    return _auth_service
