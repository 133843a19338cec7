"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user = getattr(request_obj, 'user', None) or {}

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'user_id': user.get('id'),
        'username': user.get('username')
    }


def get_bearer_token(request_obj=None) -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, if present."""
    if request_obj is None:
        request_obj = request

    auth_header = request_obj.headers.get('Authorization', '')
    scheme, _, token = auth_header.partition(' ')
    if scheme != 'Bearer' or not token.strip():
        return None
    return token.strip()
