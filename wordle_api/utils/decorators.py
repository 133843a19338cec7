"""
Authentication Decorators

Contains decorators for HTTP and WebSocket authentication.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from ..errors import Unauthorized
from .helpers import get_bearer_token


def _unauthorized(message: str):
    error = Unauthorized(message)
    return jsonify(error.to_dict()), error.status_code


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service

        auth_service = get_auth_service()
        if not auth_service:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500

        token = get_bearer_token()
        if not token:
            return _unauthorized('Authorization token required')

        result = auth_service.verify_token(token)
        if not result['success']:
            return _unauthorized(result['error'])

        # Add user data to request context
        request.user = result['user']
        return f(*args, **kwargs)

    return decorated_function


def websocket_auth_required(f):
    """Decorator for WebSocket authentication."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service

        auth_service = get_auth_service()
        if not auth_service or not args or not isinstance(args[0], dict) or 'token' not in args[0]:
            emit('error', {'error': 'Authentication required'})
            return

        result = auth_service.verify_token(args[0]['token'])
        if not result['success']:
            emit('error', {'error': result['error']})
            return

        request.user = result['user']
        kwargs['user'] = result['user']
        return f(*args, **kwargs)

    return decorated_function
