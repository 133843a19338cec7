"""
Authentication Controller

Lets clients check a token issued by the identity provider.
"""

from flask import Blueprint, request, jsonify
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/verify', methods=['GET'])
@require_auth
def verify_token():
    """Verify JWT token and return user info."""
    response_data = {
        'success': True,
        'user': request.user
    }

    game_logger.log_server_response(request, 'verify_token', True, response_data)
    return jsonify(response_data)
