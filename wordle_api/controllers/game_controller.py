"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..errors import WordleError
from ..services.auth_service import get_auth_service
from ..services.game_service import get_game_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger
from ..utils.helpers import get_user_identity
from ..websocket.handlers import broadcast_game_state

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_response(error: WordleError, action: str, game_id=None, **kwargs):
    error_response = error.to_dict()
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), error.status_code


@game_bp.route('/game/new', methods=['POST'])
@require_auth
def new_game():
    """Start today's game, or return it if the player already has one."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        view, created = game_service.create_game(request.user['id'])
        state = asdict(view)

        response_data = {
            'success': True,
            'game_id': view.id,
            'state': state
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, view.id,
            max_attempts=view.max_attempts, created=created
        )
        game_logger.log_game_opened(view, created, get_user_identity(request))

        return jsonify(response_data)

    except WordleError as e:
        return _error_response(e, 'new_game')
    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': 'Internal server error'
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['GET'])
@require_auth
def get_game(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_game', game_id)

        view = game_service.get_game(game_id, request.user['id'])

        response_data = {
            'success': True,
            'state': asdict(view)
        }

        game_logger.log_server_response(
            request, 'get_game', True, response_data, game_id,
            attempts_used=view.attempts_used, status=view.status
        )

        return jsonify(response_data)

    except WordleError as e:
        return _error_response(e, 'get_game', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'get_game', game_id)
        error_response = {
            'success': False,
            'error': 'Internal server error'
        }
        game_logger.log_server_response(request, 'get_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_auth
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        guess = data.get('guess', data.get('word'))
        if not guess:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'submit_guess', game_id, guess_length=len(str(guess)))

        view = game_service.make_guess(game_id, request.user['id'], guess)
        state = asdict(view)
        last_guess = state['guesses'][-1]

        response_data = {
            'success': True,
            'state': state,
            'results': [letter['result'] for letter in last_guess['letters']]
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            round=view.attempts_used, status=view.status
        )
        game_logger.log_game_outcome(view, last_guess['word'], get_user_identity(request))
        broadcast_game_state(game_id, state)

        return jsonify(response_data)

    except WordleError as e:
        return _error_response(e, 'submit_guess', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': 'Internal server error'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/stats', methods=['GET'])
@require_auth
def user_stats():
    """Statistics over the authenticated player's games."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_stats')

        stats = game_service.get_user_stats(request.user['id'])
        response_data = {
            'success': True,
            'stats': asdict(stats)
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except WordleError as e:
        return _error_response(e, 'get_stats')
    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        error_response = {
            'success': False,
            'error': 'Internal server error'
        }
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        auth_service = get_auth_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.repository.count() if game_service else 0,
            'word_list': game_service.word_source.statistics() if game_service else None,
            'log_stats': game_logger.get_log_stats(),
            'auth_available': auth_service is not None
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
