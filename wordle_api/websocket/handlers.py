"""
WebSocket Event Handlers

Real-time access to the game intents. Clients join the room of every game
they open and receive its updates, including guesses made over HTTP.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit, join_room
from ..errors import WordleError
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_auth_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_user_identity


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def broadcast_game_state(game_id: str, state: dict):
    """Send an updated game state to every client watching the game."""
    socketio = getattr(current_app, 'socketio', None)
    if socketio is None:
        return
    socketio.emit('game_state_update', {
        'success': True,
        'state': state
    }, room=game_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('new_game')
    @websocket_auth_required
    def handle_new_game(data, user=None):
        """Start or resume today's game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            view, created = game_service.create_game(user['id'])
        except WordleError as e:
            emit('error', {'error': e.message})
            return

        join_room(game_room(view.id))
        game_logger.log_game_opened(view, created, get_user_identity(request))

        emit('game_state', {
            'success': True,
            'game_id': view.id,
            'state': asdict(view)
        })

    @socketio.on('get_game')
    @websocket_auth_required
    def handle_get_game(data, user=None):
        """Send the current state of a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            view = game_service.get_game(game_id, user['id'])
        except WordleError as e:
            emit('error', {'error': e.message})
            return

        join_room(game_room(game_id))
        emit('game_state', {
            'success': True,
            'state': asdict(view)
        })

    @socketio.on('submit_guess')
    @websocket_auth_required
    def handle_submit_guess(data, user=None):
        """Submit a guess and broadcast the new state to the game room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = data.get('game_id')
        guess = data.get('guess')
        if not game_id or not guess:
            emit('error', {'error': 'Game ID and guess are required'})
            return

        try:
            view = game_service.make_guess(game_id, user['id'], guess)
        except WordleError as e:
            emit('error', {'error': e.message})
            return

        state = asdict(view)
        join_room(game_room(game_id))
        game_logger.log_game_outcome(view, view.guesses[-1].word, get_user_identity(request))

        emit('game_state', {
            'success': True,
            'state': state
        })
        emit('game_state_update', {
            'success': True,
            'state': state
        }, room=game_room(game_id), include_self=False)

    @socketio.on_error_default
    def handle_error(e):
        event = getattr(request, 'event', None) or {}
        game_logger.logger.error(f"WebSocket error in '{event.get('message')}': {e}")
        emit('error', {'error': 'Internal server error'})
