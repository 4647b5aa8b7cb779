"""
WebSocket Event Handlers

Real-time key input: the client streams key presses and receives the
re-rendered board after each one.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_game_event(None, 'socket_connected', request.remote_addr or 'unknown', sid=request.sid)

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.log_game_event(None, 'socket_disconnected', request.remote_addr or 'unknown', sid=request.sid)

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Start a new game and send its initial state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = game_service.create_new_game(request.remote_addr or 'unknown')
        state = game_service.get_game_state(game_id)
        game_logger.log_game_event(game_id, 'new_game', request.remote_addr or 'unknown', via='websocket')

        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('key')
    def handle_key(data):
        """Apply one key press to a game and send back the updated state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not isinstance(data, dict) or 'game_id' not in data or 'key' not in data:
            emit('error', {'error': 'game_id and key are required'})
            return

        game_id = data['game_id']
        try:
            state = game_service.handle_key(game_id, data['key'])
        except Exception as e:
            game_logger.logger.error(f"Error handling key for game {game_id}: {e}")
            emit('error', {'error': str(e)})
            return

        if state is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        emit('game_state', {'game_id': game_id, 'state': asdict(state)})
