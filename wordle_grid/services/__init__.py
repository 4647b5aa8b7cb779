"""
Services Package

Contains the game engine and the session service built on it.
"""

from .game_engine import GameEngine, pick_target_word, score_row, word_at
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GameEngine', 'pick_target_word', 'score_row', 'word_at',
    'GameService', 'get_game_service', 'initialize_game_service'
]
