"""
Utilities Package

Contains request helpers and the game logger.
"""

from .helpers import get_user_identity, get_user_ip
from .game_logger import GameLogger, game_logger

__all__ = ['get_user_identity', 'get_user_ip', 'GameLogger', 'game_logger']
