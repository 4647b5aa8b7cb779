"""
Game Service

Keeps independent single-player game sessions, one engine per session, and
routes raw key presses to them.
"""

import random
import threading
import uuid
from typing import Dict, Optional

from ..adapters.input_adapter import InputAdapter
from ..adapters.renderer import keyboard_status, render_board
from ..config.game_settings import MAX_ROUNDS, validate_word_bank_integrity
from ..models.game import GameStatus, GameView
from ..utils.game_logger import game_logger
from .game_engine import GameEngine


class GameService:
    """
    Session registry for single-player games.

    This class handles:
    - Session creation with unique game IDs
    - Key routing through the input adapter to each session's engine
    - Rendering state for clients without exposing the answer mid-game
    """

    def __init__(self, rng: Optional[random.Random] = None, logger=game_logger):
        self.games: Dict[str, InputAdapter] = {}
        self.rng = rng
        self.logger = logger
        self._lock = threading.Lock()

    def create_new_game(self, user_ip: str = 'system', target_word: Optional[str] = None) -> str:
        """
        Creates a new session with a randomly drawn target word.

        Args:
            user_ip: Player address, recorded on the session's game events
            target_word: Fixed target instead of a random draw

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        observer = self.logger.observer_for(game_id, user_ip)

        engine = GameEngine(target_word=target_word, rng=self.rng, observer=observer)

        with self._lock:
            self.games[game_id] = InputAdapter(engine, observer)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the rendered state for a session, or None if not found.
        """
        with self._lock:
            adapter = self.games.get(game_id)
            if adapter is None:
                return None
            return self._build_view(game_id, adapter.engine)

    def handle_key(self, game_id: str, raw_key) -> Optional[GameView]:
        """
        Applies one raw key press to a session.

        Ignored keys leave the state unchanged and still return it.

        Returns:
            Updated GameView or None if the game does not exist
        """
        with self._lock:
            adapter = self.games.get(game_id)
            if adapter is None:
                return None
            adapter.handle_key(raw_key)
            return self._build_view(game_id, adapter.engine)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def active_game_count(self) -> int:
        with self._lock:
            return len(self.games)

    def _build_view(self, game_id: str, engine: GameEngine) -> GameView:
        state = engine.state
        return GameView(
            game_id=game_id,
            current_row=state.current_row,
            max_rounds=MAX_ROUNDS,
            status=state.status.value,
            game_over=not state.is_playing,
            won=state.status is GameStatus.WON,
            board=render_board(state.board),
            letter_status=keyboard_status(state.board),
            answer=state.target_word if not state.is_playing else None,
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    validate_word_bank_integrity()
    _game_service = GameService(rng=rng)
    return _game_service
