"""
Data Models Package

Contains the game data structures shared by the engine, adapters and services.
"""

from .game import (
    Board, Cell, CellStatus, EngineState, GameStatus, GameView, Row,
    empty_board, empty_row, replace_row,
)
from .input_event import InputAction, InputEvent

__all__ = [
    'Board', 'Cell', 'CellStatus', 'EngineState', 'GameStatus', 'GameView', 'Row',
    'empty_board', 'empty_row', 'replace_row',
    'InputAction', 'InputEvent'
]
