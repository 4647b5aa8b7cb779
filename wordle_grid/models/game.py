"""
Game Data Models

Contains the board, cell and engine state structures and their enums.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH


class CellStatus(Enum):
    """Scoring status of a single board cell."""
    EMPTY = "EMPTY"
    CORRECT = "CORRECT"
    MISPLACED = "MISPLACED"
    INCORRECT = "INCORRECT"


class GameStatus(Enum):
    """Lifecycle of a game. WON and LOST are terminal."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Cell:
    """One letter slot on the board."""
    letter: Optional[str] = None
    status: CellStatus = CellStatus.EMPTY

    @property
    def is_filled(self) -> bool:
        return self.letter is not None

    def with_letter(self, letter: Optional[str]) -> "Cell":
        return replace(self, letter=letter)


Row = Tuple[Cell, ...]
Board = Tuple[Row, ...]


def empty_row() -> Row:
    return tuple(Cell() for _ in range(WORD_LENGTH))


def empty_board() -> Board:
    """Build a MAX_ROUNDS x WORD_LENGTH board of empty cells."""
    return tuple(empty_row() for _ in range(MAX_ROUNDS))


def replace_row(board: Board, index: int, row: Row) -> Board:
    """Return a copy of ``board`` with row ``index`` swapped for ``row``."""
    return board[:index] + (row,) + board[index + 1:]


@dataclass(frozen=True)
class EngineState:
    """Immutable snapshot owned by a GameEngine.

    Every engine operation builds a new snapshot instead of mutating this one.
    """
    target_word: str
    board: Board
    current_row: int = 0
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    @property
    def active_row(self) -> Row:
        return self.board[self.current_row]


@dataclass
class GameView:
    """Client-facing game state. ``answer`` is only set once the game is over."""
    game_id: str
    current_row: int
    max_rounds: int
    status: str
    game_over: bool
    won: bool
    board: List[List[Dict[str, str]]]
    letter_status: Dict[str, str]
    answer: Optional[str] = None
