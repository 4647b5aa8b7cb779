"""
Board Renderer

Projects engine state into plain, JSON-serialisable structures for a client
to draw: the 6x5 grid with a visual class per cell, and keyboard hints.
"""

import string
from typing import Dict, List

from ..models.game import Board, CellStatus

CELL_CLASSES: Dict[CellStatus, str] = {
    CellStatus.CORRECT: "correct",
    CellStatus.MISPLACED: "misplaced",
    CellStatus.INCORRECT: "incorrect",
    CellStatus.EMPTY: "empty",
}

# Higher wins when a letter appears on several scored rows
_HINT_PRIORITY = {
    CellStatus.EMPTY: 0,
    CellStatus.INCORRECT: 1,
    CellStatus.MISPLACED: 2,
    CellStatus.CORRECT: 3,
}


def cell_class(status: CellStatus) -> str:
    return CELL_CLASSES[status]


def render_board(board: Board) -> List[List[Dict[str, str]]]:
    """
    Renders every cell as {letter, status, css_class}.

    Unset letters render as an empty string.
    """
    return [
        [
            {
                'letter': cell.letter or "",
                'status': cell.status.value,
                'css_class': cell_class(cell.status),
            }
            for cell in row
        ]
        for row in board
    ]


def keyboard_status(board: Board) -> Dict[str, str]:
    """
    Best known status per letter a-z across scored cells.

    A letter only ever moves up: incorrect -> misplaced -> correct. Letters
    not yet guessed stay "empty".
    """
    best = {letter: CellStatus.EMPTY for letter in string.ascii_lowercase}
    for row in board:
        for cell in row:
            if cell.letter is None or cell.status is CellStatus.EMPTY:
                continue
            if _HINT_PRIORITY[cell.status] > _HINT_PRIORITY[best[cell.letter]]:
                best[cell.letter] = cell.status
    return {letter: cell_class(status) for letter, status in best.items()}


def render_text(board: Board) -> str:
    """Plain-text grid, one row per line, for logs and terminals."""
    marks = {
        CellStatus.CORRECT: "+",
        CellStatus.MISPLACED: "?",
        CellStatus.INCORRECT: "-",
        CellStatus.EMPTY: " ",
    }
    lines = []
    for row in board:
        lines.append(" ".join(f"[{(cell.letter or '.').upper()}{marks[cell.status]}]" for cell in row))
    return "\n".join(lines)
