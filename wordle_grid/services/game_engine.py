"""
Game Engine

The single-player game state machine: board filling, row scoring and win/loss
determination. The engine does no I/O; notable events are reported to an
injectable observer.
"""

import random
from typing import Optional, Sequence, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_BANK, WORD_LENGTH
from ..models.game import (
    Cell, CellStatus, EngineState, GameStatus, Row, empty_board, replace_row,
)
from ..models.input_event import InputAction, InputEvent, Observer, is_letter


def _silent_observer(event: str, **details) -> None:
    return None


def word_at(index: int, bank: Sequence[str] = WORD_BANK) -> str:
    """Look up a bank word by index. Out-of-range indices yield ''."""
    if 0 <= index < len(bank):
        return bank[index]
    return ""


def pick_target_word(rng: Optional[random.Random] = None,
                     bank: Sequence[str] = WORD_BANK) -> Tuple[int, str]:
    """
    Draws one word uniformly from the bank.

    The index is drawn from [0, len(bank) - 1].

    Returns:
        Tuple of (index, word)
    """
    rng = rng or random
    index = rng.randrange(len(bank))
    return index, word_at(index, bank)


def score_row(letters: Sequence[str], target: str) -> Tuple[CellStatus, ...]:
    """
    Scores a complete guess against the target, position by position.

    Presence is a plain membership test on the target: a guess letter repeated
    more often than it occurs in the target is Misplaced at every off-position
    occurrence.
    """
    statuses = []
    for i, letter in enumerate(letters):
        if letter == target[i]:
            statuses.append(CellStatus.CORRECT)
        elif letter in target:
            statuses.append(CellStatus.MISPLACED)
        else:
            statuses.append(CellStatus.INCORRECT)
    return tuple(statuses)


def initial_state(target_word: str) -> EngineState:
    return EngineState(target_word=target_word, board=empty_board())


def apply_letter(state: EngineState, ch: str) -> EngineState:
    """Write ``ch`` into the first free cell of the active row."""
    if not state.is_playing or not is_letter(ch):
        return state

    row = state.active_row
    for col, cell in enumerate(row):
        if not cell.is_filled:
            new_row = row[:col] + (cell.with_letter(ch.lower()),) + row[col + 1:]
            return EngineState(
                target_word=state.target_word,
                board=replace_row(state.board, state.current_row, new_row),
                current_row=state.current_row,
                status=state.status,
            )
    return state


def apply_backspace(state: EngineState) -> EngineState:
    """Clear the rightmost filled cell of the active row."""
    # Guarded like apply_letter so a scored row can never lose letters.
    if not state.is_playing:
        return state

    row = state.active_row
    for col in range(len(row) - 1, -1, -1):
        if row[col].is_filled:
            new_row = row[:col] + (row[col].with_letter(None),) + row[col + 1:]
            return EngineState(
                target_word=state.target_word,
                board=replace_row(state.board, state.current_row, new_row),
                current_row=state.current_row,
                status=state.status,
            )
    return state


def apply_submit(state: EngineState) -> EngineState:
    """Score the active row and advance, win or lose."""
    if not state.is_playing:
        return state

    row = state.active_row
    if not all(cell.is_filled for cell in row):
        return state

    statuses = score_row([cell.letter for cell in row], state.target_word)
    scored: Row = tuple(Cell(cell.letter, status) for cell, status in zip(row, statuses))
    board = replace_row(state.board, state.current_row, scored)

    if all(status is CellStatus.CORRECT for status in statuses):
        return EngineState(state.target_word, board, state.current_row, GameStatus.WON)
    if state.current_row == MAX_ROUNDS - 1:
        return EngineState(state.target_word, board, state.current_row, GameStatus.LOST)
    return EngineState(state.target_word, board, state.current_row + 1, GameStatus.PLAYING)


class GameEngine:
    """
    Owns one game's state snapshot and applies input to it.

    Each operation computes a new EngineState from the current one and swaps
    it in whole. Inputs that do not apply (full row, incomplete submit, game
    over) leave the snapshot untouched.
    """

    def __init__(self,
                 target_word: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 observer: Optional[Observer] = None,
                 word_bank: Sequence[str] = WORD_BANK):
        self._observer = observer or _silent_observer

        if target_word is None:
            index, target_word = pick_target_word(rng, word_bank)
            if not target_word:
                self._observer('word_fallback', index=index, bank_size=len(word_bank))
                index, target_word = 0, word_bank[0]
            self._observer('word_chosen', index=index, target_word=target_word)
        elif len(target_word) != WORD_LENGTH or not all(is_letter(ch) for ch in target_word):
            raise ValueError(f"Target word must be {WORD_LENGTH} letters, got '{target_word}'")

        self._state = initial_state(target_word.lower())

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def target_word(self) -> str:
        return self._state.target_word

    @property
    def board(self):
        return self._state.board

    @property
    def current_row(self) -> int:
        return self._state.current_row

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def game_over(self) -> bool:
        return not self._state.is_playing

    def append_letter(self, ch: str) -> EngineState:
        self._state = apply_letter(self._state, ch)
        return self._state

    def backspace(self) -> EngineState:
        self._state = apply_backspace(self._state)
        return self._state

    def submit_row(self) -> EngineState:
        previous = self._state
        self._state = apply_submit(previous)

        if previous.is_playing and not self._state.is_playing:
            event = 'game_won' if self._state.status is GameStatus.WON else 'game_lost'
            self._observer(event,
                           rows_used=self._state.current_row + 1,
                           target_word=self._state.target_word)
        return self._state

    def dispatch(self, event: InputEvent) -> EngineState:
        """Route a translated input event to the matching operation."""
        if event.action is InputAction.LETTER:
            return self.append_letter(event.letter)
        if event.action is InputAction.BACKSPACE:
            return self.backspace()
        if event.action is InputAction.SUBMIT:
            return self.submit_row()
        return self._state
