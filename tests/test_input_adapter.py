"""
Tests for raw key translation and the adapter that feeds an engine.
"""

import unittest

from wordle_grid.adapters.input_adapter import InputAdapter, translate_key
from wordle_grid.models.game import GameStatus
from wordle_grid.models.input_event import InputAction, InputEvent
from wordle_grid.services.game_engine import GameEngine


class RecordingObserver:
    def __init__(self):
        self.events = []

    def __call__(self, event, **details):
        self.events.append((event, details))


class TestTranslateKey(unittest.TestCase):

    def test_letters_become_lowercase_letter_events(self):
        self.assertEqual(translate_key("a"), InputEvent(InputAction.LETTER, "a"))
        self.assertEqual(translate_key("Z"), InputEvent(InputAction.LETTER, "z"))

    def test_backspace_names(self):
        for key in ("Backspace", "BACKSPACE", "Delete"):
            with self.subTest(key=key):
                self.assertEqual(translate_key(key), InputEvent.backspace())

    def test_submit_names(self):
        for key in ("Enter", "enter", "Return"):
            with self.subTest(key=key):
                self.assertEqual(translate_key(key), InputEvent.submit())

    def test_ignorable_keys_are_dropped(self):
        for key in ("Shift", "ArrowLeft", "1", "!", " ", "", "ab", "ñ", None, 65):
            with self.subTest(key=key):
                self.assertIsNone(translate_key(key))

    def test_dropped_keys_are_reported(self):
        observer = RecordingObserver()
        translate_key("Tab", observer)
        translate_key("q", observer)
        self.assertEqual(observer.events, [('invalid_key', {'key': "'Tab'"})])


class TestInputAdapter(unittest.TestCase):

    def setUp(self):
        self.observer = RecordingObserver()
        self.engine = GameEngine(target_word="crane")
        self.adapter = InputAdapter(self.engine, self.observer)

    def press(self, *keys):
        return [self.adapter.handle_key(key) for key in keys]

    def test_forwarded_keys_return_true(self):
        self.assertEqual(self.press("c", "Backspace", "Enter"), [True, True, True])

    def test_dropped_keys_return_false_and_leave_state(self):
        before = self.engine.state
        self.assertEqual(self.press("Shift", "7"), [False, False])
        self.assertIs(self.engine.state, before)
        self.assertEqual([event for event, _ in self.observer.events], ['invalid_key', 'invalid_key'])

    def test_full_game_through_keys(self):
        self.press("C", "r", "a", "n", "x", "Backspace", "e", "Enter")
        self.assertEqual(self.engine.status, GameStatus.WON)

    def test_modifier_names_never_typed_as_letters(self):
        self.press("Shift", "Control", "Alt", "Meta")
        self.assertTrue(all(cell.letter is None for cell in self.engine.board[0]))


if __name__ == "__main__":
    unittest.main()
