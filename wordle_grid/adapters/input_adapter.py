"""
Input Adapter

Translates raw key names (as sent by a browser keyboard handler) into engine
input events. Anything that is not a letter, Backspace or Enter is dropped
here and never reaches the engine.
"""

from typing import Optional

from ..models.input_event import InputEvent, Observer, is_letter

BACKSPACE_KEYS = frozenset({'backspace', 'delete'})
SUBMIT_KEYS = frozenset({'enter', 'return'})


def translate_key(raw_key, observer: Optional[Observer] = None) -> Optional[InputEvent]:
    """
    Maps a raw key to an InputEvent.

    Args:
        raw_key: Key name such as "a", "Enter" or "Backspace"
        observer: Optional diagnostics sink notified of dropped keys

    Returns:
        InputEvent, or None if the key is ignorable
    """
    if is_letter(raw_key):
        return InputEvent.for_letter(raw_key)

    if isinstance(raw_key, str):
        name = raw_key.strip().lower()
        if name in BACKSPACE_KEYS:
            return InputEvent.backspace()
        if name in SUBMIT_KEYS:
            return InputEvent.submit()

    if observer is not None:
        observer('invalid_key', key=repr(raw_key))
    return None


class InputAdapter:
    """Feeds raw keys into one engine."""

    def __init__(self, engine, observer: Optional[Observer] = None):
        self.engine = engine
        self.observer = observer

    def handle_key(self, raw_key) -> bool:
        """Returns True if the key was forwarded to the engine."""
        event = translate_key(raw_key, self.observer)
        if event is None:
            return False
        self.engine.dispatch(event)
        return True
