"""
Input Event Models

The three events the input adapter can deliver to a game engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

# Diagnostics sink, called as observer(event_name, **details)
Observer = Callable[..., None]


def is_letter(ch) -> bool:
    """True for a single ASCII letter of either case."""
    return isinstance(ch, str) and len(ch) == 1 and ch.isascii() and ch.isalpha()


class InputAction(Enum):
    LETTER = "LETTER"
    BACKSPACE = "BACKSPACE"
    SUBMIT = "SUBMIT"


@dataclass(frozen=True)
class InputEvent:
    """A translated key press. ``letter`` is only set for LETTER events."""
    action: InputAction
    letter: Optional[str] = None

    @classmethod
    def for_letter(cls, letter: str) -> "InputEvent":
        return cls(InputAction.LETTER, letter.lower())

    @classmethod
    def backspace(cls) -> "InputEvent":
        return cls(InputAction.BACKSPACE)

    @classmethod
    def submit(cls) -> "InputEvent":
        return cls(InputAction.SUBMIT)
