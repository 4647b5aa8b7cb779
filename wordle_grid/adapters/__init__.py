"""
Adapters Package

Input translation into engine events and rendering of engine state.
"""

from .input_adapter import InputAdapter, translate_key
from .renderer import CELL_CLASSES, cell_class, keyboard_status, render_board, render_text

__all__ = [
    'InputAdapter', 'translate_key',
    'CELL_CLASSES', 'cell_class', 'keyboard_status', 'render_board', 'render_text'
]
