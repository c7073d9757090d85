"""Terminal backend contract, input events, and the blessed implementation."""

from .backend import TerminalBackend
from .blessed_backend import BlessedTerminal, keystroke_to_event
from .events import (
    FocusEvent,
    InputEvent,
    KeyEvent,
    MouseEvent,
    PasteEvent,
    ResizeEvent,
)

__all__ = [
    "TerminalBackend",
    "BlessedTerminal",
    "keystroke_to_event",
    "InputEvent",
    "KeyEvent",
    "ResizeEvent",
    "FocusEvent",
    "MouseEvent",
    "PasteEvent",
]
