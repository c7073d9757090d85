"""Editor-level commands decoupled from the key events that produce them."""

from .core import (
    ACTION_TYPES,
    Action,
    AddChar,
    EnterMode,
    Mode,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    NewLine,
    Quit,
    describe,
)

__all__ = [
    "Mode",
    "Action",
    "ACTION_TYPES",
    "Quit",
    "MoveUp",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "EnterMode",
    "AddChar",
    "NewLine",
    "describe",
]
