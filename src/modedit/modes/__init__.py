"""Mode handlers and the manager that dispatches events to them."""

from .base_mode import ModeHandler
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .mode_manager import ModeManager, create_default_manager

__all__ = [
    "ModeHandler",
    "NormalMode",
    "InsertMode",
    "ModeManager",
    "create_default_manager",
]
