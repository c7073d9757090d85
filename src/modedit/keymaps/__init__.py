"""Declarative key tables mapping (mode, key) to editor actions."""

from .models import Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, KeyTable, ResolutionResult
from .defaults import DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "KeyTable",
    "ResolutionResult",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
