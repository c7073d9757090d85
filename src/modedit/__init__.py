"""Minimal modal terminal text editor."""

__all__ = [
    "actions",
    "config",
    "editor",
    "errors",
    "keymaps",
    "modes",
    "runtime",
    "terminal",
]

__version__ = "0.1.0"
