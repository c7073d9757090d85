"""Exception types raised by the editor and its terminal backends."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for editor failures surfaced to the process."""


class TerminalInitError(EditorError):
    """Raised when the terminal cannot be acquired for interactive use."""

    def __init__(self, message: str, *, step: str | None = None) -> None:
        super().__init__(message)
        self.step = step


class TerminalIOError(EditorError):
    """Raised when a write, flush, or event read fails mid-session."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


__all__ = ["EditorError", "TerminalInitError", "TerminalIOError"]
