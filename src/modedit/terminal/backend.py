"""Contract between the editor engine and a terminal implementation."""

from __future__ import annotations

from typing import Protocol, Tuple

from .events import InputEvent


class TerminalBackend(Protocol):
    """Primitives the editor consumes.

    Acquisition calls raise ``TerminalInitError``; the queued primitives and
    ``read_event`` raise ``TerminalIOError``. ``move_cursor`` and ``print``
    only queue output; nothing becomes visible before ``flush``.
    """

    def enable_raw_input(self) -> None:
        ...

    def disable_raw_input(self) -> None:
        ...

    def enter_alternate_screen(self) -> None:
        ...

    def leave_alternate_screen(self) -> None:
        ...

    def clear(self) -> None:
        ...

    def get_dimensions(self) -> Tuple[int, int]:
        """Return ``(columns, rows)``."""
        ...

    def read_event(self) -> InputEvent:
        """Block until the next input event arrives."""
        ...

    def move_cursor(self, x: int, y: int) -> None:
        ...

    def print(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


__all__ = ["TerminalBackend"]
