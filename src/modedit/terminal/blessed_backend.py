"""Terminal backend built on ``blessed``."""

from __future__ import annotations

import sys
from typing import Any, ContextManager, List, Optional, Tuple

from blessed import Terminal

from modedit.errors import TerminalInitError, TerminalIOError
from modedit.runtime import telemetry

from . import events
from .events import InputEvent, KeyEvent

_SEQUENCE_KEYS = {
    "KEY_ESCAPE": events.ESC,
    "KEY_ENTER": events.ENTER,
    "KEY_UP": events.UP,
    "KEY_DOWN": events.DOWN,
    "KEY_LEFT": events.LEFT,
    "KEY_RIGHT": events.RIGHT,
    "KEY_BACKSPACE": events.BACKSPACE,
    "KEY_TAB": events.TAB,
    "KEY_DELETE": events.DELETE,
    "KEY_HOME": events.HOME,
    "KEY_END": events.END,
    "KEY_PGUP": events.PAGE_UP,
    "KEY_PGDOWN": events.PAGE_DOWN,
}

_CONTROL_KEYS = {
    "\r": events.ENTER,
    "\n": events.ENTER,
    "\x1b": events.ESC,
    "\t": events.TAB,
    "\x7f": events.BACKSPACE,
    "\x08": events.BACKSPACE,
}


def keystroke_to_event(keystroke: Any) -> Optional[KeyEvent]:
    """Translate a ``blessed.keyboard.Keystroke`` into a ``KeyEvent``.

    Returns ``None`` for the empty keystroke ``inkey`` yields on timeout.
    """

    if getattr(keystroke, "is_sequence", False):
        name = keystroke.name or ""
        token = _SEQUENCE_KEYS.get(name) or name.removeprefix("KEY_")
        return KeyEvent(key=token or "UNKNOWN")

    text = str(keystroke)
    if not text:
        return None
    if text in _CONTROL_KEYS:
        return KeyEvent(key=_CONTROL_KEYS[text])
    if len(text) == 1 and ord(text) < 0x20:
        # ctrl+a arrives as \x01
        return KeyEvent(key=chr(ord(text) + 0x60), modifiers=("ctrl",))
    return KeyEvent.char(text)


class BlessedTerminal:
    """``TerminalBackend`` writing to a ``blessed.Terminal`` stream.

    Output from ``move_cursor``/``print`` is queued and emitted as a single
    write on ``flush`` so each frame reaches the terminal at once.
    """

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        *,
        esc_delay: float = 0.35,
        stdin: Any = None,
    ) -> None:
        self._term = terminal if terminal is not None else Terminal()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._esc_delay = esc_delay
        self._pending: List[str] = []
        self._raw_cm: Optional[ContextManager[object]] = None
        self._fullscreen = False
        self.logger = telemetry.get_logger("modedit.terminal")

    @property
    def term(self) -> Terminal:
        return self._term

    def enable_raw_input(self) -> None:
        if not self._is_interactive():
            raise TerminalInitError(
                "not attached to an interactive terminal", step="raw_input"
            )
        raw_cm = self._term.raw()
        try:
            raw_cm.__enter__()
        except Exception as exc:
            raise TerminalInitError(
                f"cannot enable raw input: {exc}", step="raw_input"
            ) from exc
        self._raw_cm = raw_cm

    def disable_raw_input(self) -> None:
        raw_cm, self._raw_cm = self._raw_cm, None
        if raw_cm is not None:
            raw_cm.__exit__(None, None, None)

    def enter_alternate_screen(self) -> None:
        try:
            self._write_now(self._term.enter_fullscreen)
        except OSError as exc:
            raise TerminalInitError(
                f"cannot enter alternate screen: {exc}", step="alternate_screen"
            ) from exc
        self._fullscreen = True

    def leave_alternate_screen(self) -> None:
        if not self._fullscreen:
            return
        self._fullscreen = False
        self._write_now(self._term.exit_fullscreen)

    def clear(self) -> None:
        try:
            self._write_now(self._term.home + self._term.clear)
        except OSError as exc:
            raise TerminalInitError(
                f"cannot clear screen: {exc}", step="clear"
            ) from exc

    def get_dimensions(self) -> Tuple[int, int]:
        return self._term.width, self._term.height

    def read_event(self) -> InputEvent:
        while True:
            try:
                keystroke = self._term.inkey(timeout=None, esc_delay=self._esc_delay)
            except OSError as exc:
                raise TerminalIOError(
                    f"cannot read input: {exc}", operation="read_event"
                ) from exc
            event = keystroke_to_event(keystroke)
            if event is not None:
                return event

    def move_cursor(self, x: int, y: int) -> None:
        self._pending.append(self._term.move_xy(x, y))

    def print(self, text: str) -> None:
        self._pending.append(text)

    def flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        try:
            self._write_now(data)
        except OSError as exc:
            raise TerminalIOError(f"cannot flush output: {exc}", operation="flush") from exc

    def _write_now(self, data: str) -> None:
        stream = self._term.stream
        if data:
            stream.write(data)
        stream.flush()

    def _is_interactive(self) -> bool:
        isatty = getattr(self._stdin, "isatty", None)
        return bool(self._term.is_a_tty and isatty is not None and isatty())


__all__ = ["BlessedTerminal", "keystroke_to_event"]
