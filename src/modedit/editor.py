"""The editor session: terminal ownership, the event loop, and action application."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Optional, Tuple

from modedit.actions import (
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
from modedit.config import EditorConfig
from modedit.errors import TerminalInitError
from modedit.modes import ModeManager, create_default_manager
from modedit.runtime import telemetry
from modedit.terminal import BlessedTerminal, InputEvent, TerminalBackend


@dataclass(frozen=True, slots=True)
class EditorState:
    """Snapshot of the mutable editor state."""

    mode: Mode
    cx: int
    cy: int
    size: Tuple[int, int]


class Editor(AbstractContextManager["Editor"]):
    """Single interactive session owning the terminal until ``close``.

    Construction acquires the terminal (raw input, alternate screen, cleared
    display) and raises ``TerminalInitError`` if any step fails. ``close``
    restores it and runs once no matter how the session ends: explicitly,
    through ``with``, or when the object is collected.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        terminal: Optional[TerminalBackend] = None,
        manager: Optional[ModeManager] = None,
    ) -> None:
        self._closed = True
        self.config = config or EditorConfig()
        self.logger = telemetry.get_logger("modedit.editor")
        self._terminal: TerminalBackend = (
            terminal
            if terminal is not None
            else BlessedTerminal(esc_delay=self.config.esc_delay)
        )
        self._manager = manager or create_default_manager()
        self._cx = 0
        self._cy = 0
        self._size: Tuple[int, int] = (0, 0)
        self._acquire()

    def _acquire(self) -> None:
        with telemetry.span("editor::acquire", component="editor"):
            try:
                self._terminal.enable_raw_input()
                self._closed = False
                self._terminal.enter_alternate_screen()
                self._terminal.clear()
                self._size = self._terminal.get_dimensions()
            except TerminalInitError:
                self.close()
                raise
            except Exception as exc:
                self.close()
                raise TerminalInitError(str(exc), step="acquire") from exc
        telemetry.record_event(
            "editor.start",
            data={"columns": self._size[0], "rows": self._size[1]},
        )

    def __enter__(self) -> "Editor":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def mode(self) -> Mode:
        return self._manager.active

    @property
    def cursor(self) -> Tuple[int, int]:
        return self._cx, self._cy

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def state(self) -> EditorState:
        return EditorState(mode=self.mode, cx=self._cx, cy=self._cy, size=self._size)

    @property
    def status_row(self) -> int:
        return max(self._size[1] - 2, 0)

    def close(self) -> None:
        """Flush, leave the alternate screen, and restore cooked input."""

        if self._closed:
            return
        self._closed = True
        for step in (
            self._terminal.flush,
            self._terminal.leave_alternate_screen,
            self._terminal.disable_raw_input,
        ):
            try:
                step()
            except Exception as exc:
                # Teardown must always reach the remaining steps.
                telemetry.record_event(
                    "editor.teardown_error",
                    level="warning",
                    data={"step": step.__name__, "error": str(exc)},
                )
        telemetry.record_event("editor.closed")

    def draw(self) -> None:
        self.draw_status_line()
        self._terminal.move_cursor(self._cx, self._cy)
        self._terminal.flush()

    def draw_status_line(self) -> None:
        self._terminal.move_cursor(0, self.status_row)
        self._terminal.print(self.config.status_text)

    def run(self) -> None:
        """Render, read, translate, apply; until a ``Quit`` is applied."""

        if self._closed:
            raise RuntimeError("editor session is closed")
        while True:
            self.draw()
            action = self.handle_event(self._terminal.read_event())
            if action is not None and self.apply(action):
                break
        telemetry.record_event("editor.quit", data={"cx": self._cx, "cy": self._cy})

    def handle_event(self, event: InputEvent) -> Optional[Action]:
        return self._manager.translate(event)

    def apply(self, action: Action) -> bool:
        """Apply ``action`` to the session; ``True`` means stop the loop."""

        with telemetry.span(
            "editor::apply",
            component="editor",
            metadata={"action": describe(action), "mode": self.mode.value},
        ):
            if isinstance(action, Quit):
                return True
            if isinstance(action, MoveUp):
                self._cy = max(self._cy - 1, 0)
            elif isinstance(action, MoveDown):
                self._cy += 1
            elif isinstance(action, MoveLeft):
                self._cx = max(self._cx - 1, 0)
            elif isinstance(action, MoveRight):
                self._cx += 1
            elif isinstance(action, EnterMode):
                self._manager.switch_mode(action.mode)
            elif isinstance(action, AddChar):
                # Written now rather than by draw; there is no document model.
                self._terminal.move_cursor(self._cx, self._cy)
                self._terminal.print(action.char)
                self._cx += 1
            elif isinstance(action, NewLine):
                self._cx = 0
                self._cy += 1
            else:
                raise TypeError(f"Unsupported action {action!r}")
            return False


__all__ = ["Editor", "EditorState"]
