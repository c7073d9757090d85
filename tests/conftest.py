from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import pytest

from modedit.errors import TerminalInitError, TerminalIOError
from modedit.runtime import telemetry
from modedit.terminal.events import InputEvent, KeyEvent


def keys(*tokens: str) -> List[KeyEvent]:
    """Key events for printable characters or named tokens like ``"ESC"``."""

    result: List[KeyEvent] = []
    for token in tokens:
        if len(token) == 1:
            result.append(KeyEvent.char(token))
        else:
            result.append(KeyEvent(key=token))
    return result


class FakeTerminal:
    """In-memory ``TerminalBackend`` that renders queued output into a grid."""

    def __init__(
        self,
        events: Iterable[InputEvent] = (),
        *,
        size: Tuple[int, int] = (80, 24),
        fail_on: Iterable[str] = (),
    ) -> None:
        self.events = deque(events)
        self.size = size
        self.fail_on = set(fail_on)
        self.calls: List[str] = []
        self.cells: Dict[Tuple[int, int], str] = {}
        self.flushes = 0
        self.raw = False
        self.alternate = False
        self.cursor: Tuple[int, int] = (0, 0)
        self._pending: List[Tuple[str, object]] = []
        self._pos: Tuple[int, int] = (0, 0)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name not in self.fail_on:
            return
        if name in {"enable_raw_input", "enter_alternate_screen", "clear"}:
            raise TerminalInitError(f"{name} failed", step=name)
        if name in {"read_event", "flush"}:
            raise TerminalIOError(f"{name} failed", operation=name)
        raise OSError(f"{name} failed")

    def enable_raw_input(self) -> None:
        self._record("enable_raw_input")
        self.raw = True

    def disable_raw_input(self) -> None:
        self._record("disable_raw_input")
        self.raw = False

    def enter_alternate_screen(self) -> None:
        self._record("enter_alternate_screen")
        self.alternate = True

    def leave_alternate_screen(self) -> None:
        self._record("leave_alternate_screen")
        self.alternate = False

    def clear(self) -> None:
        self._record("clear")
        self.cells.clear()

    def get_dimensions(self) -> Tuple[int, int]:
        self._record("get_dimensions")
        return self.size

    def read_event(self) -> InputEvent:
        self._record("read_event")
        if not self.events:
            raise TerminalIOError("input exhausted", operation="read_event")
        return self.events.popleft()

    def move_cursor(self, x: int, y: int) -> None:
        self._pending.append(("move", (x, y)))

    def print(self, text: str) -> None:
        self._pending.append(("print", text))

    def flush(self) -> None:
        self._record("flush")
        for op, payload in self._pending:
            if op == "move":
                self._pos = payload  # type: ignore[assignment]
                continue
            x, y = self._pos
            for char in str(payload):
                self.cells[(x, y)] = char
                x += 1
            self._pos = (x, y)
        self._pending.clear()
        self.cursor = self._pos
        self.flushes += 1

    def row_text(self, row: int, start: int = 0, end: Optional[int] = None) -> str:
        stop = end if end is not None else self.size[0]
        return "".join(self.cells.get((col, row), " ") for col in range(start, stop))

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def make_terminal():
    def factory(*events: InputEvent, **kwargs: object) -> FakeTerminal:
        return FakeTerminal(events, **kwargs)  # type: ignore[arg-type]

    return factory


class RecordingConfig:
    """Stands in for ``telelog.Config``; keeps the last value of each setter."""

    def __init__(self) -> None:
        self.settings: Dict[str, Any] = {}

    def __getattr__(self, name: str) -> Any:
        if not name.startswith("with_"):
            raise AttributeError(name)

        def setter(value: Any) -> "RecordingConfig":
            self.settings[name[len("with_"):]] = value
            return self

        return setter


class RecordingLogger:
    """Stands in for ``telelog.Logger`` and keeps every call it receives."""

    def __init__(self, name: str, config: RecordingConfig) -> None:
        self.name = name
        self.config = config
        self.lines: List[Tuple[str, str, Any]] = []
        self.context: Dict[str, str] = {}
        self.components: List[str] = []
        self.profiles: List[str] = []

    def _structured(self, level: str) -> Any:
        def log(message: str, pairs: List[Tuple[str, str]]) -> None:
            self.lines.append((level, message, dict(pairs)))

        return log

    def __getattr__(self, name: str) -> Any:
        if name.endswith("_with"):
            return self._structured(name[: -len("_with")])
        raise AttributeError(name)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiles.append(name)
        yield

    def events(self) -> List[str]:
        return [data.get("event", message) for _, message, data in self.lines]


class TelemetryRecorder:
    def __init__(self) -> None:
        self.configs: List[RecordingConfig] = []
        self.loggers: Dict[str, RecordingLogger] = {}
        self.module = SimpleNamespace(Config=self._config, Logger=self)

    def _config(self) -> RecordingConfig:
        config = RecordingConfig()
        self.configs.append(config)
        return config

    def with_config(self, name: str, config: RecordingConfig) -> RecordingLogger:
        logger = RecordingLogger(name, config)
        self.loggers[name] = logger
        return logger

    @property
    def active(self) -> Dict[str, Any]:
        return self.configs[-1].settings


@pytest.fixture
def telelog_recorder(monkeypatch: pytest.MonkeyPatch) -> TelemetryRecorder:
    """Route ``modedit.runtime.telemetry`` through recording telelog fakes."""

    for name in (
        "LOG_LEVEL",
        "LOG_FILE",
        "LOG_CONSOLE",
        "LOG_JSON",
        "LOG_BUFFERED",
        "LOG_BUFFER_SIZE",
        "LOG_PRESET",
        "NO_COLOR",
    ):
        monkeypatch.delenv(f"MODEDIT_{name}", raising=False)
    recorder = TelemetryRecorder()
    monkeypatch.setattr(telemetry, "tl", recorder.module)
    monkeypatch.setattr(telemetry, "_config", None)
    monkeypatch.setattr(telemetry, "_loggers", {})
    return recorder
