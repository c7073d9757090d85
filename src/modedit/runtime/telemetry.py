"""Logging and profiling for the editor, on top of telelog.

The editor owns the terminal while it runs, so nothing is logged to the
console unless ``MODEDIT_LOG_CONSOLE`` asks for it. Set ``MODEDIT_LOG_FILE``
and ``tail -f`` the file from another terminal to follow a session.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MODEDIT_"
DEFAULT_LOGGER_NAME = "modedit"


@dataclass(frozen=True)
class Preset:
    level: str
    log_file: str
    json: bool = False
    buffered: bool = False


PRESETS: Mapping[str, Preset] = {
    "development": Preset("DEBUG", "modedit-dev.log"),
    "production": Preset("INFO", "modedit.log", buffered=True),
    "performance": Preset("DEBUG", "modedit-performance.log", json=True, buffered=True),
}

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name) or None


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _console(config: Any) -> None:
    console = _env_flag("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))


def build_config(
    preset: Optional[str] = None, *, log_file: Optional[str] = None
) -> Any:
    """Build a ``telelog.Config`` from a named preset or from the environment."""

    config = tl.Config()
    if preset is not None:
        try:
            chosen = PRESETS[preset.lower()]
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
        config.with_min_level(chosen.level)
        target = log_file or _env("LOG_FILE") or chosen.log_file
        json_format, buffered = chosen.json, chosen.buffered
    else:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        target = log_file or _env("LOG_FILE")
        json_format, buffered = _env_flag("LOG_JSON"), _env_flag("LOG_BUFFERED")

    _console(config)
    if json_format:
        config.with_json_format(True)
    if target:
        config.with_file_output(target)
    if buffered:
        config.with_buffering(True)
        if preset is None:
            config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Replace the active configuration and drop cached loggers.

    ``config`` adopts a ready ``telelog.Config`` as is. Otherwise one is built
    from ``preset`` (``development``, ``production`` or ``performance``) or,
    without a preset, from the ``MODEDIT_LOG_*`` variables. ``log_file``
    overrides ``MODEDIT_LOG_FILE``.
    """

    global _config
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    _config = config if config is not None else build_config(preset, log_file=log_file)
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    if _config is None:
        _config = build_config()
    key = name or DEFAULT_LOGGER_NAME
    if key not in _loggers:
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _log(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _log(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component`` also tracks the block as a telelog component (``True`` reuses
    ``name``). ``metadata`` is attached as logger context while the block runs.
    An exception leaving the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, component_name, dict(context))

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "Preset",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
