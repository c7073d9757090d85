"""Editor configuration resolved from the environment and the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "MODEDIT_"
DEFAULT_STATUS_TEXT = "Status line"
DEFAULT_ESC_DELAY = 0.35


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed >= 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Knobs for a single editor session.

    ``esc_delay`` is how long (seconds) the terminal backend waits after a
    bare Escape byte before deciding it is not the start of a key sequence.
    """

    status_text: str = DEFAULT_STATUS_TEXT
    esc_delay: float = DEFAULT_ESC_DELAY
    log_preset: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        return cls(
            status_text=source.get(f"{ENV_PREFIX}STATUS_TEXT", DEFAULT_STATUS_TEXT),
            esc_delay=_env_float(source, "ESC_DELAY", DEFAULT_ESC_DELAY),
            log_preset=source.get(f"{ENV_PREFIX}LOG_PRESET") or None,
            log_file=source.get(f"{ENV_PREFIX}LOG_FILE") or None,
        )

    def override(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` change applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


__all__ = ["EditorConfig", "DEFAULT_STATUS_TEXT", "DEFAULT_ESC_DELAY"]
