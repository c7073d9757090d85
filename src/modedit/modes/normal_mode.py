"""Normal mode: cursor motion, quitting, and the switch into insert mode."""

from __future__ import annotations

from modedit.actions import Mode

from .base_mode import ModeHandler


class NormalMode(ModeHandler):
    mode = Mode.NORMAL
