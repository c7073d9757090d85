"""Insert mode: typed characters go straight to the screen."""

from __future__ import annotations

from typing import Optional

from modedit.actions import Action, AddChar, Mode
from modedit.keymaps import KeyStroke

from .base_mode import ModeHandler


class InsertMode(ModeHandler):
    mode = Mode.INSERT

    def fallback(self, stroke: KeyStroke) -> Optional[Action]:
        # Keyed on the character alone; held modifiers do not matter.
        char = stroke.text or stroke.key
        if len(char) != 1 or not char.isprintable():
            return None
        return AddChar(char)
