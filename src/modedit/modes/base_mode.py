"""Base class shared by the per-mode key translators."""

from __future__ import annotations

from typing import Optional

from modedit.actions import Action, Mode
from modedit.keymaps import KeymapResolver, KeyStroke
from modedit.runtime import telemetry


class ModeHandler:
    """Translates key strokes into actions for one editing mode.

    Subclasses set ``mode`` and may override ``fallback`` to produce an action
    for keys their table does not bind. Translation never mutates editor
    state; the engine applies whatever comes back.
    """

    mode: Mode

    def __init__(self, resolver: KeymapResolver) -> None:
        self._resolver = resolver
        self.logger = telemetry.get_logger(f"modedit.modes.{self.mode.value}")

    def on_enter(self, previous: Optional[Mode]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[Mode]) -> None:
        del next_mode

    def handle_key(self, stroke: KeyStroke) -> Optional[Action]:
        tokens = [stroke.token]
        if stroke.modifiers:
            # ctrl+q still means q when nothing binds the qualified token.
            tokens.append(stroke.key)
        for token in tokens:
            result = self._resolver.resolve(self.mode, token)
            if result.status == "match" and result.binding is not None:
                return result.binding.action
        return self.fallback(stroke)

    def fallback(self, stroke: KeyStroke) -> Optional[Action]:
        del stroke
        return None


__all__ = ["ModeHandler"]
