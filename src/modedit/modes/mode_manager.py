"""Mode manager coordinating the Normal/Insert translators."""

from __future__ import annotations

from typing import Dict, Optional, Type

from modedit.actions import Action, Mode, describe
from modedit.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)
from modedit.runtime import telemetry
from modedit.terminal.events import InputEvent, KeyEvent

from .base_mode import ModeHandler
from .insert_mode import InsertMode
from .normal_mode import NormalMode


class ModeManager:
    """Owns the active mode and turns input events into optional actions."""

    def __init__(
        self,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
        initial_mode: Mode = Mode.NORMAL,
    ) -> None:
        self._handlers: Dict[Mode, ModeHandler] = {}
        self._active: Mode = Mode(initial_mode)
        self.logger = telemetry.get_logger("modedit.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="modedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="modedit.keymaps"
        )

    @property
    def active(self) -> Mode:
        return self._active

    @property
    def active_handler(self) -> Optional[ModeHandler]:
        return self._handlers.get(self._active)

    def register_mode(self, handler_cls: Type[ModeHandler]) -> ModeHandler:
        handler = handler_cls(self.keymap_resolver)
        if handler.mode in self._handlers:
            raise ValueError(f"Mode '{handler.mode.value}' already registered")
        self._handlers[handler.mode] = handler
        if handler.mode is self._active:
            handler.on_enter(None)
        return handler

    def switch_mode(self, mode: Mode) -> None:
        mode = Mode(mode)
        if mode not in self._handlers:
            raise KeyError(f"Unknown mode '{mode.value}'")
        if mode is self._active:
            return
        previous = self._active
        current = self._handlers.get(previous)
        if current is not None:
            current.on_exit(mode)
        self._active = mode
        self._handlers[mode].on_enter(previous)
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "mode": mode.value}
        )

    def translate(self, event: InputEvent) -> Optional[Action]:
        """Map one event to at most one action under the active mode."""

        if not isinstance(event, KeyEvent):
            return None
        handler = self.active_handler
        if handler is None:
            raise RuntimeError(
                f"No handler registered for mode '{self._active.value}'"
            )
        stroke = KeyStroke.from_event(event)
        with telemetry.span(
            name=f"mode::{handler.mode.value}",
            component=True,
            metadata={"key": stroke.token, "mode": handler.mode.value},
        ) as handle:
            action = handler.handle_key(stroke)
            label = describe(action) if action is not None else "none"
            handle.add_metadata("action", label)
        return action


def create_default_manager() -> ModeManager:
    """Build a ModeManager with both modes and the default keymaps."""

    manager = ModeManager()
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
