"""Dataclasses describing key strokes and the bindings that map them to actions."""

from __future__ import annotations

from dataclasses import dataclass

from modedit.actions import ACTION_TYPES, Action, Mode, describe
from modedit.terminal.events import KeyEvent, normalize_modifiers


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press used for table lookups."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def from_event(cls, event: KeyEvent) -> "KeyStroke":
        return cls(key=event.key, modifiers=event.modifiers, text=event.text)

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+x"`` style tokens; a lone ``"+"`` is the plus key."""

        if token == "+":
            return cls(key=token)
        if token.endswith("++"):
            return cls(key="+", modifiers=tuple(token[:-2].split("+")))
        *modifiers, key = token.split("+")
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key token in one mode with the action it produces."""

    id: str
    mode: Mode
    key: str
    action: Action
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not isinstance(self.action, ACTION_TYPES):
            raise TypeError(f"binding '{self.id}' action must be an editor Action")
        object.__setattr__(self, "mode", Mode(self.mode))
        object.__setattr__(self, "key", KeyStroke.parse(self.key).token)
        if not self.description:
            object.__setattr__(self, "description", describe(self.action))

    @property
    def key_signature(self) -> str:
        return self.key


__all__ = ["KeyStroke", "Binding"]
