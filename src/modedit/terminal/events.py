"""Normalized input events delivered by terminal backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

# Named key tokens. Printable keys use the character itself as their token.
ESC = "ESC"
ENTER = "ENTER"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
BACKSPACE = "BACKSPACE"
TAB = "TAB"
DELETE = "DELETE"
HOME = "HOME"
END = "END"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A single key press.

    ``key`` is a named token (``"ESC"``, ``"UP"``...) or the typed character.
    ``text`` is only populated for printable input.
    """

    key: str
    text: Optional[str] = None
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @classmethod
    def char(cls, value: str, *modifiers: str) -> "KeyEvent":
        """Build the event a printable key press produces."""

        text = value if value.isprintable() else None
        return cls(key=value, text=text, modifiers=modifiers)


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    columns: int
    rows: int


@dataclass(frozen=True, slots=True)
class FocusEvent:
    gained: bool


@dataclass(frozen=True, slots=True)
class MouseEvent:
    x: int
    y: int
    button: str = "left"


@dataclass(frozen=True, slots=True)
class PasteEvent:
    text: str


InputEvent = Union[KeyEvent, ResizeEvent, FocusEvent, MouseEvent, PasteEvent]

__all__ = [
    "InputEvent",
    "KeyEvent",
    "ResizeEvent",
    "FocusEvent",
    "MouseEvent",
    "PasteEvent",
    "normalize_modifiers",
    "ESC",
    "ENTER",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "BACKSPACE",
    "TAB",
    "DELETE",
    "HOME",
    "END",
    "PAGE_UP",
    "PAGE_DOWN",
]
