"""Editor modes and the closed set of actions the engine applies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class Mode(str, Enum):
    """Editing context selecting the active key table."""

    NORMAL = "normal"
    INSERT = "insert"


@dataclass(frozen=True, slots=True)
class Quit:
    name: ClassVar[str] = "quit"


@dataclass(frozen=True, slots=True)
class MoveUp:
    name: ClassVar[str] = "move_up"


@dataclass(frozen=True, slots=True)
class MoveDown:
    name: ClassVar[str] = "move_down"


@dataclass(frozen=True, slots=True)
class MoveLeft:
    name: ClassVar[str] = "move_left"


@dataclass(frozen=True, slots=True)
class MoveRight:
    name: ClassVar[str] = "move_right"


@dataclass(frozen=True, slots=True)
class EnterMode:
    mode: Mode
    name: ClassVar[str] = "enter_mode"

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode(self.mode))


@dataclass(frozen=True, slots=True)
class AddChar:
    char: str
    name: ClassVar[str] = "add_char"

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"AddChar takes a single character, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class NewLine:
    name: ClassVar[str] = "new_line"


Action = Union[Quit, MoveUp, MoveDown, MoveLeft, MoveRight, EnterMode, AddChar, NewLine]

ACTION_TYPES: tuple[type, ...] = (
    Quit,
    MoveUp,
    MoveDown,
    MoveLeft,
    MoveRight,
    EnterMode,
    AddChar,
    NewLine,
)


def describe(action: Action) -> str:
    """Short human-readable label used in logs and binding listings."""

    if isinstance(action, EnterMode):
        return f"{action.name}:{action.mode.value}"
    if isinstance(action, AddChar):
        return f"{action.name}:{action.char!r}"
    return action.name


__all__ = [
    "Mode",
    "Action",
    "ACTION_TYPES",
    "Quit",
    "MoveUp",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "EnterMode",
    "AddChar",
    "NewLine",
    "describe",
]
