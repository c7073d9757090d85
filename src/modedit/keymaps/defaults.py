"""Built-in key tables for Normal and Insert mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from modedit.actions import (
    EnterMode,
    Mode,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    NewLine,
    Quit,
)
from modedit.terminal import events

from .models import Binding
from .registry import KeymapRegistry

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="normal.quit",
        mode=Mode.NORMAL,
        key="q",
        action=Quit(),
        description="Quit the editor",
    ),
    Binding(
        id="normal.move_up",
        mode=Mode.NORMAL,
        key=events.UP,
        action=MoveUp(),
        description="Move cursor up",
    ),
    Binding(
        id="normal.move_up_k",
        mode=Mode.NORMAL,
        key="k",
        action=MoveUp(),
        description="Move cursor up",
    ),
    Binding(
        id="normal.move_down",
        mode=Mode.NORMAL,
        key=events.DOWN,
        action=MoveDown(),
        description="Move cursor down",
    ),
    Binding(
        id="normal.move_down_j",
        mode=Mode.NORMAL,
        key="j",
        action=MoveDown(),
        description="Move cursor down",
    ),
    Binding(
        id="normal.move_left",
        mode=Mode.NORMAL,
        key=events.LEFT,
        action=MoveLeft(),
        description="Move cursor left",
    ),
    Binding(
        id="normal.move_left_h",
        mode=Mode.NORMAL,
        key="h",
        action=MoveLeft(),
        description="Move cursor left",
    ),
    Binding(
        id="normal.move_right",
        mode=Mode.NORMAL,
        key=events.RIGHT,
        action=MoveRight(),
        description="Move cursor right",
    ),
    Binding(
        id="normal.move_right_l",
        mode=Mode.NORMAL,
        key="l",
        action=MoveRight(),
        description="Move cursor right",
    ),
    Binding(
        id="normal.enter_insert",
        mode=Mode.NORMAL,
        key="i",
        action=EnterMode(Mode.INSERT),
        description="Enter insert mode",
    ),
    Binding(
        id="insert.exit_escape",
        mode=Mode.INSERT,
        key=events.ESC,
        action=EnterMode(Mode.NORMAL),
        description="Leave insert mode",
    ),
    Binding(
        id="insert.new_line",
        mode=Mode.INSERT,
        key=events.ENTER,
        action=NewLine(),
        description="Start a new line",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in bindings, then any ``extra_bindings``.

    Extra bindings replace defaults bound to the same key.
    """

    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_keymaps", "DEFAULT_BINDINGS"]
