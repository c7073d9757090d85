from __future__ import annotations

import pytest

from modedit.actions import (
    AddChar,
    EnterMode,
    Mode,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    NewLine,
    Quit,
)
from modedit.keymaps import (
    Binding,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)
from modedit.modes import InsertMode, ModeManager, NormalMode, create_default_manager
from modedit.terminal.events import (
    FocusEvent,
    KeyEvent,
    MouseEvent,
    PasteEvent,
    ResizeEvent,
)


def make_resolver() -> KeymapResolver:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return KeymapResolver(registry)


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (KeyEvent.char("q"), Quit()),
        (KeyEvent(key="UP"), MoveUp()),
        (KeyEvent.char("k"), MoveUp()),
        (KeyEvent(key="DOWN"), MoveDown()),
        (KeyEvent.char("j"), MoveDown()),
        (KeyEvent(key="LEFT"), MoveLeft()),
        (KeyEvent.char("h"), MoveLeft()),
        (KeyEvent(key="RIGHT"), MoveRight()),
        (KeyEvent.char("l"), MoveRight()),
        (KeyEvent.char("i"), EnterMode(Mode.INSERT)),
        (KeyEvent.char("x"), None),
        (KeyEvent(key="ESC"), None),
        (KeyEvent(key="ENTER"), None),
        (KeyEvent.char("Q"), None),
        (KeyEvent(key="q", modifiers=("ctrl",)), Quit()),
        (KeyEvent(key="l", text="l", modifiers=("alt",)), MoveRight()),
        (KeyEvent(key="UP", modifiers=("shift",)), MoveUp()),
        (KeyEvent(key="x", modifiers=("ctrl",)), None),
    ],
)
def test_normal_mode_table(event: KeyEvent, expected) -> None:
    mode = NormalMode(make_resolver())

    assert mode.handle_key(KeyStroke.from_event(event)) == expected


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (KeyEvent(key="ESC"), EnterMode(Mode.NORMAL)),
        (KeyEvent(key="ENTER"), NewLine()),
        (KeyEvent.char("q"), AddChar("q")),
        (KeyEvent.char("i"), AddChar("i")),
        (KeyEvent.char(" "), AddChar(" ")),
        (KeyEvent.char("é"), AddChar("é")),
        (KeyEvent(key="UP"), None),
        (KeyEvent(key="BACKSPACE"), None),
        (KeyEvent(key="TAB"), None),
        (KeyEvent(key="c", modifiers=("ctrl",)), AddChar("c")),
        (KeyEvent(key="x", text="x", modifiers=("alt",)), AddChar("x")),
        (KeyEvent(key="ESC", modifiers=("alt",)), EnterMode(Mode.NORMAL)),
    ],
)
def test_insert_mode_table(event: KeyEvent, expected) -> None:
    mode = InsertMode(make_resolver())

    assert mode.handle_key(KeyStroke.from_event(event)) == expected


def test_insert_mode_bound_key_beats_text_fallback() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(
        registry,
        extra_bindings=(
            Binding(id="insert.jj", mode=Mode.INSERT, key="j", action=MoveDown()),
        ),
    )
    mode = InsertMode(KeymapResolver(registry))

    assert mode.handle_key(KeyStroke.from_event(KeyEvent.char("j"))) == MoveDown()


def test_modifier_qualified_binding_beats_bare_key() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(
        registry,
        extra_bindings=(
            Binding(
                id="normal.ctrl_q", mode=Mode.NORMAL, key="ctrl+q", action=MoveUp()
            ),
        ),
    )
    mode = NormalMode(KeymapResolver(registry))

    ctrl_q = KeyEvent(key="q", modifiers=("ctrl",))
    assert mode.handle_key(KeyStroke.from_event(ctrl_q)) == MoveUp()
    assert mode.handle_key(KeyStroke.from_event(KeyEvent.char("q"))) == Quit()


def test_ctrl_q_from_blessed_quits_in_normal_mode() -> None:
    from blessed.keyboard import Keystroke

    from modedit.terminal import keystroke_to_event

    manager = create_default_manager()

    assert manager.translate(keystroke_to_event(Keystroke("\x11"))) == Quit()


def test_manager_starts_in_normal_mode() -> None:
    manager = create_default_manager()

    assert manager.active is Mode.NORMAL
    assert isinstance(manager.active_handler, NormalMode)


def test_manager_switches_modes() -> None:
    manager = create_default_manager()

    manager.switch_mode(Mode.INSERT)

    assert manager.active is Mode.INSERT
    assert manager.translate(KeyEvent.char("q")) == AddChar("q")


def test_manager_switch_to_active_mode_is_noop() -> None:
    manager = create_default_manager()
    entered: list[object] = []
    manager.active_handler.on_enter = entered.append  # type: ignore[union-attr]

    manager.switch_mode(Mode.NORMAL)

    assert manager.active is Mode.NORMAL
    assert entered == []


def test_manager_rejects_unregistered_mode() -> None:
    manager = ModeManager()
    manager.register_mode(NormalMode)

    with pytest.raises(KeyError):
        manager.switch_mode(Mode.INSERT)


def test_manager_rejects_duplicate_registration() -> None:
    manager = create_default_manager()

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)


def test_escape_in_normal_mode_yields_no_action() -> None:
    manager = create_default_manager()

    assert manager.translate(KeyEvent(key="ESC")) is None
    assert manager.active is Mode.NORMAL


@pytest.mark.parametrize(
    "event",
    [
        ResizeEvent(columns=100, rows=40),
        FocusEvent(gained=True),
        MouseEvent(x=3, y=4),
        PasteEvent(text="hello"),
    ],
)
@pytest.mark.parametrize("mode", [Mode.NORMAL, Mode.INSERT])
def test_non_key_events_yield_no_action(event, mode: Mode) -> None:
    manager = create_default_manager()
    manager.switch_mode(mode)

    assert manager.translate(event) is None


def test_manager_uses_supplied_registry_without_defaults() -> None:
    registry = KeymapRegistry()
    registry.register_binding(
        Binding(id="normal.x", mode=Mode.NORMAL, key="x", action=Quit())
    )
    manager = ModeManager(keymap_registry=registry)
    manager.register_mode(NormalMode)

    assert manager.translate(KeyEvent.char("x")) == Quit()
    assert manager.translate(KeyEvent.char("q")) is None


def test_translate_without_handler_raises() -> None:
    manager = ModeManager()

    with pytest.raises(RuntimeError):
        manager.translate(KeyEvent.char("q"))
