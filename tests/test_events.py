import pytest

from microkeys.events import (
    Button,
    Key,
    KeyEvent,
    KeySequenceEvent,
    Modifier,
    MouseEvent,
    MouseState,
    RawEvent,
    meta_to_alt,
)


def test_raw_event_name_is_escape():
    assert RawEvent("\x1b[1;5A").name() == "\x1b[1;5A"


def test_rune_without_modifier():
    assert KeyEvent(Key.RUNE, rune="q").name() == "q"


def test_rune_with_alt():
    assert KeyEvent(Key.RUNE, Modifier.ALT, "a").name() == "Alt-a"


def test_ctrl_letter_strips_prefix_and_lowercases():
    assert KeyEvent(Key.CTRL_A, Modifier.CTRL).name() == "Ctrl-a"


def test_named_key_without_modifier():
    assert KeyEvent(Key.ENTER).name() == "Enter"
    assert KeyEvent(Key.DELETE).name() == "Delete"


def test_modifier_order():
    name = KeyEvent(Key.UP, Modifier.CTRL | Modifier.SHIFT).name()
    assert name.split("-") == ["Shift", "Ctrl", "Up"]


def test_wildcard_name():
    assert KeyEvent(Key.RUNE, wildcard=True).name() == "<any>"


def test_unknown_key_code():
    assert KeyEvent(4000).name() == "Key[4000]"


def test_meta_to_alt_replaces_meta():
    assert meta_to_alt(Modifier.META | Modifier.SHIFT) == Modifier.ALT | Modifier.SHIFT


def test_meta_to_alt_leaves_others():
    assert meta_to_alt(Modifier.CTRL) == Modifier.CTRL


def test_sequence_name_wraps_each_event():
    a = KeyEvent(Key.CTRL_X, Modifier.CTRL)
    b = KeyEvent(Key.RUNE, rune="b")
    seq = KeySequenceEvent([a, b])
    assert seq.name() == f"<{a.name()}><{b.name()}>"
    assert isinstance(seq.keys, tuple)


def test_events_are_hashable_and_equal_by_value():
    first = KeyEvent(Key.RUNE, Modifier.ALT, "x")
    second = KeyEvent(Key.RUNE, Modifier.ALT, "x")
    assert first == second
    assert {first: 1}[second] == 1


def test_mouse_event_names():
    assert MouseEvent(Button.BUTTON1).name() == "MouseLeft"
    assert MouseEvent(Button.BUTTON1, state=MouseState.DRAG).name() == "MouseLeftDrag"
    assert (
        MouseEvent(Button.BUTTON1, state=MouseState.RELEASE).name()
        == "MouseLeftRelease"
    )
    assert MouseEvent(Button.WHEEL_UP).name() == "MouseWheelUp"


def test_mouse_event_ctrl_wins_over_other_modifiers():
    event = MouseEvent(Button.BUTTON1, Modifier.SHIFT | Modifier.CTRL)
    assert event.name() == "Ctrl-MouseLeft"


@pytest.mark.parametrize("button", [Button.NONE, Button.BUTTON8])
def test_unknown_mouse_button_has_empty_name(button):
    assert MouseEvent(button).name() == ""