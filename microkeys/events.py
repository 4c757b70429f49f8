"""Editor input events: raw escape codes, keys, key sequences and mouse events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class Key(IntEnum):
    """Terminal key codes. Control keys use their ASCII value."""

    CTRL_SPACE = 0
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    CTRL_I = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    CTRL_M = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESC = 27
    CTRL_BACKSLASH = 28
    CTRL_RIGHT_SQ = 29
    CTRL_CARAT = 30
    CTRL_UNDERSCORE = 31
    BACKSPACE2 = 127

    BACKSPACE = 8
    TAB = 9
    ENTER = 13

    RUNE = 256
    UP = 257
    DOWN = 258
    RIGHT = 259
    LEFT = 260
    UP_LEFT = 261
    UP_RIGHT = 262
    DOWN_LEFT = 263
    DOWN_RIGHT = 264
    CENTER = 265
    PG_UP = 266
    PG_DN = 267
    HOME = 268
    END = 269
    INSERT = 270
    DELETE = 271
    HELP = 272
    EXIT = 273
    CLEAR = 274
    CANCEL = 275
    PRINT = 276
    PAUSE = 277
    BACKTAB = 278
    F1 = 279
    F2 = 280
    F3 = 281
    F4 = 282
    F5 = 283
    F6 = 284
    F7 = 285
    F8 = 286
    F9 = 287
    F10 = 288
    F11 = 289
    F12 = 290


_NO_NAME_CTRL = {"H", "I", "M"}

KEY_NAMES: dict[int, str] = {
    **{
        Key.CTRL_A + offset: f"Ctrl-{letter}"
        for offset, letter in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        if letter not in _NO_NAME_CTRL
    },
    Key.CTRL_SPACE: "Ctrl-Space",
    Key.BACKSPACE: "Backspace",
    Key.TAB: "Tab",
    Key.ENTER: "Enter",
    Key.ESC: "Esc",
    Key.CTRL_BACKSLASH: "Ctrl-\\",
    Key.CTRL_RIGHT_SQ: "Ctrl-]",
    Key.CTRL_CARAT: "Ctrl-^",
    Key.CTRL_UNDERSCORE: "Ctrl-_",
    Key.BACKSPACE2: "Backspace2",
    Key.UP: "Up",
    Key.DOWN: "Down",
    Key.RIGHT: "Right",
    Key.LEFT: "Left",
    Key.UP_LEFT: "UpLeft",
    Key.UP_RIGHT: "UpRight",
    Key.DOWN_LEFT: "DownLeft",
    Key.DOWN_RIGHT: "DownRight",
    Key.CENTER: "Center",
    Key.PG_UP: "PgUp",
    Key.PG_DN: "PgDn",
    Key.HOME: "Home",
    Key.END: "End",
    Key.INSERT: "Insert",
    Key.DELETE: "Delete",
    Key.HELP: "Help",
    Key.EXIT: "Exit",
    Key.CLEAR: "Clear",
    Key.CANCEL: "Cancel",
    Key.PRINT: "Print",
    Key.PAUSE: "Pause",
    Key.BACKTAB: "Backtab",
    **{Key.F1 + n: f"F{n + 1}" for n in range(12)},
}


class Modifier(IntFlag):
    """Keyboard modifier mask."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


class Button(IntFlag):
    """Mouse button and wheel mask."""

    NONE = 0
    BUTTON1 = 1
    BUTTON2 = 2
    BUTTON3 = 4
    BUTTON4 = 8
    BUTTON5 = 16
    BUTTON6 = 32
    BUTTON7 = 64
    BUTTON8 = 128
    WHEEL_UP = 256
    WHEEL_DOWN = 512
    WHEEL_LEFT = 1024
    WHEEL_RIGHT = 2048


class MouseState(IntEnum):
    """Phase of a mouse button action."""

    PRESS = 0
    DRAG = 1
    RELEASE = 2


MOUSE_EVENTS: dict[str, Button] = {
    "MouseLeft": Button.BUTTON1,
    "MouseMiddle": Button.BUTTON2,
    "MouseRight": Button.BUTTON3,
    "MouseWheelUp": Button.WHEEL_UP,
    "MouseWheelDown": Button.WHEEL_DOWN,
    "MouseWheelLeft": Button.WHEEL_LEFT,
    "MouseWheelRight": Button.WHEEL_RIGHT,
}


def meta_to_alt(mod: Modifier) -> Modifier:
    """Replace the Meta modifier with Alt, leaving other bits intact."""
    mod = Modifier(mod)
    if mod & Modifier.META:
        mod = (mod & ~Modifier.META) | Modifier.ALT
    return mod


@dataclass(frozen=True)
class RawEvent:
    """A bare escape sequence that can be bound directly."""

    esc: str

    def name(self) -> str:
        return self.esc


@dataclass(frozen=True)
class KeyEvent:
    """A key press with modifiers; ``rune`` is set for character keys."""

    code: int
    mod: Modifier = Modifier.NONE
    rune: str = ""
    wildcard: bool = False

    def name(self) -> str:
        if self.wildcard:
            return "<any>"
        mod = Modifier(self.mod)
        parts = [
            label
            for flag, label in (
                (Modifier.SHIFT, "Shift"),
                (Modifier.ALT, "Alt"),
                (Modifier.META, "Meta"),
                (Modifier.CTRL, "Ctrl"),
            )
            if mod & flag
        ]

        text = KEY_NAMES.get(int(self.code))
        if text is None:
            text = self.rune if self.code == Key.RUNE else f"Key[{int(self.code)}]"

        if not parts:
            return text
        if mod & Modifier.CTRL and text.startswith("Ctrl-"):
            text = text[5:]
            if len(text) == 1:
                text = text.lower()
        return f"{'-'.join(parts)}-{text}"


@dataclass(frozen=True)
class KeySequenceEvent:
    """Consecutive key or mouse events bound as one."""

    keys: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))

    def name(self) -> str:
        return "".join(f"<{event.name()}>" for event in self.keys)


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button event with modifiers and press/drag/release state."""

    button: Button
    mod: Modifier = Modifier.NONE
    state: MouseState = MouseState.PRESS

    def name(self) -> str:
        mod = Modifier(self.mod)
        prefix = ""
        if mod & Modifier.SHIFT:
            prefix = "Shift-"
        if mod & Modifier.ALT:
            prefix = "Alt-"
        if mod & Modifier.META:
            prefix = "Meta-"
        if mod & Modifier.CTRL:
            prefix = "Ctrl-"

        suffix = {MouseState.DRAG: "Drag", MouseState.RELEASE: "Release"}.get(
            self.state, ""
        )

        for label, button in MOUSE_EVENTS.items():
            if button == self.button:
                return f"{prefix}{label}{suffix}"
        return ""