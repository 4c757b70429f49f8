"""A trie of key bindings that resolves event sequences to actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .events import KeyEvent, KeySequenceEvent, MouseEvent

PaneKeyAction = Callable[[Any], bool]
PaneKeyAnyAction = Callable[[Any, list], bool]
PaneMouseAction = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class ModeConstraint:
    """Ties an action to a mode being enabled or disabled."""

    mode: str
    disabled: bool = False


@dataclass
class TreeAction:
    """An action plus the mode constraints under which it is active.

    Exactly one of ``action``, ``any_action`` and ``mouse`` is set.
    """

    action: Optional[PaneKeyAction] = None
    any_action: Optional[PaneKeyAnyAction] = None
    mouse: Optional[PaneMouseAction] = None
    modes: tuple = ()


@dataclass
class KeyTreeNode:
    """One node of the binding trie."""

    children: dict = field(default_factory=dict)
    actions: list = field(default_factory=list)


@dataclass
class KeyTreeCursor:
    """The current position in the trie and data captured along the way."""

    node: KeyTreeNode
    recorded_events: list = field(default_factory=list)
    wildcards: list = field(default_factory=list)
    mouse_info: Any = None

    def make_closure(self, action: TreeAction) -> Optional[PaneKeyAction]:
        """Turn a tree action into a single-argument pane action."""
        if action.action is not None:
            return action.action
        if action.any_action is not None:
            any_action = action.any_action
            return lambda pane: any_action(pane, self.wildcards)
        if action.mouse is not None:
            mouse = action.mouse
            return lambda pane: mouse(pane, self.mouse_info)
        return None


class KeyTree:
    """Key bindings stored as a trie, with a cursor for sequence matching."""

    def __init__(self) -> None:
        self.root = KeyTreeNode()
        self.modes: dict[str, bool] = {}
        self.cursor = KeyTreeCursor(node=self.root)

    def register_key_binding(self, event, action: PaneKeyAction) -> None:
        self._register(event, TreeAction(action=action))

    def register_key_any_binding(self, event, action: PaneKeyAnyAction) -> None:
        """Bind an action that receives the wildcard events matched."""
        self._register(event, TreeAction(any_action=action))

    def register_mouse_binding(self, event, action: PaneMouseAction) -> None:
        """Bind an action that receives the triggering mouse information."""
        self._register(event, TreeAction(mouse=action))

    def _register(self, event, action: TreeAction) -> None:
        keys = event.keys if isinstance(event, KeySequenceEvent) else (event,)
        node = self.root
        for key in keys:
            node = node.children.setdefault(key, KeyTreeNode())
        node.actions = [action]

    def next_event(self, event, mouse=None):
        """Advance by ``event``; return ``(action or None, more)``.

        ``more`` is true when longer bindings start with the sequence so far.
        """
        child = self.cursor.node.children.get(event)
        if child is None:
            return None, False

        more = bool(child.children)
        self.cursor.node = child
        self.cursor.recorded_events.append(event)

        if isinstance(event, KeyEvent):
            if event.wildcard:
                self.cursor.wildcards.append(event)
        elif isinstance(event, MouseEvent):
            self.cursor.mouse_info = mouse

        for action in child.actions:
            active = all(
                self.modes.get(constraint.mode, False) == constraint.disabled
                for constraint in action.modes
            )
            if active:
                return self.cursor.make_closure(action), more
        return None, more

    def reset_events(self) -> None:
        """Return the cursor to the root and forget captured events."""
        self.cursor.node = self.root
        self.cursor.wildcards = []
        self.cursor.recorded_events = []
        self.cursor.mouse_info = None

    def recorded_events_str(self) -> str:
        return "".join(event.name() for event in self.cursor.recorded_events)

    def set_mode(self, mode: str, enabled: bool) -> None:
        self.modes[mode] = enabled

    def has_mode(self, mode: str) -> bool:
        return self.modes.get(mode, False)