# microkeys

Building blocks for the key handling of a terminal text editor.

## Events: `microkeys.events`

- `KeyEvent(code, mod, rune, wildcard)`, `MouseEvent(button, mod, state)`,
  `RawEvent(esc)` and `KeySequenceEvent(keys)` are frozen dataclasses. They
  can be hashed and used as dictionary keys.
- Each has a `name()` method that gives the canonical binding string, such as
  `Ctrl-s`, `Shift-Alt-Up`, `MouseLeftDrag` or `<Ctrl-x><Ctrl-c>`. A wildcard
  key event is named `<any>`.
- `Key`, `Modifier`, `Button` and `MouseState` are the key codes, the modifier
  mask, the mouse button mask and the mouse action phases.
- `meta_to_alt(mod)` replaces the Meta modifier with Alt.

## Key trees: `microkeys.keytree`

`KeyTree` stores bindings as a trie of events. It maps both single events and
event sequences to actions.

- `register_key_binding(event, action)` binds a plain action.
- `register_key_any_binding(event, action)` binds an action that receives the
  wildcard key events that were matched.
- `register_mouse_binding(event, action)` binds an action that receives the
  mouse information passed to `next_event`.
- `next_event(event, mouse)` advances the cursor by one event. It returns
  `(action, more)`:
  - `action` is a single-argument callable taking a pane, or `None`.
  - `more` is true when longer bindings begin with the events seen so far.
- `reset_events()` returns the cursor to the root.
- `recorded_events_str()` gives the names of the events matched since the last
  reset.
- `set_mode(mode, enabled)` and `has_mode(mode)` manage the modes. Actions
  with `ModeConstraint`s on a `TreeAction` are returned only when those
  constraints hold.

## Command-bar completion: `microkeys.infocomplete`

Every completer takes the text of the command line and the cursor column. It
returns `(completions, suggestions)`:

- `suggestions` holds the sorted matching words.
- `completions` holds the part of each word that still has to be typed after
  the cursor.

The completers are:

- `get_arg(line, x)` returns the argument that ends at the cursor and the
  column where it starts.
- `command_complete`, `help_complete`, `option_complete` and
  `plugin_cmd_complete` complete from a given collection of words.
- `option_value_complete(line, x, settings, choices, colorschemes, filetypes)`
  completes the value of an option after its name, or else the option name:
  - boolean options offer `on`/`true` and `off`/`false`;
  - `colorscheme` and `filetype` complete from the names given;
  - `sucmd` offers `sudo` and `doas`;
  - other string options complete from `choices`.
- `plugin_complete(line, x, plugin_cmds, plugins)` completes a plugin name
  after a plugin subcommand, or else the subcommand.

## Installation

```
pip install .
```

## Example

```python
from microkeys.events import Key, KeyEvent, KeySequenceEvent, Modifier
from microkeys.keytree import KeyTree

tree = KeyTree()
save = KeyEvent(Key.CTRL_S, Modifier.CTRL, "\x13")
quit_seq = KeySequenceEvent([
    KeyEvent(Key.CTRL_X, Modifier.CTRL, "\x18"),
    KeyEvent(Key.CTRL_C, Modifier.CTRL, "\x03"),
])

tree.register_key_binding(save, lambda pane: True)
tree.register_key_binding(quit_seq, lambda pane: True)

action, more = tree.next_event(save, None)
print(save.name(), action is not None, more)   # Ctrl-s True False
tree.reset_events()
```

Completion works on plain strings:

```python
from microkeys.infocomplete import command_complete

completions, suggestions = command_complete("se", 2, ["set", "setlocal", "show"])
# suggestions == ["set", "setlocal"], completions == ["t", "tlocal"]
```

## What it does not do

This is a library with no command to run.

- It does not read input from a terminal. You build the events yourself.
- It does not ship a set of default key bindings. Every binding in a
  `KeyTree` is registered by the caller.
- It keeps no panes, buffers, screen or settings storage. The actions you
  bind, and the words passed to the completers, come from your own code.

## Tests

```
pip install .[test]
pytest
```