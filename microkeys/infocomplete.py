"""Tab completion for the command bar: commands, help topics, options and plugins.

Every completer takes the text of the command line and the cursor column, and
returns a pair ``(completions, suggestions)``. ``suggestions`` holds the full
matching words in sorted order. ``completions`` holds the part of each
suggestion that still has to be typed after the cursor.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

Completion = tuple[list[str], list[str]]


def _before_cursor(line: str, x: int) -> str:
    return line[: max(x, 0)]


def get_arg(line: str, x: int) -> tuple[str, int]:
    """Return the argument that ends at the cursor and the column where it starts."""
    args = _before_cursor(line, x).split(" ")
    argstart = sum(len(arg) + 1 for arg in args[:-1])
    return args[-1], argstart


def _finish(suggestions: Iterable[str], x: int, argstart: int) -> Completion:
    ordered = sorted(suggestions)
    offset = max(x - argstart, 0)
    return [s[offset:] for s in ordered], ordered


def _prefix_complete(line: str, x: int, words: Iterable[str]) -> Completion:
    word, argstart = get_arg(line, x)
    return _finish((w for w in words if w.startswith(word)), x, argstart)


def command_complete(line: str, x: int, commands: Iterable[str]) -> Completion:
    """Complete a command name."""
    return _prefix_complete(line, x, commands)


def help_complete(line: str, x: int, topics: Iterable[str]) -> Completion:
    """Complete a help topic."""
    return _prefix_complete(line, x, topics)


def option_complete(line: str, x: int, settings: Iterable[str]) -> Completion:
    """Complete an option name; ``settings`` may be a mapping of option names."""
    return _prefix_complete(line, x, settings)


def _colorscheme_suggestions(word: str, colorschemes: Iterable[str]) -> list[str]:
    return [name for name in colorschemes if name.startswith(word)]


def _filetype_suggestions(word: str, filetypes: Iterable[str]) -> list[str]:
    suggestions: list[str] = []
    for filetype in filetypes:
        # "off" and "unknown" are built-in values; "off" is offered once at the end.
        if filetype in ("off", "unknown") or filetype in suggestions:
            continue
        if filetype.startswith(word):
            suggestions.append(filetype)
    if "off".startswith(word):
        suggestions.append("off")
    return suggestions


def _bool_suggestions(word: str) -> list[str]:
    suggestions: list[str] = []
    if "on".startswith(word):
        suggestions.append("on")
    elif "true".startswith(word):
        suggestions.append("true")
    if "off".startswith(word):
        suggestions.append("off")
    elif "false".startswith(word):
        suggestions.append("false")
    return suggestions


def option_value_complete(
    line: str,
    x: int,
    settings: Mapping[str, Any],
    choices: Optional[Mapping[str, Iterable[str]]] = None,
    colorschemes: Iterable[str] = (),
    filetypes: Iterable[str] = (),
) -> Completion:
    """Complete the value of an option, or the option name itself.

    ``settings`` maps option names to their current values; the type of the
    value decides which values are offered. ``choices`` lists the allowed
    values of string options with a fixed set of values.
    """
    args = _before_cursor(line, x).split(" ")
    if len(args) < 2 or args[-2] not in settings:
        return option_complete(line, x, settings)

    word, argstart = get_arg(line, x)
    option = args[-2].strip()
    value = settings.get(option)

    suggestions: list[str] = []
    if isinstance(value, bool):
        suggestions = _bool_suggestions(word)
    elif isinstance(value, str):
        if option == "colorscheme":
            suggestions = _colorscheme_suggestions(word, colorschemes)
        elif option == "filetype":
            suggestions = _filetype_suggestions(word, filetypes)
        elif option == "sucmd":
            suggestions = [cmd for cmd in ("sudo", "doas") if cmd.startswith(word)]
        elif choices and option in choices:
            suggestions = [c for c in choices[option] if c.startswith(word)]
    return _finish(suggestions, x, argstart)


def plugin_cmd_complete(line: str, x: int, plugin_cmds: Iterable[str]) -> Completion:
    """Complete a subcommand of the plugin command."""
    return _prefix_complete(line, x, plugin_cmds)


def plugin_complete(
    line: str, x: int, plugin_cmds: Iterable[str], plugins: Iterable[str]
) -> Completion:
    """Complete a plugin name after a plugin subcommand, else the subcommand."""
    plugin_cmds = list(plugin_cmds)
    args = _before_cursor(line, x).split(" ")
    if len(args) < 2 or args[-2] not in plugin_cmds:
        return plugin_cmd_complete(line, x, plugin_cmds)
    return _prefix_complete(line, x, plugins)