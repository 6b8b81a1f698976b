"""Key bindings and key maps for the screens."""

from __future__ import annotations

from dataclasses import dataclass

from termodoro.tui.messages import KeyMsg

__all__ = [
    "KeyBinding",
    "MenuKeyMap",
    "TimerListKeyMap",
    "TimerListAddKeyMap",
    "default_menu_key_map",
    "default_timer_list_key_map",
    "default_timer_list_add_key_map",
]


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys bound to one action, with its help text."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""

    def matches(self, msg: KeyMsg | str) -> bool:
        """Return True if the pressed key is one of this binding's keys."""
        return str(msg) in self.keys


def _binding(key: str, help_key: str, help_desc: str) -> KeyBinding:
    return KeyBinding(keys=(key,), help_key=help_key, help_desc=help_desc)


@dataclass(frozen=True)
class MenuKeyMap:
    """Keys of the menu screen."""

    exit: KeyBinding
    help: KeyBinding
    up: KeyBinding
    down: KeyBinding
    select: KeyBinding
    quit: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        return [self.help, self.quit]

    def full_help(self) -> list[list[KeyBinding]]:
        return [[self.up, self.down, self.select], [self.help, self.quit]]


@dataclass(frozen=True)
class TimerListKeyMap:
    """Keys of the timer list screen."""

    exit: KeyBinding
    help: KeyBinding
    up: KeyBinding
    down: KeyBinding
    select: KeyBinding
    quit: KeyBinding
    new: KeyBinding
    edit: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        return [self.help, self.quit, self.new]

    def full_help(self) -> list[list[KeyBinding]]:
        return [
            [self.up, self.down, self.select],
            [self.new, self.edit, self.help, self.quit],
        ]


@dataclass(frozen=True)
class TimerListAddKeyMap:
    """Keys of the add-timer screen."""

    exit: KeyBinding
    help: KeyBinding
    up: KeyBinding
    down: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        return [self.up, self.down, self.help]

    def full_help(self) -> list[list[KeyBinding]]:
        return [[self.up, self.down, self.help], [self.exit]]


def default_menu_key_map() -> MenuKeyMap:
    return MenuKeyMap(
        exit=_binding("esc", "esc", "exit"),
        help=_binding("h", "h", "help"),
        up=_binding("up", "↑", "move up"),
        down=_binding("down", "↓", "move down"),
        select=_binding("enter", "↵", "select"),
        quit=_binding("q", "q", "quit"),
    )


def default_timer_list_key_map() -> TimerListKeyMap:
    return TimerListKeyMap(
        exit=_binding("esc", "esc", "exit"),
        help=_binding("h", "h", "help"),
        up=_binding("up", "↑", "move up"),
        down=_binding("down", "↓", "move down"),
        select=_binding("enter", "↵", "start timer"),
        quit=_binding("q", "q", "quit"),
        new=_binding("n", "n", "new"),
        edit=_binding("e", "e", "edit"),
    )


def default_timer_list_add_key_map() -> TimerListAddKeyMap:
    return TimerListAddKeyMap(
        exit=_binding("esc", "esc", "exit"),
        help=_binding("h", "ctrl+h", "help"),
        up=_binding("up", "↑", "move up"),
        down=_binding("down", "↓", "move down"),
    )