"""Screens listing timers and adding a new one."""

from __future__ import annotations

import sqlite3
from typing import Optional

from termodoro.data import TimerRepositorySQLite
from termodoro.tui.keys import default_timer_list_add_key_map, default_timer_list_key_map
from termodoro.tui.messages import (
    Cmd,
    KeyMsg,
    TimerListAddInput,
    TimerListInput,
    View,
    batch,
    quit_cmd,
    switch_view_cmd,
)
from termodoro.tui.widgets import HelpModel, Spinner, Style, TextInput, blink

__all__ = ["TimerListModel", "TimerListAddModel"]

_HEADER_STYLE = Style(foreground="211")
_MAIN_STYLE = Style(margin_left=2)
_SELECTED_STYLE = Style(margin_left=2, foreground="219")

_FOCUSED_STYLE = Style(foreground="205")
_BLURRED_STYLE = Style(foreground="240")
_CURSOR_STYLE = _FOCUSED_STYLE
_NO_STYLE = Style()

_FOCUSED_BUTTON = _FOCUSED_STYLE.render("[ Submit ]")
_BLURRED_BUTTON = f"[ {_BLURRED_STYLE.render('Submit')} ]"


class TimerListModel:
    """Lists the stored timers."""

    def __init__(self, switch_in: TimerListInput, db: sqlite3.Connection) -> None:
        self.repo = TimerRepositorySQLite(db)
        self.timers = self.repo.get_all_timers()
        self.cursor = 0
        self.keys = default_timer_list_key_map()
        self.help = HelpModel()
        self.spinner = Spinner()

    def init(self) -> Optional[Cmd]:
        return self.spinner.tick

    def update(self, msg: object) -> Optional[Cmd]:
        if not isinstance(msg, KeyMsg):
            return self.spinner.update(msg)
        keys = self.keys
        if keys.help.matches(msg):
            self.help.show_all = not self.help.show_all
        elif keys.quit.matches(msg):
            return quit_cmd
        elif keys.up.matches(msg):
            if self.cursor > 0:
                self.cursor -= 1
        elif keys.down.matches(msg):
            if self.cursor < len(self.timers) - 1:
                self.cursor += 1
        elif keys.new.matches(msg):
            # No timer id: create a new timer rather than edit one.
            return switch_view_cmd(View.TIMER_LIST_ADD, TimerListAddInput(None))
        return None

    def view(self) -> str:
        parts = [_HEADER_STYLE.render("Pomodoro timers") + "\n\n"]
        if not self.timers:
            parts.append(_MAIN_STYLE.render("No timers found.\n"))
        for i, timer in enumerate(self.timers):
            if i == self.cursor:
                parts.append(
                    f"{_HEADER_STYLE.render('➤')} {_SELECTED_STYLE.render(timer.name)}\n"
                )
            else:
                parts.append(f"  {_MAIN_STYLE.render(timer.name)}\n")
        parts.append("\n\n")
        parts.append(self.help.view(self.keys))
        return "".join(parts)


class TimerListAddModel:
    """Form for entering a new timer."""

    def __init__(self, switch_in: TimerListAddInput, db: sqlite3.Connection) -> None:
        self.repo = TimerRepositorySQLite(db)
        self.keys = default_timer_list_add_key_map()
        self.help = HelpModel()
        self.spinner = Spinner()
        self.focus_index = 0
        # The id is only taken over when absent, so it is always None here.
        self.timer_id: Optional[int] = None
        self.inputs = [
            TextInput(placeholder="Timer name", char_limit=32, cursor_style=_CURSOR_STYLE),
            TextInput(placeholder="Description", char_limit=64, cursor_style=_CURSOR_STYLE),
            TextInput(placeholder="Minutes to work", char_limit=64, cursor_style=_CURSOR_STYLE),
            TextInput(placeholder="Minutes to rest", char_limit=64, cursor_style=_CURSOR_STYLE),
        ]
        first = self.inputs[0]
        first.focus()
        first.prompt_style = _FOCUSED_STYLE
        first.text_style = _FOCUSED_STYLE

    def init(self) -> Optional[Cmd]:
        return blink

    def update(self, msg: object) -> Optional[Cmd]:
        if not isinstance(msg, KeyMsg):
            return self.spinner.update(msg)
        keys = self.keys
        if keys.help.matches(msg):
            self.help.show_all = not self.help.show_all
        elif keys.exit.matches(msg):
            return quit_cmd
        elif keys.up.matches(msg) or keys.down.matches(msg):
            return self._cycle_focus(str(msg))
        return self._update_inputs(msg)

    def _cycle_focus(self, key: str) -> Optional[Cmd]:
        if key == "enter" and self.focus_index == len(self.inputs):
            return quit_cmd
        if key in ("up", "shift+tab"):
            self.focus_index -= 1
        else:
            self.focus_index += 1
        if self.focus_index > len(self.inputs):
            self.focus_index = 0
        elif self.focus_index < 0:
            self.focus_index = len(self.inputs)

        cmds = []
        for i, field in enumerate(self.inputs):
            if i == self.focus_index:
                cmds.append(field.focus())
                field.prompt_style = _FOCUSED_STYLE
                field.text_style = _FOCUSED_STYLE
            else:
                field.blur()
                field.prompt_style = _NO_STYLE
                field.text_style = _NO_STYLE
        return batch(*cmds)

    def _update_inputs(self, msg: KeyMsg) -> Optional[Cmd]:
        return batch(*(field.update(msg) for field in self.inputs))

    def view(self) -> str:
        button = _FOCUSED_BUTTON if self.focus_index == len(self.inputs) else _BLURRED_BUTTON
        return (
            _FOCUSED_STYLE.render("Add a new timer")
            + "\n\n"
            + "\n".join(field.view() for field in self.inputs)
            + f"\n\n{button}\n\n"
            + "\n"
            + self.help.view(self.keys)
        )