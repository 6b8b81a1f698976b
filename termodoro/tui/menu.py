"""The main menu screen."""

from __future__ import annotations

from typing import Optional

from termodoro.tui.keys import default_menu_key_map
from termodoro.tui.messages import (
    Cmd,
    KeyMsg,
    MenuInput,
    MenuItem,
    TimerListInput,
    View,
    quit_cmd,
    switch_view_cmd,
)
from termodoro.tui.widgets import SPINNER_DOT, HelpModel, Spinner, Style

_KEYWORD_STYLE = Style(foreground="211")
_MAIN_STYLE = Style(margin_left=2)
_SELECTED_STYLE = Style(margin_left=2, foreground="219")


def _navigate_to_timers() -> Cmd:
    return switch_view_cmd(View.TIMER_LIST, TimerListInput())


def _quit_app() -> Cmd:
    return quit_cmd


class MenuModel:
    """Menu of the application's sections."""

    def __init__(self, switch_in: MenuInput) -> None:
        # Settings and Rewards have no screens yet, so choosing them does nothing.
        self.options = [
            MenuItem("Timers", _navigate_to_timers),
            MenuItem("Settings"),
            MenuItem("Rewards"),
            MenuItem("Quit", _quit_app),
        ]
        self.cursor = 0
        self.keys = default_menu_key_map()
        self.help = HelpModel()
        self.spinner = Spinner(frames=SPINNER_DOT, style=Style(foreground="205"))

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
            self.cursor = max(0, self.cursor - 1)
        elif keys.down.matches(msg):
            self.cursor = min(len(self.options) - 1, self.cursor + 1)
        elif keys.select.matches(msg):
            action = self.options[self.cursor].action
            return action() if action is not None else None
        return None

    def view(self) -> str:
        rows = [
            f"{_KEYWORD_STYLE.render('➤')} {_SELECTED_STYLE.render(choice.label)}\n"
            if i == self.cursor
            else f"  {_MAIN_STYLE.render(choice.label)}\n"
            for i, choice in enumerate(self.options)
        ]
        return "".join(rows) + "\n\n" + self.help.view(self.keys)