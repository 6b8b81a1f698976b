"""The root model that owns the current screen and switches between screens."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional, Union

from termodoro.config import Config
from termodoro.data import DataError
from termodoro.tui.menu import MenuModel
from termodoro.tui.messages import (
    Cmd,
    MenuInput,
    SwitchViewMsg,
    TimerListAddInput,
    TimerListInput,
    View,
    WindowSizeMsg,
    batch,
)
from termodoro.tui.timerlist import TimerListAddModel, TimerListModel

__all__ = ["TITLE", "ViewError", "FatalErrorMsg", "RootModel", "fatal_error_cmd"]

TITLE = r"""
___________                             .___                   
\__    ___/__________  _____   ____   __| _/___________  ____  
  |    |_/ __ \_  __ \/     \ /  _ \ / __ |/  _ \_  __ \/  _ \ 
  |    |\  ___/|  | \/  Y Y  (  <_> ) /_/ (  <_> )  | \(  <_> )
  |____| \___  >__|  |__|_|  /\____/\____ |\____/|__|   \____/ 
             \/            \/            \/                    


"""

ChildModel = Union[MenuModel, TimerListModel, TimerListAddModel]


class ViewError(Exception):
    """Raised when a screen cannot be created for the requested view."""


@dataclass(frozen=True)
class FatalErrorMsg:
    """Carries an error that should end the program."""

    error: BaseException


def fatal_error_cmd(err: BaseException) -> Cmd:
    """Return a command producing a FatalErrorMsg for ``err``."""

    def cmd() -> FatalErrorMsg:
        return FatalErrorMsg(err)

    return cmd


class RootModel:
    """Holds the active screen, forwards messages to it and handles view switches."""

    def __init__(
        self,
        view: View,
        switch_in: object,
        db: sqlite3.Connection,
        cfg: Config,
    ) -> None:
        self.db = db
        self.cfg = cfg
        self.width = 0
        self.height = 0
        self.exit_error: Optional[BaseException] = None
        try:
            self.child: ChildModel = self._make_child(view, switch_in)
        except (ViewError, sqlite3.Error, DataError) as exc:
            raise ViewError(f"setting child model: {exc}") from exc

    def init(self) -> Optional[Cmd]:
        return self._init_child()

    def update(self, msg: object) -> Optional[Cmd]:
        if isinstance(msg, SwitchViewMsg):
            try:
                self.child = self._make_child(msg.target, msg.input)
            except (ViewError, sqlite3.Error, DataError) as exc:
                error = ViewError(f"setting child model: {exc}")
                error.__cause__ = exc
                return fatal_error_cmd(error)
            return self._init_child()

        if isinstance(msg, WindowSizeMsg):
            self.width = msg.width
            self.height = msg.height

        return self.child.update(msg)

    def view(self) -> str:
        return TITLE + self.child.view()

    def _init_child(self) -> Optional[Cmd]:
        init_cmd = self.child.init()
        size_cmd = self.child.update(WindowSizeMsg(width=self.width, height=self.height))
        return batch(init_cmd, size_cmd)

    def _make_child(self, view: object, switch_in: object) -> ChildModel:
        if switch_in is None:
            raise ViewError("switchIn is not valid")
        if view == View.MENU:
            if not isinstance(switch_in, MenuInput):
                raise ViewError("switchIn is not a MenuInput: invalid type assertion")
            return MenuModel(switch_in)
        if view == View.TIMER_LIST:
            if not isinstance(switch_in, TimerListInput):
                raise ViewError("switchIn is not a TimerListInput: invalid type assertion")
            return TimerListModel(switch_in, self.db)
        if view == View.TIMER_LIST_ADD:
            if not isinstance(switch_in, TimerListAddInput):
                raise ViewError("switchIn is not a TimerListAddInput: invalid type assertion")
            return TimerListAddModel(switch_in, self.db)
        raise ViewError("invalid view")