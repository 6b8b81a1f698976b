"""Views, messages and commands exchanged between screen models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

Msg = Any
Cmd = Callable[[], Msg]


class View(IntEnum):
    """Screens the application can show."""

    MENU = 0
    TIMER_LIST = 1
    TIMER_LIST_ADD = 2

    def __str__(self) -> str:
        return ("Menu", "Timers", "Add Timer")[self]


@dataclass(frozen=True)
class MenuInput:
    pass


@dataclass(frozen=True)
class TimerListInput:
    pass


@dataclass(frozen=True)
class TimerListAddInput:
    """``timer_id`` is None when creating a new timer."""

    timer_id: Optional[int] = None


SwitchViewInput = MenuInput | TimerListInput | TimerListAddInput


@dataclass
class MenuItem:
    label: str
    action: Optional[Callable[[], Optional[Cmd]]] = None


@dataclass(frozen=True)
class SwitchViewMsg:
    target: View
    input: SwitchViewInput


@dataclass(frozen=True)
class KeyMsg:
    """A key press named like ``"up"``, ``"enter"`` or ``"ctrl+c"``."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class WindowSizeMsg:
    width: int
    height: int


@dataclass(frozen=True)
class QuitMsg:
    pass


@dataclass(frozen=True)
class BatchMsg:
    cmds: tuple[Cmd, ...]


def switch_view_cmd(target: View, switch_in: SwitchViewInput) -> Cmd:
    """Return a command that asks to switch to ``target``."""
    return lambda: SwitchViewMsg(target=target, input=switch_in)


def quit_cmd() -> QuitMsg:
    return QuitMsg()


def batch(*args: Optional[Cmd]) -> Optional[Cmd]:
    """Combine commands, dropping None: None, the single command, or a batch."""
    cmds = tuple(c for c in args if c is not None)
    if len(cmds) <= 1:
        return cmds[0] if cmds else None
    return lambda: BatchMsg(cmds)