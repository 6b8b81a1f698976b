"""Small terminal widgets: styles, help lines, spinners and text inputs."""

from __future__ import annotations

import itertools
import re
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from termodoro.tui.keys import KeyBinding
from termodoro.tui.messages import Cmd, KeyMsg

_RESET = "\x1b[0m"
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _width(text: str) -> int:
    return len(_ANSI_RE.sub("", text))


@dataclass(frozen=True)
class Style:
    """Foreground colour (ANSI 256 number or ``#rrggbb``) and left margin."""

    foreground: Optional[str] = None
    margin_left: int = 0

    def __post_init__(self) -> None:
        self._sgr()
        if self.margin_left < 0:
            raise ValueError("margin_left must not be negative")

    def _sgr(self) -> str:
        colour = self.foreground
        if colour is None:
            return ""
        if re.fullmatch(r"#[0-9a-fA-F]{6}", colour):
            r, g, b = (int(colour[i : i + 2], 16) for i in (1, 3, 5))
            return f"\x1b[38;2;{r};{g};{b}m"
        if colour.isdigit() and int(colour) < 256:
            return f"\x1b[38;5;{int(colour)}m"
        raise ValueError(f"invalid colour: {colour!r}")

    def render(self, text: str) -> str:
        """Render ``text``, padding multi-line blocks to a common width."""
        sgr = self._sgr()
        lines = text.split("\n")
        if len(lines) > 1:
            width = max(map(_width, lines))
            lines = [line + " " * (width - _width(line)) for line in lines]
        margin = " " * self.margin_left
        return "\n".join(margin + (f"{sgr}{line}{_RESET}" if sgr else line) for line in lines)


@dataclass
class HelpModel:
    """Renders the help line of a key map, short or in full columns."""

    show_all: bool = False
    key_style: Style = field(default_factory=lambda: Style(foreground="#626262"))
    desc_style: Style = field(default_factory=lambda: Style(foreground="#4A4A4A"))
    separator_style: Style = field(default_factory=lambda: Style(foreground="#3C3C3C"))
    short_separator: str = " • "
    full_separator: str = "    "

    def _cell(self, binding: KeyBinding, key_width: int = 0) -> str:
        key = binding.help_key.ljust(key_width)
        return f"{self.key_style.render(key)} {self.desc_style.render(binding.help_desc)}"

    def view(self, keymap: Any) -> str:
        if not self.show_all:
            separator = self.separator_style.render(self.short_separator)
            return separator.join(self._cell(b) for b in keymap.short_help())

        columns = []
        for group in filter(None, keymap.full_help()):
            key_width = max(len(b.help_key) for b in group)
            cells = [(self._cell(b, key_width), key_width + 1 + len(b.help_desc)) for b in group]
            columns.append((max(w for _, w in cells), cells))
        separator = self.separator_style.render(self.full_separator)
        rows = max((len(cells) for _, cells in columns), default=0)
        lines = []
        for row in range(rows):
            parts = []
            for width, cells in columns:
                styled, plain = cells[row] if row < len(cells) else ("", 0)
                parts.append(styled + " " * (width - plain))
            lines.append(separator.join(parts).rstrip(" "))
        return "\n".join(lines)


SPINNER_LINE = ("|", "/", "-", "\\")
SPINNER_DOT = ("⣾ ", "⣽ ", "⣻ ", "⢿ ", "⡿ ", "⣟ ", "⣯ ", "⣷ ")

_spinner_ids = itertools.count(1)


@dataclass(frozen=True)
class SpinnerTickMsg:
    id: int
    tag: int


@dataclass
class Spinner:
    """An animated spinner driven by tick messages."""

    frames: tuple[str, ...] = SPINNER_LINE
    interval: float = 0.1
    style: Style = field(default_factory=Style)
    frame: int = 0
    id: int = field(default_factory=lambda: next(_spinner_ids))
    tag: int = 0

    def tick(self) -> SpinnerTickMsg:
        return SpinnerTickMsg(id=self.id, tag=self.tag)

    def update(self, msg: object) -> Optional[Cmd]:
        if not isinstance(msg, SpinnerTickMsg):
            return None
        if (msg.id > 0 and msg.id != self.id) or (msg.tag > 0 and msg.tag != self.tag):
            return None
        self.frame = (self.frame + 1) % len(self.frames)
        self.tag += 1
        next_tick = SpinnerTickMsg(id=self.id, tag=self.tag)
        interval = self.interval

        def cmd() -> SpinnerTickMsg:
            time.sleep(interval)
            return next_tick

        return cmd

    def view(self) -> str:
        if not 0 <= self.frame < len(self.frames):
            return "(error)"
        return self.style.render(self.frames[self.frame])


@dataclass(frozen=True)
class BlinkMsg:
    pass


def blink() -> BlinkMsg:
    return BlinkMsg()


@dataclass
class TextInput:
    """A single-line text field that accepts key presses while focused."""

    placeholder: str = ""
    char_limit: int = 0
    prompt: str = "> "
    prompt_style: Style = field(default_factory=Style)
    text_style: Style = field(default_factory=Style)
    placeholder_style: Style = field(default_factory=lambda: Style(foreground="240"))
    cursor_style: Style = field(default_factory=Style)
    cursor_blink: bool = False
    value: str = ""
    position: int = 0
    focused: bool = False

    def focus(self) -> Optional[Cmd]:
        self.focused = True
        return blink if self.cursor_blink else None

    def blur(self) -> None:
        self.focused = False

    def update(self, msg: object) -> Optional[Cmd]:
        if not self.focused or not isinstance(msg, KeyMsg):
            return None
        value, pos = self.value, self.position
        match msg.key:
            case "backspace" | "ctrl+h":
                if pos > 0:
                    self.value, self.position = value[: pos - 1] + value[pos:], pos - 1
            case "delete" | "ctrl+d":
                self.value = value[:pos] + value[pos + 1 :]
            case "left" | "ctrl+b":
                self.position = max(0, pos - 1)
            case "right" | "ctrl+f":
                self.position = min(len(value), pos + 1)
            case "home" | "ctrl+a":
                self.position = 0
            case "end" | "ctrl+e":
                self.position = len(value)
            case "ctrl+u":
                self.value, self.position = value[pos:], 0
            case "ctrl+k":
                self.value = value[:pos]
            case key:
                text = " " if key == "space" else key
                full = 0 < self.char_limit <= len(value)
                if len(text) == 1 and text.isprintable() and not full:
                    self.value, self.position = value[:pos] + text + value[pos:], pos + 1
        return None

    def view(self) -> str:
        prompt = self.prompt_style.render(self.prompt)
        if not self.value and self.placeholder:
            return prompt + self.placeholder_style.render(self.placeholder)
        return prompt + self.text_style.render(self.value)