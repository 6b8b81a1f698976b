"""Event loop that drives a model: runs commands, reads keys and draws views."""

from __future__ import annotations

import queue
import threading
from typing import Any, Optional

from termodoro.tui.messages import BatchMsg, Cmd, KeyMsg, QuitMsg, WindowSizeMsg

_SEQUENCE_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_BTAB": "shift+tab",
    "KEY_TAB": "tab",
}
_CHAR_NAMES = {"\r": "enter", "\n": "enter", "\t": "tab", "\x1b": "esc", "\x7f": "backspace"}


def _key_name(text: str, sequence_name: Optional[str]) -> str:
    if sequence_name in _SEQUENCE_NAMES:
        return _SEQUENCE_NAMES[sequence_name]
    if text in _CHAR_NAMES:
        return _CHAR_NAMES[text]
    if len(text) == 1 and 1 <= ord(text) <= 26:
        return "ctrl+" + chr(ord("a") + ord(text) - 1)
    return text


class Program:
    """Runs a model: feeds it messages and executes the commands it returns."""

    def __init__(self, model: Any) -> None:
        self.model = model
        self.messages: queue.Queue[Any] = queue.Queue()
        self.running = True
        self.terminal: Any = None

    def dispatch(self, msg: object) -> bool:
        """Handle one message; return False once the program should stop."""
        if isinstance(msg, QuitMsg):
            self.running = False
        elif isinstance(msg, BatchMsg):
            for cmd in msg.cmds:
                self._start(cmd)
        else:
            self._start(self.model.update(msg))
        return self.running

    def _start(self, cmd: Optional[Cmd]) -> None:
        if cmd is None:
            return

        def work() -> None:
            msg = cmd()
            if msg is not None:
                self.messages.put(msg)

        threading.Thread(target=work, daemon=True).start()

    def run(self) -> Any:
        """Run until the model quits, then return it."""
        if self.terminal is None:
            import blessed

            self.terminal = blessed.Terminal()
        term = self.terminal

        with term.fullscreen(), term.raw(), term.hidden_cursor():
            size = None
            last_frame = None
            self._start(self.model.init())
            while self.running:
                if (term.width, term.height) != size:
                    size = (term.width, term.height)
                    self.messages.put(WindowSizeMsg(width=size[0], height=size[1]))
                while self.running and not self.messages.empty():
                    self.dispatch(self.messages.get_nowait())
                if not self.running:
                    break
                frame = self.model.view()
                if frame != last_frame:
                    term.stream.write(term.home + term.clear + frame.replace("\n", "\r\n"))
                    term.stream.flush()
                    last_frame = frame
                key = term.inkey(timeout=0.02)
                if key:
                    name = key.name if getattr(key, "is_sequence", False) else None
                    self.dispatch(KeyMsg(_key_name(str(key), name)))
        return self.model