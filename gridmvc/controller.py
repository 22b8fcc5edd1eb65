"""Game loop: reads keys, advances objects and asks the view to draw."""

from __future__ import annotations

import atexit
import os
import sys
import termios
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Optional

from gridmvc.game_object import GameObject
from gridmvc.unit import SPF
from gridmvc.view import View

ESCAPE = 27
NO_INPUT = -1

_STDIN_FILENO = 0
_INPUT_BUFFER = 4096

_RESET_COLORS = "\x1b[m"
_SHOW_CURSOR = "\x1b[?25h"
_HIDE_CURSOR = "\x1b[?25l"


class _TerminalState:
    saved_attrs: Optional[list] = None
    exit_hook_registered: bool = False


_state = _TerminalState()


def reset_terminal() -> None:
    """Restore colours, the cursor and the terminal mode saved by configure_terminal."""
    sys.stdout.write(_RESET_COLORS + _SHOW_CURSOR)
    sys.stdout.flush()
    if _state.saved_attrs is not None:
        try:
            termios.tcsetattr(_STDIN_FILENO, termios.TCSANOW, _state.saved_attrs)
        except (termios.error, OSError):
            pass


def configure_terminal() -> None:
    """Switch stdin to non-blocking, unechoed input and hide the cursor."""
    try:
        old = termios.tcgetattr(_STDIN_FILENO)
    except (termios.error, OSError):
        old = None
    _state.saved_attrs = old
    if old is not None:
        new = list(old)
        new[3] &= ~(termios.ICANON | termios.ECHO)
        new[6] = list(old[6])
        new[6][termios.VMIN] = 0
        new[6][termios.VTIME] = 0
        try:
            termios.tcsetattr(_STDIN_FILENO, termios.TCSANOW, new)
        except (termios.error, OSError):
            pass
    sys.stdout.write(_HIDE_CURSOR)
    if not _state.exit_hook_registered:
        atexit.register(reset_terminal)
        _state.exit_hook_registered = True


def read_input() -> int:
    """Return the last byte waiting on stdin, or -1 if there is none."""
    sys.stdout.flush()
    data = os.read(_STDIN_FILENO, _INPUT_BUFFER)
    return data[-1] if data else NO_INPUT


class Controller:
    """Drives the frame loop until ESC is pressed."""

    def __init__(
        self,
        view: View,
        objects: Optional[Iterable[GameObject]] = None,
        key_bindings: Optional[Mapping[int, Callable[[], None]]] = None,
        read_key: Callable[[], int] = read_input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._view = view
        self._objs: list[GameObject] = list(objects or [])
        self._bindings = dict(key_bindings or {})
        self._read_key = read_key
        self._sleep = sleep

    def run(self) -> None:
        """Run frames until ESC is read, pacing each frame to SPF seconds."""
        configure_terminal()
        try:
            while True:
                start = time.perf_counter()
                key = self._read_key()
                if key == ESCAPE:
                    break
                self.handle_input(key)
                self.update()
                self._view.render()

                elapsed = time.perf_counter() - start
                if elapsed > SPF:
                    continue
                delay_ms = int((SPF - elapsed) * 1000)
                if delay_ms > 0:
                    self._sleep(delay_ms / 1000)
        finally:
            reset_terminal()

    def handle_input(self, key: int) -> None:
        """Dispatch a key to its bound action; -1 means no key was pressed."""
        if key == NO_INPUT:
            return
        action = self._bindings.get(key)
        if action is not None:
            action()

    def update(self) -> None:
        """Advance every object one frame and draw it into the pending frame."""
        self._view.reset_latest()
        for obj in self._objs:
            obj.update()
            self._view.update_game_object(obj)