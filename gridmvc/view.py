"""Terminal view that draws game objects into a bordered character grid."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from wcwidth import wcwidth

from gridmvc.ansiprint import ansi_print
from gridmvc.game_object import GameObject
from gridmvc.unit import (
    GAME_WINDOW_CELL_WIDTH,
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
)

CLEAR_SCREEN = "\033[2J\033[H"
CURSOR_HOME = "\033[H"

_STDOUT_FILENO = 1


def display_width(text: str) -> int:
    """Number of terminal columns the text occupies, never less than 1."""
    width = sum(max(0, wcwidth(ch)) for ch in text)
    return max(1, width)


def terminal_size() -> tuple[int, int]:
    """Return (rows, columns) of the terminal on stdout, or (-1, -1) if unknown."""
    try:
        size = os.get_terminal_size(_STDOUT_FILENO)
    except (OSError, ValueError):
        return (-1, -1)
    return (size.lines, size.columns)


def _grid(value):
    return [[value] * GAME_WINDOW_WIDTH for _ in range(GAME_WINDOW_HEIGHT)]


def _copy(grid):
    return [row[:] for row in grid]


def _border() -> str:
    return "+" + "-" * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "+\n"


class View:
    """Double-buffered renderer: only redraws when the frame content changed."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        size_provider: Optional[Callable[[], tuple[int, int]]] = None,
    ) -> None:
        self._out = out
        self._size_provider = size_provider or terminal_size
        self._term_size: Optional[tuple[int, int]] = None
        self._last_map: list[list[str]] = _grid("")
        self._last_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._last_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._latest_map: list[list[str]] = _grid("")
        self._latest_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._latest_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self.reset_latest()

    def update_game_object(self, obj: GameObject) -> None:
        """Draw the object's icon into the pending frame, clipped to the playfield."""
        pos = obj.position
        for dy, icon_row in enumerate(obj.icon):
            row = pos.y + dy
            if not 0 <= row < GAME_WINDOW_HEIGHT:
                continue
            for dx, cell in enumerate(icon_row):
                col = pos.x + dx
                if not 0 <= col < GAME_WINDOW_WIDTH:
                    continue
                self._latest_map[row][col] = cell.ascii
                self._latest_bg[row][col] = cell.color

    def reset_latest(self) -> None:
        """Blank the pending frame."""
        self._latest_map = _grid(" ")
        self._latest_fg = _grid(Color.NOCHANGE)
        self._latest_bg = _grid(Color.NOCHANGE)

    def _cell(self, text: str, fg: Color, bg: Color) -> str:
        pad_total = GAME_WINDOW_CELL_WIDTH - display_width(text)
        pad_left = max(0, pad_total) // 2
        pad_right = max(0, pad_total - pad_left)
        blank = ansi_print(" ", Color.NOCHANGE, bg)
        return blank * pad_left + ansi_print(text, fg, bg) + blank * pad_right

    def frame(self) -> str:
        """Return the pending frame as text with borders and colour sequences."""
        lines = [_border()]
        for texts, fgs, bgs in zip(self._latest_map, self._latest_fg, self._latest_bg):
            body = "".join(self._cell(t, f, b) for t, f, b in zip(texts, fgs, bgs))
            lines.append("|" + body + "|\n")
        lines.append(_border())
        return "".join(lines)

    def render(self) -> None:
        """Write the pending frame if it differs from the last one drawn."""
        out = self._out if self._out is not None else sys.stdout
        size = self._size_provider()
        if size != self._term_size:
            out.write(CLEAR_SCREEN)
        self._term_size = size

        dirty = (
            self._last_map != self._latest_map
            or self._last_fg != self._latest_fg
            or self._last_bg != self._latest_bg
        )
        if not dirty:
            return

        out.write(CURSOR_HOME + self.frame())
        out.flush()

        self._last_map = _copy(self._latest_map)
        self._last_fg = _copy(self._latest_fg)
        self._last_bg = _copy(self._latest_bg)