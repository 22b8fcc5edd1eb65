"""Basic geometry, colour and playfield constants shared by the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GAME_WINDOW_WIDTH = 20
GAME_WINDOW_HEIGHT = 20

GAME_WINDOW_CELL_WIDTH = 2
WINDOW_PIXEL_WIDTH = GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH
WINDOW_PIXEL_HEIGHT = GAME_WINDOW_HEIGHT

SPF = 1.0  # seconds per frame


class Color(IntEnum):
    """Terminal colours; NOCHANGE leaves the current colour untouched."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


@dataclass
class Vec2:
    """A pair of integers, read either as a point or as a size."""

    e1: int = 0
    e2: int = 0

    @property
    def x(self) -> int:
        return self.e1

    @x.setter
    def x(self, value: int) -> None:
        self.e1 = value

    @property
    def y(self) -> int:
        return self.e2

    @y.setter
    def y(self, value: int) -> None:
        self.e2 = value

    @property
    def width(self) -> int:
        return self.e1

    @width.setter
    def width(self, value: int) -> None:
        self.e1 = value

    @property
    def height(self) -> int:
        return self.e2

    @height.setter
    def height(self, value: int) -> None:
        self.e2 = value


Position = Vec2