"""Icons: rectangular grids of coloured cells."""

from __future__ import annotations

from dataclasses import dataclass

from gridmvc.unit import Color


@dataclass
class Cell:
    """One glyph of an icon with its background colour."""

    color: Color
    ascii: str


Icon = list[list[Cell]]


def icon_width(icon: Icon) -> int:
    """Number of cells in the first row, or 0 for an empty icon."""
    return len(icon[0]) if icon else 0


def icon_height(icon: Icon) -> int:
    """Number of rows in the icon."""
    return len(icon)