"""Base class for anything drawn on the playfield."""

from __future__ import annotations

from typing import Optional

from gridmvc.icon import Icon
from gridmvc.unit import Position


class GameObject:
    """An entity with a position and an icon; subclasses override update()."""

    def __init__(self, position: Optional[Position] = None, icon: Optional[Icon] = None) -> None:
        self._pos = position if position is not None else Position(0, 0)
        self._icon: Icon = icon if icon is not None else []

    @property
    def position(self) -> Position:
        return self._pos

    @property
    def icon(self) -> Icon:
        return self._icon

    def update(self) -> None:
        """Advance the object by one frame; the base object stays still."""