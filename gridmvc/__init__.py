"""Model-view-controller building blocks for grid games in an ANSI terminal."""

__version__ = "0.1.0"
__all__ = ["ansiprint", "controller", "game_object", "icon", "main", "unit", "view"]