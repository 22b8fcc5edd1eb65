# gridmvc

A small model-view-controller framework for grid games drawn in an ANSI
colour terminal. It runs on POSIX systems, because the game loop uses
`termios` to read keys without blocking.

## Modules

- `gridmvc.unit` holds the `Color` enumeration (`BLACK` to `WHITE`, plus
  `NOCHANGE`), the `Vec2` pair (read as `x`/`y` or `width`/`height`, with
  `Position` as another name for it) and the playfield constants:
  `GAME_WINDOW_WIDTH` and `GAME_WINDOW_HEIGHT` (20 × 20 cells),
  `GAME_WINDOW_CELL_WIDTH` (2 columns per cell) and `SPF` (1 second per frame).
- `gridmvc.ansiprint` wraps text in ANSI escape sequences.
  `ansi_print(text, fg, bg, hi, blinking)` sets foreground and background
  colours, bold and blinking; `ansi_style(text, hi, blinking)` sets only bold
  and blinking. Both end the text with a reset sequence and return an empty
  string for empty text.
- `gridmvc.icon` defines `Cell` (a piece of text and its background colour),
  an icon as a list of rows of cells, and `icon_width` / `icon_height`.
- `gridmvc.game_object` provides `GameObject`, built from a position and an
  icon. Its `update()` does nothing; subclasses override it to move or change.
- `gridmvc.view` provides `View`. `update_game_object(obj)` draws an object's
  icon into the pending frame, clipped to the playfield; `reset_latest()`
  blanks it; `frame()` returns it as bordered, coloured text; `render()`
  writes it, clearing the screen when the terminal size changes and skipping
  the write when nothing differs from the last frame drawn. The view writes to
  `sys.stdout` unless given another stream. `display_width(text)` and
  `terminal_size()` are the helpers it uses.
- `gridmvc.controller` provides `Controller`, which runs the game loop: it
  reads the last key pressed, calls the action bound to that key, updates and
  draws every object, renders the view and waits out the rest of the frame.
  ESC ends the loop and the terminal is put back as it was.
  `configure_terminal`, `reset_terminal` and `read_input` handle the terminal.
- `gridmvc.main` provides the command line and `print_my_id`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
gridmvc [student_id] [--play]
```

Without options it prints `ID: <student_id>` in bold, blinking yellow on red
(the default ID is `1137030XX`). With `--play` it first runs the game loop on
an empty playfield until ESC is pressed.

From Python, put colour into a string:

```python
from gridmvc.ansiprint import ansi_print
from gridmvc.unit import Color

print(ansi_print("hello", Color.YELLOW, Color.RED, hi=True))
```

Build a game by subclassing `GameObject` and handing the objects to a
`Controller`, with key codes bound to actions:

```python
from gridmvc.controller import Controller
from gridmvc.game_object import GameObject
from gridmvc.icon import Cell
from gridmvc.unit import Color, Position
from gridmvc.view import View

class Block(GameObject):
    def right(self):
        self.position.x += 1

block = Block(Position(3, 4), [[Cell(Color.GREEN, "#")]])
Controller(View(), [block], key_bindings={ord("d"): block.right}).run()
```

## What it does not do

The package ships no game of its own: there are no ready-made game objects or
icons, and no keys are bound unless you pass `key_bindings`. Run as a command,
`--play` shows only an empty bordered grid.