"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from gridmvc.ansiprint import ansi_print
from gridmvc.controller import Controller
from gridmvc.unit import Color
from gridmvc.view import View

DEFAULT_ID = "1137030XX"


def print_my_id(stud_id: str) -> None:
    """Print the student ID highlighted and blinking, yellow on red."""
    text = ansi_print(f"ID: {stud_id}", Color.YELLOW, Color.RED, True, True)
    sys.stdout.write(text + "\n\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gridmvc", description="Run the grid game.")
    parser.add_argument("student_id", nargs="?", default=DEFAULT_ID, help="ID to print")
    parser.add_argument("--play", action="store_true", help="start the game loop first")
    args = parser.parse_args(argv)

    if args.play:
        Controller(View()).run()

    print_my_id(args.student_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())