import io
import os

from gridmvc.controller import (
    ESCAPE,
    Controller,
    configure_terminal,
    read_input,
    reset_terminal,
)
from gridmvc.game_object import GameObject
from gridmvc.icon import Cell
from gridmvc.unit import SPF, Color, Position
from gridmvc.view import CURSOR_HOME, View


class Walker(GameObject):
    def __init__(self):
        super().__init__(Position(0, 0), [[Cell(Color.RED, "w")]])
        self.steps = 0

    def update(self):
        self.steps += 1
        self.position.x += 1


def make_view():
    out = io.StringIO()
    return View(out=out, size_provider=lambda: (24, 80)), out


def test_read_input_returns_last_byte(monkeypatch):
    monkeypatch.setattr(os, "read", lambda fd, n: b"ab")
    assert read_input() == ord("b")


def test_read_input_without_data(monkeypatch):
    monkeypatch.setattr(os, "read", lambda fd, n: b"")
    assert read_input() == -1


def test_reset_terminal_restores_cursor(capsys):
    reset_terminal()
    assert "\x1b[m\x1b[?25h" in capsys.readouterr().out


def test_configure_terminal_hides_cursor(capsys):
    try:
        configure_terminal()
    finally:
        reset_terminal()
    out = capsys.readouterr().out
    assert out.index("\x1b[?25l") < out.index("\x1b[?25h")


def test_handle_input_runs_binding():
    pressed = []
    ctrl = Controller(make_view()[0], key_bindings={ord("q"): lambda: pressed.append("q")})
    ctrl.handle_input(ord("q"))
    ctrl.handle_input(ord("z"))
    assert pressed == ["q"]


def test_handle_input_ignores_no_key():
    pressed = []
    ctrl = Controller(make_view()[0], key_bindings={-1: lambda: pressed.append(1)})
    ctrl.handle_input(-1)
    assert pressed == []


def test_update_advances_and_draws_objects():
    view, _ = make_view()
    walker = Walker()
    ctrl = Controller(view, [walker])
    ctrl.update()
    assert walker.steps == 1
    expected, _ = make_view()
    expected.update_game_object(walker)
    assert view.frame() == expected.frame()


def test_run_stops_on_escape_before_any_frame(capsys):
    view, out = make_view()
    walker = Walker()
    ctrl = Controller(view, [walker], read_key=iter([ESCAPE]).__next__, sleep=lambda s: None)
    ctrl.run()
    assert walker.steps == 0
    assert out.getvalue() == ""
    assert "\x1b[?25h" in capsys.readouterr().out


def test_run_stops_on_key_code_27(capsys):
    view, out = make_view()
    walker = Walker()
    ctrl = Controller(view, [walker], read_key=iter([27]).__next__, sleep=lambda s: None)
    ctrl.run()
    assert walker.steps == 0
    assert out.getvalue() == ""


def test_run_renders_each_frame_and_paces():
    view, out = make_view()
    walker = Walker()
    delays = []
    keys = iter([-1, ord("x"), ESCAPE])
    ctrl = Controller(view, [walker], read_key=keys.__next__, sleep=delays.append)
    ctrl.run()
    assert walker.steps == 2
    assert out.getvalue().count(CURSOR_HOME + "+") == 2
    assert len(delays) == 2
    assert all(0 < d <= SPF for d in delays)


def test_run_resets_terminal_on_error(capsys):
    def boom():
        raise RuntimeError("read failed")

    ctrl = Controller(make_view()[0], read_key=boom)
    try:
        ctrl.run()
    except RuntimeError as exc:
        assert str(exc) == "read failed"
    assert "\x1b[?25h" in capsys.readouterr().out