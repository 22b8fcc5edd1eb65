import pytest

from gridmvc.unit import Color, Position, Vec2


def test_color_from_ansi_digit():
    assert Color(0) is Color.BLACK
    assert Color(7) is Color.WHITE
    assert Color(8) is Color.NOCHANGE
    assert [int(c) for c in Color] == list(range(9))


@pytest.mark.parametrize(
    ("name", "digit"),
    [("RED", 1), ("GREEN", 2), ("YELLOW", 3), ("BLUE", 4), ("PINK", 5), ("CYAN", 6)],
)
def test_colors_map_to_their_ansi_digit(name, digit):
    assert Color(digit) is Color[name]


def test_vec2_aliases_share_storage():
    v = Vec2(3, 5)
    assert v.x == 3 and v.width == 3
    assert v.y == 5 and v.height == 5


def test_vec2_setters_write_through():
    v = Vec2()
    v.x = 7
    v.height = 9
    assert (v.e1, v.e2) == (7, 9)
    v.width = 1
    v.y = 2
    assert (v.x, v.height) == (1, 2)


def test_position_is_vec2():
    p = Position(1, 2)
    assert p == Vec2(1, 2)