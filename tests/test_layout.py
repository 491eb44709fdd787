import pytest

from handmenu.layout import (
    Align,
    Rect,
    button_row,
    button_row_right,
    scroll_bar_rect,
    slider_fill,
)


def test_no_scroll_bar_when_everything_fits():
    assert scroll_bar_rect(10, 10, 0, Rect(0, 0, 100, 100)) is None
    assert scroll_bar_rect(10, 3, 0, Rect(0, 0, 100, 100)) is None


@pytest.mark.parametrize("pos", [0, 5, 50, 90, 99])
def test_vertical_bar_stays_inside(pos):
    rect = Rect(10, 20, 200, 100)
    bar = scroll_bar_rect(10, 100, pos, rect, Align.RIGHT)
    assert bar.h >= 8
    assert bar.y >= rect.y
    assert bar.y + bar.h <= rect.y + rect.h - 3
    assert bar.x == rect.x + rect.w - 4


def test_vertical_bar_moves_down_with_position():
    rect = Rect(0, 0, 50, 200)
    first = scroll_bar_rect(5, 50, 0, rect)
    later = scroll_bar_rect(5, 50, 20, rect)
    assert later.y > first.y
    assert later.h == first.h


@pytest.mark.parametrize("align", [Align.TOP, Align.BOTTOM])
def test_horizontal_bar_stays_inside(align):
    rect = Rect(5, 5, 300, 40)
    bar = scroll_bar_rect(3, 100, 99, rect, align)
    assert bar.w >= 8
    assert bar.x + bar.w <= rect.x + rect.w - 3
    if align is Align.TOP:
        assert bar.y == rect.y + 2
    else:
        assert bar.y == rect.y + rect.h - 4


def test_slider_fill_ends():
    assert slider_fill(0, 0, 100, 236) == 1
    assert slider_fill(100, 0, 100, 236) == 236 - 2


def test_slider_fill_clamps_and_grows():
    assert slider_fill(150, 0, 100, 200) == slider_fill(100, 0, 100, 200)
    assert slider_fill(-5, 0, 100, 200) == slider_fill(0, 0, 100, 200)
    assert slider_fill(30, 0, 100, 200) < slider_fill(60, 0, 100, 200)


def test_slider_fill_zero_maximum():
    with pytest.raises(ValueError):
        slider_fill(0, 0, 0, 100)


def test_button_row_positions():
    placements, end = button_row([("a", "Select"), ("b", "Back")], x=5)
    assert placements[0].icon_x == 5
    assert placements[0].text_x == 5 + 19
    assert placements[1].icon_x > placements[0].text_x
    assert end > placements[1].text_x


def test_button_row_missing_icon_takes_gap():
    placements, end = button_row([(None, "Hidden")], x=5)
    assert placements == []
    assert end == 5 + 6


def test_button_row_empty_label():
    placements, end = button_row([("a", "")], x=0, icon_width=10)
    assert placements[0].text_x == 10
    assert end == placements[0].text_x + 6


def test_button_row_right_mirrors_left():
    buttons = [("a", "Select"), ("b", "Back")]
    left, left_end = button_row(buttons, x=0)
    right, right_end = button_row_right(buttons, x=0)
    assert right_end == -left_end
    assert [p.icon for p in right] == ["a", "b"]
    assert right[0].text_x - right[0].icon_x == 19


def test_button_row_right_missing_icon():
    placements, end = button_row_right([(None, "x")], x=100)
    assert placements == []
    assert end == 94