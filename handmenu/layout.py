"""Geometry of scroll bars, sliders and button rows."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_ICON_WIDTH = 19
BUTTON_GAP = 6


class Align(enum.IntFlag):
    """Horizontal and vertical alignment flags."""

    LEFT = 1
    CENTER = 2
    RIGHT = 4
    TOP = 8
    MIDDLE = 16
    BOTTOM = 32


@dataclass
class Rect:
    """A rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class ButtonPlacement(NamedTuple):
    """Where a button's icon and label are drawn."""

    icon: str
    text: str
    icon_x: int
    text_x: int


def _div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def scroll_bar_rect(
    pagesize: int, totalsize: int, pagepos: int, rect: Rect, align: Align = Align.RIGHT
) -> Rect | None:
    """The thumb of a scroll bar, or None when everything fits on one page."""
    if totalsize <= pagesize:
        return None
    bar = Rect(2, 2, 2, 2)
    if align & (Align.BOTTOM | Align.TOP):
        bar.w = _div((rect.w - 3) * pagesize, totalsize)
        bar.x = rect.x + _div((rect.w - 3) * pagepos, totalsize) + 3
        bar.y = rect.y + 2 if align & Align.TOP else rect.y + rect.h - 4
        bar.w = max(bar.w, 8)
        if bar.x + bar.w > rect.x + rect.w - 3:
            bar.x = rect.x + rect.w - bar.w - 3
    else:
        bar.h = _div((rect.h - 3) * pagesize, totalsize)
        bar.y = rect.y + _div((rect.h - 3) * pagepos, totalsize) + 3
        if align & Align.RIGHT:
            bar.x = rect.x + rect.w - 4
        bar.h = max(bar.h, 8)
        if bar.y + bar.h > rect.y + rect.h - 3:
            bar.y = rect.y + rect.h - bar.h - 3
    return bar


def slider_fill(value: int, minimum: int, maximum: int, width: int) -> int:
    """Width of the filled part of a slider bar that is `width` pixels wide."""
    if maximum == 0:
        raise ValueError("slider maximum must not be zero")
    value = max(minimum, min(maximum, value))
    return _div(value * (width - 3), maximum) + 1


def button_row(
    buttons: Iterable[tuple[str | None, str]],
    x: int = 5,
    icon_width: int = DEFAULT_ICON_WIDTH,
    measure: Callable[[str], int] = len,
) -> tuple[list[ButtonPlacement], int]:
    """Lay out (icon, label) buttons left to right from x.

    A button whose icon is None is missing: it takes only the gap.
    Returns the placements and the x where the next button would start.
    """
    placements = []
    for icon, text in buttons:
        if icon is not None:
            icon_x = x
            x += icon_width
            text_x = x
            if text:
                x += measure(text)
            placements.append(ButtonPlacement(icon, text, icon_x, text_x))
        x += BUTTON_GAP
    return placements, x


def button_row_right(
    buttons: Iterable[tuple[str | None, str]],
    x: int,
    icon_width: int = DEFAULT_ICON_WIDTH,
    measure: Callable[[str], int] = len,
) -> tuple[list[ButtonPlacement], int]:
    """Lay out (icon, label) buttons right to left, ending at x.

    Returns the placements and the x where the next button would end.
    """
    placements = []
    for icon, text in buttons:
        if icon is not None:
            if text:
                x -= measure(text)
            text_x = x
            x -= icon_width
            placements.append(ButtonPlacement(icon, text, x, text_x))
        x -= BUTTON_GAP
    return placements, x