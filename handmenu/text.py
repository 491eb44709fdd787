"""Text measuring, word wrapping and line alignment."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from handmenu.layout import Align


def text_width(text: str, measure: Callable[[str], int]) -> int:
    """Width of a text; for several lines, the width of the widest."""
    if "\n" in text:
        return max(measure(line) for line in text.split("\n"))
    return measure(text)


def text_height(text: str) -> int:
    """Number of lines in a text."""
    return len(text.split("\n"))


def wrap_text(text: str, width: int, measure: Callable[[str], int]) -> str:
    """Break a text into lines at word boundaries so it fits `width`.

    A line is broken before the word that makes it too wide; the
    measured line then starts over empty.
    """
    if text_width(text, measure) <= width:
        return text.strip()

    line = ""
    wrapped = ""
    for word in text.split() + [""]:
        line += word + " "
        if text_width(line, measure) > width:
            wrapped += "\n"
            line = ""
        else:
            wrapped += " "
        wrapped += word
    return wrapped.strip()


def align_lines(
    lines: str | Iterable[str],
    x: int,
    y: int,
    align: Align = Align.LEFT | Align.TOP,
    line_height: int = 0,
    measure: Callable[[str], int] = len,
) -> list[tuple[str, int, int]]:
    """Positions (line, x, y) at which to draw lines anchored at (x, y)."""
    if isinstance(lines, str):
        lines = lines.split("\n")
    lines = list(lines)

    if align & Align.MIDDLE:
        y -= len(lines) * line_height // 2
    elif align & Align.BOTTOM:
        y -= len(lines) * line_height

    placed = []
    for number, line in enumerate(lines):
        line_x = x
        if align & Align.CENTER:
            line_x -= measure(line) // 2
        elif align & Align.RIGHT:
            line_x -= measure(line)
        placed.append((line, line_x, y + number * line_height))
    return placed