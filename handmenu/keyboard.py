"""On-screen keyboard used to type text with a directional pad."""

from __future__ import annotations

KEYBOARDS: tuple[tuple[str, ...], ...] = (
    ("qwertyuiop-789", "asdfghjkl\\/456", "_zxcvbnm,.0123"),
    ("QWERTYUIOP_-+=", "@ASDFGHJKL'\"`", "#ZXCVBNM:;/?"),
    ("¡¿*+-/\\&<=>|", "()[]{}@#$%^~", "_\"'`.,:;!?"),
    ("àáâãäåèéêëęěìíîï", "ąćčòóôôõöùúûüůýÿ", "ďĺľłñńňŕřśšťźżž"),
    ("ÀÁÂÃÄÅÈÉÊËĘĚÌÍÎÏ", "ĄĆČÒÓÔÔÕÖÙÚÛÜŮÝŸ", "ĎĹĽŁÑŃŇŔŘŚŠŤŹŻŽ"),
    ("æçабвгдеёжзий", "клмнопрстуфхцч", "шщъыьэюяøðßÐÞþ"),
    ("ÆÇАБВГДЕЁЖЗИЙ", "КЛМНОПРСТУФХЦЧ", "ШЩЪЫЬЭЮЯØðßÐÞþ"),
)

KEY_WIDTH = 20
KEY_HEIGHT = 20


class VirtualKeyboard:
    """Text being typed, the active key layout and the selected key."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.row = 0
        self.col = 0
        self.current = 0
        self.set_keyboard(0)

    @property
    def layout(self) -> tuple[str, ...]:
        """Rows of keys of the active layout."""
        return KEYBOARDS[self.current]

    @property
    def columns(self) -> int:
        """Number of columns, given by the first row of the layout."""
        return len(self.layout[0])

    @property
    def rows(self) -> int:
        return len(self.layout)

    def set_keyboard(self, index: int) -> None:
        """Switch to a layout; the index is clamped to the known layouts."""
        self.current = max(0, min(len(KEYBOARDS) - 1, index))

    def next_keyboard(self) -> None:
        """Switch to the following layout, wrapping after the last."""
        self.set_keyboard((self.current + 1) % len(KEYBOARDS))

    def _normalize(self) -> None:
        if self.col < 0:
            self.col = 1 if self.row == self.rows else self.columns - 1
        if self.col >= self.columns:
            self.col = 0
        if self.row < 0:
            self.row = self.rows - 1
        if self.row >= self.rows:
            self.row = 0

    def move(self, rows: int = 0, cols: int = 0) -> tuple[int, int]:
        """Move the selection, wrapping around the edges; returns (row, col)."""
        self.row += rows
        self.col += cols
        self._normalize()
        return self.row, self.col

    def selected_key(self) -> str:
        """Character under the selection, or '' past the end of a short row."""
        line = self.layout[self.row]
        return line[self.col] if 0 <= self.col < len(line) else ""

    def confirm(self) -> str:
        """Type the selected key; returns the text."""
        self.text += self.selected_key()
        return self.text

    def backspace(self) -> str:
        """Remove the last character; returns the text."""
        self.text = self.text[:-1]
        return self.text

    def space(self) -> str:
        """Type a space; returns the text."""
        self.text += " "
        return self.text