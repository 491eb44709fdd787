"""Navigation state of the file browser dialog."""

from __future__ import annotations

import os
import random
from typing import Any

from handmenu.filelister import FileLister

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp")
MEDIA_DIR = "/media"
_LETTERS = "#ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Browser(FileLister):
    """A file lister with a selection, a history of entered directories
    and the actions of the browse dialog."""

    def __init__(self, home: str) -> None:
        super().__init__()
        self.home = home
        self.selected = 0
        self.allow_select_directory = False
        self.allow_enter_directory = True
        self.history: list[int] = []
        self.show_letters = False

    def _on_change_dir(self) -> None:
        """Hook called after a directory has been read."""

    def _custom_options(self) -> list[tuple[str, str]]:
        """Hook for extra context menu entries."""
        return []

    def _file_name(self, index: int) -> str:
        """Name shown for an entry."""
        return self.get_file(index)

    def _initial(self, index: int) -> str:
        return self._file_name(index)[:1].upper()

    def _wrap(self) -> None:
        count = len(self)
        if self.selected < 0:
            self.selected = count - 1
        if count == 0 or self.selected >= count:
            self.selected = 0

    def enter(self, path: str = "") -> None:
        """Read a directory; a missing one falls back to the home directory."""
        if not path or not os.path.isdir(path):
            path = self.home
        self.browse(path)
        self._on_change_dir()
        self._wrap()

    def move(self, step: int) -> int:
        """Move the selection, wrapping around both ends."""
        self.show_letters = False
        self.selected += step
        self._wrap()
        return self.selected

    def page(self, rows: int, forward: bool) -> int:
        """Move the selection by a page, stopping at the ends."""
        self.show_letters = False
        count = len(self)
        if forward:
            self.selected += rows
            if self.selected >= count:
                self.selected = count - 1
        else:
            self.selected -= rows
            if self.selected < 0:
                self.selected = 0
        self._wrap()
        return self.selected

    def jump_letter(self, forward: bool) -> int:
        """Move to the nearest entry whose initial differs from the current one."""
        self.show_letters = True
        current = self._initial(self.selected)
        if forward:
            while self.selected < len(self) - 1:
                self.selected += 1
                if self._initial(self.selected) != current:
                    break
        else:
            while self.selected > 0:
                self.selected -= 1
                if self._initial(self.selected) != current:
                    break
        return self.selected

    def dir_up(self) -> bool:
        """Go to the parent directory, restoring the earlier selection."""
        if not (self.show_directories and self.allow_dir_up):
            return False
        self.show_letters = False
        self.selected = self.history.pop() if self.history else 0
        self.enter(self.path + "/..")
        return True

    def confirm(self) -> bool:
        """Act on the selection; True when it is chosen as the result."""
        self.show_letters = False
        if self.show_directories and self.allow_dir_up and self.get_file(self.selected) == "..":
            self.dir_up()
            return False
        if self.allow_enter_directory and self.is_directory(self.selected):
            self.history.append(self.selected)
            self.enter(self.get_path(self.selected))
            self.selected = 0
            return False
        return True

    def preview(self, index: int | None = None) -> str:
        """Path of an image entry to preview, or an empty string."""
        if index is None:
            index = self.selected
        if self.get_ext(index) in IMAGE_EXTENSIONS:
            return self.get_path(index)
        return ""

    def button_hints(self) -> list[tuple[str, str]]:
        """The (button, label) pairs shown in the bottom bar."""
        if self.show_letters:
            letter = self._initial(self.selected)
            if not (letter.isascii() and letter.isalpha()):
                letter = "#"
            return [("skin:imgs/manual.png", _LETTERS.replace(letter, f" < {letter} > "))]

        hints = [("select", "Menu"), ("b", "Cancel")]
        is_dir = self.is_directory(self.selected)
        if not self.show_files and self.allow_select_directory:
            hints.append(("start", "Select"))
        elif (self.allow_enter_directory and is_dir) or not is_dir:
            hints.append(("a", "Select"))
        if self.show_directories and self.allow_dir_up and self.path != "/":
            hints.append(("x", "Dir up"))
        return hints

    def context_options(self, home: str) -> list[tuple[str, str]]:
        """The (label, action) entries of the context menu for the selection."""
        options = list(self._custom_options())
        if self.get_ext(self.selected) in IMAGE_EXTENSIONS:
            options.append(("Set as wallpaper", "wallpaper"))
        if (
            self.path == MEDIA_DIR
            and self.get_file(self.selected) != ".."
            and self.is_directory(self.selected)
        ):
            options.append(("Umount", "umount"))
        if self.path != home:
            options.append((f"Go to {home}", "home"))
        if self.path != MEDIA_DIR:
            options.append((f"Go to {MEDIA_DIR}", "media"))
        if self.is_file(self.selected):
            options.append(("Delete", "delete"))
        return options

    def random_file(self, rng: Any = None) -> int:
        """Select a random entry among the files."""
        count = self.file_count()
        if count == 0:
            raise ValueError("no files to choose from")
        rng = rng if rng is not None else random
        self.show_letters = True
        self.selected = rng.randrange(count) + self.dir_count()
        return self.selected

    def delete_selected(self) -> str:
        """Remove the selected file and reread the directory."""
        target = self.get_path(self.selected)
        os.unlink(target)
        self.enter(self.path)
        if hasattr(os, "sync"):
            os.sync()
        return target