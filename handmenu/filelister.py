"""Directory listing with extension filters, exclusions and favourites."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

log = logging.getLogger(__name__)


def _file_ext(name: str) -> str:
    """Lower-cased extension of the last path component, dot included."""
    return os.path.splitext(name.rsplit("/", 1)[-1])[1].lower()


def _matches(name: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        # An empty pattern among others stands for "files without extension".
        if len(patterns) > 1 and not pattern and "." in name:
            continue
        if len(pattern) <= len(name) and name.lower().endswith(pattern.lower()):
            return True
    return False


class FileLister:
    """Lists the directories and files of one directory.

    Entries are ordered as directories, then favourite files, then all
    matching files; a favourite file appears both among the favourites
    and among the files.
    """

    def __init__(self) -> None:
        self.path = ""
        self.filter = ""
        self.show_directories = True
        self.show_files = True
        self.show_full_path = False
        self.allow_dir_up = True
        self._directories: list[str] = []
        self._files: list[str] = []
        self._favourites: list[str] = []
        self._favs: list[str] = []
        self._excludes: list[str] = []

    def browse(self, path: str) -> None:
        """Read the contents of a directory, replacing the current listing."""
        self.path = os.path.realpath(path)
        self._directories = []
        self._files = []
        self._favourites = []

        if not (self.show_directories or self.show_files):
            return
        if self.show_directories and self.path != "/" and self.allow_dir_up:
            self._directories.append("..")

        patterns = self.filter.split(",")
        try:
            names = sorted(os.listdir(self.path))
        except OSError as exc:
            log.error("cannot list %s: %s", self.path, exc)
            return

        for name in names:
            if name.startswith(".") or name in self._excludes:
                continue
            full = os.path.join(self.path, name)
            entry = full if self.show_full_path else name
            try:
                is_dir = stat.S_ISDIR(os.stat(full).st_mode)
            except OSError as exc:
                log.error("stat failed on %s: %s", full, exc)
                continue
            if is_dir:
                if self.show_directories:
                    self._directories.append(entry)
            elif self.show_files and _matches(entry, patterns):
                if self.is_favourite(entry):
                    self._favourites.append(entry)
                self._files.append(entry)

    @property
    def directories(self) -> tuple[str, ...]:
        return tuple(self._directories)

    @property
    def files(self) -> tuple[str, ...]:
        return tuple(self._files)

    @property
    def favourites(self) -> tuple[str, ...]:
        return tuple(self._favourites)

    def __len__(self) -> int:
        return len(self._files) + len(self._favourites) + len(self._directories)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self):
            raise IndexError(index)
        return self.get_file(index)

    def __iter__(self) -> Iterator[str]:
        yield from self._directories
        yield from self._favourites
        yield from self._files

    def dir_count(self) -> int:
        return len(self._directories)

    def file_count(self) -> int:
        return len(self._files)

    def fav_count(self) -> int:
        return len(self._favourites)

    def get_file(self, index: int) -> str:
        """Entry at an index, or an empty string when out of range."""
        if index < 0 or index >= len(self):
            return ""
        dirs = len(self._directories)
        if index < dirs:
            return self._directories[index]
        favs = len(self._favourites)
        if index < dirs + favs:
            return self._favourites[index - dirs]
        return self._files[index - dirs - favs]

    def get_path(self, index: int = 0) -> str:
        """Full path of the entry at an index."""
        separator = "" if self.path.endswith("/") else "/"
        return self.path + separator + self.get_file(index)

    def get_ext(self, index: int = 0) -> str:
        return _file_ext(self.get_file(index))

    def is_file(self, index: int) -> bool:
        return len(self._directories) + len(self._favourites) <= index < len(self)

    def is_directory(self, index: int) -> bool:
        return 0 <= index < len(self._directories)

    def set_path(self, path: str) -> None:
        self.path = os.path.realpath(path)

    def insert_file(self, name: str) -> None:
        """Put a file at the front of the file list."""
        self._files.insert(0, name)

    def add_exclude(self, name: str) -> None:
        """Hide an entry; excluding '..' also disables going up."""
        if name == "..":
            self.allow_dir_up = False
        self._excludes.append(name)

    def is_favourite(self, name: str) -> bool:
        return name in self._favs

    def add_favourite(self, name: str) -> None:
        self._favs.append(name)

    def clear_favourites(self) -> None:
        self._favs.clear()