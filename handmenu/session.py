"""State kept between runs of the menu while a program is launched."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from handmenu.inputmanager import Action

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _split_line(line: str) -> tuple[str, str]:
    if "=" in line:
        name, _, value = line.partition("=")
        return name.strip(), value.strip()
    return line.strip(), line.strip()


_INT_FIELDS = {
    "section": "section",
    "link": "link",
    "selectorElement": "selector_element",
    "udc": "udc",
    "tvout": "tvout",
}
_STR_FIELDS = {
    "selectorDir": "selector_dir",
    "currBackdrop": "curr_backdrop",
    "explorerLastDir": "explorer_last_dir",
}


@dataclass
class Session:
    """Selection and hardware state saved as name=value lines."""

    section: int = 0
    link: int = 0
    selector_element: int = 0
    selector_dir: str = ""
    udc: int = int(Action.UDC_REMOVE)
    tvout: int = int(Action.TV_REMOVE)
    curr_backdrop: str = ""
    explorer_last_dir: str = ""

    @classmethod
    def read(cls, path: str | os.PathLike) -> "Session":
        """Read a session file; unknown names are ignored."""
        session = cls()
        for line in Path(path).read_text(encoding="utf-8").splitlines():
            name, value = _split_line(line)
            if name in _INT_FIELDS:
                setattr(session, _INT_FIELDS[name], _atoi(value))
            elif name in _STR_FIELDS:
                setattr(session, _STR_FIELDS[name], value)
        return session

    @classmethod
    def consume(cls, path: str | os.PathLike) -> "Session | None":
        """Read a session file and delete it; None when there is none."""
        try:
            session = cls.read(path)
        except OSError:
            return None
        os.unlink(path)
        return session

    def write(self, path: str | os.PathLike) -> bool:
        """Write the session; False when the file cannot be written."""
        lines = [
            f"section={self.section}",
            f"link={self.link}",
            f"selectorElement={self.selector_element}",
            f"selectorDir={self.selector_dir}",
            f"udc={self.udc}",
            f"tvout={self.tvout}",
            f"currBackdrop={self.curr_backdrop}",
        ]
        if self.explorer_last_dir:
            lines.append(f"explorerLastDir={self.explorer_last_dir}")
        try:
            Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        except OSError:
            return False
        return True