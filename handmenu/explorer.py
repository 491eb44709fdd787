"""Decisions of the file explorer: what a file is and how it is started."""

from __future__ import annotations

import enum
import os
import shlex

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp")
TEXT_EXTENSIONS = (".txt", ".conf", ".me", ".md", ".xml", ".log", ".ini")
SKIN_PREFIXES = ("gmenu2x-skin-", "gmenunx-skin-")
_SKIN_PREFIX_LENGTH = 13
_LINK_FILTER = ".dge,.gpu,.gpe,.sh,.bin,.elf,"
_IPK_INSTALL = "opkg install --force-reinstall --force-overwrite "
_IPK_DEBUG = "--force-downgrade --force-depends --force-maintainer "


class FileKind(enum.Enum):
    """How the explorer opens a file."""

    IMAGE = "image"
    TEXT = "text"
    IPK = "ipk"
    OPK = "opk"
    SCRIPT = "script"
    SKIN = "skin"
    ZIP = "zip"
    EXECUTABLE = "executable"


def _ext(name: str) -> str:
    return os.path.splitext(os.path.basename(name))[1].lower()


def classify_file(
    name: str,
    has_ipk: bool = False,
    has_opk: bool = False,
    has_unzip: bool = False,
    has_opkg: bool = False,
) -> FileKind:
    """Decide how a file chosen in the explorer is opened."""
    ext = _ext(name)
    base = os.path.basename(name)
    if ext in IMAGE_EXTENSIONS:
        return FileKind.IMAGE
    if ext in TEXT_EXTENSIONS:
        return FileKind.TEXT
    if has_ipk and ext == ".ipk" and has_opkg:
        return FileKind.IPK
    if has_opk and ext == ".opk":
        return FileKind.OPK
    if ext == ".sh":
        return FileKind.SCRIPT
    # A name with the current prefix counts as a skin whatever it is.
    if (ext == ".zip" and has_unzip and base.startswith(SKIN_PREFIXES[0])) or base.startswith(
        SKIN_PREFIXES[1]
    ):
        return FileKind.SKIN
    if ext == ".zip" and has_unzip:
        return FileKind.ZIP
    return FileKind.EXECUTABLE


def skin_name_from_zip(path: str) -> str:
    """Name of the skin packed in a skin archive."""
    stem = os.path.splitext(os.path.basename(path))[0]
    name = stem[_SKIN_PREFIX_LENGTH:]
    if len(name) <= 1:
        raise ValueError(f"no skin name in {path!r}")
    return name


def launch_command(
    path: str, output_logs: bool, log_path: str, has_gdb: bool = False
) -> tuple[str, str]:
    """The command and parameters that start a program.

    With logging on, output goes to the log file, through the debugger
    when one is installed.
    """
    command = shlex.quote(path)
    params = ""
    if output_logs:
        if has_gdb:
            params = '-batch -ex "run" -ex "bt" --args ' + command
            command = "gdb"
        params += " 2>&1 | tee " + shlex.quote(log_path)
    return command, params


def ipk_install_command(path: str, debug: bool = False) -> str:
    """Shell command that installs a package; debug forces it through."""
    command = _IPK_INSTALL
    if debug:
        command += _IPK_DEBUG
    return command + shlex.quote(path)


def add_link_filter(has_ipk: bool, has_opk: bool) -> str:
    """Extension filter of the browser used to add links."""
    extensions = _LINK_FILTER
    if has_ipk:
        extensions = ".ipk," + extensions
    if has_opk:
        extensions = ".opk," + extensions
    return extensions


def unique_link_path(sections_dir: str, section: str, title: str) -> str:
    """A free path for a link file in a section, numbering from 2 on clashes."""
    base = os.path.join(sections_dir, section, title)
    candidate = base
    number = 2
    while os.path.exists(candidate):
        candidate = f"{base}{number}"
        number += 1
    return candidate


def unique_screenshot_path(directory: str, extension: str = ".png") -> str:
    """A free path for a screenshot file in a directory."""
    base = os.path.join(directory, "screenshot")
    candidate = base + extension
    number = 1
    while os.path.exists(candidate):
        candidate = f"{base}-{number}{extension}"
        number += 1
    return candidate