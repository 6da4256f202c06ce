"""Well-known locations: user folders, working and temporary directories, executable."""

from __future__ import annotations

import os
import sys
import tempfile
from enum import IntEnum

from .environment import get_variable
from .fileops import directory_create
from .paths import (
    directory_exists,
    expand_with_trailing_slash,
    expand_without_trailing_slash,
    file_exists,
    filename_name,
    filename_path,
)

__all__ = [
    "SpecialFolder",
    "special_path",
    "current_working_directory",
    "set_current_working_directory",
    "temporary_path",
    "executable_pathname",
    "executable_directory",
    "executable_filename",
]


class SpecialFolder(IntEnum):
    """A per-user folder."""

    DESKTOP = 0
    DOCUMENTS = 1
    DOWNLOADS = 2
    MUSIC = 3
    PICTURES = 4
    VIDEOS = 5


_XDG_KEYS = {
    SpecialFolder.DESKTOP: "XDG_DESKTOP_DIR=",
    SpecialFolder.DOCUMENTS: "XDG_DOCUMENTS_DIR=",
    SpecialFolder.DOWNLOADS: "XDG_DOWNLOAD_DIR=",
    SpecialFolder.MUSIC: "XDG_MUSIC_DIR=",
    SpecialFolder.PICTURES: "XDG_PICTURES_DIR=",
    SpecialFolder.VIDEOS: "XDG_VIDEOS_DIR=",
}

_FOLDER_NAMES = {
    SpecialFolder.DESKTOP: "Desktop",
    SpecialFolder.DOCUMENTS: "Documents",
    SpecialFolder.DOWNLOADS: "Downloads",
    SpecialFolder.MUSIC: "Music",
    SpecialFolder.PICTURES: "Pictures",
    SpecialFolder.VIDEOS: "Videos",
}


def _as_folder(folder: SpecialFolder | int) -> SpecialFolder:
    try:
        return SpecialFolder(folder)
    except ValueError:
        return SpecialFolder.DESKTOP


def _shell_word(raw: str) -> str:
    """Evaluate a user-dirs value as the shell would for a single word."""
    raw = raw.strip()
    if len(raw) >= 2 and raw[0] == raw[-1] == "'":
        return raw[1:-1]
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        raw = raw[1:-1]
    return os.path.expandvars(raw)


def _xdg_path(folder: SpecialFolder) -> str | None:
    key = _XDG_KEYS[folder]
    conf = get_variable("HOME") + "/.config/user-dirs.dirs"
    if not file_exists(conf):
        return None
    result = None
    with open(conf, encoding="utf-8", errors="replace") as fh:
        for line in fh:
            pos = line.find(key)
            if pos < 0:
                continue
            value = _shell_word(line[pos + len(key):])
            if not value:
                continue
            if not directory_exists(value):
                directory_create(value)
            result = value if value.endswith("/") else value + "/"
    return result


def special_path(folder: SpecialFolder | int) -> str | None:
    """Return the user's folder of the given kind, ending in a separator.

    On Linux and the BSDs the folder comes from the XDG user-dirs file and
    is created if missing; None when that file does not name it. Unknown
    folder numbers mean the desktop.
    """
    folder = _as_folder(folder)
    if sys.platform == "win32":
        profile = get_variable("USERPROFILE")
        if not profile:
            return None
        return profile.rstrip("\\/") + "\\" + _FOLDER_NAMES[folder] + "\\"
    if sys.platform == "darwin":
        home = get_variable("HOME")
        if not home:
            return None
        name = "Movies" if folder is SpecialFolder.VIDEOS else _FOLDER_NAMES[folder]
        return home.rstrip("/") + "/" + name + "/"
    return _xdg_path(folder)


def current_working_directory() -> str:
    """Return the working directory, ending in a separator."""
    return expand_with_trailing_slash(os.getcwd())


def set_current_working_directory(dname: str) -> None:
    """Change the working directory; raises OSError if that fails."""
    os.chdir(expand_without_trailing_slash(dname))


def temporary_path() -> str:
    """Return the directory for temporary files, ending in a separator."""
    return expand_with_trailing_slash(tempfile.gettempdir())


def executable_pathname() -> str:
    """Return the resolved path of the running executable."""
    for candidate in ("/proc/self/exe", "/proc/self/path/a.out"):
        if os.path.exists(candidate):
            return os.path.realpath(candidate)
    if sys.executable:
        return os.path.realpath(sys.executable)
    raise FileNotFoundError("cannot determine the running executable")


def executable_directory() -> str:
    """Return the directory of the running executable, ending in a separator."""
    return filename_path(executable_pathname())


def executable_filename() -> str:
    """Return the file name of the running executable."""
    return filename_name(executable_pathname())