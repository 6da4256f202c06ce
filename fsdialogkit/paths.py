"""Path string helpers: expansion, splitting, existence and identity."""

from __future__ import annotations

import os

from .environment import expand_variables

__all__ = [
    "expand_without_trailing_slash",
    "expand_with_trailing_slash",
    "filename_path",
    "filename_name",
    "filename_ext",
    "file_exists",
    "directory_exists",
    "filename_absolute",
    "filename_canonical",
    "filename_equivalent",
    "is_inside_directory",
]

_SEPARATORS = "\\/" if os.name == "nt" else "/"


def _last_separator(fname: str) -> int:
    return max(fname.rfind(sep) for sep in _SEPARATORS)


def expand_without_trailing_slash(dname: str) -> str:
    """Expand ``${VAR}`` references and make ``dname`` absolute.

    Relative paths are joined to the working directory without any
    normalisation. Trailing separators are removed, except from a root.
    Returns an empty string if the working directory cannot be read.
    """
    dname = expand_variables(dname)
    if not os.path.isabs(dname):
        try:
            cwd = os.getcwd()
        except OSError:
            return ""
        dname = os.path.join(cwd, dname)
    drive, rest = os.path.splitdrive(dname)
    stripped = rest.rstrip(_SEPARATORS)
    if not stripped and rest:
        stripped = rest[0]
    return drive + stripped


def expand_with_trailing_slash(dname: str) -> str:
    """Like :func:`expand_without_trailing_slash`, but ending in a separator."""
    dname = expand_without_trailing_slash(dname)
    if not dname.endswith(os.sep):
        dname += os.sep
    return dname


def filename_path(fname: str) -> str:
    """Return the part up to and including the last separator.

    A name without a separator is returned unchanged.
    """
    pos = _last_separator(fname)
    if pos < 0:
        return fname
    return fname[:pos + 1]


def filename_name(fname: str) -> str:
    """Return the part after the last separator."""
    pos = _last_separator(fname)
    if pos < 0:
        return fname
    return fname[pos + 1:]


def filename_ext(fname: str) -> str:
    """Return the extension of the final name, dot included, or ``""``."""
    name = filename_name(fname)
    pos = name.rfind(".")
    if pos < 0:
        return ""
    return name[pos:]


def file_exists(fname: str) -> bool:
    """Return whether ``fname`` exists and is not a directory."""
    path = expand_without_trailing_slash(fname)
    try:
        return os.path.exists(path) and not os.path.isdir(path)
    except (OSError, ValueError):
        return False


def directory_exists(dname: str) -> bool:
    """Return whether ``dname`` exists and is a directory."""
    path = expand_without_trailing_slash(dname)
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def filename_absolute(fname: str) -> str:
    """Return the absolute form of an existing file or directory, else ``""``.

    Directories come back with a trailing separator.
    """
    if directory_exists(fname):
        return expand_with_trailing_slash(fname)
    if file_exists(fname):
        return expand_without_trailing_slash(fname)
    return ""


def filename_canonical(fname: str) -> str:
    """Resolve links and dot segments as far as the path exists.

    Directories come back with a trailing separator; ``""`` on failure.
    """
    path = expand_without_trailing_slash(fname)
    try:
        result = os.path.realpath(path)
    except (OSError, ValueError):
        return ""
    if directory_exists(result):
        return expand_with_trailing_slash(result)
    return result


def filename_equivalent(fname1: str, fname2: str) -> bool:
    """Return whether both paths exist and name the same file."""
    path1 = expand_without_trailing_slash(fname1)
    path2 = expand_without_trailing_slash(fname2)
    try:
        if os.path.exists(path1) and os.path.exists(path2):
            return os.path.samefile(path1, path2)
    except (OSError, ValueError):
        return False
    return False


def is_inside_directory(outer: str, inner: str) -> bool:
    """Return whether ``inner`` is ``outer`` itself or lies beneath it.

    The filesystem root never counts as an enclosing directory.
    """
    if not directory_exists(outer):
        return False
    outer = expand_without_trailing_slash(outer)
    current = expand_without_trailing_slash(inner)
    while True:
        current = expand_without_trailing_slash(current)
        parent = os.path.dirname(current)
        if parent == current:
            return False
        if filename_equivalent(outer, current):
            return True
        current = parent