"""Access, modification and change times of files, as local datetimes."""

from __future__ import annotations

import os
from datetime import datetime
from enum import IntEnum

from .paths import expand_without_trailing_slash

__all__ = ["Timestamp", "file_datetime", "fd_datetime"]


class Timestamp(IntEnum):
    """Which of a file's recorded times to read."""

    ACCESSED = 0
    MODIFIED = 1
    CREATED = 2


def _pick(info: os.stat_result, kind: Timestamp | int) -> datetime:
    kind = Timestamp(kind)
    if kind is Timestamp.ACCESSED:
        seconds = info.st_atime
    elif kind is Timestamp.MODIFIED:
        seconds = info.st_mtime
    else:
        seconds = info.st_ctime
    # Whole seconds only, as the filesystem API reports them.
    return datetime.fromtimestamp(int(seconds))


def file_datetime(fname: str, kind: Timestamp | int = Timestamp.MODIFIED) -> datetime:
    """Return the chosen time of ``fname`` in local time, to the second.

    ``CREATED`` reads the status-change time where the system keeps no
    creation time. Raises FileNotFoundError if ``fname`` does not exist and
    ValueError for an unknown ``kind``.
    """
    kind = Timestamp(kind)
    info = os.stat(expand_without_trailing_slash(fname))
    return _pick(info, kind)


def fd_datetime(fd: int, kind: Timestamp | int = Timestamp.MODIFIED) -> datetime:
    """Return the chosen time of the file open as ``fd``, like :func:`file_datetime`."""
    kind = Timestamp(kind)
    return _pick(os.fstat(fd), kind)