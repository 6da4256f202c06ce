"""Sorted, filtered directory listings with an optional background scan."""

from __future__ import annotations

import os
import random
import threading
from enum import IntEnum

from .paths import (
    directory_exists,
    expand_with_trailing_slash,
    expand_without_trailing_slash,
    filename_absolute,
    filename_ext,
)

__all__ = ["SortOrder", "DirectoryListing", "list_directory"]


class SortOrder(IntEnum):
    """How the entries of a listing are ordered."""

    ATOZ = 0  # alphabetical
    ZTOA = 1  # reverse alphabetical
    AOTON = 2  # date accessed, old to new
    ANTOO = 3  # date accessed, new to old
    MOTON = 4  # date modified, old to new
    MNTOO = 5  # date modified, new to old
    COTON = 6  # date created, old to new
    CNTOO = 7  # date created, new to old
    RAND = 8  # random


_TIME_ORDERS = {
    SortOrder.AOTON: ("st_atime", False),
    SortOrder.ANTOO: ("st_atime", True),
    SortOrder.MOTON: ("st_mtime", False),
    SortOrder.MNTOO: ("st_mtime", True),
    SortOrder.COTON: ("st_ctime", False),
    SortOrder.CNTOO: ("st_ctime", True),
}


def _stamp(path: str, attr: str) -> int:
    try:
        return int(getattr(os.stat(path), attr))
    except (OSError, ValueError):
        return 0


def _pattern_extensions(pattern: str) -> list[str]:
    """Turn ``"*.txt; *.log"`` into ``[".txt", ".log"]``; ``"*.*"`` gives ``["."]``."""
    pattern = (pattern or "*.*").replace(" ", "").replace("*", "")
    parts = pattern.split(";")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _matches(item: str, extensions: list[str]) -> bool:
    return any(
        ext == "." or ext == filename_ext(item) or directory_exists(item)
        for ext in extensions
    )


class DirectoryListing:
    """A cursor over the entries of a directory.

    Files are given as absolute paths, directories with a trailing
    separator. ``maxfiles`` caps how many directory entries are examined
    (0 for no cap); ``cntfiles`` counts them, starting from 1. Setting
    ``complete`` to True while a background scan runs stops it early.
    """

    def __init__(self, order: SortOrder | int = SortOrder.ATOZ, maxfiles: int = 0) -> None:
        self.order = SortOrder(order)
        self.maxfiles = maxfiles
        self.cntfiles = 1
        self.complete = False
        self._entries: list[str] = []
        self._index = 0
        self._async = False

    def _limit_reached(self) -> bool:
        return bool(self.maxfiles) and self.cntfiles >= self.maxfiles

    def _scan(self, dname: str, pattern: str, includedirs: bool) -> list[str]:
        if not directory_exists(dname):
            return []
        path = expand_without_trailing_slash(dname)
        found: list[str] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    if self.complete or self._limit_reached():
                        break
                    item = filename_absolute(entry.path)
                    if item:
                        if not directory_exists(item):
                            found.append(item)
                        elif includedirs:
                            found.append(expand_with_trailing_slash(item))
                    self.cntfiles += 1
        except OSError:
            pass
        extensions = _pattern_extensions(pattern)
        return sorted({item for item in found if _matches(item, extensions)})

    def _scan_tree(
        self, dname: str, pattern: str, includedirs: bool, visited: set[str]
    ) -> list[str]:
        items = self._scan(dname, pattern, True)
        collected = list(items)
        for item in items:
            if directory_exists(item):
                key = os.path.realpath(item)
                if key in visited:
                    continue
                visited.add(key)
                collected.extend(self._scan_tree(item, pattern, includedirs, visited))
        return sorted(
            {item for item in collected if includedirs or not directory_exists(item)}
        )

    def _arrange(self, entries: list[str]) -> list[str]:
        if self.order is SortOrder.ZTOA:
            return list(reversed(entries))
        if self.order is SortOrder.RAND:
            shuffled = list(entries)
            random.shuffle(shuffled)
            return shuffled
        if self.order in _TIME_ORDERS:
            attr, newest_first = _TIME_ORDERS[self.order]
            return sorted(entries, key=lambda p: _stamp(p, attr), reverse=newest_first)
        return entries

    def first(
        self,
        dname: str,
        pattern: str = "",
        includedirs: bool = True,
        recursive: bool = False,
    ) -> str | None:
        """Read ``dname`` and return its first entry, or None if it has none.

        ``pattern`` is a ``;``-separated list such as ``"*.txt;*.log"``;
        an empty pattern matches everything. Directories always pass it.
        """
        if self.complete:
            self.close()
        if recursive:
            root = os.path.realpath(expand_without_trailing_slash(dname))
            entries = self._scan_tree(dname, pattern, includedirs, {root})
        else:
            entries = self._scan(dname, pattern, includedirs)
        self._entries = self._arrange(entries)
        if self._index < len(self._entries):
            self.complete = True
            return self._entries[self._index]
        self._async = False
        self.complete = True
        return None

    def first_async(
        self,
        dname: str,
        pattern: str = "",
        includedirs: bool = True,
        recursive: bool = False,
    ) -> threading.Thread:
        """Start :meth:`first` in a background thread and return that thread.

        ``complete`` turns True when the scan is done; the next call to
        :meth:`next` then returns the first entry.
        """
        self.close()
        self._async = True
        self.complete = False
        thread = threading.Thread(
            target=self.first,
            args=(dname, pattern, includedirs, recursive),
            daemon=True,
        )
        thread.start()
        return thread

    def next(self) -> str | None:
        """Return the following entry, or None once all have been returned."""
        if not self._async:
            self._index += 1
        self._async = False
        if self._index < len(self._entries):
            return self._entries[self._index]
        return None

    def close(self) -> None:
        """Forget the entries and reset the cursor and the file count."""
        self._entries = []
        self._index = 0
        self.cntfiles = 1
        self.complete = False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))


def list_directory(
    dname: str,
    pattern: str = "",
    includedirs: bool = True,
    recursive: bool = False,
) -> list[str]:
    """Return all entries of ``dname`` in alphabetical order."""
    listing = DirectoryListing()
    listing.first(dname, pattern, includedirs, recursive)
    return list(listing)