"""Creating, copying, moving, deleting and measuring files, directories and links."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable

from .paths import (
    directory_exists,
    expand_without_trailing_slash,
    file_exists,
    filename_absolute,
    filename_path,
    is_inside_directory,
)

__all__ = [
    "symlink_create",
    "symlink_copy",
    "symlink_exists",
    "hardlink_create",
    "link_count",
    "fd_link_count",
    "find_hardlinks",
    "file_size",
    "file_delete",
    "file_rename",
    "file_copy",
    "directory_create",
    "directory_destroy",
    "directory_rename",
    "directory_copy",
    "directory_size",
]


def _missing(kind: str, name: str) -> FileNotFoundError:
    return FileNotFoundError(f"no such {kind}: {name!r}")


def _ensure_parent(path: str) -> None:
    parent = filename_path(path)
    if parent and not directory_exists(parent):
        directory_create(parent)


def symlink_create(fname: str, newname: str) -> None:
    """Create ``newname`` as a symbolic link to the file or directory ``fname``.

    The link points at the absolute form of ``fname``. Missing parent
    directories of ``newname`` are created. Raises FileNotFoundError if
    ``fname`` does not exist.
    """
    target = expand_without_trailing_slash(fname)
    link = expand_without_trailing_slash(newname)
    if file_exists(target):
        _ensure_parent(link)
        os.symlink(target, link)
    elif directory_exists(target):
        _ensure_parent(link)
        os.symlink(target, link, target_is_directory=True)
    else:
        raise _missing("file or directory", fname)


def symlink_copy(fname: str, newname: str) -> None:
    """Create ``newname`` as a link with the same target as the link ``fname``.

    Raises FileNotFoundError unless ``fname`` is a link to something existing.
    """
    source = expand_without_trailing_slash(fname)
    link = expand_without_trailing_slash(newname)
    if not symlink_exists(source):
        raise _missing("symbolic link", fname)
    _ensure_parent(link)
    os.symlink(os.readlink(source), link, target_is_directory=os.path.isdir(source))


def symlink_exists(fname: str) -> bool:
    """Return whether ``fname`` is a symbolic link whose target exists."""
    path = expand_without_trailing_slash(fname)
    try:
        return os.path.exists(path) and os.path.islink(path)
    except (OSError, ValueError):
        return False


def hardlink_create(fname: str, newname: str) -> None:
    """Create ``newname`` as another hard link to the file ``fname``.

    Raises FileNotFoundError if ``fname`` is not an existing file.
    """
    source = expand_without_trailing_slash(fname)
    link = expand_without_trailing_slash(newname)
    if not file_exists(source):
        raise _missing("file", fname)
    _ensure_parent(link)
    os.link(source, link)


def link_count(fname: str) -> int:
    """Return the number of hard links to the file ``fname``."""
    path = expand_without_trailing_slash(fname)
    if not file_exists(path):
        raise _missing("file", fname)
    return os.stat(path).st_nlink


def fd_link_count(fd: int) -> int:
    """Return the number of hard links to the file open as ``fd``."""
    return os.fstat(fd).st_nlink


def _split_dnames(dnames: str | Iterable[str]) -> list[str]:
    if isinstance(dnames, str):
        parts = dnames.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return parts
    return list(dnames)


def _scan_for_links(
    directory: str,
    target: tuple[int, int, int, int],
    recursive: bool,
    found: list[str],
    visited: set[tuple[int, int]],
) -> bool:
    """Collect paths matching ``target``; return True once all links are found."""
    try:
        info = os.stat(directory)
    except OSError:
        return False
    key = (info.st_dev, info.st_ino)
    if key in visited:
        return False
    visited.add(key)
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError:
        return False
    for entry in entries:
        path = filename_absolute(entry.path)
        if not path:
            continue
        if file_exists(path):
            try:
                st = os.stat(path)
            except OSError:
                continue
            if (st.st_dev, st.st_ino, st.st_size, int(st.st_mtime)) == target:
                found.append(path)
                if len(found) >= st.st_nlink:
                    return True
        if recursive and directory_exists(path):
            if _scan_for_links(path, target, recursive, found, visited):
                return True
    return False


def find_hardlinks(
    fd: int, dnames: str | Iterable[str], recursive: bool = False
) -> list[str]:
    """Return the paths under ``dnames`` that are hard links to the file ``fd``.

    ``dnames`` is an iterable of directories or a newline-separated string.
    Directories are searched in order, stopping at the first that does not
    exist, and the search ends as soon as every link has been found.
    """
    info = os.fstat(fd)
    if not info.st_nlink:
        return []
    target = (info.st_dev, info.st_ino, info.st_size, int(info.st_mtime))
    found: list[str] = []
    visited: set[tuple[int, int]] = set()
    for dname in _split_dnames(dnames):
        if not directory_exists(dname):
            break
        directory = expand_without_trailing_slash(dname)
        if _scan_for_links(directory, target, recursive, found, visited):
            break
    return found


def file_size(fname: str) -> int:
    """Return the size in bytes of the file ``fname``."""
    if not file_exists(fname):
        raise _missing("file", fname)
    return os.path.getsize(expand_without_trailing_slash(fname))


def file_delete(fname: str) -> None:
    """Delete the file ``fname``; raises FileNotFoundError if it is not a file."""
    if not file_exists(fname):
        raise _missing("file", fname)
    os.remove(expand_without_trailing_slash(fname))


def file_rename(oldname: str, newname: str) -> None:
    """Move the file ``oldname`` to ``newname``, replacing any file there.

    Missing parent directories of ``newname`` are created.
    """
    if not file_exists(oldname):
        raise _missing("file", oldname)
    source = expand_without_trailing_slash(oldname)
    dest = expand_without_trailing_slash(newname)
    _ensure_parent(dest)
    os.replace(source, dest)


def file_copy(fname: str, newname: str) -> None:
    """Copy the file ``fname`` to ``newname``, which must not exist yet.

    Missing parent directories of ``newname`` are created.
    """
    if not file_exists(fname):
        raise _missing("file", fname)
    source = expand_without_trailing_slash(fname)
    dest = expand_without_trailing_slash(newname)
    _ensure_parent(dest)
    if os.path.lexists(dest):
        raise FileExistsError(f"destination exists: {newname!r}")
    shutil.copy(source, dest)


def directory_create(dname: str) -> bool:
    """Create ``dname`` and any missing parents.

    Returns False if the directory already existed, True if it was created.
    """
    path = expand_without_trailing_slash(dname)
    if os.path.isdir(path):
        return False
    os.makedirs(path)
    return True


def directory_destroy(dname: str) -> None:
    """Remove the directory ``dname`` with everything in it.

    A symbolic link to a directory is removed itself, not its target.
    """
    if not directory_exists(dname):
        raise _missing("directory", dname)
    path = expand_without_trailing_slash(dname)
    if os.path.islink(path):
        os.remove(path)
    else:
        shutil.rmtree(path)


def _prepare_directory_move(dname: str, newname: str) -> tuple[str, str]:
    if not directory_exists(dname):
        raise _missing("directory", dname)
    source = expand_without_trailing_slash(dname)
    dest = expand_without_trailing_slash(newname)
    if is_inside_directory(source, dest):
        raise ValueError(f"{newname!r} lies inside {dname!r}")
    parent = os.path.dirname(dest)
    if not directory_exists(parent):
        directory_create(parent)
    return source, dest


def _copy_new_file(src: str, dst: str) -> str:
    if os.path.lexists(dst):
        raise FileExistsError(f"destination exists: {dst!r}")
    return shutil.copy(src, dst)


def directory_copy(dname: str, newname: str) -> None:
    """Copy the directory tree ``dname`` to ``newname``, keeping links as links.

    Raises ValueError if ``newname`` lies inside ``dname``. Files already
    present at the destination are not overwritten.
    """
    source, dest = _prepare_directory_move(dname, newname)
    shutil.copytree(
        source, dest, symlinks=True, copy_function=_copy_new_file, dirs_exist_ok=True
    )


def directory_rename(oldname: str, newname: str) -> None:
    """Move the directory ``oldname`` to ``newname``.

    Raises ValueError if ``newname`` lies inside ``oldname``.
    """
    source, dest = _prepare_directory_move(oldname, newname)
    os.replace(source, dest)


def _tree_size(directory: str, visited: set[tuple[int, int]]) -> int:
    try:
        info = os.stat(directory)
    except OSError:
        return 0
    key = (info.st_dev, info.st_ino)
    if key in visited:
        return 0
    visited.add(key)
    total = 0
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError:
        return 0
    for entry in entries:
        path = filename_absolute(entry.path)
        if not path:
            continue
        if directory_exists(path):
            total += _tree_size(expand_without_trailing_slash(path), visited)
        else:
            try:
                total += os.path.getsize(path)
            except OSError:
                pass
    return total


def directory_size(dname: str) -> int:
    """Return the total size in bytes of all files below ``dname``."""
    if not directory_exists(dname):
        raise _missing("directory", dname)
    return _tree_size(expand_without_trailing_slash(dname), set())