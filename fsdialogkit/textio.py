"""Byte- and line-oriented reading and writing through raw file descriptors."""

from __future__ import annotations

import os
import tempfile
from enum import IntEnum

from .locations import temporary_path
from .paths import expand_without_trailing_slash

__all__ = ["OpenMode", "FileHandle"]

_BINARY = getattr(os, "O_BINARY", 0)
_DIGITS = frozenset("0123456789")


class OpenMode(IntEnum):
    """How a file is opened."""

    RDONLY = 0  # read only
    WRONLY = 1  # write only, truncating or creating
    RDWR = 2  # read and write, truncating or creating
    APPEND = 3  # append only, creating
    RDAP = 4  # read and append, creating


_FLAGS = {
    OpenMode.RDONLY: os.O_RDONLY,
    OpenMode.WRONLY: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    OpenMode.RDWR: os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    OpenMode.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    OpenMode.RDAP: os.O_RDWR | os.O_CREAT | os.O_APPEND,
}


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class FileHandle:
    """An open file descriptor with text helpers.

    A NUL byte counts as the end of text, as does the end of the file.
    Text is encoded and decoded as UTF-8.
    """

    def __init__(self, fd: int) -> None:
        self._fd: int | None = fd
        self.path: str | None = None
        self._remove_on_close = False

    @classmethod
    def open(cls, fname: str, mode: OpenMode | int = OpenMode.RDONLY) -> FileHandle:
        """Open ``fname`` in the given mode; ``${VAR}`` references are expanded.

        Raises ValueError for an unknown mode and OSError if opening fails.
        """
        mode = OpenMode(mode)
        path = expand_without_trailing_slash(fname)
        fd = os.open(path, _FLAGS[mode] | _BINARY, 0o666)
        handle = cls(fd)
        handle.path = path
        return handle

    @classmethod
    def from_string(cls, text: str) -> FileHandle:
        """Return a handle on a new temporary file holding ``text``, positioned at its start.

        The temporary file is removed when the handle is closed.
        """
        fd, path = tempfile.mkstemp(prefix="temp.", dir=temporary_path())
        handle = cls(fd)
        handle.path = path
        handle._remove_on_close = True
        try:
            handle.write_string(text)
            os.lseek(fd, 0, os.SEEK_SET)
        except BaseException:
            handle.close()
            raise
        return handle

    @property
    def fd(self) -> int:
        """The underlying descriptor; ValueError once closed."""
        if self._fd is None:
            raise ValueError("I/O operation on closed file")
        return self._fd

    @property
    def closed(self) -> bool:
        return self._fd is None

    def close(self) -> None:
        """Close the descriptor; closing twice is harmless."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        os.close(fd)
        if self._remove_on_close and self.path:
            try:
                os.remove(self.path)
            except OSError:
                pass

    def __enter__(self) -> FileHandle:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def size(self) -> int:
        """Return the file size in bytes."""
        return os.fstat(self.fd).st_size

    def position(self) -> int:
        """Return the current offset."""
        return os.lseek(self.fd, 0, os.SEEK_CUR)

    def seek(self, offset: int) -> int:
        """Move ``offset`` bytes from the current offset; return the new offset."""
        return os.lseek(self.fd, offset, os.SEEK_CUR)

    def rewrite(self) -> None:
        """Empty the file and go back to its start."""
        os.lseek(self.fd, 0, os.SEEK_SET)
        os.ftruncate(self.fd, 0)

    def read_byte(self) -> int:
        """Read one byte; 0 at the end of the file."""
        data = os.read(self.fd, 1)
        return data[0] if data else 0

    def _read_char(self) -> str:
        data = os.read(self.fd, 1)
        return chr(data[0]) if data else ""

    def _peek(self) -> bytes:
        data = os.read(self.fd, 1)
        if data:
            os.lseek(self.fd, -1, os.SEEK_CUR)
        return data

    def write_byte(self, byte: int) -> int:
        """Write one byte (0-255); return the count written."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        return os.write(self.fd, bytes([byte]))

    def write_string(self, text: str) -> int:
        """Write ``text`` as UTF-8; return the number of bytes written."""
        data = text.encode("utf-8")
        view = memoryview(data)
        while view:
            written = os.write(self.fd, view)
            view = view[written:]
        return len(data)

    def write_real(self, value: float) -> int:
        """Write ``value`` in fixed notation with six decimals; return the byte count."""
        return self.write_string(f"{value:f}")

    def writeln(self) -> int:
        """Write a newline."""
        return self.write_byte(ord("\n"))

    def eof(self) -> bool:
        """Return whether no text remains, without consuming anything."""
        if self.position() > self.size():
            return True
        data = self._peek()
        return not data or data == b"\0"

    def eoln(self) -> bool:
        """Return whether the next byte ends the line or the text, without consuming it."""
        if self.position() > self.size():
            return True
        data = self._peek()
        return not data or data in (b"\n", b"\0")

    def _read_line_bytes(self) -> tuple[bytearray, bool]:
        """Read up to and including a newline; the flag says whether one was read."""
        buf = bytearray()
        while True:
            data = os.read(self.fd, 1)
            if not data or data == b"\0":
                return buf, False
            buf += data
            if data == b"\n":
                return buf, True

    def read_string(self) -> str:
        """Read the rest of the line, leaving the line ending unread."""
        buf, newline = self._read_line_bytes()
        if newline:
            if buf.endswith(b"\r\n"):
                os.lseek(self.fd, -2, os.SEEK_CUR)
                del buf[-2:]
            else:
                os.lseek(self.fd, -1, os.SEEK_CUR)
                del buf[-1:]
        return buf.decode("utf-8", errors="replace")

    def readln(self) -> str:
        """Read and return the rest of the line including its newline."""
        buf, _ = self._read_line_bytes()
        return buf.decode("utf-8", errors="replace")

    def read_real(self) -> float:
        """Read a decimal number, skipping leading line breaks.

        The byte that ends the number is consumed. Returns 0.0 when no
        number starts here.
        """
        char = self._read_char()
        while char in ("\r", "\n"):
            char = self._read_char()
        if char not in _DIGITS and char not in ("+", "-", "."):
            return 0.0
        text = char
        dot = char == "."
        if char in ("+", "-"):
            char = self._read_char()
            if char not in _DIGITS and char != ".":
                return _to_float(text)
            dot = char == "."
            text += char
        while True:
            char = self._read_char()
            if char == "." and not dot:
                dot = True
            elif char not in _DIGITS:
                break
            text += char
        return _to_float(text)

    def read_all(self) -> str:
        """Read everything from the current offset up to the end of the text."""
        chunks = []
        while True:
            data = os.read(self.fd, 65536)
            if not data:
                break
            chunks.append(data)
        data = b"".join(chunks)
        end = data.find(b"\0")
        if end >= 0:
            data = data[:end]
        return data.decode("utf-8", errors="replace")