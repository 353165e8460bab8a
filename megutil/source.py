"""
Byte sources the archive reader can consume.

A source only needs buffered sequential reads plus absolute seeks. Archive
files are opened directly; anything without native seek support (a pipe,
stdin) is drained into memory first.
"""
from __future__ import annotations

import io
import sys
from typing import BinaryIO, Optional, Protocol


class ByteSource(Protocol):
    def read(self, n: int = -1) -> bytes:
        ...

    def seek(self, offset: int, whence: int = 0) -> int:
        ...

    def close(self) -> None:
        ...


def open_file_source(path: str) -> ByteSource:
    return open(path, "rb")


def buffer_stream(stream: BinaryIO) -> ByteSource:
    """Read a non-seekable stream to EOF and wrap the bytes in a BytesIO."""
    return io.BytesIO(stream.read())


def open_source(path: Optional[str], stdin: Optional[BinaryIO] = None) -> ByteSource:
    """Open `path`, or buffer stdin when no path is given.

    Args:
        path: Archive path, or None to read standard input.
        stdin: Binary stream used instead of sys.stdin.buffer (tests).
    """
    if path is not None:
        return open_file_source(path)
    if stdin is None:
        stdin = sys.stdin.buffer
    return buffer_stream(stdin)


def read_exact(f: ByteSource, n: int) -> bytes:
    b = f.read(n)
    if len(b) != n:
        raise EOFError("Unexpected EOF")
    return b
