"""A small named shared memory segment for passing a text message."""

from __future__ import annotations

import mmap
import os
import tempfile
from pathlib import Path

DEFAULT_KEY = 1222
SEGMENT_SIZE = 1024
MESSAGE_LIMIT = 99


class SharedMemoryError(Exception):
    """The segment could not be created, attached or removed."""


def segment_name(key: int = DEFAULT_KEY) -> str:
    """The name under which the segment for ``key`` is kept."""
    return f"osim-shm-{key}"


def _segment_path(key: int) -> Path:
    return Path(tempfile.gettempdir()) / segment_name(key)


def write_message(text: str, key: int = DEFAULT_KEY) -> str:
    """Store ``text`` (at most 99 bytes of it) in the segment; return what was stored."""
    data = text.encode("utf-8")[:MESSAGE_LIMIT]
    flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(_segment_path(key), flags, 0o666)
    except OSError as exc:
        raise SharedMemoryError(f"Failed to create/get shared memory: {exc}") from exc
    try:
        if os.fstat(fd).st_size < SEGMENT_SIZE:
            os.ftruncate(fd, SEGMENT_SIZE)
        with mmap.mmap(fd, SEGMENT_SIZE) as view:
            view[: len(data) + 1] = data + b"\0"
    except OSError as exc:
        raise SharedMemoryError(f"Failed to attach shared memory: {exc}") from exc
    finally:
        os.close(fd)
    return data.decode("utf-8", errors="replace")


def read_message(key: int = DEFAULT_KEY) -> str:
    """Return the text held in an existing segment."""
    try:
        fd = os.open(_segment_path(key), os.O_RDONLY | getattr(os, "O_BINARY", 0))
    except OSError as exc:
        raise SharedMemoryError(f"Failed to access shared memory: {exc}") from exc
    try:
        size = os.fstat(fd).st_size
        if size == 0:
            raise SharedMemoryError("Failed to attach shared memory: segment is empty")
        with mmap.mmap(fd, size, access=mmap.ACCESS_READ) as view:
            raw = view[:]
    except OSError as exc:
        raise SharedMemoryError(f"Failed to attach shared memory: {exc}") from exc
    finally:
        os.close(fd)
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def remove_segment(key: int = DEFAULT_KEY) -> None:
    """Delete the segment for ``key``."""
    try:
        _segment_path(key).unlink()
    except OSError as exc:
        raise SharedMemoryError(f"Failed to remove shared memory: {exc}") from exc