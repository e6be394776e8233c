"""Bounded-buffer producer/consumer with two threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class RingBuffer:
    """A circular buffer of ``size`` slots that holds at most ``size - 1`` items.

    ``put`` blocks while the buffer is full and ``get`` while it is empty.
    The optional callbacks run while the buffer's lock is held.
    """

    def __init__(
        self,
        size: int = 5,
        on_put: Callable[[Any], None] | None = None,
        on_get: Callable[[Any], None] | None = None,
    ) -> None:
        if size < 2:
            raise ValueError("a ring buffer needs at least two slots")
        self._slots: list[Any] = [None] * size
        self._in = 0
        self._out = 0
        self._on_put = on_put
        self._on_get = on_get
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return len(self._slots) - 1

    def __len__(self) -> int:
        with self._cond:
            return (self._in - self._out) % len(self._slots)

    def _full(self) -> bool:
        return (self._in + 1) % len(self._slots) == self._out

    def put(self, item: Any) -> None:
        """Add ``item``, waiting for free space."""
        with self._cond:
            self._cond.wait_for(lambda: not self._full())
            self._slots[self._in] = item
            self._in = (self._in + 1) % len(self._slots)
            if self._on_put is not None:
                self._on_put(item)
            self._cond.notify_all()

    def get(self) -> Any:
        """Remove and return the oldest item, waiting for one to arrive."""
        with self._cond:
            self._cond.wait_for(lambda: self._in != self._out)
            item = self._slots[self._out]
            self._slots[self._out] = None
            self._out = (self._out + 1) % len(self._slots)
            if self._on_get is not None:
                self._on_get(item)
            self._cond.notify_all()
            return item


def _print(line: str) -> None:
    print(line, flush=True)


def run(
    max_items: int = 10,
    buffer_size: int = 5,
    emit: Callable[[str], None] | None = None,
) -> list[int]:
    """Produce items 1..max_items on one thread and consume them on another.

    Each step is reported through ``emit``; the consumed items are returned.
    """
    if max_items < 0:
        raise ValueError("max_items must not be negative")
    report = emit if emit is not None else _print
    buffer = RingBuffer(
        buffer_size,
        on_put=lambda item: report(f"Produced: {item}"),
        on_get=lambda item: report(f"Consumed: {item}"),
    )
    consumed: list[int] = []

    def produce() -> None:
        for item in range(1, max_items + 1):
            buffer.put(item)

    def consume() -> None:
        for _ in range(max_items):
            consumed.append(buffer.get())

    threads = [
        threading.Thread(target=produce, name="producer"),
        threading.Thread(target=consume, name="consumer"),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed