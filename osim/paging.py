"""Page replacement simulations: FIFO, LRU and LFU."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count


@dataclass(frozen=True)
class PagingStep:
    """Frame contents after one page reference; None marks an empty frame."""

    page: int
    frames: tuple[int | None, ...]
    hit: bool


@dataclass(frozen=True)
class PagingResult:
    """Every step of a page replacement run."""

    frame_count: int
    steps: tuple[PagingStep, ...]

    def page_faults(self) -> int:
        return sum(not step.hit for step in self.steps)


def _check_frames(frame_count: int) -> None:
    if frame_count <= 0:
        raise ValueError("frame count must be positive")


def fifo(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page that was loaded longest ago."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    slot = 0
    steps = []
    for page in pages:
        hit = page in frames
        if not hit:
            frames[slot] = page
            slot = (slot + 1) % frame_count
        steps.append(PagingStep(page, tuple(frames), hit))
    return PagingResult(frame_count, tuple(steps))


def lru(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page that was used least recently."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    last_used = [0] * frame_count
    clock = count(1)
    steps = []
    for page in pages:
        hit = page in frames
        if hit:
            slot = frames.index(page)
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
            frames[slot] = page
        last_used[slot] = next(clock)
        steps.append(PagingStep(page, tuple(frames), hit))
    return PagingResult(frame_count, tuple(steps))


def lfu(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the least frequently used page, the least recent among equals."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    frequency = [0] * frame_count
    last_used = [0] * frame_count
    steps = []
    for position, page in enumerate(pages):
        hit = page in frames
        if hit:
            slot = frames.index(page)
            frequency[slot] += 1
        else:
            if None in frames:
                slot = frames.index(None)
            else:
                slot = min(
                    range(frame_count),
                    key=lambda j: (frequency[j], last_used[j]),
                )
            frames[slot] = page
            frequency[slot] = 1
        last_used[slot] = position
        steps.append(PagingStep(page, tuple(frames), hit))
    return PagingResult(frame_count, tuple(steps))


def format_paging(result: PagingResult) -> str:
    """Step-by-step table of frame contents and the total fault count."""
    rule = "-" * 50
    lines = ["Reference | Page Frames | Status", rule]
    for step in result.steps:
        cells = "".join(
            " --" if frame is None else f" {frame:2d}" for frame in step.frames
        )
        status = "HIT" if step.hit else "MISS"
        lines.append(f"{step.page:10d} |{cells}  |  {status}")
    lines.append(rule)
    lines.append(f"Total Page Faults: {result.page_faults()}")
    return "\n".join(lines)