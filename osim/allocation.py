"""Contiguous memory allocation with first, best and worst fit."""

from __future__ import annotations

from collections.abc import Iterable

_RULE = "-" * 42


class AllocationError(Exception):
    """No block is large enough for the requested size."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"Process not allocated. No suitable block found (size {size})."
        )
        self.size = size


class BlockPool:
    """A fixed set of memory blocks from which processes are carved out."""

    def __init__(self, sizes: Iterable[int]) -> None:
        self.blocks = list(sizes)
        for block in self.blocks:
            if block < 0:
                raise ValueError("block sizes must not be negative")

    def __repr__(self) -> str:
        return f"BlockPool({self.blocks!r})"

    @staticmethod
    def _check_size(size: int) -> None:
        if size < 0:
            raise ValueError("process size must not be negative")

    def _take(self, index: int, size: int) -> int:
        self.blocks[index] -= size
        return index

    def _take_sized(self, target: int, size: int) -> int:
        # Among blocks of the chosen size the last one is used.
        index = max(i for i, block in enumerate(self.blocks) if block == target)
        return self._take(index, size)

    def first_fit(self, size: int) -> int:
        """Allocate from the first block that is large enough; return its index."""
        self._check_size(size)
        for index, block in enumerate(self.blocks):
            if block >= size:
                return self._take(index, size)
        raise AllocationError(size)

    def best_fit(self, size: int) -> int:
        """Allocate from the smallest block that is large enough; return its index."""
        self._check_size(size)
        candidates = [block for block in self.blocks if block >= size]
        if not candidates:
            raise AllocationError(size)
        return self._take_sized(min(candidates), size)

    def worst_fit(self, size: int) -> int:
        """Allocate from the largest block if it is large enough; return its index."""
        self._check_size(size)
        if not self.blocks or max(self.blocks) < size:
            raise AllocationError(size)
        return self._take_sized(max(self.blocks), size)

    def render(self, highlight: int | None = None) -> str:
        """Show the free space of every block, marking the highlighted one."""
        cells = "".join(
            f" //{block}// |" if index == highlight else f" {block} |"
            for index, block in enumerate(self.blocks)
        )
        return "\n".join([_RULE, "|" + cells, _RULE])