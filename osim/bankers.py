"""Banker's algorithm: safety check for resource allocation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check.

    ``available`` holds the free resources before the first process runs and
    after each process in ``sequence`` has finished.
    """

    maximum: tuple[tuple[int, ...], ...]
    allocation: tuple[tuple[int, ...], ...]
    need: tuple[tuple[int, ...], ...]
    available: tuple[tuple[int, ...], ...]
    sequence: tuple[int, ...]

    @property
    def safe(self) -> bool:
        return len(self.sequence) == len(self.maximum)

    @property
    def final_available(self) -> tuple[int, ...]:
        return self.available[-1]


def _matrix(rows: Sequence[Sequence[int]], width: int, name: str):
    result = tuple(tuple(row) for row in rows)
    for row in result:
        if len(row) != width:
            raise ValueError(f"every row of the {name} matrix needs {width} values")
    return result


def check_safety(
    instances: Sequence[int],
    maximum: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
) -> SafetyResult:
    """Look for a safe sequence in which every process can finish."""
    instances = tuple(instances)
    width = len(instances)
    maximum = _matrix(maximum, width, "max")
    allocation = _matrix(allocation, width, "allocation")
    if len(maximum) != len(allocation):
        raise ValueError("max and allocation matrices need the same number of rows")

    need = tuple(
        tuple(m - a for m, a in zip(max_row, alloc_row))
        for max_row, alloc_row in zip(maximum, allocation)
    )
    free = tuple(
        total - sum(column)
        for total, column in zip(instances, zip(*allocation))
    ) if allocation else instances
    history = [free]
    sequence: list[int] = []
    finished = [False] * len(maximum)

    for _ in range(len(maximum)):
        for index, process_need in enumerate(need):
            if finished[index]:
                continue
            current = history[-1]
            if all(n <= f for n, f in zip(process_need, current)):
                finished[index] = True
                sequence.append(index)
                history.append(
                    tuple(f + a for f, a in zip(current, allocation[index]))
                )

    return SafetyResult(maximum, allocation, need, tuple(history), tuple(sequence))


def _cells(values: Sequence[int]) -> str:
    return "".join(f"{value:2d} " for value in values) + "    |"


def format_report(result: SafetyResult) -> str:
    """Describe the check; a safe system gets its matrices and sequence."""
    if not result.safe:
        return "The following system is not safe"
    lines = [
        "The following system is safe",
        "Max        |   Allocation |   Need    |    Available   | ",
    ]
    for index, max_row in enumerate(result.maximum):
        lines.append(
            _cells(max_row)
            + _cells(result.allocation[index])
            + _cells(result.need[index])
            + _cells(result.available[index])
        )
    lines.append("".join(f"p{index}>>>" for index in result.sequence))
    lines.append("")
    lines.append(
        "Available after execution : "
        + "".join(f"{value:2d} " for value in result.final_available)
    )
    return "\n".join(lines)