"""Non-preemptive and round-robin CPU scheduling simulations."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process to schedule; a lower priority value means a higher priority."""

    pid: int
    arrival: int
    burst: int
    priority: int | None = None

    def __post_init__(self) -> None:
        if self.burst < 0:
            raise ValueError(f"process {self.pid}: burst time must not be negative")


@dataclass(frozen=True)
class CompletedProcess:
    """A process together with the time at which it finished."""

    process: Process
    completion: int

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


@dataclass(frozen=True)
class GanttSlice:
    """A stretch of CPU time; ``pid`` is None while the CPU is idle."""

    start: int
    end: int
    pid: int | None = None
    completed: bool = False

    @property
    def idle(self) -> bool:
        return self.pid is None


@dataclass
class Schedule:
    """The outcome of a scheduling run, in the order the table is shown."""

    completed: list[CompletedProcess]
    gantt: list[GanttSlice]

    def _mean(self, values: Iterable[int]) -> float:
        values = list(values)
        if not values:
            raise ValueError("schedule holds no processes")
        return sum(values) / len(values)

    def average_turnaround(self) -> float:
        return self._mean(done.turnaround for done in self.completed)

    def average_waiting(self) -> float:
        return self._mean(done.waiting for done in self.completed)


def _non_preemptive(
    order: Sequence[Process], rank: Callable[[Process], int]
) -> Schedule:
    """Run each ready process to completion, picking the lowest rank first.

    Ties go to the process that comes first in ``order``.
    """
    pending = list(enumerate(order))
    completion: dict[int, int] = {}
    gantt: list[GanttSlice] = []
    time = 0
    while pending:
        ready = [item for item in pending if item[1].arrival <= time]
        if not ready:
            next_arrival = min(process.arrival for _, process in pending)
            gantt.append(GanttSlice(time, next_arrival))
            time = next_arrival
            continue
        chosen = min(ready, key=lambda item: rank(item[1]))
        pending.remove(chosen)
        index, process = chosen
        end = time + process.burst
        gantt.append(GanttSlice(time, end, process.pid, True))
        completion[index] = end
        time = end
    completed = [
        CompletedProcess(process, completion[index])
        for index, process in enumerate(order)
    ]
    return Schedule(completed, gantt)


def _by_arrival(processes: Iterable[Process]) -> list[Process]:
    return sorted(processes, key=lambda process: process.arrival)


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served; the table is ordered by arrival time."""
    return _non_preemptive(_by_arrival(processes), lambda process: 0)


def sjf(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive shortest job first; the table is ordered by arrival time."""
    return _non_preemptive(_by_arrival(processes), lambda process: process.burst)


def priority(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive priority scheduling; the table keeps the input order."""
    order = list(processes)
    for process in order:
        if process.priority is None:
            raise ValueError(f"process {process.pid} has no priority")
    return _non_preemptive(order, lambda process: process.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round-robin scheduling with the given time quantum."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    order = list(processes)
    remaining = [process.burst for process in order]
    admitted = [False] * len(order)
    completion: dict[int, int] = {}
    queue: deque[int] = deque()
    gantt: list[GanttSlice] = []

    def admit(now: int) -> None:
        for index, process in enumerate(order):
            if not admitted[index] and process.arrival <= now:
                admitted[index] = True
                queue.append(index)

    time = 0
    while len(completion) < len(order):
        admit(time)
        if not queue:
            next_arrival = min(
                process.arrival
                for index, process in enumerate(order)
                if not admitted[index]
            )
            gantt.append(GanttSlice(time, next_arrival))
            time = next_arrival
            continue
        index = queue.popleft()
        start = time
        for _ in range(min(quantum, remaining[index])):
            remaining[index] -= 1
            time += 1
            admit(time)
        finished = remaining[index] == 0
        gantt.append(GanttSlice(start, time, order[index].pid, finished))
        if finished:
            completion[index] = time
        else:
            queue.append(index)

    completed = [
        CompletedProcess(process, completion[index])
        for index, process in enumerate(order)
    ]
    return Schedule(completed, gantt)


def format_process_list(processes: Iterable[Process]) -> str:
    """Tab-separated listing of the input processes."""
    processes = list(processes)
    with_priority = bool(processes) and all(
        process.priority is not None for process in processes
    )
    lines = ["PID\tAT\tBT\tPriority" if with_priority else "PID\tAT\tBT"]
    for process in processes:
        fields = [process.pid, process.arrival, process.burst]
        if with_priority:
            fields.append(process.priority)
        lines.append("\t".join(str(value) for value in fields))
    return "\n".join(lines)


def format_schedule(schedule: Schedule) -> str:
    """Result table followed by the average turnaround and waiting times."""
    with_priority = bool(schedule.completed) and all(
        done.process.priority is not None for done in schedule.completed
    )
    if with_priority:
        header = "| PID | AT  | BT  | PRI | CT  | TAT | WT  |"
    else:
        header = "| PID | AT  | BT  | CT  | TAT | WT  |"
    rule = "-" * len(header)
    lines = [header, rule]
    for done in schedule.completed:
        fields = [done.pid, done.process.arrival, done.process.burst]
        if with_priority:
            fields.append(done.process.priority)
        fields += [done.completion, done.turnaround, done.waiting]
        lines.append("|" + "".join(f" {value:3d} |" for value in fields))
    lines.append(rule)
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    return "\n".join(lines)


def format_gantt(schedule: Schedule) -> str:
    """Gantt chart, one line per slice of CPU time."""
    lines = []
    for piece in schedule.gantt:
        prefix = f"{piece.start} >>>>>>>>>>>>> {piece.end}"
        if piece.idle:
            lines.append(f"{prefix} Idle")
        elif piece.completed:
            lines.append(f"{prefix} P{piece.pid} (Complete)")
        else:
            lines.append(f"{prefix} P{piece.pid}")
    return "\n".join(lines)