import pytest

from osim.scheduling import (
    GanttSlice,
    Process,
    fcfs,
    format_gantt,
    format_process_list,
    format_schedule,
    priority,
    round_robin,
    sjf,
)

SAMPLE = [
    Process(1, 0, 5, 2),
    Process(2, 1, 3, 1),
    Process(3, 2, 8, 4),
    Process(4, 3, 6, 3),
]

ALGORITHMS = [
    fcfs,
    sjf,
    priority,
    lambda processes: round_robin(processes, 2),
]


def _run_order(schedule):
    return [piece.pid for piece in schedule.gantt if not piece.idle]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_accounting_invariants(algorithm):
    schedule = algorithm(SAMPLE)
    assert {done.pid for done in schedule.completed} == {p.pid for p in SAMPLE}
    for done in schedule.completed:
        assert done.turnaround == done.completion - done.process.arrival
        assert done.waiting == done.turnaround - done.process.burst
        assert done.waiting >= 0
    busy = sum(p.end - p.start for p in schedule.gantt if not p.idle)
    assert busy == sum(p.burst for p in SAMPLE)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_gantt_is_contiguous(algorithm):
    schedule = algorithm(SAMPLE)
    assert schedule.gantt[0].start == 0
    for before, after in zip(schedule.gantt, schedule.gantt[1:]):
        assert before.end == after.start


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_average_difference_is_mean_burst(algorithm):
    schedule = algorithm(SAMPLE)
    mean_burst = sum(p.burst for p in SAMPLE) / len(SAMPLE)
    difference = schedule.average_turnaround() - schedule.average_waiting()
    assert difference == pytest.approx(mean_burst)


def test_fcfs_orders_by_arrival():
    processes = [Process(3, 4, 2), Process(1, 0, 3), Process(2, 2, 1)]
    schedule = fcfs(processes)
    assert [done.pid for done in schedule.completed] == [1, 2, 3]
    assert _run_order(schedule) == [1, 2, 3]


def test_fcfs_keeps_input_order_on_equal_arrival():
    schedule = fcfs([Process(7, 0, 2), Process(5, 0, 1)])
    assert _run_order(schedule) == [7, 5]


def test_fcfs_idle_gap():
    first, second = Process(1, 0, 2), Process(2, 10, 3)
    schedule = fcfs([first, second])
    idle = schedule.gantt[1]
    assert idle.idle
    assert idle.start == first.arrival + first.burst
    assert idle.end == second.arrival
    assert schedule.completed[1].completion == second.arrival + second.burst
    assert schedule.completed[1].waiting == 0


def test_sjf_picks_shortest_ready_job():
    processes = [Process(1, 0, 10), Process(2, 1, 5), Process(3, 1, 2)]
    schedule = sjf(processes)
    assert _run_order(schedule) == [1, 3, 2]
    assert [done.pid for done in schedule.completed] == [1, 2, 3]


def test_sjf_equal_bursts_keep_arrival_order():
    processes = [Process(1, 0, 1), Process(3, 1, 4), Process(2, 1, 4)]
    assert _run_order(sjf(processes)) == [1, 3, 2]


def test_priority_lower_value_runs_first():
    processes = [Process(3, 1, 2, 2), Process(1, 0, 4, 3), Process(2, 1, 2, 1)]
    schedule = priority(processes)
    assert _run_order(schedule) == [1, 2, 3]
    assert [done.pid for done in schedule.completed] == [3, 1, 2]


def test_priority_requires_priorities():
    with pytest.raises(ValueError):
        priority([Process(1, 0, 3)])


def test_round_robin_worked_example():
    processes = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
    schedule = round_robin(processes, 2)
    slices = [(p.start, p.end, p.pid, p.completed) for p in schedule.gantt]
    assert slices == [
        (0, 2, 1, False),
        (2, 4, 2, False),
        (4, 5, 3, True),
        (5, 7, 1, False),
        (7, 8, 2, True),
        (8, 9, 1, True),
    ]


def test_round_robin_slices_respect_quantum():
    quantum = 2
    schedule = round_robin(SAMPLE, quantum)
    for done in schedule.completed:
        mine = [p for p in schedule.gantt if p.pid == done.pid]
        assert all(p.end - p.start <= quantum for p in mine)
        assert sum(p.end - p.start for p in mine) == done.process.burst
        finals = [p for p in mine if p.completed]
        assert len(finals) == 1
        assert finals[0].end == done.completion
        assert mine[-1] is finals[0]


def test_round_robin_large_quantum_matches_fcfs():
    by_rr = round_robin(SAMPLE, 100)
    by_fcfs = fcfs(SAMPLE)
    assert [d.completion for d in by_rr.completed] == [
        d.completion for d in by_fcfs.completed
    ]


@pytest.mark.parametrize("quantum", [0, -1])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin(SAMPLE, quantum)


def test_negative_burst_rejected():
    with pytest.raises(ValueError):
        Process(1, 0, -1)


def test_empty_schedule_has_no_average():
    schedule = fcfs([])
    assert schedule.completed == []
    with pytest.raises(ValueError):
        schedule.average_turnaround()
    with pytest.raises(ValueError):
        schedule.average_waiting()


def test_format_schedule_table():
    schedule = fcfs([Process(1, 0, 5)])
    lines = format_schedule(schedule).splitlines()
    assert lines[0] == "| PID | AT  | BT  | CT  | TAT | WT  |"
    assert lines[2] == "|   1 |   0 |   5 |   5 |   5 |   0 |"
    assert lines[1] == lines[3]
    assert lines[-2] == (
        f"Average Turnaround Time: {schedule.average_turnaround():.2f}"
    )
    assert lines[-1] == f"Average Waiting Time: {schedule.average_waiting():.2f}"


def test_format_schedule_with_priority_column():
    lines = format_schedule(priority(SAMPLE)).splitlines()
    assert lines[0] == "| PID | AT  | BT  | PRI | CT  | TAT | WT  |"
    assert len(lines) == len(SAMPLE) + 5


def test_format_process_list():
    plain = [Process(1, 0, 5), Process(2, 3, 4)]
    lines = format_process_list(plain).splitlines()
    assert lines[0] == "PID\tAT\tBT"
    assert lines[1:] == [f"{p.pid}\t{p.arrival}\t{p.burst}" for p in plain]
    with_priority = format_process_list(SAMPLE).splitlines()
    assert with_priority[0] == "PID\tAT\tBT\tPriority"
    assert with_priority[1].split("\t") == ["1", "0", "5", "2"]


def test_format_gantt_with_idle():
    schedule = round_robin([Process(1, 3, 2)], 2)
    assert schedule.gantt[0] == GanttSlice(0, 3)
    assert format_gantt(schedule).splitlines() == [
        "0 >>>>>>>>>>>>> 3 Idle",
        "3 >>>>>>>>>>>>> 5 P1 (Complete)",
    ]