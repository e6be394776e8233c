# osim

Small implementations of the classic operating-system algorithms, useful
for coursework, exercises and checking hand-worked answers. The package
has no third-party dependencies.

## What is included

### `osim.scheduling`

A `Process` has a `pid`, an `arrival` time, a `burst` time and an optional
`priority` (a lower value means a higher priority). A negative burst raises
`ValueError`.

- `fcfs(processes)`: first come, first served.
- `sjf(processes)`: non-preemptive shortest job first.
- `priority(processes)`: non-preemptive priority scheduling; every process
  must have a priority, otherwise `ValueError` is raised.
- `round_robin(processes, quantum)`: round robin; the quantum must be
  positive.

Each returns a `Schedule`. `Schedule.completed` is a list of
`CompletedProcess` records (`completion`, `turnaround`, `waiting`), ordered
by arrival time for `fcfs` and `sjf` and in input order for `priority` and
`round_robin`. `Schedule.gantt` is a list of `GanttSlice`s; a slice whose
`pid` is `None` is idle CPU time. `average_turnaround()` and
`average_waiting()` give the means and raise `ValueError` for an empty
schedule.

`format_process_list`, `format_schedule` and `format_gantt` turn the input
and the result into text tables.

### `osim.paging`

`fifo(pages, frame_count)`, `lru(pages, frame_count)` and
`lfu(pages, frame_count)` return a `PagingResult` whose `steps` record, for
each reference, the page, the frame contents (`None` for an empty frame)
and whether it was a hit. `page_faults()` counts the misses. LFU breaks
ties by evicting the page used least recently. `format_paging` prints the
steps as a table with the total number of faults.

### `osim.allocation`

`BlockPool(sizes)` holds a set of free memory blocks. `first_fit(size)`,
`best_fit(size)` and `worst_fit(size)` take `size` out of a block and
return that block's index; when several blocks share the chosen size, the
last of them is used. If no block is large enough they raise
`AllocationError`. `render(highlight)` draws the blocks' free space,
marking the block at index `highlight`.

### `osim.bankers`

`check_safety(instances, maximum, allocation)` runs the banker's safety
check and returns a `SafetyResult` with the `need` matrix, the safe
`sequence` found, the `available` resources before the first process and
after each finished one, `safe` and `final_available`. `format_report`
prints the matrices and the sequence, or a one-line notice when the system
is not safe.

### `osim.sharedmem`

`write_message(text, key=1222)` stores up to 99 bytes of text in a
1024-byte memory-mapped segment file in the system temporary directory,
named by `segment_name(key)`, and returns what was stored.
`read_message(key=1222)` reads it back from any process, and
`remove_segment(key=1222)` deletes it. Failures raise `SharedMemoryError`.

### `osim.producer_consumer`

`RingBuffer(size=5)` is a circular buffer that holds at most `size - 1`
items; `put` blocks while it is full and `get` while it is empty.
`run(max_items=10, buffer_size=5, emit=None)` produces the items
`1..max_items` on one thread and consumes them on another, reporting
`Produced: n` and `Consumed: n` lines through `emit` (printed when no
callback is given), and returns the consumed items in order.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from osim.scheduling import Process, round_robin, format_schedule, format_gantt
from osim.paging import lru, format_paging

jobs = [Process(pid=1, arrival=0, burst=5), Process(pid=2, arrival=1, burst=3)]
schedule = round_robin(jobs, quantum=2)
print(format_gantt(schedule))
print(format_schedule(schedule))
print(schedule.average_waiting())

print(format_paging(lru([7, 0, 1, 2, 0, 3, 0, 4], 3)))
```

## Command line

`osim-sum` prints the sum 1 + 2 + … + N. Give N as an argument, or leave it
out to be asked for it:

```
osim-sum 10
osim-sum
```

A non-integer answer at the prompt ends with exit status 1.

## What it does not do

The simulations are library functions only: there is no interactive
command or menu for scheduling, paging, allocation or the banker's
algorithm. Call them from Python and print the results with the
formatting functions above.