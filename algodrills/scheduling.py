"""Non-preemptive and round-robin CPU scheduling simulations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A job with a name, arrival time, CPU burst and priority (higher runs first)."""

    name: str
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.name}: arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError(f"process {self.name}: burst time must be positive")


@dataclass(frozen=True)
class _Completion:
    """When a process first got the CPU and when it finished."""

    process: Process
    start: int
    finish: int

    @property
    def turnaround(self) -> int:
        return self.finish - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst

    @property
    def weighted_turnaround(self) -> float:
        return self.turnaround / self.process.burst


@dataclass(frozen=True)
class ScheduleReport:
    """Completed processes in the order they finished, with averages."""

    entries: tuple[_Completion, ...]

    @property
    def order(self) -> list[str]:
        """Process names in completion order."""
        return [entry.process.name for entry in self.entries]

    def _mean(self, values: Iterable[float]) -> float:
        items = list(values)
        return sum(items) / len(items) if items else 0.0

    @property
    def average_waiting(self) -> float:
        return self._mean(entry.waiting for entry in self.entries)

    @property
    def average_turnaround(self) -> float:
        return self._mean(entry.turnaround for entry in self.entries)

    @property
    def average_weighted_turnaround(self) -> float:
        return self._mean(entry.weighted_turnaround for entry in self.entries)

    def __str__(self) -> str:
        lines = ["name\tarrival\tburst\tstart\tfinish\tturnaround\twaiting"]
        lines.extend(
            f"{e.process.name}\t{e.process.arrival}\t{e.process.burst}\t{e.start}\t"
            f"{e.finish}\t{e.turnaround}\t{e.waiting}"
            for e in self.entries
        )
        lines.append(f"average waiting time: {self.average_waiting:.2f}")
        lines.append(f"average turnaround time: {self.average_turnaround:.2f}")
        lines.append(f"average weighted turnaround time: {self.average_weighted_turnaround:.2f}")
        return "\n".join(lines)


def _non_preemptive(
    processes: Iterable[Process], rank: Callable[[Process, int], float]
) -> ScheduleReport:
    """Run ready processes to completion, each time picking the lowest rank."""
    pending = list(enumerate(processes))
    clock = 0
    entries: list[_Completion] = []
    while pending:
        ready = [item for item in pending if item[1].arrival <= clock]
        if not ready:
            clock = min(process.arrival for _, process in pending)
            continue
        chosen = min(ready, key=lambda item: (rank(item[1], clock), item[0]))
        pending.remove(chosen)
        process = chosen[1]
        start = clock
        clock += process.burst
        entries.append(_Completion(process, start, clock))
    return ScheduleReport(tuple(entries))


def fcfs(processes: Iterable[Process]) -> ScheduleReport:
    """First come, first served."""
    return _non_preemptive(processes, lambda process, _clock: process.arrival)


def sjf(processes: Iterable[Process]) -> ScheduleReport:
    """Shortest job first among the processes that have arrived."""
    return _non_preemptive(processes, lambda process, _clock: process.burst)


def highest_priority(processes: Iterable[Process]) -> ScheduleReport:
    """Highest priority value first among the processes that have arrived."""
    return _non_preemptive(processes, lambda process, _clock: -process.priority)


def hrn(processes: Iterable[Process]) -> ScheduleReport:
    """Highest response ratio next: (waited + burst) / burst, largest first."""

    def rank(process: Process, clock: int) -> float:
        return -((clock - process.arrival + process.burst) / process.burst)

    return _non_preemptive(processes, rank)


def round_robin(processes: Sequence[Process], quantum: int) -> ScheduleReport:
    """Cycle through arrived processes in input order, each running at most ``quantum``."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    jobs = list(processes)
    remaining = [process.burst for process in jobs]
    first_start: list[int | None] = [None] * len(jobs)
    clock = 0
    entries: list[_Completion] = []
    while len(entries) < len(jobs):
        ran = False
        for index, process in enumerate(jobs):
            if remaining[index] == 0 or process.arrival > clock:
                continue
            ran = True
            if first_start[index] is None:
                first_start[index] = clock
            step = min(quantum, remaining[index])
            clock += step
            remaining[index] -= step
            if remaining[index] == 0:
                entries.append(_Completion(process, first_start[index], clock))
        if not ran:
            clock = min(p.arrival for i, p in enumerate(jobs) if remaining[i] > 0)
    return ScheduleReport(tuple(entries))


_SCHEDULERS: dict[str, Callable[[Iterable[Process]], ScheduleReport]] = {
    "1": fcfs,
    "2": sjf,
    "3": highest_priority,
    "4": hrn,
}

_MENU = "  1: FCFS  2: shortest job first  3: highest priority  4: highest response ratio  5: round robin"


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    token = _take(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected a number, got {token!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes and an algorithm choice from standard input and print the schedule."""
    parser = argparse.ArgumentParser(
        description="Simulate CPU scheduling on processes read from standard input."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        print("number of processes:")
        count = _take_int(tokens)
        if count < 0:
            raise ValueError("number of processes must not be negative")
        processes = []
        for index in range(count):
            print(f"process {index + 1}: name, arrival time, burst time, priority")
            name = _take(tokens)
            arrival = _take_int(tokens)
            burst = _take_int(tokens)
            priority = _take_int(tokens)
            processes.append(Process(name, arrival, burst, priority))
        print(_MENU)
        choice = _take(tokens)
        if choice == "5":
            print("time quantum:")
            report = round_robin(processes, _take_int(tokens))
        elif choice in _SCHEDULERS:
            report = _SCHEDULERS[choice](processes)
        else:
            print("invalid algorithm type")
            return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(report)
    return 0