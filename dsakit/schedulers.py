"""CPU scheduling algorithms producing per-process statistics and a timeline.

Processes are expected in order of arrival. The timeline is indexed as
``timeline[instant][process_index]`` and holds ``'*'`` while a process runs,
``'.'`` while it waits and ``' '`` otherwise.
"""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import Callable, Sequence

from .sched_input import AlgorithmSpec, Process

IDLE = " "
RUNNING = "*"
WAITING = "."


@dataclass
class Schedule:
    """The outcome of running one algorithm over a set of processes."""

    finish_times: list[int]
    turnaround_times: list[int]
    norm_turns: list[float]
    timeline: list[list[str]]


class _Arrivals:
    """Hands out process indices in input order as their arrival condition holds."""

    def __init__(self, processes: Sequence[Process]) -> None:
        self._processes = processes
        self._next = 0

    def take(self, ready: Callable[[int], bool]) -> int | None:
        if self._next < len(self._processes) and ready(self._processes[self._next].arrival):
            self._next += 1
            return self._next - 1
        return None

    def take_all(self, ready: Callable[[int], bool]) -> list[int]:
        taken = []
        while (index := self.take(ready)) is not None:
            taken.append(index)
        return taken


@dataclass
class _Ready:
    index: int
    ratio: float = 1.0
    served: int = 0


@dataclass
class _Aged:
    priority: int
    index: int
    waited: int = 0


def _blank(process_count: int, last_instant: int) -> Schedule:
    return Schedule(
        finish_times=[0] * process_count,
        turnaround_times=[0] * process_count,
        norm_turns=[0.0] * process_count,
        timeline=[[IDLE] * process_count for _ in range(max(last_instant, 0))],
    )


def _mark(schedule: Schedule, instant: int, index: int, symbol: str) -> None:
    if 0 <= instant < len(schedule.timeline):
        schedule.timeline[instant][index] = symbol


def _finish(schedule: Schedule, processes: Sequence[Process], index: int, finish: int) -> None:
    process = processes[index]
    turnaround = finish - process.arrival
    schedule.finish_times[index] = finish
    schedule.turnaround_times[index] = turnaround
    schedule.norm_turns[index] = turnaround / process.service


def _fill_in_wait_time(schedule: Schedule, processes: Sequence[Process]) -> None:
    limit = len(schedule.timeline)
    for index, process in enumerate(processes):
        end = min(schedule.finish_times[index], limit)
        for instant in range(max(process.arrival, 0), end):
            if schedule.timeline[instant][index] != RUNNING:
                schedule.timeline[instant][index] = WAITING


def response_ratio(wait_time: int, service_time: int) -> float:
    """Response ratio used by HRRN: (wait + service) / service."""
    return (wait_time + service_time) / service_time


def first_come_first_serve(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Run processes one after another in input order."""
    schedule = _blank(len(processes), last_instant)
    if not processes:
        return schedule
    time = processes[0].arrival
    for index, process in enumerate(processes):
        finish = time + process.service
        _finish(schedule, processes, index, finish)
        for instant in range(time, finish):
            _mark(schedule, instant, index, RUNNING)
        for instant in range(process.arrival, time):
            _mark(schedule, instant, index, WAITING)
        time = finish
    return schedule


def round_robin(processes: Sequence[Process], last_instant: int, quantum: int) -> Schedule:
    """Round robin with the given time quantum."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    queue: deque[list[int]] = deque()

    def admit(index: int) -> None:
        queue.append([index, processes[index].service])

    first = arrivals.take(lambda arrival: arrival == 0)
    if first is not None:
        admit(first)

    current_quantum = quantum
    for time in range(last_instant):
        if queue:
            entry = queue[0]
            index = entry[0]
            entry[1] -= 1
            remaining = entry[1]
            current_quantum -= 1
            _mark(schedule, time, index, RUNNING)
            for arrived in arrivals.take_all(lambda arrival: arrival == time + 1):
                admit(arrived)
            if current_quantum == 0:
                queue.popleft()
                if remaining == 0:
                    _finish(schedule, processes, index, time + 1)
                else:
                    queue.append([index, remaining])
                current_quantum = quantum
            elif remaining == 0:
                _finish(schedule, processes, index, time + 1)
                queue.popleft()
                current_quantum = quantum
        for arrived in arrivals.take_all(lambda arrival: arrival == time + 1):
            admit(arrived)
    _fill_in_wait_time(schedule, processes)
    return schedule


def shortest_process_next(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Non-preemptive: always run the shortest ready process to completion."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    ready: list[tuple[int, int]] = []
    time = 0
    while time < last_instant:
        for arrived in arrivals.take_all(lambda arrival: arrival <= time):
            heapq.heappush(ready, (processes[arrived].service, arrived))
        if not ready:
            time += 1
            continue
        _, index = heapq.heappop(ready)
        process = processes[index]
        for instant in range(process.arrival, time):
            _mark(schedule, instant, index, WAITING)
        for instant in range(time, time + process.service):
            _mark(schedule, instant, index, RUNNING)
        _finish(schedule, processes, index, time + process.service)
        time += process.service
    return schedule


def shortest_remaining_time(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Preemptive: each instant run the process with least remaining time."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    ready: list[tuple[int, int]] = []
    for time in range(last_instant):
        for arrived in arrivals.take_all(lambda arrival: arrival == time):
            heapq.heappush(ready, (processes[arrived].service, arrived))
        if ready:
            remaining, index = heapq.heappop(ready)
            _mark(schedule, time, index, RUNNING)
            if remaining == 1:
                _finish(schedule, processes, index, time + 1)
            else:
                heapq.heappush(ready, (remaining - 1, index))
    _fill_in_wait_time(schedule, processes)
    return schedule


def highest_response_ratio_next(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Non-preemptive: run the ready process with the highest response ratio."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    present: list[_Ready] = []
    current = 0
    while current < last_instant:
        for arrived in arrivals.take_all(lambda arrival: arrival <= current):
            present.append(_Ready(arrived))
        for entry in present:
            process = processes[entry.index]
            entry.ratio = response_ratio(current - process.arrival, process.service)
        present.sort(key=lambda entry: entry.ratio, reverse=True)
        if present:
            entry = present.pop(0)
            service = processes[entry.index].service
            while current < last_instant and entry.served != service:
                _mark(schedule, current, entry.index, RUNNING)
                current += 1
                entry.served += 1
            current -= 1
            _finish(schedule, processes, entry.index, current + 1)
        current += 1
    _fill_in_wait_time(schedule, processes)
    return schedule


def feedback_q1(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Multilevel feedback with a quantum of 1 at every level."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    ready: list[tuple[int, int]] = []
    remaining: dict[int, int] = {}

    def admit(index: int) -> None:
        heapq.heappush(ready, (0, index))
        remaining[index] = processes[index].service

    first = arrivals.take(lambda arrival: arrival == 0)
    if first is not None:
        admit(first)

    for time in range(last_instant):
        if ready:
            level, index = heapq.heappop(ready)
            for arrived in arrivals.take_all(lambda arrival: arrival == time + 1):
                admit(arrived)
            remaining[index] -= 1
            _mark(schedule, time, index, RUNNING)
            if remaining[index] == 0:
                _finish(schedule, processes, index, time + 1)
            else:
                heapq.heappush(ready, (level + 1 if ready else level, index))
        for arrived in arrivals.take_all(lambda arrival: arrival == time + 1):
            admit(arrived)
    _fill_in_wait_time(schedule, processes)
    return schedule


def feedback_q2i(processes: Sequence[Process], last_instant: int) -> Schedule:
    """Multilevel feedback where level ``i`` has a quantum of ``2**i``."""
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    ready: list[tuple[int, int]] = []
    remaining: dict[int, int] = {}

    def admit(index: int) -> None:
        heapq.heappush(ready, (0, index))
        remaining[index] = processes[index].service

    first = arrivals.take(lambda arrival: arrival == 0)
    if first is not None:
        admit(first)

    time = 0
    while time < last_instant:
        if ready:
            level, index = heapq.heappop(ready)
            for arrived in arrivals.take_all(lambda arrival: arrival <= time + 1):
                admit(arrived)
            slice_left = 2 ** level
            end = time
            while slice_left and remaining[index]:
                slice_left -= 1
                remaining[index] -= 1
                _mark(schedule, end, index, RUNNING)
                end += 1
            if remaining[index] == 0:
                _finish(schedule, processes, index, end)
            else:
                heapq.heappush(ready, (level + 1 if ready else level, index))
            time = end - 1
        for arrived in arrivals.take_all(lambda arrival: arrival <= time + 1):
            admit(arrived)
        time += 1
    _fill_in_wait_time(schedule, processes)
    return schedule


def aging(processes: Sequence[Process], last_instant: int, quantum: int) -> Schedule:
    """Priority scheduling with aging; a process's priority is its service time.

    A negative quantum lets the chosen process run to the last instant.
    """
    if quantum == 0:
        raise ValueError("aging needs a non-zero quantum")
    schedule = _blank(len(processes), last_instant)
    arrivals = _Arrivals(processes)
    entries: list[_Aged] = []
    current = -1
    time = 0
    while time < last_instant:
        for arrived in arrivals.take_all(lambda arrival: arrival <= time):
            entries.append(_Aged(processes[arrived].service, arrived))
        for entry in entries:
            if entry.index == current:
                entry.waited = 0
                entry.priority = processes[current].service
            else:
                entry.priority += 1
                entry.waited += 1
        entries.sort(key=lambda entry: (entry.priority, entry.waited), reverse=True)
        if not entries:
            time += 1
            continue
        current = entries[0].index
        left = last_instant - time
        span = left if quantum < 0 else min(quantum, left)
        for instant in range(time, time + span):
            _mark(schedule, instant, current, RUNNING)
        time += span
    _fill_in_wait_time(schedule, processes)
    return schedule


def run_algorithm(
    spec: AlgorithmSpec, processes: Sequence[Process], last_instant: int
) -> Schedule:
    """Run the algorithm named by ``spec.algorithm_id`` ('1' to '8')."""
    runners: dict[str, Callable[[], Schedule]] = {
        "1": lambda: first_come_first_serve(processes, last_instant),
        "2": lambda: round_robin(processes, last_instant, spec.quantum),
        "3": lambda: shortest_process_next(processes, last_instant),
        "4": lambda: shortest_remaining_time(processes, last_instant),
        "5": lambda: highest_response_ratio_next(processes, last_instant),
        "6": lambda: feedback_q1(processes, last_instant),
        "7": lambda: feedback_q2i(processes, last_instant),
        "8": lambda: aging(processes, last_instant, spec.quantum),
    }
    try:
        runner = runners[spec.algorithm_id]
    except KeyError:
        raise ValueError(f"unknown algorithm id {spec.algorithm_id!r}") from None
    return runner()