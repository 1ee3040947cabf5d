"""Simple scheduling simulations: FCFS, shortest job next and round robin."""

from __future__ import annotations

import argparse
import heapq
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Job:
    """A job with an id, an arrival time and a burst time."""

    job_id: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class Slice:
    """A stretch of time during which one job runs."""

    job_id: int
    start: int
    end: int

    def describe(self) -> str:
        return f"Process {self.job_id} is running from {self.start} to {self.end}"


@dataclass
class SchedulingRun:
    """The slices a schedule produced and the average waiting time."""

    slices: list[Slice] = field(default_factory=list)
    average_waiting: float = 0.0


@dataclass
class TimedProcess:
    """A process with its arrival, burst and completion times."""

    pid: int
    arrival: int
    burst: int
    completion: int = 0


def _job_list(jobs: Iterable[Job]) -> list[Job]:
    jobs = list(jobs)
    if not jobs:
        raise ValueError("at least one job is needed")
    return jobs


def fcfs(jobs: Iterable[Job]) -> SchedulingRun:
    """Run jobs in the given order, each to completion."""
    jobs = _job_list(jobs)
    current = 0
    total_waiting = 0
    slices = []
    for job in jobs:
        current = max(current, job.arrival)
        start = current
        current += job.burst
        slices.append(Slice(job.job_id, start, current))
        total_waiting += current - job.arrival - job.burst
    return SchedulingRun(slices, total_waiting / len(jobs))


def sjn(jobs: Iterable[Job]) -> SchedulingRun:
    """Shortest job next: of the jobs that have arrived, run the shortest."""
    jobs = _job_list(jobs)
    by_id = {job.job_id: job for job in jobs}
    if len(by_id) != len(jobs):
        raise ValueError("job ids must be unique")
    ready: list[tuple[int, int]] = []
    pending = deque(jobs)
    current = 0
    total_waiting = 0
    slices = []
    while pending or ready:
        if ready:
            burst, job_id = heapq.heappop(ready)
            start = current
            current += burst
            slices.append(Slice(job_id, start, current))
            total_waiting += current - by_id[job_id].arrival - burst
            while pending and pending[0].arrival <= current:
                job = pending.popleft()
                heapq.heappush(ready, (job.burst, job.job_id))
        else:
            job = pending.popleft()
            heapq.heappush(ready, (job.burst, job.job_id))
            current = job.arrival
    return SchedulingRun(slices, total_waiting / len(jobs))


def round_robin(jobs: Iterable[Job], quantum: int) -> SchedulingRun:
    """Round robin with the given time quantum."""
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    jobs = _job_list(jobs)
    pending = deque(jobs)
    ready: deque[tuple[Job, int]] = deque()
    current = 0
    total_waiting = 0
    slices = []
    while pending or ready:
        while pending and pending[0].arrival <= current:
            job = pending.popleft()
            ready.append((job, job.burst))
        if not ready:
            current += 1
            continue
        job, remaining = ready.popleft()
        run = min(quantum, remaining)
        start = current
        current += run
        slices.append(Slice(job.job_id, start, current))
        remaining -= run
        if remaining > 0:
            ready.append((job, remaining))
        else:
            total_waiting += current - job.arrival - job.burst
    return SchedulingRun(slices, total_waiting / len(jobs))


def waiting_and_turnaround(processes: Sequence[TimedProcess]) -> tuple[list[int], list[int]]:
    """Waiting times (sum of earlier bursts) and turnaround times (completion - arrival)."""
    waiting = []
    elapsed = 0
    for process in processes:
        waiting.append(elapsed)
        elapsed += process.burst
    turnaround = [process.completion - process.arrival for process in processes]
    return waiting, turnaround


def format_times_table(processes: Sequence[TimedProcess]) -> str:
    """A table of per-process times followed by the averages."""
    if not processes:
        raise ValueError("at least one process is needed")
    waiting, turnaround = waiting_and_turnaround(processes)
    lines = [
        "Process ID\tArrival Time\tBurst Time\tWaiting Time\tTurnaround Time\tCompletion Time"
    ]
    for process, wait, turn in zip(processes, waiting, turnaround):
        lines.append(
            f"{process.pid}\t\t{process.arrival}\t\t{process.burst}\t\t"
            f"{wait}\t\t{turn}\t\t{process.completion}"
        )
    count = len(processes)
    lines.append("")
    lines.append(f"Average Waiting Time: {sum(waiting) / count:g}")
    lines.append(f"Average Turnaround Time: {sum(turnaround) / count:g}")
    return "\n".join(lines) + "\n"


def _format_run(title: str, tag: str, run: SchedulingRun) -> str:
    lines = [title, *(piece.describe() for piece in run.slices)]
    lines.append(f"Average Waiting Time ({tag}): {run.average_waiting:g}")
    return "\n".join(lines) + "\n"


_DEMO_JOBS = (Job(1, 0, 5), Job(2, 1, 3), Job(3, 2, 8), Job(4, 3, 6), Job(5, 4, 4))

_DEMO_PROCESSES = (
    TimedProcess(1, 0, 10),
    TimedProcess(2, 6, 4),
    TimedProcess(3, 8, 2),
    TimedProcess(4, 10, 5),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration schedules and the times table."""
    parser = argparse.ArgumentParser(
        prog="dsakit-simple-sched", description="Demonstrate simple scheduling algorithms."
    )
    parser.add_argument("--quantum", type=int, default=2, help="round robin quantum")
    args = parser.parse_args(argv)
    if args.quantum <= 0:
        parser.error("quantum must be positive")
    print(_format_run("FCFS Scheduling:", "FCFS", fcfs(_DEMO_JOBS)))
    print(_format_run("SJN Scheduling:", "SJN", sjn(_DEMO_JOBS)))
    print(
        _format_run(
            f"Round Robin Scheduling (Quantum = {args.quantum}):",
            "Round Robin",
            round_robin(_DEMO_JOBS, args.quantum),
        )
    )
    print(format_times_table(_DEMO_PROCESSES), end="")
    return 0