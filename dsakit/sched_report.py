"""Text reports for the CPU schedulers: statistics tables and timelines."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .sched_input import AlgorithmSpec, Process, parse_workload
from .schedulers import Schedule, run_algorithm

TRACE = "trace"
SHOW_STATISTICS = "stats"

_ALGORITHM_NAMES = {
    "1": "FCFS",
    "2": "RR-",
    "3": "SPN",
    "4": "SRT",
    "5": "HRRN",
    "6": "FB-1",
    "7": "FB-2i",
    "8": "AGING",
}

_TRACE_PREFIXES = {
    "1": "FCFS  ",
    "2": "RR-{quantum}  ",
    "3": "SPN   ",
    "4": "SRT   ",
    "5": "HRRN  ",
    "6": "FB-1  ",
    "7": "FB-2i ",
    "8": "Aging ",
}

_RULE = "-" * 48


def _known(spec: AlgorithmSpec) -> str:
    if spec.algorithm_id not in _ALGORITHM_NAMES:
        raise ValueError(f"unknown algorithm id {spec.algorithm_id!r}")
    return spec.algorithm_id


def algorithm_label(spec: AlgorithmSpec) -> str:
    """Name of the algorithm as shown above a statistics table."""
    name = _ALGORITHM_NAMES[_known(spec)]
    return f"{name}{spec.quantum}" if spec.algorithm_id == "2" else name


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else float("nan")


def _ratio_cell(value: float) -> str:
    return f"{value:2.2f}|" if value >= 10 else f" {value:2.2f}|"


def format_stats(spec: AlgorithmSpec, processes: Sequence[Process], schedule: Schedule) -> str:
    """The statistics table for one algorithm run."""
    lines = [
        algorithm_label(spec),
        "Process    " + "".join(f"|  {p.name}  " for p in processes) + "|",
        "Arrival    " + "".join(f"|{p.arrival:3d}  " for p in processes) + "|",
        "Service    |" + "".join(f"{p.service:3d}  |" for p in processes) + " Mean|",
        "Finish     "
        + "".join(f"|{finish:3d}  " for finish in schedule.finish_times[: len(processes)])
        + "|-----|",
    ]
    turnarounds = schedule.turnaround_times[: len(processes)]
    lines.append(
        "Turnaround |"
        + "".join(f"{value:3d}  |" for value in turnarounds)
        + _ratio_cell(_mean(turnarounds))
    )
    norms = schedule.norm_turns[: len(processes)]
    lines.append(
        "NormTurn   |"
        + "".join(_ratio_cell(value) for value in norms)
        + _ratio_cell(_mean(norms))
    )
    return "\n".join(lines) + "\n"


def format_trace(
    spec: AlgorithmSpec, processes: Sequence[Process], schedule: Schedule, last_instant: int
) -> str:
    """The timeline of one algorithm run, headed by the algorithm's name."""
    prefix = _TRACE_PREFIXES[_known(spec)].format(quantum=spec.quantum)
    header = "".join(f"{instant % 10} " for instant in range(last_instant + 1))
    instants = schedule.timeline[:last_instant]
    rows = [
        f"{process.name}     |" + "".join(f"{row[index]}|" for row in instants) + " "
        for index, process in enumerate(processes)
    ]
    return "\n".join([prefix + header, _RULE, *rows, _RULE]) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a workload and print a trace or statistics for each algorithm."""
    parser = argparse.ArgumentParser(
        prog="dsakit-sched", description="Simulate CPU scheduling algorithms."
    )
    parser.add_argument("input", nargs="?", help="workload file (default: standard input)")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text() if args.input else sys.stdin.read()
        workload = parse_workload(text)
        parts = []
        for spec in workload.algorithms:
            schedule = run_algorithm(spec, workload.processes, workload.last_instant)
            if workload.operation == TRACE:
                parts.append(
                    format_trace(spec, workload.processes, schedule, workload.last_instant)
                )
            elif workload.operation == SHOW_STATISTICS:
                parts.append(format_stats(spec, workload.processes, schedule))
            parts.append("\n")
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(parts))
    return 0