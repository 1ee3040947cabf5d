"""Parsing of scheduler workload descriptions.

A workload is a whitespace separated text of the form::

    <operation> <algorithms> <last_instant> <process_count>
    <name>,<arrival>,<service>
    ...

where ``<algorithms>`` is a comma separated list such as ``1,2-4,8-1``:
an algorithm id optionally followed by ``-<quantum>``.
"""

from __future__ import annotations

from dataclasses import dataclass

NO_QUANTUM = -1


@dataclass(frozen=True)
class Process:
    """A process to be scheduled."""

    name: str
    arrival: int
    service: int


@dataclass(frozen=True)
class AlgorithmSpec:
    """An algorithm id (a single character) and its quantum, -1 when absent."""

    algorithm_id: str
    quantum: int = NO_QUANTUM


@dataclass(frozen=True)
class Workload:
    """Everything read from a workload description."""

    operation: str
    algorithms: tuple[AlgorithmSpec, ...]
    last_instant: int
    processes: tuple[Process, ...]


def parse_algorithms(chunk: str) -> list[AlgorithmSpec]:
    """Parse a comma separated list like ``1,2-4,8-1``."""
    specs = []
    for piece in chunk.split(","):
        parts = piece.split("-")
        head = parts[0]
        if not head:
            raise ValueError(f"missing algorithm id in {piece!r}")
        quantum_text = parts[1] if len(parts) > 1 else ""
        try:
            quantum = int(quantum_text) if quantum_text else NO_QUANTUM
        except ValueError:
            raise ValueError(f"invalid quantum in {piece!r}") from None
        specs.append(AlgorithmSpec(head[0], quantum))
    return specs


def parse_process(chunk: str) -> Process:
    """Parse one ``name,arrival,service`` description."""
    fields = chunk.split(",")
    if len(fields) < 3:
        raise ValueError(f"expected name,arrival,service, got {chunk!r}")
    name, arrival, service = fields[:3]
    try:
        return Process(name, int(arrival), int(service))
    except ValueError:
        raise ValueError(f"invalid times in {chunk!r}") from None


def parse_workload(text: str) -> Workload:
    """Parse a complete workload description."""
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError("workload needs operation, algorithms, last instant and process count")
    operation, algorithm_chunk, last_text, count_text = tokens[:4]
    try:
        last_instant = int(last_text)
        process_count = int(count_text)
    except ValueError:
        raise ValueError("last instant and process count must be integers") from None
    process_tokens = tokens[4:4 + process_count]
    if len(process_tokens) < process_count:
        raise ValueError(
            f"expected {process_count} processes, found {len(process_tokens)}"
        )
    return Workload(
        operation=operation,
        algorithms=tuple(parse_algorithms(algorithm_chunk)),
        last_instant=last_instant,
        processes=tuple(parse_process(token) for token in process_tokens),
    )