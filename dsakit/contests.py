"""Solutions to two contest problems: office rosters and string assembly."""

from __future__ import annotations

from typing import Iterable


def _next_day(status: tuple[int, ...], friends: list[list[int]]) -> tuple[int, ...]:
    updated = []
    for employee, working in enumerate(status):
        present = sum(status[friend] for friend in friends[employee])
        if working:
            updated.append(1 if present == 3 else 0)
        else:
            updated.append(1 if present < 3 else 0)
    return tuple(updated)


def days_to_reach_roster(
    num_employees: int, connections: Iterable[tuple[int, int]], target: int
) -> int:
    """Count the days until at least ``target`` employees have been in office.

    Everyone works on day 1. Afterwards a working employee keeps working only
    with exactly three friends in office; an absent one comes in with fewer
    than three. Raises ValueError for unknown employees or an unreachable target.
    """
    if num_employees < 0:
        raise ValueError("number of employees cannot be negative")
    friends: list[list[int]] = [[] for _ in range(num_employees)]
    for first, second in connections:
        for employee in (first, second):
            if not 0 <= employee < num_employees:
                raise ValueError(f"unknown employee {employee}")
        friends[first].append(second)
        friends[second].append(first)

    status = (1,) * num_employees
    total = num_employees
    day = 1
    seen = {status}
    while total < target:
        status = _next_day(status, friends)
        total = sum(status)
        day += 1
        if total < target and status in seen:
            raise ValueError("the roster target is never reached")
        seen.add(status)
    return day


def min_assembly_cost(pieces: Iterable[tuple[str, int]], target: str) -> int | None:
    """Cheapest way to build ``target`` by concatenating priced pieces.

    Pieces may be reused. Returns None when the target cannot be built.
    """
    pieces = list(pieces)
    best: list[int | None] = [None] * (len(target) + 1)
    best[0] = 0
    for start, cost_so_far in enumerate(best):
        cost_so_far = best[start]
        if cost_so_far is None:
            continue
        for piece, cost in pieces:
            end = start + len(piece)
            if end <= len(target) and target.startswith(piece, start):
                candidate = cost_so_far + cost
                current = best[end]
                if current is None or candidate < current:
                    best[end] = candidate
    return best[-1]