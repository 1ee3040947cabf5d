"""Small array exercises: extremes, searching, swapping, merging and row sums."""

from __future__ import annotations

from typing import Iterable, Sequence


def _non_empty(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"cannot take the {what} of an empty sequence")
    return items


def get_max(values: Iterable[int]) -> int:
    """The largest value; ValueError when there are none."""
    return max(_non_empty(values, "maximum"))


def get_min(values: Iterable[int]) -> int:
    """The smallest value; ValueError when there are none."""
    return min(_non_empty(values, "minimum"))


def swap_alternate(values: Iterable[int]) -> list[int]:
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...).

    An odd last element stays where it is.
    """
    items = list(values)
    paired = len(items) - len(items) % 2
    items[0:paired:2], items[1:paired:2] = items[1:paired:2], items[0:paired:2]
    return items


def row_sums(matrix: Iterable[Iterable[int]]) -> list[int]:
    """The sum of each row of a matrix."""
    return [sum(row) for row in matrix]


def largest_row_sum(matrix: Iterable[Iterable[int]]) -> int:
    """The largest of the row sums; ValueError for a matrix without rows."""
    sums = row_sums(matrix)
    if not sums:
        raise ValueError("the matrix has no rows")
    return max(sums)


def linear_search(values: Iterable[int], key: int) -> bool:
    """Whether ``key`` occurs among ``values``, scanning from the front."""
    return any(value == key for value in values)


def contains_2d(matrix: Iterable[Iterable[int]], target: int) -> bool:
    """Whether ``target`` occurs anywhere in the matrix."""
    return any(linear_search(row, target) for row in matrix)


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def reversed_copy(values: Iterable[int]) -> list[int]:
    """A new list with the values in reverse order."""
    return list(values)[::-1]