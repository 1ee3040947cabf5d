"""Sorting algorithms that count comparisons and swaps for analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class SortStats:
    """The sorted values with the comparisons and swaps performed."""

    values: list[int]
    comparisons: int
    swaps: int = 0


def _merge_sort(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_comparisons = _merge_sort(values[:middle])
    right, right_comparisons = _merge_sort(values[middle:])
    merged: list[int] = []
    comparisons = left_comparisons + right_comparisons
    i = j = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, comparisons


def merge_sort_counted(values: Iterable[int]) -> SortStats:
    """Merge sort, counting element comparisons made while merging."""
    ordered, comparisons = _merge_sort(list(values))
    return SortStats(ordered, comparisons)


def insertion_sort_counted(values: Iterable[int]) -> SortStats:
    """Insertion sort, counting comparisons, shifts and key placements."""
    result = list(values)
    comparisons = swaps = 0
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            comparisons += 1
            result[j + 1] = result[j]
            j -= 1
            swaps += 1
        comparisons += 1
        result[j + 1] = key
        if j + 1 != i:
            swaps += 1
    return SortStats(result, comparisons, swaps)


def selection_sort_counted(values: Iterable[int]) -> SortStats:
    """Selection sort, counting comparisons and the swaps actually made."""
    result = list(values)
    comparisons = swaps = 0
    for i in range(len(result) - 1):
        smallest = i
        for j in range(i + 1, len(result)):
            comparisons += 1
            if result[j] < result[smallest]:
                smallest = j
        if smallest != i:
            swaps += 1
            result[i], result[smallest] = result[smallest], result[i]
    return SortStats(result, comparisons, swaps)