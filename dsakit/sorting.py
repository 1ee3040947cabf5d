"""In-memory sorting algorithms. Each returns a new ascending list."""

from __future__ import annotations

from typing import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Repeatedly bubble the largest remaining value to the end of the list."""
    items = list(values)
    for end in range(len(items), 1, -1):
        for i in range(end - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Split in halves, sort each half and merge them."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[int], start: int, end: int) -> int:
    """Place ``items[start]`` at its final position and split around it."""
    pivot = items[start]
    smaller = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while i < pivot_index and items[i] <= pivot:
            i += 1
        while j > pivot_index and items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort using the first element of each range as the pivot."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot_index = _partition(items, start, end)
        ranges.append((start, pivot_index - 1))
        ranges.append((pivot_index + 1, end))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Swap the smallest remaining value into each position in turn."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def exchange_sort(values: Iterable[int]) -> list[int]:
    """Swap each position with any later value smaller than it."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items