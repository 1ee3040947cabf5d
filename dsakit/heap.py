"""A binary max-heap and in-place heap sort."""

from __future__ import annotations

from typing import Iterable, Iterator, MutableSequence


def heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items (0-based)."""
    if not 0 <= size <= len(values):
        raise ValueError("size must be between 0 and the number of values")
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[largest] < values[left]:
            largest = left
        if right < size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """A new list holding ``values`` in max-heap order."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), index)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """A new list of ``values`` in ascending order."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


class MaxHeap:
    """A max-heap; iteration yields the items in their stored order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"

    def push(self, value: int) -> None:
        """Add a value and restore the heap order."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> int:
        """Remove and return the largest value; IndexError when empty."""
        if not self._items:
            raise IndexError("the heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return top