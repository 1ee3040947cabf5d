"""A fixed-capacity stack and two small stack exercises."""

from __future__ import annotations

from typing import MutableSequence


class StackFullError(OverflowError):
    """Pushing onto a stack that is already at capacity."""


class StackEmptyError(IndexError):
    """Popping or peeking an empty stack."""


class BoundedStack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, element: int) -> None:
        """Put an element on top; StackFullError when at capacity."""
        if len(self._items) >= self.capacity:
            raise StackFullError("stack overflow")
        self._items.append(element)

    def pop(self) -> int:
        """Remove and return the top element; StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """The top element; StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("the stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items


def delete_middle(stack: MutableSequence[int]) -> int:
    """Remove and return the middle element of a stack whose top is the last item.

    The middle is the element ``len(stack) // 2`` places below the top.
    """
    if not stack:
        raise IndexError("cannot delete from an empty stack")
    position = len(stack) - 1 - len(stack) // 2
    removed = stack[position]
    del stack[position]
    return removed


def reverse_string(text: str) -> str:
    """The characters of ``text`` popped off a stack, i.e. in reverse."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))