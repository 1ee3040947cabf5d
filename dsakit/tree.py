"""Binary tree nodes and tree height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def height(node: Node | None) -> int:
    """The number of nodes on the longest path from ``node`` down to a leaf."""
    if node is None:
        return 0
    return max(height(node.left), height(node.right)) + 1