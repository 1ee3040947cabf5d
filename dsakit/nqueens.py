"""The N queens problem solved by backtracking, counting the operations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Sequence


@dataclass
class QueensResult:
    """The first board found (1 marks a queen), or None, and the operation count."""

    board: list[list[int]] | None
    operations: int

    @property
    def solved(self) -> bool:
        return self.board is not None


class _Solver:
    def __init__(self, size: int) -> None:
        self.size = size
        self.board = [[0] * size for _ in range(size)]
        self.operations = 0

    def _is_safe(self, row: int, col: int) -> bool:
        self.operations += 1
        size = self.size
        cells = chain(
            ((row, left) for left in range(col)),
            zip(range(row, -1, -1), range(col, -1, -1)),
            zip(range(row, size), range(col, -1, -1)),
        )
        for r, c in cells:
            self.operations += 1
            if self.board[r][c]:
                return False
        return True

    def place(self, col: int) -> bool:
        self.operations += 1
        if col >= self.size:
            return True
        for row in range(self.size):
            self.operations += 1
            if self._is_safe(row, col):
                self.board[row][col] = 1
                self.operations += 1
                if self.place(col + 1):
                    return True
                self.board[row][col] = 0
                self.operations += 1
        return False


def solve_n_queens(n: int = 8) -> QueensResult:
    """Place ``n`` queens column by column, trying rows from the top."""
    if n < 0:
        raise ValueError("board size cannot be negative")
    solver = _Solver(n)
    if solver.place(0):
        return QueensResult(solver.board, solver.operations)
    return QueensResult(None, solver.operations)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """The board as rows of space separated 0s and 1s."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)