import pytest

from dsakit.nqueens import format_board, solve_n_queens


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


def _is_valid(board, n):
    queens = _queens(board)
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diagonals = {r - c for r, c in queens}
    anti = {r + c for r, c in queens}
    return len(rows) == len(cols) == len(diagonals) == len(anti) == n


@pytest.mark.parametrize("n", [4, 5, 6, 8])
def test_solutions_are_valid(n):
    result = solve_n_queens(n)
    assert result.solved
    assert _is_valid(result.board, n)


def test_default_is_eight_queens():
    result = solve_n_queens()
    assert len(result.board) == 8
    assert _is_valid(result.board, 8)


def test_eight_queens_first_solution():
    result = solve_n_queens(8)
    columns_by_row = [row.index(1) for row in result.board]
    assert columns_by_row == [0, 6, 4, 7, 1, 3, 5, 2]


def test_single_queen():
    result = solve_n_queens(1)
    assert result.board == [[1]]


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    result = solve_n_queens(n)
    assert result.board is None
    assert not result.solved
    assert result.operations > solve_n_queens(1).operations


def test_solver_is_deterministic():
    first = solve_n_queens(6)
    second = solve_n_queens(6)
    assert [row.index(1) for row in first.board] == [3, 0, 4, 1, 5, 2]
    assert second.board == first.board
    assert second.operations == first.operations


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_format_board():
    text = format_board(solve_n_queens(4).board)
    lines = text.split("\n")
    assert len(lines) == 4
    assert all(sorted(line.split()) == ["0", "0", "0", "1"] for line in lines)