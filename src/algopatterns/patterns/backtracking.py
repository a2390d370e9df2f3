"""
Backtracking
============
Build a solution incrementally, one choice at a time, and undo ("backtrack")
the last choice as soon as it cannot lead to a valid solution.

Applications:
    - Combinatorics: subsets, permutations, combinations
    - Constraint satisfaction: N-Queens, Sudoku
    - Maze and path search

Complexity:
    Time usually O(b^d), b branching factor and d depth.
    Space O(d) for the recursion stack.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from algopatterns.registry import register

T = TypeVar("T")


@register(time="O(n * 2^n)", space="O(n)")
def subsets(nums: Sequence[T]) -> list[list[T]]:
    """All subsets in choose/explore/unchoose order, starting with the empty one."""
    result: list[list[T]] = []
    current: list[T] = []

    def backtrack(start: int) -> None:
        result.append(list(current))
        for i in range(start, len(nums)):
            current.append(nums[i])
            backtrack(i + 1)
            current.pop()

    backtrack(0)
    return result


@register(time="O(n * n!)", space="O(n)")
def permute(nums: Sequence[T]) -> list[list[T]]:
    """All permutations, ordered by the positions picked at each level."""
    result: list[list[T]] = []
    current: list[T] = []

    def backtrack(remaining: list[T]) -> None:
        if not remaining:
            result.append(list(current))
            return

        for i, value in enumerate(remaining):
            current.append(value)
            backtrack(remaining[:i] + remaining[i + 1:])
            current.pop()

    backtrack(list(nums))
    return result


@register(time="O(n!)", space="O(n^2)")
def solve_n_queens(n: int) -> list[list[str]]:
    """
    Every placement of `n` non-attacking queens.

    Each solution is a list of rows such as ``".Q.."``.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"Board size must be non-negative, got {n}.")

    result: list[list[str]] = []
    board = [["."] * n for _ in range(n)]

    def is_valid(row: int, col: int) -> bool:
        # only rows above `row` hold queens
        for i in range(row):
            if board[i][col] == "Q":
                return False

        i, j = row - 1, col - 1
        while i >= 0 and j >= 0:
            if board[i][j] == "Q":
                return False
            i, j = i - 1, j - 1

        i, j = row - 1, col + 1
        while i >= 0 and j < n:
            if board[i][j] == "Q":
                return False
            i, j = i - 1, j + 1

        return True

    def backtrack(row: int) -> None:
        if row == n:
            result.append(["".join(r) for r in board])
            return

        for col in range(n):
            if is_valid(row, col):
                board[row][col] = "Q"
                backtrack(row + 1)
                board[row][col] = "."

    backtrack(0)
    return result
