"""
Dynamic Programming
===================
Solve a problem by combining the solutions of overlapping subproblems,
computing each subproblem once and storing it.

Key properties:
    1. Optimal substructure
    2. Overlapping subproblems

Approaches:
    1. Top-down (memoization): recursion plus a cache
    2. Bottom-up (tabulation): fill a table from the base cases

Complexity:
    Usually O(n^2) or O(n*m) time and O(n) or O(n*m) space.
"""
from __future__ import annotations

from typing import Sequence

from algopatterns.registry import register


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}.")


@register(time="O(n)", space="O(n)")
def fib_memo(n: int) -> int:
    """Fibonacci number, top-down with a cache."""
    _check_non_negative(n)
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


@register(time="O(n)", space="O(n)")
def fib_tab(n: int) -> int:
    """Fibonacci number, bottom-up table."""
    _check_non_negative(n)
    if n <= 1:
        return n

    dp = [0] * (n + 1)
    dp[1] = 1
    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]

    return dp[n]


@register(time="O(n)", space="O(1)")
def fib_optimized(n: int) -> int:
    """Fibonacci number keeping only the last two values."""
    _check_non_negative(n)
    if n <= 1:
        return n

    prev2, prev1 = 0, 1
    for _ in range(2, n + 1):
        prev2, prev1 = prev1, prev1 + prev2

    return prev1


@register(time="O(n^2)", space="O(n)")
def length_of_lis(nums: Sequence[float]) -> int:
    """Length of the longest strictly increasing subsequence."""
    if not nums:
        return 0

    # every element alone is a subsequence of length 1
    dp = [1] * len(nums)
    for i in range(1, len(nums)):
        for j in range(i):
            if nums[i] > nums[j]:
                dp[i] = max(dp[i], dp[j] + 1)

    return max(dp)


@register(time="O(n * W)", space="O(n * W)")
def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """
    Best total value of a 0/1 knapsack.

    Args:
        values: Item values.
        weights: Item weights, non-negative integers.
        capacity: Knapsack capacity, a non-negative integer.

    Raises:
        ValueError: If the inputs have different lengths, or capacity or a weight
            is negative.
    """
    if len(values) != len(weights):
        raise ValueError(f"Got {len(values)} values but {len(weights)} weights.")
    if capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {capacity}.")
    if any(weight < 0 for weight in weights):
        raise ValueError("Weights must be non-negative.")

    n = len(values)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        weight, value = weights[i - 1], values[i - 1]
        for w in range(capacity + 1):
            if weight <= w:
                dp[i][w] = max(value + dp[i - 1][w - weight], dp[i - 1][w])
            else:
                dp[i][w] = dp[i - 1][w]

    return dp[n][capacity]
