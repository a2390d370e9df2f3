"""
Optimization Examples
=====================
The same problem solved twice (or three times): a straightforward but slow
version and an optimized one, timed over growing inputs.

1. Duplicates in an array: nested loops O(n^2) vs. a set O(n)
2. Fibonacci: recursion O(2^n) vs. memoization O(n) vs. iteration O(n)/O(1) space
3. Search in a sorted array: linear O(n) vs. binary O(log n)
"""
from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Optional, Sequence

import numpy as np

from algopatterns import config
from algopatterns.complexity.benchmark import ComparisonTable, format_speedup
from algopatterns.patterns import binary_search as _binary_search
from algopatterns.registry import register
from algopatterns.utils import generate_test_data, measure_time, sorted_evens, speedup, with_duplicates

logger = logging.getLogger(__name__)

# ========================
# Example 1: Duplicates
# ========================

@register(time="O(n^2)", space="O(n)")
def find_duplicates_inefficient(arr: Sequence[Hashable]) -> list[Hashable]:
    duplicates: list[Hashable] = []

    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] == arr[j] and arr[i] not in duplicates:
                duplicates.append(arr[i])

    return duplicates


@register(time="O(n)", space="O(n)")
def find_duplicates_optimized(arr: Iterable[Hashable]) -> list[Hashable]:
    seen: set[Hashable] = set()
    duplicates: dict[Hashable, None] = {}  # insertion-ordered set

    for item in arr:
        if item in seen:
            duplicates[item] = None
        else:
            seen.add(item)

    return list(duplicates)

# ========================
# Example 2: Fibonacci
# ========================

@register(time="O(2^n)", space="O(n)")
def fibonacci_recursive(n: int) -> int:
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


@register(time="O(n)", space="O(n)")
def fibonacci_memoized(n: int, memo: Optional[dict[int, int]] = None) -> int:
    if memo is None:
        memo = {}
    if n <= 1:
        return n
    if n not in memo:
        memo[n] = fibonacci_memoized(n - 1, memo) + fibonacci_memoized(n - 2, memo)
    return memo[n]


@register(time="O(n)", space="O(1)")
def fibonacci_iterative(n: int) -> int:
    if n <= 1:
        return n

    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b

# ========================
# Example 3: Searching
# ========================

@register(time="O(n)", space="O(1)")
def linear_search(arr: Sequence[Any], target: Any) -> int:
    for i, value in enumerate(arr):
        if value == target:
            return i
    return -1


@register(time="O(log n)", space="O(1)")
def binary_search(arr: Sequence[Any], target: Any) -> int:
    return _binary_search.binary_search(arr, target)

# ========================
# Comparison tables
# ========================

def compare_duplicate_finders(
    sizes: Sequence[int] = config.DEFAULT_INPUT_SIZES,
    seed: Optional[int] = config.RANDOM_SEED,
    inefficient_limit: int = config.INEFFICIENT_SIZE_LIMIT,
) -> ComparisonTable:
    """Time both duplicate finders; the O(n^2) one is skipped above `inefficient_limit`."""
    rng = np.random.default_rng(seed)
    table = ComparisonTable(
        title="Comparison of duplicate finding algorithms:",
        headers=["Input Size", "Inefficient (ms)", "Optimized (ms)", "Speedup"],
        explanation=(
            "Explanation: The inefficient algorithm uses nested loops (O(n^2)), while the optimized "
            "version uses a set for O(1) lookups, resulting in O(n) time complexity."
        ),
        missing="Too slow",
    )

    for size in sizes:
        data = with_duplicates(generate_test_data(size, rng), config.DUPLICATE_RATIO, rng)
        fast = measure_time(find_duplicates_optimized, data)

        slow_ms: Optional[float] = None
        if size <= inefficient_limit:
            slow = measure_time(find_duplicates_inefficient, data)
            slow_ms = slow.time_ms
            if set(slow.result) != set(fast.result):
                raise RuntimeError(f"Duplicate finders disagree for size {size}.")
        else:
            logger.debug(f"Skipping O(n^2) duplicate finder for size {size}")

        table.add_row(size, slow_ms, fast.time_ms, format_speedup(speedup(slow_ms, fast.time_ms)))

    return table


def compare_fibonacci(
    inputs: Sequence[int] = config.FIBONACCI_INPUTS,
    recursive_limit: int = config.RECURSIVE_FIB_LIMIT,
) -> ComparisonTable:
    """Time the three Fibonacci variants; plain recursion only up to `recursive_limit`."""
    table = ComparisonTable(
        title="Comparison of Fibonacci algorithms:",
        headers=["n", "Recursive (ms)", "Memoized (ms)", "Iterative (ms)", "Result"],
        explanation="\n".join([
            "Explanation:",
            "1. The recursive solution has O(2^n) time complexity, making it impractical for n > 30",
            "2. Memoization optimizes the recursive solution to O(n) time complexity but uses O(n) space",
            "3. The iterative solution keeps O(n) time complexity but reduces space complexity to O(1)",
        ]),
    )

    for n in inputs:
        recursive_ms: Optional[float] = None
        if n <= recursive_limit:
            recursive_ms = measure_time(fibonacci_recursive, n).time_ms

        memoized = measure_time(fibonacci_memoized, n)
        iterative = measure_time(fibonacci_iterative, n)
        if memoized.result != iterative.result:
            raise RuntimeError(f"Fibonacci variants disagree for n={n}.")

        table.add_row(n, recursive_ms, memoized.time_ms, iterative.time_ms, iterative.result)

    return table


def compare_search(sizes: Sequence[int] = config.DEFAULT_INPUT_SIZES) -> ComparisonTable:
    """Linear vs. binary search for the last element of a sorted array (linear search's worst case)."""
    table = ComparisonTable(
        title="Comparison of search algorithms on sorted arrays:",
        headers=["Array Size", "Linear (ms)", "Binary (ms)", "Speed Ratio"],
        explanation=(
            "Explanation: As the array size increases, binary search (O(log n)) becomes dramatically "
            "faster than linear search (O(n)). Note how the speed ratio increases with larger inputs."
        ),
    )

    for size in sizes:
        if size <= 0:
            raise ValueError(f"Array size must be positive, got {size}.")
        data = sorted_evens(size)
        target = size * 2 - 2

        linear = measure_time(linear_search, data, target)
        binary = measure_time(binary_search, data, target)
        table.add_row(size, linear.time_ms, binary.time_ms, format_speedup(speedup(linear.time_ms, binary.time_ms)))

    return table


CONCLUSION = "\n".join([
    "These examples demonstrate how algorithmic optimization can lead to substantial performance improvements.",
    "Key takeaways:",
    "1. The impact of efficiency becomes more pronounced as input sizes grow",
    "2. Space-time tradeoffs (like memoization) can be worthwhile for performance-critical operations",
    "3. Choosing the right algorithm based on input characteristics (like binary search for sorted data) is essential",
    "4. Big O notation helps us predict and compare algorithm performance at scale",
])
