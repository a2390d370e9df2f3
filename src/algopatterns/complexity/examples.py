"""
Complexity Examples
===================
One representative function per common time/space complexity class, plus a
couple of web-development flavoured cases.

Each function logs its complexity class at DEBUG level, so running the
walkthrough with ``--verbose`` narrates what is being demonstrated.
"""
from __future__ import annotations

import html
import logging
from typing import Any, Mapping, MutableSequence, Optional, Sequence

from algopatterns.patterns import binary_search as _binary_search
from algopatterns.patterns import divide_and_conquer as _divide_and_conquer
from algopatterns.registry import register

logger = logging.getLogger(__name__)

# ===== Time Complexity =====

@register(time="O(1)", space="O(1)")
def constant_time_operation(arr: Sequence[Any]) -> Any:
    """First element; access time does not depend on the size."""
    logger.debug("This is O(1) time complexity")
    if not arr:
        raise ValueError("Cannot take the first element of an empty sequence.")
    return arr[0]


@register(time="O(log n)", space="O(1)")
def binary_search(sorted_array: Sequence[Any], target: Any) -> int:
    logger.debug("This is O(log n) time complexity")
    return _binary_search.binary_search(sorted_array, target)


@register(time="O(n)", space="O(1)")
def linear_search(arr: Sequence[Any], target: Any) -> int:
    logger.debug("This is O(n) time complexity")
    for i, value in enumerate(arr):
        if value == target:
            return i
    return -1


@register(time="O(n log n)", space="O(n)")
def merge_sort(arr: Sequence[Any]) -> list[Any]:
    logger.debug("This is O(n log n) time complexity")
    return _divide_and_conquer.merge_sort(arr)


@register(time="O(n^2)", space="O(1)")
def bubble_sort(arr: MutableSequence[Any]) -> MutableSequence[Any]:
    """In-place bubble sort that stops after a pass without swaps."""
    logger.debug("This is O(n^2) time complexity")
    n = len(arr)

    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break  # already sorted

    return arr


@register(time="O(2^n)", space="O(n)")
def fibonacci(n: int) -> int:
    """Naive recursive Fibonacci."""
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}.")

    def fib(k: int) -> int:
        return k if k <= 1 else fib(k - 1) + fib(k - 2)

    logger.debug("This is O(2^n) time complexity")
    return fib(n)


@register(time="O(n!)", space="O(n)")
def generate_permutations(arr: Sequence[Any]) -> list[list[Any]]:
    """All permutations by swapping elements into place and swapping back."""
    logger.debug("This is O(n!) time complexity")
    items = list(arr)
    result: list[list[Any]] = []

    def permute(start: int) -> None:
        if start >= len(items) - 1:
            result.append(list(items))
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            permute(start + 1)
            items[start], items[i] = items[i], items[start]

    permute(0)
    return result

# ===== Space Complexity =====

@register(time="O(n)", space="O(1)")
def constant_space(n: int) -> int:
    """Sum of 1..n using a single accumulator."""
    logger.debug("This function uses O(1) space complexity")
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


@register(time="O(n)", space="O(n)")
def linear_space(n: int) -> list[int]:
    logger.debug("This function uses O(n) space complexity")
    return [i * 2 for i in range(n)]


@register(time="O(n^2)", space="O(n^2)")
def quadratic_space(n: int) -> list[list[int]]:
    logger.debug("This function uses O(n^2) space complexity")
    return [[i * j for j in range(n)] for i in range(n)]

# ===== Web Development =====

TABLE_COLUMNS: tuple[str, ...] = ("id", "name", "email")


@register(time="O(n * c)", space="O(n * c)")
def render_table(users: Sequence[Mapping[str, Any]], columns: Sequence[str] = TABLE_COLUMNS) -> str:
    """
    HTML table with one row per user.

    Rendering is O(rows * columns); nesting further loops per cell is how
    such templates quietly become quadratic.
    """
    header = "".join(f"<th>{html.escape(col.capitalize())}</th>" for col in columns)
    rows = "".join(
        "<tr>" + "".join(f"<td>{html.escape(str(user.get(col, '')))}</td>" for col in columns) + "</tr>"
        for user in users
    )
    return f"<table><thead><tr>{header}</tr></thead><tbody>{rows}</tbody></table>"


@register(time="O(n) build, O(1) lookup", space="O(n)")
def optimized_search(users: Sequence[Mapping[str, Any]], target_id: Any) -> Optional[Mapping[str, Any]]:
    """Index users by id once, then look the target up in constant time."""
    by_id = {user["id"]: user for user in users}
    return by_id.get(target_id)
