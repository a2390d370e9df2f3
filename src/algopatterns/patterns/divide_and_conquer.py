"""
Divide and Conquer
==================
1. Divide the problem into smaller instances of itself
2. Conquer them recursively
3. Combine the partial results

Applications:
    - Sorting (merge sort, quick sort)
    - Binary search
    - Maximum subarray, closest pair of points
    - FFT, Strassen matrix multiplication

Unlike dynamic programming, the subproblems do not overlap.

Complexity:
    Typically O(n log n) time; O(n) or O(log n) extra space.
"""
from __future__ import annotations

from typing import Any, MutableSequence, Optional, Sequence

from algopatterns.registry import register


@register(time="O(n log n)", space="O(n)")
def merge_sort(arr: Sequence[Any]) -> list[Any]:
    """Stable sort returning a new list; the input is left untouched."""
    if len(arr) <= 1:
        return list(arr)

    mid = len(arr) // 2
    return merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


@register(time="O(n + m)", space="O(n + m)")
def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences; ties take from `left` first."""
    result: list[Any] = []
    i = j = 0

    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


@register(time="O(n log n) average, O(n^2) worst", space="O(log n)")
def quick_sort(arr: MutableSequence[Any], left: int = 0, right: Optional[int] = None) -> MutableSequence[Any]:
    """Sort ``arr[left:right + 1]`` in place and return `arr`."""
    if right is None:
        right = len(arr) - 1

    if left < right:
        pivot_index = partition(arr, left, right)
        quick_sort(arr, left, pivot_index - 1)
        quick_sort(arr, pivot_index + 1, right)

    return arr


@register(time="O(n)", space="O(1)")
def partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    """
    Lomuto partition around ``arr[right]``.

    Returns:
        Final index of the pivot; smaller elements end up left of it.
    """
    pivot = arr[right]
    i = left - 1  # end of the "smaller than pivot" zone

    for j in range(left, right):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]

    arr[i + 1], arr[right] = arr[right], arr[i + 1]
    return i + 1


@register(time="O(n log n)", space="O(log n)")
def max_subarray_sum(arr: Sequence[float], left: int = 0, right: Optional[int] = None) -> float:
    """
    Largest sum of a non-empty contiguous subarray of ``arr[left:right + 1]``.

    Raises:
        ValueError: If the range is empty.
    """
    if right is None:
        right = len(arr) - 1
    if left > right:
        raise ValueError("Maximum subarray sum of an empty array is undefined.")

    if left == right:
        return arr[left]

    mid = (left + right) // 2
    return max(
        max_subarray_sum(arr, left, mid),
        max_subarray_sum(arr, mid + 1, right),
        max_crossing_sum(arr, left, mid, right),
    )


@register(time="O(n)", space="O(1)")
def max_crossing_sum(arr: Sequence[float], left: int, mid: int, right: int) -> float:
    """Best sum of a subarray that contains both ``arr[mid]`` and ``arr[mid + 1]``."""
    total = 0
    left_sum = float("-inf")
    for i in range(mid, left - 1, -1):
        total += arr[i]
        left_sum = max(left_sum, total)

    total = 0
    right_sum = float("-inf")
    for i in range(mid + 1, right + 1):
        total += arr[i]
        right_sum = max(right_sum, total)

    return left_sum + right_sum
