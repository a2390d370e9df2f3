"""
Binary Search
=============
Halve a sorted search space on every step, discarding the half that cannot
contain the answer.

Applications:
    - Lookup in sorted arrays
    - First/last occurrence and insertion points
    - Rotated sorted arrays
    - Binary search over an answer space

Complexity:
    Time O(log n). Space O(1) iterative, O(log n) recursive.
"""
from __future__ import annotations

from typing import Any, Sequence

from algopatterns.registry import register


@register(time="O(log n)", space="O(1)")
def binary_search(nums: Sequence[Any], target: Any) -> int:
    """Index of `target` in the sorted sequence, or -1."""
    left, right = 0, len(nums) - 1

    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        elif nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return -1


def _find_boundary(nums: Sequence[Any], target: Any, first: bool) -> int:
    left, right = 0, len(nums) - 1
    found = -1

    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            found = mid
            # keep searching towards the wanted boundary
            if first:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return found


@register(time="O(log n)", space="O(1)")
def search_range(nums: Sequence[Any], target: Any) -> tuple[int, int]:
    """First and last index of `target` in a sorted sequence, or ``(-1, -1)``."""
    return _find_boundary(nums, target, first=True), _find_boundary(nums, target, first=False)


@register(time="O(log n)", space="O(1)")
def search_rotated(nums: Sequence[Any], target: Any) -> int:
    """
    Index of `target` in a sorted sequence of distinct values rotated at an
    unknown pivot, or -1.
    """
    left, right = 0, len(nums) - 1

    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid

        if nums[left] <= nums[mid]:
            # left half is sorted
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            # right half is sorted
            if nums[mid] < target <= nums[right]:
                left = mid + 1
            else:
                right = mid - 1

    return -1
