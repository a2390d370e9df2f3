"""
Two Pointers
============
Two indices walk the data, either from opposite ends toward each other
(typical for sorted arrays) or from the same end at different speeds.

Applications:
    - Pairs in a sorted array with a given sum or difference
    - Removing duplicates in place
    - Palindrome verification
    - Linked list cycle detection

Complexity:
    Time O(n), one pass. Space O(1).

When to use:
    - The input is sorted
    - You search for pairs under a constraint
    - You need O(n) time and O(1) extra space
"""
from __future__ import annotations

from typing import MutableSequence, Sequence

from algopatterns.registry import register


@register(time="O(n)", space="O(1)")
def two_sum_sorted(nums: Sequence[float], target: float) -> tuple[int, int]:
    """
    Indices of two numbers in a sorted sequence that add up to `target`.

    Returns:
        ``(left, right)`` with ``left < right``, or ``(-1, -1)`` if no pair exists.
    """
    left = 0
    right = len(nums) - 1

    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return left, right
        elif total < target:
            left += 1   # need a larger sum
        else:
            right -= 1  # need a smaller sum

    return -1, -1


@register(time="O(n)", space="O(1)")
def remove_duplicates(nums: MutableSequence) -> int:
    """
    Move the unique values of a sorted list to its front, in place.

    Returns:
        Number of unique values; ``nums[:k]`` holds them afterwards.
    """
    if not nums:
        return 0

    slow = 0  # position of the last unique value
    for fast in range(1, len(nums)):
        if nums[fast] != nums[slow]:
            slow += 1
            nums[slow] = nums[fast]

    return slow + 1


@register(time="O(n)", space="O(n)")
def is_palindrome(text: str) -> bool:
    """Palindrome check on the lower-cased alphanumeric characters."""
    cleaned = [ch for ch in text.lower() if ch.isalnum()]
    left, right = 0, len(cleaned) - 1

    while left < right:
        if cleaned[left] != cleaned[right]:
            return False
        left += 1
        right -= 1

    return True
