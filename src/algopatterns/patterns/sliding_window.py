"""
Sliding Window
==============
A window over contiguous elements that slides through an array or string,
growing or shrinking with the problem constraints, so each element is added
and removed at most once.

Applications:
    - Maximum/minimum sum of a fixed-size subarray
    - Longest/shortest substring with a property
    - Running aggregates over a stream

Complexity:
    Time O(n). Space O(1), or O(k) for the window/alphabet.

When to use:
    - The problem is about subarrays or substrings
    - You need the longest/shortest/max/min contiguous run
"""
from __future__ import annotations

from typing import Optional, Sequence

from algopatterns.registry import register


@register(time="O(n)", space="O(1)")
def max_subarray_sum(arr: Sequence[float], k: int) -> Optional[float]:
    """
    Maximum sum of any window of `k` consecutive elements.

    Raises:
        ValueError: If `k` is not positive.

    Returns:
        The maximum sum, or None when the array is shorter than `k`.
    """
    if k <= 0:
        raise ValueError(f"Window size must be positive, got {k}.")
    if len(arr) < k:
        return None

    current = sum(arr[:k])
    best = current

    for i in range(k, len(arr)):
        # element i enters, element i - k leaves
        current += arr[i] - arr[i - k]
        best = max(best, current)

    return best


@register(time="O(n)", space="O(k)")
def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeating characters."""
    last_seen: dict[str, int] = {}
    longest = 0
    window_start = 0

    for window_end, char in enumerate(s):
        if char in last_seen:
            # never move the start backwards
            window_start = max(window_start, last_seen[char] + 1)
        last_seen[char] = window_end
        longest = max(longest, window_end - window_start + 1)

    return longest
