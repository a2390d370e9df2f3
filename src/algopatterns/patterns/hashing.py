"""
Hashing
=======
Hash tables (dicts, sets) map keys to values with O(1) average lookup,
insertion and deletion; collisions make the worst case O(n).

Applications:
    - Frequency counting
    - Duplicate detection
    - Pair/complement lookups
    - Caches
"""
from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, Sequence

from algopatterns.registry import register


@register(time="O(n)", space="O(n)")
def two_sum(nums: Sequence[float], target: float) -> tuple[int, int]:
    """Indices of two numbers adding up to `target` in one pass, or ``(-1, -1)``."""
    seen: dict[float, int] = {}  # value -> index

    for i, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return seen[complement], i
        seen[num] = i

    return -1, -1


@register(time="O(n)", space="O(n)")
def count_elements(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Occurrences per element, in first-seen order."""
    return dict(Counter(items))


@register(time="O(n * m)", space="O(n * m)")
def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keyed by character counts."""
    groups: dict[tuple[tuple[str, int], ...], list[str]] = {}

    for word in words:
        key = tuple(sorted(Counter(word).items()))
        groups.setdefault(key, []).append(word)

    return list(groups.values())
