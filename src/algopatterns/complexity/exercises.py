"""
Exercise Solutions
==================
Worked solutions to the Big-O practice exercises.

Exercise 1 asks for the time complexity of five small functions, exercise 3
for optimized rewrites and exercise 5 for designing algorithms with a given
complexity. The complexity of each solution is recorded in the catalogue.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Any, Hashable, Iterable, Optional, Sequence

from algopatterns.patterns import divide_and_conquer as _divide_and_conquer
from algopatterns.patterns import two_pointers as _two_pointers
from algopatterns.registry import register

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# ===== Exercise 1: Analyze Time Complexity =====

@register(time="O(n)", space="O(1)")
def sum_array(arr: Iterable[float]) -> float:
    """Each element is visited exactly once."""
    total = 0
    for value in arr:
        total += value
    return total


@register(time="O(n^2)", space="O(1)")
def nested_for_loop(n: int) -> int:
    """The inner statement runs n * n times."""
    count = 0
    for _ in range(n):
        for _ in range(n):
            count += 1
    return count


@register(time="O(n^2)", space="O(1)")
def find_duplicate(arr: Sequence[Any]) -> bool:
    """Worst case (no duplicate) compares every pair: n(n-1)/2."""
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] == arr[j]:
                return True
    return False


@register(time="O(n)", space="O(n)")
def recursive_sum(n: int) -> int:
    """
    n + (n-1) + ... + 1 by recursion; n frames deep.

    Raises:
        RecursionError: When n exceeds the interpreter's recursion limit.
    """
    if n <= 0:
        return 0
    return n + recursive_sum(n - 1)


@register(time="O(log n)", space="O(1)")
def logarithmic_example(n: int) -> int:
    """`i` halves every iteration: n, n/2, n/4, ..., 1."""
    i = n
    count = 0
    while i > 0:
        count += i
        i //= 2
    return count

# ===== Exercise 3: Optimize Code =====

@register(time="O(n)", space="O(1)")
def contains_value(arr: Sequence[Any], value: Any) -> bool:
    for item in arr:
        if item == value:
            return True
    return False


@register(time="O(n)", space="O(1)")
def optimized_contains_value(arr: Sequence[Any], value: Any) -> bool:
    """Still O(n), but the scan runs in C."""
    return value in arr


@register(time="O(n)", space="O(n)")
def create_lookup_set(arr: Iterable[Hashable]) -> set[Hashable]:
    return set(arr)


@register(time="O(1)", space="O(1)")
def contains_value_in_set(lookup: set[Hashable], value: Hashable) -> bool:
    """O(1) per lookup once the set exists; pays off over many lookups."""
    return value in lookup


@register(time="O(n^2)", space="O(1)")
def has_duplicates(arr: Sequence[Any]) -> bool:
    for i in range(len(arr)):
        for j in range(len(arr)):
            if i != j and arr[i] == arr[j]:
                return True
    return False


@register(time="O(n)", space="O(n)")
def has_duplicates_optimized(arr: Iterable[Hashable]) -> bool:
    seen: set[Hashable] = set()
    for item in arr:
        if item in seen:
            return True
        seen.add(item)
    return False

# ===== Exercise 5: Algorithm Design =====

@register(time="O(n + m)", space="O(n)")
def intersection(arr1: Iterable[Hashable], arr2: Iterable[Hashable]) -> list[Hashable]:
    """Items of `arr2` also present in `arr1`, in `arr2` order (duplicates kept)."""
    lookup = set(arr1)
    return [item for item in arr2 if item in lookup]


def _clean(text: str) -> str:
    return _NON_ALNUM.sub("", text.lower())


@register(time="O(n)", space="O(n)")
def is_palindrome(text: str) -> bool:
    """Compare the cleaned string with its reverse."""
    cleaned = _clean(text)
    return cleaned == cleaned[::-1]


@register(time="O(n)", space="O(n)")
def is_palindrome_optimized(text: str) -> bool:
    """Two pointers over the cleaned string, no reversed copy."""
    return _two_pointers.is_palindrome(_clean(text))


@register(time="O(n)", space="O(k)")
def first_non_repeating_char(text: str) -> Optional[str]:
    """First character occurring exactly once, or None."""
    counts = Counter(text)
    for char in text:
        if counts[char] == 1:
            return char
    return None


@register(time="O(n + m)", space="O(n + m)")
def merge_sorted_arrays(arr1: Sequence[Any], arr2: Sequence[Any]) -> list[Any]:
    return _divide_and_conquer.merge(arr1, arr2)


@register(time="O(n)", space="O(k)")
def has_all_unique_chars(text: str) -> bool:
    seen: set[str] = set()
    for char in text:
        if char in seen:
            return False
        seen.add(char)
    return True
