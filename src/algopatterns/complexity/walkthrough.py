"""
Console Walkthroughs
====================
Narrated runs of the lesson material with sample data and timings.

Each walkthrough is a generator of output lines, so the runner decides where
they go (stdout, a file, a test assertion).
"""
from __future__ import annotations

import json
import logging
from typing import Iterator, Optional, Sequence

import numpy as np

from algopatterns import config
from algopatterns.complexity import examples, exercises, optimization
from algopatterns.complexity.benchmark import estimate_growth_exponent
from algopatterns.utils import measure_time, speedup

logger = logging.getLogger(__name__)


def complexity_examples(seed: Optional[int] = config.RANDOM_SEED) -> Iterator[str]:
    """Walk through one example per complexity class."""
    rng = np.random.default_rng(seed)
    small = [i * 2 for i in range(10)]
    medium = list(range(100))
    large = list(range(1000))
    small_unordered = rng.integers(0, 100, size=10).tolist()
    medium_unordered = rng.integers(0, 1000, size=100).tolist()

    yield "====== BIG O NOTATION EXAMPLES ======"
    yield "These examples demonstrate various time and space complexities"
    yield ""

    yield "=== O(1) - Constant Time Operation ==="
    yield f"Sample Array: {small}"
    yield f"First element: {examples.constant_time_operation(small)}"
    yield "Note: Access time remains constant regardless of array size"
    yield ""

    for title, fn, note in (
        ("O(log n) - Binary Search", examples.binary_search,
         "Note: Each time we multiply array size by 10, search time increases by much less"),
        ("O(n) - Linear Search", examples.linear_search,
         "Note: Time increases proportionally with array size"),
    ):
        yield f"=== {title} ==="
        for data, target in ((small, 16), (medium, 50), (large, 500)):
            m = measure_time(fn, data, target)
            yield f"Searching for value {target} in array of length {len(data)}"
            yield f"Found at index: {m.result} (took {m.formatted()}ms)"
        yield note
        yield ""

    yield "=== O(n log n) - Merge Sort ==="
    yield f"Small unordered array: {small_unordered}"
    m = measure_time(examples.merge_sort, list(small_unordered))
    yield f"Sorted result: {m.result}"
    yield f"Time taken for {len(small_unordered)} elements: {m.formatted()}ms"
    yield f"Time taken for {len(medium_unordered)} elements: {measure_time(examples.merge_sort, list(medium_unordered)).formatted()}ms"
    yield "Note: n log n grows faster than n but slower than n²"
    yield ""

    yield "=== O(n²) - Bubble Sort ==="
    m = measure_time(examples.bubble_sort, list(small_unordered))
    yield f"Sorted result of {len(small_unordered)} elements: {list(m.result)}"
    yield f"Time taken: {m.formatted()}ms"
    yield f"Time taken for {len(medium_unordered)} elements: {measure_time(examples.bubble_sort, list(medium_unordered)).formatted()}ms"
    yield "Note: Notice how much more bubble sort time increases as array size grows"
    yield ""

    yield "=== O(2^n) - Fibonacci (naive recursive) ==="
    for n in (5, 10, 15, 20, 25):
        m = measure_time(examples.fibonacci, n)
        yield f"Fibonacci({n}) = {m.result} (took {m.formatted()}ms)"
    yield "Note: Very quickly becomes impractical as n increases"
    yield ""

    yield "=== O(n!) - Generate Permutations ==="
    for n in range(1, 9):
        m = measure_time(examples.generate_permutations, list(range(1, n + 1)))
        yield f"Permutations of {n} elements: {len(m.result)} (took {m.formatted()}ms)"
    yield "Note: Grows extremely fast, practical only for very small inputs"
    yield ""

    yield "=== Space Complexity Examples ==="
    yield "--- O(1) Space - Constant Space ---"
    yield f"Sum of numbers 1 to 1000: {examples.constant_space(1000)}"
    yield "--- O(n) Space - Linear Space ---"
    yield f"Array with 10 elements: {examples.linear_space(10)}"
    yield "--- O(n²) Space - Quadratic Space ---"
    yield f"3x3 Matrix: {json.dumps(examples.quadratic_space(3))}"
    yield ""
    yield "====== END OF EXAMPLES ======"


def optimization_examples(
    sizes: Sequence[int] = config.DEFAULT_INPUT_SIZES,
    seed: Optional[int] = config.RANDOM_SEED,
) -> Iterator[str]:
    """The three optimization comparisons plus the conclusion."""
    yield "====== ALGORITHM OPTIMIZATION EXAMPLES ======"
    yield ""
    yield "EXAMPLE 1: FINDING DUPLICATES IN ARRAY"
    yield optimization.compare_duplicate_finders(sizes=sizes, seed=seed).render()
    yield ""
    yield "EXAMPLE 2: FIBONACCI SEQUENCE"
    yield optimization.compare_fibonacci().render()
    yield ""
    yield "EXAMPLE 3: SEARCHING IN SORTED ARRAYS"
    search = optimization.compare_search(sizes=sizes)
    yield search.render()
    try:
        exponent = estimate_growth_exponent(search.numeric_column(0), search.numeric_column(1))
        yield f"Empirical growth of linear search: time ~ n^{exponent:.2f}"
    except ValueError as e:
        logger.warning(f"Could not estimate growth exponent: {e}")
    yield ""
    yield "====== CONCLUSION ======"
    yield optimization.CONCLUSION


def _timings(label: str, fn, inputs: Sequence, make_args) -> Iterator[str]:
    for value in inputs:
        try:
            m = measure_time(fn, *make_args(value))
            yield f"{label} {value}: {m.formatted()}ms"
        except RecursionError:
            yield f"{label} {value}: Stack overflow (recursion too deep)"


def exercise_solutions(seed: Optional[int] = config.RANDOM_SEED) -> Iterator[str]:
    """Walk through the exercise solutions with timings and sample answers."""
    rng = np.random.default_rng(seed)

    yield "====== BIG O NOTATION EXERCISE SOLUTIONS ======"
    yield ""
    yield "===== EXERCISE 1: ANALYZE TIME COMPLEXITY ====="
    yield "Function 1: sum_array - O(n), every element is visited once"
    yield from _timings("Array size", exercises.sum_array, (10, 100, 1000, 10000),
                        lambda size: (rng.integers(0, 100, size=size).tolist(),))
    yield "Function 2: nested_for_loop - O(n²), the inner statement runs n * n times"
    yield from _timings("n =", exercises.nested_for_loop, (10, 100, 500), lambda n: (n,))
    yield "Function 3: find_duplicate - O(n²), worst case compares every pair"
    yield from _timings("Array size", exercises.find_duplicate, (10, 100, 500), lambda size: (list(range(size)),))
    yield "Function 4: recursive_sum - O(n) time and O(n) stack depth"
    yield from _timings("n =", exercises.recursive_sum, (10, 100, 500, 100000), lambda n: (n,))
    yield "Function 5: logarithmic_example - O(log n), i halves every iteration"
    yield from _timings("n =", exercises.logarithmic_example, (10, 1000, 100000, 1000000), lambda n: (n,))
    yield ""

    yield "===== EXERCISE 3: OPTIMIZE CODE ====="
    data = list(range(100000))
    target = data[-1]  # worst case for a linear scan
    lookup = exercises.create_lookup_set(data)
    lookups = 10
    scan_ms = sum(measure_time(exercises.contains_value, data, target).time_ms for _ in range(lookups))
    set_ms = sum(measure_time(exercises.contains_value_in_set, lookup, target).time_ms for _ in range(lookups))
    yield f"contains_value, {lookups} lookups: {scan_ms:.3f}ms"
    yield f"set-based, {lookups} lookups: {set_ms:.3f}ms"
    ratio = speedup(scan_ms, set_ms)
    yield f"Speedup: {ratio:.1f}x" if ratio is not None else "Speedup: N/A"
    for size in (10, 100, 1000):
        unique = list(range(size))
        original = measure_time(exercises.has_duplicates, unique)
        optimized = measure_time(exercises.has_duplicates_optimized, unique)
        yield f"has_duplicates, size {size}: original {original.formatted()}ms, optimized {optimized.formatted()}ms"
    yield ""

    yield "===== EXERCISE 5: ALGORITHM DESIGN ====="
    yield f"Intersection of [1, 2, 3, 4, 5] and [3, 4, 5, 6, 7]: {exercises.intersection([1, 2, 3, 4, 5], [3, 4, 5, 6, 7])}"
    for text in ("racecar", "A man, a plan, a canal, Panama!", "hello", "Was it a car or a cat I saw?"):
        yield f"Is '{text}' a palindrome: {exercises.is_palindrome(text)} / {exercises.is_palindrome_optimized(text)}"
    for text in ("leetcode", "loveleetcode", "aabb"):
        yield f"First non-repeating character in '{text}': {exercises.first_non_repeating_char(text) or 'None found'}"
    yield f"Merged: {exercises.merge_sorted_arrays([1, 3, 5, 7, 9], [2, 4, 6, 8, 10])}"
    for text in ("abcdefg", "hello", "algorithm", "unique"):
        yield f"'{text}' has all unique characters: {exercises.has_all_unique_chars(text)}"
    yield ""
    yield "====== END OF EXERCISE SOLUTIONS ======"
