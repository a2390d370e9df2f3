"""
Bit Manipulation
================
Work directly on the binary representation of integers.

Operators:
    &  AND     1 where both bits are 1
    |  OR      1 where at least one bit is 1
    ^  XOR     1 where exactly one bit is 1
    ~  NOT     inverts all bits
    << shift   multiply by 2
    >> shift   floor-divide by 2

Python integers are unbounded two's complement: ``~n == -n - 1`` and right
shifts of negative numbers keep the sign.

Complexity:
    O(1) for single operations, O(bits) for counting loops.
"""
from __future__ import annotations

from typing import Iterable

from algopatterns.registry import register


def _check_bit_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"Bit index must be non-negative, got {n}.")


@register(time="O(1)", space="O(1)")
def is_even(n: int) -> bool:
    return (n & 1) == 0


@register(time="O(1)", space="O(1)")
def get_bit(num: int, n: int) -> bool:
    _check_bit_index(n)
    return (num & (1 << n)) != 0


@register(time="O(1)", space="O(1)")
def set_bit(num: int, n: int) -> int:
    _check_bit_index(n)
    return num | (1 << n)


@register(time="O(1)", space="O(1)")
def clear_bit(num: int, n: int) -> int:
    _check_bit_index(n)
    return num & ~(1 << n)


@register(time="O(1)", space="O(1)")
def toggle_bit(num: int, n: int) -> int:
    _check_bit_index(n)
    return num ^ (1 << n)


@register(time="O(bits)", space="O(1)")
def count_set_bits(num: int) -> int:
    """
    Number of 1 bits, checking the lowest bit and shifting.

    Raises:
        ValueError: For negative numbers, which have infinitely many 1 bits.
    """
    if num < 0:
        raise ValueError(f"Cannot count set bits of a negative number: {num}.")

    count = 0
    while num > 0:
        count += num & 1
        num >>= 1
    return count


@register(time="O(set bits)", space="O(1)")
def count_set_bits_kernighan(num: int) -> int:
    """Brian Kernighan: ``num & (num - 1)`` clears the lowest set bit."""
    if num < 0:
        raise ValueError(f"Cannot count set bits of a negative number: {num}.")

    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


@register(time="O(1)", space="O(1)")
def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


@register(time="O(n)", space="O(1)")
def single_number(nums: Iterable[int]) -> int:
    """The value occurring once when every other value occurs twice."""
    result = 0
    for num in nums:
        result ^= num  # pairs cancel out
    return result


@register(time="O(1)", space="O(1)")
def bitwise_abs(n: int) -> int:
    """Absolute value via a sign mask: all ones for negatives, zero otherwise."""
    mask = n >> n.bit_length()
    return (n + mask) ^ mask


@register(time="O(1)", space="O(1)")
def swap_xor(a: int, b: int) -> tuple[int, int]:
    """Swap two integers without a temporary."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


@register(time="O(1)", space="O(1)")
def multiply_by_power_of_two(num: int, n: int) -> int:
    _check_bit_index(n)
    return num << n


@register(time="O(1)", space="O(1)")
def divide_by_power_of_two(num: int, n: int) -> int:
    """Floor division by 2**n (rounds towards negative infinity)."""
    _check_bit_index(n)
    return num >> n
