"""
Greedy Algorithms
=================
Take the locally best choice at every step and never revisit it. Works when
local optimality leads to a global optimum (greedy-choice property plus
optimal substructure).

Applications:
    - Scheduling (activity selection)
    - Fractional knapsack
    - Huffman coding
    - Minimum spanning trees, Dijkstra

Complexity:
    Usually O(n log n) because of sorting, O(n) if the input is pre-sorted.
"""
from __future__ import annotations

import heapq
import itertools
from collections import Counter
from typing import Iterable, Optional, Sequence

from algopatterns.registry import register


@register(time="O(n log n)", space="O(n)")
def activity_selection(start: Sequence[float], finish: Sequence[float]) -> list[int]:
    """
    Maximum set of non-overlapping activities, earliest finish first.

    Returns:
        Original indices of the selected activities, in finish order.

    Raises:
        ValueError: If `start` and `finish` differ in length.
    """
    if len(start) != len(finish):
        raise ValueError(f"Got {len(start)} start times but {len(finish)} finish times.")
    if not start:
        return []

    order = sorted(range(len(start)), key=lambda i: finish[i])
    selected = [order[0]]
    last_finish = finish[order[0]]

    for i in order[1:]:
        if start[i] >= last_finish:
            selected.append(i)
            last_finish = finish[i]

    return selected


@register(time="O(n log n)", space="O(n)")
def fractional_knapsack(values: Sequence[float], weights: Sequence[float], capacity: float) -> float:
    """
    Best total value when items may be split, best value/weight ratio first.

    Raises:
        ValueError: On mismatched lengths, a non-positive weight or a negative capacity.
    """
    if len(values) != len(weights):
        raise ValueError(f"Got {len(values)} values but {len(weights)} weights.")
    if capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {capacity}.")
    if any(w <= 0 for w in weights):
        raise ValueError("All weights must be positive.")

    items = sorted(zip(values, weights), key=lambda item: item[0] / item[1], reverse=True)

    total = 0.0
    remaining = capacity
    for value, weight in items:
        if remaining >= weight:
            total += value
            remaining -= weight
        else:
            total += value / weight * remaining
            break  # knapsack full

    return total


class HuffmanNode:
    """Node of a Huffman tree. Internal nodes have ``char`` None."""

    def __init__(
        self,
        char: Optional[str],
        freq: int,
        left: Optional[HuffmanNode] = None,
        right: Optional[HuffmanNode] = None,
    ) -> None:
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(char={self.char!r}, freq={self.freq})"

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@register(time="O(n + k log k)", space="O(k)")
def build_huffman_tree(data: Iterable[str]) -> Optional[HuffmanNode]:
    """
    Huffman tree for the symbol frequencies in `data`.

    Returns:
        Root node, or None for empty input.
    """
    frequencies = Counter(data)
    if not frequencies:
        return None

    # counter keeps heap entries comparable when frequencies tie
    counter = itertools.count()
    heap = [(freq, next(counter), HuffmanNode(char, freq)) for char, freq in frequencies.items()]
    heapq.heapify(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = HuffmanNode(None, left_freq + right_freq, left, right)
        heapq.heappush(heap, (merged.freq, next(counter), merged))

    return heap[0][2]


@register(time="O(k)", space="O(k)")
def huffman_codes(root: Optional[HuffmanNode]) -> dict[str, str]:
    """Prefix-free code per symbol; left edges are '0', right edges '1'."""
    if root is None:
        return {}
    if root.is_leaf:
        return {root.char: "0"}

    codes: dict[str, str] = {}

    def walk(node: HuffmanNode, prefix: str) -> None:
        if node.is_leaf:
            codes[node.char] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


@register(time="O(n log k)", space="O(n)")
def huffman_encode(data: str) -> tuple[str, dict[str, str]]:
    """Encode `data` as a bit string together with its code table."""
    codes = huffman_codes(build_huffman_tree(data))
    return "".join(codes[ch] for ch in data), codes
