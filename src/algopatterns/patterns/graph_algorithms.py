"""
Graph Algorithms
================
Problems over vertices connected by edges.

Representations used here:
    - Unweighted adjacency list: ``{node: [neighbour, ...]}``
    - Weighted adjacency map:    ``{node: {neighbour: weight, ...}}``
Nodes that only appear as neighbours are treated as vertices without
outgoing edges.

Families:
    1. Traversal: BFS (level by level), DFS (deep first)
    2. Shortest paths: Dijkstra (non-negative weights), Bellman-Ford (negative
       weights, detects negative cycles)
    3. Minimum spanning tree: Kruskal
    4. Topological sort for DAGs

Complexity:
    From O(V + E) for traversals up to O(V * E) for Bellman-Ford.

When to use:
    - BFS: shortest path in unweighted graphs, level-order processing
    - DFS: exploring all paths, cycle detection, connected components
    - Dijkstra: shortest path with non-negative weights
    - Bellman-Ford: shortest path with negative weights
    - Topological sort: ordering tasks with dependencies
    - MST: connecting all vertices with minimum total weight
"""
from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping, Optional

from algopatterns.registry import register

logger = logging.getLogger(__name__)

Node = Hashable
AdjacencyList = Mapping[Node, Iterable[Node]]
WeightedGraph = Mapping[Node, Mapping[Node, float]]


class NegativeCycleError(ValueError):
    """A negative-weight cycle is reachable from the source."""


@dataclass
class ShortestPaths:
    """Single-source shortest path result."""
    source: Node
    distances: dict[Node, float] = field(default_factory=dict)
    previous: dict[Node, Optional[Node]] = field(default_factory=dict)


def _vertices(graph: Mapping[Node, Iterable[Node]]) -> list[Node]:
    """Keys first, then nodes that only appear as neighbours, in first-seen order."""
    seen: dict[Node, None] = dict.fromkeys(graph)
    for neighbours in graph.values():
        for neighbour in neighbours:
            seen.setdefault(neighbour, None)
    return list(seen)


def _check_start(graph: Mapping, start: Node) -> None:
    if start not in graph and start not in _vertices(graph):
        raise ValueError(f"Start node {start!r} is not in the graph.")


@register(time="O(V + E)", space="O(V)")
def bfs(graph: AdjacencyList, start: Node) -> list[Node]:
    """Breadth-first visit order from `start`."""
    _check_start(graph, start)
    visited = {start}
    queue = deque([start])
    order: list[Node] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in graph.get(current, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)

    return order


@register(time="O(V + E)", space="O(V)")
def dfs(graph: AdjacencyList, start: Node) -> list[Node]:
    """Depth-first (pre-order) visit order from `start`."""
    _check_start(graph, start)
    visited: set[Node] = set()
    order: list[Node] = []

    def visit(node: Node) -> None:
        visited.add(node)
        order.append(node)
        for neighbour in graph.get(node, ()):
            if neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order


@register(time="O((V + E) log V)", space="O(V)")
def dijkstra(graph: WeightedGraph, start: Node) -> ShortestPaths:
    """
    Shortest distances from `start` for non-negative edge weights.

    Unreachable nodes keep a distance of ``math.inf`` and no predecessor.

    Raises:
        ValueError: If `start` is unknown or an edge weight is negative.
    """
    _check_start(graph, start)
    paths = ShortestPaths(source=start)
    for vertex in _vertices(graph):
        paths.distances[vertex] = math.inf
        paths.previous[vertex] = None
    paths.distances[start] = 0

    # counter breaks ties so nodes themselves are never compared
    counter = itertools.count()
    heap: list[tuple[float, int, Node]] = [(0, next(counter), start)]
    done: set[Node] = set()

    while heap:
        distance, _, current = heapq.heappop(heap)
        if current in done:
            continue
        done.add(current)

        for neighbour, weight in graph.get(current, {}).items():
            if weight < 0:
                raise ValueError(f"Negative edge weight {weight} on {current!r} -> {neighbour!r}; use bellman_ford.")
            candidate = distance + weight
            if candidate < paths.distances[neighbour]:
                paths.distances[neighbour] = candidate
                paths.previous[neighbour] = current
                heapq.heappush(heap, (candidate, next(counter), neighbour))

    logger.debug(f"Dijkstra from {start!r} settled {len(done)} of {len(paths.distances)} nodes")
    return paths


@register(time="O(V * E)", space="O(V)")
def bellman_ford(graph: WeightedGraph, start: Node) -> ShortestPaths:
    """
    Shortest distances from `start`, negative edge weights allowed.

    Raises:
        NegativeCycleError: If a negative cycle is reachable from `start`.
    """
    _check_start(graph, start)
    vertices = _vertices(graph)
    paths = ShortestPaths(source=start)
    for vertex in vertices:
        paths.distances[vertex] = math.inf
        paths.previous[vertex] = None
    paths.distances[start] = 0

    edges = [(u, v, w) for u, neighbours in graph.items() for v, w in neighbours.items()]

    for _ in range(len(vertices) - 1):
        changed = False
        for u, v, w in edges:
            if paths.distances[u] + w < paths.distances[v]:
                paths.distances[v] = paths.distances[u] + w
                paths.previous[v] = u
                changed = True
        if not changed:
            break

    for u, v, w in edges:
        if paths.distances[u] + w < paths.distances[v]:
            raise NegativeCycleError(f"Negative cycle reachable from {start!r} through edge {u!r} -> {v!r}.")

    return paths


@register(time="O(V)", space="O(V)")
def shortest_path(paths: ShortestPaths, target: Node) -> list[Node]:
    """
    Walk the predecessor map back from `target`.

    Returns:
        Nodes from source to target, or an empty list if `target` is unreachable.

    Raises:
        KeyError: If `target` is not a vertex of the solved graph.
    """
    if math.isinf(paths.distances[target]):
        return []

    path: list[Node] = []
    node: Optional[Node] = target
    while node is not None:
        path.append(node)
        node = paths.previous[node]
    path.reverse()
    return path


@register(time="O(V + E)", space="O(V)")
def topological_sort(graph: AdjacencyList) -> Optional[list[Node]]:
    """
    Order the vertices so every edge u -> v has u before v.

    Returns:
        The ordering, or None if the graph has a cycle.
    """
    visited: set[Node] = set()
    in_progress: set[Node] = set()
    postorder: list[Node] = []

    def visit(node: Node) -> bool:
        if node in in_progress:
            return False  # back edge: cycle
        if node in visited:
            return True

        in_progress.add(node)
        for neighbour in graph.get(node, ()):
            if not visit(neighbour):
                return False
        in_progress.remove(node)
        visited.add(node)
        postorder.append(node)
        return True

    for node in graph:
        if node not in visited and not visit(node):
            logger.debug(f"Cycle detected while visiting {node!r}")
            return None

    postorder.reverse()
    return postorder


@register(time="O(E log E)", space="O(V + E)")
def kruskal_mst(graph: WeightedGraph) -> list[tuple[Node, Node, float]]:
    """
    Minimum spanning forest of an undirected weighted graph.

    Each undirected edge may be listed in one or both directions.

    Returns:
        Chosen edges ``(u, v, weight)`` in the order they were added.
    """
    parent: dict[Node, Node] = {v: v for v in _vertices(graph)}
    rank: dict[Node, int] = dict.fromkeys(parent, 0)

    def find(node: Node) -> Node:
        while parent[node] != node:
            parent[node] = parent[parent[node]]  # path halving
            node = parent[node]
        return node

    def union(a: Node, b: Node) -> bool:
        root_a, root_b = find(a), find(b)
        if root_a == root_b:
            return False
        if rank[root_a] < rank[root_b]:
            root_a, root_b = root_b, root_a
        parent[root_b] = root_a
        if rank[root_a] == rank[root_b]:
            rank[root_a] += 1
        return True

    edges: list[tuple[Node, Node, float]] = []
    seen: set[frozenset] = set()
    for u, neighbours in graph.items():
        for v, w in neighbours.items():
            key = frozenset((u, v))
            if key not in seen:
                seen.add(key)
                edges.append((u, v, w))

    tree: list[tuple[Node, Node, float]] = []
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if union(u, v):
            tree.append((u, v, w))

    return tree
