import math

import pytest

from algopatterns.patterns import graph_algorithms as ga

GRAPH = {
    "A": ["B", "C"],
    "B": ["D", "E"],
    "C": ["F"],
    "D": [],
    "E": ["F"],
    "F": [],
}

WEIGHTED = {
    "A": {"B": 4, "C": 2},
    "B": {"C": 5, "D": 10},
    "C": {"E": 3},
    "D": {"F": 11},
    "E": {"D": 4},
    "F": {},
}


def test_bfs_visits_level_by_level():
    assert ga.bfs(GRAPH, "A") == ["A", "B", "C", "D", "E", "F"]


def test_dfs_goes_deep_first():
    assert ga.dfs(GRAPH, "A") == ["A", "B", "D", "E", "F", "C"]


def test_traversal_unknown_start():
    with pytest.raises(ValueError):
        ga.bfs(GRAPH, "Z")


def test_traversal_neighbour_only_node():
    assert ga.bfs({1: [2]}, 1) == [1, 2]
    assert ga.dfs({1: [2]}, 2) == [2]


def test_dijkstra_distances_and_path():
    paths = ga.dijkstra(WEIGHTED, "A")
    assert paths.distances == {"A": 0, "B": 4, "C": 2, "D": 9, "E": 5, "F": 20}
    assert ga.shortest_path(paths, "F") == ["A", "C", "E", "D", "F"]
    assert ga.shortest_path(paths, "A") == ["A"]


def test_dijkstra_unreachable():
    paths = ga.dijkstra({"A": {"B": 1}, "C": {"A": 1}}, "A")
    assert math.isinf(paths.distances["C"])
    assert paths.distances["B"] == 1
    assert paths.previous["B"] == "A"
    assert paths.previous["C"] is None
    assert ga.shortest_path(paths, "C") == []


def test_dijkstra_rejects_negative_weights():
    with pytest.raises(ValueError):
        ga.dijkstra({"A": {"B": -1}}, "A")


def test_bellman_ford_handles_negative_edges():
    graph = {"S": {"A": 4, "B": 5}, "A": {"C": 3}, "B": {"A": -3}, "C": {}}
    paths = ga.bellman_ford(graph, "S")
    assert paths.distances == {"S": 0, "A": 2, "B": 5, "C": 5}
    assert ga.shortest_path(paths, "C") == ["S", "B", "A", "C"]


def test_bellman_ford_matches_dijkstra_on_positive_graph():
    assert ga.bellman_ford(WEIGHTED, "A").distances == ga.dijkstra(WEIGHTED, "A").distances


def test_bellman_ford_negative_cycle():
    graph = {"A": {"B": 1}, "B": {"C": -2}, "C": {"A": -1}}
    with pytest.raises(ga.NegativeCycleError):
        ga.bellman_ford(graph, "A")


def test_topological_sort_respects_edges():
    order = ga.topological_sort(GRAPH)
    assert sorted(order) == sorted(GRAPH)
    position = {node: i for i, node in enumerate(order)}
    for u, neighbours in GRAPH.items():
        for v in neighbours:
            assert position[u] < position[v]


def test_topological_sort_cycle_returns_none():
    assert ga.topological_sort({"a": ["b"], "b": ["c"], "c": ["a"]}) is None


def test_kruskal_mst():
    graph = {
        "A": {"B": 1, "C": 4},
        "B": {"A": 1, "C": 2, "D": 5},
        "C": {"A": 4, "B": 2, "D": 3},
        "D": {"B": 5, "C": 3},
    }
    tree = ga.kruskal_mst(graph)
    assert [w for _, _, w in tree] == [1, 2, 3]
    assert sum(w for _, _, w in tree) == 6


def test_kruskal_forest_for_disconnected_graph():
    tree = ga.kruskal_mst({"A": {"B": 2}, "C": {"D": 1}})
    assert tree == [("C", "D", 1), ("A", "B", 2)]
