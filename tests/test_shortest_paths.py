import pytest

from algolab.shortest_paths import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    johnson,
)

DIRECTED_EDGES = [
    (0, 1, 1), (0, 2, 4), (1, 2, -2), (1, 4, 7), (2, 3, 3),
    (4, 5, 7), (5, 3, -3), (6, 7, 2), (4, 6, 1), (6, 5, 2),
]

UNDIRECTED_EDGES = [
    (0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 4, 7), (2, 3, 3),
    (4, 5, 7), (5, 3, 3), (6, 7, 2), (4, 6, 1), (6, 5, 2),
]


def to_matrix(count, edges, undirected=False):
    matrix = [[0 if i == j else None for j in range(count)] for i in range(count)]
    for u, v, w in edges:
        pairs = [(u, v), (v, u)] if undirected else [(u, v)]
        for a, b in pairs:
            current = matrix[a][b]
            matrix[a][b] = w if current is None else min(current, w)
    return matrix


def test_bellman_ford_single_edge_and_unreachable():
    assert bellman_ford(3, [(0, 1, 5)], 0) == [0, 5, None]


def test_bellman_ford_matches_floyd_rows():
    all_pairs = floyd_warshall(to_matrix(8, DIRECTED_EDGES))
    for source in range(8):
        assert bellman_ford(8, DIRECTED_EDGES, source) == all_pairs[source]


def test_bellman_ford_negative_edge_shortcut():
    dist = bellman_ford(3, [(0, 2, 4), (0, 1, 1), (1, 2, -2)], 0)
    assert dist[2] == dist[1] - 2


def test_bellman_ford_detects_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, [(0, 1, 1), (1, 2, -3), (2, 1, 1)], 0)


def test_bellman_ford_ignores_unreachable_negative_cycle():
    dist = bellman_ford(4, [(0, 1, 2), (2, 3, -5), (3, 2, 1)], 0)
    assert dist == [0, 2, None, None]


def test_bellman_ford_rejects_bad_source():
    with pytest.raises(ValueError):
        bellman_ford(3, [(0, 1, 1)], 3)


def test_bellman_ford_rejects_bad_edge():
    with pytest.raises(ValueError):
        bellman_ford(2, [(0, 5, 1)], 0)


def test_dijkstra_is_symmetric():
    for u in range(8):
        from_u = dijkstra(8, UNDIRECTED_EDGES, u)
        for v in range(8):
            assert from_u[v] == dijkstra(8, UNDIRECTED_EDGES, v)[u]


def test_dijkstra_matches_floyd_on_undirected_graph():
    all_pairs = floyd_warshall(to_matrix(8, UNDIRECTED_EDGES, undirected=True))
    for source in range(8):
        assert dijkstra(8, UNDIRECTED_EDGES, source) == all_pairs[source]


def test_dijkstra_unreachable_is_none():
    assert dijkstra(4, [(0, 1, 3)], 0) == [0, 3, None, None]


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(2, [], -1)


def test_floyd_warshall_triangle_inequality():
    dist = floyd_warshall(to_matrix(8, DIRECTED_EDGES))
    for i in range(8):
        for k in range(8):
            for j in range(8):
                if dist[i][k] is not None and dist[k][j] is not None:
                    assert dist[i][j] is not None
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_without_edges():
    assert floyd_warshall([[0, None], [None, 0]]) == [[0, None], [None, 0]]


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_johnson_matches_floyd_with_negative_edges():
    matrix = to_matrix(8, DIRECTED_EDGES)
    assert johnson(matrix) == floyd_warshall(matrix)


def test_johnson_detects_negative_cycle():
    matrix = to_matrix(3, [(0, 1, 1), (1, 2, -4), (2, 0, 1)])
    with pytest.raises(NegativeCycleError):
        johnson(matrix)


def test_johnson_does_not_modify_input():
    matrix = to_matrix(8, DIRECTED_EDGES)
    snapshot = [row[:] for row in matrix]
    johnson(matrix)
    assert matrix == snapshot