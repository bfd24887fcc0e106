"""Single-source and all-pairs shortest paths on weighted graphs.

Distances to vertices that cannot be reached are reported as ``None``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Edge = tuple[int, int, int]
Matrix = Sequence[Sequence["int | None"]]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


def _check_vertex(vertex: int, vertex_count: int, role: str) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"{role} {vertex} is outside 0..{vertex_count - 1}")


def _check_edges(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    checked = []
    for src, dest, weight in edges:
        _check_vertex(src, vertex_count, "edge source")
        _check_vertex(dest, vertex_count, "edge destination")
        checked.append((src, dest, weight))
    return checked


def _check_square(matrix: Matrix) -> list[list[int | None]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _finite(distances: Iterable[float]) -> list[int | None]:
    return [None if d == math.inf else int(d) for d in distances]


def _relax(vertex_count: int, edges: list[Edge], source: int) -> list[float]:
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edges:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains negative weight cycle")
    return dist


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[int | None]:
    """Shortest distances from ``source`` over directed ``(src, dest, weight)`` edges.

    Raises NegativeCycleError when a negative cycle is reachable from the source.
    """
    _check_vertex(source, vertex_count, "source")
    edge_list = _check_edges(edges, vertex_count)
    return _finite(_relax(vertex_count, edge_list, source))


def _dense_dijkstra(weights: list[list[float]], source: int) -> list[float]:
    count = len(weights)
    dist: list[float] = [math.inf] * count
    dist[source] = 0
    done = [False] * count
    for _ in range(count - 1):
        u = min((v for v in range(count) if not done[v]), key=dist.__getitem__)
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(weights[u]):
            if not done[v] and weight != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def dijkstra(vertex_count: int, edges: Iterable[Edge], source: int) -> list[int | None]:
    """Shortest distances from ``source`` in an undirected graph.

    Every ``(a, b, weight)`` edge may be travelled in both directions.
    """
    _check_vertex(source, vertex_count, "source")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in _check_edges(edges, vertex_count):
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    done = [False] * vertex_count
    for _ in range(vertex_count - 1):
        u = min((v for v in range(vertex_count) if not done[v]), key=dist.__getitem__)
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in adjacency[u]:
            if not done[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return _finite(dist)


def floyd_warshall(matrix: Matrix) -> list[list[int | None]]:
    """All-pairs shortest distances from an adjacency matrix.

    ``None`` entries mean there is no direct edge; the diagonal is taken as given.
    """
    rows = _check_square(matrix)
    dist = [[math.inf if w is None else w for w in row] for row in rows]
    count = len(dist)
    for k in range(count):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(via):
                if onward != math.inf and through + onward < row[j]:
                    row[j] = through + onward
    return [_finite(row) for row in dist]


def johnson(matrix: Matrix) -> list[list[int | None]]:
    """All-pairs shortest distances by reweighting with Bellman-Ford, then Dijkstra.

    ``None`` entries mean there is no direct edge. Raises NegativeCycleError
    when the graph holds a negative-weight cycle.
    """
    rows = _check_square(matrix)
    count = len(rows)
    edges: list[Edge] = [
        (u, v, w) for u, row in enumerate(rows) for v, w in enumerate(row) if w is not None
    ]
    edges.extend((count, v, 0) for v in range(count))
    potential = _relax(count + 1, edges, count)

    reweighted = [
        [
            math.inf if w is None else w + potential[u] - potential[v]
            for v, w in enumerate(row)
        ]
        for u, row in enumerate(rows)
    ]

    result = []
    for u in range(count):
        dist = _dense_dijkstra(reweighted, u)
        result.append(
            [
                None if d == math.inf else int(d - potential[u] + potential[v])
                for v, d in enumerate(dist)
            ]
        )
    return result