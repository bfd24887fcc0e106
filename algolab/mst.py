"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import csv
import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

BENCHMARK_HEADER = ("Graph", "Prim_Time(ms)", "Kruskal_Time(ms)")
MIN_WEIGHT = 1
MAX_WEIGHT = 100


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


class _DisjointSets:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        x, y = self.find(a), self.find(b)
        if self.rank[x] < self.rank[y]:
            self.parent[x] = y
        elif self.rank[x] > self.rank[y]:
            self.parent[y] = x
        else:
            self.parent[y] = x
            self.rank[x] += 1


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def kruskal(vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    checked: list[Edge] = []
    for edge in edges:
        item = edge if isinstance(edge, Edge) else Edge(*edge)
        for vertex in (item.src, item.dest):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        checked.append(item)

    sets = _DisjointSets(vertex_count)
    tree: list[Edge] = []
    for edge in sorted(checked, key=lambda e: e.weight):
        if len(tree) >= vertex_count - 1:
            break
        x, y = sets.find(edge.src), sets.find(edge.dest)
        if x != y:
            tree.append(edge)
            sets.union(x, y)
    return tree


def prim(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the spanning tree grown from vertex 0 of an adjacency matrix.

    Zero entries mean there is no edge. Edge ``i`` of the result joins
    vertex ``i + 1`` to its parent. Raises ValueError if the graph is not
    connected.
    """
    rows = _square(matrix)
    count = len(rows)
    if count == 0:
        return []
    key: list[float] = [float("inf")] * count
    parent = [-1] * count
    in_tree = [False] * count
    key[0] = 0
    for _ in range(count - 1):
        candidates = [v for v in range(count) if not in_tree[v] and key[v] != float("inf")]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    if any(parent[v] == -1 for v in range(1, count)):
        raise ValueError("graph is not connected")
    return [Edge(parent[v], v, rows[v][parent[v]]) for v in range(1, count)]


def random_complete_graph(vertex_count: int, rng: random.Random | None = None) -> list[list[int]]:
    """Return a symmetric matrix with random weights 1..100 between every pair."""
    rng = rng or random.Random()
    graph = [[0] * vertex_count for _ in range(vertex_count)]
    for i in range(vertex_count):
        for j in range(i + 1, vertex_count):
            weight = rng.randint(MIN_WEIGHT, MAX_WEIGHT)
            graph[i][j] = graph[j][i] = weight
    return graph


def _matrix_edges(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    return [
        Edge(i, j, matrix[i][j])
        for i in range(len(matrix))
        for j in range(i + 1, len(matrix))
        if matrix[i][j] != 0
    ]


def benchmark_mst(
    path: str | Path,
    trials: int = 10,
    vertex_count: int = 10,
    rng: random.Random | None = None,
) -> list[tuple[int, float, float]]:
    """Time Prim and Kruskal on random complete graphs and save the results as CSV.

    Returns the rows written: trial number, Prim time and Kruskal time in ms.
    """
    rng = rng or random.Random()
    rows: list[tuple[int, float, float]] = []
    for trial in range(1, trials + 1):
        graph = random_complete_graph(vertex_count, rng)

        start = time.perf_counter()
        prim(graph)
        prim_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        kruskal(vertex_count, _matrix_edges(graph))
        kruskal_ms = (time.perf_counter() - start) * 1000

        rows.append((trial, prim_ms, kruskal_ms))

    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(BENCHMARK_HEADER)
        for trial, prim_ms, kruskal_ms in rows:
            writer.writerow((trial, f"{prim_ms:.4f}", f"{kruskal_ms:.4f}"))
    return rows