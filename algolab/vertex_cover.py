"""Approximate vertex cover by repeatedly taking both ends of an uncovered edge."""

from __future__ import annotations

from collections.abc import Iterable


def approximate_vertex_cover(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a vertex cover at most twice the size of a minimum one.

    Vertices are scanned in order; each vertex takes at most one partner,
    the lowest-numbered higher neighbour, when neither end is covered yet.
    """
    neighbours: list[set[int]] = [set() for _ in range(vertex_count)]
    for src, dest in edges:
        if not (0 <= src < vertex_count and 0 <= dest < vertex_count):
            raise ValueError(f"edge ({src}, {dest}) names a vertex outside 0..{vertex_count - 1}")
        neighbours[src].add(dest)
        neighbours[dest].add(src)

    covered = [False] * vertex_count
    cover: list[int] = []
    for u in range(vertex_count):
        for v in range(u + 1, vertex_count):
            if v in neighbours[u] and not covered[u] and not covered[v]:
                cover.extend((u, v))
                covered[u] = covered[v] = True
                break
    return cover