"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _augmenting_path(residual: list[list[int]], source: int, sink: int) -> list[int] | None:
    parent: list[int | None] = [None] * len(residual)
    visited = [False] * len(residual)
    visited[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, room in enumerate(residual[u]):
            if not visited[v] and room > 0:
                visited[v] = True
                parent[v] = u
                queue.append(v)
    if not visited[sink]:
        return None
    path = [sink]
    while path[-1] != source:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def max_flow(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    residual = [list(row) for row in capacity]
    count = len(residual)
    if any(len(row) != count for row in residual):
        raise ValueError("capacity matrix must be square")
    for role, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < count:
            raise ValueError(f"{role} {vertex} is outside 0..{count - 1}")
    if source == sink:
        raise ValueError("source and sink must differ")

    total = 0
    while (path := _augmenting_path(residual, source, sink)) is not None:
        steps = list(zip(path, path[1:]))
        bottleneck = min(residual[u][v] for u, v in steps)
        for u, v in steps:
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        total += bottleneck
    return total