"""Travelling salesman tours: exact searches and approximations.

Cost matrices use 0 for "no direct path"; every tour starts and ends at city 0.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from algolab.mst import prim

_NO_EDGE = 2**31 - 1


@dataclass(frozen=True)
class Tour:
    """A closed route through the cities and its total cost."""

    path: tuple[int, ...]
    cost: int


def _cities(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("at least one city is required")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("cost matrix must be square")
    return rows


def tsp_nearest_neighbor(matrix: Sequence[Sequence[int]]) -> Tour:
    """Greedy tour that always moves to the closest unvisited city.

    If no unvisited city can be reached the tour returns home early.
    """
    rows = _cities(matrix)
    visited = [False] * len(rows)
    current = 0
    visited[0] = True
    path = [0]
    cost = 0
    for _ in range(1, len(rows)):
        options = [
            (weight, city)
            for city, weight in enumerate(rows[current])
            if not visited[city] and weight
        ]
        if not options:
            break
        weight, nxt = min(options)
        cost += weight
        current = nxt
        visited[current] = True
        path.append(current)
    cost += rows[current][0]
    path.append(0)
    return Tour(tuple(path), cost)


def tsp_backtracking(matrix: Sequence[Sequence[int]]) -> Tour | None:
    """Cheapest tour found by trying every route; None if no tour exists."""
    rows = _cities(matrix)
    count = len(rows)
    visited = [False] * count
    visited[0] = True
    path = [0]
    best: Tour | None = None

    def explore(pos: int, cost: int) -> None:
        nonlocal best
        if len(path) == count and rows[pos][0]:
            total = cost + rows[pos][0]
            if best is None or total < best.cost:
                best = Tour(tuple(path) + (0,), total)
            return
        for city, weight in enumerate(rows[pos]):
            if not visited[city] and weight:
                visited[city] = True
                path.append(city)
                explore(city, cost + weight)
                path.pop()
                visited[city] = False

    explore(0, 0)
    return best


def _first_min(row: list[int], i: int) -> int:
    return min((w for k, w in enumerate(row) if w and k != i), default=_NO_EDGE)


def _second_min(row: list[int], i: int) -> int:
    first = second = _NO_EDGE
    for j, weight in enumerate(row):
        if j == i or weight == 0:
            continue
        if weight <= first:
            second, first = first, weight
        elif weight < second:
            second = weight
    return second


def tsp_branch_and_bound(matrix: Sequence[Sequence[int]]) -> Tour | None:
    """Cheapest tour by depth-first branch and bound; None if no tour exists.

    Partial routes are pruned with a lower bound built from the two cheapest
    edges at every city.
    """
    rows = _cities(matrix)
    count = len(rows)
    first = [_first_min(row, i) for i, row in enumerate(rows)]
    second = [_second_min(row, i) for i, row in enumerate(rows)]

    start_bound = sum(first[i] + second[i] for i in range(count))
    start_bound = start_bound // 2 + 1 if start_bound & 1 else start_bound // 2

    path = [0] * count
    visited = [False] * count
    visited[0] = True
    min_cost: float = math.inf
    best_path: tuple[int, ...] | None = None

    def recurse(bound: int, weight: int, level: int) -> None:
        nonlocal min_cost, best_path
        last = path[level - 1]
        if level == count:
            back = rows[last][0]
            if back != 0 and weight + back < min_cost:
                min_cost = weight + back
                best_path = tuple(path) + (path[0],)
            return
        for city in range(count):
            step = rows[last][city]
            if step == 0 or visited[city]:
                continue
            leave = first[last] if level == 1 else second[last]
            child_bound = bound - (leave + first[city]) // 2
            child_weight = weight + step
            if child_bound + child_weight < min_cost:
                path[level] = city
                visited[city] = True
                recurse(child_bound, child_weight, level + 1)
            for j in range(count):
                visited[j] = False
            for j in range(level):
                visited[path[j]] = True

    recurse(start_bound, 0, 1)
    if best_path is None:
        return None
    return Tour(best_path, int(min_cost))


def tsp_mst_approximation(matrix: Sequence[Sequence[int]]) -> Tour:
    """Tour from a preorder walk of the minimum spanning tree rooted at city 0."""
    rows = _cities(matrix)
    count = len(rows)
    tree = [[False] * count for _ in range(count)]
    for edge in prim(rows):
        tree[edge.src][edge.dest] = tree[edge.dest][edge.src] = True

    visited = [False] * count
    order: list[int] = []

    def walk(city: int) -> None:
        visited[city] = True
        order.append(city)
        for other in range(count):
            if tree[city][other] and not visited[other]:
                walk(other)

    walk(0)
    order.append(0)
    cost = sum(rows[a][b] for a, b in zip(order, order[1:]))
    return Tour(tuple(order), cost)