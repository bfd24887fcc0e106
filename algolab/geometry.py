"""Convex hulls in the plane, by brute force and by the monotone chain method."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence

Coord = tuple[int, int]


def _coords(point: Sequence[int]) -> Coord:
    x, y = point
    return (x, y)


def orientation(p: Sequence[int], q: Sequence[int], r: Sequence[int]) -> int:
    """Turn test for ``p -> q -> r``: zero when collinear, opposite signs for opposite turns."""
    (px, py), (qx, qy), (rx, ry) = p, q, r
    return (qy - py) * (rx - qx) - (qx - px) * (ry - qy)


def _is_edge(a: Coord, b: Coord, points: list[Coord]) -> bool:
    left = right = False
    for point in points:
        if point == a or point == b:
            continue
        turn = orientation(a, b, point)
        if turn > 0:
            left = True
        elif turn < 0:
            right = True
        if left and right:
            return False
    return True


def hull_edges_brute_force(points: Iterable[Sequence[int]]) -> list[tuple[Coord, Coord]]:
    """Return every pair of points with all other points on one side of their line.

    Pairs are listed in input order, first point before second.
    """
    coords = [_coords(p) for p in points]
    return [(a, b) for a, b in itertools.combinations(coords, 2) if _is_edge(a, b, coords)]


def _cross(a: Coord, b: Coord, c: Coord) -> int:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _chain(points: Iterable[Coord]) -> list[Coord]:
    chain: list[Coord] = []
    for point in points:
        while len(chain) >= 2 and _cross(chain[-2], chain[-1], point) <= 0:
            chain.pop()
        chain.append(point)
    return chain


def convex_hull(points: Iterable[Sequence[int]]) -> list[Coord]:
    """Return the hull vertices counterclockwise, starting from the leftmost point.

    Points lying on a hull edge between two corners are left out. Raises
    ValueError for fewer than three points.
    """
    ordered = sorted(_coords(p) for p in points)
    if len(ordered) < 3:
        raise ValueError("convex hull is not possible")
    lower = _chain(ordered)
    upper = _chain(reversed(ordered))
    return lower[:-1] + upper[:-1]