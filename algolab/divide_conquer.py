"""Closest pair of points and maximum subarray, with a timing harness."""

from __future__ import annotations

import itertools
import math
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SIZES = tuple(range(100, 1001, 100))
BENCHMARK_HEADER = (
    "Block Size, Closest Pair Divide, Max Subarray Brute, "
    "Max Subarray Divide, Max Subarray Kadane"
)


@dataclass(frozen=True)
class Point:
    """A point on the integer plane."""

    x: int
    y: int


def _as_point(item: Point | tuple[int, int]) -> Point:
    return item if isinstance(item, Point) else Point(*item)


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _closest(points: list[Point]) -> float:
    if len(points) <= 3:
        return min(
            (_distance(a, b) for a, b in itertools.combinations(points, 2)),
            default=math.inf,
        )
    mid = len(points) // 2
    mid_x = points[mid].x
    best = min(_closest(points[:mid]), _closest(points[mid:]))

    strip = sorted((p for p in points if abs(p.x - mid_x) < best), key=lambda p: p.y)
    for i, a in enumerate(strip):
        for b in strip[i + 1:]:
            if b.y - a.y >= best:
                break
            best = min(best, _distance(a, b))
    return best


def closest_pair_distance(points: Iterable[Point | tuple[int, int]]) -> float:
    """Smallest distance between any two points; infinity for fewer than two."""
    ordered = sorted((_as_point(p) for p in points), key=lambda p: p.x)
    return _closest(ordered)


def _require_values(values: Sequence[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_subarray_brute(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by trying every run."""
    items = _require_values(values)
    best = items[0]
    for start in range(len(items)):
        for total in itertools.accumulate(items[start:]):
            best = max(best, total)
    return best


def max_subarray_divide_conquer(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    items = _require_values(values)

    def solve(left: int, right: int) -> int:
        if left == right:
            return items[left]
        mid = (left + right) // 2
        best_side = max(solve(left, mid), solve(mid + 1, right))

        cross = running = items[mid]
        for value in reversed(items[left:mid]):
            running += value
            cross = max(cross, running)
        running = cross
        for value in items[mid + 1:right + 1]:
            running += value
            cross = max(cross, running)
        return max(best_side, cross)

    return solve(0, len(items) - 1)


def max_subarray_kadane(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by Kadane's linear scan."""
    items = _require_values(values)
    best = current = items[0]
    for value in items[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def _elapsed_us(task: Callable[[], object]) -> float:
    start = time.perf_counter()
    task()
    return (time.perf_counter() - start) * 1e6


def benchmark(
    path: str | Path,
    sizes: Iterable[int] = DEFAULT_SIZES,
    rng: random.Random | None = None,
) -> list[tuple[int, float, float, float, float]]:
    """Time closest pair and the three maximum-subarray methods on random data.

    Times are in microseconds. The rows are saved as CSV and returned.
    """
    rng = rng or random.Random()
    rows: list[tuple[int, float, float, float, float]] = []
    for size in sizes:
        values = []
        points = []
        for _ in range(size):
            values.append(rng.randint(-1000, 1000))
            points.append(Point(rng.randrange(1000), rng.randrange(1000)))
        rows.append(
            (
                size,
                _elapsed_us(lambda: closest_pair_distance(points)),
                _elapsed_us(lambda: max_subarray_brute(values)),
                _elapsed_us(lambda: max_subarray_divide_conquer(values)),
                _elapsed_us(lambda: max_subarray_kadane(values)),
            )
        )

    with open(path, "w", encoding="utf-8") as handle:
        handle.write(BENCHMARK_HEADER + "\n")
        for size, *times in rows:
            handle.write(", ".join([str(size), *(f"{t:.6f}" for t in times)]) + "\n")
    return rows