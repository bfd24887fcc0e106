"""Comparison sorts and a harness that times them on growing prefixes of data."""

from __future__ import annotations

import csv
import random
import time
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

DEFAULT_COUNT = 100000
DEFAULT_UPPER = 100000
DEFAULT_STEP = 100

Sorter = Callable[[Sequence[int]], list[int]]


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using top-down, stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    split = (len(items) + 1) // 2
    left = merge_sort(items[:split])
    right = merge_sort(items[split:])

    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quick sort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low - 1
        for j in range(low, high):
            if items[j] < pivot:
                boundary += 1
                items[boundary], items[j] = items[j], items[boundary]
        split = boundary + 1
        items[split], items[high] = items[high], items[split]
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def _random_partition(items: list[int], low: int, high: int, rng: random.Random) -> int:
    chosen = rng.randint(low, high)
    items[low], items[chosen] = items[chosen], items[low]
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def randomized_quick_sort(
    values: Iterable[int], rng: random.Random | None = None
) -> list[int]:
    """Return a sorted copy using quick sort with a randomly chosen pivot."""
    rng = rng or random.Random()
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _random_partition(items, low, high, rng)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def generate_numbers(
    path: str | Path,
    count: int = DEFAULT_COUNT,
    upper: int = DEFAULT_UPPER,
    rng: random.Random | None = None,
) -> list[int]:
    """Write ``count`` random integers in ``0..upper-1``, one per line, and return them."""
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    rng = rng or random.Random()
    numbers = [rng.randrange(upper) for _ in range(count)]
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{number}\n" for number in numbers)
    return numbers


def read_numbers(path: str | Path, count: int | None = None) -> list[int]:
    """Read whitespace-separated integers from a file.

    With ``count`` given, exactly that many are returned; a file holding
    fewer raises ValueError.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if count is not None:
        if len(tokens) < count:
            raise ValueError(f"expected {count} numbers, found {len(tokens)}")
        tokens = tokens[:count]
    return [int(token) for token in tokens]


def _elapsed_ms(sorter: Sorter, block: list[int]) -> int:
    start = time.perf_counter_ns()
    sorter(block)
    return (time.perf_counter_ns() - start) // 1_000_000


def benchmark_sorts(
    numbers: Sequence[int], sorters: Sequence[Sorter], step: int = DEFAULT_STEP
) -> list[tuple[int, ...]]:
    """Time each sorter on prefixes of ``numbers`` growing by ``step``.

    Each row holds the block size followed by one time in milliseconds per sorter.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    rows: list[tuple[int, ...]] = []
    for size in range(step, len(numbers) + 1, step):
        block = list(numbers[:size])
        rows.append((size, *(_elapsed_ms(sorter, list(block)) for sorter in sorters)))
    return rows


def write_timings_csv(
    path: str | Path, header: Sequence[str], rows: Iterable[Sequence[object]]
) -> None:
    """Write a header line and timing rows as CSV."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(header)
        writer.writerows(rows)