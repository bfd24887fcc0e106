"""Rabin-Karp string search, with hit statistics and sample-text generation."""

from __future__ import annotations

import random
import time
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

RADIX = 256
DEFAULT_PRIME = 101
MAX_TEXT_SIZE = 10240
CHUNK_SIZE = 1024
DEFAULT_FILE_COUNT = 10


@dataclass(frozen=True)
class SearchStats:
    """Outcome of one timed Rabin-Karp search."""

    text_size: int
    pattern_size: int
    matches: int
    spurious_hits: int
    elapsed_ms: float


def _hash(chars: str, prime: int) -> int:
    value = 0
    for char in chars:
        value = (value * RADIX + ord(char)) % prime
    return value


def _hash_hits(text: str, pattern: str, prime: int) -> Iterator[int]:
    """Yield every window start whose rolling hash equals the pattern's."""
    m, n = len(pattern), len(text)
    if m > n:
        return
    high = pow(RADIX, m - 1, prime)
    target = _hash(pattern, prime)
    window = _hash(text[:m], prime)
    for i in range(n - m + 1):
        if window == target:
            yield i
        if i < n - m:
            window = ((window - ord(text[i]) * high) * RADIX + ord(text[i + m])) % prime


def _validate(pattern: str, prime: int) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")
    if prime <= 0:
        raise ValueError("modulus must be positive")


def rabin_karp(text: str, pattern: str, prime: int = DEFAULT_PRIME) -> list[int]:
    """Return the start of every occurrence of ``pattern`` in ``text``, overlaps included."""
    _validate(pattern, prime)
    return [i for i in _hash_hits(text, pattern, prime) if text.startswith(pattern, i)]


def rabin_karp_stats(text: str, pattern: str) -> SearchStats:
    """Search with the default modulus, counting real matches and spurious hash hits."""
    _validate(pattern, DEFAULT_PRIME)
    matches = spurious = 0
    start = time.perf_counter()
    for i in _hash_hits(text, pattern, DEFAULT_PRIME):
        if text.startswith(pattern, i):
            matches += 1
        else:
            spurious += 1
    elapsed_ms = (time.perf_counter() - start) * 1000
    return SearchStats(len(text), len(pattern), matches, spurious, elapsed_ms)


def generate_text_files(
    source: str | Path,
    directory: str | Path,
    count: int = DEFAULT_FILE_COUNT,
    rng: random.Random | None = None,
) -> list[tuple[Path, int]]:
    """Cut ``count`` random slices of 1, 2, ... KiB from the start of ``source``.

    Only the first 10 KiB of the source are used. Slice ``i`` is written to
    ``pattern<i>.txt`` in ``directory``. Returns each file's path with the
    offset its slice was taken from.
    """
    rng = rng or random.Random()
    data = Path(source).read_bytes()[:MAX_TEXT_SIZE]
    if count * CHUNK_SIZE > len(data):
        raise ValueError(
            f"source holds {len(data)} bytes, too few for {count} slices"
        )
    out = Path(directory)
    written: list[tuple[Path, int]] = []
    for i in range(1, count + 1):
        size = i * CHUNK_SIZE
        start = rng.randrange(len(data) - size + 1)
        target = out / f"pattern{i}.txt"
        target.write_bytes(data[start:start + size])
        written.append((target, start))
    return written