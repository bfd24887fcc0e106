"""Matrix-chain ordering by dynamic programming, with plain and Strassen products."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from pathlib import Path

Matrix = list[list[float]]
Multiplier = Callable[[Sequence[Sequence[float]], Sequence[Sequence[float]]], Matrix]


def matrix_chain_order(
    dims: Sequence[int],
) -> tuple[list[list[int | None]], list[list[int | None]]]:
    """Return the cost and split tables for a chain with dimensions ``dims``.

    Matrix ``i`` is ``dims[i]`` by ``dims[i + 1]``. ``cost[i][j]`` is the least
    number of scalar multiplications for matrices ``i..j`` and ``split[i][j]``
    the index after which that product is split. Entries below the diagonal,
    and splits on it, are None.
    """
    p = list(dims)
    if len(p) < 2:
        raise ValueError("at least one matrix is required")
    if any(d <= 0 for d in p):
        raise ValueError("matrix dimensions must be positive")
    n = len(p) - 1
    cost: list[list[int | None]] = [[None] * n for _ in range(n)]
    split: list[list[int | None]] = [[None] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = 0
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1

            def total(k: int, i: int = i, j: int = j) -> int:
                return cost[i][k] + cost[k + 1][j] + p[i] * p[k + 1] * p[j + 1]

            best = min(range(i, j), key=total)
            cost[i][j] = total(best)
            split[i][j] = best
    return cost, split


def optimal_parenthesization(split: Sequence[Sequence[int | None]], i: int, j: int) -> str:
    """Render the optimal product of matrices ``i..j`` as ``(M1 x M2)`` notation."""
    if i == j:
        return f"M{i + 1}"
    k = split[i][j]
    if k is None:
        raise ValueError(f"no split recorded for {i}..{j}")
    return (
        f"({optimal_parenthesization(split, i, k)} x "
        f"{optimal_parenthesization(split, k + 1, j)})"
    )


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0 or len(matrix[0]) == 0:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _check_product(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> tuple[int, int, int]:
    r1, c1 = _shape(a)
    r2, c2 = _shape(b)
    if c1 != r2:
        raise ValueError(f"cannot multiply {r1}x{c1} by {r2}x{c2}")
    return r1, c1, c2


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product of two matrices by the schoolbook method."""
    _check_product(a, b)
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _next_power_of_two(n: int) -> int:
    power = 1
    while power < n:
        power <<= 1
    return power


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(r, s)] for r, s in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(r, s)] for r, s in zip(a, b)]


def _quarters(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    h = len(m) // 2
    return (
        [row[:h] for row in m[:h]],
        [row[h:] for row in m[:h]],
        [row[:h] for row in m[h:]],
        [row[h:] for row in m[h:]],
    )


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    n = len(a)
    if n == 1:
        return [[a[0][0] * b[0][0]]]
    if n == 2:
        return [
            [a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]],
            [a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]],
        ]
    a11, a12, a21, a22 = _quarters(a)
    b11, b12, b21, b22 = _quarters(b)

    m1 = _strassen(_add(a11, a22), _add(b11, b22))
    m2 = _strassen(_add(a21, a22), b11)
    m3 = _strassen(a11, _sub(b12, b22))
    m4 = _strassen(a22, _sub(b21, b11))
    m5 = _strassen(_add(a11, a12), b22)
    m6 = _strassen(_sub(a21, a11), _add(b11, b12))
    m7 = _strassen(_sub(a12, a22), _add(b21, b22))

    c11 = _add(_sub(_add(m1, m4), m5), m7)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _add(_add(_sub(m1, m2), m3), m6)
    return [l + r for l, r in zip(c11, c12)] + [l + r for l, r in zip(c21, c22)]


def _pad(m: Sequence[Sequence[float]], size: int) -> Matrix:
    cols = len(m[0])
    padded = [list(row) + [0] * (size - cols) for row in m]
    padded.extend([0] * size for _ in range(size - len(m)))
    return padded


def strassen_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product of two matrices by Strassen's method.

    Both are zero-padded to a square whose side is a power of two.
    """
    r1, c1, c2 = _check_product(a, b)
    size = _next_power_of_two(max(r1, c1, c2))
    product = _strassen(_pad(a, size), _pad(b, size))
    return [row[:c2] for row in product[:r1]]


def chain_multiply(
    matrices: Sequence[Sequence[Sequence[float]]],
    split: Sequence[Sequence[int | None]],
    multiplier: Multiplier = multiply,
) -> Matrix:
    """Multiply the whole chain in the order given by a split table."""
    mats = list(matrices)
    if not mats:
        raise ValueError("at least one matrix is required")

    def product(i: int, j: int) -> Matrix:
        if i == j:
            return [list(row) for row in mats[i]]
        k = split[i][j]
        if k is None:
            raise ValueError(f"no split recorded for {i}..{j}")
        return multiplier(product(i, k), product(k + 1, j))

    return product(0, len(mats) - 1)


def random_binary_matrix(rows: int, cols: int, rng: random.Random | None = None) -> list[list[int]]:
    """Return a ``rows`` by ``cols`` matrix of random zeros and ones."""
    rng = rng or random.Random()
    return [[rng.randrange(2) for _ in range(cols)] for _ in range(rows)]


def write_matrix_csv(path: str | Path, matrix: Sequence[Sequence[float]]) -> None:
    """Write a matrix as comma-separated rows of whole numbers."""
    with open(path, "w", encoding="utf-8") as handle:
        for row in matrix:
            handle.write(",".join(f"{value:.0f}" for value in row) + "\n")