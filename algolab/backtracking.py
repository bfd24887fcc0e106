"""Classic backtracking searches: subset sums, N queens and graph colouring."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def subset_sums(values: Sequence[int], target: int) -> Iterator[list[int]]:
    """Yield every subset of ``values`` whose sum equals ``target``.

    Subsets are produced in include-first order. A partial sum that already
    exceeds the target is abandoned, and zero elements are not listed.
    """
    values = list(values)
    chosen = [False] * len(values)

    def explore(index: int, current: int) -> Iterator[list[int]]:
        if current == target:
            yield [value for value, picked in zip(values, chosen) if picked and value != 0]
            return
        if current > target or index >= len(values):
            return
        chosen[index] = True
        yield from explore(index + 1, current + values[index])
        chosen[index] = False
        yield from explore(index + 1, current)

    yield from explore(0, 0)


def _queen_is_safe(board: list[int], row: int, col: int) -> bool:
    return all(
        placed != col and abs(placed - col) != abs(r - row)
        for r, placed in enumerate(board[:row])
    )


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each solution gives, for every row, the column of its queen.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [0] * n

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(board)
            return
        for col in range(n):
            if _queen_is_safe(board, row, col):
                board[row] = col
                yield from place(row + 1)

    yield from place(0)


def render_board(board: Sequence[int]) -> str:
    """Draw a queen placement with ``Q`` for queens and ``.`` for empty squares."""
    size = len(board)
    return "\n".join(
        "".join(" Q " if board[row] == col else " . " for col in range(size))
        for row in range(size)
    )


def graph_coloring(adjacency: Sequence[Sequence[int]], colors: int) -> list[int] | None:
    """Colour vertices with ``1..colors`` so no neighbours share a colour.

    Returns the colour of every vertex, or None when no such colouring exists.
    """
    count = len(adjacency)
    assigned = [0] * count

    def safe(vertex: int, color: int) -> bool:
        return not any(
            adjacency[vertex][other] and assigned[other] == color for other in range(count)
        )

    def solve(vertex: int) -> bool:
        if vertex == count:
            return True
        for color in range(1, colors + 1):
            if safe(vertex, color):
                assigned[vertex] = color
                if solve(vertex + 1):
                    return True
                assigned[vertex] = 0
        return False

    return assigned if solve(0) else None