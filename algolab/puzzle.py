"""Sliding-tile puzzle solved by best-first branch and bound."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Sequence
from dataclasses import dataclass

Board = tuple[tuple[int, ...], ...]

# Blank moves in the order down, left, up, right.
_MOVES = ((1, 0), (0, -1), (-1, 0), (0, 1))
DEFAULT_MAX_NODES = 10000


class SearchLimitExceeded(RuntimeError):
    """Raised when the open list outgrows its limit before a solution is found."""


@dataclass(frozen=True)
class _Node:
    board: Board
    blank: tuple[int, int]
    level: int
    cost: int
    parent: _Node | None

    def path(self) -> list[Board]:
        boards: list[Board] = []
        node: _Node | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


def _normalize(board: Sequence[Sequence[int]]) -> Board:
    grid = tuple(tuple(row) for row in board)
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("puzzle board must be a non-empty square")
    if sum(row.count(0) for row in grid) != 1:
        raise ValueError("puzzle board must hold exactly one blank (0)")
    return grid


def _goal(size: int) -> Board:
    cells = list(range(1, size * size)) + [0]
    return tuple(tuple(cells[r * size:(r + 1) * size]) for r in range(size))


def manhattan_cost(board: Sequence[Sequence[int]]) -> int:
    """Sum of distances of every tile from its goal square."""
    size = len(board)
    total = 0
    for i, row in enumerate(board):
        for j, tile in enumerate(row):
            if tile:
                goal_row, goal_col = divmod(tile - 1, size)
                total += abs(i - goal_row) + abs(j - goal_col)
    return total


def _slide(board: Board, blank: tuple[int, int], target: tuple[int, int]) -> Board:
    grid = [list(row) for row in board]
    (x, y), (nx, ny) = blank, target
    grid[x][y], grid[nx][ny] = grid[nx][ny], grid[x][y]
    return tuple(tuple(row) for row in grid)


def solve_puzzle(
    board: Sequence[Sequence[int]], max_nodes: int = DEFAULT_MAX_NODES
) -> list[Board]:
    """Return the boards from ``board`` to the goal, both included.

    The node with the least moves-plus-Manhattan cost is expanded first;
    ties go to the node queued earliest.
    """
    start = _normalize(board)
    size = len(start)
    goal = _goal(size)
    blank = next((i, j) for i, row in enumerate(start) for j, v in enumerate(row) if v == 0)

    order = itertools.count()
    heap: list[tuple[int, int, _Node]] = []

    def push(node: _Node) -> None:
        if len(heap) >= max_nodes:
            raise SearchLimitExceeded("queue overflow")
        heapq.heappush(heap, (node.cost, next(order), node))

    push(_Node(start, blank, 0, manhattan_cost(start), None))
    while heap:
        _, _, node = heapq.heappop(heap)
        if node.board == goal:
            return node.path()
        x, y = node.blank
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                child_board = _slide(node.board, node.blank, (nx, ny))
                level = node.level + 1
                push(_Node(child_board, (nx, ny), level, manhattan_cost(child_board) + level, node))
    raise SearchLimitExceeded("solution not found within limit")


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board with each tile in a two-character field."""
    return "\n".join("".join(f"{tile:2d} " for tile in row) for row in board) + "\n"