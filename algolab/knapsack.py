"""0/1 knapsack solved by exhaustive backtracking and by branch and bound."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item that can be packed: its value and its weight."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack_backtracking(items: Iterable[Item], capacity: int) -> int:
    """Return the best total value by trying every include/exclude choice."""
    goods = list(items)
    best = 0

    def explore(index: int, value: int, weight: int) -> None:
        nonlocal best
        if weight > capacity:
            return
        if index == len(goods):
            best = max(best, value)
            return
        item = goods[index]
        explore(index + 1, value + item.value, weight + item.weight)
        explore(index + 1, value, weight)

    explore(0, 0, 0)
    return best


def knapsack_branch_and_bound(items: Iterable[Item], capacity: int) -> int:
    """Return the best total value using breadth-first branch and bound.

    Nodes are pruned with the fractional-knapsack upper bound; items are
    considered in decreasing order of value per weight.
    """
    goods = list(items)
    if any(item.weight <= 0 for item in goods):
        raise ValueError("every item must have a positive weight")
    ordered = sorted(goods, key=lambda item: item.ratio, reverse=True)
    count = len(ordered)

    def bound(level: int, profit: int, weight: int) -> float:
        if weight >= capacity:
            return 0.0
        estimate = float(profit)
        total = weight
        nxt = level + 1
        while nxt < count and total + ordered[nxt].weight <= capacity:
            total += ordered[nxt].weight
            estimate += ordered[nxt].value
            nxt += 1
        if nxt < count:
            estimate += (capacity - total) * ordered[nxt].ratio
        return estimate

    best = 0
    queue: deque[tuple[int, int, int]] = deque([(-1, 0, 0)])
    while queue:
        level, profit, weight = queue.popleft()
        if level == count - 1:
            continue
        level += 1
        item = ordered[level]

        with_weight = weight + item.weight
        with_profit = profit + item.value
        if with_weight <= capacity and with_profit > best:
            best = with_profit
        if bound(level, with_profit, with_weight) > best:
            queue.append((level, with_profit, with_weight))

        if bound(level, profit, weight) > best:
            queue.append((level, profit, weight))
    return best