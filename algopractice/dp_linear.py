"""Dynamic programming over one-dimensional sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    before, current = 1, 2
    for _ in range(3, n + 1):
        before, current = current, before + current
    return current


def _best_skipping(values: Iterable[int]) -> int:
    """Largest sum of non-adjacent items, taking none at all if that is best."""
    before = current = 0
    for value in values:
        before, current = current, max(current, before + value)
    return current


def max_non_adjacent_sum(nums: Sequence[int]) -> int:
    """Largest sum of items of ``nums`` of which no two are neighbours."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return nums[0]
    before, current = 0, nums[0]
    for value in nums[1:]:
        before, current = current, max(current, before + value)
    return current


def rob_circular(nums: Sequence[int]) -> int:
    """Largest sum of non-adjacent items when the first and last are neighbours too."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    with_first = nums[0] + _best_skipping(nums[2:-1])
    without_first = _best_skipping(nums[1:])
    return max(with_first, without_first)


def ninja_training(points: Sequence[Sequence[int]]) -> int:
    """Most points over the days, picking one of three activities per day,
    never the same activity on two days running."""
    if not points:
        raise ValueError("points must not be empty")
    if any(len(day) != 3 for day in points):
        raise ValueError("every day must offer exactly three activities")
    best = list(points[0])
    for a, b, c in points[1:]:
        best = [
            max(best[1], best[2]) + a,
            max(best[0], best[2]) + b,
            max(best[0], best[1]) + c,
        ]
    return max(best)


def max_profit_single(prices: Iterable[int]) -> int:
    """Best profit from one purchase followed by one later sale; zero if none pays."""
    profit = 0
    lowest = math.inf
    for price in prices:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return int(profit)


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit from any number of buy-then-sell trades, holding one share at most."""
    if not prices:
        return 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        free, holding = max(holding + price, free), max(free - price, holding)
    return max(free, holding)