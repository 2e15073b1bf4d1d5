"""Dynamic programming over subsets: knapsacks, subset sums and partitions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .recursion import count_subsequences_with_sum


def _require_non_negative(values: Iterable[int], what: str) -> None:
    if any(v < 0 for v in values):
        raise ValueError(f"{what} must be non-negative")


def _reachable_sums(values: Iterable[int]) -> int:
    """Bitmask whose bit ``s`` is set when some subset of ``values`` sums to ``s``."""
    mask = 1
    for value in values:
        mask |= mask << value
    return mask


def _count_ways(values: Sequence[int], total: int) -> int:
    """Number of subsets of non-negative ``values`` summing to ``total``."""
    counts = [1] + [0] * total
    for value in values:
        counts = [
            count + (counts[j - value] if j >= value else 0)
            for j, count in enumerate(counts)
        ]
    return counts[total]


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each used at most once, fitting in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    items = list(zip(weights, values, strict=True))
    _require_non_negative(weights, "weights")
    best = [0] * (capacity + 1)
    for weight, value in items:
        best = [
            best[j] if j == 0 or j < weight else max(best[j], value + best[j - weight])
            for j in range(capacity + 1)
        ]
    return best[capacity]


def count_subsets_with_sum(values: Sequence[int], total: int) -> int:
    """Count subsets of non-negative ``values`` summing to ``total``, mod 10**9 + 7."""
    return count_subsequences_with_sum(values, total)


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins (unlimited supply) making up ``amount``, or None if impossible.

    An amount of zero needs no coins.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    _require_non_negative(coins, "coin values")
    if amount == 0:
        return 0
    best = [math.inf] * (amount + 1)
    for coin in coins:
        if 0 < coin <= amount:
            best[coin] = 1
    for value in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= value:
                best[value] = min(best[value], best[value - coin] + 1)
    result = best[amount]
    return None if result == math.inf else int(result)


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal sum."""
    _require_non_negative(nums, "nums")
    total = sum(nums)
    if total % 2:
        return False
    return bool(_reachable_sums(nums) >> (total // 2) & 1)


def min_subset_sum_difference(values: Sequence[int]) -> int:
    """Smallest absolute difference between the sums of two parts of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    _require_non_negative(values, "values")
    total = sum(values)
    reachable = _reachable_sums(values)
    return min(
        abs(total - 2 * part) for part in range(total + 1) if reachable >> part & 1
    )


def count_partitions_with_difference(values: Sequence[int], difference: int) -> int:
    """Count splits of ``values`` into two parts whose sums differ by ``difference``
    (first minus second), mod 10**9 + 7."""
    _require_non_negative(values, "values")
    excess = sum(values) - difference
    if excess < 0 or excess % 2:
        return 0
    return count_subsequences_with_sum(values, excess // 2)


def cut_rod(prices: Sequence[int]) -> int:
    """Best price for a rod of length ``len(prices)``, a piece of length k
    selling for ``prices[k - 1]``."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = [0, prices[0]]
    for length in range(2, len(prices) + 1):
        value = prices[length - 1]
        for piece in range(1, min(length // 2 + 2, length)):
            value = max(value, best[length - piece] + best[piece])
        best.append(value)
    return best[-1]


def target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Count ways to put ``+`` or ``-`` before each number so they add to ``target``."""
    _require_non_negative(nums, "nums")
    excess = sum(nums) - target
    if excess < 0 or excess % 2:
        return 0
    return _count_ways(nums, excess // 2)


def unbounded_knapsack(
    capacity: int, values: Sequence[int], weights: Sequence[int]
) -> int:
    """Largest total value of items, each usable any number of times, fitting in
    ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    items = list(zip(weights, values, strict=True))
    _require_non_negative(weights, "weights")
    best_single: dict[int, int] = {}
    for weight, value in items:
        best_single[weight] = max(value, best_single.get(weight, 0))
    best = [0] * (capacity + 1)
    for size in range(1, capacity + 1):
        best[size] = best_single.get(size, 0)
        for weight, _ in items:
            if size - weight >= 1:
                best[size] = max(best[size], best[size - weight] + best[weight])
    return best[capacity]


def is_subset_sum(values: Sequence[int], total: int) -> bool:
    """Tell whether some subset of non-negative ``values`` sums to ``total``."""
    if total < 0:
        raise ValueError("total must be non-negative")
    _require_non_negative(values, "values")
    return bool(_reachable_sums(values) >> total & 1)