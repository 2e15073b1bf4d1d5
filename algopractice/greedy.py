"""Greedy exercises."""

from __future__ import annotations

import math
from collections.abc import Sequence


def assign_cookies(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Count children who can be satisfied, each taking one cookie at least their greed."""
    children = sorted(greed)
    cookies = sorted(sizes)
    satisfied = 0
    for cookie in cookies:
        if satisfied == len(children):
            break
        if cookie >= children[satisfied]:
            satisfied += 1
    return satisfied


def min_coins(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins (unlimited supply) making up ``amount``, or None if impossible.

    An amount of zero counts as impossible.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")
    best = [math.inf] * (amount + 1)
    for coin in coins:
        if coin <= amount:
            best[coin] = 1
    for value in range(1, amount + 1):
        for coin in coins:
            if value - coin >= 1:
                best[value] = min(best[value], best[value - coin] + 1)
    result = best[amount]
    return None if result == math.inf else int(result)


def check_valid_string(text: str) -> bool:
    """Tell whether ``text`` of ``(``, ``)`` and ``*`` can be balanced,
    each ``*`` standing for ``(``, ``)`` or nothing."""
    most_open = least_open = 0
    for char in text:
        if char == "(":
            most_open += 1
            least_open += 1
        elif char == ")":
            most_open -= 1
            least_open -= 1
        elif char == "*":
            most_open += 1
            least_open -= 1
        least_open = max(least_open, 0)
        if most_open < 0:
            return False
    return least_open == 0


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable, each value being the longest jump."""
    last = len(nums) - 1
    if last <= 0:
        return True
    reach = 0
    for index, step in enumerate(nums[:-1]):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return reach >= last


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Most meetings one room can hold; a meeting must start after the previous ends."""
    meetings = sorted(zip(ends, starts, strict=True))
    if not meetings:
        return 0
    count = 1
    finish = meetings[0][0]
    for end, start in meetings[1:]:
        if start > finish:
            count += 1
            finish = end
    return count