"""Recursive and enumerative exercises."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

MOD = 10**9 + 7

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def count_good_numbers(n: int) -> int:
    """Count digit strings of length ``n`` with even digits at even indices
    and prime digits at odd indices, modulo 10**9 + 7."""
    result = pow(20, n // 2, MOD)
    if n % 2:
        result = 5 * result % MOD
    return result


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    base = float(x)
    exponent = abs(n)
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return 1.0 / result if n < 0 else result


def letter_combinations(digits: str) -> list[str]:
    """All letter strings the phone-keypad ``digits`` can spell."""
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD.get(d, "") for d in digits))]


def power_set(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, one per bitmask from 0 to 2**n - 1.

    Bit k of the mask selects ``nums[n - 1 - k]``, taken lowest bit first.
    """
    n = len(nums)
    backwards = list(reversed(nums))
    return [
        [value for bit, value in enumerate(backwards) if mask >> bit & 1]
        for mask in range(1 << n)
    ]


def subset_sums(values: Sequence[int]) -> list[int]:
    """The sums of all subsets of ``values``, one per subset."""
    sums = [0]
    for value in values:
        sums += [s + value for s in sums]
    return sums


def count_subsequences_with_sum(values: Sequence[int], total: int) -> int:
    """Count subsequences of non-negative ``values`` summing to ``total``, mod 10**9 + 7."""
    if total < 0:
        raise ValueError("total must be non-negative")
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    counts = [1] + [0] * total
    for value in values:
        counts = [
            (count + (counts[j - value] if j >= value else 0)) % MOD
            for j, count in enumerate(counts)
        ]
    return counts[total]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """All ways to cut ``text`` into palindromic pieces, shortest first piece first."""
    if not text:
        return [[]]
    partitions = []
    for cut in range(1, len(text) + 1):
        head = text[:cut]
        if not is_palindrome(head):
            continue
        partitions.extend([head, *tail] for tail in palindrome_partitions(text[cut:]))
    return partitions