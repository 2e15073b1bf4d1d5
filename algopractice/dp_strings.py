"""Dynamic programming over pairs of strings: subsequences, substrings and edits."""

from __future__ import annotations


def _lcs_table(first: str, second: str) -> list[list[int]]:
    """Table whose entry ``[i][j]`` is the LCS length of ``first[:i]`` and ``second[:j]``."""
    table = [[0] * (len(second) + 1)]
    for a in first:
        above = table[-1]
        row = [0]
        for j, b in enumerate(second):
            if a == b:
                row.append(above[j] + 1)
            else:
                row.append(max(above[j + 1], row[j]))
        table.append(row)
    return table


def num_distinct(source: str, target: str) -> int:
    """Number of ways ``target`` can be picked out of ``source`` as a subsequence."""
    ways = [1] + [0] * len(target)
    for char in source:
        for j in reversed(range(len(target))):
            if target[j] == char:
                ways[j + 1] += ways[j]
    return ways[-1]


def edit_distance(word1: str, word2: str) -> int:
    """Fewest single-character insertions, deletions and replacements turning
    ``word1`` into ``word2``."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j - 1], previous[j]))
        previous = current
    return previous[-1]


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest sequence that is a subsequence of both strings."""
    return _lcs_table(first, second)[-1][-1]


def longest_common_substring(first: str, second: str) -> int:
    """Length of the longest contiguous run common to both strings."""
    best = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second):
            run = previous[j] + 1 if a == b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that reads the same backwards."""
    return longest_common_subsequence(text, text[::-1])


def min_deletions_to_equal(word1: str, word2: str) -> int:
    """Fewest character deletions, from either word, that make the two equal."""
    return len(word1) + len(word2) - 2 * longest_common_subsequence(word1, word2)


def min_insertions_palindrome(text: str) -> int:
    """Fewest character insertions that turn ``text`` into a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def all_longest_common_subsequences(first: str, second: str) -> list[str]:
    """Every distinct longest common subsequence, in sorted order.

    Strings with nothing in common give an empty list.
    """
    empty: tuple[int, frozenset[str]] = (0, frozenset())
    previous = [empty] * (len(second) + 1)
    for a in first:
        current = [empty]
        for j, b in enumerate(second):
            if a == b:
                length, found = previous[j]
                if length:
                    current.append((length + 1, frozenset(s + a for s in found)))
                else:
                    current.append((1, frozenset(a)))
                continue
            up, left = previous[j + 1], current[j]
            longest = max(up[0], left[0])
            if longest == 0:
                current.append(empty)
                continue
            merged = frozenset().union(
                *(found for length, found in (up, left) if length == longest)
            )
            current.append((longest, merged))
        previous = current
    return sorted(previous[-1][1])


def _one_lcs(first: str, second: str) -> str:
    """One longest common subsequence, traced back from the ends of both strings."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    length = table[i][j]
    chars: list[str] = []
    while len(chars) < length:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def shortest_common_supersequence(first: str, second: str) -> str:
    """A shortest string holding both ``first`` and ``second`` as subsequences."""
    pieces: list[str] = []
    i = j = 0
    for char in _one_lcs(first, second):
        k = first.index(char, i)
        pieces.append(first[i:k])
        i = k + 1
        k = second.index(char, j)
        pieces.append(second[j:k])
        j = k + 1
        pieces.append(char)
    pieces.append(first[i:])
    pieces.append(second[j:])
    return "".join(pieces)