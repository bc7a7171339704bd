"""Dynamic programming and combinatorics over integers and strings."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import permutations as _index_permutations
from math import comb


def min_steps(n: int) -> int:
    """Fewest Copy All / Paste operations needed to get ``n`` characters from one."""
    if n < 1:
        raise ValueError("n must be at least 1")

    @lru_cache(maxsize=None)
    def solve(count: int) -> int:
        if count == 1:
            return 0
        best = count
        divisor = 2
        while divisor * divisor <= count:
            if count % divisor == 0:
                best = min(
                    best,
                    count // divisor + solve(divisor),
                    divisor + solve(count // divisor),
                )
            divisor += 1
        return best

    return solve(n)


def min_cut_cost(n: int, cuts: Sequence[int]) -> int:
    """Least total cost of making every cut in a stick of length ``n``.

    Each cut costs the length of the piece being cut; cuts may be made in any order.
    """
    points = [0, *sorted(cuts), n]

    @lru_cache(maxsize=None)
    def cost(left: int, right: int) -> int:
        if right - left < 2:
            return 0
        length = points[right] - points[left]
        return length + min(
            cost(left, middle) + cost(middle, right)
            for middle in range(left + 1, right)
        )

    return cost(0, len(points) - 1)


def num_distinct(s: str, t: str) -> int:
    """Number of distinct subsequences of ``s`` equal to ``t``."""
    ways = [1] + [0] * len(t)
    for ch in s:
        for j in reversed(range(len(t))):
            if t[j] == ch:
                ways[j + 1] += ways[j]
    return ways[len(t)]


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    return [comb(row_index, r) for r in range(row_index + 1)]


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    if num < 0:
        raise ValueError("num must not be negative")
    while num >= 10:
        num = sum(int(digit) for digit in str(num))
    return num


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``, in lexicographic order of positions."""
    return [list(ordering) for ordering in _index_permutations(nums)]