"""Pair, triple and quadruple sum searches over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Distinct sorted triplets summing to zero, in ascending order."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
                while j < k and ordered[k] == ordered[k + 1]:
                    k -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Distinct sorted quadruplets summing to ``target``, in ascending order."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = ordered[i] + ordered[j] + ordered[k] + ordered[l]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[k], ordered[l]])
                    k += 1
                    l -= 1
                    while k < l and ordered[k] == ordered[k - 1]:
                        k += 1
                    while k < l and ordered[l] == ordered[l + 1]:
                        l -= 1
                elif total > target:
                    l -= 1
                else:
                    k += 1
    return result


def closest_to_zero(values: Sequence[int]) -> int:
    """Sum of two elements closest to zero; on a tie the larger sum wins."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    ordered = sorted(values)
    if ordered[-1] < 0:
        return ordered[-1] + ordered[-2]
    if ordered[0] > 0:
        return ordered[0] + ordered[1]
    left, right = 0, len(ordered) - 1
    best: int | None = None
    while left < right:
        total = ordered[left] + ordered[right]
        if best is None or abs(total) < abs(best):
            best = total
        elif abs(total) == abs(best):
            best = max(best, total)
        if total < 0:
            left += 1
        else:
            right -= 1
    return best


def can_arrange(values: Sequence[int], k: int) -> bool:
    """Whether the values split into pairs whose sums are divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    remainders = Counter(value % k for value in values)
    if remainders[0] % 2:
        return False
    return all(remainders[r] == remainders[k - r] for r in range(1, k // 2 + 1))