"""Inversion-style pair counting by merge sort."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections.abc import Callable, Sequence

_CrossCounter = Callable[[list[int], list[int]], int]


def _sort_and_count(values: Sequence[int], cross: _CrossCounter) -> tuple[list[int], int]:
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid], cross)
    right, right_count = _sort_and_count(values[mid:], cross)
    count = left_count + right_count + cross(left, right)
    return list(heapq.merge(left, right)), count


def _inversions_across(left: list[int], right: list[int]) -> int:
    return sum(len(left) - bisect_right(left, value) for value in right)


def _double_pairs_across(left: list[int], right: list[int]) -> int:
    return sum(len(left) - bisect_right(left, 2 * value) for value in right)


def count_inversions(values: Sequence[int]) -> int:
    """Number of pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values), _inversions_across)[1]


def reverse_pairs(values: Sequence[int]) -> int:
    """Number of pairs i < j with values[i] > 2 * values[j]."""
    return _sort_and_count(list(values), _double_pairs_across)[1]


def is_ideal_permutation(nums: Sequence[int]) -> bool:
    """True when the global inversion count equals the local (adjacent) count."""
    local = sum(1 for a, b in zip(nums, nums[1:]) if a > b)
    return count_inversions(nums) == local