"""Majority-element searches using Moore's voting algorithm."""

from __future__ import annotations

from collections.abc import Sequence


def majority_element(nums: Sequence[int]) -> int | None:
    """The value occurring more than len(nums) / 2 times, or None if there is none."""
    candidate: int | None = None
    votes = 0
    for value in nums:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def majority_elements(nums: Sequence[int]) -> list[int]:
    """All values occurring more than len(nums) / 3 times (at most two)."""
    first: int | None = None
    second: int | None = None
    first_votes = second_votes = 0
    for value in nums:
        if first_votes == 0 and value != second:
            first, first_votes = value, 1
        elif second_votes == 0 and value != first:
            second, second_votes = value, 1
        elif value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        else:
            first_votes -= 1
            second_votes -= 1

    threshold = len(nums) // 3 + 1
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and nums.count(candidate) >= threshold
    ]