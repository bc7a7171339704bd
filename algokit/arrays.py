"""Classic single-pass and two-pointer algorithms over integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0 if none."""
    if not prices:
        raise ValueError("prices must not be empty")
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place."""
    n = len(nums)
    if n <= 1:
        return
    k %= n
    nums[:] = list(nums[n - k:]) + list(nums[:n - k])


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            raise ValueError(f"unexpected colour {value!r}; expected 0, 1 or 2")


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value among n+1 values drawn from 1..n, without extra storage."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        count = sum(1 for value in nums if value <= mid)
        if count <= mid:
            left = mid + 1
        else:
            right = mid - 1
    return left


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, ordered by start."""
    if not intervals:
        return []
    ordered = sorted(intervals, key=lambda interval: interval[0])
    merged = [list(ordered[0])]
    for start, end in ordered[1:]:
        last = merged[-1]
        if last[1] >= start:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged result")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def max_area(heights: Sequence[int]) -> int:
    """Most water held between two lines of the given heights."""
    area = 0
    i, j = 0, len(heights) - 1
    while i < j:
        area = max(area, (j - i) * min(heights[i], heights[j]))
        if heights[i] < heights[j]:
            i += 1
        elif heights[i] > heights[j]:
            j -= 1
        else:
            i += 1
            j -= 1
    return area


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best: int | None = None
    prefix = suffix = 1
    for forward, backward in zip(nums, reversed(nums)):
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
        prefix *= forward
        suffix *= backward
        candidate = max(prefix, suffix)
        if best is None or candidate > best:
            best = candidate
    return best


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Values for ``n`` missing dice rolls giving the stated mean, or [] if impossible."""
    missing_total = mean * (n + len(rolls)) - sum(rolls)
    if n <= 0 or missing_total < n or missing_total > 6 * n:
        return []
    base, extra = divmod(missing_total, n)
    return [base + 1] * extra + [base] * (n - extra)