"""Binary search on the answer: stall placement and book allocation."""

from __future__ import annotations

from collections.abc import Sequence


def _can_place(stalls: Sequence[int], distance: int, cows: int) -> bool:
    placed = 1
    last = stalls[0]
    for position in stalls[1:]:
        if position - last >= distance:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return placed >= cows


def aggressive_cows(stalls: Sequence[int], k: int) -> int:
    """Largest minimum distance at which ``k`` cows can be placed in the stalls."""
    if not stalls:
        raise ValueError("stalls must not be empty")
    ordered = sorted(stalls)
    low, high = 0, ordered[-1] - ordered[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_place(ordered, mid, k):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _students_needed(pages: Sequence[int], limit: int) -> int:
    students = 1
    load = 0
    for count in pages:
        if load + count > limit:
            students += 1
            load = count
        else:
            load += count
    return students


def find_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages per student when books are split contiguously."""
    if students < 1:
        raise ValueError("students must be at least 1")
    if students > len(pages):
        raise ValueError("more students than books")
    low, high = max(pages), sum(pages)
    while low <= high:
        mid = (low + high) // 2
        if _students_needed(pages, mid) > students:
            low = mid + 1
        else:
            high = mid - 1
    return low