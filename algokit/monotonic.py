"""Monotonic-stack problems and stack operation sequences."""

from __future__ import annotations

from collections.abc import Sequence


def next_greater_circular(values: Sequence[int]) -> list[int]:
    """Next strictly greater value for each item, wrapping around; -1 where none exists."""
    n = len(values)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = values[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a strictly warmer temperature; 0 where none follows."""
    answer = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            answer[earlier] = day - earlier
        pending.append(day)
    return answer


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Push/Pop operations over the stream 1..n that leave ``target`` on a stack."""
    operations: list[str] = []
    wanted = iter(target)
    next_wanted = next(wanted, None)
    for value in range(1, n + 1):
        if next_wanted is None:
            break
        operations.append("Push")
        if value == next_wanted:
            next_wanted = next(wanted, None)
        else:
            operations.append("Pop")
    return operations