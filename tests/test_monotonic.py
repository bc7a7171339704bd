import pytest

from algokit.monotonic import build_array, daily_temperatures, next_greater_circular


def test_next_greater_circular_example():
    assert next_greater_circular([1, 2, 1]) == [2, -1, 2]


@pytest.mark.parametrize(
    "values", [[1, 2, 3, 4, 3], [5, 4, 3, 2, 1], [2, 2, 2], [3, 8, 4, 1, 2]]
)
def test_next_greater_circular_invariants(values):
    result = next_greater_circular(values)
    assert len(result) == len(values)
    top = max(values)
    for value, nxt in zip(values, result):
        if value == top:
            assert nxt == -1
        else:
            assert nxt > value
            assert nxt in values


def test_next_greater_circular_empty():
    assert next_greater_circular([]) == []


def test_daily_temperatures_example():
    temps = [73, 74, 75, 71, 69, 72, 76, 73]
    assert daily_temperatures(temps) == [1, 1, 4, 2, 1, 1, 0, 0]


@pytest.mark.parametrize(
    "temps", [[30, 40, 50, 60], [30, 60, 90], [55, 38, 53, 81, 61, 93, 97, 32]]
)
def test_daily_temperatures_waits_are_exact(temps):
    result = daily_temperatures(temps)
    for day, wait in enumerate(result):
        if wait:
            assert temps[day + wait] > temps[day]
            assert all(t <= temps[day] for t in temps[day + 1:day + wait])
        else:
            assert all(t <= temps[day] for t in temps[day + 1:])


def test_daily_temperatures_non_increasing_gives_zeros():
    temps = [90, 80, 80, 70]
    assert daily_temperatures(temps) == [0] * len(temps)


def test_build_array_example():
    assert build_array([1, 3], 3) == ["Push", "Push", "Pop", "Push"]


@pytest.mark.parametrize(
    "target, n", [([1, 2, 3], 3), ([1, 2], 4), ([2, 3, 4], 4), ([3, 7], 10)]
)
def test_build_array_reproduces_target(target, n):
    stack = []
    stream = iter(range(1, n + 1))
    for op in build_array(target, n):
        if op == "Push":
            stack.append(next(stream))
        else:
            assert op == "Pop"
            stack.pop()
    assert stack == target


def test_build_array_stops_at_last_target():
    ops = build_array([1, 2], 4)
    assert ops.count("Push") == 2
    assert "Pop" not in ops