import pytest

from algokit.containers import (
    CircularDeque,
    IncrementStack,
    MinStack,
    QueueStack,
    StackQueue,
)


def test_circular_deque_capacity_limit():
    dq = CircularDeque(3)
    assert dq.insert_last(1) is True
    assert dq.insert_last(2) is True
    assert dq.insert_front(3) is True
    assert dq.insert_front(4) is False
    assert dq.is_full()
    assert dq.rear() == 2
    assert dq.front() == 3


def test_circular_deque_delete_and_reinsert():
    dq = CircularDeque(3)
    for value in (1, 2, 3):
        dq.insert_last(value)
    assert dq.delete_last() is True
    assert dq.insert_front(4) is True
    assert dq.front() == 4
    assert dq.rear() == 2
    assert len(dq) == 3


def test_circular_deque_empty_operations():
    dq = CircularDeque(2)
    assert dq.is_empty()
    assert dq.delete_front() is False
    assert dq.delete_last() is False
    with pytest.raises(IndexError):
        dq.front()
    with pytest.raises(IndexError):
        dq.rear()


def test_circular_deque_wraps_around():
    dq = CircularDeque(2)
    for round_ in range(5):
        assert dq.insert_last(round_)
        assert dq.insert_front(round_ + 10)
        assert dq.front() == round_ + 10
        assert dq.rear() == round_
        assert dq.delete_front() and dq.delete_last()
    assert dq.is_empty()


def test_circular_deque_zero_capacity():
    dq = CircularDeque(0)
    assert dq.insert_front(1) is False
    assert dq.is_full() and dq.is_empty()


def test_circular_deque_negative_capacity():
    with pytest.raises(ValueError):
        CircularDeque(-1)


def test_increment_stack_ignores_push_when_full():
    st = IncrementStack(2)
    st.push(1)
    st.push(2)
    st.push(3)
    assert len(st) == 2
    assert st.pop() == 2


def test_increment_stack_increments_bottom_items():
    st = IncrementStack(3)
    for value in (1, 2, 3):
        st.push(value)
    st.increment(2, 100)
    assert [st.pop(), st.pop(), st.pop()] == [3, 102, 101]


def test_increment_stack_k_larger_than_size():
    st = IncrementStack(5)
    st.push(1)
    st.push(2)
    st.increment(10, 5)
    assert [st.pop(), st.pop()] == [7, 6]


def test_increment_stack_pop_empty():
    with pytest.raises(IndexError):
        IncrementStack(1).pop()


def test_stack_queue_fifo_order():
    q = StackQueue()
    for value in (1, 2, 3):
        q.push(value)
    assert q.peek() == 1
    assert q.pop() == 1
    q.push(4)
    assert [q.pop(), q.pop(), q.pop()] == [2, 3, 4]
    assert q.is_empty()


def test_stack_queue_empty_raises():
    q = StackQueue()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.peek()


def test_queue_stack_lifo_order():
    s = QueueStack()
    for value in (1, 2, 3):
        s.push(value)
    assert s.top() == 3
    assert s.pop() == 3
    s.push(4)
    assert [s.pop(), s.pop(), s.pop()] == [4, 2, 1]
    assert s.is_empty()


def test_queue_stack_empty_raises():
    with pytest.raises(IndexError):
        QueueStack().pop()
    with pytest.raises(IndexError):
        QueueStack().top()


def test_min_stack_tracks_minimum():
    s = MinStack()
    s.push(-2)
    s.push(0)
    s.push(-3)
    assert s.get_min() == -3
    s.pop()
    assert s.top() == 0
    assert s.get_min() == -2


def test_min_stack_minimum_matches_contents():
    values = [5, 3, 8, 1, 9, 1, 4]
    s = MinStack()
    for i, value in enumerate(values):
        s.push(value)
        assert s.get_min() == min(values[: i + 1])
    for i in range(len(values), 0, -1):
        assert s.get_min() == min(values[:i])
        assert s.top() == values[i - 1]
        s.pop()
    assert len(s) == 0


def test_min_stack_empty_raises():
    s = MinStack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.get_min()