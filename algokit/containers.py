"""Bounded and composed container types."""

from __future__ import annotations

from collections import deque
from typing import Any


class CircularDeque:
    """A double-ended queue of fixed capacity backed by a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def insert_front(self, value: Any) -> bool:
        """Add ``value`` at the front; False if the deque is full."""
        if self.is_full():
            return False
        self._head = (self._head - 1) % self.capacity
        self._slots[self._head] = value
        self._size += 1
        return True

    def insert_last(self, value: Any) -> bool:
        """Add ``value`` at the back; False if the deque is full."""
        if self.is_full():
            return False
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1
        return True

    def delete_front(self) -> bool:
        """Drop the front item; False if the deque is empty."""
        if self.is_empty():
            return False
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return True

    def delete_last(self) -> bool:
        """Drop the back item; False if the deque is empty."""
        if self.is_empty():
            return False
        self._slots[(self._head + self._size - 1) % self.capacity] = None
        self._size -= 1
        return True

    def front(self) -> Any:
        """The front item."""
        if self.is_empty():
            raise IndexError("front of empty deque")
        return self._slots[self._head]

    def rear(self) -> Any:
        """The back item."""
        if self.is_empty():
            raise IndexError("rear of empty deque")
        return self._slots[(self._head + self._size - 1) % self.capacity]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity


class IncrementStack:
    """A bounded stack whose bottom items can be incremented in bulk."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is already full."""
        if len(self._items) < self.max_size:
            self._items.append(x)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to each of the bottom ``k`` items."""
        for i in range(min(max(k, 0), len(self._items))):
            self._items[i] += val


class StackQueue:
    """A first-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: Any) -> None:
        self._inbox.append(x)

    def pop(self) -> Any:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


class QueueStack:
    """A last-in first-out stack built on a single queue."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: Any) -> None:
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> Any:
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue


class MinStack:
    """A stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: Any) -> None:
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> Any:
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]