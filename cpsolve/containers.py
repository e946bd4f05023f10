"""Bounded and unbounded FIFO queues and LIFO stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return capacity


class ArrayQueue:
    """A first-in, first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def push(self, x: Any) -> None:
        """Add ``x`` at the back; raise OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


class LinkedQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, x: Any) -> None:
        """Add ``x`` at the back."""
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)


class ArrayStack:
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put ``x`` on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """An unbounded last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put ``x`` on top."""
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)