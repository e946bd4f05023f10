"""Singly and doubly linked lists with 1-based positional editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


@dataclass(eq=False)
class _DoubleNode:
    data: Any
    next: Optional[_DoubleNode] = None
    prev: Optional[_DoubleNode] = None


class SinglyLinkedList:
    """A singly linked list; positions count from 1.

    Positions outside the list are ignored by insertion and deletion.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> Optional[_Node]:
        if position < 1:
            return None
        node = self._head
        for _ in range(position - 1):
            if node is None:
                return None
            node = node.next
        return node

    def insert_at(self, data: Any, position: int) -> None:
        """Insert ``data`` so that it ends up at ``position``."""
        if position == 1:
            self._head = _Node(data, self._head)
            self._size += 1
            return
        previous = self._node_at(position - 1)
        if previous is None:
            return
        previous.next = _Node(data, previous.next)
        self._size += 1

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``."""
        if self._head is None or position < 1:
            return
        if position == 1:
            self._head = self._head.next
        else:
            previous = self._node_at(position - 1)
            if previous is None or previous.next is None:
                return
            previous.next = previous.next.next
        self._size -= 1

    def insert_before(self, value: Any, target: Any) -> None:
        """Insert ``value`` before the first node holding ``target``.

        Raises ValueError when no node holds ``target``.
        """
        previous: Optional[_Node] = None
        node = self._head
        while node is not None and node.data != target:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"no data found to insert at: {target!r}")
        new_node = _Node(value, node)
        if previous is None:
            self._head = new_node
        else:
            previous.next = new_node
        self._size += 1


class DoublyLinkedList:
    """A doubly linked list; positions count from 1.

    Positions outside the list are ignored by insertion and deletion.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> Optional[_DoubleNode]:
        if position < 1:
            return None
        node = self._head
        for _ in range(position - 1):
            if node is None:
                return None
            node = node.next
        return node

    def insert_at(self, data: Any, position: int) -> None:
        """Insert ``data`` so that it ends up at ``position``."""
        if position == 1:
            node = _DoubleNode(data, next=self._head)
            if self._head is None:
                self._tail = node
            else:
                self._head.prev = node
            self._head = node
            self._size += 1
            return
        previous = self._node_at(position - 1)
        if previous is None:
            return
        node = _DoubleNode(data, next=previous.next, prev=previous)
        if previous.next is None:
            self._tail = node
        else:
            previous.next.prev = node
        previous.next = node
        self._size += 1

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``."""
        node = self._node_at(position)
        if node is None:
            return
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1