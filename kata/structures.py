"""Stack, queue and singly linked list containers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, elem: T) -> None:
        """Add ``elem`` on top of the stack."""
        self._items.append(elem)

    def pop(self) -> T | None:
        """Remove and return the top element, or None when empty."""
        return self._items.pop() if self._items else None

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def peek(self) -> T | None:
        """Return the bottom (first pushed) element without removing it."""
        return self._items[0] if self._items else None


class Queue(Generic[T]):
    """First-in, first-out container."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, elem: T) -> None:
        """Append ``elem`` at the back of the queue."""
        self._items.append(elem)

    def dequeue(self) -> T | None:
        """Remove and return the front element, or None when empty."""
        return self._items.popleft() if self._items else None

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def peek(self) -> T | None:
        """Return the front element without removing it."""
        return self._items[0] if self._items else None


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list of integers; new values go to the front."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def add(self, value: int) -> None:
        """Insert ``value`` at the head of the list."""
        self._head = _Node(value, self._head)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def find(self, target: int) -> int | None:
        """Return ``target`` if it is in the list, otherwise None."""
        return next((value for value in self if value == target), None)

    def first(self) -> int | None:
        """Return the value at the head, or None when empty."""
        return self._head.value if self._head is not None else None

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)