"""Bounded queue, array-backed priority queue and disjoint-set forest."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Queue:
    """A first-in, first-out queue of integers with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear; raise OverflowError when full."""
        if len(self._items) == self.capacity:
            raise OverflowError("Queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


class PriorityQueue:
    """A min-priority queue of distinct integer indices with a fixed capacity.

    Entries live in an unsorted list; extraction scans for the smallest
    priority and keeps the first one found among equals.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: list[list[int]] = []

    def insert(self, index: int, priority: int) -> None:
        """Add ``index`` with ``priority``."""
        if len(self._entries) == self.capacity:
            raise OverflowError("Priority Queue is full")
        if index in self:
            raise ValueError("Index already exists in the priority queue")
        self._entries.append([index, priority])

    def extract_min(self) -> int:
        """Remove and return the index with the lowest priority."""
        if not self._entries:
            raise IndexError("Priority Queue is empty")
        min_pos = min(
            range(len(self._entries)), key=lambda pos: self._entries[pos][1]
        )
        index = self._entries[min_pos][0]
        last = self._entries.pop()
        if min_pos < len(self._entries):
            self._entries[min_pos] = last
        return index

    def decrease_priority(self, index: int, new_priority: int) -> None:
        """Lower the priority of ``index``; an equal priority is a no-op."""
        for entry in self._entries:
            if entry[0] == index:
                if new_priority > entry[1]:
                    raise ValueError("New priority is higher than current priority")
                entry[1] = new_priority
                return
        raise ValueError("Index not found in priority queue")

    def is_empty(self) -> bool:
        return not self._entries

    def __contains__(self, index: object) -> bool:
        return any(entry[0] == index for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class UnionFind:
    """Disjoint sets over ``0 .. size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < self.size:
            raise IndexError(f"Element {x} is out of bounds")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1