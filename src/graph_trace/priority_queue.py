"""Indexed binary min-priority queue with decrease-key.

The heap is an array of entries plus an id -> array index side table
that is kept in sync on every swap, so an entry can be located and its
priority lowered in O(log n) without removing and reinserting it.

Public API:
    IndexedMinPriorityQueue: insert / decrease_key / pop over string ids.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Entry:
    item_id: str
    priority: int | float
    sequence: int

    def key(self) -> tuple[int | float, int]:
        return (self.priority, self.sequence)


class IndexedMinPriorityQueue:
    """Min-heap keyed by priority, addressable by id.

    Among equal priorities the entry inserted first is extracted first.
    A decrease-key keeps the entry's original insertion sequence.
    """

    def __init__(self):
        self._heap: list[_Entry] = []
        self._index: dict[str, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())

    def is_empty(self) -> bool:
        return not self._heap

    def ids(self) -> list[str]:
        """Ids in heap array order."""
        return [entry.item_id for entry in self._heap]

    def priority_of(self, item_id: str) -> int | float:
        """Current priority of *item_id*.

        Raises:
            KeyError: If item_id is not queued.
        """
        return self._heap[self._index[item_id]].priority

    def insert(self, item_id: str, priority: int | float) -> bool:
        """Insert *item_id*, or lower its priority if already queued.

        Returns:
            True if the queue changed. A priority that does not improve on
            the queued one is ignored and returns False.
        """
        if item_id in self._index:
            if priority < self.priority_of(item_id):
                self.decrease_key(item_id, priority)
                return True
            return False

        i = len(self._heap)
        self._heap.append(_Entry(item_id, priority, self._counter))
        self._counter += 1
        self._index[item_id] = i
        self._sift_up(i)
        return True

    def decrease_key(self, item_id: str, priority: int | float) -> None:
        """Lower the priority of a queued id and restore heap order.

        Raises:
            KeyError: If item_id is not queued.
            ValueError: If priority is greater than the current one.
        """
        i = self._index[item_id]
        entry = self._heap[i]
        if priority > entry.priority:
            raise ValueError(
                f"cannot increase priority of {item_id!r} from {entry.priority} to {priority}"
            )
        entry.priority = priority
        self._sift_up(i)

    def peek(self) -> tuple[str, int | float]:
        """Return the minimum ``(id, priority)`` without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        top = self._heap[0]
        return top.item_id, top.priority

    def pop(self) -> tuple[str, int | float]:
        """Remove and return the minimum ``(id, priority)``.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top.item_id]
        if self._heap:
            self._heap[0] = last
            self._index[last.item_id] = 0
            self._sift_down(0)
        return top.item_id, top.priority

    # ── heap maintenance ──────────────────────────────────────

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[i].key() < self._heap[parent].key():
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < n and self._heap[left].key() < self._heap[smallest].key():
                smallest = left
            if right < n and self._heap[right].key() < self._heap[smallest].key():
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._index[self._heap[i].item_id] = i
        self._index[self._heap[j].item_id] = j


__all__ = ["IndexedMinPriorityQueue"]
