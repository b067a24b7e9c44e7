"""
min_heap.py — Binary Min-Priority Queue
=======================================
Array-backed binary min-heap keyed by a numeric priority, carrying an
opaque payload.  Drives Dijkstra's frontier.

    pq = MinPriorityQueue()
    pq.insert(3.0, ("B", edge))
    entry = pq.extract_min()      # HeapEntry(priority=3.0, payload=...) or None

Properties worth knowing:
  - Only priorities are compared, never payloads, so payloads can be
    anything (including unorderable tuples holding edges).
  - Tie order on equal priorities is NOT specified.  Entries with the same
    priority may come out in any order; callers must not depend on
    insertion order.
  - No decrease-key.  The same payload may be inserted many times with
    different priorities; it is up to the caller to discard stale ones
    (Dijkstra does it with its visited set).
  - An empty extract returns None instead of raising: an empty frontier is
    a normal outcome, not an error.
"""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class HeapEntry:
    priority: float
    payload:  Any = None


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


class MinPriorityQueue:
    """
    Attributes:
        _entries : heap-ordered list; _entries[0] is always the minimum.
    """

    def __init__(self):
        self._entries: List[HeapEntry] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, priority: float, payload: Any = None) -> None:
        """Append, then sift the new entry up.  O(log n)."""
        self._entries.append(HeapEntry(priority, payload))
        self._sift_up(len(self._entries) - 1)

    def extract_min(self) -> Optional[HeapEntry]:
        """Remove and return the minimum entry, or None when empty.  O(log n)."""
        if not self._entries:
            return None
        root = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Optional[HeapEntry]:
        return self._entries[0] if self._entries else None

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def is_heap_valid(self) -> bool:
        """Every parent's priority <= both children's.  Test / debug hook."""
        n = len(self._entries)
        for i in range(n):
            for child in (_left(i), _right(i)):
                if child < n and self._entries[child].priority < self._entries[i].priority:
                    return False
        return True

    def snapshot(self) -> List[HeapEntry]:
        """Entries in heap (not sorted) order, for overlays."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        top = self._entries[0].priority if self._entries else None
        return f"MinPriorityQueue(size={len(self._entries)}, min={top})"

    # ------------------------------------------------------------------
    # Heap repair
    # ------------------------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = _parent(index)
            if self._entries[index].priority < self._entries[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        n = len(self._entries)
        while True:
            smallest = index
            left, right = _left(index), _right(index)
            if left < n and self._entries[left].priority < self._entries[smallest].priority:
                smallest = left
            if right < n and self._entries[right].priority < self._entries[smallest].priority:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest
