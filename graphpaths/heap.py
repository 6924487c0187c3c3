"""
Index-addressable binary min-heap with decrease-key.

Items are vertex indices ``0 .. capacity-1``; each is stored at most once,
and a position table lets ``decrease_key`` find it in O(1) and sift it up
in O(log n). Keys are compared together with the item, so equal keys pop
the smaller index first.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (Priority queues).
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple


class IndexedHeap:
    """
    Binary min-heap over integer items with mutable keys.

    Complexity:
        - push: O(log n)
        - pop: O(log n)
        - decrease_key: O(log n)
        - __contains__ / key: O(1)
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty heap.

        Args:
            capacity: Items must lie in ``range(capacity)``.
        """
        self._heap: List[int] = []
        self._keys: List[Any] = [None] * capacity
        self._pos: List[Optional[int]] = [None] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: int) -> bool:
        return 0 <= item < len(self._pos) and self._pos[item] is not None

    def key(self, item: int) -> Any:
        """Return the current key of a queued item."""
        if item not in self:
            raise KeyError(f"Item {item} is not in the heap")
        return self._keys[item]

    def push(self, item: int, key: Any) -> None:
        """
        Insert ``item`` with priority ``key``.

        Raises:
            ValueError: If item is already queued.
            IndexError: If item is outside the heap capacity.
        """
        if not 0 <= item < len(self._pos):
            raise IndexError(f"Item {item} outside heap capacity {len(self._pos)}")
        if self._pos[item] is not None:
            raise ValueError(f"Item {item} is already in the heap")
        self._keys[item] = key
        self._pos[item] = len(self._heap)
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> Tuple[int, Any]:
        """Return ``(item, key)`` with the smallest key without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty heap")
        item = self._heap[0]
        return item, self._keys[item]

    def pop(self) -> Tuple[int, Any]:
        """
        Remove and return ``(item, key)`` with the smallest key.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._pos[last] = 0
            self._sift_down(0)
        self._pos[top] = None
        key = self._keys[top]
        self._keys[top] = None
        return top, key

    def decrease_key(self, item: int, key: Any) -> None:
        """
        Lower the key of a queued item.

        Raises:
            KeyError: If item is not queued.
            ValueError: If ``key`` is larger than the current key.
        """
        if item not in self:
            raise KeyError(f"Item {item} is not in the heap")
        if key > self._keys[item]:
            raise ValueError(f"decrease_key would raise key of item {item} from {self._keys[item]} to {key}")
        self._keys[item] = key
        self._sift_up(self._pos[item])

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        ka, kb = self._keys[a], self._keys[b]
        # Tie-break on the item index
        return ka < kb or (ka == kb and a < b)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i]] = i
        self._pos[heap[j]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest


__all__ = ["IndexedHeap"]
