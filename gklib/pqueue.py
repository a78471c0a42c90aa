"""Max-priority queues backed by binary heaps.

``PriorityQueue`` keeps a locator for every node so that entries can be
deleted or re-keyed in place; nodes are integers in ``range(maxnodes)``.
``BoundedPriorityQueue`` has no locator, takes values of any type and
refuses insertions once it holds ``maxnodes`` entries.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

V = TypeVar("V")


def _key_gt(a: Any, b: Any) -> bool:
    return a > b


class _MaxHeap(Generic[V]):
    """Array-based max-heap of ``(key, value)`` pairs."""

    def __init__(self) -> None:
        self._heap: list[tuple[Any, V]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def _place(self, i: int, entry: tuple[Any, V]) -> None:
        self._heap[i] = entry

    def _sift_up(self, i: int, entry: tuple[Any, V]) -> None:
        heap = self._heap
        key = entry[0]
        while i > 0:
            j = (i - 1) >> 1
            if _key_gt(key, heap[j][0]):
                self._place(i, heap[j])
                i = j
            else:
                break
        self._place(i, entry)

    def _sift_down(self, i: int, entry: tuple[Any, V]) -> None:
        heap = self._heap
        key = entry[0]
        n = len(heap)
        while (j := 2 * i + 1) < n:
            if _key_gt(heap[j][0], key):
                if j + 1 < n and _key_gt(heap[j + 1][0], heap[j][0]):
                    j += 1
            elif j + 1 < n and _key_gt(heap[j + 1][0], key):
                j += 1
            else:
                break
            self._place(i, heap[j])
            i = j
        self._place(i, entry)

    def _take_top(self) -> V:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        top = self._heap[0][1]
        last = self._heap.pop()
        if self._heap:
            self._sift_down(0, last)
        return top

    def _heap_ordered(self) -> bool:
        heap = self._heap
        if not heap:
            return True
        top = heap[0][0]
        for i in range(1, len(heap)):
            if _key_gt(heap[i][0], heap[(i - 1) // 2][0]):
                return False
            if _key_gt(heap[i][0], top):
                return False
        return True

    def _top_entry(self) -> tuple[Any, V]:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        return self._heap[0]


class PriorityQueue(_MaxHeap[int]):
    """Max-priority queue over integer nodes with in-place delete and update."""

    def __init__(self, maxnodes: int) -> None:
        super().__init__()
        self.maxnodes = maxnodes
        self._locator: list[int] = [-1] * maxnodes

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        return (
            isinstance(node, int)
            and 0 <= node < self.maxnodes
            and self._locator[node] != -1
        )

    def _place(self, i: int, entry: tuple[Any, int]) -> None:
        self._heap[i] = entry
        self._locator[entry[1]] = i

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.maxnodes:
            raise IndexError(f"node {node} outside range(0, {self.maxnodes})")

    def _position(self, node: int) -> int:
        self._check_node(node)
        i = self._locator[node]
        if i == -1:
            raise KeyError(node)
        return i

    def reset(self) -> None:
        """Remove every entry."""
        for _, node in self._heap:
            self._locator[node] = -1
        self._heap.clear()

    def insert(self, node: int, key: Any) -> None:
        """Add ``node`` with priority ``key``."""
        self._check_node(node)
        if self._locator[node] != -1:
            raise ValueError(f"node {node} is already in the queue")
        self._heap.append((key, node))
        self._sift_up(len(self._heap) - 1, (key, node))

    def delete(self, node: int) -> None:
        """Remove ``node`` from the queue."""
        i = self._position(node)
        self._locator[node] = -1
        last = self._heap.pop()
        if last[1] == node:
            return
        oldkey = self._heap[i][0]
        if _key_gt(last[0], oldkey):
            self._sift_up(i, last)
        else:
            self._sift_down(i, last)

    def update(self, node: int, newkey: Any) -> None:
        """Change the priority of ``node`` to ``newkey``."""
        i = self._position(node)
        oldkey = self._heap[i][0]
        if not _key_gt(newkey, oldkey) and not _key_gt(oldkey, newkey):
            return
        if _key_gt(newkey, oldkey):
            self._sift_up(i, (newkey, node))
        else:
            self._sift_down(i, (newkey, node))

    def pop(self) -> int:
        """Remove and return the node with the largest key."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        self._locator[self._heap[0][1]] = -1
        return self._take_top()

    def peek_value(self) -> int:
        """Return the node with the largest key without removing it."""
        return self._top_entry()[1]

    def peek_key(self) -> Any:
        """Return the largest key without removing its entry."""
        return self._top_entry()[0]

    def key_of(self, node: int) -> Any:
        """Return the key of ``node``."""
        return self._heap[self._position(node)][0]

    def check_heap(self) -> bool:
        """Return whether the heap order and the locators are consistent."""
        for i, (_, node) in enumerate(self._heap):
            if self._locator[node] != i:
                return False
        if sum(1 for loc in self._locator if loc != -1) != len(self._heap):
            return False
        return self._heap_ordered()


class BoundedPriorityQueue(_MaxHeap[Any]):
    """Max-priority queue of arbitrary values holding at most ``maxnodes``."""

    def __init__(self, maxnodes: int) -> None:
        super().__init__()
        self.maxnodes = maxnodes

    def __len__(self) -> int:
        return len(self._heap)

    def reset(self) -> None:
        """Remove every entry."""
        self._heap.clear()

    def insert(self, val: Any, key: Any) -> bool:
        """Add ``val`` with priority ``key``; return False if the queue is full."""
        if len(self._heap) >= self.maxnodes:
            return False
        self._heap.append((key, val))
        self._sift_up(len(self._heap) - 1, (key, val))
        return True

    def pop(self) -> Any:
        """Remove and return the value with the largest key."""
        return self._take_top()

    def peek_value(self) -> Any:
        """Return the value with the largest key without removing it."""
        return self._top_entry()[1]

    def peek_key(self) -> Any:
        """Return the largest key without removing its entry."""
        return self._top_entry()[0]

    def check_heap(self) -> bool:
        """Return whether the heap order holds."""
        return self._heap_ordered()