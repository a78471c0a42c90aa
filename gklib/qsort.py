"""In-place quicksort driven by a caller-supplied "less than" predicate.

The algorithm is a median-of-three quicksort with an explicit stack.
Partitions at or below a small threshold are left unsorted, and the
whole list is finished with a single insertion-sort pass.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")

_MAX_THRESH = 8


def _partition_pass(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """Quicksort until every remaining partition is small."""
    lo = 0
    hi = len(items) - 1
    stack: list[tuple[int, int]] = []

    while True:
        mid = lo + ((hi - lo) >> 1)

        # Median of three: leave items[lo] <= items[mid] <= items[hi].
        if less(items[mid], items[lo]):
            items[mid], items[lo] = items[lo], items[mid]
        if less(items[hi], items[mid]):
            items[mid], items[hi] = items[hi], items[mid]
            if less(items[mid], items[lo]):
                items[mid], items[lo] = items[lo], items[mid]

        left = lo + 1
        right = hi - 1

        while True:
            while less(items[left], items[mid]):
                left += 1
            while less(items[mid], items[right]):
                right -= 1

            if left < right:
                items[left], items[right] = items[right], items[left]
                if mid == left:
                    mid = right
                elif mid == right:
                    mid = left
                left += 1
                right -= 1
            elif left == right:
                left += 1
                right -= 1
                break

            if left > right:
                break

        left_small = right - lo <= _MAX_THRESH
        right_small = hi - left <= _MAX_THRESH

        if left_small:
            if right_small:
                if not stack:
                    return
                lo, hi = stack.pop()
            else:
                lo = left
        elif right_small:
            hi = right
        elif right - lo > hi - left:
            stack.append((lo, right))
            lo = left
        else:
            stack.append((left, hi))
            hi = right


def _insertion_pass(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """Finish a nearly sorted list with insertion sort."""
    end = len(items) - 1
    thresh = min(_MAX_THRESH, end)

    # Put the smallest of the leading elements first as a sentinel.
    smallest = 0
    for run in range(1, thresh + 1):
        if less(items[run], items[smallest]):
            smallest = run
    if smallest != 0:
        items[smallest], items[0] = items[0], items[smallest]

    for run in range(2, end + 1):
        pos = run - 1
        while pos >= 0 and less(items[run], items[pos]):
            pos -= 1
        pos += 1
        if pos != run:
            held = items[run]
            items[pos + 1 : run + 1] = items[pos:run]
            items[pos] = held


def quicksort(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place so that ``less`` never holds between neighbours.

    ``less(a, b)`` must return true when ``a`` is to be placed before ``b``.
    The sort is not stable.
    """
    if len(items) < 1:
        return
    if len(items) > _MAX_THRESH:
        _partition_pass(items, less)
    _insertion_pass(items, less)