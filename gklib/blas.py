"""Vector routines in the style of BLAS, plus conversion of labels to CSR form."""

from __future__ import annotations

import math
from typing import Any, Sequence

from gklib.sorting import KeyValue, sort_kv_descending


def incset(n: int, baseval: Any) -> list[Any]:
    """Return ``[baseval, baseval + 1, ..., baseval + n - 1]``."""
    return [baseval + i for i in range(n)]


def vmax(x: Sequence[Any]) -> Any:
    """Return the largest element of ``x``, or 0 when ``x`` is empty."""
    if not x:
        return 0
    return max(x)


def vmin(x: Sequence[Any]) -> Any:
    """Return the smallest element of ``x``, or 0 when ``x`` is empty."""
    if not x:
        return 0
    return min(x)


def argmax(x: Sequence[Any]) -> int:
    """Return the index of the first largest element (0 for an empty ``x``)."""
    best = 0
    for i, value in enumerate(x):
        if value > x[best]:
            best = i
    return best


def argmin(x: Sequence[Any]) -> int:
    """Return the index of the first smallest element (0 for an empty ``x``)."""
    best = 0
    for i, value in enumerate(x):
        if value < x[best]:
            best = i
    return best


def argmax_n(x: Sequence[Any], k: int) -> int:
    """Return the index of the ``k``-th largest element of ``x`` (``k`` from 1)."""
    if not 1 <= k <= len(x):
        raise IndexError(f"k={k} outside 1..{len(x)}")
    cand = [KeyValue(key=value, val=i) for i, value in enumerate(x)]
    sort_kv_descending(cand)
    return cand[k - 1].val


def vsum(x: Sequence[Any]) -> Any:
    """Return the sum of the elements of ``x``."""
    return sum(x)


def scale(x: Sequence[Any], alpha: Any) -> list[Any]:
    """Return ``x`` with every element multiplied by ``alpha``."""
    return [alpha * value for value in x]


def norm2(x: Sequence[Any]) -> float:
    """Return the Euclidean norm of ``x``."""
    partial = sum(value * value for value in x)
    return math.sqrt(partial) if partial > 0 else 0.0


def dot(x: Sequence[Any], y: Sequence[Any]) -> Any:
    """Return the inner product of two vectors of equal length."""
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} and {len(y)}")
    return sum(a * b for a, b in zip(x, y))


def axpy(alpha: Any, x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return ``y + alpha * x`` for two vectors of equal length."""
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} and {len(y)}")
    return [b + alpha * a for a, b in zip(x, y)]


def array2csr(array: Sequence[int], nrange: int) -> tuple[list[int], list[int]]:
    """Group the positions of ``array`` by their value.

    Every value must lie in ``range(nrange)``. Returns ``(ptr, ind)`` where
    ``ind[ptr[v]:ptr[v + 1]]`` lists, in increasing order, the positions
    holding value ``v``.
    """
    counts = [0] * (nrange + 1)
    for pos, value in enumerate(array):
        if not 0 <= value < nrange:
            raise ValueError(f"value {value} at position {pos} outside range(0, {nrange})")
        counts[value] += 1

    ptr = [0] * (nrange + 1)
    for v in range(nrange):
        ptr[v + 1] = ptr[v] + counts[v]

    fill = ptr[:-1]
    ind = [0] * len(array)
    for pos, value in enumerate(array):
        ind[fill[value]] = pos
        fill[value] += 1
    return ptr, ind