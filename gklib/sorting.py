"""In-place sorting of plain values and of key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence

from gklib.qsort import quicksort


@dataclass
class KeyValue:
    """A key paired with a value; sorting looks at the key only."""

    key: Any
    val: Any


def sort_ascending(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in increasing order."""
    quicksort(values, lambda a, b: a < b)


def sort_descending(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in decreasing order."""
    quicksort(values, lambda a, b: a > b)


def sort_kv_ascending(pairs: MutableSequence[KeyValue]) -> None:
    """Sort key/value pairs in place by increasing key."""
    quicksort(pairs, lambda a, b: a.key < b.key)


def sort_kv_descending(pairs: MutableSequence[KeyValue]) -> None:
    """Sort key/value pairs in place by decreasing key."""
    quicksort(pairs, lambda a, b: a.key > b.key)