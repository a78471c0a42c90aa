from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from gklib.sorting import (
    KeyValue,
    sort_ascending,
    sort_descending,
    sort_kv_ascending,
    sort_kv_descending,
)


@given(st.lists(st.integers()))
def test_sort_ascending_matches_sorted(values):
    expected = sorted(values)
    sort_ascending(values)
    assert values == expected


@given(st.lists(st.floats(allow_nan=False)))
def test_sort_descending_matches_reverse_sorted(values):
    expected = sorted(values, reverse=True)
    sort_descending(values)
    assert values == expected


def test_sort_small_list():
    values = [3, 1, 2]
    sort_ascending(values)
    assert values == [1, 2, 3]


def test_sort_empty_list():
    values = []
    sort_descending(values)
    assert values == []


def test_sort_strings_ascending():
    values = ["pear", "apple", "fig", "banana", "kiwi", "plum", "date", "lime", "cherry", "grape"]
    expected = sorted(values)
    sort_ascending(values)
    assert values == expected


@given(st.lists(st.tuples(st.integers(-50, 50), st.integers())))
def test_kv_ascending_orders_keys_and_keeps_pairs(raw):
    pairs = [KeyValue(k, v) for k, v in raw]
    sort_kv_ascending(pairs)
    keys = [p.key for p in pairs]
    assert keys == sorted(k for k, _ in raw)
    assert Counter((p.key, p.val) for p in pairs) == Counter(raw)


@given(st.lists(st.tuples(st.floats(allow_nan=False), st.integers())))
def test_kv_descending_orders_keys_and_keeps_pairs(raw):
    pairs = [KeyValue(k, v) for k, v in raw]
    sort_kv_descending(pairs)
    keys = [p.key for p in pairs]
    assert keys == sorted((k for k, _ in raw), reverse=True)
    assert Counter((p.key, p.val) for p in pairs) == Counter(raw)


def test_kv_string_keys():
    pairs = [KeyValue("b", 1), KeyValue("a", 2), KeyValue("c", 3)]
    sort_kv_ascending(pairs)
    assert [(p.key, p.val) for p in pairs] == [("a", 2), ("b", 1), ("c", 3)]