import pytest
from hypothesis import given
from hypothesis import strategies as st

from gklib.blas import (
    argmax,
    argmax_n,
    argmin,
    array2csr,
    axpy,
    dot,
    incset,
    norm2,
    scale,
    vmax,
    vmin,
    vsum,
)

ints = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=30)


def test_incset():
    assert incset(4, 3) == [3, 4, 5, 6]
    assert incset(0, 7) == []


def test_max_min():
    assert vmax([3, 9, 2]) == 9
    assert vmin([3, 9, 2]) == 2
    assert vmax([]) == 0
    assert vmin([]) == 0


def test_argmax_argmin_first_occurrence():
    x = [1, 5, 5, 0, 0]
    assert x[argmax(x)] == 5
    assert argmax(x) == x.index(5)
    assert argmin(x) == x.index(0)


def test_argmax_empty_is_zero():
    assert argmax([]) == 0
    assert argmin([]) == 0


@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=25))
def test_argmax_n_orders_by_value(x):
    ordered = sorted(x, reverse=True)
    for k in range(1, len(x) + 1):
        assert x[argmax_n(x, k)] == ordered[k - 1]


def test_argmax_n_first_is_max():
    x = [4, 10, 7]
    assert argmax_n(x, 1) == argmax(x)


@pytest.mark.parametrize("k", [0, 4])
def test_argmax_n_bad_k(k):
    with pytest.raises(IndexError):
        argmax_n([4, 10, 7], k)


def test_vsum_value():
    assert vsum([1, 2, 3]) == 6


@given(ints, ints)
def test_vsum_additive(x, y):
    assert vsum(x + y) == vsum(x) + vsum(y)


@given(ints)
def test_scale_identity_and_composition(x):
    assert scale(x, 1) == x
    assert scale(scale(x, 2), 3) == scale(x, 6)


def test_norm2():
    assert norm2([3, 4]) == 5.0
    assert norm2([]) == 0.0
    assert norm2([0, 0]) == 0.0


@given(st.lists(st.floats(min_value=-100, max_value=100), max_size=20))
def test_dot_self_is_norm_squared(x):
    assert dot(x, x) == pytest.approx(norm2(x) ** 2, rel=1e-9, abs=1e-9)


def test_dot_length_mismatch():
    with pytest.raises(ValueError):
        dot([1, 2], [1])


@given(ints)
def test_axpy_identities(x):
    zeros = [0] * len(x)
    assert axpy(0, x, x) == x
    assert axpy(1, x, zeros) == x
    assert axpy(-1, x, x) == zeros


def test_axpy_length_mismatch():
    with pytest.raises(ValueError):
        axpy(2, [1, 2, 3], [1, 2])


@given(st.lists(st.integers(min_value=0, max_value=4), max_size=30))
def test_array2csr_groups_positions(array):
    ptr, ind = array2csr(array, 5)
    assert ptr[0] == 0
    assert ptr[-1] == len(array)
    assert sorted(ind) == list(range(len(array)))
    for v in range(5):
        group = ind[ptr[v] : ptr[v + 1]]
        assert group == [i for i, a in enumerate(array) if a == v]


def test_array2csr_out_of_range():
    with pytest.raises(ValueError):
        array2csr([0, 3], 3)
    with pytest.raises(ValueError):
        array2csr([-1], 3)