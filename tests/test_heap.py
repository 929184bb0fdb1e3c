import pytest
from hypothesis import given
from hypothesis import strategies as st

from edsig.heap import IndexHeap
from edsig.scalar import Scalar


def _scalars(values):
    return [Scalar(v) for v in values]


def test_two_largest_small_example():
    scalars = _scalars([5, 9, 1, 7])
    heap = IndexHeap(scalars, 4)
    assert heap.two_largest() == (1, 3)
    assert len(heap) == 4


@given(st.lists(st.integers(min_value=0, max_value=2**253), min_size=3, max_size=40))
def test_two_largest_matches_sorted(values):
    scalars = _scalars(values)
    heap = IndexHeap(scalars, len(values))
    first, second = heap.two_largest()
    top = sorted(values, reverse=True)
    assert first != second
    assert (values[first], values[second]) == (top[0], top[1])


@given(st.lists(st.integers(min_value=1, max_value=2**64), min_size=3, max_size=30))
def test_root_replaced_keeps_order(values):
    scalars = _scalars(values)
    heap = IndexHeap(scalars, len(values))
    for _ in range(20):
        first, second = heap.two_largest()
        scalars[first] = scalars[first].subtract_unreduced(scalars[second])
        heap.root_replaced()
        current = [s.value for s in scalars]
        new_first, new_second = heap.two_largest()
        top = sorted(current, reverse=True)
        assert (current[new_first], current[new_second]) == (top[0], top[1])


def test_extend_adds_remaining_indices():
    scalars = _scalars([1, 2, 3, 50, 40])
    heap = IndexHeap(scalars, 3)
    assert heap.two_largest()[0] == 2
    heap.extend(5)
    assert len(heap) == 5
    assert heap.two_largest() == (3, 4)


def test_push_single_index():
    scalars = _scalars([4, 3, 2, 100])
    heap = IndexHeap(scalars, 3)
    heap.push(3)
    assert heap.two_largest()[0] == 3


def test_too_short_raises():
    with pytest.raises(ValueError):
        IndexHeap(_scalars([1, 2]), 2)


def test_length_beyond_scalars_raises():
    with pytest.raises(ValueError):
        IndexHeap(_scalars([1, 2, 3]), 4)


def test_extend_beyond_scalars_raises():
    heap = IndexHeap(_scalars([1, 2, 3]), 3)
    with pytest.raises(ValueError):
        heap.extend(5)


def test_push_bad_index_raises():
    heap = IndexHeap(_scalars([1, 2, 3]), 3)
    with pytest.raises(IndexError):
        heap.push(7)