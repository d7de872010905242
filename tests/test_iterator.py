import pytest

from heap_ import Heap
from iterator_ import (
    ConcurrentModificationError,
    HeapIterator,
    IterState,
    UnsupportedOperationError,
)


def make_heap(values, capacity=10):
    heap = Heap(capacity)
    for value in values:
        heap.insert(value)
    return heap


def test_iterates_in_array_order():
    heap = make_heap([5, 3, 3, 8, 1])
    # Raw slot layout, not ascending order.
    assert list(heap) == [1, 3, 3, 8, 5]
    assert list(heap.iterator()) == [1, 3, 3, 8, 5]


def test_empty_heap_iterates_nothing():
    heap = Heap(3)
    it = heap.iterator()
    assert not it.has_next()
    assert list(it) == []


def test_iterator_is_not_restartable():
    heap = make_heap([2, 1])
    it = iter(heap)
    assert isinstance(it, HeapIterator)
    assert list(it) == [1, 2]
    assert list(it) == []
    assert list(iter(heap)) == [1, 2]


def test_remove_invalidates_iterator():
    heap = make_heap([3, 1, 2])
    it = heap.iterator()
    heap.remove()
    with pytest.raises(ConcurrentModificationError):
        next(it)


@pytest.mark.parametrize(
    'mutate',
    [
        lambda heap: heap.insert(0),
        lambda heap: heap.remove(),
        lambda heap: heap.delete(2),
        lambda heap: heap.clear(),
    ],
    ids=['insert', 'remove', 'delete', 'clear'],
)
def test_any_mutation_invalidates_iterator(mutate):
    heap = make_heap([3, 1, 2])
    it = heap.iterator()
    assert next(it) == 1
    mutate(heap)
    with pytest.raises(ConcurrentModificationError):
        it.has_next()
    # Still invalid on later checks.
    with pytest.raises(ConcurrentModificationError):
        next(it)


def test_failed_mutations_keep_iterator_valid():
    heap = make_heap([1, 2], capacity=2)
    it = heap.iterator()
    assert heap.insert(3) is False
    assert heap.delete(42) is False
    assert heap.contains(1)
    assert heap.peek() == 1
    assert list(it) == [1, 2]


def test_mutation_after_exhaustion_is_still_detected():
    heap = make_heap([1])
    it = heap.iterator()
    assert list(it) == [1]
    heap.insert(2)
    with pytest.raises(ConcurrentModificationError):
        it.has_next()


def test_concurrent_modification_is_a_runtime_error():
    heap = make_heap([1, 2])
    it = heap.iterator()
    heap.clear()
    with pytest.raises(RuntimeError):
        list(it)


def test_remove_through_iterator_is_unsupported():
    heap = make_heap([1, 2])
    it = heap.iterator()
    with pytest.raises(UnsupportedOperationError):
        it.remove()
    assert heap.size() == 2
    assert list(it) == [1, 2]


def test_next_step_reports_values_then_end():
    heap = make_heap([2, 1])
    it = heap.iterator()
    assert it.next_step() == (IterState.VALUE, 1)
    assert it.next_step() == (IterState.VALUE, 2)
    assert it.next_step() == (IterState.END, None)
    assert it.next_step() == (IterState.END, None)


def test_next_step_reports_invalidation():
    heap = make_heap([2, 1, 3])
    it = heap.iterator()
    assert it.next_step() == (IterState.VALUE, 1)
    heap.remove()
    assert it.next_step() == (IterState.INVALIDATED, None)
    assert not it.is_valid()
