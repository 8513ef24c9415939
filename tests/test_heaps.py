import random

import numpy as np
import pytest

from heaps import BinaryHeap, MaxHeap, MinHeap, MIN, MAX


def random_heap(orientation, n, seed):
    rng = random.Random(seed)
    heap = BinaryHeap(orientation=orientation)
    for v in rng.sample(range(10 * n), n):
        heap.insert(v)
    return heap


def test_insert_layout():
    heap = MinHeap()
    for v in [3, 1, 6, 5, 2, 4]:
        heap.insert(v)
    assert heap.to_list() == [1, 2, 4, 5, 3, 6]
    assert heap.peek_top() == 1
    assert heap.is_valid()


def test_empty_heap_returns_none():
    for heap in (MinHeap(), MaxHeap()):
        assert heap.is_empty()
        assert heap.size() == 0
        assert heap.peek_top() is None
        assert heap.peek_opposite() is None
        assert heap.extract_top() is None
        assert heap.extract_opposite() is None
        assert heap.search(1) is None


def test_unknown_orientation():
    with pytest.raises(ValueError):
        BinaryHeap(orientation="median")


@pytest.mark.parametrize("orientation", [MIN, MAX])
def test_sorted_extraction(orientation):
    values = np.random.default_rng(0).permutation(500).tolist()
    heap = BinaryHeap(orientation=orientation)
    for v in values:
        heap.insert(v)
    out = [heap.extract_top() for _ in range(len(values))]
    assert out == sorted(values, reverse=orientation == MAX)
    assert heap.is_empty()


def test_heapify_copies_input():
    data = [5, 9, 1, 7, 3]
    heap = MaxHeap(data)
    assert data == [5, 9, 1, 7, 3]
    assert heap.peek_top() == 9
    assert heap.is_valid()


@pytest.mark.parametrize("orientation", [MIN, MAX])
def test_invariant_under_mixed_operations(orientation):
    rng = random.Random(7)
    heap = BinaryHeap(orientation=orientation)
    for _ in range(2000):
        op = rng.random()
        if op < 0.5 or heap.is_empty():
            heap.insert(rng.uniform(-100, 100))
        elif op < 0.65:
            heap.extract_top()
        elif op < 0.8:
            heap.delete_at(rng.randrange(len(heap)))
        else:
            heap.change_key(rng.randrange(len(heap)), rng.uniform(-100, 100))
        assert heap.is_valid()


@pytest.mark.parametrize("orientation", [MIN, MAX])
def test_delete_paths_agree(orientation):
    for index in range(40):
        a = random_heap(orientation, 40, seed=index)
        b = random_heap(orientation, 40, seed=index)
        assert a.delete_at(index) == b.delete_at_alternate(index)
        assert a.is_valid() and b.is_valid()
        assert sorted(a) == sorted(b)
        assert len(a) == len(b) == 39


def test_delete_alternate_with_stored_infinity():
    heap = MinHeap([float("-inf"), 1, 2, 3])
    assert heap.delete_at_alternate(3) == 3
    assert sorted(heap) == [float("-inf"), 1, 2]
    assert heap.is_valid()


def test_delete_at_last_slot_and_single_element():
    heap = MinHeap([1, 2, 3])
    assert heap.delete_at(2) == 3
    assert heap.to_list() == [1, 2]
    single = MaxHeap([4])
    assert single.delete_at(0) == 4
    assert single.is_empty()


@pytest.mark.parametrize("call", ["delete_at", "delete_at_alternate"])
def test_delete_bad_index(call):
    heap = MinHeap([1, 2, 3])
    for index in (-1, 3, 10):
        with pytest.raises(IndexError):
            getattr(heap, call)(index)
    with pytest.raises(IndexError):
        getattr(MinHeap(), call)(0)


def test_peeks_do_not_mutate():
    heap = random_heap(MIN, 50, seed=3)
    before = heap.to_list()
    assert heap.peek_top() == min(before)
    assert heap.peek_opposite() == max(before)
    assert heap.to_list() == before
    assert heap.size() == 50

    heap = random_heap(MAX, 50, seed=3)
    before = heap.to_list()
    assert heap.peek_top() == max(before)
    assert heap.peek_opposite() == min(before)
    assert heap.to_list() == before


def test_extract_opposite():
    heap = MinHeap([4, 8, 1, 9, 3])
    assert heap.extract_opposite() == 9
    assert sorted(heap) == [1, 3, 4, 8]
    assert heap.is_valid()
    heap = MaxHeap([4, 8, 1, 9, 3])
    assert heap.extract_opposite() == 1
    assert heap.is_valid()


def test_search_follows_greedy_path():
    heap = MinHeap([3, 1, 6, 5, 2, 4])
    assert heap.search(1) == 0
    assert heap.search(5) == 3
    assert heap.search(7) is None


def test_search_misses_value_off_the_greedy_path():
    heap = MinHeap([1, 3, 4, 3.5])
    assert heap.to_list() == [1, 3, 4, 3.5]
    # the descent commits to 3 -> 3.5 and never looks at the right child of the root
    assert heap.search(4) is None
    assert heap.search(4, exhaustive=True) == 2
    assert heap.delete_value(4) is None
    assert len(heap) == 4


def test_search_max_heap():
    heap = MaxHeap([10, 7, 9, 1, 2])
    assert heap.search(7) == heap.to_list().index(7)
    assert heap.search(9, exhaustive=True) == heap.to_list().index(9)


def test_delete_value():
    heap = MinHeap([3, 1, 6, 5, 2, 4])
    assert heap.delete_value(5) == 5
    assert sorted(heap) == [1, 2, 3, 4, 6]
    assert heap.is_valid()
    assert heap.delete_value(42) is None
    assert len(heap) == 5


def test_decrease_key():
    heap = MinHeap([3, 1, 6, 5, 2, 4])
    heap.decrease_key(5, 0)
    assert heap.peek_top() == 0
    assert heap.is_valid()
    with pytest.raises(IndexError):
        heap.decrease_key(6, -1)

    heap = MaxHeap([3, 1, 6, 5, 2, 4])
    heap.increase_key(len(heap) - 1, 100)
    assert heap.peek_top() == 100
    assert heap.is_valid()


def test_change_key_both_directions():
    heap = MinHeap([3, 1, 6, 5, 2, 4])
    heap.change_key(0, 10)
    assert heap.peek_top() == 2
    assert heap.is_valid()
    heap.change_key(len(heap) - 1, -5)
    assert heap.peek_top() == -5
    assert heap.is_valid()
    assert sorted(heap) == sorted([10, 2, 3, 4, 5, -5])
    with pytest.raises(IndexError):
        heap.change_key(-1, 0)


def test_clear_and_container_protocol():
    heap = MaxHeap([2, 8, 5])
    assert len(heap) == 3
    assert heap[0] == 8
    assert sorted(iter(heap)) == [2, 5, 8]
    assert "MaxHeap" in repr(heap)
    heap.clear()
    assert heap.is_empty()
