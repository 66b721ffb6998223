import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    k_sorted_sort,
    merge_sorted,
    selection_sort,
    sort_012,
    sort_binary,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000))


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, selection_sort])
@given(items=int_lists)
def test_ascending_sorts_match_sorted(sort, items):
    original = list(items)
    assert sort(items) == sorted(items)
    assert items == original


@given(int_lists)
def test_heap_sort_is_descending(items):
    original = list(items)
    assert heap_sort(items) == sorted(items, reverse=True)
    assert items == original


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_012_sorts(items):
    assert sort_012(items) == sorted(items)


@given(st.lists(st.integers(min_value=-5, max_value=5)))
def test_sort_012_keeps_elements_and_places_zeros_and_twos(items):
    result = sort_012(items)
    assert sorted(result) == sorted(items)
    zeros = items.count(0)
    twos = items.count(2)
    assert result[:zeros] == [0] * zeros
    assert result[len(result) - twos:] == [2] * twos


@given(st.lists(st.sampled_from([0, 1])))
def test_sort_binary_sorts(items):
    assert sort_binary(items) == sorted(items)


@given(st.lists(st.integers(min_value=-3, max_value=3)))
def test_sort_binary_counts_zeros(items):
    result = sort_binary(items)
    assert len(result) == len(items)
    assert result.count(0) == items.count(0)
    assert set(result) <= {0, 1}
    assert result == sorted(result)


@given(int_lists, int_lists)
def test_merge_sorted_matches_sorted_concatenation(a, b):
    a, b = sorted(a), sorted(b)
    assert merge_sorted(a, b) == sorted(a + b)


def test_merge_sorted_prefers_first_on_ties():
    first, second = [1.0, 2], [1, 2.0]
    merged = merge_sorted(first, second)
    assert merged == [1, 1, 2, 2]
    assert merged[0] is first[0]
    assert merged[2] is first[1]


@given(int_lists.filter(bool))
def test_k_sorted_sort_with_full_window(items):
    assert k_sorted_sort(items, len(items)) == sorted(items, reverse=True)


@given(st.data(), st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1), st.integers(min_value=1, max_value=6))
def test_k_sorted_sort_recovers_descending_order(data, items, k):
    k = min(k, len(items))
    descending = sorted(items, reverse=True)
    shuffled = []
    for start in range(0, len(descending), k):
        block = descending[start:start + k]
        shuffled.extend(data.draw(st.permutations(block)))
    assert k_sorted_sort(shuffled, k) == descending


def test_k_sorted_sort_empty():
    assert k_sorted_sort([], 3) == []


@pytest.mark.parametrize("k", [0, -1, 4])
def test_k_sorted_sort_rejects_bad_window(k):
    with pytest.raises(ValueError):
        k_sorted_sort([3, 2, 1], k)