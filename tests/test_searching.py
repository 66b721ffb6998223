from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, linear_search, matrix_contains

values = st.integers(min_value=-100, max_value=100)


@st.composite
def sorted_matrices(draw):
    rows = draw(st.integers(min_value=1, max_value=6))
    cols = draw(st.integers(min_value=1, max_value=6))
    flat = sorted(draw(st.lists(values, min_size=rows * cols, max_size=rows * cols)))
    return [flat[r * cols:(r + 1) * cols] for r in range(rows)]


@given(sorted_matrices(), values)
def test_matrix_contains_matches_membership(matrix, target):
    flat = [v for row in matrix for v in row]
    assert matrix_contains(matrix, target) == (target in flat)


@given(sorted_matrices())
def test_matrix_contains_finds_every_element(matrix):
    assert all(matrix_contains(matrix, v) for row in matrix for v in row)


def test_matrix_contains_empty_matrix():
    assert matrix_contains([], 3) is False
    assert matrix_contains([[]], 3) is False


@given(st.lists(values, unique=True).map(sorted))
def test_binary_search_finds_each_position(items):
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


@given(st.lists(values).map(sorted), values)
def test_binary_search_result_is_consistent(items, key):
    index = binary_search(items, key)
    if key in items:
        assert items[index] == key
    else:
        assert index == -1


def test_binary_search_single_element():
    assert binary_search([7], 7) == 0
    assert binary_search([7], 8) == -1


@given(st.lists(values), values)
def test_linear_search_returns_first_index(items, key):
    index = linear_search(items, key)
    if key in items:
        assert index == items.index(key)
    else:
        assert index == -1


def test_linear_search_empty():
    assert linear_search([], 1) == -1