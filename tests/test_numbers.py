import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from dsakit.numbers import (
    add_binary_numbers,
    any_base_to_decimal,
    decimal_to_base,
    decimal_to_hexadecimal,
    factorial,
    fibonacci,
    hexadecimal_to_decimal,
    is_armstrong,
    is_prime,
    pascal_triangle,
    primes_between,
    reverse_number,
)

naturals = st.integers(min_value=0, max_value=10**6)


def test_armstrong_numbers_below_thousand():
    assert [n for n in range(1000) if is_armstrong(n)] == [0, 1, 153, 370, 371, 407]


def test_negative_numbers_are_not_armstrong():
    assert not any(is_armstrong(n) for n in range(-500, 0))


@given(naturals)
def test_binary_round_trip(n):
    assert any_base_to_decimal(decimal_to_base(n, 2), 2) == n


@given(naturals, st.integers(min_value=2, max_value=10))
def test_any_base_round_trip(n, base):
    assert any_base_to_decimal(decimal_to_base(n, base), base) == n


@given(naturals, st.integers(min_value=2, max_value=10))
def test_decimal_to_base_uses_only_valid_digits(n, base):
    assert all(int(d) < base for d in str(decimal_to_base(n, base)))


@pytest.mark.parametrize("base", [1, 0, -3])
def test_decimal_to_base_rejects_small_base(base):
    with pytest.raises(ValueError):
        decimal_to_base(10, base)


@given(naturals)
def test_hexadecimal_round_trip(n):
    assert hexadecimal_to_decimal(decimal_to_hexadecimal(n)) == n


@given(st.integers(min_value=1, max_value=10**9))
def test_hexadecimal_form_is_canonical(n):
    text = decimal_to_hexadecimal(n)
    assert set(text) <= set("0123456789ABCDEF")
    assert text[0] != "0"


def test_hexadecimal_to_decimal_example():
    assert hexadecimal_to_decimal("FF") == 255


@given(st.integers(min_value=1, max_value=10**9))
def test_reverse_number_is_involution_without_trailing_zero(n):
    assume(n % 10 != 0)
    assert reverse_number(reverse_number(n)) == n


@given(st.integers(min_value=1, max_value=10**6))
def test_reverse_number_drops_trailing_zero(n):
    assert reverse_number(n * 10) == reverse_number(n)


@given(naturals, naturals)
def test_add_binary_numbers_matches_integer_sum(x, y):
    a, b = decimal_to_base(x, 2), decimal_to_base(y, 2)
    total = add_binary_numbers(a, b)
    assert any_base_to_decimal(total, 2) == x + y
    assert total == decimal_to_base(x + y, 2)


@given(naturals, naturals)
def test_add_binary_numbers_commutes(x, y):
    a, b = decimal_to_base(x, 2), decimal_to_base(y, 2)
    assert add_binary_numbers(a, b) == add_binary_numbers(b, a)


def test_fibonacci_recurrence():
    seq = fibonacci(25)
    assert len(seq) == 25
    assert seq[:2] == [0, 1]
    assert all(c == a + b for a, b, c in zip(seq, seq[1:], seq[2:]))


@given(st.integers(min_value=0, max_value=50))
def test_fibonacci_prefixes_agree(n):
    assert fibonacci(n) == fibonacci(n + 5)[:n]


@given(st.integers(min_value=1, max_value=40))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_zero_equals_factorial_of_one():
    assert factorial(0) == factorial(1) == 1


@given(st.integers(min_value=1, max_value=30))
def test_pascal_triangle_invariants(n):
    rows = pascal_triangle(n)
    assert len(rows) == n
    for index, row in enumerate(rows):
        assert len(row) == index + 1
        assert sum(row) == 2**index
        assert row == row[::-1]
    for above, row in zip(rows, rows[1:]):
        assert row[1:-1] == [x + y for x, y in zip(above, above[1:])]


def test_pascal_triangle_entries_are_factorial_ratios():
    for i, row in enumerate(pascal_triangle(12)):
        for j, value in enumerate(row):
            assert value * factorial(i - j) * factorial(j) == factorial(i)


def test_primes_up_to_thirty():
    assert primes_between(1, 30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_numbers_below_two_are_not_prime():
    assert not any(is_prime(n) for n in range(-10, 2))


@given(st.integers(min_value=2, max_value=1000), st.integers(min_value=2, max_value=1000))
def test_products_are_not_prime(x, y):
    assert not is_prime(x * y)


@given(st.integers(min_value=-20, max_value=300), st.integers(min_value=0, max_value=300))
def test_primes_between_agrees_with_is_prime(a, width):
    b = a + width
    primes = primes_between(a, b)
    assert primes == [n for n in range(a, b + 1) if is_prime(n)]
    assert primes == sorted(set(primes))