"""Number utilities: digit tricks, base conversion, sequences and primes."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import zip_longest

_HEX_DIGITS = "0123456789ABCDEF"
_HEX_VALUES = {char: value for value, char in enumerate(_HEX_DIGITS)}


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of ``n``, least significant first; nothing if n <= 0."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def is_armstrong(n: int) -> bool:
    """Return True if the sum of the cubes of the digits of ``n`` equals ``n``."""
    return sum(digit**3 for digit in _digits(n)) == n


def any_base_to_decimal(n: int, base: int) -> int:
    """Read the decimal digits of ``n`` as a number written in ``base``."""
    return sum(digit * base**place for place, digit in enumerate(_digits(n)))


def hexadecimal_to_decimal(text: str) -> int:
    """Convert an upper-case hexadecimal string to an integer.

    Characters that are not hexadecimal digits count as zero.
    """
    value = 0
    for char in text:
        value = value * 16 + _HEX_VALUES.get(char, 0)
    return value


def decimal_to_base(n: int, base: int) -> int:
    """Write ``n`` in ``base`` and return those digits read as a decimal integer."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    result, place = 0, 1
    while n > 0:
        n, digit = divmod(n, base)
        result += digit * place
        place *= 10
    return result


def decimal_to_hexadecimal(n: int) -> str:
    """Return the upper-case hexadecimal form of ``n``; empty for n <= 0."""
    digits = []
    while n > 0:
        n, digit = divmod(n, 16)
        digits.append(_HEX_DIGITS[digit])
    return "".join(reversed(digits))


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; 0 for n <= 0."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def add_binary_numbers(a: int, b: int) -> int:
    """Add two binary numbers written with decimal digits, e.g. 101 + 11."""
    result, carry, place = 0, 0, 1
    for x, y in zip_longest(_digits(a), _digits(b), fillvalue=0):
        carry, bit = divmod(x % 2 + y % 2 + carry, 2)
        result += bit * place
        place *= 10
    if carry:
        result += place
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting from 0."""
    terms = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return terms


def factorial(n: int) -> int:
    """Return n!; values below 2 give 1."""
    return math.prod(range(2, n + 1))


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    return [[math.comb(row, col) for col in range(row + 1)] for row in range(n)]


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def primes_between(a: int, b: int) -> list[int]:
    """Return the primes in the closed range [a, b] in increasing order."""
    return [n for n in range(a, b + 1) if is_prime(n)]