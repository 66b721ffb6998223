"""Polynomials with integer coefficients indexed by degree."""

from __future__ import annotations

import operator
from collections.abc import Callable
from itertools import zip_longest

_INITIAL_CAPACITY = 10


class Polynomial:
    """Polynomial stored as a list of coefficients, one per degree.

    Room for ten degrees is made at first; the list doubles as needed.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._coefficients = [0] * _INITIAL_CAPACITY

    def set_coefficient(self, degree: int, coefficient: int) -> None:
        """Set the coefficient of x**degree."""
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        capacity = len(self._coefficients)
        if degree >= capacity:
            size = capacity * 2
            while size <= degree:
                size *= 2
            self._coefficients.extend([0] * (size - capacity))
        self._coefficients[degree] = coefficient

    def __getitem__(self, degree: int) -> int:
        """Return the coefficient of x**degree, 0 past the stored terms."""
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        return self._coefficients[degree] if degree < len(self._coefficients) else 0

    def copy(self) -> Polynomial:
        """Return an independent copy."""
        duplicate = Polynomial()
        duplicate._coefficients = list(self._coefficients)
        return duplicate

    def _combine(self, other: Polynomial, op: Callable[[int, int], int]) -> Polynomial:
        result = Polynomial()
        pairs = zip_longest(self._coefficients, other._coefficients, fillvalue=0)
        for degree, (x, y) in enumerate(pairs):
            result.set_coefficient(degree, op(x, y))
        return result

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        for i, y in enumerate(other._coefficients):
            if not y:
                continue
            for j, x in enumerate(self._coefficients):
                if x:
                    result.set_coefficient(i + j, result[i + j] + x * y)
        return result

    def _terms(self) -> list[int]:
        terms = list(self._coefficients)
        while terms and terms[-1] == 0:
            terms.pop()
        return terms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms() == other._terms()

    def __str__(self) -> str:
        return " ".join(
            f"{coefficient}x{degree}"
            for degree, coefficient in enumerate(self._coefficients)
            if coefficient
        )

    def __repr__(self) -> str:
        return f"Polynomial({self._terms()!r})"