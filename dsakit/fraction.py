"""A mutable fraction of two integers."""

from __future__ import annotations

import math


class Fraction:
    """Fraction ``numerator / denominator``.

    Fractions are not reduced when built; arithmetic results are. Equality
    compares numerator and denominator as stored, so 3/6 differs from 1/2.
    """

    __slots__ = ("numerator", "denominator")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, numerator: int, denominator: int) -> None:
        if denominator == 0:
            raise ZeroDivisionError("fraction denominator must not be zero")
        self.numerator = numerator
        self.denominator = denominator

    def simplify(self) -> None:
        """Divide out the greatest common divisor when both parts are positive."""
        if min(self.numerator, self.denominator) < 1:
            return
        divisor = math.gcd(self.numerator, self.denominator)
        self.numerator //= divisor
        self.denominator //= divisor

    def add(self, other: Fraction) -> Fraction:
        """Return the simplified sum of this fraction and ``other``."""
        result = Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )
        result.simplify()
        return result

    def increment(self) -> Fraction:
        """Add one to this fraction in place, simplify it and return it."""
        self.numerator += self.denominator
        self.simplify()
        return self

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        total = self.add(other)
        self.numerator, self.denominator = total.numerator, total.denominator
        return self

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        result = Fraction(
            self.numerator * other.numerator, self.denominator * other.denominator
        )
        result.simplify()
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def __str__(self) -> str:
        return f"{self.numerator} / {self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"