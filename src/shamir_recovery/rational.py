"""Exact fractions over arbitrary-precision integers.

Every value is kept in lowest terms with a positive denominator, so repeated
products during interpolation never let numerator/denominator digits grow
past what the reduced value needs.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


class DivisionByZero(ZeroDivisionError):
    """A zero denominator reached a BigRational (e.g. two shares share an x)."""


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the interpreter's int<->str digit cap for the enclosed block."""
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    if get_limit is None:
        yield
        return
    previous = get_limit()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def format_int(value: int) -> str:
    """Decimal rendering of an int of any size."""
    with unlimited_int_digits():
        return str(value)


@dataclass(frozen=True)
class BigRational:
    """Fraction numerator/denominator, normalized at construction."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num, den = self.numerator, self.denominator
        if den == 0:
            raise DivisionByZero(f"Zero denominator for numerator {num}")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(num, den)
        # frozen dataclass: normalized fields are written once, here
        object.__setattr__(self, "numerator", num // g)
        object.__setattr__(self, "denominator", den // g)

    @classmethod
    def from_int(cls, value: int) -> BigRational:
        return cls(value, 1)

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def add(self, other: BigRational) -> BigRational:
        """Sum via cross-multiplication: a/b + c/d = (ad + cb) / bd."""
        return BigRational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: BigRational) -> BigRational:
        return BigRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def negate(self) -> BigRational:
        return BigRational(-self.numerator, self.denominator)

    def floor(self) -> int:
        """Largest integer <= this value (rounds toward -inf for negatives)."""
        return self.numerator // self.denominator

    def __add__(self, other: BigRational | int) -> BigRational:
        if isinstance(other, int):
            other = BigRational.from_int(other)
        if not isinstance(other, BigRational):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __mul__(self, other: BigRational | int) -> BigRational:
        if isinstance(other, int):
            other = BigRational.from_int(other)
        if not isinstance(other, BigRational):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> BigRational:
        return self.negate()

    def __str__(self) -> str:
        if self.is_integer:
            return format_int(self.numerator)
        return f"{format_int(self.numerator)}/{format_int(self.denominator)}"


ZERO = BigRational(0)
ONE = BigRational(1)
