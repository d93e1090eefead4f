"""
Exact rational arithmetic for Shamir reconstruction.

Share values are cryptographic-size integers, so interpolation has to be
loss-free: every value is kept as a fully reduced fraction of Python ints
(arbitrary precision, no overflow) and never touches floating point.
"""

import math
from dataclasses import dataclass
from typing import Union

from .errors import DivisionByZero, NonIntegerResult


@dataclass(frozen=True)
class Rational:
    """
    Immutable fraction kept in canonical form.

    Invariants after construction:
    - denominator > 0
    - gcd(|numerator|, denominator) == 1
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        num, den = self.numerator, self.denominator
        if den == 0:
            raise DivisionByZero("Division by zero")
        if den < 0:
            num, den = -num, -den
        # gcd(0, 0) counts as 1
        g = math.gcd(num, den) or 1
        object.__setattr__(self, "numerator", num // g)
        object.__setattr__(self, "denominator", den // g)

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    def add(self, other: "Rational") -> "Rational":
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        return Rational(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "Rational") -> "Rational":
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        if other.numerator == 0:
            raise DivisionByZero("Division by zero")
        return Rational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_integer(self) -> int:
        """Return the value as an int, or raise NonIntegerResult."""
        if self.denominator != 1:
            raise NonIntegerResult(f"Not an integer result: {self}")
        return self.numerator

    # Operator sugar; plain ints are promoted.

    def __add__(self, other: Union["Rational", int]) -> "Rational":
        return self.add(_coerce(other))

    __radd__ = __add__

    def __sub__(self, other: Union["Rational", int]) -> "Rational":
        return self.subtract(_coerce(other))

    def __rsub__(self, other: Union["Rational", int]) -> "Rational":
        return _coerce(other).subtract(self)

    def __mul__(self, other: Union["Rational", int]) -> "Rational":
        return self.multiply(_coerce(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Rational", int]) -> "Rational":
        return self.divide(_coerce(other))

    def __rtruediv__(self, other: Union["Rational", int]) -> "Rational":
        return _coerce(other).divide(self)

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _coerce(value: Union[Rational, int]) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value, 1)
    raise TypeError(f"unsupported operand type for Rational: {type(value).__name__}")
