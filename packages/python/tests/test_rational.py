"""
Tests for exact rational arithmetic.
"""

import math
import pytest
from hypothesis import given, strategies as st

from shamir_reconstruct.rational import Rational
from shamir_reconstruct.errors import DivisionByZero, NonIntegerResult


def assert_canonical(r):
    assert r.denominator > 0
    assert math.gcd(abs(r.numerator), r.denominator) == 1


class TestConstruction:
    """Tests for normalization on construction."""

    def test_reduces_by_gcd(self):
        """Should reduce to lowest terms."""
        r = Rational(6, 8)
        assert (r.numerator, r.denominator) == (3, 4)

    def test_moves_sign_to_numerator(self):
        """Should keep the denominator positive."""
        r = Rational(3, -6)
        assert (r.numerator, r.denominator) == (-1, 2)

        r = Rational(-3, -6)
        assert (r.numerator, r.denominator) == (1, 2)

    def test_zero_numerator(self):
        """Zero should normalize to 0/1."""
        r = Rational(0, -5)
        assert (r.numerator, r.denominator) == (0, 1)

    def test_zero_denominator_rejected(self):
        """Should fail immediately on a zero denominator."""
        with pytest.raises(DivisionByZero):
            Rational(1, 0)
        with pytest.raises(DivisionByZero):
            Rational(0, 0)

    def test_huge_values(self):
        """Should handle values far beyond 64 bits."""
        r = Rational(2**300 * 3, 2**298)
        assert r == Rational(12)
        assert r.is_integer()

    def test_value_equality(self):
        """Equal values compare and hash equal."""
        assert Rational(1, 2) == Rational(2, 4)
        assert hash(Rational(1, 2)) == hash(Rational(-3, -6))


class TestArithmetic:
    """Tests for the four operations."""

    def test_add(self):
        assert Rational(1, 2).add(Rational(1, 3)) == Rational(5, 6)

    def test_subtract(self):
        assert Rational(1, 2).subtract(Rational(1, 3)) == Rational(1, 6)

    def test_multiply(self):
        assert Rational(2, 3).multiply(Rational(3, 4)) == Rational(1, 2)

    def test_divide(self):
        assert Rational(1, 2).divide(Rational(1, 4)) == Rational(2)

    def test_divide_by_zero(self):
        """Dividing by a zero value should raise."""
        with pytest.raises(DivisionByZero):
            Rational(1, 2).divide(Rational(0))

    def test_operators_accept_ints(self):
        """Operators should promote plain ints."""
        half = Rational(1, 2)
        assert half + 1 == Rational(3, 2)
        assert 1 - half == Rational(1, 2)
        assert half * 4 == Rational(2)
        assert 1 / half == Rational(2)
        assert -half == Rational(-1, 2)

    def test_operands_are_not_mutated(self):
        """Operations should return new values."""
        a = Rational(1, 2)
        b = Rational(1, 3)
        a + b
        assert a == Rational(1, 2)
        assert b == Rational(1, 3)

    def test_rejects_float_operand(self):
        with pytest.raises(TypeError):
            Rational(1, 2) + 0.5


class TestIntegerConversion:
    """Tests for is_integer / to_integer / str."""

    def test_to_integer(self):
        assert Rational(10, 5).to_integer() == 2

    def test_to_integer_rejects_fraction(self):
        with pytest.raises(NonIntegerResult, match="1/2"):
            Rational(1, 2).to_integer()

    def test_str(self):
        assert str(Rational(-4, 2)) == "-2"
        assert str(Rational(3, 6)) == "1/2"
        assert str(Rational(3, -6)) == "-1/2"


nonzero = st.integers(min_value=-(2**130), max_value=2**130).filter(lambda v: v != 0)
rationals = st.builds(Rational, st.integers(min_value=-(2**130), max_value=2**130), nonzero)


class TestExactness:
    """Every result stays in canonical form."""

    @given(rationals, st.lists(st.tuples(st.sampled_from("+-*/"), rationals), max_size=8))
    def test_operation_chains_stay_reduced(self, start, steps):
        value = start
        assert_canonical(value)
        for op, operand in steps:
            if op == "+":
                value = value.add(operand)
            elif op == "-":
                value = value.subtract(operand)
            elif op == "*":
                value = value.multiply(operand)
            elif operand.numerator != 0:
                value = value.divide(operand)
            assert_canonical(value)
