"""
Unit tests for generator primitives: fractions, number theory,
carry/borrow detection and formatting.

Run: pytest tests/unit/test_fractions_and_utils.py -v
"""

import random

import pytest

from kumon_qa.generators.models import FractionAnswer
from kumon_qa.generators.utils import (
    add_fractions,
    addition_no_carry,
    calculate_difficulty,
    compare_fractions,
    divide_fractions,
    evaluate_polynomial,
    factor_pairs,
    format_binomial,
    format_horizontal,
    format_linear,
    format_polynomial,
    format_sequence,
    format_vertical,
    has_borrow,
    has_carry,
    is_prime,
    lcm,
    multiply_fractions,
    prime_factors,
    simplify_fraction,
    subtract_fractions,
    subtraction_no_borrow,
)


class TestFractionAnswer:
    """FractionAnswer value type."""

    def test_zero_denominator_rejected(self):
        """A zero denominator is never a valid answer."""
        with pytest.raises(ValueError):
            FractionAnswer(1, 0)

    def test_equivalence_by_cross_multiplication(self):
        """12/6 and 2/1 are the same answer."""
        assert FractionAnswer(12, 6).equals(FractionAnswer(2, 1))
        assert not FractionAnswer(1, 3).equals(FractionAnswer(33, 100))

    def test_str_and_dict(self):
        f = FractionAnswer(3, 4)
        assert str(f) == "3/4"
        assert f.to_dict() == {"numerator": 3, "denominator": 4}


class TestFractionArithmetic:
    """Every fraction operation reduces its result."""

    def test_simplify(self):
        assert simplify_fraction(6, 8) == FractionAnswer(3, 4)
        assert simplify_fraction(0, 5) == FractionAnswer(0, 1)

    def test_simplify_moves_sign_to_numerator(self):
        assert simplify_fraction(3, -6) == FractionAnswer(-1, 2)

    def test_simplify_zero_denominator(self):
        with pytest.raises(ValueError):
            simplify_fraction(1, 0)

    def test_add(self):
        assert add_fractions(FractionAnswer(1, 4), FractionAnswer(1, 4)) == FractionAnswer(1, 2)
        assert add_fractions(FractionAnswer(1, 2), FractionAnswer(1, 3)) == FractionAnswer(5, 6)

    def test_subtract(self):
        assert subtract_fractions(FractionAnswer(3, 4), FractionAnswer(1, 4)) == FractionAnswer(1, 2)

    def test_multiply(self):
        assert multiply_fractions(FractionAnswer(2, 3), FractionAnswer(3, 4)) == FractionAnswer(1, 2)

    def test_divide(self):
        assert divide_fractions(FractionAnswer(1, 2), FractionAnswer(1, 4)) == FractionAnswer(2, 1)

    def test_divide_by_zero_fraction(self):
        with pytest.raises(ZeroDivisionError):
            divide_fractions(FractionAnswer(1, 2), FractionAnswer(0, 3))

    def test_compare(self):
        assert compare_fractions(FractionAnswer(1, 2), FractionAnswer(1, 3)) == 1
        assert compare_fractions(FractionAnswer(2, 4), FractionAnswer(1, 2)) == 0
        assert compare_fractions(FractionAnswer(1, 5), FractionAnswer(1, 4)) == -1


class TestNumberTheory:
    def test_prime_factors(self):
        assert prime_factors(60) == [2, 2, 3, 5]
        assert prime_factors(13) == [13]

    def test_is_prime(self):
        assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_factor_pairs(self):
        assert factor_pairs(12) == [(1, 12), (2, 6), (3, 4)]

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(0, 6) == 0


class TestCarryAndBorrow:
    def test_has_carry(self):
        assert has_carry(47, 35)
        assert not has_carry(42, 35)

    def test_has_borrow(self):
        assert has_borrow(52, 38)
        assert not has_borrow(58, 32)

    def test_addition_no_carry_pairs(self):
        rng = random.Random(7)
        for _ in range(20):
            a, b = addition_no_carry(rng, 99, 99)
            assert not has_carry(a, b)

    def test_subtraction_no_borrow_pairs(self):
        rng = random.Random(7)
        for _ in range(20):
            a, b = subtraction_no_borrow(rng, 987, 500)
            assert not has_borrow(a, b)
            assert 1 <= b <= 500


class TestDifficulty:
    def test_clamped_to_scale(self):
        assert calculate_difficulty("7A", 1) == 1
        assert calculate_difficulty("XS", 200, [5000]) == 10

    def test_grows_with_operand_size(self):
        assert calculate_difficulty("C", 20, [500, 3]) > calculate_difficulty("C", 20, [5, 3])


class TestFormatting:
    def test_horizontal(self):
        assert format_horizontal(47, "addition", 35) == "47 + 35 = ___"
        assert format_horizontal(-3, "multiplication", 4) == "(-3) × 4 = ___"

    def test_vertical_has_no_equals(self):
        text = format_vertical(47, "addition", 35)
        lines = text.splitlines()
        assert lines[0].strip() == "47"
        assert lines[1].startswith("+")
        assert "=" not in text

    def test_sequence(self):
        assert format_sequence([3, 4, 5, 6], 2) == "3, 4, ___, 6"

    def test_polynomial(self):
        assert format_polynomial([2, -3, 1]) == "2x^2 - 3x + 1"
        assert format_polynomial([1, 0, -4]) == "x^2 - 4"
        assert format_polynomial([-1, 0]) == "-x"
        assert format_polynomial([0, 0]) == "0"

    def test_evaluate_polynomial(self):
        assert evaluate_polynomial([2, -3, 1], 2) == 3

    def test_linear(self):
        assert format_linear([(3, "x"), (-2, "y"), (5, "")]) == "3x - 2y + 5"
        assert format_linear([(-1, "x"), (0, "")]) == "-x"

    def test_binomial(self):
        assert format_binomial(3) == "(x - 3)"
        assert format_binomial(-2) == "(x + 2)"
        assert format_binomial(0) == "x"
