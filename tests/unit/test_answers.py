"""
Unit tests for answer parsing and student-answer checking.

Run: pytest tests/unit/test_answers.py -v
"""

from fractions import Fraction

from kumon_qa.generators.answers import (
    answer_to_fraction,
    answer_to_number,
    check_answer,
    parse_fraction_text,
    parse_remainder,
)
from kumon_qa.generators.models import FractionAnswer


class TestParsing:
    def test_parse_remainder(self):
        assert parse_remainder("7 R 3") == (7, 3)
        assert parse_remainder("7r3") == (7, 3)
        assert parse_remainder("7") is None
        assert parse_remainder(7) is None

    def test_parse_fraction_text(self):
        assert parse_fraction_text("12/6") == (12, 6)
        assert parse_fraction_text(" -3 / 4 ") == (-3, 4)
        assert parse_fraction_text("1/0") is None
        assert parse_fraction_text("x/2") is None

    def test_answer_to_fraction(self):
        assert answer_to_fraction(5) == Fraction(5)
        assert answer_to_fraction(0.1) == Fraction(1, 10)
        assert answer_to_fraction(FractionAnswer(6, 8)) == Fraction(3, 4)
        assert answer_to_fraction("3/4") == Fraction(3, 4)
        assert answer_to_fraction("7 R 3") == Fraction(7)
        assert answer_to_fraction("x = 4") is None

    def test_answer_to_number_without_fractions(self):
        """Fraction answers have no single count when fractions are disallowed."""
        assert answer_to_number(FractionAnswer(1, 2), allow_fraction=False) is None
        assert answer_to_number(FractionAnswer(1, 2)) == 0.5
        assert answer_to_number("12") == 12.0


class TestCheckAnswer:
    """Student answers are compared exactly, fractions by cross-multiplication."""

    def test_equivalent_fraction_string(self, make_problem):
        """'12/6' is accepted for 2/1."""
        problem = make_problem(type="fraction", correct_answer=FractionAnswer(2, 1), operands=None)
        assert check_answer(problem, "12/6")

    def test_whole_number_for_whole_fraction(self, make_problem):
        problem = make_problem(type="fraction", correct_answer=FractionAnswer(4, 2), operands=None)
        assert check_answer(problem, "2")
        assert not check_answer(problem, "3")

    def test_unreduced_fraction_answer(self, make_problem):
        problem = make_problem(type="fraction", correct_answer=FractionAnswer(3, 4), operands=None)
        assert check_answer(problem, "6/8")
        assert not check_answer(problem, "0.7")

    def test_numeric_answer(self, make_problem):
        problem = make_problem(correct_answer=7)
        assert check_answer(problem, "7")
        assert check_answer(problem, 7)
        assert check_answer(problem, "14/2")
        assert not check_answer(problem, "8")
        assert not check_answer(problem, "seven")
        assert not check_answer(problem, "")

    def test_string_answer_ignores_case_and_spaces(self, make_problem):
        problem = make_problem(type="equation", correct_answer="x = 3, y = -2", operands=None)
        assert check_answer(problem, "X=3, Y=-2")

    def test_remainder_answer(self, make_problem):
        problem = make_problem(type="division", correct_answer="7 R 3", operands=(38, 5))
        assert check_answer(problem, "7 r 3")
        assert not check_answer(problem, "7 R 2")

    def test_decimal_string_answer(self, make_problem):
        problem = make_problem(type="decimal", correct_answer="0.75", operands=None)
        assert check_answer(problem, ".75")
        assert check_answer(problem, "3/4")
