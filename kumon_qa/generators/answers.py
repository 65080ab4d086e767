"""
Answer parsing and student-answer checking.

Equality on fractions is always cross-multiplication, never a float
division: "12/6" is accepted for 2/1 because 12 * 1 == 2 * 6.
"""
from __future__ import annotations

import re
from fractions import Fraction
from typing import Optional, Union

from kumon_qa.generators.models import Answer, FractionAnswer, Problem

_FRACTION_TEXT = re.compile(r"^\s*([-+]?\d+)\s*/\s*([-+]?\d+)\s*$")
_REMAINDER_TEXT = re.compile(r"^\s*(-?\d+)\s*R\s*(\d+)\s*$", re.IGNORECASE)
_INTEGER_TEXT = re.compile(r"^\s*[-+]?\d+\s*$")
_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_remainder(answer: Answer) -> Optional[tuple[int, int]]:
    """'7 R 3' -> (7, 3); None for anything else."""
    if not isinstance(answer, str):
        return None
    match = _REMAINDER_TEXT.match(answer)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_fraction_text(text: str) -> Optional[tuple[int, int]]:
    """'12/6' -> (12, 6); None if not a fraction or the denominator is zero."""
    match = _FRACTION_TEXT.match(text)
    if not match:
        return None
    numerator, denominator = int(match.group(1)), int(match.group(2))
    if denominator == 0:
        return None
    return numerator, denominator


def answer_to_fraction(answer: Answer) -> Optional[Fraction]:
    """
    Fraction-aware numeric extraction.

    Numbers convert exactly, FractionAnswer via its parts, and strings
    either as 'a/b' or by their leading decimal number ('7 R 3' -> 7).
    Returns None when nothing numeric can be read.
    """
    if isinstance(answer, bool):
        return None
    if isinstance(answer, FractionAnswer):
        return answer.to_fraction()
    if isinstance(answer, int):
        return Fraction(answer)
    if isinstance(answer, float):
        return Fraction(str(answer))
    if isinstance(answer, str):
        parts = parse_fraction_text(answer)
        if parts:
            return Fraction(*parts)
        match = _LEADING_NUMBER.match(answer)
        if match:
            return Fraction(match.group(1))
    return None


def answer_to_number(answer: Answer, allow_fraction: bool = True) -> Optional[float]:
    if isinstance(answer, FractionAnswer) and not allow_fraction:
        return None
    value = answer_to_fraction(answer)
    return float(value) if value is not None else None


def _normalize(text: str) -> str:
    return re.sub(r"\s+", "", text).lower()


def check_answer(problem: Problem, student_answer: Union[str, int, float]) -> bool:
    """True if the student's answer is equivalent to the problem's answer."""
    expected = problem.correct_answer
    given = str(student_answer).strip()
    if not given:
        return False

    if isinstance(expected, FractionAnswer):
        parts = parse_fraction_text(given)
        if parts:
            return expected.equals(FractionAnswer(*parts))
        if _INTEGER_TEXT.match(given):
            return int(given) * expected.denominator == expected.numerator
        return False

    if isinstance(expected, (int, float)) and not isinstance(expected, bool):
        parts = parse_fraction_text(given)
        if parts:
            return Fraction(*parts) == answer_to_fraction(expected)
        try:
            return Fraction(given) == answer_to_fraction(expected)
        except (ValueError, ZeroDivisionError):
            return False

    if _normalize(given) == _normalize(str(expected)):
        return True
    # "0.75" vs ".75", "3/4" vs "6/8"
    expected_parts = parse_fraction_text(str(expected))
    given_parts = parse_fraction_text(given)
    if expected_parts and given_parts:
        return expected_parts[0] * given_parts[1] == given_parts[0] * expected_parts[1]
    try:
        return Fraction(given) == Fraction(str(expected).strip())
    except (ValueError, ZeroDivisionError):
        return False
