"""
Math validator: recompute a op b from the operands and compare it with
the stated answer.

Only the four basic operations with two or more operands are checked,
and never a missing-value question ('___ + 3 = 7'), whose answer is an
operand rather than the result. Division answers in 'q R r' form are
checked as dividend == q * divisor + r with 0 <= r < divisor.
"""
from __future__ import annotations

from fractions import Fraction

from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators.answers import answer_to_fraction, parse_remainder
from kumon_qa.generators.engine import generator_module_for
from kumon_qa.generators.models import Problem
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType
from kumon_qa.qa.validators.base import (
    Validator,
    compute,
    display_number,
    exact,
    is_basic_binary,
    is_missing_value,
    symbol_for,
)

TOLERANCE = Fraction(1, 10_000)


class MathValidator(Validator):
    name = "MathValidator"
    issue_type = IssueType.MATH

    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        if not is_basic_binary(problem) or is_missing_value(problem.question):
            return []

        a, b = problem.operands[0], problem.operands[1]
        expression = f"{a} {symbol_for(problem.type)} {b}"

        if problem.type == "division" and exact(b) == 0:
            return [self._error(problem, f"Math error: {expression} divides by zero")]

        remainder = parse_remainder(problem.correct_answer)
        if problem.type == "division" and remainder is not None:
            return self._check_remainder(problem, expression, remainder)

        expected = compute(problem.type, a, b)
        stated = answer_to_fraction(problem.correct_answer)
        if stated is None:
            return [
                self._error(
                    problem,
                    f"Math error: {expression} = {problem.correct_answer} is not a number "
                    f"(should be {display_number(expected)})",
                )
            ]
        if abs(expected - stated) > TOLERANCE:
            return [
                self._error(
                    problem,
                    f"Math error: {expression} = {problem.correct_answer} "
                    f"(should be {display_number(expected)})",
                )
            ]
        return []

    def _check_remainder(
        self, problem: Problem, expression: str, remainder: tuple[int, int]
    ) -> list[Issue]:
        quotient, rest = remainder
        dividend, divisor = exact(problem.operands[0]), exact(problem.operands[1])
        if quotient * divisor + rest == dividend and 0 <= rest < abs(divisor):
            return []
        if dividend.denominator == 1 and divisor.denominator == 1:
            q, r = divmod(dividend.numerator, divisor.numerator)
            should_be = f"{q} R {r}" if r else str(q)
        else:
            should_be = display_number(dividend / divisor)
        return [
            self._error(
                problem,
                f"Math error: {expression} = {problem.correct_answer} (should be {should_be})",
            )
        ]

    def _error(self, problem: Problem, description: str) -> Issue:
        return self.issue(
            f"math-error-{problem.id}",
            problem,
            IssueSeverity.ERROR,
            description,
            suggested_fix=CodeFix(
                file=generator_module_for(problem.level),
                old_code="",
                new_code="",
                explanation=f"Fix the answer computation in the generator for {problem.type} problems",
            ),
            auto_fixable=True,
        )
