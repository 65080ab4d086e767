"""
Consistency validator: cross-field agreement within one problem.

Checks, in order:
- a question that spells out its own answer ('7 + 5 = 12') must agree
  with correct_answer;
- operands recomputed with the problem's operation must give
  correct_answer (integer division floors, so '17 ÷ 5' expects 3 and
  a '3 R 2' answer is read by its quotient);
- there must be something to render: a question or operands;
- a vertical layout needs at least two operands.

Multi-step and symbolic types (matrices, proofs, systems, ...) are
excluded from the operand checks by keyword.
"""
from __future__ import annotations

import re
from fractions import Fraction

from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators.answers import answer_to_fraction
from kumon_qa.generators.engine import generator_module_for
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import BLANK
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType
from kumon_qa.qa.validators.base import (
    Validator,
    compute,
    display_number,
    exact,
    is_basic_binary,
    is_missing_value,
)

COMPLEX_TYPES = (
    "matrix",
    "transformation",
    "reflection",
    "rotation",
    "scaling",
    "linear_algebra",
    "transform",
    "induction",
    "proof",
    "formula",
    "equation",
    "simultaneous",
    "system",
)

_STATED_ANSWER = re.compile(r"^\s*(-?\d+)\s*[+\-×÷*/]\s*(-?\d+)\s*=\s*(-?\d+)\s*$")
_ALGEBRAIC = re.compile(r"[a-zA-Z]")

TOLERANCE = Fraction(1, 10_000)


def is_complex(problem: Problem) -> bool:
    tags = f"{problem.type} {problem.subtype or ''}".lower()
    return any(keyword in tags for keyword in COMPLEX_TYPES)


class ConsistencyValidator(Validator):
    name = "ConsistencyValidator"
    issue_type = IssueType.CONSISTENCY

    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        issues: list[Issue] = []
        issues.extend(self._check_stated_answer(problem))
        issues.extend(self._check_operands(problem))

        if not problem.question.strip() and not problem.operands:
            issues.append(
                self.issue(
                    f"consistency-missing-content-{problem.id}",
                    problem,
                    IssueSeverity.WARNING,
                    "Problem has neither question text nor operands to display",
                )
            )

        if problem.is_vertical and len(problem.operands or ()) < 2 and not is_complex(problem):
            issues.append(
                self.issue(
                    f"consistency-vertical-no-operands-{problem.id}",
                    problem,
                    IssueSeverity.ERROR,
                    "Vertical display format requires at least 2 operands",
                )
            )
        return issues

    def _check_stated_answer(self, problem: Problem) -> list[Issue]:
        question = problem.question
        if BLANK in question or _ALGEBRAIC.search(question):
            return []
        match = _STATED_ANSWER.match(question)
        if not match:
            return []
        written = Fraction(int(match.group(3)))
        stated = answer_to_fraction(problem.correct_answer)
        if stated is not None and abs(stated - written) <= TOLERANCE:
            return []
        return [
            self.issue(
                f"consistency-question-answer-{problem.id}",
                problem,
                IssueSeverity.ERROR,
                f"Question shows {match.group(3)} but correct_answer is {problem.correct_answer}",
                suggested_fix=CodeFix(
                    file=generator_module_for(problem.level),
                    old_code="",
                    new_code="",
                    explanation="Question text and correct_answer must be built from the same value",
                ),
                auto_fixable=True,
            )
        ]

    def _check_operands(self, problem: Problem) -> list[Issue]:
        if (
            not is_basic_binary(problem)
            or is_missing_value(problem.question)
            or is_complex(problem)
        ):
            return []

        a, b = problem.operands[0], problem.operands[1]
        x, y = exact(a), exact(b)
        if problem.type == "division":
            if y == 0:
                return []
            expected = Fraction(x.numerator // y.numerator) if _integral(x, y) else x / y
        else:
            expected = compute(problem.type, a, b)

        stated = answer_to_fraction(problem.correct_answer)
        if stated is not None and abs(stated - expected) <= TOLERANCE:
            return []

        shown = display_number(stated) if stated is not None else str(problem.correct_answer)
        computed = display_number(expected)
        return [
            self.issue(
                f"consistency-operands-answer-{problem.id}",
                problem,
                IssueSeverity.ERROR,
                f"Operands [{a}, {b}] with {problem.type} should give {computed}, not {shown}",
                suggested_fix=CodeFix(
                    file=generator_module_for(problem.level),
                    old_code=f"correct_answer={shown}",
                    new_code=f"correct_answer={computed}",
                    explanation=f"Recompute correct_answer from the operands for {problem.type}",
                ),
                auto_fixable=True,
            )
        ]


def _integral(*values: Fraction) -> bool:
    return all(v.denominator == 1 for v in values)
