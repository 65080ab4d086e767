"""
Validator interface and the problem-shape helpers validators share.

Validators are stateless: validate() looks only at the problem and the
curriculum and returns a list of Issues. They may raise; the tester turns
an exception into a single error Issue naming the validator.

Only a blank among the operands ('___ + 3 = 7') exempts a question from
answer recomputation. A blank after '=' ('8 - 3 = ___') is the ordinary
answer slot, so those questions are still checked.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Optional, Union

from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import BLANK, OPERATOR_SYMBOLS
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType

BASIC_OPERATIONS = ("addition", "subtraction", "multiplication", "division")


class Validator(ABC):
    """A single rule checker over generated problems."""

    name: str = "Validator"
    issue_type: IssueType

    @abstractmethod
    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        """Return every issue found in one problem (empty if clean)."""

    def issue(
        self,
        issue_id: str,
        problem: Problem,
        severity: IssueSeverity,
        description: str,
        suggested_fix: Optional[CodeFix] = None,
        auto_fixable: bool = False,
    ) -> Issue:
        return Issue(
            id=issue_id,
            type=self.issue_type,
            severity=severity,
            level=problem.level,
            worksheet=problem.worksheet_number,
            problem_type=problem.type,
            description=description,
            suggested_fix=suggested_fix,
            auto_fixable=auto_fixable,
        )

    def __repr__(self) -> str:
        return f"<{self.name}>"


# =============================================================================
# Shared helpers
# =============================================================================


def is_missing_value(question: str) -> bool:
    """Fill-in-the-blank with the blank on the left: '___ + 3 = 7'."""
    blank = question.find(BLANK)
    equals = question.find("=")
    return blank != -1 and equals != -1 and blank < equals


def is_basic_binary(problem: Problem) -> bool:
    """One of the four operations over at least two operands."""
    return (
        problem.type in BASIC_OPERATIONS
        and problem.operands is not None
        and len(problem.operands) >= 2
    )


def exact(value: Union[int, float]) -> Fraction:
    """Operand as an exact rational; floats via their shortest repr."""
    if isinstance(value, float):
        return Fraction(str(value))
    return Fraction(value)


def compute(operation: str, a: Union[int, float], b: Union[int, float]) -> Optional[Fraction]:
    """Exact a op b; None when dividing by zero."""
    x, y = exact(a), exact(b)
    if operation == "addition":
        return x + y
    if operation == "subtraction":
        return x - y
    if operation == "multiplication":
        return x * y
    if y == 0:
        return None
    return x / y


def display_number(value: Fraction) -> str:
    """7 -> "7", 7/2 -> "3.5", 1/3 -> "1/3"."""
    if value.denominator == 1:
        return str(value.numerator)
    rest = value.denominator
    for prime in (2, 5):
        while rest % prime == 0:
            rest //= prime
    return str(float(value)) if rest == 1 else str(value)


def symbol_for(operation: str) -> str:
    return OPERATOR_SYMBOLS.get(operation, operation)
