"""
Curriculum validator: a problem's skill tag must belong to the worksheet
range it was generated for.

Matching is a case-insensitive substring test in either direction
against the range type and each expected skill. An addition problem also
passes when its second operand sits inside an addend skill bucket
('plus_6_to_10', 'plus_3').
"""
from __future__ import annotations

import re

from kumon_qa.curriculum.models import CurriculumSpec, WorksheetRange
from kumon_qa.generators.engine import generator_module_for
from kumon_qa.generators.models import Problem
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType
from kumon_qa.qa.validators.base import Validator

_ADDEND_RANGE = re.compile(r"plus_(\d+)_to_(\d+)")
_ADDEND_SINGLE = re.compile(r"(?:plus|add)_(\d+)$")
_ANY_ADDEND_SKILLS = ("addition_mastery", "horizontal_add_sub")

# expected archetypes an addition generator should never stand in for
_NON_ADDITION_TYPES = ("sequence", "count")


def _matches(candidate: str, worksheet_range: WorksheetRange) -> bool:
    candidate = candidate.lower()
    targets = [worksheet_range.type, *worksheet_range.expected_skills]
    return any(candidate in t.lower() or t.lower() in candidate for t in targets)


def _valid_addend(problem: Problem, worksheet_range: WorksheetRange) -> bool:
    if problem.type != "addition" or not problem.operands or len(problem.operands) < 2:
        return False
    addend = problem.operands[1]
    for skill in worksheet_range.expected_skills:
        if skill in _ANY_ADDEND_SKILLS:
            return True
        match = _ADDEND_RANGE.search(skill)
        if match and int(match.group(1)) <= addend <= int(match.group(2)):
            return True
        match = _ADDEND_SINGLE.search(skill)
        if match and addend == int(match.group(1)):
            return True
    return False


class CurriculumValidator(Validator):
    name = "CurriculumValidator"
    issue_type = IssueType.CURRICULUM

    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        worksheet_range = curriculum.get_worksheet_range(problem.level, problem.worksheet_number)
        if worksheet_range is None:
            return [
                self.issue(
                    f"curriculum-unknown-range-{problem.id}",
                    problem,
                    IssueSeverity.WARNING,
                    f"No curriculum specification found for {problem.level} "
                    f"worksheet {problem.worksheet_number}",
                )
            ]

        candidate = problem.subtype or problem.type
        if _matches(candidate, worksheet_range) or _valid_addend(problem, worksheet_range):
            return []

        expected = worksheet_range.type
        if problem.type == "addition" and any(t in expected for t in _NON_ADDITION_TYPES):
            return [
                self.issue(
                    f"curriculum-wrong-type-{problem.id}",
                    problem,
                    IssueSeverity.ERROR,
                    f"Generated {problem.type} problem where {expected} was expected "
                    f"({problem.level} worksheets {worksheet_range.label})",
                    suggested_fix=CodeFix(
                        file=generator_module_for(problem.level),
                        old_code="",
                        new_code="",
                        explanation=(
                            f"Generator should produce {expected} problems for "
                            f"{problem.level} worksheets {worksheet_range.label}"
                        ),
                    ),
                    auto_fixable=True,
                )
            ]

        return [
            self.issue(
                f"curriculum-mismatch-{problem.id}",
                problem,
                IssueSeverity.WARNING,
                f'Problem subtype "{candidate}" may not align with expected "{expected}"',
            )
        ]
