"""
Readability validator: vocabulary and length heuristics for question text.

A term from ADVANCED_TERMS may only appear from its category onward in
the category ordering. Pre-K questions are also held to short words and
short sentences.
"""
from __future__ import annotations

from kumon_qa.curriculum.levels import category_rank, level_category
from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators.models import Problem
from kumon_qa.qa.models import Issue, IssueSeverity, IssueType
from kumon_qa.qa.validators.base import Validator

ADVANCED_TERMS = {
    "coefficient": "middle-school",
    "polynomial": "high-school",
    "derivative": "calculus",
    "integral": "calculus",
    "discriminant": "high-school",
    "asymptote": "high-school",
    "logarithm": "calculus",
    "trigonometric": "calculus",
}

PRE_K_MAX_WORDS = 10
PRE_K_MAX_AVERAGE_WORD_LENGTH = 5


class ReadabilityValidator(Validator):
    name = "ReadabilityValidator"
    issue_type = IssueType.READABILITY

    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        issues: list[Issue] = []
        question = problem.question.lower()
        category = level_category(problem.level)
        rank = category_rank(category)

        for term, required in ADVANCED_TERMS.items():
            if term in question and rank < category_rank(required):
                issues.append(
                    self.issue(
                        f"readability-advanced-term-{problem.id}-{term}",
                        problem,
                        IssueSeverity.WARNING,
                        f'Term "{term}" is {required} vocabulary but appears at level '
                        f"{problem.level} ({category})",
                    )
                )

        if category == "pre-k":
            issues.extend(self._check_pre_k(problem))
        return issues

    def _check_pre_k(self, problem: Problem) -> list[Issue]:
        words = problem.question.split()
        if not words:
            return []
        issues = []
        average = sum(len(w) for w in words) / len(words)
        if average > PRE_K_MAX_AVERAGE_WORD_LENGTH:
            issues.append(
                self.issue(
                    f"readability-complex-words-{problem.id}",
                    problem,
                    IssueSeverity.INFO,
                    f"Average word length {average:.1f} may be too long for Pre-K",
                )
            )
        if len(words) > PRE_K_MAX_WORDS:
            issues.append(
                self.issue(
                    f"readability-long-question-{problem.id}",
                    problem,
                    IssueSeverity.INFO,
                    f"Question has {len(words)} words; Pre-K questions should stay "
                    f"within {PRE_K_MAX_WORDS}",
                )
            )
        return issues
