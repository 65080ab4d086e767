"""
QA value types: issues, suggested fixes, per-range results and the run report.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from kumon_qa.curriculum.models import WorksheetRange


class IssueType(str, Enum):
    """Which validator concern an issue belongs to."""

    VISUAL = "visual"
    MATH = "math"
    CURRICULUM = "curriculum"
    CONSISTENCY = "consistency"
    READABILITY = "readability"


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class CodeFix:
    """
    A literal text substitution in a source file.

    Empty old_code/new_code means the fix needs a human; the FixEngine
    reports it as manual and touches nothing.
    """

    file: str
    old_code: str
    new_code: str
    explanation: str

    @property
    def is_manual(self) -> bool:
        return not self.old_code or not self.new_code

    def to_dict(self) -> dict[str, str]:
        return {
            "file": self.file,
            "old_code": self.old_code,
            "new_code": self.new_code,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class Issue:
    """One detected defect, warning or note about a generated problem."""

    id: str
    type: IssueType
    severity: IssueSeverity
    level: str
    worksheet: int
    problem_type: str
    description: str
    suggested_fix: Optional[CodeFix] = None
    auto_fixable: bool = False

    @property
    def is_error(self) -> bool:
        return self.severity == IssueSeverity.ERROR

    @property
    def can_auto_fix(self) -> bool:
        return self.auto_fixable and self.suggested_fix is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "severity": self.severity.value,
            "level": self.level,
            "worksheet": self.worksheet,
            "problem_type": self.problem_type,
            "description": self.description,
            "suggested_fix": self.suggested_fix.to_dict() if self.suggested_fix else None,
            "auto_fixable": self.auto_fixable,
        }


@dataclass
class TestResult:
    """All issues found for one (level, worksheet range) pairing."""

    __test__ = False  # not a pytest test class

    level: str
    worksheet_range: WorksheetRange
    problems_tested: int = 0
    issues: list[Issue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(issue.is_error for issue in self.issues)

    def count(self, severity: IssueSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self.count(IssueSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(IssueSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self.count(IssueSeverity.INFO)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "worksheet_range": self.worksheet_range.to_dict(),
            "problems_tested": self.problems_tested,
            "passed": self.passed,
            "errors": self.error_count,
            "warnings": self.warning_count,
            "info": self.info_count,
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class QAReport:
    """
    Aggregate of every TestResult in one run.

    Built once by from_results(); the only later mutation is
    record_fixes() after the optional auto-fix pass.
    """

    curriculum: str
    results: list[TestResult]
    total_problems: int
    total_issues: int
    issues_by_type: dict[str, int]
    issues_by_severity: dict[str, int]
    levels_passed: list[str]
    levels_failed: list[str]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    fixes_applied: int = 0
    fixes_failed: int = 0

    @classmethod
    def from_results(cls, curriculum: str, results: list[TestResult]) -> QAReport:
        by_type = {t.value: 0 for t in IssueType}
        by_severity = {s.value: 0 for s in IssueSeverity}
        for issue in (i for r in results for i in r.issues):
            by_type[issue.type.value] += 1
            by_severity[issue.severity.value] += 1

        # dicts keep first-appearance order
        level_ok: dict[str, bool] = {}
        for result in results:
            level_ok[result.level] = level_ok.get(result.level, True) and result.passed

        return cls(
            curriculum=curriculum,
            results=results,
            total_problems=sum(r.problems_tested for r in results),
            total_issues=sum(len(r.issues) for r in results),
            issues_by_type=by_type,
            issues_by_severity=by_severity,
            levels_passed=[level for level, ok in level_ok.items() if ok],
            levels_failed=[level for level, ok in level_ok.items() if not ok],
        )

    @property
    def all_issues(self) -> list[Issue]:
        return [issue for result in self.results for issue in result.issues]

    @property
    def levels_tested(self) -> int:
        return len(self.levels_passed) + len(self.levels_failed)

    @property
    def passed(self) -> bool:
        return not self.levels_failed

    @property
    def pass_rate(self) -> float:
        """Percentage of ranges that passed."""
        if not self.results:
            return 100.0
        return 100.0 * sum(1 for r in self.results if r.passed) / len(self.results)

    def record_fixes(self, applied: int, failed: int) -> None:
        self.fixes_applied = applied
        self.fixes_failed = failed

    def to_dict(self) -> dict[str, Any]:
        return {
            "curriculum": self.curriculum,
            "timestamp": self.timestamp.isoformat(),
            "summary": {
                "total_problems": self.total_problems,
                "total_issues": self.total_issues,
                "issues_by_type": dict(self.issues_by_type),
                "issues_by_severity": dict(self.issues_by_severity),
                "levels_tested": self.levels_tested,
                "levels_passed": list(self.levels_passed),
                "levels_failed": list(self.levels_failed),
                "pass_rate": round(self.pass_rate, 1),
                "fixes_applied": self.fixes_applied,
                "fixes_failed": self.fixes_failed,
            },
            "results": [result.to_dict() for result in self.results],
        }
