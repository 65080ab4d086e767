"""
QA pipeline: validate generated problems against a curriculum and
optionally patch the generators.

Usage:
    from kumon_qa.curriculum import KUMON
    from kumon_qa.qa import ProblemTester

    report = ProblemTester(KUMON).test_all_levels(["C"])
"""

from kumon_qa.qa.fix_engine import FixEngine, FixResult
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType, QAReport, TestResult
from kumon_qa.qa.tester import ProblemTester

__all__ = [
    "CodeFix",
    "FixEngine",
    "FixResult",
    "Issue",
    "IssueSeverity",
    "IssueType",
    "ProblemTester",
    "QAReport",
    "TestResult",
]
