"""
Unit tests for ProblemTester and report aggregation.

Run: pytest tests/unit/test_tester.py -v
"""

import random

import pytest

from kumon_qa.config import QAConfig
from kumon_qa.qa.models import IssueSeverity, IssueType, QAReport, TestResult
from kumon_qa.qa.tester import ProblemTester
from kumon_qa.qa.validators import MathValidator, Validator


class ExplodingValidator(Validator):
    name = "ExplodingValidator"
    issue_type = IssueType.READABILITY

    def validate(self, problem, curriculum):
        raise RuntimeError("tokenizer missing")


@pytest.fixture
def generate(make_problem):
    """Correct sums on worksheets 1-5; 6-10 report a + b + 1."""

    def _generate(level, worksheet):
        a, b = 3, 1 if worksheet <= 5 else 2
        answer = a + b if worksheet <= 5 else a + b + 1
        return make_problem(
            id=f"{level}-{worksheet}",
            level=level,
            worksheet_number=worksheet,
            subtype="adding_1" if worksheet <= 5 else "adding_2",
            question=f"{a} + {b} = ___",
            correct_answer=answer,
            operands=(a, b),
        )

    return _generate


@pytest.fixture
def tester(two_range_curriculum, generate):
    return ProblemTester(
        two_range_curriculum,
        generate_problem=generate,
        config=QAConfig(problems_per_range=3),
        rng=random.Random(0),
    )


class TestRanges:
    def test_worksheets_drawn_inside_range(self, tester, two_range_curriculum):
        worksheet_range = two_range_curriculum.get_level("T").worksheet_ranges[1]
        result = tester.test_worksheet_range("T", worksheet_range)
        assert result.problems_tested == 3
        assert all(6 <= issue.worksheet <= 10 for issue in result.issues)

    def test_one_failing_range_fails_the_level(self, tester):
        """A level passes only if every one of its ranges passes."""
        report = tester.test_all_levels()

        first, second = report.results
        assert first.passed
        assert not second.passed
        assert report.levels_failed == ["T"]
        assert report.levels_passed == []
        assert not report.passed

    def test_aggregation(self, tester):
        report = tester.test_all_levels()

        assert report.total_problems == 6
        assert report.total_issues == sum(len(r.issues) for r in report.results) == 6
        assert report.issues_by_type["math"] == 3
        assert report.issues_by_type["consistency"] == 3
        assert report.issues_by_type["visual"] == 0
        assert report.issues_by_severity == {"error": 6, "warning": 0, "info": 0}
        assert report.pass_rate == 50.0

    def test_auto_fixable_issues(self, tester):
        report = tester.test_all_levels()
        fixable = ProblemTester.get_auto_fixable_issues(report)
        assert len(fixable) == 6
        assert all(issue.suggested_fix is not None for issue in fixable)

    def test_callback_per_range(self, tester):
        seen = []
        tester.test_level("T", on_range_complete=seen.append)
        assert [r.worksheet_range.label for r in seen] == ["1-5", "6-10"]
        assert all(isinstance(r, TestResult) for r in seen)


class TestFailureIsolation:
    """Nothing raised by a generator or validator escapes a run."""

    def test_generator_exception_becomes_issue(self, two_range_curriculum):
        def broken(level, worksheet):
            raise ValueError("bad constraint")

        tester = ProblemTester(
            two_range_curriculum,
            generate_problem=broken,
            config=QAConfig(problems_per_range=2),
            rng=random.Random(0),
        )
        report = tester.test_all_levels()

        assert report.total_problems == 0
        assert report.total_issues == 4
        issue = report.all_issues[0]
        assert issue.id.startswith("generator-error-T-")
        assert issue.id.endswith("-0")
        assert issue.type == IssueType.CONSISTENCY
        assert issue.severity == IssueSeverity.ERROR
        assert issue.problem_type == "unknown"
        assert issue.description == "Generator threw error: bad constraint"
        assert report.levels_failed == ["T"]

    def test_validator_exception_becomes_issue(self, two_range_curriculum, make_problem):
        tester = ProblemTester(
            two_range_curriculum,
            validators=[ExplodingValidator(), MathValidator()],
        )
        problem = make_problem(correct_answer=8)
        issues = tester.validate_problem(problem)

        assert [i.id for i in issues] == [
            "validator-error-ExplodingValidator-test-problem-001",
            "math-error-test-problem-001",
        ]
        assert issues[0].type == IssueType.READABILITY
        assert issues[0].description == "Validator ExplodingValidator threw error: tokenizer missing"


class TestLevelSelection:
    def test_unknown_level_skipped(self, tester):
        assert tester.test_level("ZZ") == []

    def test_count_ranges(self, tester):
        assert tester.count_ranges() == 2
        assert tester.count_ranges(["T", "ZZ"]) == 2
        assert tester.count_ranges(["ZZ"]) == 0

    def test_config_levels(self, curriculum, rng):
        tester = ProblemTester(curriculum, config=QAConfig(levels=["C"], problems_per_range=1), rng=rng)
        assert tester.count_ranges() == len(curriculum.get_level("C").worksheet_ranges)


class TestReportModel:
    def test_empty_report(self):
        report = QAReport.from_results("Test", [])
        assert report.pass_rate == 100.0
        assert report.passed
        assert report.levels_tested == 0
        assert set(report.issues_by_type) == {t.value for t in IssueType}

    def test_levels_keep_first_appearance_order(self, tester):
        c_range = tester.curriculum.get_level("T").worksheet_ranges[0]
        results = [TestResult("B", c_range), TestResult("A", c_range), TestResult("B", c_range)]
        report = QAReport.from_results("Test", results)
        assert report.levels_passed == ["B", "A"]

    def test_record_fixes(self, tester):
        report = tester.test_all_levels()
        report.record_fixes(4, 2)
        summary = report.to_dict()["summary"]
        assert summary["fixes_applied"] == 4
        assert summary["fixes_failed"] == 2
