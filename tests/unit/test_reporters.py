"""
Unit tests for the console, JSON and HTML reporters.

Run: pytest tests/unit/test_reporters.py -v
"""

import io
import json

import pytest
from rich.console import Console

from kumon_qa.qa.fix_engine import FixResult
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType, QAReport, TestResult
from kumon_qa.qa.reporters import (
    generate_html_report,
    generate_json_report,
    print_fix_results,
    print_report,
    save_html_report,
    save_json_report,
)


def _issue(severity, n, issue_type=IssueType.MATH):
    return Issue(
        id=f"issue-{n}",
        type=issue_type,
        severity=severity,
        level="T",
        worksheet=7,
        problem_type="addition",
        description=f"Problem {n} is off",
        suggested_fix=CodeFix("gen.py", "", "", "Recompute"),
        auto_fixable=True,
    )


@pytest.fixture
def report(two_range_curriculum):
    first, second = two_range_curriculum.get_level("T").worksheet_ranges
    results = [
        TestResult("T", first, problems_tested=3, issues=[_issue(IssueSeverity.INFO, 1, IssueType.READABILITY)]),
        TestResult("T", second, problems_tested=3, issues=[_issue(IssueSeverity.ERROR, 2)]),
    ]
    return QAReport.from_results("Test", results)


def _render(report, **kwargs):
    buffer = io.StringIO()
    print_report(report, console=Console(file=buffer, width=120), **kwargs)
    return buffer.getvalue()


class TestConsoleReport:
    def test_pass_fail_markers(self, report):
        output = _render(report)
        assert "Kumon QA Report" in output
        assert "✓ PASS" in output
        assert "✗ FAIL" in output
        assert "Problem 2 is off" in output
        assert "1 level(s) failed" in output

    def test_info_hidden_by_default(self, report):
        assert "Problem 1 is off" not in _render(report)
        assert "Problem 1 is off" in _render(report, show_info=True)

    def test_only_failures(self, report):
        output = _render(report, only_failures=True)
        assert "✓ PASS" not in output
        assert "✗ FAIL" in output

    def test_fix_results(self, report):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120)
        print_fix_results([], console=console)
        assert "No auto-fixable issues." in buffer.getvalue()

        print_fix_results([FixResult(report.all_issues[1], True, "Fix applied successfully")], console=console)
        assert "Fix applied successfully" in buffer.getvalue()


class TestJsonReport:
    def test_shape(self, report):
        data = json.loads(generate_json_report(report))
        assert data["curriculum"] == "Test"
        summary = data["summary"]
        assert summary["total_problems"] == 6
        assert summary["total_issues"] == 2
        assert summary["issues_by_severity"] == {"error": 1, "warning": 0, "info": 1}
        assert summary["levels_failed"] == ["T"]
        assert summary["pass_rate"] == 50.0
        assert len(data["results"]) == 2
        issue = data["results"][1]["issues"][0]
        assert issue["type"] == "math"
        assert issue["suggested_fix"]["file"] == "gen.py"

    def test_save(self, report, tmp_path):
        path = save_json_report(report, tmp_path / "out" / "qa.json")
        assert json.loads(path.read_text(encoding="utf-8"))["summary"]["levels_tested"] == 1


class TestHtmlReport:
    def test_generate(self, report):
        html = generate_html_report(report)
        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "Kumon QA Report" in html
        # info issues are always included in the HTML page
        assert "Problem 1 is off" in html

    def test_numbers_are_not_highlighted(self, report):
        html = generate_html_report(report)
        assert "Problem 2 is off" in html
        assert "(3 problems)" in html

    def test_save(self, report, tmp_path):
        path = save_html_report(report, tmp_path / "qa.html")
        assert path.exists()
        assert "Problem 2 is off" in path.read_text(encoding="utf-8")
