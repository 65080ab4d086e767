"""
Unit tests for FixEngine: path resolution, backups, dry runs and rollback.

Run: pytest tests/unit/test_fix_engine.py -v
"""

from pathlib import Path

import pytest

from kumon_qa.curriculum import KUMON
from kumon_qa.generators import generator_module_for
from kumon_qa.qa.fix_engine import FixEngine, FixResult
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType

PROJECT_ROOT = Path(__file__).parent.parent.parent

GENERATOR_SOURCE = """\
def subtract(a, b):
    correct_answer=a + b
    return correct_answer

# correct_answer=a + b appears twice
"""


def _issue(file, old_code="correct_answer=a + b", new_code="correct_answer=a - b", auto_fixable=True, n=1):
    return Issue(
        id=f"consistency-operands-answer-{n}",
        type=IssueType.CONSISTENCY,
        severity=IssueSeverity.ERROR,
        level="A",
        worksheet=100,
        problem_type="subtraction",
        description="Operands [8, 3] with subtraction should give 5, not 11",
        suggested_fix=CodeFix(file=file, old_code=old_code, new_code=new_code, explanation="Recompute"),
        auto_fixable=auto_fixable,
    )


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "generators" / "elementary_basic.py"
    path.parent.mkdir()
    path.write_text(GENERATOR_SOURCE, encoding="utf-8")
    return path


def _backups(path):
    return sorted(path.parent.glob(f"{path.name}.backup.*"))


# =============================================================================
# Path resolution
# =============================================================================


class TestResolvePath:
    def test_plain_path(self, tmp_path):
        engine = FixEngine(tmp_path)
        assert engine.resolve_path("a/b.py") == tmp_path / "a" / "b.py"

    def test_glob_uses_first_existing_search_dir(self, tmp_path):
        for directory in ("pre-k", "calculus"):
            target = tmp_path / "gen" / directory / "mod.py"
            target.parent.mkdir(parents=True)
            target.write_text("", encoding="utf-8")
        engine = FixEngine(tmp_path, search_dirs=["elementary-basic", "calculus", "pre-k"])
        assert engine.resolve_path("gen/**/mod.py") == tmp_path / "gen" / "calculus" / "mod.py"

    def test_glob_falls_back_to_flat_path(self, tmp_path, source):
        engine = FixEngine(tmp_path, search_dirs=["elementary-basic"])
        assert engine.resolve_path("generators/**/elementary_basic.py") == source

    def test_default_search_dirs_find_generator_modules(self):
        """Every level's fix path lands on a real module in the package."""
        engine = FixEngine(PROJECT_ROOT)
        for level in KUMON.level_ids:
            path = engine.resolve_path(generator_module_for(level))
            assert path.is_file(), level
            assert path.parent == PROJECT_ROOT / "kumon_qa" / "generators"


# =============================================================================
# Applying fixes
# =============================================================================


class TestApplyFix:
    def test_replaces_first_occurrence_only(self, tmp_path, source):
        engine = FixEngine(tmp_path)
        result = engine.apply_fix(_issue("generators/elementary_basic.py"))

        assert result.success
        assert result.message == "Fix applied successfully"
        content = source.read_text(encoding="utf-8")
        assert content.count("correct_answer=a - b") == 1
        assert content.count("correct_answer=a + b") == 1
        assert result.backup_path.read_text(encoding="utf-8") == GENERATOR_SOURCE

    def test_dry_run_touches_nothing(self, tmp_path, source):
        engine = FixEngine(tmp_path, dry_run=True)
        result = engine.apply_fix(_issue("generators/elementary_basic.py"))

        assert result.success
        assert result.message == "[DRY RUN] Would apply fix"
        assert source.read_text(encoding="utf-8") == GENERATOR_SOURCE
        assert _backups(source) == []

    def test_one_backup_per_file(self, tmp_path, source):
        engine = FixEngine(tmp_path)
        first = engine.apply_fix(_issue("generators/elementary_basic.py", n=1))
        second = engine.apply_fix(_issue("generators/elementary_basic.py", n=2))

        assert first.success and second.success
        assert first.backup_path == second.backup_path
        assert len(_backups(source)) == 1
        assert first.backup_path.read_text(encoding="utf-8") == GENERATOR_SOURCE

    def test_missing_file(self, tmp_path):
        result = FixEngine(tmp_path).apply_fix(_issue("generators/nowhere.py"))
        assert not result.success
        assert result.message.startswith("File not found:")

    def test_no_suggested_fix(self, tmp_path):
        issue = Issue(
            id="x",
            type=IssueType.MATH,
            severity=IssueSeverity.ERROR,
            level="A",
            worksheet=1,
            problem_type="addition",
            description="d",
        )
        result = FixEngine(tmp_path).apply_fix(issue)
        assert not result.success
        assert result.message == "No suggested fix available"

    def test_manual_fix(self, tmp_path, source):
        result = FixEngine(tmp_path).apply_fix(_issue("generators/elementary_basic.py", old_code="", new_code=""))
        assert not result.success
        assert result.message == "Fix requires manual intervention: Recompute"
        assert source.read_text(encoding="utf-8") == GENERATOR_SOURCE

    def test_old_code_not_found(self, tmp_path, source):
        result = FixEngine(tmp_path).apply_fix(
            _issue("generators/elementary_basic.py", old_code="return a * b")
        )
        assert not result.success
        assert result.message == 'Could not find code to replace: "return a * b..."'
        assert source.read_text(encoding="utf-8") == GENERATOR_SOURCE

    def test_glob_path_applied(self, tmp_path, source):
        result = FixEngine(tmp_path).apply_fix(_issue("generators/**/elementary_basic.py"))
        assert result.success
        assert "correct_answer=a - b" in source.read_text(encoding="utf-8")


# =============================================================================
# Batches and rollback
# =============================================================================


class TestApplyAllAndRollback:
    def test_skips_non_auto_fixable_and_continues_after_failure(self, tmp_path, source):
        issues = [
            _issue("generators/missing.py", n=1),
            _issue("generators/elementary_basic.py", auto_fixable=False, n=2),
            _issue("generators/elementary_basic.py", n=3),
        ]
        results = FixEngine(tmp_path).apply_all_fixes(issues)

        assert [r.issue.id for r in results] == [
            "consistency-operands-answer-1",
            "consistency-operands-answer-3",
        ]
        assert [r.success for r in results] == [False, True]

    def test_rollback_restores_original(self, tmp_path, source):
        engine = FixEngine(tmp_path)
        engine.apply_fix(_issue("generators/elementary_basic.py", n=1))
        engine.apply_fix(_issue("generators/elementary_basic.py", n=2))
        assert source.read_text(encoding="utf-8") != GENERATOR_SOURCE

        assert engine.rollback_all()
        assert source.read_text(encoding="utf-8") == GENERATOR_SOURCE

    def test_rollback_in_dry_run(self, tmp_path, source):
        engine = FixEngine(tmp_path, dry_run=True)
        engine.apply_fix(_issue("generators/elementary_basic.py"))
        assert engine.rollback_all()
        assert source.read_text(encoding="utf-8") == GENERATOR_SOURCE


class TestFixReport:
    def test_report_sections(self):
        ok = FixResult(_issue("a.py", n=1), True, "Fix applied successfully")
        bad = FixResult(_issue("b.py", n=2), False, "File not found: b.py")
        report = FixEngine.generate_fix_report([ok, bad])

        lines = report.splitlines()
        assert lines[0] == "=== Fix Report ==="
        assert "Total fixes attempted: 2" in lines
        assert "Successful: 1" in lines
        assert "Failed: 1" in lines
        assert "Successfully applied:" in lines
        assert "Failed to apply:" in lines
        assert "   - A (consistency): File not found: b.py" in lines

    def test_empty_report(self):
        report = FixEngine.generate_fix_report([])
        assert "Total fixes attempted: 0" in report
        assert "Failed to apply:" not in report
