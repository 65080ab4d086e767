"""
Smoke Tests for the kumon-qa CLI.

These tests verify that the command runs end to end and exits with the
documented codes. They don't validate report contents deeply.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from kumon_qa import __version__
from kumon_qa.cli.qa_cli import app

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI binds a sink to the runner's stderr; drop it after each test."""
    yield
    logger.remove()


def run_module(args: str, timeout: int = 60) -> tuple[int, str, str]:
    """Run `python -m kumon_qa <args>` and return exit code, stdout, stderr."""
    result = subprocess.run(
        f"{sys.executable} -m kumon_qa {args}",
        shell=True,
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=timeout,
    )
    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help and version work."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--level" in result.output
        assert "--auto-fix" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_module_entry_point(self):
        code, stdout, stderr = run_module("--help")
        assert code == 0, f"Help failed: {stderr}"
        assert "kumon-qa" in stdout.lower() or "--level" in stdout


class TestQARun:
    """Single-level runs with a fixed seed."""

    def test_single_level_passes(self):
        result = runner.invoke(app, ["--level", "C", "--problems", "2", "--seed", "7"])
        assert result.exit_code == 0, result.output
        assert "Kumon QA Report" in result.output
        assert "Level C" in result.output

    def test_level_is_case_insensitive(self):
        result = runner.invoke(app, ["--level", "xs", "--problems", "1", "--seed", "7"])
        assert result.exit_code == 0, result.output

    def test_json_report_file(self, tmp_path):
        path = tmp_path / "qa.json"
        result = runner.invoke(
            app,
            ["-l", "3A", "-n", "2", "--seed", "3", "--output", "json", "--output-path", str(path)],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["summary"]["levels_passed"] == ["3A"]
        assert data["summary"]["total_problems"] == 2 * len(data["results"])

    def test_html_report_file(self, tmp_path):
        path = tmp_path / "qa.html"
        result = runner.invoke(
            app, ["-l", "C", "-n", "1", "--seed", "3", "-o", "html", "--output-path", str(path)]
        )
        assert result.exit_code == 0, result.output
        assert "Kumon QA Report" in path.read_text(encoding="utf-8")

    def test_auto_fix_dry_run(self):
        result = runner.invoke(
            app, ["--level", "C", "--problems", "1", "--seed", "5", "--auto-fix", "--dry-run"]
        )
        assert result.exit_code == 0, result.output
        assert "No auto-fixable issues." in result.output or "Fix Results" in result.output


class TestConfigErrors:
    """Bad options exit with code 2."""

    def test_unknown_level(self):
        result = runner.invoke(app, ["--level", "Q9"])
        assert result.exit_code == 2
        assert "Unknown level" in result.output

    def test_unknown_curriculum(self):
        result = runner.invoke(app, ["--curriculum", "singapore"])
        assert result.exit_code == 2

    def test_bad_output_format(self):
        result = runner.invoke(app, ["--level", "C", "--output", "pdf"])
        assert result.exit_code == 2
        assert "Invalid options" in result.output

    def test_zero_problems(self):
        result = runner.invoke(app, ["--level", "C", "--problems", "0"])
        assert result.exit_code == 2
