"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from kumon_qa.curriculum import KUMON  # noqa: E402
from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange  # noqa: E402
from kumon_qa.generators.models import Problem  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (generator + QA pipeline)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded generator so operand draws are reproducible."""
    return random.Random(1234)


@pytest.fixture(scope="session")
def curriculum():
    return KUMON


@pytest.fixture
def make_problem():
    """Build a Problem with sensible defaults for validator tests."""

    def _make(**overrides) -> Problem:
        values = {
            "id": "test-problem-001",
            "level": "A",
            "worksheet_number": 5,
            "type": "addition",
            "subtype": "addition_review",
            "question": "3 + 4 = ___",
            "correct_answer": 7,
            "operands": (3, 4),
        }
        values.update(overrides)
        return Problem(**values)

    return _make


@pytest.fixture
def two_range_curriculum():
    """One level, two ranges: worksheets 1-5 and 6-10."""
    level = LevelSpec(
        level="T",
        name="Test Level",
        grade_range="n/a",
        total_worksheets=10,
        sct="n/a",
        worksheet_ranges=[
            WorksheetRange(1, 5, "adding_1", "Adding 1", ("addition_plus_1",), {"addends": [1]}),
            WorksheetRange(6, 10, "adding_2", "Adding 2", ("addition_plus_2",), {"addends": [2]}),
        ],
    )
    return CurriculumSpec(name="Test", version="0", levels=[level])
