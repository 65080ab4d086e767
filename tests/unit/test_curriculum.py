"""
Unit tests for the curriculum table, its lookups and the integrity pass.

Run: pytest tests/unit/test_curriculum.py -v
"""

import pytest

from kumon_qa.curriculum import (
    KUMON,
    CurriculumIntegrityError,
    assert_curriculum_integrity,
    check_curriculum_integrity,
    get_curriculum,
)
from kumon_qa.curriculum.levels import (
    LEVEL_ORDER,
    compare_levels,
    is_level_after,
    is_level_before,
    level_category,
    level_index,
    source_category,
)
from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange


class TestLevels:
    def test_order(self):
        assert len(LEVEL_ORDER) == 25
        assert LEVEL_ORDER[0] == "7A"
        assert LEVEL_ORDER[-1] == "XS"

    def test_comparisons(self):
        assert level_index("C") == 8
        assert level_index("Z") == -1
        assert compare_levels("A", "B") < 0
        assert is_level_before("3A", "A")
        assert is_level_after("O", "K")

    def test_categories(self):
        assert level_category("5A") == "pre-k"
        assert level_category("B") == "elementary-basic"
        assert level_category("F") == "elementary-advanced"
        assert level_category("H") == "middle-school"
        assert level_category("K") == "high-school"
        assert level_category("M") == "calculus"
        assert level_category("XP") == "calculus"
        assert source_category("XP") == "electives"


class TestLookups:
    """Lookups return None / [] for unmapped input, never raise."""

    def test_worksheet_range(self):
        r = KUMON.get_worksheet_range("C", 12)
        assert r.type == "times_table_2"
        assert r.constraints["tables"] == [2]

    def test_range_boundaries_inclusive(self):
        assert KUMON.get_worksheet_range("C", 11).type == "times_table_2"
        assert KUMON.get_worksheet_range("C", 14).type == "times_table_2"
        assert KUMON.get_worksheet_range("C", 15).type == "times_table_3"

    def test_unmapped(self):
        assert KUMON.get_worksheet_range("C", 999) is None
        assert KUMON.get_worksheet_range("ZZ", 1) is None
        assert KUMON.get_expected_skills("ZZ", 1) == []

    def test_expected_skills(self):
        assert KUMON.get_expected_skills("C", 12) == ["multiplication_2"]

    def test_validate_problem_type(self):
        assert KUMON.validate_problem_type("C", 12, "times_table_2")
        assert KUMON.validate_problem_type("C", 12, "TIMES_TABLE_2")
        assert KUMON.validate_problem_type("C", 12, "multiplication_2_facts")
        assert not KUMON.validate_problem_type("C", 12, "division")
        assert not KUMON.validate_problem_type("C", 999, "times_table_2")

    def test_constraints_read_only(self):
        r = KUMON.get_worksheet_range("C", 12)
        with pytest.raises(TypeError):
            r.constraints["tables"] = [3]

    def test_get_curriculum(self):
        assert get_curriculum("kumon") is KUMON
        assert get_curriculum("KUMON") is KUMON
        with pytest.raises(KeyError, match="Available: kumon"):
            get_curriculum("singapore")


class TestIntegrity:
    """The static pass catches gaps, overlaps and bad bounds."""

    @staticmethod
    def _curriculum(*ranges, total=10):
        level = LevelSpec("L0", "Test", "n/a", total, "n/a", list(ranges))
        return CurriculumSpec("Test", "0", [level])

    def test_kumon_is_sound(self):
        assert check_curriculum_integrity(KUMON) == []
        assert_curriculum_integrity(KUMON)

    def test_table_follows_level_order(self):
        assert KUMON.get_level("C").total_worksheets == 200
        assert KUMON.get_level("XS").total_worksheets == 70
        assert KUMON.level_ids == LEVEL_ORDER

    def test_gap(self):
        spec = self._curriculum(WorksheetRange(1, 4, "a", ""), WorksheetRange(6, 10, "b", ""))
        problems = check_curriculum_integrity(spec)
        assert problems == ["L0: worksheets 5-5 are not mapped"]

    def test_overlap(self):
        spec = self._curriculum(WorksheetRange(1, 6, "a", ""), WorksheetRange(5, 10, "b", ""))
        problems = check_curriculum_integrity(spec)
        assert len(problems) == 1
        assert "overlaps" in problems[0]

    def test_short_coverage(self):
        spec = self._curriculum(WorksheetRange(1, 8, "a", ""))
        assert check_curriculum_integrity(spec) == ["L0: worksheets 9-10 are not mapped"]

    def test_overrun(self):
        spec = self._curriculum(WorksheetRange(1, 12, "a", ""))
        assert "ranges run to 12" in check_curriculum_integrity(spec)[0]

    def test_start_after_end(self):
        spec = self._curriculum(WorksheetRange(1, 10, "a", ""), WorksheetRange(9, 3, "b", ""))
        assert any("start is after end" in p for p in check_curriculum_integrity(spec))

    def test_duplicate_level(self):
        level = LevelSpec("X", "Test", "n/a", 10, "n/a", [WorksheetRange(1, 10, "a", "")])
        spec = CurriculumSpec("Test", "0", [level, level])
        assert "X: level defined more than once" in check_curriculum_integrity(spec)

    def test_assert_raises(self):
        spec = self._curriculum(WorksheetRange(2, 10, "a", ""))
        with pytest.raises(CurriculumIntegrityError) as exc:
            assert_curriculum_integrity(spec)
        assert exc.value.problems == ["L0: worksheets 1-1 are not mapped"]
