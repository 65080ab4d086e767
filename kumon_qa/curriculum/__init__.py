"""
Curriculum specifications.

Usage:
    from kumon_qa.curriculum import get_curriculum

    spec = get_curriculum("kumon")
    spec.get_worksheet_range("C", 12)   # times_table_2
"""

from kumon_qa.curriculum.integrity import (
    CurriculumIntegrityError,
    assert_curriculum_integrity,
    check_curriculum_integrity,
)
from kumon_qa.curriculum.kumon import KUMON
from kumon_qa.curriculum.levels import LEVEL_ORDER, level_category
from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange

CURRICULA: dict[str, CurriculumSpec] = {
    "kumon": KUMON,
}


def get_curriculum(name: str) -> CurriculumSpec:
    """Look up a registered curriculum by name (case-insensitive)."""
    try:
        return CURRICULA[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown curriculum {name!r}. Available: {', '.join(sorted(CURRICULA))}"
        ) from None


__all__ = [
    "CURRICULA",
    "KUMON",
    "LEVEL_ORDER",
    "CurriculumIntegrityError",
    "CurriculumSpec",
    "LevelSpec",
    "WorksheetRange",
    "assert_curriculum_integrity",
    "check_curriculum_integrity",
    "get_curriculum",
    "level_category",
]
