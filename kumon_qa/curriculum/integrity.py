"""
Static integrity pass over a curriculum table.

Run once at startup so that a gap or overlap in a level's worksheet
ranges surfaces as a configuration error before anything is generated,
instead of as silent None lookups at run time.
"""
from __future__ import annotations

from loguru import logger

from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec


class CurriculumIntegrityError(ValueError):
    """Raised when a curriculum table has gaps, overlaps or bad bounds."""

    def __init__(self, curriculum: str, problems: list[str]):
        self.curriculum = curriculum
        self.problems = problems
        summary = "; ".join(problems[:5])
        more = f" (+{len(problems) - 5} more)" if len(problems) > 5 else ""
        super().__init__(f"Curriculum {curriculum!r} failed integrity check: {summary}{more}")


def check_level(spec: LevelSpec) -> list[str]:
    """Return every coverage problem in one level; empty if it is sound."""
    problems = []
    expected_start = 1
    for worksheet_range in spec.worksheet_ranges:
        tag = f"{spec.level} {worksheet_range.type} ({worksheet_range.label})"
        if worksheet_range.start > worksheet_range.end:
            problems.append(f"{tag}: start is after end")
        if worksheet_range.start < expected_start:
            problems.append(f"{tag}: overlaps the previous range")
        elif worksheet_range.start > expected_start:
            problems.append(
                f"{spec.level}: worksheets {expected_start}-{worksheet_range.start - 1} are not mapped"
            )
        expected_start = max(expected_start, worksheet_range.end + 1)

    if expected_start <= spec.total_worksheets:
        problems.append(
            f"{spec.level}: worksheets {expected_start}-{spec.total_worksheets} are not mapped"
        )
    elif expected_start - 1 > spec.total_worksheets:
        problems.append(
            f"{spec.level}: ranges run to {expected_start - 1} but the level has "
            f"{spec.total_worksheets} worksheets"
        )
    return problems


def check_curriculum_integrity(curriculum: CurriculumSpec) -> list[str]:
    problems = []
    seen: set[str] = set()
    for spec in curriculum.levels:
        if spec.level in seen:
            problems.append(f"{spec.level}: level defined more than once")
        seen.add(spec.level)
        problems.extend(check_level(spec))
    return problems


def assert_curriculum_integrity(curriculum: CurriculumSpec) -> None:
    problems = check_curriculum_integrity(curriculum)
    if problems:
        raise CurriculumIntegrityError(curriculum.name, problems)
    logger.debug(f"Curriculum {curriculum.name} passed integrity check ({len(curriculum.levels)} levels)")
