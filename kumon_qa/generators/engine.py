"""
Problem generation entry points.

generate_problem(level, worksheet) is a pure function of its inputs
except for randomness: the archetype (type/subtype) is fixed by the
curriculum table, only operand values vary between calls.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from kumon_qa.curriculum.integrity import check_curriculum_integrity
from kumon_qa.curriculum.kumon import KUMON
from kumon_qa.curriculum.levels import source_category
from kumon_qa.curriculum.models import CurriculumSpec, WorksheetRange
from kumon_qa.generators.base import (
    GenerationContext,
    GenerationError,
    missing_archetypes,
    resolve_archetype,
)
from kumon_qa.generators.models import Problem

_RNG = random.Random()

GENERATOR_ROOT = "kumon_qa/generators"


def resolve_bucket(
    level: str, worksheet: int, curriculum: CurriculumSpec = KUMON
) -> WorksheetRange:
    """Range resolution only: map (level, worksheet) to its archetype bucket."""
    spec = curriculum.get_level(level)
    if spec is None:
        raise GenerationError(level, worksheet, f"unknown level for curriculum {curriculum.name}")
    worksheet_range = spec.find_range(worksheet)
    if worksheet_range is None:
        raise GenerationError(
            level, worksheet, f"worksheet is outside 1-{spec.total_worksheets}"
        )
    return worksheet_range


def generate_problem(
    level: str,
    worksheet: int,
    rng: Optional[random.Random] = None,
    curriculum: CurriculumSpec = KUMON,
) -> Problem:
    """Generate one problem for a level and worksheet number."""
    worksheet_range = resolve_bucket(level, worksheet, curriculum)
    synthesize = resolve_archetype(worksheet_range.type)
    if synthesize is None:
        raise GenerationError(level, worksheet, f"no generator for {worksheet_range.type!r}")

    ctx = GenerationContext(level, worksheet, worksheet_range, rng or _RNG)
    problem = synthesize(ctx)
    logger.debug(f"Generated {problem.id}: {problem.type}/{problem.subtype}")
    return problem


def generate_problem_set(
    level: str,
    worksheet: int,
    count: int = 10,
    rng: Optional[random.Random] = None,
    curriculum: CurriculumSpec = KUMON,
) -> list[Problem]:
    """A worksheet page: `count` problems from the same bucket."""
    return [generate_problem(level, worksheet, rng, curriculum) for _ in range(count)]


@dataclass(frozen=True)
class WorksheetInfo:
    level: str
    worksheet: int
    level_name: str
    grade_range: str
    topic: str
    problem_type: str
    expected_skills: tuple[str, ...]
    sct: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "worksheet": self.worksheet,
            "level_name": self.level_name,
            "grade_range": self.grade_range,
            "topic": self.topic,
            "problem_type": self.problem_type,
            "expected_skills": list(self.expected_skills),
            "sct": self.sct,
        }


def get_worksheet_info(
    level: str, worksheet: int, curriculum: CurriculumSpec = KUMON
) -> Optional[WorksheetInfo]:
    """Topic, standard completion time and skills for a worksheet; None if unmapped."""
    spec = curriculum.get_level(level)
    worksheet_range = spec.find_range(worksheet) if spec else None
    if spec is None or worksheet_range is None:
        return None
    return WorksheetInfo(
        level=level,
        worksheet=worksheet,
        level_name=spec.name,
        grade_range=spec.grade_range,
        topic=worksheet_range.description,
        problem_type=worksheet_range.type,
        expected_skills=worksheet_range.expected_skills,
        sct=spec.sct,
    )


def generator_module_for(level: str) -> str:
    """Source path a fix for this level's generator should target."""
    return f"{GENERATOR_ROOT}/**/{source_category(level).replace('-', '_')}.py"


def curriculum_problems(curriculum: CurriculumSpec = KUMON) -> list[str]:
    """Static table problems plus ranges no registered synthesizer can generate."""
    problems = check_curriculum_integrity(curriculum)
    problems.extend(f"no generator for {entry}" for entry in missing_archetypes(curriculum))
    return problems
