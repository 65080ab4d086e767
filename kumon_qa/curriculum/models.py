"""
Curriculum data model.

A CurriculumSpec is static configuration: loaded once, immutable for the
lifetime of the process. Lookups never raise; an unmapped level or
worksheet comes back as None / [] and callers treat that as a warning.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class WorksheetRange:
    """An inclusive run of worksheet numbers sharing one problem archetype."""

    start: int
    end: int
    type: str
    description: str
    expected_skills: tuple[str, ...] = ()
    # Synthesis parameters (tables, addends, digits, ...) read by generators
    constraints: Mapping[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "expected_skills", tuple(self.expected_skills))
        object.__setattr__(self, "constraints", _frozen(self.constraints))

    def contains(self, worksheet: int) -> bool:
        return self.start <= worksheet <= self.end

    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "type": self.type,
            "description": self.description,
            "expected_skills": list(self.expected_skills),
        }


@dataclass(frozen=True)
class LevelSpec:
    """One curriculum level and its ordered worksheet ranges."""

    level: str
    name: str
    grade_range: str
    total_worksheets: int
    sct: str  # standard completion time
    worksheet_ranges: tuple[WorksheetRange, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "worksheet_ranges", tuple(self.worksheet_ranges))

    def find_range(self, worksheet: int) -> Optional[WorksheetRange]:
        """Ordered scan; first matching range wins."""
        for worksheet_range in self.worksheet_ranges:
            if worksheet_range.contains(worksheet):
                return worksheet_range
        return None


@dataclass(frozen=True)
class CurriculumSpec:
    """A named curriculum: the canonical level/range table plus lookups."""

    name: str
    version: str
    levels: tuple[LevelSpec, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "levels", tuple(self.levels))

    @property
    def level_ids(self) -> list[str]:
        return [spec.level for spec in self.levels]

    def get_level(self, level: str) -> Optional[LevelSpec]:
        for spec in self.levels:
            if spec.level == level:
                return spec
        return None

    def get_worksheet_range(self, level: str, worksheet: int) -> Optional[WorksheetRange]:
        spec = self.get_level(level)
        if spec is None:
            return None
        return spec.find_range(worksheet)

    def get_expected_skills(self, level: str, worksheet: int) -> list[str]:
        worksheet_range = self.get_worksheet_range(level, worksheet)
        return list(worksheet_range.expected_skills) if worksheet_range else []

    def validate_problem_type(self, level: str, worksheet: int, problem_type: str) -> bool:
        """
        True if problem_type is the range's type or contains one of its
        expected skills (case-insensitive). False for unmapped worksheets.
        """
        worksheet_range = self.get_worksheet_range(level, worksheet)
        if worksheet_range is None:
            return False
        candidate = problem_type.lower()
        if candidate == worksheet_range.type.lower():
            return True
        return any(skill.lower() in candidate for skill in worksheet_range.expected_skills)
