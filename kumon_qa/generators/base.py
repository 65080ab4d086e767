"""
Generator framework: archetype registry and generation context.

Each worksheet range in the curriculum table names an archetype (its
`type`). Category modules register one synthesizer per archetype with
the @archetype decorator; generation resolves (level, worksheet) to a
range, looks the synthesizer up by the range type and calls it with a
GenerationContext carrying the range constraints and the caller's rng.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from kumon_qa.curriculum.models import CurriculumSpec, WorksheetRange
from kumon_qa.generators.hints import build_graduated_hints
from kumon_qa.generators.models import Answer, Problem
from kumon_qa.generators.utils import calculate_difficulty, generate_id


class GenerationError(ValueError):
    """Raised when a (level, worksheet) pair cannot produce a problem."""

    def __init__(self, level: str, worksheet: int, message: str):
        self.level = level
        self.worksheet = worksheet
        super().__init__(f"Cannot generate {level} worksheet {worksheet}: {message}")


Synthesizer = Callable[["GenerationContext"], Problem]

_ARCHETYPES: dict[str, Synthesizer] = {}


def archetype(*names: str) -> Callable[[Synthesizer], Synthesizer]:
    """Register a synthesizer for one or more range types."""

    def decorator(func: Synthesizer) -> Synthesizer:
        for name in names:
            if name in _ARCHETYPES:
                raise ValueError(f"Archetype {name!r} registered twice")
            _ARCHETYPES[name] = func
        return func

    return decorator


def resolve_archetype(name: str) -> Optional[Synthesizer]:
    return _ARCHETYPES.get(name)


def registered_archetypes() -> list[str]:
    return sorted(_ARCHETYPES)


def missing_archetypes(curriculum: CurriculumSpec) -> list[str]:
    """'<level>:<type>' for every range with no registered synthesizer."""
    return [
        f"{level.level}:{worksheet_range.type}"
        for level in curriculum.levels
        for worksheet_range in level.worksheet_ranges
        if worksheet_range.type not in _ARCHETYPES
    ]


@dataclass
class GenerationContext:
    """Everything a synthesizer needs to produce one problem."""

    level: str
    worksheet: int
    range: WorksheetRange
    rng: random.Random

    def constraint(self, key: str, default: Any = None) -> Any:
        return self.range.constraints.get(key, default)

    def randint(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)

    def choice(self, items: Sequence[Any]) -> Any:
        return self.rng.choice(list(items))

    @property
    def progress(self) -> float:
        """0.0 at the first worksheet of the range, 1.0 at the last."""
        span = self.range.end - self.range.start
        return (self.worksheet - self.range.start) / span if span else 0.0

    def fail(self, message: str) -> GenerationError:
        return GenerationError(self.level, self.worksheet, message)

    def problem(
        self,
        type: str,
        question: str,
        correct_answer: Answer,
        *,
        subtype: Optional[str] = None,
        operands: Optional[Sequence[float]] = None,
        display_format: str = "horizontal",
        hints: Sequence[str] = (),
        visual_assets: Sequence[str] = (),
        missing_position: Optional[int] = None,
        solution_steps: Sequence[str] = (),
    ) -> Problem:
        """Assemble a Problem; subtype defaults to the range's archetype."""
        return Problem(
            id=generate_id(self.level, self.worksheet),
            level=self.level,
            worksheet_number=self.worksheet,
            type=type,
            subtype=subtype or self.range.type,
            question=question,
            correct_answer=correct_answer,
            operands=tuple(operands) if operands is not None else None,
            display_format=display_format,
            difficulty=calculate_difficulty(self.level, self.worksheet, operands),
            hints=tuple(hints),
            graduated_hints=build_graduated_hints(type, operands, self.level, hints),
            visual_assets=tuple(visual_assets),
            missing_position=missing_position,
            solution_steps=tuple(solution_steps),
        )
