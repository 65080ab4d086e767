"""
Problem value types.

A Problem is created fresh by every generator call and never mutated
afterwards; it is either rendered or fed straight into validation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Optional, Union


@dataclass(frozen=True)
class FractionAnswer:
    """An exact fraction answer; may be unreduced."""

    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator == 0:
            raise ValueError("Fraction denominator cannot be zero")

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def equals(self, other: FractionAnswer) -> bool:
        """Equivalence by cross-multiplication."""
        return self.numerator * other.denominator == other.numerator * self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def to_dict(self) -> dict[str, int]:
        return {"numerator": self.numerator, "denominator": self.denominator}


Answer = Union[int, float, str, FractionAnswer]


@dataclass(frozen=True)
class GraduatedHints:
    """Three escalating hint tiers: a prompt, a setup, a worked example."""

    micro: str
    visual: str
    teaching: str

    def to_dict(self) -> dict[str, str]:
        return {"micro": self.micro, "visual": self.visual, "teaching": self.teaching}


@dataclass(frozen=True)
class Problem:
    """A single generated worksheet problem."""

    id: str
    level: str
    worksheet_number: int
    type: str
    question: str
    correct_answer: Answer
    subtype: Optional[str] = None
    operands: Optional[tuple[Union[int, float], ...]] = None
    display_format: str = "horizontal"  # horizontal | vertical
    difficulty: int = 1
    hints: tuple[str, ...] = ()
    graduated_hints: Optional[GraduatedHints] = None
    visual_assets: tuple[str, ...] = ()
    missing_position: Optional[int] = None
    solution_steps: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if self.operands is not None:
            object.__setattr__(self, "operands", tuple(self.operands))
        object.__setattr__(self, "hints", tuple(self.hints))
        object.__setattr__(self, "visual_assets", tuple(self.visual_assets))
        object.__setattr__(self, "solution_steps", tuple(self.solution_steps))

    @property
    def is_vertical(self) -> bool:
        return self.display_format == "vertical"

    def to_dict(self) -> dict[str, Any]:
        answer = self.correct_answer
        return {
            "id": self.id,
            "level": self.level,
            "worksheet_number": self.worksheet_number,
            "type": self.type,
            "subtype": self.subtype,
            "question": self.question,
            "correct_answer": answer.to_dict() if isinstance(answer, FractionAnswer) else answer,
            "operands": list(self.operands) if self.operands is not None else None,
            "display_format": self.display_format,
            "difficulty": self.difficulty,
            "hints": list(self.hints),
            "graduated_hints": self.graduated_hints.to_dict() if self.graduated_hints else None,
            "visual_assets": list(self.visual_assets),
            "missing_position": self.missing_position,
            "solution_steps": list(self.solution_steps),
        }
