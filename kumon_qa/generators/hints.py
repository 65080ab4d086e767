"""
Graduated hints.

Three tiers per problem:
  micro    - a question that prompts thinking, never the answer
  visual   - the setup of the problem, with the result hidden
  teaching - a worked example on a *similar* problem, not this one
"""
from __future__ import annotations

from typing import Optional, Sequence

from kumon_qa.curriculum.levels import level_category
from kumon_qa.generators.models import GraduatedHints


def _similar_pair(a: int, b: int) -> tuple[int, int]:
    return (a + 1 if a <= 5 else a - 1), (b + 1 if b <= 5 else b - 1)


def addition_hints(a: int, b: int, level: str) -> GraduatedHints:
    x, y = _similar_pair(a, b)
    if level_category(level) == "pre-k":
        micro = "Can you point to each one and count them all together?"
    else:
        micro = f"Start at {max(a, b)}. How many more do you need to count on?"
    return GraduatedHints(
        micro=micro,
        visual=f"Put {a} and {b} together: {'●' * min(a, 20)} + {'●' * min(b, 20)}",
        teaching=f"Try {x} + {y}: start at {x} and count on {y} to get {x + y}.",
    )


def subtraction_hints(a: int, b: int, level: str) -> GraduatedHints:
    x = a + 1
    y = min(b, x - 1)
    return GraduatedHints(
        micro=f"If you start with {a} and take away {b}, will you have more or less than {a}?",
        visual=f"Start at {a} on the number line and jump back {b} times.",
        teaching=f"Try {x} - {y}: count back {y} from {x} to land on {x - y}.",
    )


def multiplication_hints(a: int, b: int, level: str) -> GraduatedHints:
    x, y = _similar_pair(a, b)
    return GraduatedHints(
        micro=f"How many groups of {b} are there?",
        visual=f"Picture {a} rows with {b} in each row.",
        teaching=f"Try {x} × {y}: {y} added {x} times is {x * y}.",
    )


def division_hints(a: int, b: int, level: str) -> GraduatedHints:
    y = b + 1 if b <= 5 else b - 1
    x = y * max(1, a // b)
    return GraduatedHints(
        micro=f"How many groups of {b} fit into {a}?",
        visual=f"Share {a} things equally into {b} groups.",
        teaching=f"Try {x} ÷ {y}: {y} × {x // y} = {x}, so the answer is {x // y}.",
    )


_BY_OPERATION = {
    "addition": addition_hints,
    "subtraction": subtraction_hints,
    "multiplication": multiplication_hints,
    "division": division_hints,
}


def build_graduated_hints(
    problem_type: str,
    operands: Optional[Sequence[float]],
    level: str,
    hints: Sequence[str] = (),
) -> Optional[GraduatedHints]:
    """
    Pick tiered hints for a problem.

    Basic operations on two whole-number operands get operation-specific
    tiers; everything else falls back to the static hint list.
    """
    builder = _BY_OPERATION.get(problem_type)
    if builder and operands and len(operands) >= 2:
        a, b = operands[0], operands[1]
        if isinstance(a, int) and isinstance(b, int) and a >= 0 and b > 0:
            return builder(a, b, level)
    if not hints:
        return None
    first = hints[0]
    second = hints[1] if len(hints) > 1 else first
    return GraduatedHints(micro=first, visual=second, teaching=hints[-1])
