"""
Procedural problem generators.

Importing this package registers every archetype synthesizer.

Usage:
    from kumon_qa.generators import generate_problem

    problem = generate_problem("C", 12)   # a 2s times-table problem
"""

# Category modules register their archetypes on import
from kumon_qa.generators import (  # noqa: F401
    calculus,
    electives,
    elementary_advanced,
    elementary_basic,
    high_school,
    middle_school,
    pre_k,
)
from kumon_qa.generators.answers import answer_to_fraction, check_answer, parse_remainder
from kumon_qa.generators.base import (
    GenerationContext,
    GenerationError,
    archetype,
    missing_archetypes,
    registered_archetypes,
)
from kumon_qa.generators.engine import (
    WorksheetInfo,
    curriculum_problems,
    generate_problem,
    generate_problem_set,
    generator_module_for,
    get_worksheet_info,
    resolve_bucket,
)
from kumon_qa.generators.models import FractionAnswer, GraduatedHints, Problem

__all__ = [
    "FractionAnswer",
    "GenerationContext",
    "GenerationError",
    "GraduatedHints",
    "Problem",
    "WorksheetInfo",
    "answer_to_fraction",
    "archetype",
    "check_answer",
    "curriculum_problems",
    "generate_problem",
    "generate_problem_set",
    "generator_module_for",
    "get_worksheet_info",
    "missing_archetypes",
    "parse_remainder",
    "registered_archetypes",
    "resolve_bucket",
]
