"""
Unit tests for problem generation.

Run: pytest tests/unit/test_generators.py -v
"""

import random

import pytest

from kumon_qa.curriculum import KUMON
from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange
from kumon_qa.generators import (
    GenerationError,
    Problem,
    WorksheetInfo,
    check_answer,
    curriculum_problems,
    generate_problem,
    generate_problem_set,
    generator_module_for,
    get_worksheet_info,
    missing_archetypes,
    registered_archetypes,
    resolve_bucket,
)

ALL_RANGES = [
    (level.level, worksheet_range)
    for level in KUMON.levels
    for worksheet_range in level.worksheet_ranges
]


# =============================================================================
# Coverage
# =============================================================================


class TestEveryRangeGenerates:
    """Every mapped worksheet produces a well-formed problem."""

    @pytest.mark.parametrize(
        "level,worksheet_range",
        ALL_RANGES,
        ids=[f"{level}-{r.label}" for level, r in ALL_RANGES],
    )
    def test_range_endpoints(self, level, worksheet_range):
        rng = random.Random(42)
        for worksheet in (worksheet_range.start, worksheet_range.end):
            for _ in range(5):
                problem = generate_problem(level, worksheet, rng)
                assert isinstance(problem, Problem)
                assert problem.level == level
                assert problem.worksheet_number == worksheet
                assert problem.question.strip()
                assert problem.correct_answer is not None
                assert problem.subtype
                assert 1 <= problem.difficulty <= 10

    def test_no_unregistered_ranges(self):
        assert missing_archetypes(KUMON) == []
        assert curriculum_problems(KUMON) == []

    def test_registry_lists_archetypes(self):
        names = registered_archetypes()
        assert "times_table_2" in names
        assert names == sorted(names)


# =============================================================================
# Determinism
# =============================================================================


class TestArchetypeStability:
    """Only operand values vary between calls for the same worksheet."""

    @pytest.mark.parametrize("level,worksheet", [("3A", 100), ("2A", 40), ("A", 150), ("C", 12), ("D", 10)])
    def test_type_and_subtype_stable(self, level, worksheet):
        rng = random.Random(3)
        first = generate_problem(level, worksheet, rng)
        for _ in range(20):
            problem = generate_problem(level, worksheet, rng)
            assert problem.type == first.type
            assert problem.subtype == first.subtype

    def test_same_seed_same_problem(self):
        a = generate_problem("D", 50, random.Random(9))
        b = generate_problem("D", 50, random.Random(9))
        assert a.question == b.question
        assert a.correct_answer == b.correct_answer


# =============================================================================
# Answers
# =============================================================================


class TestAnswers:
    def test_times_table_uses_table_as_first_operand(self, rng):
        for problem in generate_problem_set("C", 12, count=20, rng=rng):
            assert problem.type == "multiplication"
            assert problem.operands[0] == 2
            assert problem.correct_answer == problem.operands[0] * problem.operands[1]

    def test_fixed_addend_addition(self, rng):
        for problem in generate_problem_set("3A", 71, count=20, rng=rng):
            a, b = problem.operands
            assert problem.correct_answer == a + b

    def test_subtraction_never_negative(self, rng):
        for worksheet in (1, 100, 200):
            for problem in generate_problem_set("A", worksheet, count=20, rng=rng):
                if problem.type == "subtraction":
                    assert problem.correct_answer >= 0

    def test_division_answer_checks_out(self, rng):
        for worksheet in range(111, 201, 5):
            problem = generate_problem("C", worksheet, rng)
            assert problem.type == "division"
            dividend, divisor = problem.operands
            if isinstance(problem.correct_answer, str):
                quotient, remainder = (int(p) for p in problem.correct_answer.split(" R "))
                assert quotient * divisor + remainder == dividend
                assert 0 < remainder < divisor
            else:
                assert problem.correct_answer * divisor == dividend

    def test_generated_answers_accepted_by_checker(self, rng):
        for level, worksheet in (("C", 12), ("D", 150), ("E", 10), ("F", 100)):
            problem = generate_problem(level, worksheet, rng)
            assert check_answer(problem, str(problem.correct_answer))

    def test_vertical_layout_has_operands(self, rng):
        problem = generate_problem("B", 50, rng)
        assert problem.is_vertical
        assert len(problem.operands) >= 2
        assert "=" not in problem.question


# =============================================================================
# Failures
# =============================================================================


class TestGenerationErrors:
    """Unknown levels and unmapped worksheets raise instead of guessing."""

    def test_unknown_level(self):
        with pytest.raises(GenerationError, match="unknown level"):
            generate_problem("Z9", 1)

    def test_worksheet_out_of_range(self):
        with pytest.raises(GenerationError, match="outside 1-200"):
            generate_problem("C", 201)
        with pytest.raises(GenerationError):
            generate_problem("C", 0)

    def test_elective_total(self):
        with pytest.raises(GenerationError, match="outside 1-70"):
            generate_problem("XS", 71)

    def test_error_carries_location(self):
        with pytest.raises(GenerationError) as exc:
            resolve_bucket("C", 500)
        assert exc.value.level == "C"
        assert exc.value.worksheet == 500

    def test_resolve_bucket(self):
        assert resolve_bucket("C", 12).type == "times_table_2"

    def test_custom_curriculum(self, two_range_curriculum):
        assert curriculum_problems(two_range_curriculum) == []

        problem = generate_problem("T", 7, random.Random(1), two_range_curriculum)
        assert problem.operands[1] == 2

    def test_range_without_synthesizer(self):
        level = LevelSpec("Q", "Test", "n/a", 5, "n/a", [WorksheetRange(1, 5, "no_such_archetype", "")])
        spec = CurriculumSpec("Test", "0", [level])
        assert curriculum_problems(spec) == ["no generator for Q:no_such_archetype"]
        with pytest.raises(GenerationError, match="no generator"):
            generate_problem("Q", 1, curriculum=spec)


# =============================================================================
# Worksheet info and source paths
# =============================================================================


class TestWorksheetInfo:
    def test_info(self):
        info = get_worksheet_info("C", 12)
        assert isinstance(info, WorksheetInfo)
        assert info.problem_type == "times_table_2"
        assert info.topic == "Times Table: 2s"
        assert info.expected_skills == ("multiplication_2",)
        assert info.to_dict()["expected_skills"] == ["multiplication_2"]

    def test_unmapped(self):
        assert get_worksheet_info("C", 999) is None
        assert get_worksheet_info("ZZ", 1) is None

    def test_generator_module_for(self):
        assert generator_module_for("C") == "kumon_qa/generators/**/elementary_advanced.py"
        assert generator_module_for("5A") == "kumon_qa/generators/**/pre_k.py"
        assert generator_module_for("XP") == "kumon_qa/generators/**/electives.py"
