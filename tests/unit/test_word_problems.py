"""
Unit tests for word problem templating.

Run: pytest tests/unit/test_word_problems.py -v
"""

import random

import pytest

from kumon_qa.generators import GenerationError
from kumon_qa.generators.word_problems import (
    NAMES,
    PLACEHOLDER,
    fill_template,
    generate_word_problem,
)


class TestFillTemplate:
    def test_substitutes_every_token(self):
        text = fill_template("{{name}} has {{ num1 }} apples.", {"name": "Emma", "num1": 3})
        assert text == "Emma has 3 apples."

    def test_missing_placeholder_raises(self):
        """A leftover token never reaches the rendered question."""
        with pytest.raises(GenerationError, match="num2"):
            fill_template("{{name}} has {{num1}} and {{num2}}.", {"name": "Emma", "num1": 3})

    def test_extra_values_ignored(self):
        assert fill_template("Hi {{name}}", {"name": "Liam", "unused": 1}) == "Hi Liam"


class TestGenerateWordProblem:
    @pytest.mark.parametrize("operation", ["addition", "subtraction", "multiplication", "division"])
    def test_no_unresolved_tokens(self, operation):
        rng = random.Random(5)
        for _ in range(20):
            word = generate_word_problem(operation, [12, 4], rng)
            assert not PLACEHOLDER.search(word.text)
            assert word.name in NAMES
            for line in word.hints + word.solution_steps:
                assert "{{" not in line

    def test_answers(self, rng):
        assert generate_word_problem("addition", [7, 5], rng).answer == 12
        assert generate_word_problem("multiplication", [3, 4], rng).answer == 12
        assert generate_word_problem("division", [12, 4], rng).answer == 3

    def test_subtraction_swaps_to_stay_non_negative(self, rng):
        word = generate_word_problem("subtraction", [3, 8], rng)
        assert word.operands == (8, 3)
        assert word.answer == 5

    def test_division_must_be_clean(self, rng):
        with pytest.raises(GenerationError, match="not evenly divisible"):
            generate_word_problem("division", [13, 4], rng)

    def test_unknown_operation(self, rng):
        with pytest.raises(GenerationError, match="No word problem templates"):
            generate_word_problem("exponent", [2, 3], rng)
