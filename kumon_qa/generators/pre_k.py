"""
Pre-K levels (7A-4A): counting pictures and dots, reading, sequencing
and writing numbers.
"""
from __future__ import annotations

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import format_sequence
from kumon_qa.generators.visuals import DOT_PATTERNS, dot_asset, random_object_asset

NUMBER_WORDS = [
    "zero", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
]


@archetype("count_pictures_to_5", "count_pictures_to_10", "count_to_5", "count_to_10")
def count_objects(ctx: GenerationContext) -> Problem:
    count = ctx.randint(1, ctx.constraint("max_count", 10))
    name, asset = random_object_asset(ctx.rng, count)
    return ctx.problem(
        "counting",
        f"How many {name}s?",
        count,
        visual_assets=[asset],
        hints=["Touch each one as you count.", f"Count the {name}s one by one."],
    )


@archetype("match_quantity_to_numeral")
def match_quantity(ctx: GenerationContext) -> Problem:
    count = ctx.randint(1, ctx.constraint("max_count", 10))
    name, asset = random_object_asset(ctx.rng, count)
    return ctx.problem(
        "number_recognition",
        f"Find the number for the {name}s.",
        count,
        visual_assets=[asset],
        hints=["Count first, then find the number."],
    )


@archetype("dot_pattern_recognition", "dot_recognition_to_10")
def count_dots(ctx: GenerationContext) -> Problem:
    count = ctx.randint(1, ctx.constraint("max_count", 10))
    pattern = ctx.choice(DOT_PATTERNS)
    return ctx.problem(
        "counting",
        "How many dots?",
        count,
        visual_assets=[dot_asset(pattern, count)],
        hints=["Look at the shape the dots make.", "Count each dot once."],
    )


@archetype("number_reading_to_10", "number_reading_to_30")
def read_number(ctx: GenerationContext) -> Problem:
    top = ctx.constraint("max_number", 10)
    number = ctx.randint(1, top)
    if number < len(NUMBER_WORDS) and ctx.randint(0, 1):
        question = f"Which number is {NUMBER_WORDS[number]}?"
    else:
        question = f"Read this number: {number}"
    return ctx.problem(
        "number_reading",
        question,
        number,
        hints=["Say the number out loud."],
    )


@archetype("sequence_to_30", "sequence_to_40", "sequence_to_50", "number_sequence_to_120")
def number_sequence(ctx: GenerationContext) -> Problem:
    top = ctx.constraint("max_number", 30)
    length = 5
    start = ctx.randint(1, top - length + 1)
    numbers = list(range(start, start + length))
    missing = ctx.randint(1, length - 1)
    return ctx.problem(
        "sequence",
        format_sequence(numbers, missing),
        numbers[missing],
        missing_position=missing,
        hints=["Say the numbers in order.", f"What comes after {numbers[missing - 1]}?"],
    )


@archetype("trace_number_1_to_10")
def trace_number(ctx: GenerationContext) -> Problem:
    number = ctx.randint(1, ctx.constraint("max_number", 10))
    return ctx.problem(
        "number_writing",
        f"Trace the number {number}.",
        number,
        hints=["Start at the dot."],
    )


@archetype(
    "write_number_1_to_10",
    "write_number_1_to_20",
    "write_number_1_to_30",
    "write_number_1_to_50",
)
def write_number(ctx: GenerationContext) -> Problem:
    number = ctx.randint(2, ctx.constraint("max_number", 10))
    return ctx.problem(
        "number_writing",
        f"Write the number after {number - 1}.",
        number,
        hints=[f"Count on from {number - 1}."],
    )
