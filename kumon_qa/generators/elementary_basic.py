"""
Elementary basic levels (3A, 2A, A, B): fixed-addend addition,
subtraction, mixed review and vertical operations with regrouping.
"""
from __future__ import annotations

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import (
    addition_no_carry,
    format_horizontal,
    format_vertical,
    subtraction_no_borrow,
)
from kumon_qa.generators.word_problems import generate_word_problem


@archetype(
    "adding_1", "adding_2", "adding_3", "adding_up_to_3",
    "review_3a", "adding_4", "adding_5", "adding_up_to_5",
    "adding_6", "adding_7", "adding_up_to_7", "adding_8",
    "adding_9", "adding_9_and_10", "adding_up_to_10",
    "addition_review",
)
def fixed_addend(ctx: GenerationContext) -> Problem:
    """Add one of the range's addends to a base number."""
    addend = ctx.choice(ctx.constraint("addends", [1]))
    base = ctx.randint(1, ctx.constraint("max_base", 10))
    return ctx.problem(
        "addition",
        format_horizontal(base, "addition", addend),
        base + addend,
        operands=[base, addend],
        solution_steps=[f"Start at {base}.", f"Count on {addend}.", f"{base} + {addend} = {base + addend}"],
    )


@archetype(
    "subtracting_1", "subtracting_2", "subtracting_3",
    "subtracting_up_to_3", "subtraction_mastery",
)
def fixed_subtrahend(ctx: GenerationContext) -> Problem:
    subtrahend = ctx.choice(ctx.constraint("subtrahends", [1]))
    minuend = ctx.randint(1, ctx.constraint("max_minuend", 10))
    if minuend < subtrahend:
        minuend, subtrahend = subtrahend, minuend
    return ctx.problem(
        "subtraction",
        format_horizontal(minuend, "subtraction", subtrahend),
        minuend - subtrahend,
        operands=[minuend, subtrahend],
        solution_steps=[f"Start at {minuend}.", f"Count back {subtrahend}."],
    )


@archetype("review_a")
def horizontal_review(ctx: GenerationContext) -> Problem:
    """Mixed horizontal addition and subtraction; one in three is a word problem."""
    top = ctx.constraint("max_number", 20)
    operation = ctx.choice(["addition", "subtraction"])
    a, b = ctx.randint(1, top), ctx.randint(1, 10)
    if operation == "subtraction" and a < b:
        a, b = b, a

    if ctx.randint(1, 3) == 1:
        word = generate_word_problem(operation, [a, b], ctx.rng)
        return ctx.problem(
            operation,
            word.text,
            word.answer,
            operands=word.operands,
            hints=word.hints,
            solution_steps=word.solution_steps,
        )

    answer = a + b if operation == "addition" else a - b
    return ctx.problem(operation, format_horizontal(a, operation, b), answer, operands=[a, b])


def _digits_for(ctx: GenerationContext) -> int:
    low, high = ctx.constraint("digits", (2, 3))
    return low if ctx.progress < 0.5 else high


@archetype("vertical_addition")
def vertical_addition(ctx: GenerationContext) -> Problem:
    digits = _digits_for(ctx)
    top = 10 ** digits - 1
    if ctx.worksheet < ctx.constraint("carry_from", 0):
        a, b = addition_no_carry(ctx.rng, top, top)
    else:
        a, b = ctx.randint(10 ** (digits - 1), top), ctx.randint(10, top)
    return ctx.problem(
        "addition",
        format_vertical(a, "addition", b),
        a + b,
        subtype="vertical_addition",
        operands=[a, b],
        display_format="vertical",
        hints=["Add the ones column first.", "Carry a ten to the next column if you need to."],
    )


@archetype("vertical_subtraction")
def vertical_subtraction(ctx: GenerationContext) -> Problem:
    digits = _digits_for(ctx)
    a = ctx.randint(10 ** (digits - 1) + 10, 10 ** digits - 1)
    if ctx.worksheet < ctx.constraint("borrow_from", 0):
        a, b = subtraction_no_borrow(ctx.rng, a, a - 1)
    else:
        b = ctx.randint(10, a - 1)
    return ctx.problem(
        "subtraction",
        format_vertical(a, "subtraction", b),
        a - b,
        subtype="vertical_subtraction",
        operands=[a, b],
        display_format="vertical",
        hints=["Subtract the ones column first.", "Borrow from the tens if the top digit is smaller."],
    )
