"""
Elementary advanced levels (C-F): times tables, long multiplication and
division, fractions, order of operations and decimals.
"""
from __future__ import annotations

from decimal import Decimal

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import FractionAnswer, Problem
from kumon_qa.generators.utils import (
    BLANK,
    add_fractions,
    compare_fractions,
    divide_fractions,
    format_horizontal,
    format_vertical,
    gcd,
    multiply_fractions,
    simplify_fraction,
    subtract_fractions,
)


def decimal_text(value: Decimal) -> str:
    """Plain decimal text without trailing zeros or exponent."""
    return format(value.normalize(), "f")


# =============================================================================
# Level C / D: multiplication and division
# =============================================================================


@archetype("review_b")
def vertical_review(ctx: GenerationContext) -> Problem:
    low, high = ctx.constraint("digits", (2, 3))
    digits = ctx.randint(low, high)
    a = ctx.randint(10 ** (digits - 1) + 10, 10 ** digits - 1)
    b = ctx.randint(10, a - 1)
    operation = ctx.choice(["addition", "subtraction"])
    answer = a + b if operation == "addition" else a - b
    return ctx.problem(
        operation,
        format_vertical(a, operation, b),
        answer,
        operands=[a, b],
        display_format="vertical",
    )


@archetype(
    "times_table_2", "times_table_3", "times_table_2_3",
    "times_table_4", "times_table_5", "times_table_4_5",
    "times_table_6", "times_table_7", "times_table_6_7",
    "times_table_8", "times_table_9", "times_table_8_9",
)
def times_table(ctx: GenerationContext) -> Problem:
    """The table is always the first operand: 2 × 7 for the 2s."""
    table = ctx.choice(ctx.constraint("tables", [2]))
    multiplier = ctx.randint(1, 10)
    return ctx.problem(
        "multiplication",
        format_horizontal(table, "multiplication", multiplier),
        table * multiplier,
        operands=[table, multiplier],
        hints=[f"Count by {table}s.", f"{table} × {multiplier} means {multiplier} groups of {table}."],
    )


@archetype("multiplication_multi_digit", "multiplication_2x2")
def long_multiplication(ctx: GenerationContext) -> Problem:
    a = ctx.randint(*ctx.constraint("multiplicand", (10, 99)))
    b = ctx.randint(*ctx.constraint("multiplier", (2, 9)))
    return ctx.problem(
        "multiplication",
        format_vertical(a, "multiplication", b),
        a * b,
        operands=[a, b],
        display_format="vertical",
        hints=["Multiply the ones digit first.", "Line up each partial product."],
    )


@archetype("division_intro", "division_with_remainder", "long_division")
def division(ctx: GenerationContext) -> Problem:
    """
    dividend = divisor × quotient (+ remainder). Clean unless the range
    allows remainders, in which case the answer reads "q R r".
    """
    divisor = ctx.randint(*ctx.constraint("divisor", (2, 9)))
    quotient = ctx.randint(*ctx.constraint("quotient", (1, 9)))
    remainder = 0
    if ctx.constraint("allow_remainder", False):
        remainder = ctx.randint(1, divisor - 1)
    dividend = divisor * quotient + remainder
    answer = f"{quotient} R {remainder}" if remainder else quotient
    return ctx.problem(
        "division",
        format_horizontal(dividend, "division", divisor),
        answer,
        operands=[dividend, divisor],
        hints=[f"How many {divisor}s fit into {dividend}?", "Multiply back to check."],
        solution_steps=[f"{divisor} × {quotient} = {divisor * quotient}"]
        + ([f"{dividend} - {divisor * quotient} = {remainder} left over"] if remainder else []),
    )


# =============================================================================
# Level D / E: fractions
# =============================================================================


def _proper_fraction(ctx: GenerationContext, max_denominator: int, reduced: bool = True) -> FractionAnswer:
    denominator = ctx.randint(2, max_denominator)
    numerator = ctx.randint(1, denominator - 1)
    if reduced:
        return simplify_fraction(numerator, denominator)
    return FractionAnswer(numerator, denominator)


@archetype("fractions_intro")
def fraction_identification(ctx: GenerationContext) -> Problem:
    fraction = _proper_fraction(ctx, ctx.constraint("max_denominator", 12), reduced=False)
    return ctx.problem(
        "fraction",
        f"A shape has {fraction.denominator} equal parts and {fraction.numerator} are shaded. "
        f"What fraction is shaded?",
        fraction,
        hints=["The bottom number counts all the parts.", "The top number counts the shaded parts."],
    )


@archetype("fraction_reduction")
def fraction_reduction(ctx: GenerationContext) -> Problem:
    reduced = _proper_fraction(ctx, ctx.constraint("max_denominator", 12))
    factor = ctx.randint(2, ctx.constraint("max_factor", 6))
    numerator, denominator = reduced.numerator * factor, reduced.denominator * factor
    return ctx.problem(
        "fraction",
        f"Reduce to lowest terms: {numerator}/{denominator} = {BLANK}",
        simplify_fraction(numerator, denominator),
        hints=[f"What number divides both {numerator} and {denominator}?"],
        solution_steps=[f"GCF({numerator}, {denominator}) = {gcd(numerator, denominator)}"],
    )


def _fraction_pair(ctx: GenerationContext, same_denominator: bool) -> tuple[FractionAnswer, FractionAnswer]:
    top = ctx.constraint("max_denominator", 12)
    if same_denominator:
        denominator = ctx.randint(3, top)
        return (
            FractionAnswer(ctx.randint(1, denominator - 1), denominator),
            FractionAnswer(ctx.randint(1, denominator - 1), denominator),
        )
    return _proper_fraction(ctx, top), _proper_fraction(ctx, top)


@archetype("fraction_addition")
def fraction_addition(ctx: GenerationContext) -> Problem:
    same = ctx.worksheet <= ctx.constraint("same_denominator_until", 0)
    a, b = _fraction_pair(ctx, same)
    if a.denominator == b.denominator:
        subtype = "fraction_add_same_denom"
    else:
        subtype = "fraction_add_diff_denom"
    return ctx.problem(
        "fraction",
        f"{a} + {b} = {BLANK}",
        add_fractions(a, b),
        subtype=subtype,
        hints=["Make the denominators the same first.", "Reduce your answer."],
    )


@archetype("fraction_subtraction")
def fraction_subtraction(ctx: GenerationContext) -> Problem:
    a, b = _fraction_pair(ctx, ctx.randint(0, 1) == 1)
    if compare_fractions(a, b) < 0:
        a, b = b, a
    return ctx.problem(
        "fraction",
        f"{a} - {b} = {BLANK}",
        subtract_fractions(a, b),
        hints=["Make the denominators the same first."],
    )


@archetype("fraction_multiplication")
def fraction_multiplication(ctx: GenerationContext) -> Problem:
    a, b = _fraction_pair(ctx, False)
    return ctx.problem(
        "fraction",
        f"{a} × {b} = {BLANK}",
        multiply_fractions(a, b),
        hints=["Multiply the tops, multiply the bottoms, then reduce."],
    )


@archetype("fraction_division")
def fraction_division(ctx: GenerationContext) -> Problem:
    a, b = _fraction_pair(ctx, False)
    return ctx.problem(
        "fraction",
        f"{a} ÷ {b} = {BLANK}",
        divide_fractions(a, b),
        hints=[f"Flip {b} and multiply."],
    )


# =============================================================================
# Level F: mixed fractions, order of operations, decimals
# =============================================================================


@archetype("three_fraction_operations")
def three_fractions(ctx: GenerationContext) -> Problem:
    top = ctx.constraint("max_denominator", 8)
    a, b, c = (_proper_fraction(ctx, top) for _ in range(3))
    second = ctx.choice(["+", "-"])
    partial = add_fractions(a, b)
    result = add_fractions(partial, c) if second == "+" else subtract_fractions(partial, c)
    if result.numerator < 0:
        second, result = "+", add_fractions(partial, c)
    return ctx.problem(
        "fraction",
        f"{a} + {b} {second} {c} = {BLANK}",
        result,
        hints=["Find one common denominator for all three."],
    )


@archetype("order_of_operations")
def order_of_operations(ctx: GenerationContext) -> Problem:
    top = ctx.constraint("max_number", 12)
    a, b, c = ctx.randint(1, top), ctx.randint(1, top), ctx.randint(2, 9)
    form = ctx.randint(1, 4)
    if form == 1:
        question, answer = f"{a} + {b} × {c}", a + b * c
    elif form == 2:
        question, answer = f"({a} + {b}) × {c}", (a + b) * c
    elif form == 3:
        product = b * c
        a = a + product
        question, answer = f"{a} - {b} × {c}", a - product
    else:
        question, answer = f"{a} + {b * c} ÷ {c}", a + b
    return ctx.problem(
        "order_of_operations",
        f"{question} = {BLANK}",
        answer,
        hints=["Parentheses first, then × and ÷, then + and -."],
    )


TERMINATING_DENOMINATORS = [2, 4, 5, 8, 10, 20, 25]


@archetype("fractions_and_decimals")
def fraction_decimal_conversion(ctx: GenerationContext) -> Problem:
    denominator = ctx.choice(TERMINATING_DENOMINATORS)
    numerator = ctx.randint(1, denominator - 1)
    as_decimal = decimal_text(Decimal(numerator) / Decimal(denominator))
    if ctx.randint(0, 1):
        return ctx.problem(
            "decimal",
            f"Write {numerator}/{denominator} as a decimal.",
            as_decimal,
            hints=[f"Divide {numerator} by {denominator}."],
        )
    return ctx.problem(
        "decimal",
        f"Write {as_decimal} as a fraction in lowest terms.",
        simplify_fraction(numerator, denominator),
        hints=["Read the decimal as tenths or hundredths, then reduce."],
    )


@archetype("decimal_operations")
def decimal_operations(ctx: GenerationContext) -> Problem:
    places = ctx.randint(*ctx.constraint("places", (1, 2)))
    scale = Decimal(10) ** -places
    a = Decimal(ctx.randint(10, 999)) * scale
    b = Decimal(ctx.randint(10, 999)) * scale
    operation = ctx.choice(["addition", "subtraction", "multiplication"])
    if operation == "subtraction" and a < b:
        a, b = b, a
    if operation == "addition":
        result = a + b
    elif operation == "subtraction":
        result = a - b
    else:
        result = a * b
    return ctx.problem(
        "decimal",
        format_horizontal(float(a), operation, float(b)),
        decimal_text(result),
        operands=[float(a), float(b)],
        hints=["Line up the decimal points."],
    )
