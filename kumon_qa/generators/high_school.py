"""
High school levels (J, K): advanced factoring and quadratics, remainder
and factor theorems, proofs, and the function families.
"""
from __future__ import annotations

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import (
    evaluate_polynomial,
    format_binomial,
    format_linear,
    format_polynomial,
    random_nonzero,
)

# =============================================================================
# Level J
# =============================================================================


@archetype("advanced_factoring")
def advanced_factoring(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 5)
    if ctx.randint(0, 1):
        a = ctx.randint(1, m)
        minus = ctx.randint(0, 1) == 1
        cube = a ** 3
        if minus:
            question = f"Factor: x^3 - {cube}"
            answer = f"(x - {a})({format_polynomial([1, a, a * a])})"
        else:
            question = f"Factor: x^3 + {cube}"
            answer = f"(x + {a})({format_polynomial([1, -a, a * a])})"
        return ctx.problem("algebra", question, answer, subtype="factor_cubes")
    a, b = random_nonzero(ctx.rng, -m, m), ctx.randint(1, m)
    # (x + a)(x^2 + b) = x^3 + ax^2 + bx + ab
    return ctx.problem(
        "algebra",
        f"Factor by grouping: {format_polynomial([1, a, b, a * b])}",
        f"{format_binomial(-a)}({format_polynomial([1, 0, b])})",
        subtype="factor_grouping",
        hints=["Group the first two terms and the last two terms."],
    )


@archetype("fractional_expressions")
def rational_expression(ctx: GenerationContext) -> Problem:
    a = ctx.randint(1, ctx.constraint("magnitude", 9))
    return ctx.problem(
        "algebra",
        f"Simplify: (x^2 - {a * a})/(x - {a})",
        f"x + {a}",
        subtype="rational_expressions",
        hints=["Factor the top as a difference of squares."],
    )


@archetype("irrational_numbers")
def surd_sum(ctx: GenerationContext) -> Problem:
    inside = ctx.choice([2, 3, 5, 6, 7])
    j, k = ctx.randint(1, 5), ctx.randint(2, 5)
    return ctx.problem(
        "radical",
        f"Simplify: √{j * j * inside} + √{k * k * inside}",
        f"{j + k}√{inside}",
        subtype="irrational_operations",
    )


@archetype("quadratic_equations_advanced")
def complex_roots(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    p, q = ctx.randint(-m, m), ctx.randint(1, m)
    # (x - p)^2 + q^2 = 0
    imaginary = "i" if q == 1 else f"{q}i"
    answer = f"x = ±{imaginary}" if p == 0 else f"x = {p} ± {imaginary}"
    return ctx.problem(
        "equation",
        f"Solve: {format_polynomial([1, -2 * p, p * p + q * q])} = 0",
        answer,
        subtype="quadratic_complex_roots",
        hints=["Use the quadratic formula; the square root will be of a negative number."],
    )


@archetype("discriminant")
def discriminant(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    a, b, c = random_nonzero(ctx.rng, -5, 5), ctx.randint(-m, m), ctx.randint(-m, m)
    return ctx.problem(
        "equation",
        f"Find the discriminant of {format_polynomial([a, b, c])} = 0.",
        b * b - 4 * a * c,
        subtype="discriminant",
        hints=["D = b^2 - 4ac"],
    )


@archetype("simultaneous_advanced")
def sum_product_system(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    r1, r2 = sorted((ctx.randint(-m, m), ctx.randint(-m, m)))
    if r1 == r2:
        answer = f"x = {r1}, y = {r1}"
    else:
        answer = f"x = {r1}, y = {r2} or x = {r2}, y = {r1}"
    return ctx.problem(
        "system",
        f"Solve: x + y = {r1 + r2}; xy = {r1 * r2}",
        answer,
        subtype="system_nonlinear",
        hints=["Substitute y from the first equation into the second."],
    )


@archetype("polynomial_division")
def remainder_theorem(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    coefficients = [1] + [ctx.randint(-m, m) for _ in range(3)]
    r = random_nonzero(ctx.rng, -4, 4)
    return ctx.problem(
        "algebra",
        f"Find the remainder when {format_polynomial(coefficients)} is divided by {format_binomial(r)}.",
        int(evaluate_polynomial(coefficients, r)),
        subtype="remainder_theorem",
        hints=[f"The remainder is the value at x = {r}."],
    )


@archetype("factor_theorem")
def factor_theorem(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 5)
    r = random_nonzero(ctx.rng, -m, m)
    a, b = ctx.randint(-m, m), ctx.randint(-m, m)
    k = -(r ** 3 + a * r * r + b * r)
    return ctx.problem(
        "algebra",
        f"Find k so that {format_binomial(r)} is a factor of {format_polynomial([1, a, b, 0])} + k.",
        k,
        subtype="factor_theorem",
        hints=[f"Set the value at x = {r} equal to zero."],
    )


@archetype("proofs")
def identity_proof(ctx: GenerationContext) -> Problem:
    n = ctx.randint(1, 9)
    return ctx.problem(
        "proof",
        f"Show that (x + {n})^2 - (x - {n})^2 is a single term, and find it.",
        f"{4 * n}x",
        subtype="identity_proof",
        hints=["Expand both squares and subtract."],
    )


# =============================================================================
# Level K
# =============================================================================


@archetype("function_review")
def composition(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    a, b, c = random_nonzero(ctx.rng, -5, 5), ctx.randint(-m, m), ctx.randint(-m, m)
    x = ctx.randint(-4, 4)
    return ctx.problem(
        "function",
        f"f(x) = {format_linear([(a, 'x'), (b, '')])}, g(x) = {format_polynomial([1, 0, c])}. Find f(g({x})).",
        a * (x * x + c) + b,
        subtype="linear_function",
    )


@archetype("quadratic_functions_advanced")
def quadratic_extremum(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    if ctx.randint(0, 1):
        a, h, k = random_nonzero(ctx.rng, -3, 3), ctx.randint(-m, m), ctx.randint(-m, m)
        kind = "minimum" if a > 0 else "maximum"
        return ctx.problem(
            "function",
            f"Find the {kind} value of y = {format_polynomial([a, -2 * a * h, a * h * h + k])}.",
            k,
            subtype="max_min",
        )
    r1 = ctx.randint(-m, m)
    r2 = r1 + ctx.randint(1, 6)
    return ctx.problem(
        "inequality",
        f"Solve: {format_polynomial([1, -(r1 + r2), r1 * r2])} < 0",
        f"{r1} < x < {r2}",
        subtype="quadratic_inequality",
    )


@archetype("higher_degree_functions")
def cubic_roots(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 5)
    roots = sorted(ctx.rng.sample(range(-m, m + 1), 3))
    r1, r2, r3 = roots
    coefficients = [1, -(r1 + r2 + r3), r1 * r2 + r1 * r3 + r2 * r3, -r1 * r2 * r3]
    return ctx.problem(
        "function",
        f"Find the x-intercepts of y = {format_polynomial(coefficients)}.",
        ", ".join(f"x = {r}" for r in roots),
        subtype="cubic_function",
    )


@archetype("rational_functions")
def rational_function(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    a, b, c = random_nonzero(ctx.rng, -5, 5), ctx.randint(-m, m), ctx.randint(-m, m)
    if a * c + b == 0:
        b += 1
    return ctx.problem(
        "function",
        f"Find the asymptotes of y = ({format_linear([(a, 'x'), (b, '')])})/{format_binomial(c)}.",
        f"x = {c}, y = {a}",
        subtype="asymptotes",
    )


@archetype("irrational_functions")
def radical_equation(ctx: GenerationContext) -> Problem:
    a = ctx.randint(-ctx.constraint("magnitude", 9), 9)
    k = ctx.randint(1, 6)
    return ctx.problem(
        "function",
        f"Solve: √({format_linear([(1, 'x'), (a, '')])}) = {k}",
        k * k - a,
        subtype="radical_function",
        hints=["Square both sides, then check your answer."],
    )


@archetype("exponential_functions")
def exponential_equation(ctx: GenerationContext) -> Problem:
    base = ctx.choice([2, 3, 5])
    n = ctx.randint(2, 5 if base == 2 else 3)
    shift = ctx.randint(-3, 3)
    exponent = format_linear([(1, "x"), (shift, "")])
    return ctx.problem(
        "function",
        f"Solve: {base}^({exponent}) = {base ** n}",
        n - shift,
        subtype="exponential_equation",
        hints=[f"Write {base ** n} as a power of {base}."],
    )
