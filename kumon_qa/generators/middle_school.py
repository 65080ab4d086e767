"""
Middle school levels (G-I): integers, expressions, linear equations and
systems, functions, factoring and quadratics.
"""
from __future__ import annotations

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import (
    BLANK,
    add_fractions,
    format_binomial,
    format_horizontal,
    format_linear,
    format_polynomial,
    random_nonzero,
    simplify_fraction,
)

INTEGER_SKILLS = {
    "addition": "integer_add",
    "subtraction": "integer_subtract",
    "multiplication": "integer_multiply",
    "division": "integer_divide",
}


def _roots_text(roots: list[int]) -> str:
    distinct = sorted(set(roots))
    return ", ".join(f"x = {r}" for r in distinct)


# =============================================================================
# Level G
# =============================================================================


@archetype("review_f")
def fraction_review(ctx: GenerationContext) -> Problem:
    top = ctx.constraint("max_denominator", 10)
    a = simplify_fraction(ctx.randint(1, top - 1), top)
    b = simplify_fraction(1, ctx.randint(2, top))
    return ctx.problem("fraction", f"{a} + {b} = {BLANK}", add_fractions(a, b))


@archetype("integer_operations")
def integer_operations(ctx: GenerationContext) -> Problem:
    """Signed arithmetic; division is built from divisor × quotient."""
    m = ctx.constraint("magnitude", 20)
    operation = ctx.choice(list(INTEGER_SKILLS))
    if operation == "division":
        b = random_nonzero(ctx.rng, -12, 12)
        answer = random_nonzero(ctx.rng, -12, 12)
        a = b * answer
    else:
        a, b = random_nonzero(ctx.rng, -m, m), random_nonzero(ctx.rng, -m, m)
        if operation == "addition":
            answer = a + b
        elif operation == "subtraction":
            answer = a - b
        else:
            answer = a * b
    return ctx.problem(
        operation,
        format_horizontal(a, operation, b),
        answer,
        subtype=INTEGER_SKILLS[operation],
        operands=[a, b],
        hints=["Decide the sign first, then work with the sizes."],
    )


@archetype("algebraic_expressions")
def algebraic_expression(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    if ctx.randint(0, 1):
        a, b, x = random_nonzero(ctx.rng, -m, m), ctx.randint(-m, m), ctx.randint(-5, 5)
        return ctx.problem(
            "algebra",
            f"Evaluate {format_linear([(a, 'x'), (b, '')])} when x = {x}.",
            a * x + b,
            subtype="evaluate_expression",
            hints=[f"Replace x with {x}."],
        )
    p, q, c = ctx.randint(1, m), random_nonzero(ctx.rng, -m, m), ctx.randint(-m, m)
    if p + q == 0:
        q -= 1
    return ctx.problem(
        "algebra",
        f"Simplify: {format_linear([(p, 'x'), (c, '')])} + {format_linear([(q, 'x')])}",
        format_linear([(p + q, "x"), (c, "")]),
        subtype="simplify_expression",
        hints=["Collect the x terms together."],
    )


@archetype("linear_equations")
def linear_equation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 12)
    x = ctx.randint(-m, m)
    a, b = random_nonzero(ctx.rng, -9, 9), ctx.randint(-m, m)
    return ctx.problem(
        "equation",
        f"Solve for x: {format_linear([(a, 'x'), (b, '')])} = {a * x + b}",
        x,
        hints=["Undo the addition first, then the multiplication."],
        solution_steps=[f"{format_linear([(a, 'x')])} = {a * x}", f"x = {x}"],
    )


# =============================================================================
# Level H
# =============================================================================

LITERAL_EQUATIONS = [
    ("A = lw", "w", "w = A/l"),
    ("d = rt", "t", "t = d/r"),
    ("F = ma", "a", "a = F/m"),
    ("V = lwh", "h", "h = V/(lw)"),
    ("y = mx + b", "b", "b = y - mx"),
    ("P = 2l + 2w", "l", "l = (P - 2w)/2"),
    ("I = Prt", "r", "r = I/(Pt)"),
]


@archetype("literal_equations")
def literal_equation(ctx: GenerationContext) -> Problem:
    formula, variable, answer = ctx.choice(LITERAL_EQUATIONS)
    return ctx.problem(
        "equation",
        f"Solve for {variable}: {formula}",
        answer,
        hints=[f"Get {variable} by itself on one side."],
    )


@archetype("simultaneous_equations")
def simultaneous_equations(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    x, y = ctx.randint(-m, m), ctx.randint(-m, m)
    while True:
        a1, b1, a2, b2 = (random_nonzero(ctx.rng, -5, 5) for _ in range(4))
        if a1 * b2 - a2 * b1 != 0:
            break
    first = f"{format_linear([(a1, 'x'), (b1, 'y')])} = {a1 * x + b1 * y}"
    second = f"{format_linear([(a2, 'x'), (b2, 'y')])} = {a2 * x + b2 * y}"
    return ctx.problem(
        "system",
        f"Solve: {first}; {second}",
        f"x = {x}, y = {y}",
        subtype="system_2_variables",
        hints=["Eliminate one variable by adding or subtracting the equations."],
    )


@archetype("inequalities")
def linear_inequality(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 12)
    boundary = ctx.randint(-m, m)
    a, b = random_nonzero(ctx.rng, -6, 6), ctx.randint(-m, m)
    sign = ctx.choice(["<", ">"])
    # dividing by a negative flips the inequality
    solved = sign if a > 0 else {"<": ">", ">": "<"}[sign]
    return ctx.problem(
        "inequality",
        f"Solve: {format_linear([(a, 'x'), (b, '')])} {sign} {a * boundary + b}",
        f"x {solved} {boundary}",
        hints=["Solve like an equation; flip the sign if you divide by a negative."],
    )


@archetype("functions_and_graphs")
def linear_function(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    slope, intercept = random_nonzero(ctx.rng, -m, m), ctx.randint(-m, m)
    if ctx.randint(0, 1):
        x = ctx.randint(-5, 5)
        return ctx.problem(
            "function",
            f"f(x) = {format_linear([(slope, 'x'), (intercept, '')])}. Find f({x}).",
            slope * x + intercept,
            subtype="function_notation",
        )
    x1 = ctx.randint(-5, 5)
    x2 = x1 + ctx.randint(1, 4)
    y1, y2 = slope * x1 + intercept, slope * x2 + intercept
    return ctx.problem(
        "function",
        f"Find the slope of the line through ({x1}, {y1}) and ({x2}, {y2}).",
        slope,
        subtype="linear_graphing",
        hints=["Slope is rise over run."],
    )


@archetype("polynomials")
def polynomial_sum(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    p = [ctx.randint(1, m), ctx.randint(-m, m), ctx.randint(-m, m)]
    q = [ctx.randint(1, m), ctx.randint(-m, m), ctx.randint(-m, m)]
    subtract = ctx.randint(0, 1) == 1
    result = [a - b if subtract else a + b for a, b in zip(p, q)]
    return ctx.problem(
        "algebra",
        f"Simplify: ({format_polynomial(p)}) {'-' if subtract else '+'} ({format_polynomial(q)})",
        format_polynomial(result),
        hints=["Combine like terms."],
    )


# =============================================================================
# Level I
# =============================================================================


@archetype("polynomial_multiplication")
def binomial_product(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    a = random_nonzero(ctx.rng, -m, m)
    b = a if ctx.randint(0, 3) == 0 else random_nonzero(ctx.rng, -m, m)
    left, right = format_binomial(-a), format_binomial(-b)
    question = f"Expand: {left}^2" if a == b else f"Expand: {left}{right}"
    return ctx.problem(
        "algebra",
        question,
        format_polynomial([1, a + b, a * b]),
        subtype="special_products" if a == b else "foil",
        hints=["Multiply first, outer, inner, last terms."],
    )


@archetype("factorization")
def factorization(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    if ctx.randint(0, 2) == 0:
        k, a = ctx.randint(2, 9), random_nonzero(ctx.rng, -m, m)
        return ctx.problem(
            "algebra",
            f"Factor: {format_polynomial([k, k * a])}",
            f"{k}({format_polynomial([1, a])})",
            subtype="factor_gcf",
        )
    r1, r2 = sorted((random_nonzero(ctx.rng, -m, m), random_nonzero(ctx.rng, -m, m)))
    return ctx.problem(
        "algebra",
        f"Factor: {format_polynomial([1, -(r1 + r2), r1 * r2])}",
        f"{format_binomial(r1)}{format_binomial(r2)}",
        subtype="factor_trinomial",
        hints=[f"Find two numbers that multiply to {r1 * r2} and add to {-(r1 + r2)}."],
    )


SQUARE_FREE = [2, 3, 5, 6, 7, 10]


@archetype("square_roots")
def simplify_radical(ctx: GenerationContext) -> Problem:
    k, inside = ctx.randint(2, 9), ctx.choice(SQUARE_FREE)
    return ctx.problem(
        "radical",
        f"Simplify: √{k * k * inside}",
        f"{k}√{inside}",
        subtype="simplify_radical",
        hints=[f"Look for a perfect square that divides {k * k * inside}."],
    )


@archetype("quadratic_equations")
def quadratic_equation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    r1, r2 = ctx.randint(-m, m), ctx.randint(-m, m)
    return ctx.problem(
        "equation",
        f"Solve: {format_polynomial([1, -(r1 + r2), r1 * r2])} = 0",
        _roots_text([r1, r2]),
        hints=["Factor, then set each factor to zero."],
    )


@archetype("quadratic_functions")
def quadratic_vertex(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    a, h, k = random_nonzero(ctx.rng, -3, 3), ctx.randint(-m, m), ctx.randint(-m, m)
    coefficients = [a, -2 * a * h, a * h * h + k]
    return ctx.problem(
        "function",
        f"Find the vertex of y = {format_polynomial(coefficients)}.",
        f"({h}, {k})",
        subtype="vertex_form",
        hints=["Complete the square."],
        solution_steps=[f"y = {a}(x - {h})^2 + {k}" if h >= 0 else f"y = {a}(x + {-h})^2 + {k}"],
    )


PYTHAGOREAN_TRIPLES = [(3, 4, 5), (5, 12, 13), (8, 15, 17), (7, 24, 25)]


@archetype("pythagorean_theorem")
def pythagorean(ctx: GenerationContext) -> Problem:
    a, b, c = ctx.choice(PYTHAGOREAN_TRIPLES)
    scale = ctx.randint(1, 3)
    a, b, c = a * scale, b * scale, c * scale
    variant = ctx.randint(0, 2)
    if variant == 0:
        return ctx.problem(
            "geometry",
            f"A right triangle has legs {a} and {b}. Find the hypotenuse.",
            c,
            subtype="pythagorean_theorem",
        )
    if variant == 1:
        return ctx.problem(
            "geometry",
            f"A right triangle has hypotenuse {c} and one leg {a}. Find the other leg.",
            b,
            subtype="pythagorean_theorem",
        )
    x1, y1 = ctx.randint(-5, 5), ctx.randint(-5, 5)
    return ctx.problem(
        "geometry",
        f"Find the distance between ({x1}, {y1}) and ({x1 + a}, {y1 + b}).",
        c,
        subtype="distance_formula",
    )