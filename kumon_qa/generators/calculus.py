"""
Calculus levels (L-O): logarithms, limits, derivatives and integrals,
trigonometry, sequences and series, differential equations.
"""
from __future__ import annotations

from fractions import Fraction

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import (
    evaluate_polynomial,
    format_binomial,
    format_linear,
    format_polynomial,
    random_nonzero,
    simplify_fraction,
)


def _derivative(coefficients: list[int]) -> list[int]:
    degree = len(coefficients) - 1
    return [c * (degree - i) for i, c in enumerate(coefficients[:-1])]


def _pi_multiple(value: Fraction) -> str:
    """Fraction(32, 3) -> '32π/3', Fraction(9) -> '9π'."""
    if value.denominator == 1:
        return f"{value.numerator}π"
    return f"{value.numerator}π/{value.denominator}"


# =============================================================================
# Level L
# =============================================================================


@archetype("logarithms")
def logarithm(ctx: GenerationContext) -> Problem:
    base = ctx.choice([2, 3, 5, 10])
    k = ctx.randint(0, 5 if base == 2 else 3)
    if ctx.randint(0, 1):
        return ctx.problem(
            "logarithm",
            f"Evaluate: log_{base}({base ** k})",
            k,
            subtype="log_properties",
        )
    return ctx.problem(
        "logarithm",
        f"Solve: log_{base}(x) = {k}",
        base ** k,
        subtype="log_equations",
    )


@archetype("limits_derivatives")
def limit_or_derivative(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    if ctx.randint(0, 1):
        a = random_nonzero(ctx.rng, -m, m)
        return ctx.problem(
            "calculus",
            f"Evaluate: lim x→{a} (x^2 - {a * a})/{format_binomial(a)}",
            2 * a,
            subtype="limit_evaluation",
            hints=["Factor the top and cancel."],
        )
    coefficients = [ctx.randint(1, m), ctx.randint(-m, m), ctx.randint(-m, m)]
    return ctx.problem(
        "calculus",
        f"Differentiate: f(x) = {format_polynomial(coefficients)}",
        f"f'(x) = {format_polynomial(_derivative(coefficients))}",
        subtype="derivative_definition",
    )


@archetype("derivative_applications")
def tangent_or_extremum(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    b, c, x0 = ctx.randint(-m, m), ctx.randint(-m, m), ctx.randint(-3, 3)
    coefficients = [1, b, c]
    if ctx.randint(0, 1):
        slope = 2 * x0 + b
        y0 = int(evaluate_polynomial(coefficients, x0))
        intercept = y0 - slope * x0
        return ctx.problem(
            "calculus",
            f"Find the tangent line to y = {format_polynomial(coefficients)} at x = {x0}.",
            f"y = {format_linear([(slope, 'x'), (intercept, '')])}",
            subtype="tangent_line",
        )
    h = ctx.randint(-m, m)
    k = ctx.randint(-m, m)
    return ctx.problem(
        "calculus",
        f"Find the x-value of the minimum of y = {format_polynomial([1, -2 * h, h * h + k])}.",
        h,
        subtype="extrema",
        hints=["Set the derivative equal to zero."],
    )


@archetype("integration")
def integration(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    if ctx.randint(0, 1):
        # coefficients chosen so every antiderivative term is whole
        a, b, c = ctx.randint(1, m), random_nonzero(ctx.rng, -m, m), ctx.randint(-m, m)
        integrand = [3 * a, 2 * b, c]
        antiderivative = [a, b, c, 0]
        return ctx.problem(
            "calculus",
            f"Find ∫({format_polynomial(integrand)}) dx",
            f"{format_polynomial(antiderivative)} + C",
            subtype="indefinite_integral",
        )
    p, q = ctx.randint(1, m), ctx.randint(-m, m)
    lower = ctx.randint(0, 2)
    upper = lower + ctx.randint(1, 3)
    # ∫(2px + q) dx = px^2 + qx
    value = p * (upper ** 2 - lower ** 2) + q * (upper - lower)
    return ctx.problem(
        "calculus",
        f"Evaluate ∫ from {lower} to {upper} of ({format_linear([(2 * p, 'x'), (q, '')])}) dx",
        value,
        subtype="definite_integral",
    )


@archetype("integration_applications")
def area_under_curve(ctx: GenerationContext) -> Problem:
    k = ctx.randint(1, ctx.constraint("magnitude", 5))
    return ctx.problem(
        "calculus",
        f"Find the area under y = 3x^2 from x = 0 to x = {k}.",
        k ** 3,
        subtype="area_under_curve",
    )


# =============================================================================
# Level M
# =============================================================================


@archetype("analytic_geometry")
def circle_or_midpoint(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    h, k, r = ctx.randint(-m, m), ctx.randint(-m, m), ctx.randint(1, m)
    if ctx.randint(0, 1):
        x_part = "x^2" if h == 0 else f"{format_binomial(h)}^2"
        y_part = "y^2" if k == 0 else f"{format_binomial(k, 'y')}^2"
        return ctx.problem(
            "geometry",
            f"Find the center and radius of {x_part} + {y_part} = {r * r}.",
            f"center ({h}, {k}), radius {r}",
            subtype="circles",
        )
    dx, dy = 2 * ctx.randint(-4, 4), 2 * ctx.randint(-4, 4)
    return ctx.problem(
        "geometry",
        f"Find the midpoint of ({h}, {k}) and ({h + dx}, {k + dy}).",
        f"({h + dx // 2}, {k + dy // 2})",
        subtype="coordinate_geometry",
    )


SPECIAL_ANGLES = {
    ("sin", 0): "0", ("sin", 30): "1/2", ("sin", 45): "√2/2", ("sin", 60): "√3/2", ("sin", 90): "1",
    ("cos", 0): "1", ("cos", 30): "√3/2", ("cos", 45): "√2/2", ("cos", 60): "1/2", ("cos", 90): "0",
    ("tan", 0): "0", ("tan", 30): "√3/3", ("tan", 45): "1", ("tan", 60): "√3",
}


@archetype("trigonometric_ratios")
def trig_ratio(ctx: GenerationContext) -> Problem:
    function, angle = ctx.choice(list(SPECIAL_ANGLES))
    return ctx.problem(
        "trigonometry",
        f"Find the exact value of {function} {angle}°.",
        SPECIAL_ANGLES[(function, angle)],
        subtype="trig_ratios",
        hints=["Use the 30-60-90 or 45-45-90 triangle."],
    )


TRIG_EQUATIONS = [
    ("sin x = 1/2", "x = 30°, 150°"),
    ("sin x = √3/2", "x = 60°, 120°"),
    ("cos x = 1/2", "x = 60°, 300°"),
    ("cos x = √2/2", "x = 45°, 315°"),
    ("tan x = 1", "x = 45°, 225°"),
    ("sin x = -1/2", "x = 210°, 330°"),
    ("cos x = -1", "x = 180°"),
]


@archetype("trig_equations")
def trig_equation(ctx: GenerationContext) -> Problem:
    equation, answer = ctx.choice(TRIG_EQUATIONS)
    return ctx.problem(
        "trigonometry",
        f"Solve {equation} for 0° ≤ x < 360°.",
        answer,
        subtype="trig_equation",
    )


ADDITION_FORMULA_VALUES = [
    ("sin 75°", "(√6 + √2)/4"),
    ("cos 75°", "(√6 - √2)/4"),
    ("sin 15°", "(√6 - √2)/4"),
    ("cos 15°", "(√6 + √2)/4"),
    ("tan 75°", "2 + √3"),
    ("tan 15°", "2 - √3"),
]


@archetype("addition_formulas")
def addition_formula(ctx: GenerationContext) -> Problem:
    if ctx.randint(0, 1):
        expression, answer = ctx.choice(ADDITION_FORMULA_VALUES)
        return ctx.problem(
            "trigonometry",
            f"Find the exact value of {expression}.",
            answer,
            subtype="sum_difference_formula",
        )
    a, b, c = ctx.choice([(3, 4, 5), (5, 12, 13), (8, 15, 17)])
    return ctx.problem(
        "trigonometry",
        f"θ is acute with sin θ = {a}/{c} and cos θ = {b}/{c}. Find sin 2θ.",
        simplify_fraction(2 * a * b, c * c),
        subtype="double_angle",
        hints=["sin 2θ = 2 sin θ cos θ"],
    )


# (a, b, c) with the angle between a and b equal to 60°
SIXTY_DEGREE_TRIANGLES = [(3, 8, 7), (5, 8, 7), (7, 15, 13), (8, 15, 13), (5, 21, 19), (16, 21, 19)]


@archetype("law_of_sines_cosines")
def law_of_cosines(ctx: GenerationContext) -> Problem:
    a, b, c = ctx.choice(SIXTY_DEGREE_TRIANGLES)
    return ctx.problem(
        "trigonometry",
        f"In triangle ABC, a = {a}, b = {b} and C = 60°. Find c.",
        c,
        subtype="law_of_cosines",
        hints=["c^2 = a^2 + b^2 - 2ab cos C"],
    )


# =============================================================================
# Level N
# =============================================================================


@archetype("sequences")
def nth_term(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    n = ctx.randint(5, 12)
    if ctx.randint(0, 1):
        a, d = ctx.randint(-m, m), random_nonzero(ctx.rng, -m, m)
        terms = ", ".join(str(a + i * d) for i in range(3))
        return ctx.problem(
            "sequence",
            f"Find term {n} of the sequence {terms}, ...",
            a + (n - 1) * d,
            subtype="arithmetic_sequence",
        )
    a, r = ctx.randint(1, 5), ctx.choice([2, 3, -2])
    n = ctx.randint(4, 7)
    terms = ", ".join(str(a * r ** i) for i in range(3))
    return ctx.problem(
        "sequence",
        f"Find term {n} of the sequence {terms}, ...",
        a * r ** (n - 1),
        subtype="geometric_sequence",
    )


INDUCTION_SUMS = [
    ("1 + 2 + ... + n = n(n + 1)/2", lambda n: n * (n + 1) // 2),
    ("1 + 3 + 5 + ... + (2n - 1) = n^2", lambda n: n * n),
    ("1^2 + 2^2 + ... + n^2 = n(n + 1)(2n + 1)/6", lambda n: n * (n + 1) * (2 * n + 1) // 6),
]


@archetype("mathematical_induction")
def induction_check(ctx: GenerationContext) -> Problem:
    statement, formula = ctx.choice(INDUCTION_SUMS)
    n = ctx.randint(3, 10)
    return ctx.problem(
        "proof",
        f"To prove {statement} by induction, first check n = {n}. What is the sum?",
        formula(n),
        subtype="induction_proof",
    )


@archetype("series")
def geometric_series(ctx: GenerationContext) -> Problem:
    a, ratio_denominator = ctx.randint(1, ctx.constraint("magnitude", 9)), ctx.randint(2, 5)
    # a + a/r + a/r^2 + ... = a / (1 - 1/r) = a*r / (r - 1)
    return ctx.problem(
        "series",
        f"Find the sum: {a} + {a}/{ratio_denominator} + {a}/{ratio_denominator ** 2} + ...",
        simplify_fraction(a * ratio_denominator, ratio_denominator - 1),
        subtype="infinite_series",
    )


@archetype("limits_advanced")
def limit_at_infinity(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    if ctx.randint(0, 1):
        a, b = random_nonzero(ctx.rng, -m, m), ctx.randint(-m, m)
        c, d = ctx.randint(1, m), ctx.randint(-m, m)
        return ctx.problem(
            "calculus",
            f"Evaluate: lim x→∞ ({format_polynomial([a, 0, b])})/({format_polynomial([c, 0, d])})",
            simplify_fraction(a, c),
            subtype="limit_function",
        )
    k = ctx.randint(2, 9)
    return ctx.problem(
        "calculus",
        f"Evaluate: lim x→0 sin({k}x)/x",
        k,
        subtype="limit_function",
    )


@archetype("differentiation_advanced")
def advanced_derivative(ctx: GenerationContext) -> Problem:
    k = ctx.randint(2, ctx.constraint("magnitude", 9))
    variant = ctx.randint(0, 3)
    if variant == 0:
        question, answer, skill = f"sin({k}x)", f"{k}cos({k}x)", "trig_derivative"
    elif variant == 1:
        question, answer, skill = f"cos({k}x)", f"-{k}sin({k}x)", "trig_derivative"
    elif variant == 2:
        question, answer, skill = f"ln({k}x)", "1/x", "log_derivative"
    else:
        return ctx.problem(
            "calculus",
            f"Find dy/dx if x^2 + y^2 = {k * k}.",
            "dy/dx = -x/y",
            subtype="implicit_differentiation",
        )
    return ctx.problem("calculus", f"Differentiate: y = {question}", f"y' = {answer}", subtype=skill)


# =============================================================================
# Level O
# =============================================================================


@archetype("curve_sketching")
def critical_points(ctx: GenerationContext) -> Problem:
    a = ctx.randint(1, ctx.constraint("magnitude", 6))
    if ctx.randint(0, 1):
        return ctx.problem(
            "calculus",
            f"Find the x-values of the local extrema of y = {format_polynomial([1, 0, -3 * a * a, 0])}.",
            f"x = {-a}, x = {a}",
            subtype="increasing_decreasing",
        )
    h = ctx.randint(-a, a)
    return ctx.problem(
        "calculus",
        f"Find the inflection point x-value of y = {format_polynomial([1, -3 * h, 0, 0])}.",
        h,
        subtype="concavity",
        hints=["Set the second derivative equal to zero."],
    )


@archetype("integration_techniques")
def integration_technique(ctx: GenerationContext) -> Problem:
    k = random_nonzero(ctx.rng, -ctx.constraint("magnitude", 6), 6)
    n = ctx.randint(2, 5)
    if ctx.randint(0, 1):
        inner = format_polynomial([1, 0, k])
        return ctx.problem(
            "calculus",
            f"Find ∫ 2x({inner})^{n} dx",
            f"({inner})^{n + 1}/{n + 1} + C",
            subtype="substitution",
            hints=[f"Let u = {inner}."],
        )
    a = abs(k)
    return ctx.problem(
        "calculus",
        f"Find ∫ x·e^({a}x) dx" if a != 1 else "Find ∫ x·e^x dx",
        f"(x/{a} - 1/{a * a})e^({a}x) + C" if a != 1 else "xe^x - e^x + C",
        subtype="integration_by_parts",
    )


@archetype("integration_applications_advanced")
def solid_of_revolution(ctx: GenerationContext) -> Problem:
    h = ctx.randint(1, ctx.constraint("magnitude", 4))
    if ctx.randint(0, 1):
        # π∫ x^2 dx from 0 to h
        return ctx.problem(
            "calculus",
            f"Find the volume when y = x, 0 ≤ x ≤ {h}, is rotated about the x-axis.",
            _pi_multiple(Fraction(h ** 3, 3)),
            subtype="volume_revolution",
        )
    # y = (3/4)x from 0 to 4h is a 3-4-5 segment
    return ctx.problem(
        "calculus",
        f"Find the arc length of y = 3x/4 from x = 0 to x = {4 * h}.",
        5 * h,
        subtype="arc_length",
    )


@archetype("differential_equations")
def differential_equation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 6)
    if ctx.randint(0, 1):
        k, a = random_nonzero(ctx.rng, -m, m), ctx.randint(1, 9)
        return ctx.problem(
            "calculus",
            f"Solve dy/dx = {k}y with y(0) = {a}.",
            f"y = {a}e^({k}x)",
            subtype="separable_de",
        )
    a, c = 2 * ctx.randint(1, m), ctx.randint(-m, m)
    return ctx.problem(
        "calculus",
        f"Solve dy/dx = {a}x with y(0) = {c}.",
        f"y = {format_polynomial([a // 2, 0, c])}",
        subtype="first_order_de",
    )
