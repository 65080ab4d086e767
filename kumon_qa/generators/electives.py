"""
Elective levels: vectors (XV), matrices (XM), counting and probability
(XP), statistics (XS).
"""
from __future__ import annotations

import math
from decimal import Decimal

from kumon_qa.generators.base import GenerationContext, archetype
from kumon_qa.generators.models import Problem
from kumon_qa.generators.utils import format_linear, random_nonzero, simplify_fraction


def _vector(values) -> str:
    return "(" + ", ".join(str(v) for v in values) + ")"


def _matrix(rows) -> str:
    return "[" + ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in rows) + "]"


# =============================================================================
# XV: vectors
# =============================================================================


@archetype("surface_vectors", "space_vectors")
def vector_arithmetic(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    dimension = 2 if ctx.range.type == "surface_vectors" else 3
    skill = "vector_2d_operations" if dimension == 2 else "vector_3d_operations"
    u = [ctx.randint(-m, m) for _ in range(dimension)]
    v = [ctx.randint(-m, m) for _ in range(dimension)]
    k = random_nonzero(ctx.rng, -4, 4)
    return ctx.problem(
        "vector",
        f"u = {_vector(u)}, v = {_vector(v)}. Find u + {k}v.",
        _vector(a + k * b for a, b in zip(u, v)),
        subtype=skill,
    )


@archetype("inner_products")
def dot_product(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    u = [ctx.randint(-m, m) for _ in range(3)]
    v = [ctx.randint(-m, m) for _ in range(3)]
    return ctx.problem(
        "vector",
        f"Find the dot product of {_vector(u)} and {_vector(v)}.",
        sum(a * b for a, b in zip(u, v)),
        subtype="dot_product",
    )


@archetype("lines_planes")
def plane_equation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    normal = [random_nonzero(ctx.rng, -5, 5) for _ in range(3)]
    point = [ctx.randint(-m, m) for _ in range(3)]
    d = sum(n * p for n, p in zip(normal, point))
    return ctx.problem(
        "vector",
        f"Find the plane through {_vector(point)} with normal vector {_vector(normal)}.",
        f"{format_linear(list(zip(normal, ['x', 'y', 'z'])))} = {d}",
        subtype="equation_of_plane",
    )


# =============================================================================
# XM: matrices and transformations
# =============================================================================


@archetype("matrix_operations")
def matrix_operation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    a = [[ctx.randint(-m, m) for _ in range(2)] for _ in range(2)]
    b = [[ctx.randint(-m, m) for _ in range(2)] for _ in range(2)]
    if ctx.randint(0, 1):
        return ctx.problem(
            "matrix",
            f"A = {_matrix(a)}, B = {_matrix(b)}. Find A + B.",
            _matrix([[a[i][j] + b[i][j] for j in range(2)] for i in range(2)]),
            subtype="matrix_add",
        )
    product = [[sum(a[i][k] * b[k][j] for k in range(2)) for j in range(2)] for i in range(2)]
    return ctx.problem(
        "matrix",
        f"A = {_matrix(a)}, B = {_matrix(b)}. Find AB.",
        _matrix(product),
        subtype="matrix_multiply",
    )


@archetype("matrix_equations")
def matrix_equation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    x, y = ctx.randint(-m, m), ctx.randint(-m, m)
    while True:
        a = [[random_nonzero(ctx.rng, -5, 5) for _ in range(2)] for _ in range(2)]
        if a[0][0] * a[1][1] - a[0][1] * a[1][0] != 0:
            break
    rhs = [a[0][0] * x + a[0][1] * y, a[1][0] * x + a[1][1] * y]
    return ctx.problem(
        "matrix",
        f"Solve {_matrix(a)}[x, y] = {rhs}.",
        f"x = {x}, y = {y}",
        subtype="solve_with_matrices",
    )


TRANSFORMATIONS = {
    "reflection in the x-axis": ("reflection", lambda x, y: (x, -y)),
    "reflection in the y-axis": ("reflection", lambda x, y: (-x, y)),
    "reflection in the line y = x": ("reflection", lambda x, y: (y, x)),
    "rotation of 90° counterclockwise about the origin": ("rotation", lambda x, y: (-y, x)),
    "rotation of 180° about the origin": ("rotation", lambda x, y: (-x, -y)),
}


@archetype("transformations")
def point_transformation(ctx: GenerationContext) -> Problem:
    m = ctx.constraint("magnitude", 9)
    x, y = ctx.randint(-m, m), ctx.randint(-m, m)
    if ctx.randint(0, 5) == 0:
        k = ctx.randint(2, 4)
        return ctx.problem(
            "transformation",
            f"Find the image of ({x}, {y}) under scaling by {k}.",
            _vector((k * x, k * y)),
            subtype="scaling",
        )
    name = ctx.choice(list(TRANSFORMATIONS))
    skill, transform = TRANSFORMATIONS[name]
    return ctx.problem(
        "transformation",
        f"Find the image of ({x}, {y}) under {name}.",
        _vector(transform(x, y)),
        subtype=skill,
    )


# =============================================================================
# XP: permutations, combinations, probability
# =============================================================================


@archetype("permutations")
def permutation(ctx: GenerationContext) -> Problem:
    n = ctx.randint(4, ctx.constraint("max_n", 10))
    r = ctx.randint(2, min(n, 4))
    if ctx.randint(0, 2) == 0:
        return ctx.problem(
            "combinatorics",
            f"How many {r}-digit codes can be made from {n} digits if digits may repeat?",
            n ** r,
            subtype="permutation_repetition",
        )
    return ctx.problem(
        "combinatorics",
        f"Find {n}P{r}.",
        math.perm(n, r),
        subtype="permutation_basic",
    )


@archetype("combinations")
def combination(ctx: GenerationContext) -> Problem:
    n = ctx.randint(4, ctx.constraint("max_n", 12))
    r = ctx.randint(1, n - 1)
    if ctx.randint(0, 1):
        return ctx.problem(
            "combinatorics",
            f"Find {n}C{r}.",
            math.comb(n, r),
            subtype="combination_basic",
        )
    return ctx.problem(
        "combinatorics",
        f"Find the coefficient of x^{r} in (x + 1)^{n}.",
        math.comb(n, r),
        subtype="binomial_theorem",
    )


@archetype("probability")
def dice_probability(ctx: GenerationContext) -> Problem:
    if ctx.randint(0, 2) == 0:
        sides = ctx.choice([4, 6, 8, 10, 12])
        return ctx.problem(
            "probability",
            f"Find the expected value of one roll of a fair {sides}-sided die.",
            simplify_fraction(sides + 1, 2),
            subtype="expected_value",
        )
    target = ctx.randint(2, 12)
    ways = sum(1 for a in range(1, 7) for b in range(1, 7) if a + b == target)
    return ctx.problem(
        "probability",
        f"Two fair dice are rolled. Find the probability that the sum is {target}.",
        simplify_fraction(ways, 36),
        subtype="probability_basic",
    )


# =============================================================================
# XS: statistics
# =============================================================================


@archetype("descriptive_stats")
def descriptive_statistics(ctx: GenerationContext) -> Problem:
    size = ctx.randint(*ctx.constraint("sample_size", (5, 7)))
    data = sorted(ctx.randint(1, 20) for _ in range(size))
    listing = ", ".join(str(v) for v in data)
    measure = ctx.choice(["mean", "median", "range"])
    if measure == "mean":
        answer = simplify_fraction(sum(data), size)
        if answer.denominator == 1:
            answer = answer.numerator
    elif measure == "median":
        middle = size // 2
        if size % 2:
            answer = data[middle]
        else:
            answer = simplify_fraction(data[middle - 1] + data[middle], 2)
    else:
        answer = data[-1] - data[0]
    return ctx.problem(
        "statistics",
        f"Find the {measure} of {listing}.",
        answer,
        subtype="mean_median_mode",
    )


@archetype("distributions")
def binomial_probability(ctx: GenerationContext) -> Problem:
    n = ctx.randint(2, ctx.constraint("max_n", 6))
    k = ctx.randint(0, n)
    return ctx.problem(
        "probability",
        f"A fair coin is tossed {n} times. Find the probability of exactly {k} heads.",
        simplify_fraction(math.comb(n, k), 2 ** n),
        subtype="binomial_distribution",
    )


@archetype("inference")
def confidence_interval(ctx: GenerationContext) -> Problem:
    root_n = ctx.randint(3, 10)
    standard_error = ctx.randint(1, 5)
    sigma = standard_error * root_n
    mean = ctx.randint(20, 80)
    margin = Decimal("1.96") * standard_error
    low, high = Decimal(mean) - margin, Decimal(mean) + margin
    return ctx.problem(
        "statistics",
        f"A sample of {root_n * root_n} has mean {mean}; σ = {sigma}. Find the 95% confidence interval.",
        f"({low}, {high})",
        subtype="confidence_interval",
        hints=["Use mean ± 1.96 σ/√n."],
    )
