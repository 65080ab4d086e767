"""
Operand and formatting primitives shared by every generator.

All functions are pure; randomness always comes from the caller's
random.Random so that a seeded run reproduces its operands.
"""
from __future__ import annotations

import math
import random
import uuid
from typing import Optional, Sequence, TypeVar

from kumon_qa.curriculum.levels import level_index
from kumon_qa.generators.models import FractionAnswer

T = TypeVar("T")

BLANK = "___"

OPERATOR_SYMBOLS = {
    "addition": "+",
    "subtraction": "-",
    "multiplication": "×",
    "division": "÷",
}


# =============================================================================
# Randomness
# =============================================================================


def generate_id(level: str, worksheet: int) -> str:
    return f"{level}-{worksheet}-{uuid.uuid4().hex[:8]}"


def random_int(rng: random.Random, low: int, high: int) -> int:
    """Inclusive on both ends."""
    return rng.randint(low, high)


def random_choice(rng: random.Random, items: Sequence[T]) -> T:
    return rng.choice(list(items))


def random_nonzero(rng: random.Random, low: int, high: int) -> int:
    value = 0
    while value == 0:
        value = rng.randint(low, high)
    return value


# =============================================================================
# Number theory and fractions
# =============================================================================


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    return abs(a * b) // math.gcd(a, b) if a and b else 0


def simplify_fraction(numerator: int, denominator: int) -> FractionAnswer:
    """Reduce by GCD; the sign always lives on the numerator."""
    if denominator == 0:
        raise ValueError("Fraction denominator cannot be zero")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    divisor = math.gcd(numerator, denominator) or 1
    return FractionAnswer(numerator // divisor, denominator // divisor)


def add_fractions(a: FractionAnswer, b: FractionAnswer) -> FractionAnswer:
    return simplify_fraction(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def subtract_fractions(a: FractionAnswer, b: FractionAnswer) -> FractionAnswer:
    return simplify_fraction(
        a.numerator * b.denominator - b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def multiply_fractions(a: FractionAnswer, b: FractionAnswer) -> FractionAnswer:
    return simplify_fraction(a.numerator * b.numerator, a.denominator * b.denominator)


def divide_fractions(a: FractionAnswer, b: FractionAnswer) -> FractionAnswer:
    if b.numerator == 0:
        raise ZeroDivisionError("Cannot divide by a zero fraction")
    return simplify_fraction(a.numerator * b.denominator, a.denominator * b.numerator)


def compare_fractions(a: FractionAnswer, b: FractionAnswer) -> int:
    """Sign of a - b, via cross-multiplication (denominators positive)."""
    left = a.numerator * b.denominator
    right = b.numerator * a.denominator
    return (left > right) - (left < right)


def prime_factors(n: int) -> list[int]:
    factors = []
    divisor = 2
    while n > 1 and divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def factor_pairs(n: int) -> list[tuple[int, int]]:
    return [(d, n // d) for d in range(1, math.isqrt(n) + 1) if n % d == 0]


# =============================================================================
# Difficulty, carrying and borrowing
# =============================================================================


def calculate_difficulty(
    level: str, worksheet: int, operands: Optional[Sequence[float]] = None
) -> int:
    """Informational 1-10 scale from level, worksheet band and operand size."""
    base = min(max(level_index(level), 0) // 3 + 1, 10)
    worksheet_factor = min(worksheet // 50, 3)
    operand_factor = 0
    if operands:
        largest = max(abs(o) for o in operands)
        if largest > 1000:
            operand_factor = 3
        elif largest > 100:
            operand_factor = 2
        elif largest > 10:
            operand_factor = 1
    return min(base + worksheet_factor + operand_factor, 10)


def has_carry(a: int, b: int) -> bool:
    while a > 0 or b > 0:
        if a % 10 + b % 10 >= 10:
            return True
        a //= 10
        b //= 10
    return False


def has_borrow(a: int, b: int) -> bool:
    while a > 0 or b > 0:
        if a % 10 < b % 10:
            return True
        a //= 10
        b //= 10
    return False


def addition_no_carry(rng: random.Random, max1: int, max2: int) -> tuple[int, int]:
    """Best effort: gives up after 100 draws and returns the last pair."""
    for _ in range(100):
        a, b = rng.randint(1, max1), rng.randint(1, max2)
        if not has_carry(a, b):
            break
    return a, b


def subtraction_no_borrow(rng: random.Random, minuend: int, max_subtrahend: int) -> tuple[int, int]:
    for _ in range(100):
        b = rng.randint(1, max(1, min(max_subtrahend, minuend)))
        if not has_borrow(minuend, b):
            break
    return minuend, b


# =============================================================================
# Formatting
# =============================================================================


def format_signed(n: float) -> str:
    """Parenthesise negatives so '(-3) + 5' reads unambiguously."""
    return f"({n})" if n < 0 else str(n)


def format_horizontal(a: float, operation: str, b: float) -> str:
    symbol = OPERATOR_SYMBOLS[operation]
    return f"{format_signed(a)} {symbol} {format_signed(b)} = {BLANK}"


def format_vertical(a: int, operation: str, b: int) -> str:
    symbol = OPERATOR_SYMBOLS[operation]
    width = max(len(str(a)), len(str(b)))
    answer_width = width + 2 if operation == "multiplication" else width
    return "\n".join(
        [
            f"  {str(a).rjust(width)}",
            f"{symbol} {str(b).rjust(width)}",
            "─" * (width + 2),
            f"  {'_' * answer_width}",
        ]
    )


def format_sequence(numbers: Sequence[int], missing_index: int) -> str:
    return ", ".join(BLANK if i == missing_index else str(n) for i, n in enumerate(numbers))


def format_polynomial(coefficients: Sequence[int], variable: str = "x") -> str:
    """Highest power first: [2, -3, 1] -> '2x^2 - 3x + 1'."""
    terms: list[str] = []
    degree = len(coefficients) - 1
    for i, coef in enumerate(coefficients):
        power = degree - i
        if coef == 0:
            continue
        magnitude = abs(coef)
        if power == 0:
            term = f"{magnitude}"
        elif power == 1:
            term = variable if magnitude == 1 else f"{magnitude}{variable}"
        else:
            term = f"{variable}^{power}" if magnitude == 1 else f"{magnitude}{variable}^{power}"
        if not terms:
            terms.append(f"-{term}" if coef < 0 else term)
        else:
            terms.append(f" - {term}" if coef < 0 else f" + {term}")
    return "".join(terms) if terms else "0"


def evaluate_polynomial(coefficients: Sequence[int], x: float) -> float:
    result = 0
    for coef in coefficients:
        result = result * x + coef
    return result


def format_fraction(numerator: int, denominator: int) -> str:
    return f"{numerator}/{denominator}"


def format_linear(terms: Sequence[tuple[int, str]]) -> str:
    """[(3, 'x'), (-2, 'y'), (5, '')] -> '3x - 2y + 5'."""
    parts: list[str] = []
    for coef, variable in terms:
        if coef == 0:
            continue
        magnitude = abs(coef)
        body = variable if (magnitude == 1 and variable) else f"{magnitude}{variable}"
        if not parts:
            parts.append(f"-{body}" if coef < 0 else body)
        else:
            parts.append(f" - {body}" if coef < 0 else f" + {body}")
    return "".join(parts) if parts else "0"


def format_binomial(root: int, variable: str = "x") -> str:
    """Factor with the given root: 3 -> '(x - 3)', -2 -> '(x + 2)', 0 -> 'x'."""
    if root == 0:
        return variable
    return f"({variable} - {root})" if root > 0 else f"({variable} + {-root})"
