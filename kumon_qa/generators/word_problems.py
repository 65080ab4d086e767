"""
Word problem generation.

Templates use {{placeholder}} tokens. Every token present in a template
must be supplied a value; a leftover token is a generator defect and
raises GenerationError instead of leaking "{{num2}}" to a child.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from kumon_qa.generators.base import GenerationError
from kumon_qa.generators.utils import OPERATOR_SYMBOLS

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

NAMES = [
    "Emma", "Liam", "Olivia", "Noah", "Ava", "Lucas", "Sophia", "Mason",
    "Isabella", "Ethan", "Mia", "Aiden", "Charlotte", "Oliver", "Amelia", "Elijah",
    "Harper", "James", "Evelyn", "Benjamin", "Luna", "Jack", "Chloe", "Henry",
]

OBJECTS: dict[str, list[str]] = {
    "countable": [
        "apples", "oranges", "cookies", "candies", "stickers", "marbles", "pencils",
        "crayons", "books", "toys", "balloons", "flowers", "stars", "shells", "rocks",
    ],
    "money": ["dollars", "cents", "coins"],
}

ACTIONS: dict[str, list[str]] = {
    "addition": ["found", "got", "picked up", "collected", "bought"],
    "subtraction": ["lost", "gave away", "ate", "used"],
    "multiplication": ["bags with", "boxes with", "rows of"],
    "division": ["shared equally among", "split among"],
}

TEMPLATES: dict[str, list[str]] = {
    "addition": [
        "{{name}} has {{num1}} {{object}}. {{name}} {{action}} {{num2}} more. How many {{object}} does {{name}} have now?",
        "{{name}} {{action}} {{num1}} {{object}} and then {{num2}} more. How many {{object}} is that in all?",
    ],
    "subtraction": [
        "{{name}} had {{num1}} {{object}} and {{action}} {{num2}} of them. How many {{object}} are left?",
    ],
    "multiplication": [
        "{{name}} has {{num1}} {{action}} {{num2}} {{object}} each. How many {{object}} is that altogether?",
    ],
    "division": [
        "{{name}} has {{num1}} {{object}} {{action}} {{num2}} friends. How many {{object}} does each friend get?",
    ],
}


@dataclass(frozen=True)
class WordProblem:
    text: str
    operation: str
    operands: tuple[int, ...]
    answer: int
    name: str
    object: str
    hints: tuple[str, ...] = ()
    solution_steps: tuple[str, ...] = field(default=())


def fill_template(template: str, values: Mapping[str, object]) -> str:
    """Substitute {{key}} tokens; fail on any token without a value."""
    missing = sorted({key for key in PLACEHOLDER.findall(template) if key not in values})
    if missing:
        raise GenerationError(
            "word-problem",
            0,
            f"Unresolved placeholders {missing} in template: {template!r}",
        )
    return PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), template)


def _compute(operation: str, a: int, b: int) -> int:
    if operation == "addition":
        return a + b
    if operation == "subtraction":
        return a - b
    if operation == "multiplication":
        return a * b
    return a // b


def generate_word_problem(
    operation: str, operands: Sequence[int], rng: random.Random
) -> WordProblem:
    """
    Bind a random name/object/action into a template for a two-operand
    operation. Subtraction operands are swapped if needed to keep the
    result non-negative; division operands must already divide cleanly.
    """
    if operation not in TEMPLATES:
        raise GenerationError("word-problem", 0, f"No word problem templates for {operation!r}")
    a, b = operands[0], operands[1]
    if operation == "subtraction" and a < b:
        a, b = b, a
    if operation == "division" and (b == 0 or a % b):
        raise GenerationError("word-problem", 0, f"{a} is not evenly divisible by {b}")

    answer = _compute(operation, a, b)
    name = rng.choice(NAMES)
    obj = rng.choice(OBJECTS["countable"])
    values = {
        "name": name,
        "object": obj,
        "action": rng.choice(ACTIONS[operation]),
        "num1": a,
        "num2": b,
        "answer": answer,
    }
    text = fill_template(rng.choice(TEMPLATES[operation]), values)
    hints = (
        fill_template("What do you know? {{name}} starts with {{num1}} {{object}}.", values),
        fill_template("Does the number of {{object}} get bigger or smaller?", values),
    )
    steps = (
        fill_template("Start with {{num1}} {{object}}.", values),
        f"{a} {OPERATOR_SYMBOLS[operation]} {b} = {answer}",
        fill_template("The answer is {{answer}} {{object}}.", values),
    )
    return WordProblem(
        text=text,
        operation=operation,
        operands=(a, b),
        answer=answer,
        name=name,
        object=obj,
        hints=hints,
        solution_steps=steps,
    )
