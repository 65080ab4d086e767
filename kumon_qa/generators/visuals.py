"""
Visual asset identifiers.

An asset id encodes what to draw and how many: the trailing '_' segment
is always the item count ("apple_5", "dots_dice_5"), which the UI uses
to render and the visual check compares with the answer.
"""
from __future__ import annotations

import random

COUNTABLE_OBJECTS = [
    "apple", "star", "ball", "cat", "dog", "fish", "bird", "flower",
    "car", "duck", "heart", "block",
]

DOT_PATTERNS = ["dice", "line", "tenframe", "scatter"]


def object_asset(name: str, count: int) -> str:
    return f"{name}_{count}"


def dot_asset(pattern: str, count: int) -> str:
    return f"dots_{pattern}_{count}"


def random_object_asset(rng: random.Random, count: int) -> tuple[str, str]:
    """Returns (object name, asset id)."""
    name = rng.choice(COUNTABLE_OBJECTS)
    return name, object_asset(name, count)


def asset_count(asset: str) -> int | None:
    """Trailing count of an asset id, None if it doesn't end in a number."""
    tail = asset.rsplit("_", 1)[-1]
    try:
        return int(tail)
    except ValueError:
        return None
