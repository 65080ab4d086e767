"""
Level ordering and level categories.

Levels run from pre-K counting (7A) through calculus (O) plus the
electives (XV, XM, XP, XS). Categories drive readability checks and the
directory a level's generator lives in.
"""
from __future__ import annotations

LEVEL_ORDER: list[str] = [
    "7A", "6A", "5A", "4A", "3A", "2A", "A", "B", "C", "D", "E", "F",
    "G", "H", "I", "J", "K", "L", "M", "N", "O",
    "XV", "XM", "XP", "XS",
]

# Reading-age ordering used by the readability check
CATEGORY_ORDER: list[str] = [
    "pre-k",
    "elementary-basic",
    "elementary-advanced",
    "middle-school",
    "high-school",
    "calculus",
]

_CATEGORY_LEVELS: dict[str, tuple[str, ...]] = {
    "pre-k": ("7A", "6A", "5A", "4A"),
    "elementary-basic": ("3A", "2A", "A", "B"),
    "elementary-advanced": ("C", "D", "E", "F"),
    "middle-school": ("G", "H", "I"),
    "high-school": ("J", "K"),
}

ELECTIVE_LEVELS = ("XV", "XM", "XP", "XS")


def level_category(level: str) -> str:
    """Reading category of a level; anything past K counts as calculus."""
    for category, levels in _CATEGORY_LEVELS.items():
        if level in levels:
            return category
    return "calculus"


def source_category(level: str) -> str:
    """Directory category a level's generator module lives under."""
    if level in ELECTIVE_LEVELS:
        return "electives"
    return level_category(level)


def category_rank(category: str) -> int:
    return CATEGORY_ORDER.index(category) if category in CATEGORY_ORDER else -1


def level_index(level: str) -> int:
    """Position of a level in LEVEL_ORDER, -1 if unknown."""
    try:
        return LEVEL_ORDER.index(level)
    except ValueError:
        return -1


def compare_levels(a: str, b: str) -> int:
    return level_index(a) - level_index(b)


def is_level_before(level: str, other: str) -> bool:
    return compare_levels(level, other) < 0


def is_level_after(level: str, other: str) -> bool:
    return compare_levels(level, other) > 0
