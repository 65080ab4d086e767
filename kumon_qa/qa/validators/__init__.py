"""
Pluggable problem validators.

Each validator is an independent heuristic rule set; new checks are
added by subclassing Validator and listing the class here.
"""

from typing import Optional

from kumon_qa.config import ValidatorToggles
from kumon_qa.qa.validators.arithmetic import MathValidator
from kumon_qa.qa.validators.base import Validator, is_missing_value
from kumon_qa.qa.validators.consistency import COMPLEX_TYPES, ConsistencyValidator
from kumon_qa.qa.validators.curriculum import CurriculumValidator
from kumon_qa.qa.validators.readability import ADVANCED_TERMS, ReadabilityValidator
from kumon_qa.qa.validators.visual import VisualValidator

ALL_VALIDATORS: list[type[Validator]] = [
    VisualValidator,
    MathValidator,
    CurriculumValidator,
    ConsistencyValidator,
    ReadabilityValidator,
]


def build_validators(
    toggles: Optional[ValidatorToggles] = None,
    renderer_file: Optional[str] = None,
) -> list[Validator]:
    """Instantiate every enabled validator, in ALL_VALIDATORS order."""
    toggles = toggles or ValidatorToggles()
    validators: list[Validator] = []
    for cls in ALL_VALIDATORS:
        if not toggles.is_enabled(cls.issue_type.value):
            continue
        validators.append(cls(renderer_file) if cls is VisualValidator else cls())
    return validators


__all__ = [
    "ADVANCED_TERMS",
    "ALL_VALIDATORS",
    "COMPLEX_TYPES",
    "ConsistencyValidator",
    "CurriculumValidator",
    "MathValidator",
    "ReadabilityValidator",
    "Validator",
    "VisualValidator",
    "build_validators",
    "is_missing_value",
]
