"""
Visual validator: the count encoded in the first visual asset must equal
the numeric answer ("dots_dice_5" goes with 5).
"""
from __future__ import annotations

from typing import Optional

from kumon_qa.config import get_settings
from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators.answers import answer_to_number
from kumon_qa.generators.engine import generator_module_for
from kumon_qa.generators.models import Problem
from kumon_qa.generators.visuals import asset_count
from kumon_qa.qa.models import CodeFix, Issue, IssueSeverity, IssueType
from kumon_qa.qa.validators.base import Validator


class VisualValidator(Validator):
    name = "VisualValidator"
    issue_type = IssueType.VISUAL

    def __init__(self, renderer_file: Optional[str] = None):
        self.renderer_file = renderer_file or get_settings().visual_renderer_file

    def validate(self, problem: Problem, curriculum: CurriculumSpec) -> list[Issue]:
        if not problem.visual_assets:
            return []

        asset = problem.visual_assets[0]
        count = asset_count(asset)
        if count is None:
            return [
                self.issue(
                    f"visual-parse-{problem.id}",
                    problem,
                    IssueSeverity.WARNING,
                    f'Cannot parse visual asset count from "{asset}"',
                )
            ]

        # fraction answers have no single count to draw
        expected = answer_to_number(problem.correct_answer, allow_fraction=False)
        if expected is None or count == expected:
            return []

        shown = int(expected) if float(expected).is_integer() else expected
        subtype = problem.subtype or ""
        if "count" in subtype or "dot" in subtype:
            fix = CodeFix(
                file=generator_module_for(problem.level),
                old_code="",
                new_code="",
                explanation=(
                    f"Generator creates mismatched visual ({count}) and answer ({shown}). "
                    "Build visual_assets from the same count as correct_answer."
                ),
            )
        else:
            fix = CodeFix(
                file=self.renderer_file,
                old_code="",
                new_code="",
                explanation=(
                    f"Visual shows {count} items but answer expects {shown}. Either fix the "
                    "generator to use matching values, or fix the asset count encoding."
                ),
            )
        return [
            self.issue(
                f"visual-mismatch-{problem.id}",
                problem,
                IssueSeverity.ERROR,
                f"Visual shows {count} items but correct answer is {shown}",
                suggested_fix=fix,
                auto_fixable=True,
            )
        ]
