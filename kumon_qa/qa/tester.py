"""
ProblemTester: generate batches of problems per worksheet range and run
them through the enabled validators.

Nothing raised by a generator or a validator escapes a run. A generator
failure becomes a consistency error Issue and the batch moves on to the
next problem; a validator failure becomes an error Issue naming the
validator, and the remaining validators still see the problem.
"""
from __future__ import annotations

import random
from typing import Callable, Iterable, Optional, Union

from loguru import logger

from kumon_qa.config import QAConfig
from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange
from kumon_qa.generators import generate_problem as default_generate_problem
from kumon_qa.generators.models import Problem
from kumon_qa.qa.models import Issue, IssueSeverity, IssueType, QAReport, TestResult
from kumon_qa.qa.validators import Validator, build_validators

GenerateFn = Callable[[str, int], Problem]
RangeCallback = Callable[[TestResult], None]


class ProblemTester:
    """
    Runs generated problems through validators and aggregates the results.

    Usage:
        tester = ProblemTester(KUMON, config=QAConfig(levels=["C"]))
        report = tester.test_all_levels()
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        curriculum: CurriculumSpec,
        generate_problem: Optional[GenerateFn] = None,
        config: Optional[QAConfig] = None,
        validators: Optional[list[Validator]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.curriculum = curriculum
        self.config = config or QAConfig()
        self.rng = rng or random.Random()
        self.validators = (
            validators if validators is not None else build_validators(self.config.validators)
        )
        self.generate_problem = generate_problem or self._generate

    def _generate(self, level: str, worksheet: int) -> Problem:
        return default_generate_problem(level, worksheet, self.rng, self.curriculum)

    # ========================================
    # Single problem
    # ========================================

    def validate_problem(self, problem: Problem) -> list[Issue]:
        """Run every validator over one problem."""
        issues: list[Issue] = []
        for validator in self.validators:
            try:
                issues.extend(validator.validate(problem, self.curriculum))
            except Exception as e:
                logger.warning(f"{validator.name} failed on {problem.id}: {e}")
                issues.append(
                    Issue(
                        id=f"validator-error-{validator.name}-{problem.id}",
                        type=validator.issue_type,
                        severity=IssueSeverity.ERROR,
                        level=problem.level,
                        worksheet=problem.worksheet_number,
                        problem_type=problem.type,
                        description=f"Validator {validator.name} threw error: {e}",
                    )
                )
        return issues

    # ========================================
    # Ranges and levels
    # ========================================

    def test_worksheet_range(self, level: str, worksheet_range: WorksheetRange) -> TestResult:
        """Generate problems_per_range problems at random worksheets in the range."""
        result = TestResult(level=level, worksheet_range=worksheet_range)
        for i in range(self.config.problems_per_range):
            worksheet = self.rng.randint(worksheet_range.start, worksheet_range.end)
            try:
                problem = self.generate_problem(level, worksheet)
            except Exception as e:
                logger.warning(f"Generation failed for {level} worksheet {worksheet}: {e}")
                result.issues.append(
                    Issue(
                        id=f"generator-error-{level}-{worksheet}-{i}",
                        type=IssueType.CONSISTENCY,
                        severity=IssueSeverity.ERROR,
                        level=level,
                        worksheet=worksheet,
                        problem_type="unknown",
                        description=f"Generator threw error: {e}",
                    )
                )
                continue

            logger.debug(f"Validating {problem.id} ({problem.type}/{problem.subtype})")
            result.problems_tested += 1
            result.issues.extend(self.validate_problem(problem))
        return result

    def test_level(
        self,
        level: Union[str, LevelSpec],
        on_range_complete: Optional[RangeCallback] = None,
    ) -> list[TestResult]:
        """One TestResult per worksheet range of the level."""
        spec = self.curriculum.get_level(level) if isinstance(level, str) else level
        if spec is None:
            logger.warning(f"Level {level} is not in curriculum {self.curriculum.name}; skipped")
            return []

        results = []
        for worksheet_range in spec.worksheet_ranges:
            result = self.test_worksheet_range(spec.level, worksheet_range)
            results.append(result)
            if on_range_complete:
                on_range_complete(result)

        failed = sum(1 for r in results if not r.passed)
        logger.info(f"Level {spec.level}: {len(results)} ranges tested, {failed} failed")
        return results

    def test_all_levels(
        self,
        levels: Optional[Iterable[str]] = None,
        on_range_complete: Optional[RangeCallback] = None,
    ) -> QAReport:
        """Test the given levels (default: config.levels, else every level)."""
        selected = list(levels or self.config.levels or self.curriculum.level_ids)
        logger.info(f"Testing {len(selected)} levels of {self.curriculum.name}")

        results: list[TestResult] = []
        for level in selected:
            results.extend(self.test_level(level, on_range_complete))

        report = QAReport.from_results(self.curriculum.name, results)
        logger.info(
            f"QA complete: {report.total_issues} issues, "
            f"{len(report.levels_failed)} of {report.levels_tested} levels failed"
        )
        return report

    @staticmethod
    def get_auto_fixable_issues(report: QAReport) -> list[Issue]:
        return [issue for issue in report.all_issues if issue.can_auto_fix]

    def count_ranges(self, levels: Optional[Iterable[str]] = None) -> int:
        """Number of ranges test_all_levels will visit; used for progress bars."""
        selected = list(levels or self.config.levels or self.curriculum.level_ids)
        return sum(
            len(spec.worksheet_ranges)
            for spec in (self.curriculum.get_level(level) for level in selected)
            if spec is not None
        )
