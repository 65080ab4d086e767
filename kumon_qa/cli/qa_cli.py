"""
Kumon QA CLI

Generates problems for every worksheet range of the selected levels, runs
them through the validators, reports the results and optionally applies
the suggested fixes.

Usage:
    kumon-qa                          # every level, console report
    kumon-qa --level C --level D      # selected levels
    kumon-qa --auto-fix --dry-run     # show which fixes would apply
    kumon-qa --output json --output-path qa-report.json

Exit codes:
    0 - No level failed (warnings allowed)
    1 - At least one level failed
    2 - Configuration error (unknown curriculum or level, bad options)
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm

from kumon_qa import __version__
from kumon_qa.config import QAConfig, Settings, get_settings
from kumon_qa.curriculum import get_curriculum
from kumon_qa.curriculum.models import CurriculumSpec
from kumon_qa.generators import curriculum_problems
from kumon_qa.qa.fix_engine import FixEngine, FixResult
from kumon_qa.qa.models import Issue, QAReport
from kumon_qa.qa.reporters import (
    generate_json_report,
    print_fix_results,
    print_report,
    save_html_report,
    save_json_report,
)
from kumon_qa.qa.tester import ProblemTester
from kumon_qa.qa.validators import build_validators

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="kumon-qa",
    help="Kumon QA - validate generated worksheet problems against the curriculum",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)

DEFAULT_HTML_PATH = Path("qa-report.html")


def configure_logging(settings: Settings, verbose: bool) -> None:
    """Send logs to stderr so stdout stays clean for reports."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="5 MB")


def _config_error(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/] {message}")
    return typer.Exit(2)


def _resolve_levels(
    curriculum: CurriculumSpec, levels: Optional[list[str]], all_levels: bool
) -> Optional[list[str]]:
    if all_levels or not levels:
        return None
    known = {level.upper(): level for level in curriculum.level_ids}
    resolved = []
    for level in levels:
        if level.upper() not in known:
            raise _config_error(
                f"Unknown level {level!r}. Available: {', '.join(curriculum.level_ids)}"
            )
        resolved.append(known[level.upper()])
    return resolved


# =============================================================================
# Fixes
# =============================================================================


def _review(issues: list[Issue]) -> list[Issue]:
    approved = []
    for issue in issues:
        fix = issue.suggested_fix
        err_console.print(
            f"\n[bold]{issue.level}[/] #{issue.worksheet} [yellow]{issue.type.value}[/]: "
            f"{issue.description}\n  [dim]{fix.file}: {fix.explanation}[/]"
        )
        if Confirm.ask("Apply this fix?", default=False, console=err_console):
            approved.append(issue)
    return approved


def _apply_fixes(
    tester: ProblemTester, report: QAReport, config: QAConfig, settings: Settings
) -> list[FixResult]:
    issues = tester.get_auto_fixable_issues(report)
    if config.review_fixes:
        issues = _review(issues)

    engine = FixEngine(
        settings.project_root, dry_run=config.dry_run, search_dirs=settings.fix_search_dirs
    )
    results = engine.apply_all_fixes(issues)
    applied = sum(1 for r in results if r.success)
    report.record_fixes(applied, len(results) - applied)

    print_fix_results(results, console=err_console)
    logger.info(engine.generate_fix_report(results))
    return results


# =============================================================================
# Main Command
# =============================================================================


@app.command()
def main(
    curriculum_name: Annotated[
        Optional[str], typer.Option("--curriculum", "-c", help="Curriculum to test against")
    ] = None,
    levels: Annotated[
        Optional[list[str]], typer.Option("--level", "-l", help="Level to test (repeatable)")
    ] = None,
    all_levels: Annotated[
        bool, typer.Option("--all", help="Test every level (default when no --level)")
    ] = False,
    auto_fix: Annotated[
        bool, typer.Option("--auto-fix", help="Apply auto-fixable suggestions")
    ] = False,
    review_fixes: Annotated[
        bool, typer.Option("--review-fixes", help="Confirm each fix before applying it")
    ] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Simulate fixes without touching files")
    ] = False,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Report format: console, json or html")
    ] = "console",
    output_path: Annotated[
        Optional[Path], typer.Option("--output-path", help="Write the report to this file")
    ] = None,
    problems: Annotated[
        Optional[int], typer.Option("--problems", "-n", help="Problems generated per range")
    ] = None,
    seed: Annotated[
        Optional[int], typer.Option("--seed", help="Seed operand generation for a reproducible run")
    ] = None,
    show_info: Annotated[
        bool, typer.Option("--show-info", help="Include info-level issues in the console report")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Debug logging")
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show the version and exit")
    ] = False,
) -> None:
    """
    Run the QA pipeline over generated problems.

    Every worksheet range of each selected level gets [bold]--problems[/]
    generated problems, each checked by the visual, math, curriculum,
    consistency and readability validators.
    """
    if version:
        console.print(f"kumon-qa {__version__}")
        raise typer.Exit()

    settings = get_settings()
    configure_logging(settings, verbose)

    try:
        curriculum = get_curriculum(curriculum_name or settings.default_curriculum)
    except KeyError as e:
        raise _config_error(e.args[0]) from None

    problems_found = curriculum_problems(curriculum)
    if problems_found:
        err_console.print(f"[red]Curriculum {curriculum.name} failed its integrity check:[/]")
        for problem in problems_found:
            err_console.print(f"  [red]✗[/] {problem}")
        raise typer.Exit(2)

    try:
        config = QAConfig.from_settings(
            settings,
            curriculum=curriculum.name,
            levels=_resolve_levels(curriculum, levels, all_levels),
            problems_per_range=problems,
            auto_fix=auto_fix or review_fixes,
            review_fixes=review_fixes,
            dry_run=dry_run,
            output_format=output.lower(),
            output_path=output_path,
        )
    except ValidationError as e:
        messages = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise _config_error(f"Invalid options: {messages}") from None

    tester = ProblemTester(
        curriculum,
        config=config,
        validators=build_validators(config.validators, settings.visual_renderer_file),
        rng=random.Random(seed),
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=err_console,
        transient=True,
    ) as progress:
        task = progress.add_task("Testing worksheet ranges...", total=tester.count_ranges())

        def advance(result) -> None:
            progress.update(task, advance=1, description=f"Testing level {result.level}...")

        report = tester.test_all_levels(on_range_complete=advance)

    if config.auto_fix:
        _apply_fixes(tester, report, config, settings)

    if config.output_format == "json":
        if config.output_path:
            save_json_report(report, config.output_path)
            err_console.print(f"[green]✓[/] JSON report saved to {config.output_path}")
        else:
            typer.echo(generate_json_report(report))
    elif config.output_format == "html":
        path = save_html_report(report, config.output_path or DEFAULT_HTML_PATH)
        err_console.print(f"[green]✓[/] HTML report saved to {path}")
    else:
        print_report(report, console=console, show_info=show_info)
        if config.output_path:
            save_json_report(report, config.output_path)

    if report.levels_failed:
        raise typer.Exit(1)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
