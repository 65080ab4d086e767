"""
Console reporter: colour-coded issue listings grouped by worksheet range,
followed by a summary table and the overall pass rate.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kumon_qa.qa.fix_engine import FixResult
from kumon_qa.qa.models import Issue, IssueSeverity, QAReport, TestResult

SEVERITY_STYLES = {
    IssueSeverity.ERROR: ("red", "✗"),
    IssueSeverity.WARNING: ("yellow", "!"),
    IssueSeverity.INFO: ("blue", "i"),
}


def _print_issue(console: Console, issue: Issue) -> None:
    color, mark = SEVERITY_STYLES[issue.severity]
    console.print(
        f"    [{color}]{mark}[/] [dim]#{issue.worksheet}[/] "
        f"[{color}]{issue.type.value}[/]: {issue.description}"
    )
    if issue.suggested_fix:
        console.print(f"      [dim]fix → {issue.suggested_fix.file}: {issue.suggested_fix.explanation}[/]")


def _print_result(console: Console, result: TestResult, show_info: bool) -> None:
    status = "[green]✓ PASS[/]" if result.passed else "[red]✗ FAIL[/]"
    r = result.worksheet_range
    console.print(
        f"  {status} [bold]{result.level}[/] {r.label} [cyan]{r.type}[/] "
        f"[dim]({result.problems_tested} problems)[/]"
    )
    for severity in (IssueSeverity.ERROR, IssueSeverity.WARNING, IssueSeverity.INFO):
        if severity == IssueSeverity.INFO and not show_info:
            continue
        for issue in result.issues:
            if issue.severity == severity:
                _print_issue(console, issue)


def print_report(
    report: QAReport,
    console: Optional[Console] = None,
    show_info: bool = False,
    only_failures: bool = False,
) -> None:
    """Render a QAReport to a rich console."""
    console = console or Console()

    console.print(
        Panel(
            f"Curriculum: [bold]{report.curriculum}[/]\n"
            f"Run at: {report.timestamp:%Y-%m-%d %H:%M:%S} UTC",
            title="[bold cyan]Kumon QA Report[/]",
            border_style="cyan",
        )
    )

    current_level = None
    for result in report.results:
        if only_failures and result.passed:
            continue
        if result.level != current_level:
            current_level = result.level
            console.print(f"\n[bold]Level {current_level}[/]")
        _print_result(console, result, show_info)

    table = Table(title="Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Problems tested", str(report.total_problems))
    table.add_row("Total issues", str(report.total_issues))
    for severity, count in report.issues_by_severity.items():
        table.add_row(f"  {severity}", str(count))
    for issue_type, count in report.issues_by_type.items():
        if count:
            table.add_row(f"  {issue_type}", str(count))
    table.add_row("Levels passed", str(len(report.levels_passed)))
    table.add_row("Levels failed", str(len(report.levels_failed)))
    if report.fixes_applied or report.fixes_failed:
        table.add_row("Fixes applied", str(report.fixes_applied))
        table.add_row("Fixes failed", str(report.fixes_failed))
    console.print()
    console.print(table)

    if report.passed:
        console.print(f"\n[bold green]✓ All levels passed[/] ({report.pass_rate:.1f}% of ranges)")
    else:
        failed = ", ".join(report.levels_failed)
        console.print(
            f"\n[bold red]✗ {len(report.levels_failed)} level(s) failed:[/] {failed} "
            f"({report.pass_rate:.1f}% of ranges passed)"
        )


def print_fix_results(results: list[FixResult], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not results:
        console.print("[dim]No auto-fixable issues.[/]")
        return

    table = Table(title="Fix Results")
    table.add_column("Level", style="cyan")
    table.add_column("Type")
    table.add_column("Result")
    table.add_column("Message", overflow="fold")
    for r in results:
        outcome = "[green]✓[/]" if r.success else "[red]✗[/]"
        table.add_row(r.issue.level, r.issue.type.value, outcome, r.message)
    console.print(table)
