"""
HTML reporter: the console report recorded by rich and exported as a
standalone HTML page.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

from loguru import logger
from rich.console import Console

from kumon_qa.qa.models import QAReport
from kumon_qa.qa.reporters.console import print_report


def _record(report: QAReport) -> Console:
    console = Console(record=True, width=120, file=io.StringIO(), force_terminal=True, highlight=False)
    print_report(report, console=console, show_info=True)
    return console


def generate_html_report(report: QAReport) -> str:
    return _record(report).export_html(inline_styles=True)


def save_html_report(report: QAReport, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _record(report).save_html(str(path), inline_styles=True)
    logger.info(f"HTML report written to {path}")
    return path
