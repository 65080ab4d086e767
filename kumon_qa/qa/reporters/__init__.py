"""Report renderers for QAReport: console, JSON and HTML."""

from kumon_qa.qa.reporters.console import print_fix_results, print_report
from kumon_qa.qa.reporters.html import generate_html_report, save_html_report
from kumon_qa.qa.reporters.json_report import generate_json_report, save_json_report

__all__ = [
    "generate_html_report",
    "generate_json_report",
    "print_fix_results",
    "print_report",
    "save_html_report",
    "save_json_report",
]
