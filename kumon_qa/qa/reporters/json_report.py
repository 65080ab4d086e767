"""JSON reporter: the QAReport serialized verbatim."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from loguru import logger

from kumon_qa.qa.models import QAReport


def generate_json_report(report: QAReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def save_json_report(report: QAReport, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_json_report(report), encoding="utf-8")
    logger.info(f"JSON report written to {path}")
    return path
