"""
FixEngine: apply suggested CodeFixes as literal text substitutions.

Every file is backed up once per engine instance before its first
change; the original content stays cached so rollback_all() can restore
it. Writes go through a temporary file and os.replace() so a target is
never left half-written. Under dry_run nothing on disk is touched.
"""
from __future__ import annotations

import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from loguru import logger

from kumon_qa.config import DEFAULT_FIX_SEARCH_DIRS
from kumon_qa.qa.models import Issue


@dataclass
class FixResult:
    """Outcome of one fix attempt."""

    issue: Issue
    success: bool
    message: str
    backup_path: Optional[Path] = None


def _atomic_write(path: Path, content: str) -> None:
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class FixEngine:
    """
    Applies auto-fixable issues to source files under project_root.

    Usage:
        engine = FixEngine(Path("."), dry_run=True)
        results = engine.apply_all_fixes(issues)
        print(engine.generate_fix_report(results))
    """

    def __init__(
        self,
        project_root: Union[str, Path],
        dry_run: bool = False,
        search_dirs: Optional[Iterable[str]] = None,
    ):
        self.project_root = Path(project_root)
        self.dry_run = dry_run
        self.search_dirs = list(search_dirs) if search_dirs is not None else list(DEFAULT_FIX_SEARCH_DIRS)
        # original content per file, kept for the lifetime of the engine
        self._backups: dict[Path, str] = {}
        self._backup_paths: dict[Path, Path] = {}

    # ========================================
    # Paths and backups
    # ========================================

    def resolve_path(self, file: str) -> Path:
        """
        Resolve a fix target relative to project_root.

        'a/**/b.py' is looked up as a/<dir>/b.py for each search dir in
        order; if none exists the '**/' segment is dropped.
        """
        if "**" not in file:
            return self.project_root / file

        head, tail = file.split("**", 1)
        base = self.project_root / head
        tail = tail.lstrip("/")
        for directory in self.search_dirs:
            candidate = base / directory / tail
            if candidate.exists():
                return candidate
        return self.project_root / file.replace("**/", "")

    def _backup(self, path: Path) -> Path:
        if path in self._backup_paths:
            return self._backup_paths[path]

        content = path.read_text(encoding="utf-8")
        backup_path = path.with_name(f"{path.name}.backup.{int(time.time() * 1000)}")
        if not self.dry_run:
            backup_path.write_text(content, encoding="utf-8")
            logger.debug(f"Backed up {path} to {backup_path}")
        self._backups[path] = content
        self._backup_paths[path] = backup_path
        return backup_path

    def _restore(self, path: Path) -> bool:
        original = self._backups.get(path)
        if original is None:
            return False
        try:
            _atomic_write(path, original)
        except OSError as e:
            logger.warning(f"Could not restore {path}: {e}")
            return False
        return True

    # ========================================
    # Applying fixes
    # ========================================

    def apply_fix(self, issue: Issue) -> FixResult:
        fix = issue.suggested_fix
        if fix is None:
            return FixResult(issue, False, "No suggested fix available")

        path = self.resolve_path(fix.file)
        if not path.is_file():
            return FixResult(issue, False, f"File not found: {path}")

        try:
            backup_path = self._backup(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Backup of {path} failed: {e}")
            return FixResult(issue, False, "Failed to create backup")

        if fix.is_manual:
            return FixResult(
                issue, False, f"Fix requires manual intervention: {fix.explanation}", backup_path
            )

        try:
            content = path.read_text(encoding="utf-8")
            if fix.old_code not in content:
                return FixResult(
                    issue,
                    False,
                    f'Could not find code to replace: "{fix.old_code[:50]}..."',
                    backup_path,
                )
            if not self.dry_run:
                _atomic_write(path, content.replace(fix.old_code, fix.new_code, 1))
        except (OSError, ValueError) as e:
            if not self.dry_run:
                self._restore(path)
            logger.warning(f"Fix {issue.id} failed on {path}: {e}")
            return FixResult(issue, False, f"Error applying fix: {e}", backup_path)

        if self.dry_run:
            return FixResult(issue, True, "[DRY RUN] Would apply fix", backup_path)
        logger.info(f"Applied fix {issue.id} to {path}")
        return FixResult(issue, True, "Fix applied successfully", backup_path)

    def apply_all_fixes(self, issues: Iterable[Issue]) -> list[FixResult]:
        """Apply every auto-fixable issue; a failure never stops the rest."""
        return [self.apply_fix(issue) for issue in issues if issue.can_auto_fix]

    def rollback_all(self) -> bool:
        """Restore every backed-up file; True only if all restores succeeded."""
        if self.dry_run:
            return True
        return all([self._restore(path) for path in list(self._backups)])

    # ========================================
    # Reporting
    # ========================================

    @staticmethod
    def generate_fix_report(results: list[FixResult]) -> str:
        successful = [r for r in results if r.success]
        failed = [r for r in results if not r.success]

        lines = [
            "=== Fix Report ===",
            "",
            f"Total fixes attempted: {len(results)}",
            f"Successful: {len(successful)}",
            f"Failed: {len(failed)}",
            "",
        ]
        if successful:
            lines.append("Successfully applied:")
            for r in successful:
                lines.append(f"   - {r.issue.level} ({r.issue.type.value}): {r.issue.description[:60]}")
            lines.append("")
        if failed:
            lines.append("Failed to apply:")
            for r in failed:
                lines.append(f"   - {r.issue.level} ({r.issue.type.value}): {r.message}")
            lines.append("")
        return "\n".join(lines)
