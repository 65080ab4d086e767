"""
Configuration for the Kumon QA pipeline.

Two layers:
- Settings: process-wide defaults from environment variables / .env
  (prefix KUMON_QA_), cached via get_settings().
- QAConfig: the configuration of one QA run (levels, validators, output),
  built by the CLI from flags layered over Settings.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# generator modules live directly in kumon_qa/generators/, so "**" resolves to
# the package itself
DEFAULT_FIX_SEARCH_DIRS = ["."]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KUMON_QA_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum level written to stderr",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file (rotated by loguru)",
    )

    # ========================================
    # QA defaults
    # ========================================
    default_curriculum: str = Field(
        default="kumon",
        description="Curriculum used when --curriculum is not given",
    )
    problems_per_range: int = Field(
        default=10,
        ge=1,
        description="Problems generated per worksheet range",
    )

    # ─── Fix Engine ─────────────────────────────────────────────────────────
    project_root: Path = Field(
        default=Path("."),
        description="Root directory that suggested fix paths are relative to",
    )
    visual_renderer_file: str = Field(
        default="kumon_qa/generators/visuals.py",
        description="File blamed for visual mismatches not caused by a generator",
    )
    fix_search_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FIX_SEARCH_DIRS),
        description="Directories searched, in order, when a fix path contains '**'",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# =============================================================================
# Run configuration
# =============================================================================


class ValidatorConfig(BaseModel):
    """Toggle for a single validator."""

    enabled: bool = True


class ValidatorToggles(BaseModel):
    """One toggle per issue type; all validators run by default."""

    visual: ValidatorConfig = Field(default_factory=ValidatorConfig)
    math: ValidatorConfig = Field(default_factory=ValidatorConfig)
    curriculum: ValidatorConfig = Field(default_factory=ValidatorConfig)
    consistency: ValidatorConfig = Field(default_factory=ValidatorConfig)
    readability: ValidatorConfig = Field(default_factory=ValidatorConfig)

    def is_enabled(self, issue_type: str) -> bool:
        toggle = getattr(self, issue_type, None)
        return toggle is None or toggle.enabled


class QAConfig(BaseModel):
    """Configuration for one QA run."""

    curriculum: str = "kumon"
    levels: list[str] | None = None  # None means every level
    problems_per_range: int = Field(default=10, ge=1)
    auto_fix: bool = False
    review_fixes: bool = False
    dry_run: bool = False
    validators: ValidatorToggles = Field(default_factory=ValidatorToggles)
    output_format: Literal["console", "json", "html"] = "console"
    output_path: Path | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> QAConfig:
        """Build a run config seeded from Settings defaults."""
        settings = settings or get_settings()
        values = {
            "curriculum": settings.default_curriculum,
            "problems_per_range": settings.problems_per_range,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
