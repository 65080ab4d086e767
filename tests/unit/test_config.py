"""
Unit tests for Settings and QAConfig.

Run: pytest tests/unit/test_config.py -v
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kumon_qa.config import (
    DEFAULT_FIX_SEARCH_DIRS,
    QAConfig,
    Settings,
    ValidatorConfig,
    ValidatorToggles,
)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("KUMON_QA_LOG_LEVEL", "KUMON_QA_PROBLEMS_PER_RANGE", "KUMON_QA_DEFAULT_CURRICULUM"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.default_curriculum == "kumon"
        assert settings.problems_per_range == 10
        assert settings.fix_search_dirs == DEFAULT_FIX_SEARCH_DIRS
        assert settings.fix_search_dirs == ["."]

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("KUMON_QA_PROBLEMS_PER_RANGE", "3")
        monkeypatch.setenv("KUMON_QA_PROJECT_ROOT", "/srv/app")
        settings = Settings(_env_file=None)
        assert settings.problems_per_range == 3
        assert settings.project_root == Path("/srv/app")


class TestQAConfig:
    def test_from_settings(self):
        settings = Settings(_env_file=None, problems_per_range=4, default_curriculum="kumon")
        config = QAConfig.from_settings(settings, levels=["C"], problems_per_range=None)
        assert config.problems_per_range == 4
        assert config.levels == ["C"]
        assert config.output_format == "console"

    def test_override_wins(self):
        settings = Settings(_env_file=None, problems_per_range=4)
        assert QAConfig.from_settings(settings, problems_per_range=7).problems_per_range == 7

    def test_rejects_bad_output_format(self):
        with pytest.raises(ValidationError):
            QAConfig(output_format="pdf")

    def test_rejects_zero_problems(self):
        with pytest.raises(ValidationError):
            QAConfig(problems_per_range=0)


class TestValidatorToggles:
    def test_all_enabled(self):
        toggles = ValidatorToggles()
        assert all(toggles.is_enabled(t) for t in ("visual", "math", "curriculum", "consistency", "readability"))

    def test_disable_one(self):
        toggles = ValidatorToggles(readability=ValidatorConfig(enabled=False))
        assert not toggles.is_enabled("readability")
        assert toggles.is_enabled("math")

    def test_toggle_has_only_enabled(self):
        assert set(ValidatorConfig.model_fields) == {"enabled"}
