"""
Tests for environment loading and settings.
"""

import os
from pathlib import Path

import pytest

from resumecheck.constants import DEFAULT_SIMILARITY_THRESHOLD
from resumecheck.env import load_env, load_settings

SETTINGS_VARS = [
    "RESUMECHECK_LOG_LEVEL",
    "RESUMECHECK_LOG_DIR",
    "RESUMECHECK_LOG_TO_FILE",
    "RESUMECHECK_SIMILARITY_THRESHOLD",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset settings variables and restore them after the test."""
    for name in SETTINGS_VARS:
        # setenv first so monkeypatch records the original state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestLoadSettings:

    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.log_level == "INFO"
        assert settings.log_dir == Path("logs")
        assert settings.log_to_file is True
        assert settings.similarity_threshold == 80

    def test_overrides(self, clean_env):
        clean_env.setenv("RESUMECHECK_LOG_LEVEL", "debug")
        clean_env.setenv("RESUMECHECK_LOG_DIR", "/tmp/rc-logs")
        clean_env.setenv("RESUMECHECK_LOG_TO_FILE", "false")
        clean_env.setenv("RESUMECHECK_SIMILARITY_THRESHOLD", "65")

        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == Path("/tmp/rc-logs")
        assert settings.log_to_file is False
        assert settings.similarity_threshold == 65

    def test_bad_threshold(self, clean_env):
        clean_env.setenv("RESUMECHECK_SIMILARITY_THRESHOLD", "high")
        with pytest.raises(SystemExit):
            load_settings()

    def test_bad_log_level(self, clean_env):
        clean_env.setenv("RESUMECHECK_LOG_LEVEL", "loud")
        with pytest.raises(SystemExit) as exc:
            load_settings()
        assert "RESUMECHECK_LOG_LEVEL" in str(exc.value.code)

    def test_blank_log_level_uses_default(self, clean_env):
        clean_env.setenv("RESUMECHECK_LOG_LEVEL", "  ")
        assert load_settings().log_level == "INFO"

    def test_default_threshold_shared_with_similarity(self, clean_env):
        assert load_settings().similarity_threshold == DEFAULT_SIMILARITY_THRESHOLD


class TestLoadEnv:

    def test_reads_dotenv(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("RESUMECHECK_LOG_LEVEL=warning\n")
        clean_env.chdir(tmp_path)

        load_env()

        assert os.environ["RESUMECHECK_LOG_LEVEL"] == "warning"
        assert load_settings().log_level == "WARNING"

    def test_environment_wins(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("RESUMECHECK_LOG_LEVEL=warning\n")
        clean_env.chdir(tmp_path)
        clean_env.setenv("RESUMECHECK_LOG_LEVEL", "ERROR")

        load_env()

        assert os.environ["RESUMECHECK_LOG_LEVEL"] == "ERROR"

    def test_missing_dotenv(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        load_env()
        assert "RESUMECHECK_LOG_LEVEL" not in os.environ
