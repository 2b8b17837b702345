"""Tests for settings and logging setup."""

import structlog

from momintel.config import Settings
from momintel.logging_setup import configure_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.auto_note_from_transcript is True
        assert settings.simulation_interval_ms == 1200
        assert settings.mom_version_limit == 50
        assert settings.email_job_max_retries == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("AUTO_NOTE_FROM_TRANSCRIPT", "false")
        monkeypatch.setenv("MOM_VERSION_LIMIT", "5")
        settings = Settings(_env_file=None)
        assert settings.auto_note_from_transcript is False
        assert settings.mom_version_limit == 5


class TestConfigureLogging:
    def test_json_outside_development(self):
        try:
            configure_logging(Settings(_env_file=None, app_env="production"))
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        finally:
            structlog.reset_defaults()

    def test_console_in_development(self):
        try:
            configure_logging(Settings(_env_file=None, app_env="development"))
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        finally:
            structlog.reset_defaults()
