"""Tests for configuration loading, validation and environment overrides."""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from taskdesk.config import (
    ApiSettings,
    DatabaseSettings,
    TaskdeskSettings,
    TaskSettings,
    get_settings,
)
from taskdesk.database import build_engine
from taskdesk.logging_config import configure_logging


class TestDatabaseSettings:
    """Test database configuration."""

    def test_default_values(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = DatabaseSettings()

        assert settings.url == "sqlite:///taskdesk.db"
        assert settings.echo_sql is False
        assert settings.is_sqlite is True

    def test_env_override(self):
        with patch.dict(
            os.environ, {"DATABASE_URL": "postgresql://db/tasks"}, clear=True
        ):
            settings = DatabaseSettings()

        assert settings.url == "postgresql://db/tasks"
        assert settings.is_sqlite is False

    def test_pool_bounds(self):
        with pytest.raises(ValidationError, match="greater than or equal to 1"):
            DatabaseSettings(pool_size=0)

    def test_sqlite_engine_skips_pool_options(self, tmp_path):
        engine = build_engine(DatabaseSettings(url=f"sqlite:///{tmp_path / 't.db'}"))

        assert engine.url.get_backend_name() == "sqlite"
        engine.dispose()


class TestTaskSettings:
    def test_owner_join_on_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert TaskSettings().include_owner_by_default is True

    def test_owner_join_env_override(self):
        with patch.dict(
            os.environ, {"TASKS_INCLUDE_OWNER_BY_DEFAULT": "false"}, clear=True
        ):
            assert TaskSettings().include_owner_by_default is False


class TestApiSettings:
    def test_prefix_normalized(self):
        assert ApiSettings(prefix="/api/v1/").prefix == "/api/v1"

    def test_prefix_requires_leading_slash(self):
        with pytest.raises(ValidationError, match="must start with '/'"):
            ApiSettings(prefix="api")

    def test_empty_prefix_allowed(self):
        assert ApiSettings(prefix="").prefix == ""


class TestTaskdeskSettings:
    def test_nested_env_override(self):
        with patch.dict(
            os.environ,
            {
                "TASKDESK_TASKS__INCLUDE_OWNER_BY_DEFAULT": "false",
                "TASKDESK_LOG_LEVEL": "debug",
            },
            clear=True,
        ):
            settings = TaskdeskSettings(_env_file=None)

        assert settings.tasks.include_owner_by_default is False
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            TaskdeskSettings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("alias", ["WARN", "fatal", "NOTSET"])
    def test_level_aliases_rejected(self, alias):
        # uvicorn only accepts the canonical names
        with pytest.raises(ValidationError, match="Unknown log level"):
            TaskdeskSettings(_env_file=None, log_level=alias)

    @pytest.mark.parametrize("level", ["debug", "Info", "WARNING", "error", "CRITICAL"])
    def test_canonical_levels_accepted(self, level):
        settings = TaskdeskSettings(_env_file=None, log_level=level)
        assert settings.log_level == level.upper()

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


def test_configure_logging_runs_once():
    with (
        patch("taskdesk.logging_config._LOGGING_CONFIGURED", False),
        patch("taskdesk.logging_config.logging.basicConfig") as mock_basic,
    ):
        configure_logging("warning")
        configure_logging("debug")

    mock_basic.assert_called_once()
    assert mock_basic.call_args.kwargs["level"] == logging.WARNING
