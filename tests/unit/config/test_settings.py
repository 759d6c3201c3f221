"""Tests for Settings configuration class."""

import pytest


class TestSettingsDefaults:
    """Test that Settings loads sensible defaults."""

    def test_settings_loads_with_defaults(self):
        """Settings should load with default values when no env vars are set."""
        from brightmatch.config.settings import Settings

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.leaderboard_limit == 50


class TestSettingsFromEnv:
    """Test that Settings reads from environment variables."""

    def test_log_level_from_env(self, monkeypatch):
        """LOG_LEVEL should be read and upper-cased."""
        from brightmatch.config.settings import Settings

        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"

    def test_leaderboard_limit_from_env(self, monkeypatch):
        """LEADERBOARD_LIMIT should be parsed as an integer."""
        from brightmatch.config.settings import Settings

        monkeypatch.setenv("LEADERBOARD_LIMIT", "10")

        settings = Settings(_env_file=None)

        assert settings.leaderboard_limit == 10

    def test_env_file_is_read(self, tmp_path):
        """Values may come from a .env file."""
        from brightmatch.config.settings import Settings

        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=warning\nLEADERBOARD_LIMIT=5\n")

        settings = Settings(_env_file=env_file)

        assert settings.log_level == "WARNING"
        assert settings.leaderboard_limit == 5


class TestSettingsValidation:
    """Test that Settings rejects invalid values."""

    def test_invalid_log_level(self):
        """Unknown log levels should raise."""
        from pydantic import ValidationError

        from brightmatch.config.settings import Settings

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="VERBOSE")

    def test_leaderboard_limit_must_be_positive(self):
        """A zero limit should raise."""
        from pydantic import ValidationError

        from brightmatch.config.settings import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, leaderboard_limit=0)


class TestSettingsSingleton:
    """Test get_settings caching."""

    def test_get_settings_caches(self):
        """get_settings returns the same instance until reset."""
        from brightmatch.config.settings import get_settings, reset_settings

        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
