"""Unit tests for configuration."""

import pytest

from studentapi.config import ConfigError, Settings


@pytest.mark.unit
class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        """Empty environment gives the defaults."""
        settings = Settings.from_env({})

        assert settings.database_url == "sqlite:///students.db"
        assert settings.host == "0.0.0.0"
        assert settings.port == 4000
        assert settings.log_level == "INFO"
        assert settings.owner_student_code == "QE170101"

    def test_reads_environment(self) -> None:
        settings = Settings.from_env(
            {
                "DATABASE_URL": "sqlite:///tmp/test.db",
                "PORT": "8080",
                "HOST": "127.0.0.1",
                "STUDENTAPI_LOG_LEVEL": "DEBUG",
                "OWNER_FULL_NAME": "Jane Roe",
            }
        )

        assert settings.database_url == "sqlite:///tmp/test.db"
        assert settings.port == 8080
        assert settings.host == "127.0.0.1"
        assert settings.log_level == "DEBUG"
        assert settings.owner_full_name == "Jane Roe"

    @pytest.mark.parametrize("port", ["abc", "0", "70000", ""])
    def test_invalid_port_raises(self, port: str) -> None:
        with pytest.raises(ConfigError):
            Settings.from_env({"PORT": port})


@pytest.mark.unit
class TestWithOverrides:
    """Tests for Settings.with_overrides."""

    def test_applies_non_none_values(self) -> None:
        settings = Settings().with_overrides(port=9000, host=None)

        assert settings.port == 9000
        assert settings.host == "0.0.0.0"
