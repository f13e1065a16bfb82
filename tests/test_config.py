"""
Unit tests for the Config Module.
"""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from settingsbridge.modules.config import ConfigModule, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read the environment again."""
    reset_config()
    yield
    reset_config()


class TestConfigModule:
    """Test server configuration loading."""

    def test_defaults(self, monkeypatch):
        for key in ["API_HOST", "API_PORT", "LOG_LEVEL", "DEBUG", "ENVIRONMENT", "CHANNEL_NAME"]:
            monkeypatch.delenv(key, raising=False)

        config = ConfigModule()

        assert config.get("host") == "0.0.0.0"
        assert config.get("port") == 8080
        assert config.get("log_level") == "INFO"
        assert config.get("debug") is False
        assert config.get("environment") == "development"
        assert config.get("channel_name") == "all_files_access"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9090")
        monkeypatch.setenv("DEBUG", "TRUE")
        monkeypatch.setenv("CHANNEL_NAME", "settings")

        config = ConfigModule()

        assert config.get("port") == 9090
        assert config.get("debug") is True
        assert config.get("channel_name") == "settings"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "eighty")

        with pytest.raises(ValueError):
            ConfigModule()

    def test_missing_required_key(self, monkeypatch):
        monkeypatch.setattr(
            ConfigModule,
            "_load_from_env",
            lambda self: {"host": "0.0.0.0", "port": 8080, "log_level": "INFO"},
        )

        with pytest.raises(ValueError, match="channel_name"):
            ConfigModule()

    def test_set_and_get_all(self):
        config = ConfigModule()
        config.set("channel_name", "other")

        values = config.get_all()
        values["channel_name"] = "mutated"

        assert config.get("channel_name") == "other"
        assert config.get("missing", "fallback") == "fallback"

    def test_schema(self):
        schema = ConfigModule.get_config_schema()

        assert set(schema["required"]) == {"host", "port", "log_level", "channel_name"}
        assert schema["optional"]["debug"]["default"] is False

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("CHANNEL_NAME", "first")
        first = get_config()
        reset_config()
        monkeypatch.setenv("CHANNEL_NAME", "second")

        assert get_config() is not first
        assert get_config().get("channel_name") == "second"
