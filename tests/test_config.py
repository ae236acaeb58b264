"""Unit tests for configuration."""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from gdrive_mcp.core.config import Settings, get_settings, reload_settings

ENV_VARS = [
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GDRIVE_MCP_HOST",
    "GDRIVE_MCP_PORT",
    "GDRIVE_MCP_PATH",
    "GDRIVE_MCP_JSON_RESPONSE",
    "LOG_LEVEL",
]


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.path == "/google-drive"
        assert settings.json_response is True
        assert settings.log_level == "INFO"
        assert settings.client_id is None
        assert not settings.can_refresh_tokens()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLIENT_ID", "id")
        monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "secret")
        monkeypatch.setenv("GDRIVE_MCP_PORT", "9090")
        monkeypatch.setenv("GDRIVE_MCP_JSON_RESPONSE", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.port == 9090
        assert settings.json_response is False
        assert settings.log_level == "DEBUG"
        assert settings.can_refresh_tokens()

    def test_summary_excludes_secrets(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "top-secret")

        summary = Settings().get_environment_summary()

        assert "top-secret" not in str(summary)

    def test_reload(self, monkeypatch):
        monkeypatch.setenv("GDRIVE_MCP_PATH", "/drive")
        assert reload_settings().path == "/drive"
        assert get_settings().path == "/drive"

        monkeypatch.delenv("GDRIVE_MCP_PATH")
        assert reload_settings().path == "/google-drive"
