"""
Shared configuration for gdrive-mcp.

This module centralizes configuration values read from the environment
(and from a local .env file when present).
"""

import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_PATH = "/google-drive"
HEALTH_PATH = "/healthz"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class Settings:
    """
    Process configuration.

    OAuth client credentials are process-wide; access tokens never live here,
    they arrive with each request.
    """

    def __init__(self) -> None:
        # OAuth application (used when google-auth refreshes an access token)
        self.client_id: Optional[str] = os.getenv("GOOGLE_CLIENT_ID") or None
        self.client_secret: Optional[str] = os.getenv("GOOGLE_CLIENT_SECRET") or None

        # HTTP server
        self.host = os.getenv("GDRIVE_MCP_HOST", DEFAULT_HOST)
        self.port = int(os.getenv("GDRIVE_MCP_PORT", str(DEFAULT_PORT)))
        self.path = os.getenv("GDRIVE_MCP_PATH", DEFAULT_PATH)
        self.json_response = _env_flag("GDRIVE_MCP_JSON_RESPONSE", True)

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def can_refresh_tokens(self) -> bool:
        """Check if the OAuth client is configured well enough to refresh tokens."""
        return bool(self.client_id and self.client_secret)

    def get_environment_summary(self) -> Dict[str, Any]:
        """Get a summary of the current configuration (excluding secrets)."""
        return {
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "json_response": self.json_response,
            "client_configured": self.can_refresh_tokens(),
            "log_level": self.log_level,
        }


# Global configuration instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global Settings instance, loading .env on first use."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload the configuration from environment variables."""
    global _settings
    load_dotenv()
    _settings = Settings()
    return _settings
