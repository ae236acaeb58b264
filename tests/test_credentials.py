"""Unit tests for per-request credentials."""
import sys
import os
from unittest.mock import Mock, patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from gdrive_mcp.auth import (
    DriveCredentials,
    build_credentials,
    credentials_from_headers,
    parse_credential_headers,
)
from gdrive_mcp.client import GDriveClient
from gdrive_mcp.core.config import Settings
from gdrive_mcp.utils.errors import AuthenticationError


def _settings(client_id="client-id", client_secret="client-secret"):
    settings = Settings()
    settings.client_id = client_id
    settings.client_secret = client_secret
    return settings


class TestParseCredentialHeaders:
    """Tests for parse_credential_headers."""

    def test_access_token_only(self):
        creds = parse_credential_headers({"x-access-token": "ya29.token"})
        assert creds == DriveCredentials(access_token="ya29.token", refresh_token=None)

    def test_access_and_refresh_token(self):
        creds = parse_credential_headers(
            {"x-access-token": "ya29.token", "x-refresh-token": "1//refresh"}
        )
        assert creds.access_token == "ya29.token"
        assert creds.refresh_token == "1//refresh"

    def test_missing_headers(self):
        with pytest.raises(AuthenticationError) as exc:
            parse_credential_headers(None)
        assert "x-access-token header required" in str(exc.value)

    def test_missing_access_token(self):
        with pytest.raises(AuthenticationError):
            parse_credential_headers({"x-refresh-token": "1//refresh"})

    def test_empty_access_token(self):
        with pytest.raises(AuthenticationError):
            parse_credential_headers({"x-access-token": ""})

    @pytest.mark.parametrize("token", ["has space", "tab\there", "line\nbreak", "unicodé", "x" * 4097])
    def test_malformed_access_token(self, token):
        with pytest.raises(AuthenticationError) as exc:
            parse_credential_headers({"x-access-token": token})
        assert "malformed" in str(exc.value)

    def test_malformed_refresh_token(self):
        with pytest.raises(AuthenticationError):
            parse_credential_headers({"x-access-token": "ya29.token", "x-refresh-token": "bad token"})

    def test_empty_refresh_token_is_ignored(self):
        creds = parse_credential_headers({"x-access-token": "ya29.token", "x-refresh-token": ""})
        assert creds.refresh_token is None

    def test_repr_hides_tokens(self):
        creds = DriveCredentials(access_token="ya29.secret", refresh_token="1//secret")
        assert "secret" not in repr(creds)


class TestBuildCredentials:
    """Tests for build_credentials."""

    def test_uses_configured_client(self):
        creds = build_credentials(
            DriveCredentials(access_token="ya29.token", refresh_token="1//refresh"),
            _settings(),
        )
        assert creds.token == "ya29.token"
        assert creds.refresh_token == "1//refresh"
        assert creds.client_id == "client-id"
        assert creds.client_secret == "client-secret"
        assert creds.token_uri == "https://oauth2.googleapis.com/token"

    def test_works_without_client_config(self):
        creds = build_credentials(
            DriveCredentials(access_token="ya29.token"), _settings(None, None)
        )
        assert creds.token == "ya29.token"
        assert creds.client_id is None

    def test_credentials_from_headers(self):
        creds = credentials_from_headers({"x-access-token": "ya29.token"}, _settings())
        assert creds.token == "ya29.token"
        assert creds.refresh_token is None


class TestClientFromHeaders:
    """Tests for GDriveClient.from_headers."""

    def test_builds_drive_service(self):
        with patch("gdrive_mcp.client.base.build") as mock_build:
            service = Mock()
            mock_build.return_value = service

            client = GDriveClient.from_headers({"x-access-token": "ya29.token"}, _settings())

            assert client.drive_service is service
            args, kwargs = mock_build.call_args
            assert args == ("drive", "v3")
            assert kwargs["credentials"].token == "ya29.token"

    def test_missing_token_never_builds_service(self):
        with patch("gdrive_mcp.client.base.build") as mock_build:
            with pytest.raises(AuthenticationError):
                GDriveClient.from_headers({}, _settings())
            mock_build.assert_not_called()
