"""
Per-request Google credentials for gdrive-mcp.

Tokens arrive in request headers and are turned into google-auth
credentials for the lifetime of one handler call. Nothing is persisted.
"""

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from google.oauth2.credentials import Credentials

from ..core.config import Settings, get_settings
from ..utils.constants import (
    ACCESS_TOKEN_HEADER,
    GOOGLE_TOKEN_URI,
    MAX_TOKEN_LENGTH,
    REFRESH_TOKEN_HEADER,
)
from ..utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

# Visible ASCII only; OAuth bearer tokens never contain whitespace.
_TOKEN_RE = re.compile(r"^[\x21-\x7e]+$")


@dataclass(frozen=True)
class DriveCredentials:
    """Tokens extracted from one request."""

    access_token: str
    refresh_token: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"DriveCredentials(access_token='***', "
            f"refresh_token={'***' if self.refresh_token else None})"
        )


def _validate_token(header: str, value: str) -> str:
    if len(value) > MAX_TOKEN_LENGTH or not _TOKEN_RE.match(value):
        raise AuthenticationError(f"401: {header} header is malformed")
    return value


def parse_credential_headers(headers: Optional[Mapping[str, str]]) -> DriveCredentials:
    """
    Extract and validate the token headers.

    Args:
        headers: Request headers. Starlette's Headers is case-insensitive;
            plain dicts must use lower-case keys.

    Returns:
        DriveCredentials with the access token and optional refresh token.

    Raises:
        AuthenticationError: If the access token is missing, or either token
            is malformed.
    """
    headers = headers or {}

    access_token = headers.get(ACCESS_TOKEN_HEADER)
    if not access_token:
        raise AuthenticationError(f"401: {ACCESS_TOKEN_HEADER} header required")
    _validate_token(ACCESS_TOKEN_HEADER, access_token)

    refresh_token = headers.get(REFRESH_TOKEN_HEADER) or None
    if refresh_token is not None:
        _validate_token(REFRESH_TOKEN_HEADER, refresh_token)

    return DriveCredentials(access_token=access_token, refresh_token=refresh_token)


def build_credentials(
    drive_creds: DriveCredentials, settings: Optional[Settings] = None
) -> Credentials:
    """
    Build google-auth credentials from request tokens.

    The OAuth client id/secret come from process configuration. Without them
    google-auth can still use the access token but cannot refresh it.
    """
    settings = settings or get_settings()

    if drive_creds.refresh_token and not settings.can_refresh_tokens():
        logger.debug("Refresh token supplied but OAuth client is not configured")

    return Credentials(
        token=drive_creds.access_token,
        refresh_token=drive_creds.refresh_token,
        token_uri=GOOGLE_TOKEN_URI,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
    )


def credentials_from_headers(
    headers: Optional[Mapping[str, str]], settings: Optional[Settings] = None
) -> Credentials:
    """Validate request headers and return google-auth credentials."""
    return build_credentials(parse_credential_headers(headers), settings)
