"""
Authentication package for gdrive-mcp.

Credentials are stateless: every request carries its own OAuth tokens.
"""

from .credentials import (
    DriveCredentials,
    build_credentials,
    credentials_from_headers,
    parse_credential_headers,
)

__all__ = [
    "DriveCredentials",
    "build_credentials",
    "credentials_from_headers",
    "parse_credential_headers",
]
