"""Base client with Google API service initialization."""
from typing import Mapping, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ..auth import credentials_from_headers
from ..core.config import Settings


class GDriveClientBase:
    """Base class with the Drive v3 service."""

    def __init__(self, creds: Credentials) -> None:
        """Initialize the client with an authenticated Drive service.

        Args:
            creds: Credentials for the user whose Drive is accessed.
        """
        self.creds = creds
        self.drive_service = build('drive', 'v3', credentials=creds, cache_discovery=False)

    @classmethod
    def from_headers(
        cls, headers: Optional[Mapping[str, str]], settings: Optional[Settings] = None
    ):
        """Build a client from per-request token headers.

        Raises:
            AuthenticationError: If the access token header is missing or malformed.
        """
        return cls(credentials_from_headers(headers, settings))
