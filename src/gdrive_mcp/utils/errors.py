"""Custom exceptions for the Google Drive MCP server.

Every exception inherits from GDriveError and carries the JSON-RPC error
code the protocol adapter reports to the client.
"""
from typing import Optional, Any

from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS

from .constants import (
    AUTHENTICATION_ERROR_CODE,
    NOT_FOUND_ERROR_CODE,
    PERMISSION_DENIED_ERROR_CODE,
    QUOTA_EXCEEDED_ERROR_CODE,
)


class GDriveError(Exception):
    """Base exception for all gdrive-mcp errors.

    Attributes:
        message: Human-readable error description.
        file_id: Optional file ID related to the error.
    """

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, file_id: Optional[str] = None) -> None:
        self.message = message
        self.file_id = file_id
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the error message, optionally including file ID."""
        if self.file_id:
            return f"{self.message} (file: {self.file_id})"
        return self.message

    def to_mcp_error(self) -> McpError:
        """Wrap this error for the protocol layer."""
        return McpError(ErrorData(code=self.code, message=self.format_message()))


class AuthenticationError(GDriveError):
    """Raised when the access token is missing, malformed or rejected."""
    code = AUTHENTICATION_ERROR_CODE


class NotFoundError(GDriveError):
    """Raised when a requested file doesn't exist or was deleted."""
    code = NOT_FOUND_ERROR_CODE


class PermissionDeniedError(GDriveError):
    """Raised when access to a file is denied."""
    code = PERMISSION_DENIED_ERROR_CODE


class QuotaExceededError(GDriveError):
    """Raised when API rate limit or quota is exceeded."""
    code = QUOTA_EXCEEDED_ERROR_CODE


class InvalidArgumentError(GDriveError):
    """Raised when a tool argument or resource URI is unusable."""
    code = INVALID_PARAMS


class ToolNotFoundError(GDriveError):
    """Raised when a client calls a tool that is not in the catalog."""

    code = INVALID_PARAMS

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool not found: {tool_name}")


def handle_http_error(error: Any, file_id: Optional[str] = None) -> GDriveError:
    """Convert googleapiclient HttpError to a specific exception.

    Args:
        error: The HttpError from googleapiclient.
        file_id: Optional file ID for context.

    Returns:
        An appropriate GDriveError subclass.
    """
    try:
        status = error.resp.status
    except AttributeError:
        return GDriveError(f"API error: {str(error)}", file_id)

    if status == 401:
        return AuthenticationError(
            "Authentication failed. The access token was rejected or has expired.",
            file_id
        )
    elif status == 403:
        return PermissionDeniedError(
            "Access denied. Check file sharing settings or request access.",
            file_id
        )
    elif status == 404:
        return NotFoundError(
            "File not found. It may have been deleted or moved.",
            file_id
        )
    elif status == 429:
        return QuotaExceededError(
            "API quota exceeded. Please wait a moment and try again.",
            file_id
        )
    else:
        return GDriveError(f"API error (HTTP {status}): {str(error)}", file_id)
