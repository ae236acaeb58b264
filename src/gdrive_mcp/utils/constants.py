"""Centralized constants for the Google Drive MCP server."""

# Server identity
SERVER_NAME = "mcp-servers/google-drive"
SERVER_VERSION = "0.1.0"

# Resource URIs
RESOURCE_URI_PREFIX = "gdrive:///"

# MIME Types - Google Apps
GOOGLE_APPS_MIME_PREFIX = 'application/vnd.google-apps'
GOOGLE_MIME_TYPES = {
    'doc': 'application/vnd.google-apps.document',
    'sheet': 'application/vnd.google-apps.spreadsheet',
    'presentation': 'application/vnd.google-apps.presentation',
    'drawing': 'application/vnd.google-apps.drawing',
}

# Export target per Google Apps type
EXPORT_MIME_TYPES = {
    GOOGLE_MIME_TYPES['doc']: 'text/markdown',
    GOOGLE_MIME_TYPES['sheet']: 'text/csv',
    GOOGLE_MIME_TYPES['presentation']: 'text/plain',
    GOOGLE_MIME_TYPES['drawing']: 'image/png',
}
DEFAULT_EXPORT_MIME_TYPE = 'text/plain'
DEFAULT_MIME_TYPE = 'application/octet-stream'

# Payloads with these types are returned as text rather than base64
TEXT_MIME_PREFIX = 'text/'
JSON_MIME_TYPE = 'application/json'

# Default Values
DEFAULT_PAGE_SIZE = 10
LIST_FIELDS = "nextPageToken, files(id, name, mimeType)"
SEARCH_FIELDS = "files(id, name, mimeType)"

# Request headers
ACCESS_TOKEN_HEADER = 'x-access-token'
REFRESH_TOKEN_HEADER = 'x-refresh-token'
MAX_TOKEN_LENGTH = 4096

# Google OAuth
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

# JSON-RPC error codes (implementation-defined range)
AUTHENTICATION_ERROR_CODE = -32001
NOT_FOUND_ERROR_CODE = -32002
PERMISSION_DENIED_ERROR_CODE = -32003
QUOTA_EXCEEDED_ERROR_CODE = -32004
