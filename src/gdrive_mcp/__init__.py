"""gdrive-mcp - Google Drive MCP Server Package.

This package exposes a Google Drive account to MCP (Model Context Protocol)
clients over HTTP, allowing them to list, read and search Drive files.
"""
from .client import GDriveClient

__version__ = "0.1.0"
__all__ = ["GDriveClient"]
