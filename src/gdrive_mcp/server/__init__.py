"""Google Drive MCP Server - HTTP ingress and protocol adapter."""

from .adapter import GoogleDriveAdapter
from .app import create_app
from .main import main

__all__ = ["GoogleDriveAdapter", "create_app", "main"]
