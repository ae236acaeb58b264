"""Google Drive Client - modular implementation.

This module provides a facade that combines all client mixins into
a single GDriveClient class.
"""
from .base import GDriveClientBase
from .files import FilesMixin
from .search import SearchMixin


class GDriveClient(
    GDriveClientBase,
    FilesMixin,
    SearchMixin,
):
    """Read-only Google Drive client.

    Combines the mixins to list, read and search files through a unified
    interface.
    """
    pass


__all__ = ['GDriveClient']
