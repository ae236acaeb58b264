"""Search operations mixin for GDriveClient."""
from typing import Any

from ..utils.constants import DEFAULT_PAGE_SIZE, SEARCH_FIELDS

# The Drive query language quotes string literals with single quotes and
# defines exactly two escapes inside them. Backslash must be handled first.
_QUERY_ESCAPES = (
    ('\\', '\\\\'),
    ("'", "\\'"),
)


def escape_query_string(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query literal.

    Args:
        value: Untrusted user input.

    Returns:
        The value with backslashes and single quotes escaped.
    """
    for char, replacement in _QUERY_ESCAPES:
        value = value.replace(char, replacement)
    return value


def build_full_text_query(text: str) -> str:
    """Build a Drive full-text query matching the given text."""
    return f"fullText contains '{escape_query_string(text)}'"


class SearchMixin:
    """Mixin providing search-related operations."""

    def search_files(self, query: str, limit: int = DEFAULT_PAGE_SIZE) -> list[dict[str, Any]]:
        """Search file contents with a Drive full-text query.

        Args:
            query: Text to match; escaped before it reaches the query language.
            limit: Maximum number of results to return.

        Returns:
            List of file metadata dictionaries (id, name, mimeType).
        """
        results = self.drive_service.files().list(
            q=build_full_text_query(query),
            pageSize=limit,
            fields=SEARCH_FIELDS
        ).execute()

        return results.get('files', [])
