"""File listing and content mixin for GDriveClient."""
import io
from typing import Any, Optional

from googleapiclient.http import MediaIoBaseDownload

from ..utils.constants import (
    DEFAULT_EXPORT_MIME_TYPE,
    DEFAULT_MIME_TYPE,
    DEFAULT_PAGE_SIZE,
    EXPORT_MIME_TYPES,
    GOOGLE_APPS_MIME_PREFIX,
    JSON_MIME_TYPE,
    LIST_FIELDS,
    TEXT_MIME_PREFIX,
)


def is_google_apps_type(mime_type: str) -> bool:
    """Google Docs, Sheets, Slides etc. have no bytes of their own and must be exported."""
    return mime_type.startswith(GOOGLE_APPS_MIME_PREFIX)


def export_mime_type_for(mime_type: str) -> str:
    """Target format for exporting a Google Apps file; unknown subtypes get plain text."""
    return EXPORT_MIME_TYPES.get(mime_type, DEFAULT_EXPORT_MIME_TYPE)


def is_text_mime_type(mime_type: str) -> bool:
    """Whether a payload of this type is returned as text rather than base64."""
    return mime_type.startswith(TEXT_MIME_PREFIX) or mime_type == JSON_MIME_TYPE


class FilesMixin:
    """Mixin providing file listing and download operations."""

    def list_files(self, cursor: Optional[str] = None, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        """List one page of files.

        Args:
            cursor: Page token returned by a previous call, if any.
            limit: Maximum number of files in the page.

        Returns:
            The raw Drive response with 'files' and, when more pages exist,
            'nextPageToken'.
        """
        params: dict[str, Any] = {
            'pageSize': limit,
            'fields': LIST_FIELDS,
        }
        if cursor:
            params['pageToken'] = cursor

        return self.drive_service.files().list(**params).execute()

    def get_mime_type(self, file_id: str) -> str:
        """Get a file's MIME type, defaulting to application/octet-stream."""
        meta = self.drive_service.files().get(fileId=file_id, fields="mimeType").execute()
        return meta.get('mimeType') or DEFAULT_MIME_TYPE

    def export_file(self, file_id: str, mime_type: str) -> bytes:
        """Export a Google Apps file to the given format."""
        request = self.drive_service.files().export_media(fileId=file_id, mimeType=mime_type)
        return self._download(request)

    def download_file(self, file_id: str) -> bytes:
        """Download a regular file's raw bytes."""
        request = self.drive_service.files().get_media(fileId=file_id)
        return self._download(request)

    def read_file_content(self, file_id: str) -> tuple[str, bytes]:
        """Fetch a file's content, exporting Google Apps files.

        Args:
            file_id: The file ID.

        Returns:
            Tuple of (MIME type of the returned bytes, content bytes). For
            exported files the MIME type is the export format.
        """
        mime_type = self.get_mime_type(file_id)

        if is_google_apps_type(mime_type):
            export_mime = export_mime_type_for(mime_type)
            return export_mime, self.export_file(file_id, export_mime)

        return mime_type, self.download_file(file_id)

    def _download(self, request: Any) -> bytes:
        fh = io.BytesIO()
        downloader = MediaIoBaseDownload(fh, request)
        done = False
        while done is False:
            status, done = downloader.next_chunk()
        return fh.getvalue()
