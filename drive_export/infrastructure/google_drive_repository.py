"""
Google Drive Repository Implementation

Concrete implementation of ISpreadsheetUploader for Google Drive.
Uploads workbook bytes with google-api-python-client and asks Drive to
convert them into a Google Spreadsheet in the same request.
"""

import logging
from io import BytesIO
from typing import Any, Callable, Optional

from googleapiclient.discovery_cache import get_static_doc
from googleapiclient.http import MediaIoBaseUpload

from drive_export.config.drive_config import DriveConfig, build_drive_service
from drive_export.domain.errors import ContractViolationError
from drive_export.domain.export.uploader import ISpreadsheetUploader

logger = logging.getLogger(__name__)


class GoogleDriveRepository(ISpreadsheetUploader):
    """
    Google Drive implementation of ISpreadsheetUploader.

    Each call builds a Drive client for the caller's access token and
    issues a single, non-resumable files.create request.

    Attributes:
        config: Drive API configuration
    """

    def __init__(
        self,
        config: Optional[DriveConfig] = None,
        service_factory: Optional[Callable[[str, DriveConfig], Any]] = None,
    ):
        """
        Initialize the Drive repository.

        Args:
            config: Drive configuration, uses default if None
            service_factory: Callable building a Drive client from an access
                token and config, defaults to build_drive_service
        """
        self.config = config or DriveConfig()
        self._service_factory = service_factory or build_drive_service

    def is_available(self) -> bool:
        """
        Check that a Drive client can be built for the configured API version.

        Clients are built from the discovery documents bundled with
        google-api-python-client, so an unknown version cannot be served.
        """
        return get_static_doc("drive", self.config.api_version) is not None

    def upload_and_convert(self, file_name: str, content: bytes, credential: str) -> str:
        """
        Create a Google Spreadsheet from workbook bytes.

        Args:
            file_name: Name of the spreadsheet to create
            content: Workbook bytes, sent unmodified
            credential: OAuth access token of the requesting user

        Returns:
            webViewLink of the created spreadsheet

        Raises:
            googleapiclient.errors.HttpError: If Drive rejects the request
            ContractViolationError: If Drive does not return a webViewLink
        """
        drive = self._service_factory(credential, self.config)

        # What to create: a native spreadsheet with the given name
        body = {
            "name": file_name,
            "mimeType": self.config.target_mime_type,
        }
        # What gets sent: the workbook, streamed from memory
        media = MediaIoBaseUpload(
            BytesIO(content),
            mimetype=self.config.source_mime_type,
            resumable=False,
        )

        logger.debug(f"Uploading {len(content)} bytes to Google Drive as '{file_name}'")
        response = drive.files().create(
            body=body,
            media_body=media,
            fields=self.config.response_fields,
        ).execute()

        url = (response or {}).get("webViewLink")
        if not url:
            raise ContractViolationError(
                "Invalid response from Google Drive API: no webViewLink returned"
            )
        return url
