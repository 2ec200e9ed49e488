"""
Export Service

Application service that sends a document to Google Drive.
The document is first exported as a workbook and then pushed to Drive,
which converts it into a Google Spreadsheet and returns a share link.
"""

import json
import logging
from typing import Any, List, Optional

from drive_export.domain.documents import Document
from drive_export.domain.errors import ConfigurationError, ProviderError
from drive_export.domain.export import (
    ExportRequest,
    ISpreadsheetExporter,
    ISpreadsheetUploader,
    PreparedFile,
    UploadResult,
)

logger = logging.getLogger(__name__)


def extract_provider_message(error: Exception) -> Optional[str]:
    """
    Get the first human-readable message of a provider error.

    Reads the structured detail list of googleapiclient's HttpError
    (`error_details`, or the `errors` list of its JSON body) or a generic
    `errors` attribute. Only the first entry is looked at.

    Args:
        error: Exception raised by the uploader

    Returns:
        The first message, or None if the error carries no message list
    """
    candidates = [
        getattr(error, "error_details", None),
        getattr(error, "errors", None),
        _body_errors(getattr(error, "content", None)),
    ]
    for details in candidates:
        if not isinstance(details, list) or not details:
            continue
        first = details[0]
        if isinstance(first, dict):
            message = first.get("message")
        else:
            message = getattr(first, "message", None)
        if message:
            return str(message)
    return None


def _body_errors(content: Any) -> Optional[List[Any]]:
    """The `error.errors` list of a Google API JSON error body, if any."""
    if not isinstance(content, (bytes, str)):
        return None
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if not isinstance(data, dict) or not isinstance(data.get("error"), dict):
        return None
    return data["error"].get("errors")


class ExportService:
    """
    Application service orchestrating the send-to-drive workflow.

    Workflow:
    1. Check that the request carries an access token
    2. Export the document as a workbook (delegated to the exporter)
    3. Upload the workbook and have it converted (delegated to the uploader)
    4. Return the share link

    Every failure is raised to the caller; nothing is retried.
    """

    def __init__(self, exporter: ISpreadsheetExporter, uploader: ISpreadsheetUploader):
        """
        Initialize Export Service with dependencies.

        Args:
            exporter: Produces workbook bytes from a document
            uploader: Uploads workbook bytes and converts them on the provider
        """
        self.exporter = exporter
        self.uploader = uploader

    def handle_export_request(self, document: Document, request: ExportRequest) -> UploadResult:
        """
        Send a document to Google Drive as a Google Spreadsheet.

        Args:
            document: Document to send
            request: Export request carrying the access token

        Returns:
            UploadResult with the spreadsheet's share link

        Raises:
            ConfigurationError: If the request has no access token
            ProviderError: If Drive rejected the upload with a message
            ContractViolationError: If Drive returned no share link
        """
        # Token should come from the client's Google sign-in
        if not request.has_credential():
            raise ConfigurationError("No access token - Can't send file to Google Drive")

        meta = request.log_context()
        logger.debug("Export to drive - Preparing file for export", extra=meta)
        prepared = self.prepare_file(document, request)

        try:
            url = self.uploader.upload_and_convert(
                prepared.file_name, prepared.content, request.credential
            )
        except Exception as e:
            logger.error(
                f"Export to drive - Error while sending file to Google Drive: {e}",
                extra=meta,
            )
            message = extract_provider_message(e)
            if message:
                raise ProviderError(message, original_error=e) from e
            raise

        logger.debug(
            f"Export to drive - File exported, redirecting to Google Spreadsheet {url}",
            extra=meta,
        )
        return UploadResult(url=url)

    def prepare_file(self, document: Document, request: ExportRequest) -> PreparedFile:
        """
        Export the document and pick the destination file name.

        The name is the request's title when given, else the document name.
        """
        content = self.exporter.export(document, request)
        name = request.title or document.name
        return PreparedFile(file_name=name, content=content)
