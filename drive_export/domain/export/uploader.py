"""
Spreadsheet Uploader Interface

Contract for uploading workbook bytes to a file-hosting provider and having
the provider convert them into its native spreadsheet format.
"""

from abc import ABC, abstractmethod


class ISpreadsheetUploader(ABC):
    """
    Interface for upload-and-convert providers.

    Contract Guarantees:
    - Exactly one provider request per call; no retry, no chunking
    - The content is sent in full and unmodified
    - Provider failures are raised as the provider's own exception
    - A successful call always returns a non-empty share link
    """

    @abstractmethod
    def upload_and_convert(self, file_name: str, content: bytes, credential: str) -> str:
        """
        Upload workbook bytes and convert them to a native spreadsheet.

        Args:
            file_name: Name of the spreadsheet to create (no extension)
            content: Workbook bytes
            credential: OAuth access token of the requesting user

        Returns:
            Share link of the created spreadsheet

        Raises:
            ContractViolationError: If the provider response has no share link
        """
        pass  # pragma: no cover

    def is_available(self) -> bool:
        """Check whether the provider client can be used."""
        return True
