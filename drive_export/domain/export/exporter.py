"""
Spreadsheet Exporter Interface

Contract for turning a document into spreadsheet workbook bytes.
Option parsing (which tables, formatting) belongs entirely to implementations.
"""

from abc import ABC, abstractmethod

from drive_export.domain.documents import Document

from .value_objects import ExportRequest


class ISpreadsheetExporter(ABC):
    """Interface for spreadsheet binary generation."""

    @abstractmethod
    def export(self, document: Document, request: ExportRequest) -> bytes:
        """
        Export a document as spreadsheet workbook bytes.

        Args:
            document: Document to export
            request: The original export request, for export-scoped options

        Returns:
            Workbook content

        Raises:
            ExportError: If the request options cannot be honoured
        """
        pass  # pragma: no cover
