"""
Infrastructure Layer

Concrete adapters for the domain contracts: Google Drive upload,
xlsx generation and document storage.
"""

from .google_drive_repository import GoogleDriveRepository
from .in_memory_document_repository import InMemoryDocumentRepository
from .xlsx_exporter import XlsxSpreadsheetExporter

__all__ = [
    "GoogleDriveRepository",
    "InMemoryDocumentRepository",
    "XlsxSpreadsheetExporter",
]
