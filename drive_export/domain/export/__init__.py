"""
Export Domain

Value objects and collaborator contracts for sending documents to Google Drive.
"""

from .exporter import ISpreadsheetExporter
from .uploader import ISpreadsheetUploader
from .value_objects import ExportRequest, PreparedFile, UploadResult

__all__ = [
    "ExportRequest",
    "PreparedFile",
    "UploadResult",
    "ISpreadsheetExporter",
    "ISpreadsheetUploader",
]
