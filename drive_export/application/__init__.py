"""
Application Services Layer

Orchestrates domain contracts and coordinates use cases.
"""

from .dependency_container import DependencyContainer, DependencyNotFoundError
from .document_service import DocumentService
from .export_service import ExportService

__all__ = [
    'DependencyContainer',
    'DependencyNotFoundError',
    'DocumentService',
    'ExportService',
]
