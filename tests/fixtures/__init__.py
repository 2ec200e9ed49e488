"""
Test fixtures package.

Provides factory functions for domain objects used across the test suite.
"""

from .domain_fixtures import (
    XLSX_MAGIC,
    create_document,
    create_document_payload,
    create_export_request,
    create_table,
)

__all__ = [
    "XLSX_MAGIC",
    "create_document",
    "create_document_payload",
    "create_export_request",
    "create_table",
]
