"""
Documents Domain

Tabular documents and the repository contract used to look them up.
"""

from .entities import Document, Table
from .repositories import IDocumentRepository

__all__ = [
    "Document",
    "Table",
    "IDocumentRepository",
]
