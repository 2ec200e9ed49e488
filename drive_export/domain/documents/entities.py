"""
Document Entities

Domain entities for the tabular documents that can be exported.
"""

import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from drive_export.domain.errors import InvalidDocumentError


@dataclass
class Table:
    """A named table with a header row and data rows."""

    name: str
    headers: List[str]
    rows: List[List[Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        """
        Build a table from its JSON representation.

        Raises:
            InvalidDocumentError: If the name is missing or rows are not lists
        """
        if not isinstance(data, dict):
            raise InvalidDocumentError("Table must be an object")

        name = str(data.get("name") or "").strip()
        if not name:
            raise InvalidDocumentError("Table name cannot be empty")

        headers = data.get("headers") or []
        rows = data.get("rows") or []
        if not isinstance(headers, list):
            raise InvalidDocumentError(f"Headers of table '{name}' must be a list")
        if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
            raise InvalidDocumentError(f"Rows of table '{name}' must be a list of lists")

        return cls(name=name, headers=[str(h) for h in headers], rows=rows)


@dataclass
class Document:
    """
    Entity representing a tabular document.

    A document has a display name, which is the default file name used when
    it is sent to Google Drive, and an ordered list of tables.
    """

    doc_id: str
    name: str
    tables: List[Table] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, tables: Optional[List[Table]] = None) -> "Document":
        """
        Factory method to create a new document with a generated id.

        Args:
            name: Document name
            tables: Tables of the document

        Returns:
            New Document instance

        Raises:
            InvalidDocumentError: If the name is empty
        """
        if not name or not name.strip():
            raise InvalidDocumentError("Document name cannot be empty")
        return cls(doc_id=cls._generate_id(), name=name.strip(), tables=list(tables or []))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """
        Build a new document from its JSON representation.

        Args:
            data: Mapping with 'name' and 'tables'

        Returns:
            New Document instance
        """
        if not isinstance(data, dict):
            raise InvalidDocumentError("Document must be an object")
        tables = data.get("tables") or []
        if not isinstance(tables, list):
            raise InvalidDocumentError("Tables must be a list")
        return cls.create(str(data.get("name") or ""), [Table.from_dict(t) for t in tables])

    @staticmethod
    def _generate_id(length: int = 16) -> str:
        return secrets.token_urlsafe(length)

    def get_table(self, name: str) -> Optional[Table]:
        """
        Look up a table by name.

        Returns:
            The table, or None if the document has no table with that name
        """
        return next((t for t in self.tables if t.name == name), None)

    def to_summary(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "doc_id": self.doc_id,
            "name": self.name,
            "tables": [t.name for t in self.tables],
        }
