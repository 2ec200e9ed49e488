"""
Document Repositories

Repository interface for document persistence.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import Document


class IDocumentRepository(ABC):
    """Abstract repository interface for document persistence."""

    @abstractmethod
    def save(self, document: Document) -> bool:
        """
        Save a document, replacing any document with the same id.

        Args:
            document: Document to save

        Returns:
            True if successful, False otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, doc_id: str) -> Optional[Document]:
        """
        Retrieve a document by id.

        Args:
            doc_id: Document identifier

        Returns:
            Document if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, doc_id: str) -> bool:
        """
        Delete a document. Deleting an unknown id is not an error.

        Args:
            doc_id: Document identifier

        Returns:
            True if the document was deleted or didn't exist
        """
        pass  # pragma: no cover

    @abstractmethod
    def exists(self, doc_id: str) -> bool:
        """Check whether a document is stored."""
        pass  # pragma: no cover
