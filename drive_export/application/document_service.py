"""
Document Service

Application service for registering and looking up documents.
"""

import logging
from typing import Any, Dict

from drive_export.domain.documents import Document, IDocumentRepository
from drive_export.domain.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)


class DocumentService:
    """Document lifecycle operations used by the API layer."""

    def __init__(self, document_repository: IDocumentRepository):
        self.document_repository = document_repository

    def create_document(self, payload: Dict[str, Any]) -> Document:
        """
        Register a document from its JSON representation.

        Raises:
            InvalidDocumentError: If the payload is malformed
        """
        document = Document.from_dict(payload)
        self.document_repository.save(document)
        logger.info(f"Registered document {document.doc_id} '{document.name}'")
        return document

    def get_document(self, doc_id: str) -> Document:
        """
        Look up a document.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        document = self.document_repository.get(doc_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {doc_id} not found")
        return document
