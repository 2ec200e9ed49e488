"""
In-Memory Document Repository

Process-local implementation of IDocumentRepository.
"""

import logging
import threading
from typing import Dict, Optional

from drive_export.domain.documents import Document, IDocumentRepository

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository(IDocumentRepository):
    """
    Dictionary-backed document store.

    Thread Safety:
        All operations take an internal lock, so the repository can be shared
        by concurrent request handlers.
    """

    def __init__(self):
        self._documents: Dict[str, Document] = {}
        self._lock = threading.Lock()

    def save(self, document: Document) -> bool:
        with self._lock:
            self._documents[document.doc_id] = document
        logger.debug(f"Saved document {document.doc_id} ({len(document.tables)} tables)")
        return True

    def get(self, doc_id: str) -> Optional[Document]:
        with self._lock:
            return self._documents.get(doc_id)

    def delete(self, doc_id: str) -> bool:
        with self._lock:
            self._documents.pop(doc_id, None)
        return True

    def exists(self, doc_id: str) -> bool:
        with self._lock:
            return doc_id in self._documents
