"""
Export Value Objects

Immutable, request-scoped values passed between the export steps.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Query parameter carrying the OAuth access token
CREDENTIAL_PARAM = "access_token"


@dataclass(frozen=True)
class ExportRequest:
    """
    Parameters of a single send-to-drive request.

    The credential is kept out of repr() so the request can be logged safely.
    `options` holds the query parameters of the incoming request, minus the
    access token, so that exporters can read their own options from it.
    """

    document_id: str
    credential: Optional[str] = field(default=None, repr=False)
    user_id: Optional[str] = None
    title: Optional[str] = None
    options: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_query(
        cls,
        document_id: str,
        query: Mapping[str, str],
        user_id: Optional[str] = None,
    ) -> "ExportRequest":
        """
        Build an export request from query parameters.

        Empty strings are treated as absent for access_token and title.

        Args:
            document_id: Identifier of the document to export
            query: Query parameters of the incoming request
            user_id: Requesting user, used for log correlation only

        Returns:
            New ExportRequest instance
        """
        return cls(
            document_id=document_id,
            credential=query.get(CREDENTIAL_PARAM) or None,
            user_id=user_id or None,
            title=query.get("title") or None,
            options={k: v for k, v in query.items() if k != CREDENTIAL_PARAM},
        )

    def has_credential(self) -> bool:
        return bool(self.credential)

    def log_context(self) -> Dict[str, Any]:
        """Correlation fields for log records. Never includes the credential."""
        return {"doc_id": self.document_id, "user_id": self.user_id}


@dataclass(frozen=True)
class PreparedFile:
    """Workbook bytes ready for upload, with the destination name (no extension)."""

    file_name: str
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadResult:
    """Share link of the spreadsheet created on Google Drive."""

    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url}
