"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
Application exceptions bridge them to user-facing API responses.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    MISSING_CREDENTIAL = "missing_credential"
    DOCUMENT_NOT_FOUND = "document_not_found"
    INVALID_DOCUMENT = "invalid_document"
    EXPORT_FAILED = "export_failed"
    PROVIDER_ERROR = "provider_error"
    INVALID_PROVIDER_RESPONSE = "invalid_provider_response"
    SYSTEM_ERROR = "system_error"


# User-friendly error messages with actionable guidance
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, str]] = {
    ErrorCategory.MISSING_CREDENTIAL: {
        "title": "Missing Access Token",
        "message": "No access token - Can't send file to Google Drive.",
        "action": "Sign in with Google and retry with an access_token.",
    },
    ErrorCategory.DOCUMENT_NOT_FOUND: {
        "title": "Document Not Found",
        "message": "The requested document could not be found.",
        "action": "Check the document id and try again.",
    },
    ErrorCategory.INVALID_DOCUMENT: {
        "title": "Invalid Document",
        "message": "The document payload is missing required information or is malformed.",
        "action": "Provide a name and a list of tables with headers and rows.",
    },
    ErrorCategory.EXPORT_FAILED: {
        "title": "Export Failed",
        "message": "The document could not be converted to a spreadsheet.",
        "action": "Check the export options and try again.",
    },
    ErrorCategory.PROVIDER_ERROR: {
        "title": "Google Drive Error",
        "message": "Google Drive rejected the upload.",
        "action": "Check your Google account permissions and quota, then try again.",
    },
    ErrorCategory.INVALID_PROVIDER_RESPONSE: {
        "title": "Invalid Google Drive Response",
        "message": "Google Drive did not return a link to the created spreadsheet.",
        "action": "Please try again later.",
    },
    ErrorCategory.SYSTEM_ERROR: {
        "title": "System Error",
        "message": "An unexpected error occurred while processing your request.",
        "action": "Please try again later. If the problem persists, contact support.",
    },
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions are pure and have no external dependencies.
    They can optionally wrap original errors for context.
    """

    def __init__(self, message: str, original_error: Exception = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.original_error = original_error


class ConfigurationError(DomainError):
    """
    Raised when the caller did not supply an access token.

    Raised before any export or network work starts.
    """
    pass


class DocumentNotFoundError(DomainError):
    """Raised when a document id is unknown to the document store."""
    pass


class InvalidDocumentError(DomainError):
    """Raised when a document payload cannot be turned into a Document."""
    pass


class ExportError(DomainError):
    """Raised by spreadsheet exporters when export options cannot be honoured."""
    pass


class ProviderError(DomainError):
    """
    Raised when Google Drive rejects an upload with a readable message.

    The message is the first message reported by the provider.
    """
    pass


class ContractViolationError(DomainError):
    """
    Raised when Google Drive answers successfully without a share link.
    """
    pass


# ============================================================================
# Application Layer Exceptions
# ============================================================================

class ApplicationError(Exception):
    """
    Base application error with category and user-friendly messaging.

    Bridges domain errors with user-facing error messages and HTTP responses.
    """

    def __init__(
        self,
        category: ErrorCategory,
        technical_message: Optional[str] = None,
    ):
        """
        Initialize application error.

        Args:
            category: Error category
            technical_message: Technical error details for logging
        """
        self.category = category
        self.technical_message = technical_message or ""

        error_info = ERROR_MESSAGES.get(
            category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]
        )
        self.title = error_info["title"]
        self.message = error_info["message"]
        self.action = error_info["action"]

        # Provider messages are surfaced as they are
        if category == ErrorCategory.PROVIDER_ERROR and self.technical_message:
            self.message = self.technical_message

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for API response.

        Returns:
            Dictionary with error information
        """
        return {
            "error": self.category.value,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }


def create_error_response(
    category: ErrorCategory,
    technical_message: Optional[str] = None,
    status_code: int = 400,
) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        category: Error category
        technical_message: Technical error details for logging
        status_code: HTTP status code

    Returns:
        Tuple of (error_dict, status_code)
    """
    error = ApplicationError(category, technical_message)
    return error.to_dict(), status_code
