"""
API Namespaces - Organized endpoint groups
"""

from flask import current_app, request
from flask_restx import Namespace, Resource

from drive_export.api.v1.models import (
    document_request,
    document_response,
    error_response,
    export_response,
)
from drive_export.application.document_service import DocumentService
from drive_export.application.export_service import ExportService
from drive_export.domain.errors import (
    ConfigurationError,
    ContractViolationError,
    DocumentNotFoundError,
    ErrorCategory,
    ExportError,
    InvalidDocumentError,
    ProviderError,
    create_error_response,
)
from drive_export.domain.export import ExportRequest

# Header carrying the id of the signed-in user, set by the auth proxy
USER_ID_HEADER = "X-User-Id"


def _resolve(service_type):
    """Resolve a service from the app container, or None if services are down."""
    container = getattr(current_app, "container", None)
    if container is None:
        return None
    return container.resolve(service_type)


def _service_unavailable():
    return create_error_response(
        ErrorCategory.SYSTEM_ERROR,
        "Services not initialized",
        status_code=503,
    )


# =============================================================================
# Documents Namespace - Document registration and export
# =============================================================================

docs_ns = Namespace("docs", description="Document operations")


@docs_ns.route("")
class DocumentList(Resource):
    """Document registration"""

    @docs_ns.doc("create_document")
    @docs_ns.expect(document_request)
    @docs_ns.response(201, "Created", document_response)
    @docs_ns.response(400, "Bad Request", error_response)
    def post(self):
        """
        Register a tabular document

        Stores the document so it can later be sent to Google Drive.
        """
        document_service = _resolve(DocumentService)
        if document_service is None:
            return _service_unavailable()

        try:
            document = document_service.create_document(request.get_json(silent=True))
            return document.to_summary(), 201

        except InvalidDocumentError as e:
            return create_error_response(
                ErrorCategory.INVALID_DOCUMENT,
                str(e),
                status_code=400
            )


@docs_ns.route("/<string:doc_id>")
@docs_ns.param("doc_id", "The document identifier")
class DocumentResource(Resource):
    """Document lookup"""

    @docs_ns.doc("get_document")
    @docs_ns.response(200, "Success", document_response)
    @docs_ns.response(404, "Document Not Found", error_response)
    def get(self, doc_id):
        """Get a document summary"""
        document_service = _resolve(DocumentService)
        if document_service is None:
            return _service_unavailable()

        try:
            return document_service.get_document(doc_id).to_summary(), 200
        except DocumentNotFoundError as e:
            return create_error_response(
                ErrorCategory.DOCUMENT_NOT_FOUND,
                str(e),
                status_code=404
            )


@docs_ns.route("/<string:doc_id>/send-to-drive")
@docs_ns.param("doc_id", "The document identifier")
class SendToDrive(Resource):
    """Send a document to Google Drive"""

    @docs_ns.doc(
        "send_to_drive",
        params={
            "access_token": "Google OAuth access token (required)",
            "title": "Name of the spreadsheet to create (defaults to the document name)",
            "table": "Export only this table",
        },
    )
    @docs_ns.response(200, "Success", export_response)
    @docs_ns.response(400, "Bad Request", error_response)
    @docs_ns.response(404, "Document Not Found", error_response)
    @docs_ns.response(502, "Google Drive Error", error_response)
    def get(self, doc_id):
        """
        Export a document to Google Drive

        The document is exported as an Excel workbook and uploaded to the
        user's Google Drive, where it is converted to a Google Spreadsheet.
        Returns the spreadsheet's share link.
        """
        document_service = _resolve(DocumentService)
        export_service = _resolve(ExportService)
        if document_service is None or export_service is None:
            return _service_unavailable()

        export_request = ExportRequest.from_query(
            doc_id,
            request.args.to_dict(),
            user_id=request.headers.get(USER_ID_HEADER),
        )

        try:
            document = document_service.get_document(doc_id)
            result = export_service.handle_export_request(document, export_request)
            return result.to_dict(), 200

        except ConfigurationError as e:
            return create_error_response(
                ErrorCategory.MISSING_CREDENTIAL,
                str(e),
                status_code=400
            )
        except DocumentNotFoundError as e:
            return create_error_response(
                ErrorCategory.DOCUMENT_NOT_FOUND,
                str(e),
                status_code=404
            )
        except ExportError as e:
            return create_error_response(
                ErrorCategory.EXPORT_FAILED,
                str(e),
                status_code=400
            )
        except ProviderError as e:
            return create_error_response(
                ErrorCategory.PROVIDER_ERROR,
                str(e),
                status_code=502
            )
        except ContractViolationError as e:
            return create_error_response(
                ErrorCategory.INVALID_PROVIDER_RESPONSE,
                str(e),
                status_code=502
            )
        except Exception as e:
            current_app.logger.exception(f"Unexpected error sending {doc_id} to Google Drive: {str(e)}")
            return create_error_response(
                ErrorCategory.SYSTEM_ERROR,
                f"Unexpected error: {str(e)}",
                status_code=500
            )
