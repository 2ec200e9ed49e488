"""
API Models for request/response validation and Swagger documentation
"""

from flask_restx import fields

from drive_export.api.v1 import api

# =============================================================================
# Request Models
# =============================================================================

table_model = api.model(
    "Table",
    {
        "name": fields.String(required=True, description="Table name", example="Sheet1"),
        "headers": fields.List(
            fields.String, description="Column headers", example=["Item", "Amount"]
        ),
        "rows": fields.List(
            fields.List(fields.Raw),
            description="Data rows, one list of cell values per row",
            example=[["Rent", 1200], ["Food", 450.5]],
        ),
    },
)

document_request = api.model(
    "DocumentRequest",
    {
        "name": fields.String(
            required=True,
            description="Document name, used as the default spreadsheet name",
            example="Budget",
        ),
        "tables": fields.List(fields.Nested(table_model), description="Tables"),
    },
)

# =============================================================================
# Response Models
# =============================================================================

document_response = api.model(
    "DocumentResponse",
    {
        "doc_id": fields.String(description="Document identifier"),
        "name": fields.String(description="Document name"),
        "tables": fields.List(fields.String, description="Table names"),
    },
)

export_response = api.model(
    "ExportResponse",
    {
        "url": fields.String(
            description="Share link of the created Google Spreadsheet",
            example="https://docs.google.com/spreadsheets/d/abc/edit?usp=drivesdk",
        ),
    },
)

error_response = api.model(
    "ErrorResponse",
    {
        "error": fields.String(description="Error category"),
        "title": fields.String(description="Short error title"),
        "message": fields.String(description="User-facing error message"),
        "action": fields.String(description="Suggested action"),
    },
)
