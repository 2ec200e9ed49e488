"""
API v1 - SheetDrive REST API

This module contains the versioned API endpoints with OpenAPI/Swagger documentation.
"""

import os

from flask import Blueprint
from flask_restx import Api

# Get API version from environment
API_VERSION = os.getenv("API_VERSION", "v1")

# Create blueprint for API v1
api_v1_bp = Blueprint("api_v1", __name__, url_prefix=f"/api/{API_VERSION}")

# Initialize Flask-RESTX API with Swagger documentation
api = Api(
    api_v1_bp,
    version="1.0",
    title="SheetDrive API",
    description="Send tabular documents to Google Drive as Google Spreadsheets",
    doc="/docs-ui",  # Swagger UI; /docs is taken by the documents namespace
    contact="SheetDrive Team",
    license="MIT",
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import docs_ns

# Register namespaces
api.add_namespace(docs_ns, path="/docs")
