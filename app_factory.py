"""
Application Factory

Creates and configures Flask application with all dependencies.
This factory pattern improves testability by allowing dependency injection
and configuration overrides.
"""

import logging
import os
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from drive_export.application.dependency_container import DependencyContainer
from drive_export.application.document_service import DocumentService
from drive_export.application.export_service import ExportService
from drive_export.config.drive_config import DriveConfig
from drive_export.config.logging_config import configure_logging
from drive_export.domain.documents import IDocumentRepository
from drive_export.domain.export import ISpreadsheetExporter, ISpreadsheetUploader
from drive_export.infrastructure.google_drive_repository import GoogleDriveRepository
from drive_export.infrastructure.in_memory_document_repository import InMemoryDocumentRepository
from drive_export.infrastructure.xlsx_exporter import XlsxSpreadsheetExporter

logger = logging.getLogger(__name__)


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins = os.getenv("CORS_ORIGINS", "*")


def create_app(
    config: Optional[AppConfig] = None,
    container: Optional[DependencyContainer] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, uses default if None
        container: Pre-built dependency container, built from defaults if None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    configure_logging(config.log_level)

    app = Flask(__name__)

    CORS(
        app,
        resources={
            r"/*": {
                "origins": config.cors_origins,
                "methods": ["GET", "POST", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization", "X-User-Id"],
                "max_age": 3600,
            }
        },
    )

    if container is None:
        container = build_container()
    app.container = container

    _register_blueprints(app)
    _register_health_endpoint(app)

    return app


def build_container(drive_config: Optional[DriveConfig] = None) -> DependencyContainer:
    """
    Register infrastructure adapters and application services.

    Args:
        drive_config: Drive API configuration, uses default if None

    Returns:
        Populated DependencyContainer
    """
    container = DependencyContainer()

    # Infrastructure adapters
    document_repository = InMemoryDocumentRepository()
    exporter = XlsxSpreadsheetExporter()
    uploader = GoogleDriveRepository(drive_config)

    container.register_singleton(IDocumentRepository, document_repository)
    container.register_singleton(ISpreadsheetExporter, exporter)
    container.register_singleton(ISpreadsheetUploader, uploader)

    # Application services
    container.register_singleton(DocumentService, DocumentService(document_repository))
    container.register_singleton(ExportService, ExportService(exporter, uploader))

    logger.info("Application services initialized with DependencyContainer")
    return container


def _register_blueprints(app: Flask) -> None:
    """
    Register API blueprints.

    Args:
        app: Flask application
    """
    from drive_export.api.v1 import api_v1_bp

    app.register_blueprint(api_v1_bp)


def _register_health_endpoint(app: Flask) -> None:
    """
    Register health check endpoint.

    Args:
        app: Flask application
    """

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        uploader = app.container.resolve(ISpreadsheetUploader)
        return jsonify({
            "status": "healthy",
            "drive_configured": uploader.is_available(),
        }), 200
