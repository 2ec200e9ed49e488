"""
Shared pytest fixtures and configuration for the SheetDrive test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Mock collaborators for the export workflow
- Path-based test markers
"""

import pytest
from unittest.mock import Mock

from hypothesis import settings, HealthCheck

from drive_export.domain.export import ISpreadsheetExporter, ISpreadsheetUploader

from tests.fixtures import XLSX_MAGIC, create_document

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


SHARE_LINK = "https://drive.example/view?id=42"
WORKBOOK_BYTES = XLSX_MAGIC + b"workbook-content"


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def sample_document():
    """Provide a document named 'Sheet1' with one table."""
    return create_document(name="Sheet1")


@pytest.fixture
def workbook_bytes() -> bytes:
    """Provide fake workbook bytes starting with the zip magic number."""
    return WORKBOOK_BYTES


@pytest.fixture
def share_link() -> str:
    """Provide the share link returned by the mocked provider."""
    return SHARE_LINK


# =============================================================================
# Mock Collaborator Fixtures
# =============================================================================

@pytest.fixture
def mock_exporter():
    """
    Provide a mock spreadsheet exporter.

    Returns fixed workbook bytes for every document.
    """
    mock = Mock(spec=ISpreadsheetExporter)
    mock.export.return_value = WORKBOOK_BYTES
    return mock


@pytest.fixture
def mock_uploader():
    """
    Provide a mock uploader.

    Echoes back a fixed share link.
    """
    mock = Mock(spec=ISpreadsheetUploader)
    mock.upload_and_convert.return_value = SHARE_LINK
    mock.is_available.return_value = True
    return mock


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (full application wiring)"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
