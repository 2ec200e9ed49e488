"""
Unit tests for DependencyContainer
"""

import pytest

from drive_export.application.dependency_container import (
    DependencyContainer,
    DependencyNotFoundError,
)
from drive_export.domain.export import ISpreadsheetExporter
from drive_export.infrastructure.xlsx_exporter import XlsxSpreadsheetExporter


@pytest.fixture
def container():
    return DependencyContainer()


def test_resolves_registered_instance(container):
    exporter = XlsxSpreadsheetExporter()
    container.register_singleton(ISpreadsheetExporter, exporter)

    assert container.is_registered(ISpreadsheetExporter)
    assert container.resolve(ISpreadsheetExporter) is exporter
    assert container.resolve(ISpreadsheetExporter) is exporter


def test_later_registration_replaces_earlier(container):
    first, second = XlsxSpreadsheetExporter(), XlsxSpreadsheetExporter()
    container.register_singleton(ISpreadsheetExporter, first)
    container.register_singleton(ISpreadsheetExporter, second)

    assert container.resolve(ISpreadsheetExporter) is second


def test_unregistered_type_raises(container):
    assert not container.is_registered(ISpreadsheetExporter)

    with pytest.raises(DependencyNotFoundError, match="ISpreadsheetExporter"):
        container.resolve(ISpreadsheetExporter)
