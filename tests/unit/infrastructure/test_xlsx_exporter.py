"""
Unit tests for XlsxSpreadsheetExporter

Workbooks are read back with openpyxl.
"""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from drive_export.domain.errors import ExportError
from drive_export.infrastructure.xlsx_exporter import (
    XlsxSpreadsheetExporter,
    _column_widths,
    _sheet_name,
)

from tests.fixtures import XLSX_MAGIC, create_document, create_export_request, create_table


@pytest.fixture
def exporter():
    return XlsxSpreadsheetExporter()


def read_workbook(data: bytes):
    return load_workbook(BytesIO(data))


def test_produces_xlsx_bytes(exporter):
    data = exporter.export(create_document(), create_export_request())

    assert data[:4] == XLSX_MAGIC


def test_one_sheet_per_table(exporter):
    document = create_document(tables=[create_table("Expenses"), create_table("Income")])

    wb = read_workbook(exporter.export(document, create_export_request()))

    assert wb.sheetnames == ["Expenses", "Income"]


def test_writes_headers_and_rows(exporter):
    table = create_table("Expenses", ["Item", "Amount"], [["Rent", 1200], ["Food", None]])

    ws = read_workbook(exporter.export(create_document(tables=[table]), create_export_request()))["Expenses"]

    assert [c.value for c in ws[1]] == ["Item", "Amount"]
    assert [c.value for c in ws[2]] == ["Rent", 1200]
    assert ws["A3"].value == "Food"
    assert ws["B3"].value is None
    assert ws["A1"].font.bold
    assert ws.freeze_panes == "A2"


def test_table_option_exports_single_table(exporter):
    document = create_document(tables=[create_table("Expenses"), create_table("Income")])

    wb = read_workbook(exporter.export(document, create_export_request(table="Income")))

    assert wb.sheetnames == ["Income"]


def test_unknown_table_option_raises(exporter):
    with pytest.raises(ExportError, match="Nope"):
        exporter.export(create_document(), create_export_request(table="Nope"))


def test_long_sheet_names_are_truncated_and_unique(exporter):
    long_name = "Quarterly revenue by region and product"
    document = create_document(tables=[create_table(long_name + " A"), create_table(long_name + " B")])

    names = read_workbook(exporter.export(document, create_export_request())).sheetnames

    assert len(names) == 2
    assert len(set(names)) == 2
    assert all(len(n) <= 31 for n in names)


def test_document_without_tables_still_has_a_sheet(exporter):
    wb = read_workbook(exporter.export(create_document(name="Empty", tables=[]), create_export_request()))

    assert wb.sheetnames == ["Empty"]


def test_nested_values_are_written_as_text(exporter):
    table = create_table("Data", ["Tags"], [[["a", "b"]]])

    ws = read_workbook(exporter.export(create_document(tables=[table]), create_export_request()))["Data"]

    assert ws["A2"].value == "['a', 'b']"


def test_column_widths_are_clamped():
    table = create_table("T", ["A", "B", "C"], [["x", "y" * 200, "medium value"]])

    assert _column_widths(table) == [6.0, 80.0, 14.0]


def test_formula_and_url_strings_stay_text(exporter):
    table = create_table("Data", ["Expr", "Link"], [["=1+1", "https://x.example"]])

    ws = read_workbook(exporter.export(create_document(tables=[table]), create_export_request()))["Data"]

    assert ws["A2"].data_type == "s"
    assert ws["A2"].value == "=1+1"
    assert ws["B2"].data_type == "s"
    assert ws["B2"].value == "https://x.example"
    assert ws["B2"].hyperlink is None


def test_nan_and_inf_are_written_as_errors(exporter):
    table = create_table("Data", ["A", "B"], [[float("nan"), float("inf")]])

    ws = read_workbook(exporter.export(create_document(tables=[table]), create_export_request()))["Data"]

    assert ws["A2"].value == "#NUM!"
    assert ws["B2"].value == "#DIV/0!"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Q1/Q2", "Q1_Q2"),
        ("Budget [draft]", "Budget _draft_"),
        ("a:b*c?d\\e", "a_b_c_d_e"),
        ("'quoted'", "quoted"),
        ("''", "Sheet"),
        ("History", "History_"),
    ],
)
def test_sheet_names_are_cleaned(name, expected):
    assert _sheet_name(name, set()) == expected


def test_table_with_invalid_sheet_characters_exports(exporter):
    document = create_document(tables=[create_table("Q1/Q2"), create_table("Q1:Q2")])

    names = read_workbook(exporter.export(document, create_export_request())).sheetnames

    assert names == ["Q1_Q2", "Q1_Q2 (1)"]


def test_document_name_with_invalid_characters_exports(exporter):
    wb = read_workbook(exporter.export(create_document(name="Budget [draft]", tables=[]), create_export_request()))

    assert wb.sheetnames == ["Budget _draft_"]
