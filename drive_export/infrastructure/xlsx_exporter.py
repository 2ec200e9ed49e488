"""
XLSX Spreadsheet Exporter

Concrete implementation of ISpreadsheetExporter built on xlsxwriter.
Writes one worksheet per table with a bold, frozen header row and
column widths estimated from the cell values.
"""

import re
from io import BytesIO
from typing import Any, Dict, List, Optional

import xlsxwriter

from drive_export.domain.documents import Document, Table
from drive_export.domain.errors import ExportError
from drive_export.domain.export.exporter import ISpreadsheetExporter
from drive_export.domain.export.value_objects import ExportRequest

# Excel limits sheet names to 31 characters
MAX_SHEET_NAME_LENGTH = 31

# Characters Excel rejects in sheet names
INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")

MIN_COLUMN_WIDTH = 6.0
MAX_COLUMN_WIDTH = 80.0
COLUMN_PADDING = 2.0

HEADER_HEIGHT_PT = 20
DATA_ROW_HEIGHT_PT = 15


def _len_cell(v: Any) -> int:
    if v is None:
        return 0
    s = str(v)
    if not s:
        return 0
    return max(len(line) for line in s.splitlines())


def _column_widths(table: Table) -> List[float]:
    """Character widths from headers and values, clamped and padded."""
    n_cols = max([len(table.headers)] + [len(r) for r in table.rows])
    maxlens = [0.0] * n_cols
    for c, h in enumerate(table.headers):
        maxlens[c] = float(_len_cell(h))
    for row in table.rows:
        for c, val in enumerate(row):
            maxlens[c] = max(maxlens[c], float(_len_cell(val)))
    return [
        min(max(length + COLUMN_PADDING, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH)
        for length in maxlens
    ]


def _sheet_name(name: str, used: set) -> str:
    """Clean, truncate to Excel's limit and keep names unique within the workbook."""
    cleaned = INVALID_SHEET_CHARS.sub("_", name or "").strip(" '")
    base = cleaned[:MAX_SHEET_NAME_LENGTH].rstrip(" '") or "Sheet"
    # Reserved by Excel
    if base.lower() == "history":
        base += "_"
    candidate = base
    n = 1
    while candidate.lower() in used:
        suffix = f" ({n})"
        candidate = base[: MAX_SHEET_NAME_LENGTH - len(suffix)] + suffix
        n += 1
    used.add(candidate.lower())
    return candidate


class XlsxSpreadsheetExporter(ISpreadsheetExporter):
    """
    Exports documents as .xlsx workbooks.

    Recognised options:
        table: export only the table with this name
    """

    TABLE_OPTION = "table"

    def export(self, document: Document, request: ExportRequest) -> bytes:
        tables = self._select_tables(document, request.options.get(self.TABLE_OPTION))

        mem = BytesIO()
        # Cell values are data: no formula or URL conversion, NaN/Inf written as errors
        wb = xlsxwriter.Workbook(
            mem,
            {
                "in_memory": True,
                "strings_to_formulas": False,
                "strings_to_urls": False,
                "nan_inf_to_errors": True,
            },
        )
        formats: Dict[str, Any] = {
            "header": wb.add_format({"bold": True, "valign": "vcenter", "bottom": 1}),
            "cell": wb.add_format({"align": "left", "valign": "vcenter"}),
        }

        used_names: set = set()
        for table in tables:
            self._write_table(wb, formats, table, _sheet_name(table.name, used_names))

        # A workbook needs at least one sheet
        if not tables:
            wb.add_worksheet(_sheet_name(document.name, used_names))

        wb.close()
        return mem.getvalue()

    def _select_tables(self, document: Document, table_name: Optional[str]) -> List[Table]:
        if not table_name:
            return list(document.tables)
        table = document.get_table(table_name)
        if table is None:
            raise ExportError(f"Table '{table_name}' not found in document '{document.name}'")
        return [table]

    def _write_table(self, wb, formats: Dict[str, Any], table: Table, sheet_name: str) -> None:
        ws = wb.add_worksheet(sheet_name)

        for c, w in enumerate(_column_widths(table)):
            ws.set_column(c, c, w, formats["cell"])

        ws.set_default_row(DATA_ROW_HEIGHT_PT)
        ws.set_row(0, HEADER_HEIGHT_PT)
        for c, h in enumerate(table.headers):
            ws.write(0, c, h, formats["header"])

        # Freeze + Autofilter
        ws.freeze_panes(1, 0)
        if table.headers:
            ws.autofilter(0, 0, 0, len(table.headers) - 1)

        for r, row in enumerate(table.rows, start=1):
            for c, val in enumerate(row):
                if val is None:
                    continue
                if isinstance(val, (dict, list, tuple)):
                    val = str(val)
                ws.write(r, c, val)
