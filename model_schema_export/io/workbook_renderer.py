"""Rendering of sheet specifications into an openpyxl workbook."""

from __future__ import annotations

from collections.abc import Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from model_schema_export.core.config import SheetLayoutConfig, config
from model_schema_export.core.schemas import SchemaRow, SheetSpec
from model_schema_export.logger import logger

HEADER_FONT = Font(name="Calibri", bold=True, size=11, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
HEADER_ALIGN = Alignment(horizontal="center", vertical="center", wrap_text=True)
CELL_ALIGN = Alignment(vertical="top", wrap_text=True)

# Field Name, Description, Is Key, Type, Remark, Enum Values, Linked Object, Sync
COLUMN_WIDTHS = [24, 40, 8, 14, 24, 30, 24, 12]

# 1-based worksheet rows
TABLE_HEADER_ROW = 1
TABLE_VALUE_ROW = 2
FIELD_HEADER_ROW = 3
FIRST_FIELD_ROW = 4


class WorkbookRenderer:
    """Lays out each SheetSpec on its own worksheet.

    Every worksheet starts with the table header row, the model name row and
    the field header row, followed by one row per field in order.
    """

    def __init__(self, layout: SheetLayoutConfig = config.sheet) -> None:
        self.layout = layout

    def render(self, sheets: Sequence[SheetSpec]) -> Workbook:
        """Create a workbook with one worksheet per sheet specification."""
        workbook = Workbook()
        # Remove default sheet
        workbook.remove(workbook.active)

        for spec in sheets:
            worksheet = workbook.create_sheet(title=spec.sheet_title)
            self.write_sheet(worksheet, spec)
            logger.info("Model %s written to %s", spec.model_name, spec.sheet_title)

        return workbook

    def write_sheet(self, worksheet: Worksheet, spec: SheetSpec) -> None:
        self._write_header(worksheet, TABLE_HEADER_ROW, self.layout.table_headers)
        worksheet.cell(row=TABLE_VALUE_ROW, column=1, value=spec.model_name)
        self._write_header(worksheet, FIELD_HEADER_ROW, self.layout.field_headers)

        for row_idx, row in enumerate(spec.rows, FIRST_FIELD_ROW):
            for col_idx, value in enumerate(self.row_values(row), 1):
                # Empty values stay blank cells
                cell = worksheet.cell(row=row_idx, column=col_idx, value=value or None)
                cell.alignment = CELL_ALIGN

        for i, width in enumerate(COLUMN_WIDTHS, 1):
            worksheet.column_dimensions[get_column_letter(i)].width = width

        # Freeze header rows
        worksheet.freeze_panes = f"A{FIRST_FIELD_ROW}"

    def row_values(self, row: SchemaRow) -> list[str]:
        """Cell values of a field row, in header order."""
        return [
            row.field_name,
            row.description,
            self.layout.key_marker if row.is_key else self.layout.non_key_marker,
            row.type_category,
            row.remark,
            row.enum_values,
            row.linked_type_name,
            row.sync_type,
        ]

    def _write_header(
        self, worksheet: Worksheet, row: int, headers: list[str]
    ) -> None:
        for col_idx, header in enumerate(headers, 1):
            cell = worksheet.cell(row=row, column=col_idx, value=header)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.alignment = HEADER_ALIGN
