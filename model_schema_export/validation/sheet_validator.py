"""Consistency checks on assembled sheet specifications."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from model_schema_export.core.config import config
from model_schema_export.core.constants import (
    INVALID_SHEET_TITLE_CHARS,
    MAX_SHEET_TITLE_LENGTH,
)
from model_schema_export.core.schemas import SheetSpec, ValidationResult


class SheetValidator:
    """Validates that a set of sheets forms a consistent workbook.

    Errors make the export fail before anything is rendered; warnings are
    reported but do not stop the export.
    """

    def __init__(self, reference_label: str = config.sheet.reference_label) -> None:
        self.reference_label = reference_label

    def validate_sheets(self, sheets: Sequence[SheetSpec]) -> ValidationResult:
        """Validate sheets produced by the document assembler.

        Args:
            sheets: Sheets to validate, in workbook order

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        if not sheets:
            result.add_error("No sheets to render")
            return result

        self._validate_titles(sheets, result)
        self._validate_references(sheets, result)
        self._validate_model_names(sheets, result)
        self._validate_type_categories(sheets, result)
        self._validate_cell_text(sheets, result)

        return result

    def _validate_titles(
        self, sheets: Sequence[SheetSpec], result: ValidationResult
    ) -> None:
        """Check sheet titles are unique and acceptable to spreadsheet software.

        Args:
            sheets: Sheets to validate
            result: Result to append errors to
        """
        counts = Counter(sheet.sheet_title.lower() for sheet in sheets)
        for title, count in counts.items():
            if count > 1:
                result.add_error(f"Duplicate sheet title '{title}' ({count} sheets)")

        for sheet in sheets:
            title = sheet.sheet_title
            if len(title) > MAX_SHEET_TITLE_LENGTH:
                result.add_error(
                    f"Sheet title '{title}' exceeds {MAX_SHEET_TITLE_LENGTH} characters"
                )
            bad_chars = sorted(set(title) & INVALID_SHEET_TITLE_CHARS)
            if bad_chars:
                result.add_error(
                    f"Sheet title '{title}' contains invalid characters: "
                    f"{''.join(bad_chars)}"
                )

    def _validate_references(
        self, sheets: Sequence[SheetSpec], result: ValidationResult
    ) -> None:
        """Check every reference row links to a sheet in the workbook.

        Args:
            sheets: Sheets to validate
            result: Result to append errors to
        """
        model_names = {sheet.model_name for sheet in sheets}
        for sheet in sheets:
            for row in sheet.rows:
                if row.type_category != self.reference_label:
                    continue
                if not row.linked_type_name:
                    result.add_error(
                        f"Reference field '{row.field_name}' on sheet "
                        f"'{sheet.model_name}' has no linked type"
                    )
                elif row.linked_type_name not in model_names:
                    result.add_error(
                        f"Reference field '{row.field_name}' on sheet "
                        f"'{sheet.model_name}' links to unknown model "
                        f"'{row.linked_type_name}'"
                    )

    def _validate_model_names(
        self, sheets: Sequence[SheetSpec], result: ValidationResult
    ) -> None:
        counts = Counter(sheet.model_name for sheet in sheets)
        for name, count in counts.items():
            if count > 1:
                result.add_warning(
                    f"Model name '{name}' is used by {count} sheets, "
                    "links to it are ambiguous"
                )

    def _validate_type_categories(
        self, sheets: Sequence[SheetSpec], result: ValidationResult
    ) -> None:
        for sheet in sheets:
            for row in sheet.rows:
                if not row.type_category:
                    result.add_warning(
                        f"Field '{row.field_name}' on sheet '{sheet.model_name}' "
                        "has no display type"
                    )

    def _validate_cell_text(
        self, sheets: Sequence[SheetSpec], result: ValidationResult
    ) -> None:
        """Check no cell text contains control characters worksheets reject.

        Args:
            sheets: Sheets to validate
            result: Result to append errors to
        """
        for sheet in sheets:
            if ILLEGAL_CHARACTERS_RE.search(sheet.model_name):
                result.add_error(
                    f"Model name '{sheet.model_name}' contains control characters"
                )
            for row in sheet.rows:
                for column, value in row.model_dump().items():
                    if isinstance(value, str) and ILLEGAL_CHARACTERS_RE.search(value):
                        result.add_error(
                            f"Field '{row.field_name}' on sheet "
                            f"'{sheet.model_name}' has control characters in "
                            f"{column}: {value!r}"
                        )
