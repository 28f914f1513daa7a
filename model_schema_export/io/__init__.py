"""Workbook rendering and file output."""

from model_schema_export.io.output_manager import OutputManager
from model_schema_export.io.workbook_renderer import WorkbookRenderer

__all__ = ["OutputManager", "WorkbookRenderer"]
