"""Validation of assembled sheets before rendering."""

from model_schema_export.validation.sheet_validator import SheetValidator

__all__ = ["SheetValidator"]
