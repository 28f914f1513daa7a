"""Core data models and shared types."""

from model_schema_export.core.config import config
from model_schema_export.core.exceptions import (
    ConfigurationError,
    SchemaError,
    SchemaExportError,
    ValidationError,
)
from model_schema_export.core.schemas import (
    ExtractedType,
    FieldDescriptor,
    SchemaRow,
    SheetSpec,
    ValidationResult,
)

__all__ = [
    "ExtractedType",
    "FieldDescriptor",
    "SchemaRow",
    "SheetSpec",
    "ValidationResult",
    "SchemaExportError",
    "ConfigurationError",
    "SchemaError",
    "ValidationError",
    "config",
]
