"""Assembly of sheet specifications from extracted types."""

from model_schema_export.document.assembler import assemble

__all__ = ["assemble"]
