"""Command-line orchestration of the export process."""

from model_schema_export.cli.exporter import SchemaExporter, load_root_type

__all__ = ["SchemaExporter", "load_root_type"]
