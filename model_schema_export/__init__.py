"""
Model Schema Export

A Python package for documenting data-model classes as multi-sheet Excel
workbooks: one sheet per model type reachable from a root type, listing each
field with its description, display type and links to nested models.
"""

from model_schema_export.cli.exporter import SchemaExporter

__all__ = ["SchemaExporter"]
