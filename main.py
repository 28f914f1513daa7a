"""
Model Schema Export

Entry point for the schema export script.
"""

from model_schema_export import SchemaExporter


def main() -> None:
    """
    Entry point for the schema export script.

    Creates SchemaExporter instance and exports the configured root types.
    """
    exporter = SchemaExporter()
    exporter.run()


if __name__ == "__main__":
    main()
