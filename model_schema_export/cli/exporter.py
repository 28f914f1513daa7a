"""Main class that orchestrates the schema export process."""

from __future__ import annotations

import importlib
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from model_schema_export.core.config import config
from model_schema_export.core.exceptions import (
    ConfigurationError,
    SchemaError,
    SchemaExportError,
    ValidationError,
)
from model_schema_export.core.schemas import SheetSpec
from model_schema_export.document.assembler import assemble
from model_schema_export.extraction.classifier import TypeClassifier
from model_schema_export.extraction.enrichers import (
    enum_values_enricher,
    key_fields_enricher,
)
from model_schema_export.extraction.extractor import SchemaExtractor
from model_schema_export.extraction.interfaces import IMetadataProvider, IRowEnricher
from model_schema_export.extraction.metadata import ReflectionMetadataProvider
from model_schema_export.io.output_manager import OutputManager
from model_schema_export.io.workbook_renderer import WorkbookRenderer
from model_schema_export.logger import logger, setup_logger
from model_schema_export.validation.sheet_validator import SheetValidator


def load_root_type(import_string: str) -> type:
    """Import a root type from ``"package.module:ClassName"``.

    ``"package.module.ClassName"`` is accepted as well.

    Raises:
        ConfigurationError: If the module or attribute cannot be found
    """
    module_name, sep, attr_path = import_string.partition(":")
    if not sep:
        module_name, _, attr_path = import_string.rpartition(".")
    if not module_name or not attr_path:
        raise ConfigurationError(
            "ROOT_TYPES", f"Invalid root type import string '{import_string}'"
        )

    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(
            "ROOT_TYPES", f"Cannot import root type '{import_string}': {e}"
        ) from e
    return target


def default_enrichers() -> list[IRowEnricher]:
    """Row enrichers enabled in configuration."""
    enrichers: list[IRowEnricher] = []
    if config.key_fields:
        enrichers.append(key_fields_enricher(config.key_fields))
    if config.enrich_enum_values:
        enrichers.append(enum_values_enricher)
    return enrichers


class SchemaExporter:
    """Main class that orchestrates the schema export process.

    For each root type this class extracts the reachable model types,
    assembles and validates the sheets, renders them and writes one workbook.
    All traversal state is created per export, so exports never share visited
    types or sheet numbering.
    """

    def __init__(
        self,
        scope_prefix: str = config.scope_prefix,
        output_path: Path = config.output_dir,
        provider: IMetadataProvider | None = None,
        enrichers: Sequence[IRowEnricher] | None = None,
    ) -> None:
        """Initialize the schema exporter.

        Args:
            scope_prefix: Module prefix of in-scope model types
            output_path: Directory for generated workbooks
            provider: Source of field metadata, defaults to reflection
            enrichers: Row enrichers, defaults to those enabled in configuration
        """
        self.scope_prefix = scope_prefix
        self.output_path = output_path
        self.provider = (
            provider if provider is not None else ReflectionMetadataProvider()
        )
        if enrichers is None:
            enrichers = default_enrichers()
        self.enrichers = list(enrichers)
        self.output_manager = OutputManager(output_path)
        self.renderer = WorkbookRenderer(config.sheet)
        self.validator = SheetValidator(config.sheet.reference_label)

    def run(self) -> None:
        """Run the export for the root types named in configuration.

        Raises:
            SystemExit: If any critical error occurs during export
        """
        try:
            setup_logger()
            logger.info("Exporting model schema workbooks...")
            roots = [load_root_type(name) for name in config.root_types]
            if not roots:
                raise ConfigurationError("ROOT_TYPES")
            written = self.export_all(roots)
            logger.info(
                "Export completed successfully! Generated %d file(s).", len(written)
            )
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(config.exit_codes.error_configuration)
        except ValidationError as e:
            logger.error("Sheet validation error: %s", e)
            sys.exit(config.exit_codes.error_validation_failed)
        except SchemaError as e:
            logger.error("Schema error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_invalid_schema)
        except SchemaExportError as e:
            logger.error("Schema export error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_invalid_schema)
        except OSError as e:
            logger.error("Failed to write workbook: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_file_system)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(config.exit_codes.error_file_system)

    def run_for_testing(self, roots: Iterable[type] | None = None) -> list[Path]:
        """Run the export without converting errors to exit codes.

        Args:
            roots: Root types to export, defaults to those in configuration

        Returns:
            List of paths where workbooks were written

        Raises:
            SchemaExportError: If any critical error occurs during export
            OSError: If a workbook cannot be written
        """
        if roots is None:
            roots = [load_root_type(name) for name in config.root_types]
        return self.export_all(roots)

    def export_all(self, roots: Iterable[type]) -> list[Path]:
        """Export one workbook per root type.

        Every root is built, validated and rendered before the first workbook
        is written, and the workbooks are written all together or not at all.

        Returns:
            List of paths where workbooks were written

        Raises:
            ConfigurationError: If two roots share the same model name
        """
        sheet_sets = [self.build_sheets(root) for root in roots]

        counts = Counter(sheets[0].model_name for sheets in sheet_sets)
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            raise ConfigurationError(
                "ROOT_TYPES",
                f"Root types share the workbook name(s): {', '.join(duplicates)}",
            )

        workbooks = [
            (self.renderer.render(sheets), sheets[0].model_name)
            for sheets in sheet_sets
        ]
        self.output_manager.create_output_structure()
        paths = self.output_manager.write_workbooks(workbooks)
        for (_, model_name), path in zip(workbooks, paths):
            logger.info("Workbook for %s written to: %s", model_name, path)
        return paths

    def export(self, root: type) -> Path:
        """Export the workbook for a single root type.

        Returns:
            Path where the workbook was written
        """
        return self.write_sheets(self.build_sheets(root))

    def write_sheets(self, sheets: list[SheetSpec]) -> Path:
        """Render validated sheets and write them as one workbook."""
        workbook = self.renderer.render(sheets)
        output_path = self.output_manager.write_workbook(workbook, sheets[0].model_name)
        logger.info("Workbook for %s written to: %s", sheets[0].model_name, output_path)
        return output_path

    def build_sheets(self, root: type) -> list[SheetSpec]:
        """Extract, assemble and validate the sheets for ``root``.

        Raises:
            ConfigurationError: If the scope prefix or root type is unusable
            SchemaError: If a field type cannot be classified
            ValidationError: If the sheets are not internally consistent
        """
        classifier = TypeClassifier(self.scope_prefix, config.type_labels)
        extractor = SchemaExtractor(
            classifier,
            self.provider,
            self.enrichers,
            reference_label=config.sheet.reference_label,
        )
        extracted = extractor.extract(root)
        sheets = assemble(extracted, config.sheet.title_prefix)

        validation_result = self.validator.validate_sheets(sheets)
        for warning in validation_result.warnings:
            logger.warning("%s", warning)
        if not validation_result.is_valid:
            raise ValidationError(validation_result.errors)

        return sheets
