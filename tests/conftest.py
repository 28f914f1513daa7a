"""Shared test fixtures and configuration."""

import shutil
import tempfile
from pathlib import Path

import pytest
import sample_models

from model_schema_export.core.schemas import SchemaRow, SheetSpec
from model_schema_export.document.assembler import assemble
from model_schema_export.extraction.classifier import TypeClassifier
from model_schema_export.extraction.extractor import SchemaExtractor

SCOPE_PREFIX = sample_models.__name__


@pytest.fixture
def scope_prefix():
    """Module prefix under which the sample models are in scope."""
    return SCOPE_PREFIX


@pytest.fixture
def classifier(scope_prefix):
    """Classifier treating the sample models as in scope."""
    return TypeClassifier(scope_prefix)


@pytest.fixture
def extractor(classifier):
    """Extractor using the default reflection metadata provider."""
    return SchemaExtractor(classifier)


@pytest.fixture
def order_sheets(extractor):
    """Assembled sheets for the Order -> Customer example."""
    return assemble(extractor.extract(sample_models.Order))


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


class SheetTestHelper:
    """Helper class for creating test sheets."""

    @staticmethod
    def create_sheet(title: str, model_name: str, *rows: SchemaRow) -> SheetSpec:
        return SheetSpec(sheet_title=title, model_name=model_name, rows=list(rows))

    @staticmethod
    def reference_row(field_name: str, linked: str) -> SchemaRow:
        return SchemaRow(
            field_name=field_name,
            type_category="Reference",
            linked_type_name=linked,
        )

    @staticmethod
    def text_row(field_name: str, description: str = "") -> SchemaRow:
        return SchemaRow(
            field_name=field_name, description=description, type_category="Text"
        )


@pytest.fixture
def sheet_helper():
    """Provide sheet helper for tests."""
    return SheetTestHelper()
