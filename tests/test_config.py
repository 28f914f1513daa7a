"""Test configuration loading from the environment."""

import os
from pathlib import Path
from unittest.mock import patch

from model_schema_export.core.config import Config


def test_config_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = Config(_env_file=None)

    assert config.scope_prefix == ""
    assert config.root_types == []
    assert config.output_dir == Path("output")
    assert config.enrich_enum_values is False
    assert config.key_fields == []
    assert config.type_labels["str"] == "Text"
    assert config.type_labels["Decimal"] == "Number"
    assert config.sheet.title_prefix == "sheet"
    assert config.sheet.reference_label == "Reference"
    assert config.sheet.field_headers[2] == "Is Key"
    assert config.file_names.workbook_pattern == "{model_name}.xlsx"


def test_config_from_environment():
    env = {
        "SCOPE_PREFIX": "  com.example.models ",
        "ROOT_TYPES": '["com.example.models.order:Order"]',
        "OUTPUT_DIR": "build/schemas",
        "ENRICH_ENUM_VALUES": "true",
        "KEY_FIELDS": '["id"]',
        "SHEET__TITLE_PREFIX": "page",
        "EXIT_CODES__ERROR_CONFIGURATION": "9",
    }
    with patch.dict(os.environ, env, clear=True):
        config = Config(_env_file=None)

    assert config.scope_prefix == "com.example.models"
    assert config.root_types == ["com.example.models.order:Order"]
    assert config.output_dir == Path("build/schemas")
    assert config.enrich_enum_values is True
    assert config.key_fields == ["id"]
    assert config.sheet.title_prefix == "page"
    assert config.sheet.reference_label == "Reference"
    assert config.exit_codes.error_configuration == 9
