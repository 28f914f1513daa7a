"""Configuration for the model schema exporter."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constants


class SheetLayoutConfig(BaseModel):
    """Configuration for sheet titles and header rows."""

    title_prefix: str = constants.SHEET_TITLE_PREFIX
    reference_label: str = constants.REFERENCE_LABEL
    key_marker: str = "Y"
    non_key_marker: str = "N"
    table_headers: list[str] = Field(
        default_factory=lambda: list(constants.TABLE_HEADERS)
    )
    field_headers: list[str] = Field(
        default_factory=lambda: list(constants.FIELD_HEADERS)
    )


class FileNamesConfig(BaseModel):
    """Configuration for file names."""

    workbook_pattern: str = "{model_name}.xlsx"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_configuration: int = 1
    error_invalid_schema: int = 2
    error_validation_failed: int = 4
    error_file_system: int = 5


class Config(BaseSettings):
    """Main configuration class for the model schema exporter."""

    # Module prefix of the types that are exported as their own sheet
    scope_prefix: str = Field(
        default="", description="Module prefix of in-scope model types"
    )

    # Import strings ("package.module:ClassName") of the root types to export
    root_types: list[str] = Field(
        default_factory=list, description="Root types exported by the CLI"
    )

    output_dir: Path = Field(
        default=Path("output"), description="Path for generated workbooks"
    )

    enrich_enum_values: bool = Field(
        default=False, description="Fill the enum values column for enum fields"
    )

    key_fields: list[str] = Field(
        default_factory=list, description="Field names marked as key fields"
    )

    type_labels: dict[str, str] = Field(
        default_factory=lambda: dict(constants.DEFAULT_TYPE_LABELS),
        description="Python type name to display category",
    )

    # Nested configurations
    sheet: SheetLayoutConfig = Field(default_factory=SheetLayoutConfig)
    file_names: FileNamesConfig = Field(default_factory=FileNamesConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("scope_prefix")
    @classmethod
    def strip_scope_prefix(cls, v: str) -> str:
        return v.strip()


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
