"""Pydantic models for the row model handed between pipeline stages."""

from __future__ import annotations

from typing import Any, get_origin

from pydantic import BaseModel, ConfigDict, Field

from .type_utils import is_collection_type


class FieldDescriptor(BaseModel):
    """One declared field of a model type.

    ``source`` keeps the mechanism-specific field object (a pydantic
    ``FieldInfo`` or a ``dataclasses.Field``) so the metadata provider can
    read description metadata from it later.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(..., description="Field name as declared")
    declared_type: Any = Field(..., description="Resolved type annotation")
    source: Any = Field(None, description="Underlying field object")

    @property
    def is_collection(self) -> bool:
        """Whether the field is declared as a collection rather than a single value."""
        return is_collection_type(self.declared_type)

    def __str__(self) -> str:
        type_name = getattr(self.declared_type, "__name__", None)
        if type_name is None or get_origin(self.declared_type) is not None:
            type_name = repr(self.declared_type)
        return f"{self.name}: {type_name}"


class SchemaRow(BaseModel):
    """One row of a schema sheet, describing a single field."""

    field_name: str = Field(..., description="Field name in canonical snake_case")
    description: str = Field("", description="Human readable field description")
    is_key: bool = Field(False, description="Whether the field is a key field")
    type_category: str = Field("", description="Display category of the field type")
    remark: str = Field("", description="Free-form remark")
    enum_values: str = Field("", description="Allowed values for enum fields")
    linked_type_name: str = Field(
        "", description="Canonical name of the referenced type, if any"
    )
    sync_type: str = Field("", description="Synchronisation type")


class ExtractedType(BaseModel):
    """A model type together with the rows extracted from its fields."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source_type: Any = Field(..., description="The class the rows were extracted from")
    rows: list[SchemaRow] = Field(default_factory=list)

    @property
    def type_name(self) -> str:
        return getattr(self.source_type, "__name__", str(self.source_type))


class SheetSpec(BaseModel):
    """Logical, pre-rendering representation of one worksheet."""

    model_config = ConfigDict(protected_namespaces=())

    sheet_title: str = Field(..., min_length=1, description="Worksheet title")
    model_name: str = Field(..., min_length=1, description="Canonical model name")
    rows: list[SchemaRow] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.sheet_title} ({self.model_name})"


class ValidationResult(BaseModel):
    """Result of sheet validation with type safety.

    Provides validated results for sheet validation operations.
    """

    is_valid: bool = Field(..., description="Whether the sheets passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
