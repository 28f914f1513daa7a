"""Classification of field types into display categories and references."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from model_schema_export.core.constants import DEFAULT_TYPE_LABELS
from model_schema_export.core.exceptions import ConfigurationError
from model_schema_export.core.schemas import FieldDescriptor
from model_schema_export.core.type_utils import resolve_element_type, short_name


class Primitive(BaseModel):
    """Field whose type is rendered as a display category."""

    model_config = ConfigDict(frozen=True)

    label: str = ""


class Reference(BaseModel):
    """Field pointing at another in-scope composite type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: Any


Classification = Primitive | Reference


class TypeClassifier:
    """Decides whether a field is a primitive or a reference to a model type.

    A type is in scope when it is a class (other than an ``Enum``) defined in
    a module whose dotted name starts with ``scope_prefix``. Collections are
    unwrapped to their element type before the decision is made.
    """

    def __init__(
        self, scope_prefix: str, type_labels: Mapping[str, str] | None = None
    ) -> None:
        """Initialize the classifier.

        Args:
            scope_prefix: Module prefix of in-scope types
            type_labels: Python type name to display category, defaults to
                the built-in table

        Raises:
            ConfigurationError: If the scope prefix is missing or blank
        """
        if not scope_prefix or not scope_prefix.strip():
            raise ConfigurationError(
                "SCOPE_PREFIX",
                "Required configuration variable 'SCOPE_PREFIX' is not set "
                "or is blank",
            )
        self.scope_prefix = scope_prefix.strip()
        self.type_labels = dict(
            DEFAULT_TYPE_LABELS if type_labels is None else type_labels
        )

    def classify(
        self, field: FieldDescriptor, owner: str | None = None
    ) -> Classification:
        """Classify a field.

        Args:
            field: Field to classify
            owner: Name of the declaring type, used in error messages

        Returns:
            Reference to the element type when it is in scope, otherwise a
            Primitive carrying the display label ("" for unknown types)

        Raises:
            SchemaError: If a collection field has no resolvable element type
        """
        element = resolve_element_type(field.declared_type, owner, field.name)
        if self.is_in_scope(element):
            return Reference(target=element)
        return Primitive(label=self.display_label(element))

    def is_in_scope(self, tp: Any) -> bool:
        """Whether ``tp`` gets its own sheet.

        A class is in scope when its module starts with the scope prefix.
        Enums are the exception: they are always treated as leaf values even
        inside the prefix, and their members are listed by the enum values
        enricher instead of on a sheet of their own.
        """
        if not inspect.isclass(tp) or issubclass(tp, Enum):
            return False
        module = getattr(tp, "__module__", None) or ""
        return module.startswith(self.scope_prefix)

    def display_label(self, tp: Any) -> str:
        return self.type_labels.get(short_name(tp), "")
