"""Field metadata read from Python class definitions."""

from __future__ import annotations

import dataclasses
import inspect
import typing
from typing import Any, ClassVar, get_origin

from pydantic import BaseModel
from pydantic.errors import PydanticUndefinedAnnotation
from pydantic.fields import FieldInfo

from model_schema_export.core.exceptions import SchemaError
from model_schema_export.core.schemas import FieldDescriptor
from model_schema_export.core.type_utils import short_name


class ReflectionMetadataProvider:
    """Reads declared fields from class definitions.

    Three kinds of classes are understood, each in declaration order:

    - pydantic models: ``model_fields``; descriptions come from
      ``Field(description=...)`` with ``Field(title=...)`` as fallback.
    - dataclasses (standard or pydantic): ``dataclasses.fields()``;
      descriptions come from ``field(metadata={"description": ...})`` with
      ``"title"`` as fallback, or from a pydantic ``Field`` default.
    - any other class: its resolved annotations, without descriptions.
    """

    def supports(self, model_type: Any) -> bool:
        """Check whether field metadata can be read from ``model_type``."""
        return inspect.isclass(model_type)

    def fields_of(self, model_type: Any) -> list[FieldDescriptor]:
        """Return the declared fields of ``model_type`` in declaration order.

        Raises:
            SchemaError: If the type is not a class or its annotations cannot
                be resolved
        """
        if not self.supports(model_type):
            raise SchemaError(f"{model_type!r} is not a class")

        if issubclass(model_type, BaseModel):
            return self._pydantic_fields(model_type)
        if dataclasses.is_dataclass(model_type):
            return self._dataclass_fields(model_type)
        return self._annotated_fields(model_type)

    def description_of(self, field: FieldDescriptor) -> str | None:
        """Return the human readable description attached to a field, if any."""
        source = field.source
        if isinstance(source, FieldInfo):
            return source.description or source.title or None
        if isinstance(source, dataclasses.Field):
            if isinstance(source.default, FieldInfo):
                info = source.default
                return info.description or info.title or None
            metadata = source.metadata
            description = metadata.get("description") or metadata.get("title")
            return str(description) if description else None
        return None

    def _pydantic_fields(self, model_type: type[BaseModel]) -> list[FieldDescriptor]:
        if not model_type.__pydantic_complete__:
            try:
                model_type.model_rebuild(raise_errors=True)
            except PydanticUndefinedAnnotation as e:
                raise SchemaError(
                    f"cannot resolve annotation '{e.name}'",
                    owner=short_name(model_type),
                ) from e

        return [
            FieldDescriptor(name=name, declared_type=info.annotation, source=info)
            for name, info in model_type.model_fields.items()
        ]

    def _dataclass_fields(self, model_type: type) -> list[FieldDescriptor]:
        hints = self._type_hints(model_type)
        return [
            FieldDescriptor(
                name=field.name,
                declared_type=hints.get(field.name, field.type),
                source=field,
            )
            for field in dataclasses.fields(model_type)
        ]

    def _annotated_fields(self, model_type: type) -> list[FieldDescriptor]:
        hints = self._type_hints(model_type)
        return [
            FieldDescriptor(name=name, declared_type=tp)
            for name, tp in hints.items()
            if get_origin(tp) is not ClassVar and tp is not ClassVar
        ]

    def _type_hints(self, model_type: type) -> dict[str, Any]:
        try:
            return typing.get_type_hints(model_type, include_extras=True)
        except (NameError, TypeError) as e:
            raise SchemaError(
                f"cannot resolve annotations: {e}", owner=short_name(model_type)
            ) from e
