from typing import Any, Protocol

from model_schema_export.core.schemas import FieldDescriptor, SchemaRow


class IMetadataProvider(Protocol):
    def supports(self, model_type: Any) -> bool: ...

    def fields_of(self, model_type: Any) -> list[FieldDescriptor]: ...

    def description_of(self, field: FieldDescriptor) -> str | None: ...


class IRowEnricher(Protocol):
    def __call__(self, field: FieldDescriptor, row: SchemaRow) -> SchemaRow: ...
