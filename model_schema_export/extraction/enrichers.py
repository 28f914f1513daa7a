"""Row enrichers filling the optional columns of a schema row."""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from enum import Enum

from model_schema_export.core.schemas import FieldDescriptor, SchemaRow
from model_schema_export.core.type_utils import resolve_element_type
from model_schema_export.extraction.interfaces import IRowEnricher
from model_schema_export.extraction.normalizer import normalize


def enum_values_enricher(field: FieldDescriptor, row: SchemaRow) -> SchemaRow:
    """List the members of an Enum-typed field as ``NAME=value`` pairs."""
    element = resolve_element_type(field.declared_type, field_name=field.name)
    if not inspect.isclass(element) or not issubclass(element, Enum):
        return row
    values = ", ".join(f"{member.name}={member.value}" for member in element)
    return row.model_copy(update={"enum_values": values})


def key_fields_enricher(field_names: Iterable[str]) -> IRowEnricher:
    """Build an enricher marking the named fields as key fields.

    Names are compared in canonical form, so ``"orderId"`` and ``"order_id"``
    both mark the ``order_id`` row.
    """
    keys = frozenset(normalize(name) for name in field_names)

    def enrich(field: FieldDescriptor, row: SchemaRow) -> SchemaRow:
        if row.field_name in keys:
            return row.model_copy(update={"is_key": True})
        return row

    return enrich
