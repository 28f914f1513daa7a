"""Tests for the reflection metadata provider."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import BaseModel
from sample_models import Address, Customer, Empty, Order, Plain, Point, Shape

from model_schema_export.core.exceptions import SchemaError
from model_schema_export.extraction.metadata import ReflectionMetadataProvider


@dataclasses.dataclass
class Dangling:
    ref: NotDefinedAnywhere  # noqa: F821


@dataclasses.dataclass
class Measured:
    weight: float = dataclasses.field(metadata={"description": 42})


class DanglingModel(BaseModel):
    ref: AlsoNotDefined  # noqa: F821


@pytest.fixture
def provider():
    return ReflectionMetadataProvider()


def describe(provider, model_type):
    return [
        (field.name, field.declared_type, provider.description_of(field))
        for field in provider.fields_of(model_type)
    ]


class TestPydanticModels:
    def test_fields_in_declaration_order(self, provider):
        assert describe(provider, Order) == [
            ("orderId", int, "Order number"),
            ("customer", Customer, None),
            ("tags", list[str], None),
        ]

    def test_title_is_used_when_description_missing(self, provider):
        assert describe(provider, Address) == [
            ("street", str, "Street line"),
            ("postCode", str, None),
        ]

    def test_model_without_fields(self, provider):
        assert provider.fields_of(Empty) == []

    def test_unresolvable_annotation_raises(self, provider):
        with pytest.raises(SchemaError, match="AlsoNotDefined") as exc_info:
            provider.fields_of(DanglingModel)
        assert exc_info.value.owner == "DanglingModel"


class TestDataclasses:
    def test_fields_and_metadata_descriptions(self, provider):
        assert describe(provider, Point) == [
            ("x", float, "Horizontal position"),
            ("y", float, "Vertical position"),
            ("label", str, None),
        ]

    def test_string_annotations_are_resolved(self, provider):
        assert describe(provider, Shape) == [
            ("name", str, None),
            ("vertices", list[Point], None),
        ]

    def test_unresolvable_annotation_raises(self, provider):
        with pytest.raises(SchemaError, match="NotDefinedAnywhere"):
            provider.fields_of(Dangling)

    def test_non_string_description_is_converted(self, provider):
        assert describe(provider, Measured) == [("weight", float, "42")]


class TestAnnotatedClasses:
    def test_annotations_without_class_vars(self, provider):
        assert describe(provider, Plain) == [
            ("code", str, None),
            ("weight", float, None),
        ]


class TestSupports:
    @pytest.mark.parametrize("model_type", [Order, Point, Plain, int])
    def test_classes_are_supported(self, provider, model_type):
        assert provider.supports(model_type)

    @pytest.mark.parametrize("model_type", [list[Order], "Order", None])
    def test_non_classes_are_not_supported(self, provider, model_type):
        assert not provider.supports(model_type)

    def test_fields_of_non_class_raises(self, provider):
        with pytest.raises(SchemaError, match="is not a class"):
            provider.fields_of("Order")
