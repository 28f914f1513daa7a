"""Type-graph traversal and schema extraction components."""

from model_schema_export.extraction.classifier import (
    Primitive,
    Reference,
    TypeClassifier,
)
from model_schema_export.extraction.extractor import ExtractionContext, SchemaExtractor
from model_schema_export.extraction.metadata import ReflectionMetadataProvider
from model_schema_export.extraction.normalizer import normalize

__all__ = [
    "ExtractionContext",
    "Primitive",
    "Reference",
    "ReflectionMetadataProvider",
    "SchemaExtractor",
    "TypeClassifier",
    "normalize",
]
