"""Type-graph traversal producing one row list per model type."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

from model_schema_export.core.constants import REFERENCE_LABEL
from model_schema_export.core.exceptions import ConfigurationError
from model_schema_export.core.schemas import ExtractedType, SchemaRow
from model_schema_export.core.type_utils import short_name
from model_schema_export.extraction.classifier import Reference, TypeClassifier
from model_schema_export.extraction.interfaces import IMetadataProvider, IRowEnricher
from model_schema_export.extraction.metadata import ReflectionMetadataProvider
from model_schema_export.extraction.normalizer import normalize
from model_schema_export.logger import logger


class ExtractionContext:
    """State of a single extraction run.

    ``visited`` holds every type already queued, so each type is processed
    at most once even when the type graph contains cycles. ``pending`` holds
    discovered types whose rows have not been extracted yet.
    """

    def __init__(self) -> None:
        self.visited: set[Any] = set()
        self.pending: deque[Any] = deque()
        self.extracted: list[ExtractedType] = []

    def discover(self, model_type: Any) -> bool:
        """Queue ``model_type`` unless it was seen before.

        Returns:
            True if the type was newly discovered
        """
        if model_type in self.visited:
            return False
        self.visited.add(model_type)
        self.pending.append(model_type)
        return True


class SchemaExtractor:
    """Walks a root model type and every in-scope type it references.

    The root is always the first entry of the result; the remaining types
    follow in the order they were first referenced.
    """

    def __init__(
        self,
        classifier: TypeClassifier,
        provider: IMetadataProvider | None = None,
        enrichers: Sequence[IRowEnricher] = (),
        reference_label: str = REFERENCE_LABEL,
    ) -> None:
        """Initialize the schema extractor.

        Args:
            classifier: Classifier deciding which fields reference other types
            provider: Source of field metadata, defaults to reflection
            enrichers: Callables applied to each row after classification
            reference_label: Type category written for reference fields
        """
        self.classifier = classifier
        self.provider = (
            provider if provider is not None else ReflectionMetadataProvider()
        )
        self.enrichers = list(enrichers)
        self.reference_label = reference_label

    def extract(self, root: Any) -> list[ExtractedType]:
        """Extract rows for ``root`` and all in-scope types reachable from it.

        Args:
            root: Root model type

        Returns:
            One ExtractedType per distinct type, root first

        Raises:
            ConfigurationError: If the root type exposes no field metadata
            SchemaError: If any field type cannot be classified
        """
        if not self.provider.supports(root):
            raise ConfigurationError(
                "ROOT_TYPES", f"Root type {root!r} has no accessible field metadata"
            )

        context = ExtractionContext()
        context.discover(root)
        while context.pending:
            model_type = context.pending.popleft()
            rows = self.extract_rows(model_type, context)
            context.extracted.append(ExtractedType(source_type=model_type, rows=rows))
            logger.debug(
                "Extracted %d field(s) from %s", len(rows), short_name(model_type)
            )

        logger.info(
            "Extracted %d type(s) reachable from %s",
            len(context.extracted),
            short_name(root),
        )
        return context.extracted

    def extract_rows(
        self, model_type: Any, context: ExtractionContext
    ) -> list[SchemaRow]:
        """Build one row per declared field of ``model_type``.

        Referenced types that have not been seen yet are queued on ``context``.
        """
        owner = short_name(model_type)
        rows: list[SchemaRow] = []

        for field in self.provider.fields_of(model_type):
            classification = self.classifier.classify(field, owner)
            linked_type_name = ""
            if isinstance(classification, Reference):
                target = classification.target
                type_category = self.reference_label
                linked_type_name = normalize(short_name(target))
                if context.discover(target):
                    logger.debug(
                        "Discovered %s via %s.%s", short_name(target), owner, field.name
                    )
            else:
                type_category = classification.label

            row = SchemaRow(
                field_name=normalize(field.name),
                description=self.provider.description_of(field) or "",
                type_category=type_category,
                linked_type_name=linked_type_name,
            )
            for enricher in self.enrichers:
                row = enricher(field, row)
            rows.append(row)

        return rows
