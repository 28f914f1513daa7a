"""Mapping of extracted types to ordered sheet specifications."""

from __future__ import annotations

from collections.abc import Iterable

from model_schema_export.core.constants import SHEET_TITLE_PREFIX
from model_schema_export.core.schemas import ExtractedType, SheetSpec
from model_schema_export.extraction.normalizer import normalize


def assemble(
    extracted: Iterable[ExtractedType], title_prefix: str = SHEET_TITLE_PREFIX
) -> list[SheetSpec]:
    """Turn extraction output into sheet specifications.

    Sheets are numbered from 1 in input order, so the root type lands on the
    first sheet. Each call numbers its own sheets.

    Args:
        extracted: Output of SchemaExtractor.extract
        title_prefix: Prefix of the sheet titles

    Returns:
        One SheetSpec per extracted type, in the same order
    """
    return [
        SheetSpec(
            sheet_title=f"{title_prefix}{index}",
            model_name=normalize(entry.type_name),
            rows=list(entry.rows),
        )
        for index, entry in enumerate(extracted, start=1)
    ]
