"""Conversion of mixed-case identifiers to canonical snake_case names."""

from __future__ import annotations

import re
import string

from model_schema_export.core.exceptions import SchemaError

_UPPERCASE_RUN = re.compile(r"[A-Z]+")


def normalize(identifier: str) -> str:
    """Convert a mixed-case identifier to its canonical snake_case form.

    Every run of ASCII uppercase letters becomes ``_`` followed by the run in
    lowercase; the underscore produced by a leading uppercase letter is dropped.

    Examples:
        >>> normalize("fieldName")
        'field_name'
        >>> normalize("ID")
        'id'
        >>> normalize("OrderLine")
        'order_line'

    Raises:
        SchemaError: If the identifier is empty
    """
    if not isinstance(identifier, str) or not identifier:
        raise SchemaError(f"Cannot normalize empty identifier {identifier!r}")

    result = _UPPERCASE_RUN.sub(lambda m: "_" + m.group(0).lower(), identifier)
    if identifier[0] in string.ascii_uppercase:
        result = result[1:]
    return result
