"""Custom exception classes for the model schema exporter."""

from __future__ import annotations


class SchemaExportError(Exception):
    """Base exception for schema export errors.

    All custom exceptions in the model schema exporter inherit from this class.
    """

    pass


class ConfigurationError(SchemaExportError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid,
    such as an empty scope prefix or a root type that exposes no field metadata.

    Args:
        variable_name: The name of the configuration variable that caused the error
        message: Optional custom error message
    """

    def __init__(self, variable_name: str, message: str | None = None) -> None:
        self.variable_name = variable_name
        if message is None:
            message = f"Required configuration variable '{variable_name}' is not set"
        super().__init__(message)


class SchemaError(SchemaExportError):
    """Error in the type metadata being exported.

    Raised for fields whose declared type cannot be classified (for example a
    collection without an element type or a collection of collections) and for
    identifiers that cannot be normalized.

    Args:
        message: Description of the problem
        owner: Name of the type declaring the offending field, if known
        field_name: Name of the offending field, if known
    """

    def __init__(
        self, message: str, owner: str | None = None, field_name: str | None = None
    ) -> None:
        self.owner = owner
        self.field_name = field_name
        if owner and field_name:
            message = f"{owner}.{field_name}: {message}"
        elif owner:
            message = f"{owner}: {message}"
        super().__init__(message)


class ValidationError(SchemaExportError):
    """Error during sheet validation.

    Raised when the assembled sheets are not internally consistent.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Sheet validation failed: {'; '.join(errors)}")
