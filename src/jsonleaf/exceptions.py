"""
jsonleaf - Custom Exceptions.

Configuration errors are raised while a validator is being built.
Validation failures are never raised by ``validate``; they are returned as data.
"""

from typing import Any


class JsonLeafException(Exception):
    """Base exception for jsonleaf."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class SchemaConfigurationException(JsonLeafException):
    """Raised when a schema description cannot be built into a validator."""

    def __init__(
        self,
        message: str,
        code: str = "SCHEMA_CONFIGURATION",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, details=details)


class IncompatibleConstraintException(SchemaConfigurationException):
    """Raised when a constraint is not allowed for the configured type."""

    def __init__(self, constraint: str, message: str, type_name: str):
        super().__init__(
            code="INCOMPATIBLE_CONSTRAINT",
            message=message,
            details={"constraint": constraint, "type": type_name},
        )


class UnknownFormatException(SchemaConfigurationException):
    """Raised when a format name has no registered validator."""

    def __init__(self, format_name: str, available_formats: list[str]):
        super().__init__(
            code="UNKNOWN_FORMAT",
            message=f"Unknown format: {format_name}",
            details={
                "format": format_name,
                "available_formats": available_formats,
            },
        )


class InvalidPatternException(SchemaConfigurationException):
    """Raised when a pattern does not compile or exceeds the configured length."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            code="INVALID_PATTERN",
            message=f"Invalid regex pattern '{pattern}': {reason}",
            details={"pattern": pattern, "reason": reason},
        )


class InvalidEnumerationException(SchemaConfigurationException):
    """Raised when an enumeration is empty or holds values of the wrong type."""

    def __init__(self, message: str, type_name: str):
        super().__init__(
            code="INVALID_ENUMERATION",
            message=message,
            details={"type": type_name},
        )


class InvalidDescriptionException(SchemaConfigurationException):
    """Raised when a schema description mapping has malformed keyword values."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(
            code="INVALID_DESCRIPTION",
            message=message,
            details={"errors": errors} if errors else None,
        )


class FormatRegistryException(JsonLeafException):
    """Raised on duplicate registration or registration into a frozen registry."""

    def __init__(self, format_name: str, message: str):
        super().__init__(
            code="FORMAT_REGISTRY",
            message=message,
            details={"format": format_name},
        )


class DocumentValidationException(JsonLeafException):
    """Raised by ``ensure_valid`` when a value fails validation."""

    def __init__(self, message: str, errors: list[Any]):
        self.errors = errors
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            details={
                "errors": [
                    {"location": e.location, "message": e.message} for e in errors
                ]
            },
        )
