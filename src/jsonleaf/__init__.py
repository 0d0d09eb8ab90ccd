"""
jsonleaf - Leaf-level JSON value validation.

Validates a parsed JSON value against one primitive type plus refinement
constraints (pattern, format, range, length, enumeration).
"""

__version__ = "0.1.0"

from jsonleaf.core.format_registry import FormatRegistry, FormatValidator, get_format_registry
from jsonleaf.core.schema_validator import SchemaValidator, render_errors
from jsonleaf.core.simple_type_schema import SimpleTypeSchema
from jsonleaf.core.type_tag import SimpleType
from jsonleaf.exceptions import (
    DocumentValidationException,
    FormatRegistryException,
    JsonLeafException,
    SchemaConfigurationException,
)
from jsonleaf.schemas import ErrorMessage

__all__ = [
    "__version__",
    "DocumentValidationException",
    "ErrorMessage",
    "FormatRegistry",
    "FormatRegistryException",
    "FormatValidator",
    "JsonLeafException",
    "SchemaConfigurationException",
    "SchemaValidator",
    "SimpleType",
    "SimpleTypeSchema",
    "get_format_registry",
    "render_errors",
]
