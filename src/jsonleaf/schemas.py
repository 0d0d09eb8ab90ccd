"""
jsonleaf - Common Schemas.

Shared Pydantic models: validation failures and schema descriptions.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from jsonleaf.config import get_settings
from jsonleaf.core.type_tag import SimpleType, to_decimal


# =============================================================================
# Validation Failures
# =============================================================================


class ErrorMessage(BaseModel):
    """One validation failure."""

    model_config = ConfigDict(frozen=True)

    location: str = Field(default="", description="Schema-relative path; empty at leaf level")
    message: str = Field(..., description="Human-readable reason")

    def relocate(self, parent: str, separator: str | None = None) -> "ErrorMessage":
        """Attribute this failure to a location under ``parent``."""
        if not parent:
            return self
        if separator is None:
            separator = get_settings().error_location_separator
        location = f"{parent}{separator}{self.location}" if self.location else parent
        return self.model_copy(update={"location": location})

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


# =============================================================================
# Schema Descriptions
# =============================================================================


class SchemaDescription(BaseModel):
    """
    Leaf schema keywords as they appear in a schema document.

    Checks the shape of each keyword value only; cross-keyword rules are
    enforced when the validator is built.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    type: SimpleType = SimpleType.ANY
    pattern: str | None = None
    format: str | None = None
    min_length: StrictInt = Field(default=0, ge=0, alias="minLength")
    max_length: StrictInt = Field(default=0, ge=0, alias="maxLength")
    minimum: Decimal | None = None
    maximum: Decimal | None = None
    exclusive_minimum: StrictBool = Field(default=False, alias="exclusiveMinimum")
    exclusive_maximum: StrictBool = Field(default=False, alias="exclusiveMaximum")
    enumeration: list[Any] | None = Field(default=None, alias="enum")

    @field_validator("type", mode="before")
    @classmethod
    def lowercase_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("minimum", "maximum", mode="before")
    @classmethod
    def number_to_decimal(cls, value: Any) -> Any:
        if value is None:
            return None
        if not SimpleType.NUMBER.matches(value):
            raise ValueError("must be a finite JSON number")
        return to_decimal(value)

    def to_constraints(self) -> dict[str, Any]:
        """Keyword arguments for ``SimpleTypeSchema``."""
        return {
            "type": self.type,
            "pattern": self.pattern,
            "format": self.format,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "exclusive_minimum": self.exclusive_minimum,
            "exclusive_maximum": self.exclusive_maximum,
            "enumeration": self.enumeration,
        }
