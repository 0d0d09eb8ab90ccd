"""Tests for building validators from schema keyword mappings."""

from decimal import Decimal

import pytest

from jsonleaf.core.simple_type_schema import SimpleTypeSchema
from jsonleaf.core.type_tag import SimpleType
from jsonleaf.exceptions import (
    IncompatibleConstraintException,
    InvalidDescriptionException,
    InvalidEnumerationException,
)
from jsonleaf.schemas import SchemaDescription


class TestFromDescription:
    """SimpleTypeSchema.from_description."""

    def test_string_keywords(self):
        schema = SimpleTypeSchema.from_description(
            {"type": "string", "pattern": "[a-z]+", "minLength": 2, "maxLength": 4}
        )
        assert schema.type is SimpleType.STRING
        assert schema.min_length == 2
        assert schema.max_length == 4
        assert schema.validate("abc") == []
        assert len(schema.validate("abcde")) == 1

    def test_numeric_keywords(self):
        schema = SimpleTypeSchema.from_description(
            {"type": "number", "minimum": 1.1, "exclusiveMinimum": True, "maximum": 2}
        )
        assert schema.minimum == Decimal("1.1")
        assert schema.exclusive_minimum is True
        assert schema.validate(1.1) != []
        assert schema.validate(1.100001) == []

    def test_enum_keyword(self):
        schema = SimpleTypeSchema.from_description({"type": "string", "enum": ["a", "b"]})
        assert schema.enumeration == ("a", "b")

    def test_format_keyword(self):
        schema = SimpleTypeSchema.from_description({"type": "string", "format": "uri"})
        assert schema.format == "uri"

    def test_missing_type_defaults_to_any(self):
        assert SimpleTypeSchema.from_description({}).type is SimpleType.ANY

    def test_type_name_is_case_insensitive(self):
        assert SimpleTypeSchema.from_description({"type": "Boolean"}).type is SimpleType.BOOLEAN

    def test_unrelated_keywords_ignored(self):
        schema = SimpleTypeSchema.from_description(
            {"type": "string", "description": "A name", "title": "Name"}
        )
        assert schema.validate("x") == []

    @pytest.mark.parametrize(
        "description, keyword",
        [
            ({"type": "string", "minLength": -1}, "minLength"),
            ({"type": "string", "maxLength": 2.0}, "maxLength"),
            ({"type": "number", "minimum": True}, "minimum"),
            ({"type": "number", "maximum": "10"}, "maximum"),
            ({"type": "number", "exclusiveMinimum": "true"}, "exclusiveMinimum"),
            ({"type": "string", "enum": "a"}, "enum"),
            ({"type": "decimal"}, "type"),
        ],
    )
    def test_malformed_keyword_values(self, description, keyword):
        with pytest.raises(InvalidDescriptionException) as exc_info:
            SimpleTypeSchema.from_description(description)
        assert exc_info.value.code == "INVALID_DESCRIPTION"
        assert keyword in [e["keyword"] for e in exc_info.value.details["errors"]]

    def test_incompatible_keywords(self):
        with pytest.raises(IncompatibleConstraintException):
            SimpleTypeSchema.from_description({"type": "string", "minimum": 1})

    def test_enum_on_null(self):
        with pytest.raises(InvalidEnumerationException):
            SimpleTypeSchema.from_description({"type": "null", "enum": [None]})


class TestSchemaDescription:
    """Keyword model."""

    def test_python_names_accepted(self):
        description = SchemaDescription(type="string", min_length=3)
        assert description.min_length == 3

    def test_to_constraints(self):
        description = SchemaDescription.model_validate({"type": "integer", "maximum": 5})
        constraints = description.to_constraints()
        assert constraints["type"] is SimpleType.INTEGER
        assert constraints["maximum"] == Decimal(5)
        assert constraints["enumeration"] is None
