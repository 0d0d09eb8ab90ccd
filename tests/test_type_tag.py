"""Tests for primitive type tags."""

from decimal import Decimal

import pytest

from jsonleaf.core.type_tag import SimpleType, to_decimal


class TestMatches:
    """Structural type predicates."""

    @pytest.mark.parametrize(
        "type_, value",
        [
            (SimpleType.STRING, ""),
            (SimpleType.STRING, "text"),
            (SimpleType.NUMBER, 1),
            (SimpleType.NUMBER, 1.5),
            (SimpleType.NUMBER, Decimal("1.50")),
            (SimpleType.INTEGER, 0),
            (SimpleType.INTEGER, -42),
            (SimpleType.BOOLEAN, True),
            (SimpleType.BOOLEAN, False),
            (SimpleType.NULL, None),
            (SimpleType.ANY, None),
            (SimpleType.ANY, {"nested": [1, 2]}),
            (SimpleType.ANY, [1, "a"]),
        ],
    )
    def test_matching_values(self, type_, value):
        assert type_.matches(value) is True

    @pytest.mark.parametrize(
        "type_, value",
        [
            (SimpleType.STRING, 1),
            (SimpleType.STRING, None),
            (SimpleType.NUMBER, "1"),
            (SimpleType.NUMBER, True),
            (SimpleType.NUMBER, float("nan")),
            (SimpleType.NUMBER, float("inf")),
            (SimpleType.NUMBER, Decimal("NaN")),
            (SimpleType.INTEGER, 1.0),
            (SimpleType.INTEGER, Decimal("1")),
            (SimpleType.INTEGER, False),
            (SimpleType.BOOLEAN, 0),
            (SimpleType.BOOLEAN, "true"),
            (SimpleType.NULL, 0),
            (SimpleType.NULL, ""),
            (SimpleType.STRING, ["a"]),
            (SimpleType.NUMBER, {"a": 1}),
        ],
    )
    def test_non_matching_values(self, type_, value):
        assert type_.matches(value) is False

    def test_integer_is_subset_of_number(self):
        for value in (0, 7, -3, 10**30):
            assert SimpleType.INTEGER.matches(value)
            assert SimpleType.NUMBER.matches(value)


class TestNativeValue:
    """Scalar extraction."""

    def test_string_value(self):
        assert SimpleType.STRING.native_value("abc") == "abc"

    def test_number_uses_decimal_text_form(self):
        assert SimpleType.NUMBER.native_value(1.1) == Decimal("1.1")
        assert SimpleType.NUMBER.native_value(Decimal("1.10")) == Decimal("1.1")

    def test_integer_value_is_exact(self):
        big = 2**70 + 1
        assert SimpleType.INTEGER.native_value(big) == Decimal(big)

    def test_boolean_value(self):
        assert SimpleType.BOOLEAN.native_value(False) is False

    @pytest.mark.parametrize("type_", [SimpleType.NULL, SimpleType.ANY])
    def test_no_value_for_null_or_any(self, type_):
        with pytest.raises(TypeError):
            type_.native_value(None)

    def test_non_matching_value_raises(self):
        with pytest.raises(TypeError):
            SimpleType.STRING.native_value(5)


class TestNames:
    """Enum naming."""

    def test_lowercase_values(self):
        assert [t.value for t in SimpleType] == [
            "string",
            "number",
            "integer",
            "boolean",
            "null",
            "any",
        ]

    def test_str_is_value(self):
        assert str(SimpleType.INTEGER) == "integer"
        assert f"{SimpleType.BOOLEAN}" == "boolean"

    def test_is_numeric(self):
        assert {t for t in SimpleType if t.is_numeric} == {SimpleType.NUMBER, SimpleType.INTEGER}


def test_to_decimal_float_avoids_binary_expansion():
    assert str(to_decimal(0.1)) == "0.1"
