"""
Cross-checks against jsonschema's Draft 4 validator.

Draft 4 uses the same boolean exclusiveMinimum/exclusiveMaximum keywords, so
for values without decimal rounding issues both must agree on valid/invalid.
"""

import pytest
from jsonschema import Draft4Validator

from jsonleaf.core.simple_type_schema import SimpleTypeSchema

CASES = [
    (
        {"type": "number", "minimum": 1.5, "exclusiveMinimum": True},
        [1, 1.5, 1.75, 2, "2", None],
    ),
    (
        {"type": "integer", "minimum": 0, "maximum": 10, "exclusiveMaximum": True},
        [-1, 0, 9, 10, 11, True, "5"],
    ),
    (
        {"type": "string", "minLength": 2, "maxLength": 4},
        ["", "a", "ab", "abcd", "abcde", 3],
    ),
    (
        {"type": "string", "pattern": "^[a-z]+$"},
        ["abc", "aBc", "", "abc1"],
    ),
    (
        {"type": "string", "enum": ["red", "green"]},
        ["red", "blue", "", 1],
    ),
    (
        {"type": "boolean"},
        [True, False, 0, 1, None],
    ),
    (
        {"type": "null"},
        [None, 0, "", False],
    ),
]


@pytest.mark.parametrize(
    "description, value",
    [(description, value) for description, values in CASES for value in values],
)
def test_agrees_with_draft4(description, value):
    reference = Draft4Validator(description)
    schema = SimpleTypeSchema.from_description(description)

    assert (schema.validate(value) == []) == reference.is_valid(value)
