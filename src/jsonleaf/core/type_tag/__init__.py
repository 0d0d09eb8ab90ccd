"""
Type Tag - Tipos primitivos de JSON

Responsabilidad:
- Decidir si un valor JSON pertenece a un tipo primitivo
- Extraer el escalar nativo usado en comparaciones (texto, Decimal, bool)
- NO validar restricciones (eso es simple_type_schema)

JSON values are the objects ``json.loads`` produces, optionally with
``parse_float=Decimal``. Numbers are extracted as ``Decimal`` built from their
text form, so ``1.10`` and ``1.1`` compare equal without binary rounding.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, NamedTuple


class SimpleType(str, Enum):
    """Closed set of primitive JSON kinds."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ANY = "any"

    def __str__(self) -> str:
        return self.value

    def matches(self, value: Any) -> bool:
        """Structural predicate: does ``value`` belong to this kind."""
        return _BEHAVIOURS[self].matches(value)

    def native_value(self, value: Any) -> Any:
        """
        Extract the comparable scalar of a matching value.

        Raises:
            TypeError: For NULL and ANY, or when ``value`` does not match
        """
        behaviour = _BEHAVIOURS[self]
        if behaviour.extract is None:
            raise TypeError(f"Cannot retrieve a comparable value for type {self.value}")
        if not behaviour.matches(value):
            raise TypeError(f"Value {value!r} is not of type {self.value}")
        return behaviour.extract(value)

    @property
    def is_numeric(self) -> bool:
        return self in (SimpleType.NUMBER, SimpleType.INTEGER)


class _Behaviour(NamedTuple):
    matches: Callable[[Any], bool]
    extract: Callable[[Any], Any] | None


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but a distinct JSON kind
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_null(value: Any) -> bool:
    return value is None


def _is_anything(value: Any) -> bool:
    return True


def to_decimal(value: Any) -> Decimal:
    """Exact decimal form of a JSON number (floats go through their shortest repr)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


_BEHAVIOURS: dict[SimpleType, _Behaviour] = {
    SimpleType.STRING: _Behaviour(_is_string, str),
    SimpleType.NUMBER: _Behaviour(_is_number, to_decimal),
    SimpleType.INTEGER: _Behaviour(_is_integer, to_decimal),
    SimpleType.BOOLEAN: _Behaviour(_is_boolean, bool),
    SimpleType.NULL: _Behaviour(_is_null, None),
    SimpleType.ANY: _Behaviour(_is_anything, None),
}


__all__ = ["SimpleType", "to_decimal"]
