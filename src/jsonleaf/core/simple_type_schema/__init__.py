"""
Simple Type Schema - Validador de un tipo primitivo con restricciones

Responsabilidad:
- Construir el validador en un solo paso, rechazando combinaciones inválidas
- Validar un valor JSON y devolver TODOS los errores encontrados
- NO lanzar excepciones al validar (los errores son datos)
- NO componer esquemas (objetos, arrays, uniones son externos)

Orden de verificación:
1. Tipo (si falla, un único error y nada más)
2. pattern → format → rango → longitud → enumeración
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from jsonleaf.config import get_settings
from jsonleaf.core.format_registry import FormatRegistry, FormatValidator, get_format_registry
from jsonleaf.core.type_tag import SimpleType, to_decimal
from jsonleaf.exceptions import (
    IncompatibleConstraintException,
    InvalidDescriptionException,
    InvalidEnumerationException,
    InvalidPatternException,
    SchemaConfigurationException,
    UnknownFormatException,
)
from jsonleaf.schemas import ErrorMessage, SchemaDescription

logger = logging.getLogger(__name__)


class SimpleTypeSchema:
    """
    Leaf validator for one primitive JSON type plus refinement constraints.

    Every constraint is passed to the constructor and checked together; an
    invalid combination raises ``SchemaConfigurationException`` and no
    validator exists. Built instances hold no per-call state and can be shared
    between threads.
    """

    __slots__ = (
        "_type",
        "_pattern",
        "_format",
        "_format_validator",
        "_min_length",
        "_max_length",
        "_minimum",
        "_maximum",
        "_exclusive_minimum",
        "_exclusive_maximum",
        "_enumeration",
    )

    def __init__(
        self,
        type: SimpleType | str = SimpleType.ANY,
        *,
        pattern: str | re.Pattern | None = None,
        format: str | None = None,
        min_length: int = 0,
        max_length: int = 0,
        minimum: int | float | Decimal | None = None,
        maximum: int | float | Decimal | None = None,
        exclusive_minimum: bool = False,
        exclusive_maximum: bool = False,
        enumeration: Iterable[Any] | None = None,
        format_registry: FormatRegistry | None = None,
    ):
        try:
            self._type = _coerce_type(type)
            self._pattern = self._build_pattern(pattern)
            self._format = format
            self._format_validator = self._resolve_format(format, format_registry)
            self._min_length = self._check_length("minLength", min_length)
            self._max_length = self._check_length("maxLength", max_length)
            self._minimum = self._check_bound("minimum", minimum)
            self._maximum = self._check_bound("maximum", maximum)
            self._exclusive_minimum = self._check_exclusive("exclusiveMinimum", exclusive_minimum)
            self._exclusive_maximum = self._check_exclusive("exclusiveMaximum", exclusive_maximum)
            self._enumeration = self._check_enumeration(enumeration)
        except SchemaConfigurationException as exc:
            logger.warning(f"Schema configuration rejected: {exc.code} - {exc.message}")
            raise

        logger.debug(f"Built {self!r}")

    @classmethod
    def from_description(
        cls,
        description: Mapping[str, Any],
        format_registry: FormatRegistry | None = None,
    ) -> "SimpleTypeSchema":
        """
        Build from schema keywords (``type``, ``minLength``, ``enum``, ...).

        Raises:
            InvalidDescriptionException: If a keyword value has the wrong shape
            SchemaConfigurationException: If keywords are incompatible
        """
        try:
            parsed = SchemaDescription.model_validate(dict(description))
        except ValidationError as exc:
            errors = [
                {"keyword": ".".join(str(p) for p in error["loc"]), "message": error["msg"]}
                for error in exc.errors()
            ]
            logger.warning(f"Schema description rejected: {errors}")
            raise InvalidDescriptionException("Invalid schema description", errors) from exc
        return cls(**parsed.to_constraints(), format_registry=format_registry)

    # -------------------------------------------------------------------------
    # Construction checks
    # -------------------------------------------------------------------------

    def _build_pattern(self, pattern: str | re.Pattern | None) -> re.Pattern | None:
        if pattern is None:
            return None
        if self._type != SimpleType.STRING:
            raise IncompatibleConstraintException(
                "pattern", "Regex patterns are only legal for type string", self._type.value
            )

        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        if not isinstance(source, str):
            raise InvalidPatternException(repr(source), "pattern must be a text regex")
        max_length = get_settings().max_pattern_length
        if len(source) > max_length:
            raise InvalidPatternException(source, f"longer than {max_length} characters")
        if isinstance(pattern, re.Pattern):
            return pattern
        try:
            return re.compile(source)
        except (re.error, OverflowError, RecursionError) as exc:
            raise InvalidPatternException(source, str(exc) or type(exc).__name__) from exc

    def _resolve_format(
        self,
        format_name: str | None,
        format_registry: FormatRegistry | None,
    ) -> FormatValidator | None:
        registry = format_registry if format_registry is not None else get_format_registry()
        registry.freeze()
        if format_name is None:
            return None
        try:
            validator = registry.get(format_name)
        except KeyError:
            raise UnknownFormatException(format_name, registry.list_formats()) from None
        if not validator.is_compatible_type(self._type):
            raise IncompatibleConstraintException(
                "format",
                f"Format {format_name} is not valid for type {self._type.value}",
                self._type.value,
            )
        return validator

    def _check_length(self, keyword: str, length: int) -> int:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise SchemaConfigurationException(
                f"{keyword} must be a non-negative integer",
                details={"constraint": keyword, "value": repr(length)},
            )
        # 0 means unset
        if length and self._type != SimpleType.STRING:
            raise IncompatibleConstraintException(
                keyword, f"{keyword} can only be used for type: string", self._type.value
            )
        return length

    def _check_bound(self, keyword: str, bound: Any) -> Decimal | None:
        if bound is None:
            return None
        self._require_numeric_type(keyword)
        if not SimpleType.NUMBER.matches(bound):
            raise SchemaConfigurationException(
                f"{keyword} must be a finite number",
                details={"constraint": keyword, "value": repr(bound)},
            )
        return to_decimal(bound)

    def _check_exclusive(self, keyword: str, flag: bool) -> bool:
        if not isinstance(flag, bool):
            raise SchemaConfigurationException(
                f"{keyword} must be a boolean",
                details={"constraint": keyword, "value": repr(flag)},
            )
        if flag:
            self._require_numeric_type(keyword)
        return flag

    def _require_numeric_type(self, keyword: str) -> None:
        if not self._type.is_numeric:
            raise IncompatibleConstraintException(
                keyword, f"{keyword} can only be used for integer or number types", self._type.value
            )

    def _check_enumeration(self, enumeration: Iterable[Any] | None) -> tuple[Any, ...] | None:
        if enumeration is None:
            return None
        if self._type in (SimpleType.NULL, SimpleType.ANY):
            raise InvalidEnumerationException(
                "enumeration not allowed for null or any types", self._type.value
            )
        if isinstance(enumeration, (str, bytes, Mapping)):
            raise InvalidEnumerationException(
                "enumeration must be a list of values", self._type.value
            )
        values = tuple(enumeration)
        if not values:
            raise InvalidEnumerationException("enumeration must not be empty", self._type.value)
        for value in values:
            if not self._type.matches(value):
                raise InvalidEnumerationException(
                    f"values in enum must be of type {self._type.value}", self._type.value
                )
        return values

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, value: Any) -> list[ErrorMessage]:
        """
        Valida un valor JSON.

        Args:
            value: Parsed JSON value

        Returns:
            Failures in check order; empty when the value is valid
        """
        if not self.is_acceptable_type(value):
            return [_error(f"Invalid type: must be of type {self._type.value}")]

        results: list[ErrorMessage] = []
        self._validate_pattern(value, results)
        self._validate_format(value, results)
        self._validate_range(value, results)
        self._validate_length(value, results)
        self._validate_enumeration(value, results)
        return results

    def describe(self) -> str:
        """Human-readable type name."""
        return self._type.value

    def is_acceptable_type(self, value: Any) -> bool:
        return self._type.matches(value)

    def _validate_pattern(self, value: Any, results: list[ErrorMessage]) -> None:
        if self._pattern is None:
            return
        text = str(self._type.native_value(value))
        if not self._pattern.fullmatch(text):
            results.append(
                _error(f"String value '{text}' does not match regex '{self._pattern.pattern}'")
            )

    def _validate_format(self, value: Any, results: list[ErrorMessage]) -> None:
        if self._format_validator is None:
            return
        if not self._format_validator.is_valid(value):
            results.append(_error(f"Value '{value}' is not a valid {self._format}"))

    def _validate_range(self, value: Any, results: list[ErrorMessage]) -> None:
        if self._minimum is None and self._maximum is None:
            return
        number = self._type.native_value(value)

        if self._minimum is not None:
            if self._exclusive_minimum and number <= self._minimum:
                results.append(
                    _error(
                        f"Value '{number}' must be greater than {self._minimum} "
                        f"when exclusiveMinimum is true"
                    )
                )
            elif number < self._minimum:
                results.append(_error(f"Value '{number}' must be greater or equal to {self._minimum}"))

        if self._maximum is not None:
            if self._exclusive_maximum and number >= self._maximum:
                results.append(
                    _error(
                        f"Value '{number}' must be less than {self._maximum} "
                        f"when exclusiveMaximum is true"
                    )
                )
            elif number > self._maximum:
                results.append(
                    _error(f"Value '{number}' must be less than or equal to {self._maximum}")
                )

    def _validate_length(self, value: Any, results: list[ErrorMessage]) -> None:
        if not (self._min_length or self._max_length):
            return
        text = str(self._type.native_value(value))
        if self._min_length > 0 and len(text) < self._min_length:
            results.append(
                _error(f"Value '{text}' must be greater or equal to {self._min_length} characters")
            )
        if self._max_length > 0 and len(text) > self._max_length:
            results.append(
                _error(f"Value '{text}' must be less or equal to {self._max_length} characters")
            )

    def _validate_enumeration(self, value: Any, results: list[ErrorMessage]) -> None:
        if self._enumeration is None:
            return
        if not any(_literals_equal(value, allowed) for allowed in self._enumeration):
            allowed = ", ".join(_to_json(item) for item in self._enumeration)
            results.append(_error(f"Value {_to_json(value)} must be one of: [{allowed}]"))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def type(self) -> SimpleType:
        return self._type

    @property
    def pattern(self) -> re.Pattern | None:
        return self._pattern

    @property
    def format(self) -> str | None:
        return self._format

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def minimum(self) -> Decimal | None:
        return self._minimum

    @property
    def maximum(self) -> Decimal | None:
        return self._maximum

    @property
    def exclusive_minimum(self) -> bool:
        return self._exclusive_minimum

    @property
    def exclusive_maximum(self) -> bool:
        return self._exclusive_maximum

    @property
    def enumeration(self) -> tuple[Any, ...] | None:
        return self._enumeration

    def __repr__(self) -> str:
        constraints = [f"type={self._type.value}"]
        if self._pattern is not None:
            constraints.append(f"pattern={self._pattern.pattern!r}")
        if self._format is not None:
            constraints.append(f"format={self._format!r}")
        if self._min_length:
            constraints.append(f"min_length={self._min_length}")
        if self._max_length:
            constraints.append(f"max_length={self._max_length}")
        if self._minimum is not None:
            constraints.append(f"minimum={self._minimum}")
        if self._maximum is not None:
            constraints.append(f"maximum={self._maximum}")
        if self._exclusive_minimum:
            constraints.append("exclusive_minimum=True")
        if self._exclusive_maximum:
            constraints.append("exclusive_maximum=True")
        if self._enumeration is not None:
            constraints.append(f"enumeration={list(self._enumeration)!r}")
        return f"SimpleTypeSchema({', '.join(constraints)})"


def _coerce_type(type_: SimpleType | str) -> SimpleType:
    if isinstance(type_, SimpleType):
        return type_
    if isinstance(type_, str):
        try:
            return SimpleType(type_.lower())
        except ValueError:
            pass
    raise SchemaConfigurationException(
        f"Unknown type: {type_!r}",
        code="UNKNOWN_TYPE",
        details={"type": repr(type_), "available_types": [t.value for t in SimpleType]},
    )


def _error(message: str) -> ErrorMessage:
    return ErrorMessage(location="", message=message)


def _literals_equal(left: Any, right: Any) -> bool:
    """JSON structural equality: bools never equal numbers; numbers compare exactly."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if SimpleType.NUMBER.matches(left) and SimpleType.NUMBER.matches(right):
        return to_decimal(left) == to_decimal(right)
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return False


def _to_json(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


__all__ = ["SimpleTypeSchema"]
