"""
Schema Validator - Reporte de errores de validación

Responsabilidad:
- Convertir una lista de ErrorMessage en un reporte de texto
- Bloquear valores inválidos para quien prefiera una excepción
- NO decidir la respuesta HTTP (eso es del integrador)
"""

import logging
from typing import Any, Iterable

from jsonleaf.core.simple_type_schema import SimpleTypeSchema
from jsonleaf.exceptions import DocumentValidationException
from jsonleaf.schemas import ErrorMessage

logger = logging.getLogger(__name__)


def render_errors(errors: Iterable[ErrorMessage]) -> str:
    """One ``location: message`` line per failure."""
    return "".join(f"{error.location}: {error.message}\n" for error in errors)


class SchemaValidator:
    """
    Validador con excepción.

    ``SimpleTypeSchema.validate`` returns failures as data; this wrapper raises
    them instead, for callers that want to stop at an invalid value.
    """

    @staticmethod
    def ensure_valid(value: Any, schema: SimpleTypeSchema) -> None:
        """
        Valida value contra schema.

        Args:
            value: Parsed JSON value
            schema: Built leaf validator

        Raises:
            DocumentValidationException: If validation fails; its message is the
                rendered report
        """
        errors = schema.validate(value)

        if errors:
            logger.debug(f"Value rejected by {schema!r}: {len(errors)} error(s)")
            raise DocumentValidationException(render_errors(errors), errors)


__all__ = ["SchemaValidator", "render_errors"]
