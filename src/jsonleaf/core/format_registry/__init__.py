"""
Format Registry - Registro central de formatos semánticos

Responsabilidad:
- Registrar validadores de formato por nombre
- Declarar con qué tipos primitivos es compatible cada formato
- Proveer búsqueda O(1) por nombre
- NO validar tipos ni rangos (eso es simple_type_schema)

Cada formato declara:
- nombre
- tipos compatibles
- función de verificación

The registry is open for new names and closed for existing ones. It freezes the
first time a validator is built against it, so every format must be registered
before schemas are constructed.
"""

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Iterable

from jsonleaf.core.format_registry import checks
from jsonleaf.core.type_tag import SimpleType
from jsonleaf.exceptions import FormatRegistryException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatValidator:
    """Definición de un formato."""
    name: str
    compatible_types: frozenset[SimpleType]
    check: Callable[[Any], bool]

    def is_valid(self, value: Any) -> bool:
        return self.check(value)

    def is_compatible_type(self, type_: SimpleType) -> bool:
        return type_ in self.compatible_types


class FormatRegistry:
    """
    Registro central de formatos.

    Safe for concurrent lookups once frozen; registration takes a lock.
    """

    def __init__(self, validators: Iterable[FormatValidator] = ()):
        self._lock = threading.Lock()
        self._validators: dict[str, FormatValidator] = {}
        self._frozen = False
        for validator in validators:
            self.register(validator)

    def register(self, validator: FormatValidator) -> None:
        """
        Registra un formato.

        Raises:
            FormatRegistryException: If the name is taken or the registry is frozen
        """
        with self._lock:
            if self._frozen:
                raise FormatRegistryException(
                    validator.name,
                    f"Format registry is frozen; cannot register {validator.name}",
                )
            if validator.name in self._validators:
                raise FormatRegistryException(
                    validator.name,
                    f"Format {validator.name} already registered",
                )
            self._validators[validator.name] = validator
        logger.debug(
            f"Registered format {validator.name} "
            f"for types {sorted(t.value for t in validator.compatible_types)}"
        )

    def get(self, name: str) -> FormatValidator:
        """
        Obtiene un formato.

        Raises:
            KeyError: If no format has that name
        """
        if name not in self._validators:
            raise KeyError(f"Format {name} not found")
        return self._validators[name]

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def list_formats(self) -> list[str]:
        return sorted(self._validators)

    def freeze(self) -> None:
        """Reject any further registration."""
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.info(f"Format registry frozen with formats {self.list_formats()}")

    @property
    def is_frozen(self) -> bool:
        return self._frozen


_STRING_ONLY = frozenset({SimpleType.STRING})
_NUMERIC = frozenset({SimpleType.NUMBER, SimpleType.INTEGER})


def default_format_validators() -> list[FormatValidator]:
    """The built-in formats."""
    return [
        FormatValidator("date-time", _STRING_ONLY, checks.is_date_time),
        FormatValidator("date", _STRING_ONLY, checks.is_date),
        FormatValidator("time", _STRING_ONLY, checks.is_time),
        FormatValidator("utc-millisec", _NUMERIC, checks.is_utc_millisec),
        FormatValidator("regex", _STRING_ONLY, checks.is_regex),
        FormatValidator("uri", _STRING_ONLY, checks.is_uri),
    ]


@lru_cache(maxsize=1)
def get_format_registry() -> FormatRegistry:
    """Process-wide registry holding the built-in formats."""
    return FormatRegistry(default_format_validators())


__all__ = [
    "FormatRegistry",
    "FormatValidator",
    "default_format_validators",
    "get_format_registry",
]
