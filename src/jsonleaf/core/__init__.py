"""
jsonleaf Core - Validación de valores JSON primitivos

Componentes:
- type_tag: Tipos primitivos (string, number, integer, boolean, null, any)
- format_registry: Registro central de formatos semánticos
- simple_type_schema: Validador de un tipo con restricciones
- schema_validator: Reporte de errores y validación con excepción

Composite schemas (objects, arrays, unions) live outside this package and call
into ``SimpleTypeSchema``.
"""
