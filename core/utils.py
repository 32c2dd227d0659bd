"""
Funciones de utilidad generales.

Incluye la clasificación de errores de integridad del driver de base de datos,
usada por los repositorios para distinguir duplicados de otros fallos.
"""

from typing import Optional, Iterable

from sqlalchemy.exc import IntegrityError

# SQLSTATE de PostgreSQL
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    # psycopg2 expone pgcode, psycopg 3 expone sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Determina si un IntegrityError corresponde a una restricción UNIQUE.

    Args:
        exc: Error lanzado por SQLAlchemy

    Returns:
        True si el driver reporta una violación de unicidad
    """
    if _sqlstate(exc) == PG_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(getattr(exc, "orig", exc))


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """Determina si un IntegrityError corresponde a una llave foránea inexistente."""
    if _sqlstate(exc) == PG_FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(getattr(exc, "orig", exc))


def violated_field(exc: IntegrityError, candidates: Iterable[str]) -> Optional[str]:
    """
    Devuelve el primer campo candidato mencionado en el mensaje del driver.

    PostgreSQL nombra la restricción (``personas_cedula_key``) y SQLite la
    columna (``personas.cedula``); ambos contienen el nombre del campo.
    """
    text = str(getattr(exc, "orig", exc)).lower()
    for field in candidates:
        if field.lower() in text:
            return field
    return None
