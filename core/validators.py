"""
Validadores por entidad que se ejecutan antes de persistir.

Cada validador devuelve la lista completa de errores ``{field, message, value}``
en lugar de fallar en la primera violación; ``raise_if_errors`` la convierte en
una ``ValidationException``.
"""

import re
from datetime import date, datetime
from typing import Any, List, Optional

from dateutil.relativedelta import relativedelta

from core.exceptions import ValidationException
from utils.datetime_utils import local_now_naive, to_naive_local

CEDULA_REGEX = re.compile(r"^\d{10}$")
CORREO_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
TELEFONO_REGEX = re.compile(r"^[\d\s\-\+\(\)]{7,15}$")
CARGO_REGEX = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑüÜ\s\-\.]+$")
CODIGO_REGEX = re.compile(r"^\d{6}$")

ESTADOS_CODIGO = ("valido", "verificado", "expirado")


def field_error(field: str, message: str, value: Any = None) -> dict:
    return {"field": field, "message": message, "value": "" if value is None else str(value)}


def raise_if_errors(errors: List[dict], message: str = "Los datos enviados no son válidos") -> None:
    if errors:
        raise ValidationException(message=message, errors=errors)


# ==================== Persona ====================

def validate_persona(data: dict, is_update: bool = False) -> List[dict]:
    """
    Valida los datos de una persona.

    En actualizaciones solo se validan los campos presentes en ``data``.

    Args:
        data: Campos de la persona
        is_update: True si se trata de una actualización parcial

    Returns:
        Lista de errores de campo (vacía si todo es válido)
    """
    errors: List[dict] = []

    if not is_update or "nombre" in data:
        nombre = (data.get("nombre") or "").strip()
        if not nombre:
            errors.append(field_error("nombre", "El nombre es requerido", data.get("nombre")))
        elif len(nombre) < 2 or len(nombre) > 100:
            errors.append(field_error("nombre", "El nombre debe tener entre 2 y 100 caracteres", nombre))

    if not is_update or "cedula" in data:
        cedula = (data.get("cedula") or "").strip()
        if not cedula:
            errors.append(field_error("cedula", "La cédula es requerida", data.get("cedula")))
        elif not CEDULA_REGEX.match(cedula):
            errors.append(field_error("cedula", "La cédula debe tener exactamente 10 dígitos numéricos", cedula))

    correo = data.get("correo")
    if correo:
        correo = correo.strip()
        if len(correo) > 255:
            errors.append(field_error("correo", "El correo no puede exceder 255 caracteres", correo))
        elif not CORREO_REGEX.match(correo):
            errors.append(field_error("correo", "El formato del correo electrónico no es válido", correo))

    telefono = data.get("telefono")
    if telefono:
        if not TELEFONO_REGEX.match(telefono.strip()):
            errors.append(field_error(
                "telefono",
                "El teléfono debe tener entre 7 y 15 caracteres (dígitos, espacios, +, -, paréntesis)",
                telefono,
            ))

    fecha_nacimiento = data.get("fecha_nacimiento")
    if fecha_nacimiento:
        errors.extend(_validate_fecha_nacimiento(fecha_nacimiento))

    return errors


def _validate_fecha_nacimiento(value: date) -> List[dict]:
    if isinstance(value, datetime):
        value = value.date()
    today = local_now_naive().date()
    if value > today:
        return [field_error("fecha_nacimiento", "La fecha de nacimiento no puede ser futura", value.isoformat())]
    if value > today - relativedelta(years=1):
        return [field_error("fecha_nacimiento", "La persona debe tener al menos 1 año de edad", value.isoformat())]
    if value < today - relativedelta(years=150):
        return [field_error(
            "fecha_nacimiento", "La fecha de nacimiento no puede ser de hace más de 150 años", value.isoformat()
        )]
    return []


# ==================== Autoridad UTEQ ====================

def validate_cargo(cargo: Optional[str]) -> List[dict]:
    """Valida el cargo de una autoridad: 2-100 caracteres, solo letras, espacios, guiones y puntos."""
    cargo = (cargo or "").strip()
    if not cargo:
        return [field_error("cargo", "El cargo es requerido", cargo)]
    if len(cargo) < 2 or len(cargo) > 100:
        return [field_error("cargo", "El cargo debe tener entre 2 y 100 caracteres", cargo)]
    if not CARGO_REGEX.match(cargo):
        return [field_error("cargo", "El cargo solo puede contener letras, espacios, guiones y puntos", cargo)]
    return []


def validate_search_term(term: Optional[str], field: str = "termino") -> str:
    """Valida un término de búsqueda (mínimo 2 caracteres) y lo devuelve recortado."""
    term = (term or "").strip()
    if len(term) < 2:
        raise ValidationException(
            message="El término de búsqueda debe tener al menos 2 caracteres",
            field=field,
            value=term,
        )
    return term


# ==================== Códigos de usuario ====================

def validate_codigo_string(codigo: Optional[str]) -> List[dict]:
    codigo = (codigo or "").strip()
    if not codigo:
        return [field_error("codigo", "El código es requerido", codigo)]
    if not CODIGO_REGEX.match(codigo):
        return [field_error("codigo", "El código debe tener exactamente 6 dígitos numéricos", codigo)]
    return []


def validate_codigo(data: dict, is_update: bool = False) -> List[dict]:
    """
    Valida los datos de un código de usuario.

    - usuario_id requerido
    - codigo de 6 dígitos
    - estado en (valido, verificado, expirado)
    - expira_en, si viene, no más de 1 año en el pasado ni más de 1 día en el futuro
    """
    errors: List[dict] = []

    if not is_update or "usuario_id" in data:
        if not data.get("usuario_id"):
            errors.append(field_error("usuario_id", "El ID del usuario es requerido", data.get("usuario_id")))

    if not is_update or "codigo" in data:
        errors.extend(validate_codigo_string(data.get("codigo")))

    if not is_update or "estado" in data:
        estado = (data.get("estado") or "").strip()
        if not estado:
            errors.append(field_error("estado", "El estado es requerido", estado))
        elif estado not in ESTADOS_CODIGO:
            errors.append(field_error("estado", "El estado debe ser uno de: valido, verificado, expirado", estado))

    expira_en = data.get("expira_en")
    if expira_en is not None:
        expira_en = to_naive_local(expira_en)
        now = local_now_naive()
        formatted = expira_en.strftime("%Y-%m-%d %H:%M:%S")
        if expira_en < now - relativedelta(years=1):
            errors.append(field_error(
                "expira_en", "La fecha de expiración no puede ser de hace más de 1 año", formatted
            ))
        if expira_en > now + relativedelta(days=1):
            errors.append(field_error(
                "expira_en", "La fecha de expiración no puede ser de más de 1 día en el futuro", formatted
            ))

    return errors
