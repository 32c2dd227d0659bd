"""
Servicio de lógica de negocio para Persona.

Valida cédula, correo, teléfono y fecha de nacimiento antes de persistir y
verifica la unicidad de cédula y correo (incluyendo personas eliminadas).
"""

from typing import List, Optional
import logging

from services.base_service import BaseService
from repositories.persona_repository import PersonaRepository
from database.models import PersonaORM
from core.exceptions import DuplicateException, NotFoundException
from core.validators import validate_persona, raise_if_errors, validate_search_term

logger = logging.getLogger(__name__)


class PersonaService(BaseService[PersonaORM, PersonaRepository]):
    """Servicio para la gestión de personas."""

    def validate_create(self, data: dict) -> None:
        _normalize(data)
        raise_if_errors(validate_persona(data))
        self._check_unique(data)

    def validate_update(self, entity: PersonaORM, data: dict) -> None:
        _normalize(data)
        raise_if_errors(validate_persona(data, is_update=True))
        self._check_unique(data, exclude_id=entity.id)

    def _check_unique(self, data: dict, exclude_id: Optional[int] = None) -> None:
        cedula = data.get("cedula")
        if cedula and self.repository.exists_cedula(cedula, exclude_id=exclude_id):
            raise DuplicateException(
                resource="Persona",
                field="cedula",
                value=cedula,
                error_code="duplicate_cedula",
                message="Ya existe una persona con esa cédula",
            )
        correo = data.get("correo")
        if correo and self.repository.exists_correo(correo, exclude_id=exclude_id):
            raise DuplicateException(
                resource="Persona",
                field="correo",
                value=correo,
                error_code="duplicate_email",
                message="Ya existe una persona con ese correo",
            )

    def get_by_cedula(self, cedula: str) -> PersonaORM:
        persona = self.repository.find_by_cedula(cedula.strip())
        if not persona:
            raise NotFoundException(resource="Persona", identifier=cedula)
        return persona

    def search_by_correo(self, correo: str) -> List[PersonaORM]:
        return self.repository.find_by_correo(validate_search_term(correo, "correo"))


def _normalize(data: dict) -> None:
    for field in ("nombre", "cedula", "correo", "telefono"):
        if isinstance(data.get(field), str):
            data[field] = data[field].strip()
    # un correo vacío se guarda como NULL para no chocar con la restricción UNIQUE
    if "correo" in data and not data["correo"]:
        data["correo"] = None
