"""
Servicio de lógica de negocio para AutoridadUTEQ.

Eliminar una autoridad elimina también los usuarios de su persona y la
persona, todo en una misma transacción. La restauración recorre el camino
inverso.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.autoridad_uteq_repository import AutoridadUTEQRepository
from repositories.persona_repository import PersonaRepository
from database.models import AutoridadUTEQORM
from core.exceptions import DuplicateException, NotFoundException
from core.validators import validate_cargo, raise_if_errors, validate_search_term

logger = logging.getLogger(__name__)


class AutoridadUTEQService(BaseService[AutoridadUTEQORM, AutoridadUTEQRepository]):
    """Servicio para la gestión de autoridades UTEQ."""

    def __init__(self, repository: AutoridadUTEQRepository, persona_repository: PersonaRepository):
        super().__init__(repository)
        self.persona_repo = persona_repository

    def validate_create(self, data: dict) -> None:
        data["cargo"] = (data.get("cargo") or "").strip()
        raise_if_errors(validate_cargo(data["cargo"]))
        self.persona_repo.get_by_id_or_fail(data["persona_id"])
        if self.repository.count_by_persona(data["persona_id"]) > 0:
            raise DuplicateException(
                resource="Autoridad UTEQ",
                field="persona_id",
                value=str(data["persona_id"]),
                error_code="person_exists",
                message="La persona ya está registrada como autoridad UTEQ",
            )

    def validate_update(self, entity: AutoridadUTEQORM, data: dict) -> None:
        if "cargo" in data:
            data["cargo"] = (data.get("cargo") or "").strip()
            raise_if_errors(validate_cargo(data["cargo"]))

    def get_by_cargo(self, cargo: str) -> List[AutoridadUTEQORM]:
        return self.repository.find_by_cargo(validate_search_term(cargo, "cargo"))

    def get_by_persona(self, persona_id: int) -> AutoridadUTEQORM:
        autoridad = self.repository.find_by_persona(persona_id)
        if not autoridad:
            raise NotFoundException(resource="Autoridad UTEQ", identifier=f"persona {persona_id}")
        return autoridad

    def get_all_including_deleted(self) -> List[AutoridadUTEQORM]:
        return self.repository.get_all_including_deleted()

    def get_deleted(self) -> List[AutoridadUTEQORM]:
        return self.repository.get_deleted()

    def delete(self, id: int) -> None:
        """Soft delete en cascada: autoridad → usuario(s) → persona."""
        autoridad = self.get_by_id_or_fail(id)
        self.repository.delete_cascade(autoridad)

    def restore(self, id: int) -> AutoridadUTEQORM:
        """
        Restaura persona → usuario(s) → autoridad.

        Raises:
            BusinessException: si la autoridad no está eliminada
        """
        autoridad = self.get_by_id_or_fail(id, include_deleted=True)
        self.validate_deleted(autoridad)
        return self.repository.restore_cascade(autoridad)
