"""
Repositorio para la entidad AutoridadUTEQ.
Las autoridades son personas de la universidad con un cargo; su eliminación
es en cascada hacia el usuario y la persona asociados.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.db import CascadeStep, soft_delete_cascade, restore_cascade
from database.models import AutoridadUTEQORM, UsuarioORM, PersonaORM
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class AutoridadUTEQRepository(BaseRepository[AutoridadUTEQORM]):
    """Repositorio para la entidad AutoridadUTEQ."""

    resource_name = "Autoridad UTEQ"
    unique_fields = ("persona_id",)
    duplicate_codes = {"persona_id": "person_exists"}

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de autoridades.

        Args:
            db: Sesión de SQLAlchemy
        """
        super().__init__(db, AutoridadUTEQORM)

    def find_by_cargo(self, cargo: str) -> List[AutoridadUTEQORM]:
        """Autoridades cuyo cargo contiene el texto indicado (sin distinguir mayúsculas)."""
        return self.search("cargo", cargo)

    def find_by_persona(self, persona_id: int, include_deleted: bool = False) -> Optional[AutoridadUTEQORM]:
        return self.find_one_by(include_deleted=include_deleted, persona_id=persona_id)

    def count_by_persona(self, persona_id: int) -> int:
        """Cuenta autoridades de una persona, incluyendo las eliminadas."""
        return self.count(include_deleted=True, persona_id=persona_id)

    def get_all_including_deleted(self) -> List[AutoridadUTEQORM]:
        return self._all(self._query(include_deleted=True), "listar")

    def delete_cascade(self, autoridad: AutoridadUTEQORM) -> None:
        """
        Elimina (soft delete) la autoridad, los usuarios de su persona y la persona.

        Todo ocurre en una única transacción: si un paso falla no queda
        ningún registro modificado.

        Raises:
            NotFoundException: si la autoridad o su persona no existen
        """
        persona_id = autoridad.persona_id
        soft_delete_cascade(self.db, [
            CascadeStep(AutoridadUTEQORM, "id", autoridad.id),
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
            CascadeStep(PersonaORM, "id", persona_id),
        ])
        logger.info(f"Autoridad {autoridad.id} eliminada junto con la persona {persona_id}")

    def restore_cascade(self, autoridad: AutoridadUTEQORM) -> AutoridadUTEQORM:
        """Restaura persona → usuario(s) → autoridad en una sola transacción."""
        persona_id = autoridad.persona_id
        restore_cascade(self.db, [
            CascadeStep(PersonaORM, "id", persona_id),
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
            CascadeStep(AutoridadUTEQORM, "id", autoridad.id),
        ])
        try:
            return self.refresh(autoridad)
        except Exception as e:
            logger.error(f"Error refreshing AutoridadUTEQ {autoridad.id}: {e}")
            raise DatabaseException("Error al restaurar Autoridad UTEQ")
