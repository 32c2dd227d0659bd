"""
Repositorio para la entidad Estudiante (estudiantes de colegio).

La eliminación de un estudiante arrastra a su usuario y a su persona dentro
de una sola transacción.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.db import CascadeStep, soft_delete_cascade, restore_cascade
from database.models import EstudianteORM, UsuarioORM, PersonaORM
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class EstudianteRepository(BaseRepository[EstudianteORM]):
    """Repositorio para la entidad Estudiante."""

    resource_name = "Estudiante"
    unique_fields = ("persona_id",)
    duplicate_codes = {"persona_id": "person_exists"}

    def __init__(self, db: Session):
        super().__init__(db, EstudianteORM)

    def find_by_ciudad(self, ciudad_id: int) -> List[EstudianteORM]:
        return self.find_by(ciudad_id=ciudad_id)

    def find_by_institucion(self, institucion_id: int) -> List[EstudianteORM]:
        return self.find_by(institucion_id=institucion_id)

    def find_by_especialidad(self, especialidad: str) -> List[EstudianteORM]:
        return self.search("especialidad", especialidad)

    def find_by_persona(self, persona_id: int, include_deleted: bool = False) -> Optional[EstudianteORM]:
        return self.find_one_by(include_deleted=include_deleted, persona_id=persona_id)

    def get_all_including_deleted(self) -> List[EstudianteORM]:
        return self._all(self._query(include_deleted=True), "listar")

    def delete_cascade(self, estudiante: EstudianteORM) -> None:
        """
        Soft delete de estudiante → usuario(s) de la persona → persona.

        Raises:
            NotFoundException: si el estudiante o su persona ya no existen
        """
        persona_id = estudiante.persona_id
        soft_delete_cascade(self.db, [
            CascadeStep(EstudianteORM, "id", estudiante.id),
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
            CascadeStep(PersonaORM, "id", persona_id),
        ])
        logger.info(f"Estudiante {estudiante.id} eliminado junto con la persona {persona_id}")

    def restore_cascade(self, estudiante: EstudianteORM) -> EstudianteORM:
        """Restaura persona → usuario(s) → estudiante en una sola transacción."""
        persona_id = estudiante.persona_id
        restore_cascade(self.db, [
            CascadeStep(PersonaORM, "id", persona_id),
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
            CascadeStep(EstudianteORM, "id", estudiante.id),
        ])
        try:
            return self.refresh(estudiante)
        except Exception as e:
            logger.error(f"Error refreshing Estudiante {estudiante.id}: {e}")
            raise DatabaseException("Error al restaurar Estudiante")
