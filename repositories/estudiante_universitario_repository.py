"""
Repositorio para la entidad EstudianteUniversitario.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import EstudianteUniversitarioORM


class EstudianteUniversitarioRepository(BaseRepository[EstudianteUniversitarioORM]):
    """Repositorio para la entidad EstudianteUniversitario."""

    resource_name = "Estudiante universitario"
    unique_fields = ("persona_id",)
    duplicate_codes = {"persona_id": "person_exists"}

    def __init__(self, db: Session):
        super().__init__(db, EstudianteUniversitarioORM)

    def find_by_semestre(self, semestre: int) -> List[EstudianteUniversitarioORM]:
        return self.find_by(semestre=semestre)

    def find_by_persona(self, persona_id: int) -> Optional[EstudianteUniversitarioORM]:
        return self.find_one_by(persona_id=persona_id)
