"""
Repositorio para la entidad Dudas (preguntas de estudiantes).
"""

from typing import List
from sqlalchemy import or_
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import DudasORM


class DudasRepository(BaseRepository[DudasORM]):
    """Repositorio para la entidad Dudas."""

    resource_name = "Duda"

    def __init__(self, db: Session):
        super().__init__(db, DudasORM)

    def find_by_estudiante(self, estudiante_id: int) -> List[DudasORM]:
        return self.find_by(estudiante_id=estudiante_id)

    def find_by_autoridad(self, autoridad_uteq_id: int) -> List[DudasORM]:
        return self.find_by(autoridad_uteq_id=autoridad_uteq_id)

    def find_sin_responder(self) -> List[DudasORM]:
        """Dudas con respuesta nula o vacía."""
        query = self._query().filter(or_(DudasORM.respuesta.is_(None), DudasORM.respuesta == ""))
        return self._all(query, "buscar")

    def find_respondidas(self) -> List[DudasORM]:
        query = self._query().filter(DudasORM.respuesta.isnot(None), DudasORM.respuesta != "")
        return self._all(query, "buscar")

    def find_sin_asignar(self) -> List[DudasORM]:
        query = self._query().filter(DudasORM.autoridad_uteq_id.is_(None))
        return self._all(query, "buscar")

    def buscar_en_pregunta(self, termino: str) -> List[DudasORM]:
        return self.search("pregunta", termino)
