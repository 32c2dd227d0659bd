"""
Repositorio para la entidad Tematica.
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import TematicaORM


class TematicaRepository(BaseRepository[TematicaORM]):
    """Repositorio para la entidad Tematica."""

    resource_name = "Temática"

    def __init__(self, db: Session):
        super().__init__(db, TematicaORM)

    def find_by_nombre(self, nombre: str) -> List[TematicaORM]:
        return self.search("nombre", nombre)

    def find_by_descripcion(self, descripcion: str) -> List[TematicaORM]:
        return self.search("descripcion", descripcion)
