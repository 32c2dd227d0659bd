"""
Repositorio para la entidad Institucion (colegios visitados).
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import InstitucionORM


class InstitucionRepository(BaseRepository[InstitucionORM]):
    """Repositorio para la entidad Institucion."""

    resource_name = "Institución"

    def __init__(self, db: Session):
        super().__init__(db, InstitucionORM)

    def find_by_nombre(self, nombre: str) -> List[InstitucionORM]:
        return self.search("nombre", nombre)

    def find_by_autoridad(self, autoridad: str) -> List[InstitucionORM]:
        return self.search("autoridad", autoridad)
