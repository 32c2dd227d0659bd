"""
Repositorio para la entidad Ciudad.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import CiudadORM


class CiudadRepository(BaseRepository[CiudadORM]):
    """Repositorio para la entidad Ciudad."""

    resource_name = "Ciudad"

    def __init__(self, db: Session):
        super().__init__(db, CiudadORM)

    def find_by_provincia(self, provincia_id: int) -> List[CiudadORM]:
        return self.find_by(provincia_id=provincia_id)

    def find_by_nombre(self, nombre: str) -> Optional[CiudadORM]:
        return self._query().filter(func.lower(CiudadORM.nombre) == nombre.lower()).first()
