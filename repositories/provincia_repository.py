"""
Repositorio para la entidad Provincia.
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import ProvinciaORM


class ProvinciaRepository(BaseRepository[ProvinciaORM]):
    """Repositorio para la entidad Provincia."""

    resource_name = "Provincia"
    unique_fields = ("nombre",)

    def __init__(self, db: Session):
        super().__init__(db, ProvinciaORM)

    def find_by_nombre(self, nombre: str) -> Optional[ProvinciaORM]:
        return self._query().filter(func.lower(ProvinciaORM.nombre) == nombre.lower()).first()
