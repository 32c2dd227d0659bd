"""
Repositorio para la entidad TipoUsuario (roles).
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import TipoUsuarioORM


class TipoUsuarioRepository(BaseRepository[TipoUsuarioORM]):
    """Repositorio para la entidad TipoUsuario."""

    resource_name = "Tipo de usuario"
    unique_fields = ("nombre",)

    def __init__(self, db: Session):
        super().__init__(db, TipoUsuarioORM)

    def find_by_nombre(self, nombre: str) -> Optional[TipoUsuarioORM]:
        """Busca un tipo de usuario por nombre sin distinguir mayúsculas."""
        return self._query().filter(func.lower(TipoUsuarioORM.nombre) == nombre.lower()).first()
