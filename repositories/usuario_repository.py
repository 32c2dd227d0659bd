"""
Repositorio para la entidad Usuario.
Gestiona las cuentas de acceso asociadas a una persona.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.db import CascadeStep, soft_delete_cascade
from database.models import UsuarioORM
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class UsuarioRepository(BaseRepository[UsuarioORM]):
    """Repositorio para la entidad Usuario."""

    resource_name = "Usuario"
    unique_fields = ("usuario",)
    duplicate_codes = {"usuario": "duplicate_username"}

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de usuarios.

        Args:
            db: Sesión de SQLAlchemy
        """
        super().__init__(db, UsuarioORM)

    def find_by_username(self, username: str) -> Optional[UsuarioORM]:
        """
        Busca un usuario activo por nombre de usuario.

        Args:
            username: nombre de usuario exacto

        Returns:
            El usuario o None si no existe o está eliminado
        """
        try:
            return self._query().filter(UsuarioORM.usuario == username).first()
        except Exception as e:
            logger.error(f"Error finding usuario by username {username}: {e}")
            raise DatabaseException("Error al buscar usuario por username")

    def find_by_username_including_deleted(self, username: str) -> Optional[UsuarioORM]:
        """Busca un usuario por nombre de usuario sin excluir los eliminados."""
        try:
            return self._query(include_deleted=True).filter(UsuarioORM.usuario == username).first()
        except Exception as e:
            logger.error(f"Error finding usuario by username {username}: {e}")
            raise DatabaseException("Error al buscar usuario por username")

    def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        query = self._query(include_deleted=True).filter(UsuarioORM.usuario == username)
        if exclude_id is not None:
            query = query.filter(UsuarioORM.id != exclude_id)
        return query.count() > 0

    def find_by_tipo(self, tipo_usuario_id: int) -> List[UsuarioORM]:
        return self.find_by(tipo_usuario_id=tipo_usuario_id)

    def find_by_persona(self, persona_id: int) -> List[UsuarioORM]:
        return self.find_by(persona_id=persona_id)

    def soft_delete_by_persona(self, persona_id: int) -> None:
        """Soft delete de todos los usuarios de una persona en una transacción."""
        soft_delete_cascade(self.db, [
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
        ])
