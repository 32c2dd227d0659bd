"""
Servicios para tipos de usuario y cuentas de usuario.

Las cuentas se crean con la contraseña hasheada con bcrypt y nunca la
exponen en las respuestas.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.usuario_repository import UsuarioRepository
from repositories.tipo_usuario_repository import TipoUsuarioRepository
from repositories.persona_repository import PersonaRepository
from database.models import UsuarioORM, TipoUsuarioORM
from core.exceptions import DuplicateException, NotFoundException
from core.security import hash_password
from core.validators import validate_search_term

logger = logging.getLogger(__name__)


class TipoUsuarioService(BaseService[TipoUsuarioORM, TipoUsuarioRepository]):
    """Servicio para los tipos de usuario (roles)."""

    def validate_create(self, data: dict) -> None:
        if self.repository.find_by_nombre(data["nombre"]):
            raise DuplicateException(resource="Tipo de usuario", field="nombre", value=data["nombre"])

    def get_by_nombre(self, nombre: str) -> TipoUsuarioORM:
        tipo = self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))
        if not tipo:
            raise NotFoundException(resource="Tipo de usuario", identifier=nombre)
        return tipo


class UsuarioService(BaseService[UsuarioORM, UsuarioRepository]):
    """Servicio para la gestión administrativa de usuarios."""

    def __init__(
        self,
        repository: UsuarioRepository,
        persona_repository: PersonaRepository,
        tipo_usuario_repository: TipoUsuarioRepository,
    ):
        """
        Args:
            repository: UsuarioRepository
            persona_repository: para verificar la persona asociada
            tipo_usuario_repository: para verificar el tipo de usuario
        """
        super().__init__(repository)
        self.persona_repo = persona_repository
        self.tipo_repo = tipo_usuario_repository

    def validate_create(self, data: dict) -> None:
        self._check_username(data["usuario"])
        self.persona_repo.get_by_id_or_fail(data["persona_id"])
        self.tipo_repo.get_by_id_or_fail(data["tipo_usuario_id"])
        data["contrasena"] = hash_password(data["contrasena"])

    def validate_update(self, entity: UsuarioORM, data: dict) -> None:
        if data.get("usuario") and data["usuario"] != entity.usuario:
            self._check_username(data["usuario"], exclude_id=entity.id)
        if data.get("tipo_usuario_id"):
            self.tipo_repo.get_by_id_or_fail(data["tipo_usuario_id"])

    def _check_username(self, username: str, exclude_id: int = None) -> None:
        if self.repository.username_exists(username, exclude_id=exclude_id):
            raise DuplicateException(
                resource="Usuario",
                field="usuario",
                value=username,
                error_code="duplicate_username",
                message="El nombre de usuario ya existe",
            )

    def get_by_username(self, username: str) -> UsuarioORM:
        usuario = self.repository.find_by_username(validate_search_term(username, "username"))
        if not usuario:
            raise NotFoundException(resource="Usuario", identifier=username)
        return usuario

    def get_by_tipo(self, tipo_usuario_id: int) -> List[UsuarioORM]:
        return self.repository.find_by_tipo(tipo_usuario_id)

    def get_by_persona(self, persona_id: int) -> List[UsuarioORM]:
        return self.repository.find_by_persona(persona_id)
