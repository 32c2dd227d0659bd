"""
Servicio para la administración de códigos de recuperación.

La verificación de un código por su valor vive en ``AuthService.verify_codigo``.
Los estados solo avanzan: ``valido`` → ``verificado`` → ``expirado``.
"""

import logging
from datetime import datetime
from typing import Optional

from services.base_service import BaseService
from repositories.codigo_usuario_repository import (
    CodigoUsuarioRepository,
    ESTADO_VALIDO,
    ESTADO_VERIFICADO,
    ESTADO_EXPIRADO,
)
from repositories.usuario_repository import UsuarioRepository
from database.models import CodigoUsuarioORM
from core.exceptions import BusinessException, ForbiddenException, NotImplementedAppException
from core.validators import validate_codigo, raise_if_errors
from utils.datetime_utils import local_now_naive, to_naive_local

logger = logging.getLogger(__name__)

_ORDEN_ESTADOS = {ESTADO_VALIDO: 0, ESTADO_VERIFICADO: 1, ESTADO_EXPIRADO: 2}


def _vencido(expira_en: Optional[datetime]) -> bool:
    return expira_en is not None and local_now_naive() >= to_naive_local(expira_en)


class CodigoUsuarioService(BaseService[CodigoUsuarioORM, CodigoUsuarioRepository]):

    def __init__(self, repository: CodigoUsuarioRepository, usuario_repository: UsuarioRepository):
        super().__init__(repository)
        self.usuario_repo = usuario_repository

    def validate_create(self, data: dict) -> None:
        raise_if_errors(validate_codigo(data))
        data["codigo"] = data["codigo"].strip()
        self.usuario_repo.get_by_id_or_fail(data["usuario_id"])

    def validate_update(self, entity: CodigoUsuarioORM, data: dict) -> None:
        raise_if_errors(validate_codigo(data, is_update=True))
        nuevo = (data.get("estado") or "").strip()
        if nuevo and nuevo != entity.estado:
            data["estado"] = nuevo
            self._validar_transicion(entity, nuevo, data.get("expira_en", entity.expira_en))

    def _validar_transicion(
        self,
        registro: CodigoUsuarioORM,
        nuevo: str,
        expira_en: Optional[datetime],
    ) -> None:
        """
        Rechaza retrocesos de estado y la verificación de códigos vencidos.

        Raises:
            BusinessException: ``codigo_invalid_state``
        """
        if _ORDEN_ESTADOS[nuevo] < _ORDEN_ESTADOS.get(registro.estado, 0):
            raise BusinessException(
                f"Un código en estado '{registro.estado}' no puede pasar a '{nuevo}'",
                error_code="codigo_invalid_state",
                details={"estado": registro.estado},
            )
        if nuevo == ESTADO_VERIFICADO and _vencido(expira_en):
            raise BusinessException(
                "El código ha expirado y no puede verificarse",
                error_code="codigo_invalid_state",
                details={"estado": registro.estado},
            )

    def listar(self) -> None:
        raise ForbiddenException("El listado de códigos está deshabilitado por seguridad")

    def get_by_usuario(self, usuario_id: int) -> None:
        raise NotImplementedAppException("La consulta de códigos por usuario no está disponible")

    def verificar(self, id: int) -> CodigoUsuarioORM:
        """Marca como ``verificado`` un código que sigue ``valido`` y vigente."""
        registro = self.get_by_id_or_fail(id)
        if registro.estado != ESTADO_VALIDO:
            raise BusinessException(
                f"Solo se pueden verificar códigos en estado '{ESTADO_VALIDO}'",
                error_code="codigo_invalid_state",
                details={"estado": registro.estado},
            )
        self._validar_transicion(registro, ESTADO_VERIFICADO, registro.expira_en)
        verificado = self.repository.marcar_como_verificado(registro)
        self.repository.commit()
        return self.repository.refresh(verificado)

    def expirar(self, id: int) -> CodigoUsuarioORM:
        registro = self.get_by_id_or_fail(id)
        expirado = self.repository.marcar_como_expirado(registro)
        self.repository.commit()
        logger.info(f"Código {id} marcado como expirado")
        return self.repository.refresh(expirado)
