"""
Repositorio para los códigos de recuperación de contraseña (CodigoUsuario).

Estados posibles: ``valido`` → ``verificado`` → ``expirado``.
"""

from datetime import timedelta
from typing import Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import CodigoUsuarioORM
from core.exceptions import DatabaseException
from utils.datetime_utils import local_now_naive

logger = logging.getLogger(__name__)

ESTADO_VALIDO = "valido"
ESTADO_VERIFICADO = "verificado"
ESTADO_EXPIRADO = "expirado"


class CodigoUsuarioRepository(BaseRepository[CodigoUsuarioORM]):
    """Repositorio para la entidad CodigoUsuario."""

    resource_name = "Código"

    def __init__(self, db: Session):
        super().__init__(db, CodigoUsuarioORM)

    def crear(self, usuario_id: int, codigo: str, expira_minutos: int) -> CodigoUsuarioORM:
        """
        Registra un nuevo código en estado ``valido``.

        Args:
            usuario_id: dueño del código
            codigo: código numérico de 6 dígitos
            expira_minutos: minutos de vigencia desde ahora
        """
        registro = CodigoUsuarioORM(
            usuario_id=usuario_id,
            codigo=codigo,
            estado=ESTADO_VALIDO,
            expira_en=local_now_naive() + timedelta(minutes=expira_minutos),
        )
        return self.create(registro)

    def existe_vigente_por_usuario(self, usuario_id: int) -> bool:
        """True si el usuario tiene un código ``valido`` que aún no expira."""
        try:
            return (
                self._query()
                .filter(
                    CodigoUsuarioORM.usuario_id == usuario_id,
                    CodigoUsuarioORM.estado == ESTADO_VALIDO,
                    CodigoUsuarioORM.expira_en > local_now_naive(),
                )
                .count()
                > 0
            )
        except Exception as e:
            logger.error(f"Error consultando códigos vigentes del usuario {usuario_id}: {e}")
            raise DatabaseException("Error al consultar códigos vigentes")

    def find_latest_by_codigo(self, codigo: str) -> Optional[CodigoUsuarioORM]:
        """El registro más reciente con ese código."""
        try:
            return (
                self._query()
                .filter(CodigoUsuarioORM.codigo == codigo)
                .order_by(desc(CodigoUsuarioORM.fecha_creacion), desc(CodigoUsuarioORM.id))
                .first()
            )
        except Exception as e:
            logger.error(f"Error buscando código: {e}")
            raise DatabaseException("Error al buscar código")

    def marcar_como_verificado(self, registro: CodigoUsuarioORM) -> CodigoUsuarioORM:
        return self.update(registro, {"estado": ESTADO_VERIFICADO})

    def marcar_como_expirado(self, registro: CodigoUsuarioORM) -> CodigoUsuarioORM:
        return self.update(registro, {"estado": ESTADO_EXPIRADO})
