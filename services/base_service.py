"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic, List, Optional
import logging

from repositories.base_repository import BaseRepository
from core.exceptions import BusinessException
from core.pagination import calculate_skip

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar('T')  # ORM Model
R = TypeVar('R', bound=BaseRepository)  # Repository


class BaseService(Generic[T, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.

    Los datos de entrada llegan como ``dict`` (``model_dump`` del esquema
    pydantic); en actualizaciones solo se aplican los campos enviados.
    """

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: instancia del repositorio de la entidad
        """
        self.repository = repository

    @property
    def resource_name(self) -> str:
        return self.repository.resource_name

    def get_by_id_or_fail(self, id: int, include_deleted: bool = False) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: si la entidad no existe
        """
        return self.repository.get_by_id_or_fail(id, include_deleted=include_deleted)

    def get_all(
        self,
        page: int = 0,
        page_size: int = 50,
        include_deleted: bool = False,
        order_by: Optional[str] = None,
        order_desc: bool = False
    ) -> tuple[List[T], int]:
        """
        Obtiene todas las entidades con paginación.

        Args:
            page: Número de página (0-indexed)
            page_size: Items por página
            include_deleted: Si se deben incluir los registros eliminados
            order_by: Campo por el cual ordenar
            order_desc: Si se debe ordenar en orden descendente

        Returns:
            Tupla (lista de entidades, total)
        """
        skip = calculate_skip(page, page_size)

        items = self.repository.get_all(
            skip=skip,
            limit=page_size,
            include_deleted=include_deleted,
            order_by=order_by,
            order_desc=order_desc
        )
        total_count = self.repository.count(include_deleted=include_deleted)

        return items, total_count

    def create(self, data: dict) -> T:
        """Crea la entidad a partir de ``data`` y hace commit."""
        self.validate_create(data)
        entity = self.repository.model_class(**data)
        created = self.repository.create(entity)
        self.repository.commit()
        logger.info(f"{self.resource_name} {created.id} creado")
        return self.repository.refresh(created)

    def update(self, id: int, data: dict) -> T:
        """
        Actualiza los campos enviados de una entidad activa.

        Raises:
            NotFoundException: si la entidad no existe o está eliminada
        """
        entity = self.get_by_id_or_fail(id)
        self.validate_update(entity, data)
        updated = self.repository.update(entity, data)
        self.repository.commit()
        logger.info(f"{self.resource_name} {id} actualizado")
        return self.repository.refresh(updated)

    def delete(self, id: int) -> None:
        """
        Elimina (soft delete) una entidad activa.

        Raises:
            NotFoundException: si la entidad no existe o ya está eliminada
        """
        entity = self.get_by_id_or_fail(id)
        self.repository.delete(entity)
        self.repository.commit()
        logger.info(f"{self.resource_name} {id} eliminado")

    def restore(self, id: int) -> T:
        """
        Restaura una entidad eliminada.

        Raises:
            NotFoundException: si la entidad no existe
            BusinessException: si la entidad no está eliminada
        """
        entity = self.get_by_id_or_fail(id, include_deleted=True)
        self.validate_deleted(entity)
        restored = self.repository.restore(entity)
        self.repository.commit()
        logger.info(f"{self.resource_name} {id} restaurado")
        return self.repository.refresh(restored)

    def validate_create(self, data: dict) -> None:
        """Punto de extensión para validaciones previas a crear."""

    def validate_update(self, entity: T, data: dict) -> None:
        """Punto de extensión para validaciones previas a actualizar."""

    def validate_deleted(self, entity: T) -> None:
        if not entity.is_deleted:
            raise BusinessException(
                f"{self.resource_name} no está eliminado",
                error_code="NOT_DELETED",
            )
