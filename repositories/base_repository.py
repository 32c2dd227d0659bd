"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades.

Las consultas por defecto excluyen los registros con soft delete
(``deleted_at`` no nulo); los métodos ``*_including_deleted`` y
``get_deleted`` permiten recuperarlos.
"""

from typing import TypeVar, Generic, List, Optional, Type, Any
from sqlalchemy.orm import Session, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy import desc, asc
import logging

from core.exceptions import (
    NotFoundException,
    DatabaseException,
    DuplicateException,
    BusinessException,
)
from core.utils import is_unique_violation, is_foreign_key_violation, violated_field
from database.db import soft_delete, restore_deleted

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico que proporciona operaciones CRUD estándar.

    Esta clase debe ser heredada por repositorios de entidades específicos.
    ``resource_name`` se usa en los mensajes de error y ``unique_fields``
    permite identificar qué campo provocó un duplicado.
    """

    resource_name: str = "Registro"
    unique_fields: tuple = ()
    duplicate_codes: dict = {}

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    # ==================== Consultas base ====================

    def _query(self, include_deleted: bool = False) -> Query:
        query = self.db.query(self.model_class)
        if not include_deleted:
            query = query.filter(self.model_class.deleted_at.is_(None))
        return query

    def _all(self, query: Query, action: str) -> List[T]:
        try:
            return query.order_by(asc(self.model_class.id)).all()
        except Exception as e:
            logger.error(f"Error {action} {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al {action} {self.resource_name}")

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad activa por su ID.

        Args:
            id: ID de la entidad

        Returns:
            La entidad o None si no existe o está eliminada
        """
        try:
            return self._query().filter(self.model_class.id == id).first()
        except Exception as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error al obtener {self.resource_name}")

    def get_by_id_including_deleted(self, id: int) -> Optional[T]:
        try:
            return self.db.get(self.model_class, id)
        except Exception as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error al obtener {self.resource_name}")

    def get_by_id_or_fail(self, id: int, include_deleted: bool = False) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.get_by_id_including_deleted(id) if include_deleted else self.get_by_id(id)
        if not entity:
            raise NotFoundException(resource=self.resource_name, identifier=str(id))
        return entity

    def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        include_deleted: bool = False,
        order_by: Optional[str] = None,
        order_desc: bool = False
    ) -> List[T]:
        """
        Obtiene todas las entidades con paginación.

        Args:
            skip: Número de registros a saltar
            limit: Número máximo de registros a devolver
            include_deleted: Si se incluyen los registros eliminados
            order_by: Campo por el cual ordenar (por defecto id)
            order_desc: Orden descendente

        Returns:
            Lista de entidades
        """
        try:
            query = self._query(include_deleted)
            order_field = getattr(self.model_class, order_by) if order_by and hasattr(self.model_class, order_by) \
                else self.model_class.id
            query = query.order_by(desc(order_field) if order_desc else asc(order_field))
            return query.offset(skip).limit(limit).all()
        except Exception as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al listar {self.resource_name}")

    def get_deleted(self) -> List[T]:
        """Lista solo los registros eliminados (soft delete)."""
        query = self.db.query(self.model_class).filter(self.model_class.deleted_at.isnot(None))
        return self._all(query, "listar eliminados de")

    def count(self, include_deleted: bool = False, **filters) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.

        Args:
            include_deleted: Si se incluyen los registros eliminados
            **filters: Filtros de igualdad adicionales

        Returns:
            Número de entidades
        """
        try:
            query = self._query(include_deleted)
            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)
            return query.count()
        except Exception as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al contar {self.resource_name}")

    # ==================== Búsquedas genéricas ====================

    def find_by(self, include_deleted: bool = False, **filters) -> List[T]:
        """Busca registros por igualdad de campos."""
        query = self._query(include_deleted)
        for field, value in filters.items():
            query = query.filter(getattr(self.model_class, field) == value)
        return self._all(query, "buscar")

    def find_one_by(self, include_deleted: bool = False, **filters) -> Optional[T]:
        results = self.find_by(include_deleted=include_deleted, **filters)
        return results[0] if results else None

    def search(self, field: str, term: str) -> List[T]:
        """Búsqueda parcial sin distinguir mayúsculas (ILIKE) sobre un campo de texto."""
        query = self._query().filter(getattr(self.model_class, field).ilike(f"%{term}%"))
        return self._all(query, "buscar")

    def find_between(self, field: str, minimum: Any, maximum: Any) -> List[T]:
        """Registros cuyo campo está en el rango cerrado [minimum, maximum]."""
        query = self._query().filter(getattr(self.model_class, field).between(minimum, maximum))
        return self._all(query, "filtrar")

    # ==================== Escritura ====================

    def _raise_integrity(self, e: IntegrityError) -> None:
        """Clasifica un IntegrityError del driver en una excepción de la aplicación."""
        if is_unique_violation(e):
            field = violated_field(e, self.unique_fields)
            raise DuplicateException(
                resource=self.resource_name,
                field=field,
                error_code=self.duplicate_codes.get(field, f"duplicate_{field}") if field else None,
                message=f"Ya existe un registro de {self.resource_name} con el mismo {field or 'valor único'}",
            )
        if is_foreign_key_violation(e):
            raise BusinessException(
                f"{self.resource_name} hace referencia a un registro inexistente",
                error_code="INVALID_REFERENCE",
            )
        raise DatabaseException(f"Error de integridad en {self.resource_name}")

    def _flush(self, entity: T, action: str) -> T:
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except IntegrityError as e:
            logger.warning(f"IntegrityError al {action} {self.model_class.__name__}: {e.orig}")
            self.db.rollback()
            self._raise_integrity(e)
        except Exception as e:
            logger.error(f"Error al {action} {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al {action} {self.resource_name}")

    def create(self, entity: T) -> T:
        """
        Crea una nueva entidad.

        Raises:
            DuplicateException: Si viola una restricción UNIQUE
            BusinessException: Si referencia un registro inexistente
        """
        return self._flush(entity, "crear")

    def update(self, entity: T, values: Optional[dict] = None) -> T:
        """
        Actualiza una entidad existente aplicando ``values`` si se indican.
        """
        for field, value in (values or {}).items():
            setattr(entity, field, value)
        return self._flush(entity, "actualizar")

    def delete(self, entity: T) -> None:
        """Marca la entidad como eliminada (soft delete)."""
        try:
            soft_delete(entity)
            self.db.add(entity)
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            self._raise_integrity(e)
        except Exception as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al eliminar {self.resource_name}")

    def restore(self, entity: T) -> T:
        """Restaura una entidad eliminada (soft delete)."""
        restore_deleted(entity)
        return self._flush(entity, "restaurar")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            self._raise_integrity(e)
        except Exception as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")

    def rollback(self) -> None:
        self.db.rollback()

    def refresh(self, entity: T) -> T:
        self.db.refresh(entity)
        return entity
