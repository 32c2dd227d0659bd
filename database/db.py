"""módulo de base de datos: engine, sesiones, unidad de trabajo y soft delete en cascada."""
from contextlib import contextmanager
from typing import Any, Generator, Iterator, NamedTuple, Optional, Sequence, Type
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

# import ORM classes and Base from models.py
from .models import (
    Base,
    ProvinciaORM,
    CiudadORM,
    PersonaORM,
    TipoUsuarioORM,
    UsuarioORM,
    CodigoUsuarioORM,
    InstitucionORM,
    EstudianteORM,
    EstudianteUniversitarioORM,
    AutoridadUTEQORM,
    TematicaORM,
    ActividadORM,
    ProgramaVisitaORM,
    DetalleAutoridadDetallesVisitaORM,
    VisitaDetalleORM,
    DudasORM,
)

#import configuration
from config import settings
from core.exceptions import NotFoundException
from utils.datetime_utils import local_now_naive

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  #verifica conexiones antes de usarlas
        "pool_recycle": 3600,   #recicla conexiones cada hora
    }


engine = create_engine(settings.database_url, echo=settings.debug_mode, **_engine_options())
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """dependencia de FastAPI que provee una sesión por request.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión al terminar el request
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crear tablas ORM en la base de datos.

    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error(f"Error al crear tablas: {e}", exc_info=True)
        raise


# ==================== Soft delete ====================

def soft_delete(obj) -> None:
    """marca un objeto como eliminado (soft delete)."""
    now = local_now_naive()
    obj.deleted_at = now
    obj.fecha_actualizacion = now


def restore_deleted(obj) -> None:
    """restaura un objeto previamente eliminado con soft delete."""
    obj.deleted_at = None
    obj.fecha_actualizacion = local_now_naive()


@contextmanager
def uow(session: Session) -> Iterator[Session]:
    """
    Unidad de trabajo sobre una sesión existente.

    Uso:
        with uow(db):
            ... # operaciones
        # commit si todo salió bien, rollback ante cualquier excepción
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


class CascadeStep(NamedTuple):
    """Una entidad a marcar/desmarcar: filas de ``model`` donde ``column == value``."""
    model: Type[Any]
    column: str
    value: Any
    required: bool = True


def _apply_step(db: Session, step: CascadeStep, deleted_at: Optional[Any]) -> int:
    column = getattr(step.model, step.column)
    existing = db.query(step.model).filter(column == step.value).count()
    if step.required and existing == 0:
        raise NotFoundException(resource=step.model.__name__.replace("ORM", ""), identifier=str(step.value))

    query = db.query(step.model).filter(column == step.value)
    if deleted_at is None:
        query = query.filter(step.model.deleted_at.isnot(None))
    else:
        query = query.filter(step.model.deleted_at.is_(None))
    return query.update(
        {step.model.deleted_at: deleted_at, step.model.fecha_actualizacion: local_now_naive()},
        synchronize_session=False,
    )


def soft_delete_cascade(db: Session, steps: Sequence[CascadeStep]) -> None:
    """
    Marca como eliminadas, en orden y en una sola transacción, las entidades indicadas.

    Si algún paso requerido no encuentra su registro o falla la base de datos,
    se hace rollback y ningún registro queda modificado.
    """
    now = local_now_naive()
    with uow(db):
        for step in steps:
            affected = _apply_step(db, step, now)
            logger.debug(f"soft delete {step.model.__name__}.{step.column}={step.value}: {affected} filas")
    db.expire_all()


def restore_cascade(db: Session, steps: Sequence[CascadeStep]) -> None:
    """Limpia ``deleted_at`` en el orden indicado dentro de una sola transacción."""
    with uow(db):
        for step in steps:
            affected = _apply_step(db, step, None)
            logger.debug(f"restore {step.model.__name__}.{step.column}={step.value}: {affected} filas")
    db.expire_all()
