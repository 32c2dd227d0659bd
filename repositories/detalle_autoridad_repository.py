"""
Repositorio para la relación autoridad ↔ programa de visita.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.db import soft_delete_cascade, CascadeStep
from database.models import DetalleAutoridadDetallesVisitaORM

logger = logging.getLogger(__name__)


class DetalleAutoridadRepository(BaseRepository[DetalleAutoridadDetallesVisitaORM]):
    """Repositorio para DetalleAutoridadDetallesVisita."""

    resource_name = "Detalle de autoridad"

    def __init__(self, db: Session):
        super().__init__(db, DetalleAutoridadDetallesVisitaORM)

    def find_by_programa(self, programa_visita_id: int) -> List[DetalleAutoridadDetallesVisitaORM]:
        return self.find_by(programa_visita_id=programa_visita_id)

    def find_by_autoridad(self, autoridad_uteq_id: int) -> List[DetalleAutoridadDetallesVisitaORM]:
        return self.find_by(autoridad_uteq_id=autoridad_uteq_id)

    def delete_by_programa(self, programa_visita_id: int) -> int:
        """
        Soft delete de todas las asignaciones de un programa de visita.

        Returns:
            Número de registros eliminados
        """
        total = len(self.find_by_programa(programa_visita_id))
        soft_delete_cascade(self.db, [
            CascadeStep(DetalleAutoridadDetallesVisitaORM, "programa_visita_id", programa_visita_id, required=False),
        ])
        logger.info(f"{total} asignaciones eliminadas del programa {programa_visita_id}")
        return total
