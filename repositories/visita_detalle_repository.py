"""
Repositorio para la entidad VisitaDetalle.
"""

from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import VisitaDetalleORM
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class VisitaDetalleRepository(BaseRepository[VisitaDetalleORM]):
    """Repositorio para la entidad VisitaDetalle."""

    resource_name = "Detalle de visita"

    def __init__(self, db: Session):
        super().__init__(db, VisitaDetalleORM)

    def find_by_actividad(self, actividad_id: int) -> List[VisitaDetalleORM]:
        return self.find_by(actividad_id=actividad_id)

    def find_by_programa(self, programa_visita_id: int) -> List[VisitaDetalleORM]:
        return self.find_by(programa_visita_id=programa_visita_id)

    def find_by_estudiante(self, estudiante_universitario_id: int) -> List[VisitaDetalleORM]:
        return self.find_by(estudiante_universitario_id=estudiante_universitario_id)

    def find_by_participantes(self, minimo: int, maximo: int) -> List[VisitaDetalleORM]:
        return self.find_between("participantes", minimo, maximo)

    def estadisticas(self) -> dict:
        """
        Totales de visitas y participantes en una sola consulta agregada.

        Returns:
            dict con total_visitas, total_participantes y promedio_participantes
        """
        try:
            total_visitas, total_participantes = (
                self.db.query(
                    func.count(VisitaDetalleORM.id),
                    func.coalesce(func.sum(VisitaDetalleORM.participantes), 0),
                )
                .filter(VisitaDetalleORM.deleted_at.is_(None))
                .one()
            )
        except Exception as e:
            logger.error(f"Error calculando estadisticas de visitas: {e}")
            raise DatabaseException("Error al calcular estadísticas de visitas")

        total_participantes = int(total_participantes or 0)
        promedio = round(total_participantes / total_visitas, 2) if total_visitas else 0.0
        return {
            "total_visitas": total_visitas,
            "total_participantes": total_participantes,
            "promedio_participantes": promedio,
        }
