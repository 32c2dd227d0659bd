"""
Repositorio para la entidad ProgramaVisita.
"""

from datetime import date, datetime, time, timedelta
from typing import List
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import ProgramaVisitaORM
from utils.datetime_utils import day_bounds


class ProgramaVisitaRepository(BaseRepository[ProgramaVisitaORM]):
    """Repositorio para la entidad ProgramaVisita."""

    resource_name = "Programa de visita"

    def __init__(self, db: Session):
        super().__init__(db, ProgramaVisitaORM)

    def find_by_fecha(self, dia: date) -> List[ProgramaVisitaORM]:
        """Programas del día indicado: ``[dia 00:00, dia+1 00:00)``."""
        start, end = day_bounds(dia)
        query = self._query().filter(
            ProgramaVisitaORM.fecha >= start,
            ProgramaVisitaORM.fecha < end,
        )
        return self._all(query, "buscar por fecha")

    def find_by_autoridad(self, autoridad_uteq_id: int) -> List[ProgramaVisitaORM]:
        return self.find_by(autoridad_uteq_id=autoridad_uteq_id)

    def find_by_institucion(self, institucion_id: int) -> List[ProgramaVisitaORM]:
        return self.find_by(institucion_id=institucion_id)

    def find_by_rango_fecha(self, inicio: date, fin: date) -> List[ProgramaVisitaORM]:
        """
        Programas entre ``inicio`` y ``fin``, ambos días incluidos.
        """
        start = datetime.combine(inicio, time.min)
        end = datetime.combine(fin, time.min) + timedelta(days=1)
        query = self._query().filter(
            ProgramaVisitaORM.fecha >= start,
            ProgramaVisitaORM.fecha < end,
        )
        return self._all(query, "buscar por rango de fechas")
