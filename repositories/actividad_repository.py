"""
Repositorio para la entidad Actividad.
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import ActividadORM


class ActividadRepository(BaseRepository[ActividadORM]):
    """Repositorio para la entidad Actividad."""

    resource_name = "Actividad"

    def __init__(self, db: Session):
        super().__init__(db, ActividadORM)

    def find_by_tematica(self, tematica_id: int) -> List[ActividadORM]:
        return self.find_by(tematica_id=tematica_id)

    def find_by_nombre(self, nombre: str) -> List[ActividadORM]:
        return self.search("nombre", nombre)

    def find_by_duracion(self, duracion_min: int, duracion_max: int) -> List[ActividadORM]:
        """
        Actividades cuya duración (minutos) está en el rango cerrado
        [duracion_min, duracion_max].
        """
        return self.find_between("duracion", duracion_min, duracion_max)
