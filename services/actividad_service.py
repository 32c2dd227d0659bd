"""
Servicios para temáticas y actividades.
"""

from typing import List

from services.base_service import BaseService
from repositories.tematica_repository import TematicaRepository
from repositories.actividad_repository import ActividadRepository
from database.models import TematicaORM, ActividadORM
from core.exceptions import ValidationException
from core.validators import validate_search_term


class TematicaService(BaseService[TematicaORM, TematicaRepository]):
    """Servicio para temáticas."""

    def get_by_nombre(self, nombre: str) -> List[TematicaORM]:
        return self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))

    def get_by_descripcion(self, descripcion: str) -> List[TematicaORM]:
        return self.repository.find_by_descripcion(validate_search_term(descripcion, "descripcion"))


class ActividadService(BaseService[ActividadORM, ActividadRepository]):
    """Servicio para actividades; cada actividad pertenece a una temática."""

    def __init__(self, repository: ActividadRepository, tematica_repository: TematicaRepository):
        super().__init__(repository)
        self.tematica_repo = tematica_repository

    def validate_create(self, data: dict) -> None:
        self.tematica_repo.get_by_id_or_fail(data["tematica_id"])

    def validate_update(self, entity: ActividadORM, data: dict) -> None:
        if data.get("tematica_id"):
            self.tematica_repo.get_by_id_or_fail(data["tematica_id"])

    def get_by_tematica(self, tematica_id: int) -> List[ActividadORM]:
        return self.repository.find_by_tematica(tematica_id)

    def get_by_nombre(self, nombre: str) -> List[ActividadORM]:
        return self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))

    def get_by_duracion(self, duracion_min: int, duracion_max: int) -> List[ActividadORM]:
        """
        Actividades con duración en [duracion_min, duracion_max] minutos.

        Raises:
            ValidationException: si el mínimo es mayor que el máximo
        """
        if duracion_min > duracion_max:
            raise ValidationException(
                message="La duración mínima no puede ser mayor que la máxima",
                field="min",
                value=duracion_min,
            )
        return self.repository.find_by_duracion(duracion_min, duracion_max)
