"""
Servicios para programas de visita, sus detalles (actividades realizadas)
y la asignación de autoridades a cada programa.
"""

from datetime import date
from typing import List
import logging

from services.base_service import BaseService
from repositories.programa_visita_repository import ProgramaVisitaRepository
from repositories.visita_detalle_repository import VisitaDetalleRepository
from repositories.detalle_autoridad_repository import DetalleAutoridadRepository
from repositories.institucion_repository import InstitucionRepository
from repositories.autoridad_uteq_repository import AutoridadUTEQRepository
from repositories.actividad_repository import ActividadRepository
from repositories.estudiante_universitario_repository import EstudianteUniversitarioRepository
from database.models import ProgramaVisitaORM, VisitaDetalleORM, DetalleAutoridadDetallesVisitaORM
from core.exceptions import ValidationException

logger = logging.getLogger(__name__)


class ProgramaVisitaService(BaseService[ProgramaVisitaORM, ProgramaVisitaRepository]):
    """Servicio para programas de visita."""

    def __init__(
        self,
        repository: ProgramaVisitaRepository,
        institucion_repository: InstitucionRepository,
        autoridad_repository: AutoridadUTEQRepository,
    ):
        super().__init__(repository)
        self.institucion_repo = institucion_repository
        self.autoridad_repo = autoridad_repository

    def validate_create(self, data: dict) -> None:
        self._check_refs(data)

    def validate_update(self, entity: ProgramaVisitaORM, data: dict) -> None:
        self._check_refs(data)

    def _check_refs(self, data: dict) -> None:
        if data.get("institucion_id"):
            self.institucion_repo.get_by_id_or_fail(data["institucion_id"])
        if data.get("autoridad_uteq_id"):
            self.autoridad_repo.get_by_id_or_fail(data["autoridad_uteq_id"])

    def get_by_fecha(self, dia: date) -> List[ProgramaVisitaORM]:
        return self.repository.find_by_fecha(dia)

    def get_by_autoridad(self, autoridad_uteq_id: int) -> List[ProgramaVisitaORM]:
        return self.repository.find_by_autoridad(autoridad_uteq_id)

    def get_by_institucion(self, institucion_id: int) -> List[ProgramaVisitaORM]:
        return self.repository.find_by_institucion(institucion_id)

    def get_by_rango_fecha(self, inicio: date, fin: date) -> List[ProgramaVisitaORM]:
        """
        Raises:
            ValidationException: si inicio es posterior a fin
        """
        if inicio > fin:
            raise ValidationException(
                message="La fecha de inicio no puede ser posterior a la fecha de fin",
                field="inicio",
                value=inicio.isoformat(),
            )
        return self.repository.find_by_rango_fecha(inicio, fin)


class VisitaDetalleService(BaseService[VisitaDetalleORM, VisitaDetalleRepository]):
    """Servicio para detalles de visita."""

    def __init__(
        self,
        repository: VisitaDetalleRepository,
        actividad_repository: ActividadRepository,
        programa_repository: ProgramaVisitaRepository,
        estudiante_universitario_repository: EstudianteUniversitarioRepository,
    ):
        super().__init__(repository)
        self.actividad_repo = actividad_repository
        self.programa_repo = programa_repository
        self.estudiante_repo = estudiante_universitario_repository

    def validate_create(self, data: dict) -> None:
        self._check_refs(data)

    def validate_update(self, entity: VisitaDetalleORM, data: dict) -> None:
        self._check_refs(data)

    def _check_refs(self, data: dict) -> None:
        if data.get("actividad_id"):
            self.actividad_repo.get_by_id_or_fail(data["actividad_id"])
        if data.get("programa_visita_id"):
            self.programa_repo.get_by_id_or_fail(data["programa_visita_id"])
        if data.get("estudiante_universitario_id"):
            self.estudiante_repo.get_by_id_or_fail(data["estudiante_universitario_id"])

    def get_by_actividad(self, actividad_id: int) -> List[VisitaDetalleORM]:
        return self.repository.find_by_actividad(actividad_id)

    def get_by_programa(self, programa_visita_id: int) -> List[VisitaDetalleORM]:
        return self.repository.find_by_programa(programa_visita_id)

    def get_by_estudiante(self, estudiante_universitario_id: int) -> List[VisitaDetalleORM]:
        return self.repository.find_by_estudiante(estudiante_universitario_id)

    def get_by_participantes(self, minimo: int, maximo: int) -> List[VisitaDetalleORM]:
        if minimo > maximo:
            raise ValidationException(
                message="El mínimo de participantes no puede ser mayor que el máximo",
                field="min",
                value=minimo,
            )
        return self.repository.find_by_participantes(minimo, maximo)

    def get_estadisticas(self) -> dict:
        return self.repository.estadisticas()


class DetalleAutoridadService(BaseService[DetalleAutoridadDetallesVisitaORM, DetalleAutoridadRepository]):
    """Servicio para la asignación de autoridades a programas de visita."""

    def __init__(
        self,
        repository: DetalleAutoridadRepository,
        programa_repository: ProgramaVisitaRepository,
        autoridad_repository: AutoridadUTEQRepository,
    ):
        super().__init__(repository)
        self.programa_repo = programa_repository
        self.autoridad_repo = autoridad_repository

    def validate_create(self, data: dict) -> None:
        self.validate_update(None, data)

    def validate_update(self, entity, data: dict) -> None:
        if data.get("programa_visita_id"):
            self.programa_repo.get_by_id_or_fail(data["programa_visita_id"])
        if data.get("autoridad_uteq_id"):
            self.autoridad_repo.get_by_id_or_fail(data["autoridad_uteq_id"])

    def get_by_programa(self, programa_visita_id: int) -> List[DetalleAutoridadDetallesVisitaORM]:
        return self.repository.find_by_programa(programa_visita_id)

    def get_by_autoridad(self, autoridad_uteq_id: int) -> List[DetalleAutoridadDetallesVisitaORM]:
        return self.repository.find_by_autoridad(autoridad_uteq_id)

    def delete_by_programa(self, programa_visita_id: int) -> int:
        self.programa_repo.get_by_id_or_fail(programa_visita_id)
        return self.repository.delete_by_programa(programa_visita_id)
