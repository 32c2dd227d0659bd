"""
Servicio para las dudas de los estudiantes.

Una duda nace sin asignar, puede asignarse a una autoridad y queda
respondida cuando tiene respuesta.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.dudas_repository import DudasRepository
from repositories.estudiante_repository import EstudianteRepository
from repositories.autoridad_uteq_repository import AutoridadUTEQRepository
from database.models import DudasORM
from core.exceptions import ValidationException
from core.validators import validate_search_term

logger = logging.getLogger(__name__)


class DudasService(BaseService[DudasORM, DudasRepository]):

    def __init__(
        self,
        repository: DudasRepository,
        estudiante_repository: EstudianteRepository,
        autoridad_repository: AutoridadUTEQRepository,
    ):
        super().__init__(repository)
        self.estudiante_repo = estudiante_repository
        self.autoridad_repo = autoridad_repository

    def validate_create(self, data: dict) -> None:
        self.estudiante_repo.get_by_id_or_fail(data["estudiante_id"])
        if data.get("autoridad_uteq_id"):
            self.autoridad_repo.get_by_id_or_fail(data["autoridad_uteq_id"])

    def validate_update(self, entity: DudasORM, data: dict) -> None:
        if data.get("autoridad_uteq_id"):
            self.autoridad_repo.get_by_id_or_fail(data["autoridad_uteq_id"])

    def get_by_estudiante(self, estudiante_id: int) -> List[DudasORM]:
        return self.repository.find_by_estudiante(estudiante_id)

    def get_by_autoridad(self, autoridad_uteq_id: int) -> List[DudasORM]:
        return self.repository.find_by_autoridad(autoridad_uteq_id)

    def get_sin_responder(self) -> List[DudasORM]:
        return self.repository.find_sin_responder()

    def get_respondidas(self) -> List[DudasORM]:
        return self.repository.find_respondidas()

    def get_sin_asignar(self) -> List[DudasORM]:
        return self.repository.find_sin_asignar()

    def buscar(self, termino: str) -> List[DudasORM]:
        return self.repository.buscar_en_pregunta(validate_search_term(termino))

    def asignar(self, id: int, autoridad_id: int) -> DudasORM:
        """Asigna la duda a una autoridad activa."""
        self.autoridad_repo.get_by_id_or_fail(autoridad_id)
        duda = self.update(id, {"autoridad_uteq_id": autoridad_id})
        logger.info(f"Duda {id} asignada a la autoridad {autoridad_id}")
        return duda

    def responder(self, id: int, respuesta: str) -> DudasORM:
        respuesta = (respuesta or "").strip()
        if not respuesta:
            raise ValidationException(message="La respuesta no puede estar vacía", field="respuesta", value=respuesta)
        return self.update(id, {"respuesta": respuesta})
