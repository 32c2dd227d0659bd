"""
Servicios para estudiantes de colegio y estudiantes universitarios.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.estudiante_repository import EstudianteRepository
from repositories.estudiante_universitario_repository import EstudianteUniversitarioRepository
from repositories.persona_repository import PersonaRepository
from repositories.institucion_repository import InstitucionRepository
from repositories.ciudad_repository import CiudadRepository
from database.models import EstudianteORM, EstudianteUniversitarioORM
from core.exceptions import DuplicateException, NotFoundException
from core.validators import validate_search_term

logger = logging.getLogger(__name__)


def _person_exists(resource: str, persona_id: int) -> DuplicateException:
    return DuplicateException(
        resource=resource,
        field="persona_id",
        value=str(persona_id),
        error_code="person_exists",
        message=f"La persona ya está registrada como {resource.lower()}",
    )


class EstudianteService(BaseService[EstudianteORM, EstudianteRepository]):
    """
    Servicio para estudiantes.

    La eliminación es en cascada (estudiante → usuario(s) → persona) y atómica.
    """

    def __init__(
        self,
        repository: EstudianteRepository,
        persona_repository: PersonaRepository,
        institucion_repository: InstitucionRepository,
        ciudad_repository: CiudadRepository,
    ):
        super().__init__(repository)
        self.persona_repo = persona_repository
        self.institucion_repo = institucion_repository
        self.ciudad_repo = ciudad_repository

    def validate_create(self, data: dict) -> None:
        self.persona_repo.get_by_id_or_fail(data["persona_id"])
        self.institucion_repo.get_by_id_or_fail(data["institucion_id"])
        self.ciudad_repo.get_by_id_or_fail(data["ciudad_id"])
        if self.repository.find_by_persona(data["persona_id"], include_deleted=True):
            raise _person_exists("Estudiante", data["persona_id"])

    def validate_update(self, entity: EstudianteORM, data: dict) -> None:
        if data.get("institucion_id"):
            self.institucion_repo.get_by_id_or_fail(data["institucion_id"])
        if data.get("ciudad_id"):
            self.ciudad_repo.get_by_id_or_fail(data["ciudad_id"])

    def get_by_ciudad(self, ciudad_id: int) -> List[EstudianteORM]:
        return self.repository.find_by_ciudad(ciudad_id)

    def get_by_institucion(self, institucion_id: int) -> List[EstudianteORM]:
        return self.repository.find_by_institucion(institucion_id)

    def get_by_especialidad(self, especialidad: str) -> List[EstudianteORM]:
        return self.repository.find_by_especialidad(validate_search_term(especialidad, "especialidad"))

    def get_all_including_deleted(self) -> List[EstudianteORM]:
        return self.repository.get_all_including_deleted()

    def get_deleted(self) -> List[EstudianteORM]:
        return self.repository.get_deleted()

    def delete(self, id: int) -> None:
        estudiante = self.get_by_id_or_fail(id)
        self.repository.delete_cascade(estudiante)

    def restore(self, id: int) -> EstudianteORM:
        estudiante = self.get_by_id_or_fail(id, include_deleted=True)
        self.validate_deleted(estudiante)
        return self.repository.restore_cascade(estudiante)


class EstudianteUniversitarioService(BaseService[EstudianteUniversitarioORM, EstudianteUniversitarioRepository]):
    """Servicio para estudiantes universitarios (guías de las visitas)."""

    def __init__(self, repository: EstudianteUniversitarioRepository, persona_repository: PersonaRepository):
        super().__init__(repository)
        self.persona_repo = persona_repository

    def validate_create(self, data: dict) -> None:
        self.persona_repo.get_by_id_or_fail(data["persona_id"])
        if self.repository.count(include_deleted=True, persona_id=data["persona_id"]) > 0:
            raise _person_exists("Estudiante universitario", data["persona_id"])

    def get_by_semestre(self, semestre: int) -> List[EstudianteUniversitarioORM]:
        return self.repository.find_by_semestre(semestre)

    def get_by_persona(self, persona_id: int) -> EstudianteUniversitarioORM:
        estudiante = self.repository.find_by_persona(persona_id)
        if not estudiante:
            raise NotFoundException(resource="Estudiante universitario", identifier=f"persona {persona_id}")
        return estudiante
