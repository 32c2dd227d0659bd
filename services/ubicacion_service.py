"""
Servicios de Provincia y Ciudad.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.provincia_repository import ProvinciaRepository
from repositories.ciudad_repository import CiudadRepository
from database.models import ProvinciaORM, CiudadORM
from core.exceptions import NotFoundException, DuplicateException
from core.validators import validate_search_term

logger = logging.getLogger(__name__)


class ProvinciaService(BaseService[ProvinciaORM, ProvinciaRepository]):
    """Servicio para provincias."""

    def validate_create(self, data: dict) -> None:
        self._check_nombre(data["nombre"])

    def validate_update(self, entity: ProvinciaORM, data: dict) -> None:
        if data.get("nombre") and data["nombre"].lower() != entity.nombre.lower():
            self._check_nombre(data["nombre"])

    def _check_nombre(self, nombre: str) -> None:
        if self.repository.find_by_nombre(nombre):
            raise DuplicateException(resource="Provincia", field="nombre", value=nombre)

    def get_by_nombre(self, nombre: str) -> ProvinciaORM:
        provincia = self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))
        if not provincia:
            raise NotFoundException(resource="Provincia", identifier=nombre)
        return provincia


class CiudadService(BaseService[CiudadORM, CiudadRepository]):
    """Servicio para ciudades; cada ciudad pertenece a una provincia activa."""

    def __init__(self, repository: CiudadRepository, provincia_repository: ProvinciaRepository):
        super().__init__(repository)
        self.provincia_repo = provincia_repository

    def validate_create(self, data: dict) -> None:
        self.provincia_repo.get_by_id_or_fail(data["provincia_id"])

    def validate_update(self, entity: CiudadORM, data: dict) -> None:
        if data.get("provincia_id"):
            self.provincia_repo.get_by_id_or_fail(data["provincia_id"])

    def get_by_provincia(self, provincia_id: int) -> List[CiudadORM]:
        return self.repository.find_by_provincia(provincia_id)

    def get_by_nombre(self, nombre: str) -> CiudadORM:
        ciudad = self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))
        if not ciudad:
            raise NotFoundException(resource="Ciudad", identifier=nombre)
        return ciudad
