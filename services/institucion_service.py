"""Servicio para instituciones educativas."""

from typing import List

from services.base_service import BaseService
from repositories.institucion_repository import InstitucionRepository
from database.models import InstitucionORM
from core.validators import validate_search_term


class InstitucionService(BaseService[InstitucionORM, InstitucionRepository]):

    def get_by_nombre(self, nombre: str) -> List[InstitucionORM]:
        return self.repository.find_by_nombre(validate_search_term(nombre, "nombre"))

    def get_by_autoridad(self, autoridad: str) -> List[InstitucionORM]:
        return self.repository.find_by_autoridad(validate_search_term(autoridad, "autoridad"))
