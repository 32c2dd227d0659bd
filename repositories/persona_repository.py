"""
Repositorio para la entidad Persona.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import PersonaORM


class PersonaRepository(BaseRepository[PersonaORM]):
    """Repositorio para la entidad Persona."""

    resource_name = "Persona"
    unique_fields = ("cedula", "correo")
    duplicate_codes = {"cedula": "duplicate_cedula", "correo": "duplicate_email"}

    def __init__(self, db: Session):
        super().__init__(db, PersonaORM)

    def find_by_cedula(self, cedula: str, include_deleted: bool = False) -> Optional[PersonaORM]:
        """Busca una persona por su cédula exacta."""
        return self.find_one_by(include_deleted=include_deleted, cedula=cedula)

    def find_by_correo(self, correo: str) -> List[PersonaORM]:
        """Personas cuyo correo contiene el texto indicado."""
        return self.search("correo", correo)

    def exists_cedula(self, cedula: str, exclude_id: Optional[int] = None) -> bool:
        """
        Verifica si la cédula ya está registrada, incluyendo personas eliminadas.

        La restricción UNIQUE de la tabla también cubre a los registros con soft delete.
        """
        query = self._query(include_deleted=True).filter(PersonaORM.cedula == cedula)
        if exclude_id is not None:
            query = query.filter(PersonaORM.id != exclude_id)
        return query.count() > 0

    def exists_correo(self, correo: str, exclude_id: Optional[int] = None) -> bool:
        query = self._query(include_deleted=True).filter(PersonaORM.correo == correo)
        if exclude_id is not None:
            query = query.filter(PersonaORM.id != exclude_id)
        return query.count() > 0
