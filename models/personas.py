from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

from models.common import RegistroBase


class PersonaBase(BaseModel):
    nombre: str = Field(..., max_length=100)
    cedula: str = Field(..., max_length=20)
    correo: Optional[str] = Field(None, max_length=255)
    telefono: Optional[str] = Field(None, max_length=20)
    fecha_nacimiento: Optional[date] = None


class PersonaCreate(PersonaBase):
    """Las reglas de formato (cédula, correo, teléfono, edad) se aplican en el servicio
    para devolver todos los errores de campo juntos."""
    pass


class PersonaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, max_length=100)
    cedula: Optional[str] = Field(None, max_length=20)
    correo: Optional[str] = Field(None, max_length=255)
    telefono: Optional[str] = Field(None, max_length=20)
    fecha_nacimiento: Optional[date] = None


class Persona(RegistroBase, PersonaBase):
    id: int
