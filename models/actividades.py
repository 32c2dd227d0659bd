from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class TematicaCreate(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=150)
    descripcion: Optional[str] = None


class TematicaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=150)
    descripcion: Optional[str] = None


class Tematica(RegistroBase):
    id: int
    nombre: str
    descripcion: Optional[str] = None


class ActividadCreate(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=150)
    tematica_id: int = Field(..., gt=0)
    duracion: int = Field(..., ge=0, description="Duración en minutos")


class ActividadUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=150)
    tematica_id: Optional[int] = Field(None, gt=0)
    duracion: Optional[int] = Field(None, ge=0)


class Actividad(RegistroBase):
    id: int
    nombre: str
    tematica_id: int
    duracion: int
