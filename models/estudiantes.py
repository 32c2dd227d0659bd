from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class EstudianteCreate(BaseModel):
    persona_id: int = Field(..., gt=0)
    institucion_id: int = Field(..., gt=0)
    ciudad_id: int = Field(..., gt=0)
    especialidad: Optional[str] = Field(None, max_length=100)


class EstudianteUpdate(BaseModel):
    institucion_id: Optional[int] = Field(None, gt=0)
    ciudad_id: Optional[int] = Field(None, gt=0)
    especialidad: Optional[str] = Field(None, max_length=100)


class Estudiante(RegistroBase):
    id: int
    persona_id: int
    institucion_id: int
    ciudad_id: int
    especialidad: Optional[str] = None


class EstudianteUniversitarioCreate(BaseModel):
    persona_id: int = Field(..., gt=0)
    semestre: int = Field(..., ge=1, le=12)


class EstudianteUniversitarioUpdate(BaseModel):
    semestre: Optional[int] = Field(None, ge=1, le=12)


class EstudianteUniversitario(RegistroBase):
    id: int
    persona_id: int
    semestre: int
