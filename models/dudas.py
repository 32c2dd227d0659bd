from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class DudaCreate(BaseModel):
    pregunta: str = Field(..., min_length=3)
    estudiante_id: int = Field(..., gt=0)
    autoridad_uteq_id: Optional[int] = Field(None, gt=0)


class DudaUpdate(BaseModel):
    pregunta: Optional[str] = Field(None, min_length=3)
    respuesta: Optional[str] = None
    autoridad_uteq_id: Optional[int] = Field(None, gt=0)


class DudaAsignar(BaseModel):
    autoridad_id: int = Field(..., gt=0)


class DudaResponder(BaseModel):
    respuesta: str = Field(..., min_length=1)


class Duda(RegistroBase):
    """
    Respuesta de Duda.

    ``estado`` se deriva: respondida, asignada o sin_asignar.
    """
    id: int
    pregunta: str
    respuesta: Optional[str] = None
    estudiante_id: int
    autoridad_uteq_id: Optional[int] = None
    estado: str
