from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from models.common import RegistroBase


class ProgramaVisitaCreate(BaseModel):
    fecha: datetime
    institucion_id: int = Field(..., gt=0)
    autoridad_uteq_id: Optional[int] = Field(None, gt=0)


class ProgramaVisitaUpdate(BaseModel):
    fecha: Optional[datetime] = None
    institucion_id: Optional[int] = Field(None, gt=0)
    autoridad_uteq_id: Optional[int] = Field(None, gt=0)


class ProgramaVisita(RegistroBase):
    id: int
    fecha: datetime
    institucion_id: int
    autoridad_uteq_id: Optional[int] = None


class VisitaDetalleCreate(BaseModel):
    actividad_id: int = Field(..., gt=0)
    programa_visita_id: int = Field(..., gt=0)
    estudiante_universitario_id: Optional[int] = Field(None, gt=0)
    participantes: int = Field(0, ge=0)


class VisitaDetalleUpdate(BaseModel):
    actividad_id: Optional[int] = Field(None, gt=0)
    programa_visita_id: Optional[int] = Field(None, gt=0)
    estudiante_universitario_id: Optional[int] = Field(None, gt=0)
    participantes: Optional[int] = Field(None, ge=0)


class VisitaDetalle(RegistroBase):
    id: int
    actividad_id: int
    programa_visita_id: int
    estudiante_universitario_id: Optional[int] = None
    participantes: int


class EstadisticasVisitas(BaseModel):
    total_visitas: int
    total_participantes: int
    promedio_participantes: float


class DetalleAutoridadCreate(BaseModel):
    programa_visita_id: int = Field(..., gt=0)
    autoridad_uteq_id: int = Field(..., gt=0)


class DetalleAutoridadUpdate(BaseModel):
    programa_visita_id: Optional[int] = Field(None, gt=0)
    autoridad_uteq_id: Optional[int] = Field(None, gt=0)


class DetalleAutoridad(RegistroBase):
    id: int
    programa_visita_id: int
    autoridad_uteq_id: int
