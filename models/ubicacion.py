from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class ProvinciaCreate(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=100)


class ProvinciaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=100)


class Provincia(RegistroBase):
    id: int
    nombre: str


class CiudadCreate(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=100)
    provincia_id: int = Field(..., gt=0)


class CiudadUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=100)
    provincia_id: Optional[int] = Field(None, gt=0)


class Ciudad(RegistroBase):
    id: int
    nombre: str
    provincia_id: int
