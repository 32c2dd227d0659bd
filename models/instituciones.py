from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class InstitucionBase(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=200)
    autoridad: Optional[str] = Field(None, max_length=150)
    contacto: Optional[str] = Field(None, max_length=100)
    direccion: Optional[str] = Field(None, max_length=255)


class InstitucionCreate(InstitucionBase):
    pass


class InstitucionUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=200)
    autoridad: Optional[str] = Field(None, max_length=150)
    contacto: Optional[str] = Field(None, max_length=100)
    direccion: Optional[str] = Field(None, max_length=255)


class Institucion(RegistroBase, InstitucionBase):
    id: int
