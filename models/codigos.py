from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from models.common import RegistroBase


class CodigoUsuarioCreate(BaseModel):
    """Formato y ventana de expiración se validan en el servicio."""
    usuario_id: Optional[int] = None
    codigo: Optional[str] = None
    estado: Optional[str] = "valido"
    expira_en: Optional[datetime] = None


class CodigoUsuarioUpdate(BaseModel):
    codigo: Optional[str] = None
    estado: Optional[str] = None
    expira_en: Optional[datetime] = None


class CodigoUsuario(RegistroBase):
    id: int
    usuario_id: int
    codigo: str
    estado: str
    expira_en: Optional[datetime] = None


class CodigoVerificar(BaseModel):
    codigo: str
