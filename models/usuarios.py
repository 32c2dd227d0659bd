from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class TipoUsuarioCreate(BaseModel):
    nombre: str = Field(..., min_length=2, max_length=50)


class TipoUsuarioUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=2, max_length=50)


class TipoUsuario(RegistroBase):
    id: int
    nombre: str


class UsuarioCreate(BaseModel):
    """Alta administrativa de usuarios. La contraseña se guarda como hash bcrypt."""
    usuario: str = Field(..., min_length=3, max_length=100)
    contrasena: str = Field(..., min_length=6, max_length=72, alias="contraseña")
    persona_id: int = Field(..., gt=0)
    tipo_usuario_id: int = Field(..., gt=0)
    verificado: bool = False

    model_config = {"populate_by_name": True}


class UsuarioUpdate(BaseModel):
    usuario: Optional[str] = Field(None, min_length=3, max_length=100)
    tipo_usuario_id: Optional[int] = Field(None, gt=0)
    verificado: Optional[bool] = None


class Usuario(RegistroBase):
    """Usuario sin la contraseña."""
    id: int
    usuario: str
    persona_id: int
    tipo_usuario_id: int
    verificado: bool = False
