"""
Modelos de entrada y salida de los endpoints de autenticación.
"""
from pydantic import BaseModel, Field
from typing import Optional

from models.usuarios import Usuario


class LoginRequest(BaseModel):
    usuario: str = Field(..., min_length=1, max_length=100)
    contrasena: str = Field(..., min_length=1, max_length=255, alias="contraseña")

    model_config = {"populate_by_name": True}


class LoginResponse(BaseModel):
    token: str
    usuario: Usuario
    message: str
    requiere_cambio_password: bool


class RegisterRequest(BaseModel):
    usuario: str = Field(..., min_length=3, max_length=100)
    contrasena: str = Field(..., min_length=6, max_length=72, alias="contraseña")
    persona_id: int = Field(..., gt=0)
    tipo_usuario_id: int = Field(..., gt=0)

    model_config = {"populate_by_name": True}


class RecoverPasswordRequest(BaseModel):
    cedula: str = Field(..., min_length=1, max_length=20)


class VerifyCodeRequest(BaseModel):
    codigo: str


class ResetPasswordRequest(BaseModel):
    codigo_id: int = Field(..., gt=0)
    usuario_id: int = Field(..., gt=0)
    clave: str = Field(..., min_length=6, max_length=72)


class ChangePasswordRequest(BaseModel):
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=72)


class ValidateTokenRequest(BaseModel):
    token: str


class ValidateTokenResponse(BaseModel):
    valid: bool
    user_id: Optional[int] = None
    username: Optional[str] = None
    tipo_usuario_id: Optional[int] = None
    error: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
