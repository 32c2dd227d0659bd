"""
Rutas de autenticación.

Login, registro, recuperación de contraseña por código y manejo de tokens.
Los errores se propagan como ``AuthException`` y los convierte el manejador global.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordRequestForm
import logging

from auth import TokenData, get_current_user_dep, token_data_from_claims
from dependencies import get_auth_service
from core.exceptions import AuthException
from models.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RecoverPasswordRequest,
    VerifyCodeRequest,
    ResetPasswordRequest,
    ChangePasswordRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
    TokenResponse,
)
from models.usuarios import Usuario
from services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Login con JSON ``{usuario, contraseña}``.

    Devuelve el token, el usuario (sin contraseña) y si debe cambiar su contraseña.
    """
    return service.login(body.usuario, body.contrasena)


@router.post("/token", response_model=TokenResponse)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service),
):
    """
    Endpoint compatible con OAuth2 (form-data).
    Usado por Swagger UI.
    """
    result = service.login(form_data.username, form_data.password)
    return {"access_token": result["token"], "token_type": "bearer"}


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    usuario = service.register(body.usuario, body.contrasena, body.persona_id, body.tipo_usuario_id)
    return {
        "message": "Usuario registrado exitosamente",
        "usuario": Usuario.model_validate(usuario).model_dump(mode="json"),
    }


@router.post("/recover-password")
def recover_password(body: RecoverPasswordRequest, service: AuthService = Depends(get_auth_service)):
    return service.recover_password(body.cedula)


@router.post("/verify-code")
def verify_code(body: VerifyCodeRequest, service: AuthService = Depends(get_auth_service)):
    """
    Verifica un código de recuperación.

    200 ``verificado`` / 404 ``no existe`` / 400 ``caducado``.
    """
    result = service.verify_codigo(body.codigo)
    result.raise_for_estado()
    return {
        "success": True,
        "estado": result.estado,
        "message": "Código verificado",
        "usuario_id": result.usuario_id,
        "cedula": result.cedula,
        "codigo_id": result.codigo_id,
    }


@router.post("/reset-password")
def reset_password(body: ResetPasswordRequest, service: AuthService = Depends(get_auth_service)):
    service.reset_password_by_codigo_id(body.codigo_id, body.usuario_id, body.clave)
    return {"success": True, "message": "Contraseña restablecida exitosamente"}


@router.post("/validate-token", response_model=ValidateTokenResponse)
def validate_token(body: ValidateTokenRequest, service: AuthService = Depends(get_auth_service)):
    valid, claims = service.validate_token(body.token)
    data = None
    if valid:
        try:
            data = token_data_from_claims(claims)
        except AuthException as e:
            logger.info(f"Token sin claims de usuario: {e.code.value}")
    if data is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"valid": False, "error": "Token inválido o expirado"},
        )
    return {
        "valid": True,
        "user_id": data.user_id,
        "username": data.username,
        "tipo_usuario_id": data.tipo_usuario_id,
    }


@router.post("/change-password")
def change_password(
    body: ChangePasswordRequest,
    current_user: TokenData = Depends(get_current_user_dep),
    service: AuthService = Depends(get_auth_service),
):
    service.change_password(current_user.user_id, body.old_password, body.new_password)
    return {"success": True, "message": "Contraseña actualizada exitosamente"}


@router.get("/profile", response_model=Usuario)
def profile(
    current_user: TokenData = Depends(get_current_user_dep),
    service: AuthService = Depends(get_auth_service),
):
    return service.get_profile(current_user.user_id)


@router.post("/refresh-token")
def refresh_token(
    current_user: TokenData = Depends(get_current_user_dep),
    service: AuthService = Depends(get_auth_service),
):
    return {"token": service.generate_new_token(current_user), "message": "Token renovado exitosamente"}
