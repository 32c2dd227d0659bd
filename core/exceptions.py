"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados. El manejador global en
``core.handlers`` las convierte en el cuerpo de error estándar de la API.
"""

from enum import Enum
from typing import Optional, Any, List


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    default_error = "Error interno"
    default_error_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
        error: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.default_error_code
        self.error = error or self.default_error
        super().__init__(self.message)


class BusinessException(AppException):
    """Excepción para errores de lógica de negocio."""

    default_error = "Operación no permitida"
    default_error_code = "BUSINESS_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message=message, status_code=400, details=details, error_code=error_code)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    default_error = "Recurso no encontrado"
    default_error_code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details, error_code=error_code)


class UnauthorizedException(AppException):
    """Excepción cuando la autenticación es requerida o falla."""

    default_error = "No autorizado"
    default_error_code = "UNAUTHORIZED"

    def __init__(
        self,
        message: str = "No autenticado",
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message=message, status_code=401, details=details, error_code=error_code)


class ForbiddenException(AppException):
    """Excepción cuando el usuario carece de permisos para realizar una acción."""

    default_error = "Prohibido"
    default_error_code = "FORBIDDEN"

    def __init__(
        self,
        message: str = "No autorizado para realizar esta acción",
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message=message, status_code=403, details=details, error_code=error_code)


class NotImplementedAppException(AppException):
    """Excepción para operaciones deshabilitadas o aún no disponibles."""

    default_error = "No implementado"
    default_error_code = "NOT_IMPLEMENTED"

    def __init__(
        self,
        message: str = "Operación no implementada",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=501, details=details)


class ValidationException(AppException):
    """
    Excepción para errores de validación.

    Acumula todos los errores de campo encontrados en lugar de detenerse
    en el primero. Cada error es un dict ``{field, message, value}``.
    """

    default_error = "Error de validación"
    default_error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Los datos enviados no son válidos",
        field: Optional[str] = None,
        errors: Optional[List[dict[str, Any]]] = None,
        details: Optional[dict[str, Any]] = None,
        value: Any = None,
    ):
        errors = list(errors or [])
        if field:
            errors.append({"field": field, "message": message, "value": value})
        details = details or {}
        details["errors"] = errors
        self.errors = errors
        super().__init__(message=message, status_code=400, details=details)


class DuplicateException(AppException):
    """Excepción cuando se intenta crear un recurso duplicado."""

    default_error = "Conflicto"
    default_error_code = "DUPLICATE"

    def __init__(
        self,
        resource: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"{resource} duplicado (ya existe)"
            if field and value:
                message += f": {field}='{value}'"
        super().__init__(message=message, status_code=409, details=details, error_code=error_code)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    default_error = "Error de base de datos"
    default_error_code = "DATABASE_ERROR"

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)


# ==================== Errores de autenticación ====================

class AuthErrorCode(str, Enum):
    """Conjunto cerrado de errores que puede producir la autenticación."""

    LOGIN_USER_NOT_FOUND = "LOGIN_USER_NOT_FOUND"
    LOGIN_USER_DELETED = "LOGIN_USER_DELETED"
    LOGIN_PASSWORD_INCORRECT_PLAIN = "LOGIN_PASSWORD_INCORRECT_PLAIN"
    LOGIN_PASSWORD_INCORRECT_HASH = "LOGIN_PASSWORD_INCORRECT_HASH"
    REGISTER_USERNAME_TAKEN = "REGISTER_USERNAME_TAKEN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CURRENT_PASSWORD_INCORRECT = "CURRENT_PASSWORD_INCORRECT"
    CODIGO_VIGENTE = "CODIGO_VIGENTE"
    CODIGO_NOT_FOUND = "CODIGO_NOT_FOUND"
    CODIGO_NOT_VERIFIED = "CODIGO_NOT_VERIFIED"
    CODIGO_USUARIO_MISMATCH = "CODIGO_USUARIO_MISMATCH"
    AUTH_TOKEN_MISSING = "AUTH_TOKEN_MISSING"
    AUTH_TOKEN_FORMAT_INVALID = "AUTH_TOKEN_FORMAT_INVALID"
    AUTH_TOKEN_TYPE_INVALID = "AUTH_TOKEN_TYPE_INVALID"
    AUTH_TOKEN_EMPTY = "AUTH_TOKEN_EMPTY"
    AUTH_TOKEN_EXPIRED = "AUTH_TOKEN_EXPIRED"
    AUTH_TOKEN_SIGNATURE_INVALID = "AUTH_TOKEN_SIGNATURE_INVALID"
    AUTH_TOKEN_MALFORMED = "AUTH_TOKEN_MALFORMED"
    AUTH_TOKEN_INVALID = "AUTH_TOKEN_INVALID"


# tag -> (status, error, mensaje)
AUTH_ERRORS: dict[AuthErrorCode, tuple[int, str, str]] = {
    AuthErrorCode.LOGIN_USER_NOT_FOUND: (
        401, "Credenciales inválidas", "usuario no encontrado"),
    AuthErrorCode.LOGIN_USER_DELETED: (
        401, "Credenciales inválidas", "usuario eliminado - contacte al administrador"),
    AuthErrorCode.LOGIN_PASSWORD_INCORRECT_PLAIN: (
        401, "Credenciales inválidas", "contraseña incorrecta (texto plano)"),
    AuthErrorCode.LOGIN_PASSWORD_INCORRECT_HASH: (
        401, "Credenciales inválidas", "contraseña incorrecta (hash bcrypt)"),
    AuthErrorCode.REGISTER_USERNAME_TAKEN: (
        409, "Conflicto", "el usuario ya existe"),
    AuthErrorCode.USER_NOT_FOUND: (
        404, "Recurso no encontrado", "usuario no encontrado"),
    AuthErrorCode.CURRENT_PASSWORD_INCORRECT: (
        400, "Contraseña inválida", "contraseña actual incorrecta"),
    AuthErrorCode.CODIGO_VIGENTE: (
        400, "Código vigente", "ya existe un código vigente para este usuario, espere a que expire"),
    AuthErrorCode.CODIGO_NOT_FOUND: (
        404, "Recurso no encontrado", "código no encontrado"),
    AuthErrorCode.CODIGO_NOT_VERIFIED: (
        400, "Código inválido", "el código no ha sido verificado o ya fue utilizado"),
    AuthErrorCode.CODIGO_USUARIO_MISMATCH: (
        400, "Código inválido", "el código no pertenece al usuario indicado"),
    AuthErrorCode.AUTH_TOKEN_MISSING: (
        401, "No autorizado",
        "Token de autorización requerido. Incluya el header: Authorization: Bearer <token>"),
    AuthErrorCode.AUTH_TOKEN_FORMAT_INVALID: (
        401, "Formato de token inválido",
        "El header Authorization debe tener el formato: Bearer <token>"),
    AuthErrorCode.AUTH_TOKEN_TYPE_INVALID: (
        401, "Tipo de token inválido",
        "El token debe ser de tipo Bearer. Use: Authorization: Bearer <token>"),
    AuthErrorCode.AUTH_TOKEN_EMPTY: (
        401, "Token vacío",
        "El token no puede estar vacío. Proporcione un token válido después de Bearer"),
    AuthErrorCode.AUTH_TOKEN_EXPIRED: (
        401, "Token inválido",
        "El token ha expirado. Haga login nuevamente o use el endpoint /auth/refresh-token"),
    AuthErrorCode.AUTH_TOKEN_SIGNATURE_INVALID: (
        401, "Token inválido",
        "La firma del token es inválida. El token puede haber sido modificado"),
    AuthErrorCode.AUTH_TOKEN_MALFORMED: (
        401, "Token inválido",
        "El token está malformado. Verifique que sea un JWT válido"),
    AuthErrorCode.AUTH_TOKEN_INVALID: (
        401, "Token inválido",
        "Token inválido. Haga login nuevamente para obtener un token válido"),
}


class AuthException(AppException):
    """Error de autenticación identificado por su ``AuthErrorCode``."""

    def __init__(self, code: AuthErrorCode, details: Optional[dict[str, Any]] = None):
        self.code = code
        status_code, error, message = AUTH_ERRORS[code]
        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=code.value,
            error=error,
        )
