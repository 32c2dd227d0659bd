""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas y manejadores globales de error
- Utilidades de seguridad (bcrypt, códigos de recuperación)
- Funciones auxiliares de paginación
- Validadores por entidad
"""

from .exceptions import (
    AppException,
    BusinessException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
    DuplicateException,
    ForbiddenException,
    NotImplementedAppException,
    DatabaseException,
    AuthErrorCode,
    AuthException,
)
from .security import (
    hash_password,
    check_password,
    is_legacy_plaintext,
    generar_codigo,
)
from .pagination import (
    PaginationMeta,
    calculate_pagination_meta,
    create_paginated_response,
    calculate_skip,
)

__all__ = [
    # Excepciones
    "AppException",
    "BusinessException",
    "NotFoundException",
    "UnauthorizedException",
    "ValidationException",
    "DuplicateException",
    "ForbiddenException",
    "NotImplementedAppException",
    "DatabaseException",
    "AuthErrorCode",
    "AuthException",
    # seguridad
    "hash_password",
    "check_password",
    "is_legacy_plaintext",
    "generar_codigo",
    # paginacion
    "PaginationMeta",
    "calculate_pagination_meta",
    "create_paginated_response",
    "calculate_skip",
]
