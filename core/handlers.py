"""
Manejadores globales de errores.

Todas las respuestas de error de la API comparten el cuerpo:
``{error, error_code, message, status_code, timestamp, path, method[, details]}``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException
from utils.datetime_utils import get_local_now

logger = logging.getLogger(__name__)


def build_error_body(
    request: Request,
    status_code: int,
    error: str,
    error_code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict:
    """Construye el cuerpo de error estándar."""
    body = {
        "error": error,
        "error_code": error_code,
        "message": message,
        "status_code": status_code,
        "timestamp": get_local_now().isoformat(timespec="seconds"),
        "path": request.url.path,
        "method": request.method,
    }
    if details:
        body["details"] = details
    return body


def _normalize_validation_errors(errs) -> list[dict]:
    """Convierte los errores de pydantic al formato ``{field, message, value}``."""
    norm = []
    for e in errs:
        loc = [str(part) for part in e.get("loc", ()) if part not in ("body", "query", "path")]
        value = e.get("input")
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8", errors="ignore")
        norm.append({
            "field": ".".join(loc),
            "message": e.get("msg", ""),
            "value": "" if value is None or isinstance(value, (dict, list)) else str(value),
        })
    return norm


def install_error_handlers(app: FastAPI) -> None:
    """Registra los manejadores de excepciones en la aplicación."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(
                request, exc.status_code, exc.error, exc.error_code, exc.message, exc.details
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=build_error_body(
                request,
                400,
                "Error de validación",
                "VALIDATION_ERROR",
                "Los datos enviados no son válidos",
                {"errors": _normalize_validation_errors(exc.errors())},
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(
                request,
                exc.status_code,
                "Error HTTP",
                f"HTTP_{exc.status_code}",
                str(exc.detail),
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        logger.warning(f"IntegrityError no clasificado en {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=409,
            content=build_error_body(
                request, 409, "Conflicto", "conflict", "La operación viola una restricción de datos"
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.error(f"Error inesperado en {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=build_error_body(
                request, 500, "Error interno", "INTERNAL_ERROR", "Error interno del servidor"
            ),
        )
