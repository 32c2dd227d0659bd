"""
Utilidades de paginación para los listados de la API.

Los listados usan páginas indexadas desde 0 y devuelven
``{success, data, pagination, timestamp}``.
"""

from typing import Any, Iterable, List, NamedTuple, Optional, Type

from fastapi import Query
from pydantic import BaseModel, Field

from config import settings
from utils.datetime_utils import get_local_now


class PaginationMeta(BaseModel):
    """Metadata de la paginación."""
    page: int = Field(..., ge=0, description="Página actual (0-indexed)")
    page_size: int = Field(..., ge=1, description="Tamaño de página")
    total_items: int = Field(..., ge=0, description="Total de registros")
    total_pages: int = Field(..., ge=0, description="Total de páginas")
    has_next: bool = Field(..., description="Existe página siguiente")
    has_previous: bool = Field(..., description="Existe página anterior")


def calculate_pagination_meta(page: int, page_size: int, total_items: int) -> PaginationMeta:
    """
    Calcula la metadata de la paginación.

    Args:
        page: Número de página actual (0-indexed)
        page_size: Registros por página
        total_items: Total de registros

    Returns:
        PaginationMeta con los valores calculados
    """
    total_pages = (total_items + page_size - 1) // page_size if page_size > 0 else 0

    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages - 1,
        has_previous=page > 0,
    )


def calculate_skip(page: int, page_size: int) -> int:
    """Calcula el offset para las consultas a partir de la página y su tamaño."""
    return page * page_size


def create_paginated_response(
    items: Iterable[Any],
    page: int,
    page_size: int,
    total_items: int,
    schema: Optional[Type[BaseModel]] = None,
) -> dict:
    """
    Crea el diccionario de respuesta paginada.

    Si se indica ``schema`` los objetos ORM se serializan con
    ``schema.model_validate`` antes de devolverse.
    """
    data: List[Any] = list(items)
    if schema is not None:
        data = [schema.model_validate(item).model_dump(mode="json") for item in data]

    return {
        "success": True,
        "data": data,
        "pagination": calculate_pagination_meta(page, page_size, total_items).model_dump(),
        "timestamp": get_local_now().isoformat(timespec="seconds"),
    }


class PageParams(NamedTuple):
    page: int
    page_size: int


def get_page_params(
    page: int = Query(0, ge=0, description="Número de página (0-indexed)"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Registros por página"
    ),
) -> PageParams:
    """Dependencia de FastAPI con los parámetros de paginación de los listados."""
    return PageParams(page=page, page_size=page_size)
