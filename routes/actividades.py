"""
Rutas de temáticas y actividades.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status

from models.actividades import (
    Tematica, TematicaCreate, TematicaUpdate,
    Actividad, ActividadCreate, ActividadUpdate,
)
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_tematica_service, get_actividad_service
from services.actividad_service import TematicaService, ActividadService

tematicas_router = APIRouter(prefix="/tematicas", tags=["tematicas"])
actividades_router = APIRouter(prefix="/actividades", tags=["actividades"])


# ==================== Temáticas ====================

@tematicas_router.post("/", response_model=Tematica, status_code=status.HTTP_201_CREATED)
def crear_tematica(body: TematicaCreate, service: TematicaService = Depends(get_tematica_service)):
    return service.create(body.model_dump())


@tematicas_router.get("/")
def listar_tematicas(
    params: PageParams = Depends(get_page_params),
    service: TematicaService = Depends(get_tematica_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Tematica)


@tematicas_router.get("/nombre/{nombre}", response_model=List[Tematica])
def tematicas_por_nombre(nombre: str, service: TematicaService = Depends(get_tematica_service)):
    return service.get_by_nombre(nombre)


@tematicas_router.get("/descripcion/{descripcion}", response_model=List[Tematica])
def tematicas_por_descripcion(descripcion: str, service: TematicaService = Depends(get_tematica_service)):
    return service.get_by_descripcion(descripcion)


@tematicas_router.get("/{tematica_id}", response_model=Tematica)
def obtener_tematica(tematica_id: int, service: TematicaService = Depends(get_tematica_service)):
    return service.get_by_id_or_fail(tematica_id)


@tematicas_router.put("/{tematica_id}", response_model=Tematica)
def actualizar_tematica(tematica_id: int, body: TematicaUpdate, service: TematicaService = Depends(get_tematica_service)):
    return service.update(tematica_id, body.model_dump(exclude_unset=True))


@tematicas_router.delete("/{tematica_id}")
def eliminar_tematica(tematica_id: int, service: TematicaService = Depends(get_tematica_service)):
    service.delete(tematica_id)
    return create_delete_response("Temática eliminada exitosamente", tematica_id)


# ==================== Actividades ====================

@actividades_router.post("/", response_model=Actividad, status_code=status.HTTP_201_CREATED)
def crear_actividad(body: ActividadCreate, service: ActividadService = Depends(get_actividad_service)):
    return service.create(body.model_dump())


@actividades_router.get("/")
def listar_actividades(
    params: PageParams = Depends(get_page_params),
    service: ActividadService = Depends(get_actividad_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Actividad)


@actividades_router.get("/duracion", response_model=List[Actividad])
def actividades_por_duracion(
    duracion_min: int = Query(0, alias="min", ge=0, description="Duración mínima en minutos"),
    duracion_max: int = Query(999, alias="max", ge=0, description="Duración máxima en minutos"),
    service: ActividadService = Depends(get_actividad_service),
):
    """Actividades con duración en el rango cerrado [min, max]."""
    return service.get_by_duracion(duracion_min, duracion_max)


@actividades_router.get("/tematica/{tematica_id}", response_model=List[Actividad])
def actividades_por_tematica(tematica_id: int, service: ActividadService = Depends(get_actividad_service)):
    return service.get_by_tematica(tematica_id)


@actividades_router.get("/nombre/{nombre}", response_model=List[Actividad])
def actividades_por_nombre(nombre: str, service: ActividadService = Depends(get_actividad_service)):
    return service.get_by_nombre(nombre)


@actividades_router.get("/{actividad_id}", response_model=Actividad)
def obtener_actividad(actividad_id: int, service: ActividadService = Depends(get_actividad_service)):
    return service.get_by_id_or_fail(actividad_id)


@actividades_router.put("/{actividad_id}", response_model=Actividad)
def actualizar_actividad(
    actividad_id: int,
    body: ActividadUpdate,
    service: ActividadService = Depends(get_actividad_service),
):
    return service.update(actividad_id, body.model_dump(exclude_unset=True))


@actividades_router.delete("/{actividad_id}")
def eliminar_actividad(actividad_id: int, service: ActividadService = Depends(get_actividad_service)):
    service.delete(actividad_id)
    return create_delete_response("Actividad eliminada exitosamente", actividad_id)
