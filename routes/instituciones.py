"""Rutas de instituciones educativas."""

from typing import List
from fastapi import APIRouter, Depends, status

from models.instituciones import Institucion, InstitucionCreate, InstitucionUpdate
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_institucion_service
from services.institucion_service import InstitucionService

router = APIRouter(prefix="/instituciones", tags=["instituciones"])


@router.post("/", response_model=Institucion, status_code=status.HTTP_201_CREATED)
def crear_institucion(body: InstitucionCreate, service: InstitucionService = Depends(get_institucion_service)):
    return service.create(body.model_dump())


@router.get("/")
def listar_instituciones(
    params: PageParams = Depends(get_page_params),
    service: InstitucionService = Depends(get_institucion_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Institucion)


@router.get("/nombre/{nombre}", response_model=List[Institucion])
def buscar_por_nombre(nombre: str, service: InstitucionService = Depends(get_institucion_service)):
    return service.get_by_nombre(nombre)


@router.get("/autoridad/{autoridad}", response_model=List[Institucion])
def buscar_por_autoridad(autoridad: str, service: InstitucionService = Depends(get_institucion_service)):
    return service.get_by_autoridad(autoridad)


@router.get("/{institucion_id}", response_model=Institucion)
def obtener_institucion(institucion_id: int, service: InstitucionService = Depends(get_institucion_service)):
    return service.get_by_id_or_fail(institucion_id)


@router.put("/{institucion_id}", response_model=Institucion)
def actualizar_institucion(
    institucion_id: int,
    body: InstitucionUpdate,
    service: InstitucionService = Depends(get_institucion_service),
):
    return service.update(institucion_id, body.model_dump(exclude_unset=True))


@router.delete("/{institucion_id}")
def eliminar_institucion(institucion_id: int, service: InstitucionService = Depends(get_institucion_service)):
    service.delete(institucion_id)
    return create_delete_response("Institución eliminada exitosamente", institucion_id)
