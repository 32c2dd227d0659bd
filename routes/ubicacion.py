"""
Rutas de provincias y ciudades.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from models.ubicacion import (
    Provincia, ProvinciaCreate, ProvinciaUpdate,
    Ciudad, CiudadCreate, CiudadUpdate,
)
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_provincia_service, get_ciudad_service
from services.ubicacion_service import ProvinciaService, CiudadService

provincias_router = APIRouter(prefix="/provincias", tags=["provincias"])
ciudades_router = APIRouter(prefix="/ciudades", tags=["ciudades"])


# ==================== Provincias ====================

@provincias_router.post("/", response_model=Provincia, status_code=status.HTTP_201_CREATED)
def crear_provincia(body: ProvinciaCreate, service: ProvinciaService = Depends(get_provincia_service)):
    return service.create(body.model_dump())


@provincias_router.get("/")
def listar_provincias(
    params: PageParams = Depends(get_page_params),
    service: ProvinciaService = Depends(get_provincia_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Provincia)


@provincias_router.get("/nombre/{nombre}", response_model=Provincia)
def obtener_provincia_por_nombre(nombre: str, service: ProvinciaService = Depends(get_provincia_service)):
    return service.get_by_nombre(nombre)


@provincias_router.get("/{provincia_id}", response_model=Provincia)
def obtener_provincia(provincia_id: int, service: ProvinciaService = Depends(get_provincia_service)):
    return service.get_by_id_or_fail(provincia_id)


@provincias_router.put("/{provincia_id}", response_model=Provincia)
def actualizar_provincia(
    provincia_id: int,
    body: ProvinciaUpdate,
    service: ProvinciaService = Depends(get_provincia_service),
):
    return service.update(provincia_id, body.model_dump(exclude_unset=True))


@provincias_router.delete("/{provincia_id}")
def eliminar_provincia(provincia_id: int, service: ProvinciaService = Depends(get_provincia_service)):
    service.delete(provincia_id)
    return create_delete_response("Provincia eliminada exitosamente", provincia_id)


# ==================== Ciudades ====================

@ciudades_router.post("/", response_model=Ciudad, status_code=status.HTTP_201_CREATED)
def crear_ciudad(body: CiudadCreate, service: CiudadService = Depends(get_ciudad_service)):
    return service.create(body.model_dump())


@ciudades_router.get("/")
def listar_ciudades(
    params: PageParams = Depends(get_page_params),
    service: CiudadService = Depends(get_ciudad_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Ciudad)


@ciudades_router.get("/provincia/{provincia_id}", response_model=List[Ciudad])
def ciudades_por_provincia(provincia_id: int, service: CiudadService = Depends(get_ciudad_service)):
    return service.get_by_provincia(provincia_id)


@ciudades_router.get("/nombre/{nombre}", response_model=Ciudad)
def obtener_ciudad_por_nombre(nombre: str, service: CiudadService = Depends(get_ciudad_service)):
    return service.get_by_nombre(nombre)


@ciudades_router.get("/{ciudad_id}", response_model=Ciudad)
def obtener_ciudad(ciudad_id: int, service: CiudadService = Depends(get_ciudad_service)):
    return service.get_by_id_or_fail(ciudad_id)


@ciudades_router.put("/{ciudad_id}", response_model=Ciudad)
def actualizar_ciudad(ciudad_id: int, body: CiudadUpdate, service: CiudadService = Depends(get_ciudad_service)):
    return service.update(ciudad_id, body.model_dump(exclude_unset=True))


@ciudades_router.delete("/{ciudad_id}")
def eliminar_ciudad(ciudad_id: int, service: CiudadService = Depends(get_ciudad_service)):
    service.delete(ciudad_id)
    return create_delete_response("Ciudad eliminada exitosamente", ciudad_id)
