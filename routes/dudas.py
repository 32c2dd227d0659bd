"""
Rutas de dudas: preguntas de estudiantes que una autoridad responde.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from models.dudas import Duda, DudaCreate, DudaUpdate, DudaAsignar, DudaResponder
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_dudas_service
from services.dudas_service import DudasService

router = APIRouter(prefix="/dudas", tags=["dudas"])


@router.post("/", response_model=Duda, status_code=status.HTTP_201_CREATED)
def crear_duda(body: DudaCreate, service: DudasService = Depends(get_dudas_service)):
    return service.create(body.model_dump())


@router.get("/")
def listar_dudas(
    params: PageParams = Depends(get_page_params),
    service: DudasService = Depends(get_dudas_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Duda)


@router.get("/sin-responder", response_model=List[Duda])
def dudas_sin_responder(service: DudasService = Depends(get_dudas_service)):
    return service.get_sin_responder()


@router.get("/respondidas", response_model=List[Duda])
def dudas_respondidas(service: DudasService = Depends(get_dudas_service)):
    return service.get_respondidas()


@router.get("/sin-asignar", response_model=List[Duda])
def dudas_sin_asignar(service: DudasService = Depends(get_dudas_service)):
    return service.get_sin_asignar()


@router.get("/buscar/{termino}", response_model=List[Duda])
def buscar_dudas(termino: str, service: DudasService = Depends(get_dudas_service)):
    return service.buscar(termino)


@router.get("/estudiante/{estudiante_id}", response_model=List[Duda])
def dudas_por_estudiante(estudiante_id: int, service: DudasService = Depends(get_dudas_service)):
    return service.get_by_estudiante(estudiante_id)


@router.get("/autoridad/{autoridad_id}", response_model=List[Duda])
def dudas_por_autoridad(autoridad_id: int, service: DudasService = Depends(get_dudas_service)):
    return service.get_by_autoridad(autoridad_id)


@router.get("/{duda_id}", response_model=Duda)
def obtener_duda(duda_id: int, service: DudasService = Depends(get_dudas_service)):
    return service.get_by_id_or_fail(duda_id)


@router.put("/{duda_id}/asignar", response_model=Duda)
def asignar_duda(duda_id: int, body: DudaAsignar, service: DudasService = Depends(get_dudas_service)):
    return service.asignar(duda_id, body.autoridad_id)


@router.put("/{duda_id}/responder", response_model=Duda)
def responder_duda(duda_id: int, body: DudaResponder, service: DudasService = Depends(get_dudas_service)):
    return service.responder(duda_id, body.respuesta)


@router.put("/{duda_id}", response_model=Duda)
def actualizar_duda(duda_id: int, body: DudaUpdate, service: DudasService = Depends(get_dudas_service)):
    return service.update(duda_id, body.model_dump(exclude_unset=True))


@router.delete("/{duda_id}")
def eliminar_duda(duda_id: int, service: DudasService = Depends(get_dudas_service)):
    service.delete(duda_id)
    return create_delete_response("Duda eliminada exitosamente", duda_id)
