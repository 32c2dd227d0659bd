"""
Rutas de autoridades UTEQ.

``DELETE /{id}`` elimina autoridad, usuario(s) y persona de forma atómica y
``PUT /{id}/restore`` los restaura en orden inverso.
"""

from typing import List
from fastapi import APIRouter, Depends, status
import logging

from models.autoridades import AutoridadUTEQ, AutoridadUTEQCreate, AutoridadUTEQUpdate
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_autoridad_uteq_service
from services.autoridad_uteq_service import AutoridadUTEQService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/autoridades-uteq", tags=["autoridades-uteq"])


@router.post("/", response_model=AutoridadUTEQ, status_code=status.HTTP_201_CREATED)
def crear_autoridad(body: AutoridadUTEQCreate, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    """
    Registra una persona como autoridad UTEQ.

    Una persona solo puede ser autoridad una vez (409 ``person_exists``).
    """
    return service.create(body.model_dump())


@router.get("/")
def listar_autoridades(
    params: PageParams = Depends(get_page_params),
    service: AutoridadUTEQService = Depends(get_autoridad_uteq_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=AutoridadUTEQ)


@router.get("/including-deleted", response_model=List[AutoridadUTEQ])
def listar_incluyendo_eliminadas(service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.get_all_including_deleted()


@router.get("/deleted", response_model=List[AutoridadUTEQ])
def listar_eliminadas(service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.get_deleted()


@router.get("/cargo/{cargo}", response_model=List[AutoridadUTEQ])
def autoridades_por_cargo(cargo: str, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.get_by_cargo(cargo)


@router.get("/persona/{persona_id}", response_model=AutoridadUTEQ)
def autoridad_por_persona(persona_id: int, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.get_by_persona(persona_id)


@router.get("/{autoridad_id}", response_model=AutoridadUTEQ)
def obtener_autoridad(autoridad_id: int, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.get_by_id_or_fail(autoridad_id)


@router.put("/{autoridad_id}/restore", response_model=AutoridadUTEQ)
def restaurar_autoridad(autoridad_id: int, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    return service.restore(autoridad_id)


@router.put("/{autoridad_id}", response_model=AutoridadUTEQ)
def actualizar_autoridad(
    autoridad_id: int,
    body: AutoridadUTEQUpdate,
    service: AutoridadUTEQService = Depends(get_autoridad_uteq_service),
):
    return service.update(autoridad_id, body.model_dump(exclude_unset=True))


@router.delete("/{autoridad_id}")
def eliminar_autoridad(autoridad_id: int, service: AutoridadUTEQService = Depends(get_autoridad_uteq_service)):
    service.delete(autoridad_id)
    return create_delete_response("Autoridad UTEQ eliminada exitosamente", autoridad_id)
