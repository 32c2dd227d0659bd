"""
Rutas de personas.

Toda la lógica de negocio vive en PersonaService; los errores se convierten
en respuestas HTTP en el manejador global.
"""

from typing import List
from fastapi import APIRouter, Depends, status
import logging

from models.personas import Persona, PersonaCreate, PersonaUpdate
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_persona_service
from services.persona_service import PersonaService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/personas", tags=["personas"])


@router.post("/", response_model=Persona, status_code=status.HTTP_201_CREATED)
def crear_persona(body: PersonaCreate, service: PersonaService = Depends(get_persona_service)):
    """
    Crea una persona.

    La cédula debe tener 10 dígitos y ser única; el correo, si viene, también es único.
    Todos los errores de campo se devuelven juntos en ``details.errors``.
    """
    return service.create(body.model_dump())


@router.get("/")
def listar_personas(
    params: PageParams = Depends(get_page_params),
    service: PersonaService = Depends(get_persona_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Persona)


@router.get("/cedula/{cedula}", response_model=Persona)
def obtener_por_cedula(cedula: str, service: PersonaService = Depends(get_persona_service)):
    return service.get_by_cedula(cedula)


@router.get("/correo/{correo}", response_model=List[Persona])
def buscar_por_correo(correo: str, service: PersonaService = Depends(get_persona_service)):
    return service.search_by_correo(correo)


@router.get("/{persona_id}", response_model=Persona)
def obtener_persona(persona_id: int, service: PersonaService = Depends(get_persona_service)):
    return service.get_by_id_or_fail(persona_id)


@router.put("/{persona_id}", response_model=Persona)
def actualizar_persona(
    persona_id: int,
    body: PersonaUpdate,
    service: PersonaService = Depends(get_persona_service),
):
    return service.update(persona_id, body.model_dump(exclude_unset=True))


@router.delete("/{persona_id}")
def eliminar_persona(persona_id: int, service: PersonaService = Depends(get_persona_service)):
    service.delete(persona_id)
    return create_delete_response("Persona eliminada exitosamente", persona_id)
