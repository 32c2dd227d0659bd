"""
Rutas de estudiantes (colegio) y estudiantes universitarios.

Eliminar un estudiante elimina también su usuario y su persona; ``PUT /{id}/restore``
revierte la operación completa.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from models.estudiantes import (
    Estudiante, EstudianteCreate, EstudianteUpdate,
    EstudianteUniversitario, EstudianteUniversitarioCreate, EstudianteUniversitarioUpdate,
)
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_estudiante_service, get_estudiante_universitario_service
from services.estudiante_service import EstudianteService, EstudianteUniversitarioService

estudiantes_router = APIRouter(prefix="/estudiantes", tags=["estudiantes"])
universitarios_router = APIRouter(prefix="/estudiantes-universitarios", tags=["estudiantes-universitarios"])


# ==================== Estudiantes ====================

@estudiantes_router.post("/", response_model=Estudiante, status_code=status.HTTP_201_CREATED)
def crear_estudiante(body: EstudianteCreate, service: EstudianteService = Depends(get_estudiante_service)):
    return service.create(body.model_dump())


@estudiantes_router.get("/")
def listar_estudiantes(
    params: PageParams = Depends(get_page_params),
    service: EstudianteService = Depends(get_estudiante_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Estudiante)


@estudiantes_router.get("/including-deleted", response_model=List[Estudiante])
def listar_incluyendo_eliminados(service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_all_including_deleted()


@estudiantes_router.get("/deleted", response_model=List[Estudiante])
def listar_eliminados(service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_deleted()


@estudiantes_router.get("/ciudad/{ciudad_id}", response_model=List[Estudiante])
def estudiantes_por_ciudad(ciudad_id: int, service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_by_ciudad(ciudad_id)


@estudiantes_router.get("/institucion/{institucion_id}", response_model=List[Estudiante])
def estudiantes_por_institucion(institucion_id: int, service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_by_institucion(institucion_id)


@estudiantes_router.get("/especialidad/{especialidad}", response_model=List[Estudiante])
def estudiantes_por_especialidad(especialidad: str, service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_by_especialidad(especialidad)


@estudiantes_router.get("/{estudiante_id}", response_model=Estudiante)
def obtener_estudiante(estudiante_id: int, service: EstudianteService = Depends(get_estudiante_service)):
    return service.get_by_id_or_fail(estudiante_id)


@estudiantes_router.put("/{estudiante_id}/restore", response_model=Estudiante)
def restaurar_estudiante(estudiante_id: int, service: EstudianteService = Depends(get_estudiante_service)):
    """Restaura persona, usuario(s) y estudiante en una sola transacción."""
    return service.restore(estudiante_id)


@estudiantes_router.put("/{estudiante_id}", response_model=Estudiante)
def actualizar_estudiante(
    estudiante_id: int,
    body: EstudianteUpdate,
    service: EstudianteService = Depends(get_estudiante_service),
):
    return service.update(estudiante_id, body.model_dump(exclude_unset=True))


@estudiantes_router.delete("/{estudiante_id}")
def eliminar_estudiante(estudiante_id: int, service: EstudianteService = Depends(get_estudiante_service)):
    """Soft delete en cascada: estudiante → usuario(s) → persona."""
    service.delete(estudiante_id)
    return create_delete_response("Estudiante eliminado exitosamente", estudiante_id)


# ==================== Estudiantes universitarios ====================

@universitarios_router.post("/", response_model=EstudianteUniversitario, status_code=status.HTTP_201_CREATED)
def crear_universitario(
    body: EstudianteUniversitarioCreate,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    return service.create(body.model_dump())


@universitarios_router.get("/")
def listar_universitarios(
    params: PageParams = Depends(get_page_params),
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=EstudianteUniversitario)


@universitarios_router.get("/semestre/{semestre}", response_model=List[EstudianteUniversitario])
def universitarios_por_semestre(
    semestre: int,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    return service.get_by_semestre(semestre)


@universitarios_router.get("/persona/{persona_id}", response_model=EstudianteUniversitario)
def universitario_por_persona(
    persona_id: int,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    return service.get_by_persona(persona_id)


@universitarios_router.get("/{estudiante_id}", response_model=EstudianteUniversitario)
def obtener_universitario(
    estudiante_id: int,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    return service.get_by_id_or_fail(estudiante_id)


@universitarios_router.put("/{estudiante_id}", response_model=EstudianteUniversitario)
def actualizar_universitario(
    estudiante_id: int,
    body: EstudianteUniversitarioUpdate,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    return service.update(estudiante_id, body.model_dump(exclude_unset=True))


@universitarios_router.delete("/{estudiante_id}")
def eliminar_universitario(
    estudiante_id: int,
    service: EstudianteUniversitarioService = Depends(get_estudiante_universitario_service),
):
    service.delete(estudiante_id)
    return create_delete_response("Estudiante universitario eliminado exitosamente", estudiante_id)
