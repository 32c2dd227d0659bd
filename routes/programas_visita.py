"""
Rutas de programas de visita, detalles de visita y asignación de autoridades.
"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Query, status

from models.programas import (
    ProgramaVisita, ProgramaVisitaCreate, ProgramaVisitaUpdate,
    VisitaDetalle, VisitaDetalleCreate, VisitaDetalleUpdate, EstadisticasVisitas,
    DetalleAutoridad, DetalleAutoridadCreate, DetalleAutoridadUpdate,
)
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import (
    get_programa_visita_service,
    get_visita_detalle_service,
    get_detalle_autoridad_service,
)
from services.programa_visita_service import (
    ProgramaVisitaService,
    VisitaDetalleService,
    DetalleAutoridadService,
)

programas_router = APIRouter(prefix="/programas-visita", tags=["programas-visita"])
visita_detalles_router = APIRouter(prefix="/visita-detalles", tags=["visita-detalles"])
detalle_autoridad_router = APIRouter(
    prefix="/detalle-autoridad-detalles-visita", tags=["detalle-autoridad-detalles-visita"]
)


# ==================== Programas de visita ====================

@programas_router.post("/", response_model=ProgramaVisita, status_code=status.HTTP_201_CREATED)
def crear_programa(body: ProgramaVisitaCreate, service: ProgramaVisitaService = Depends(get_programa_visita_service)):
    return service.create(body.model_dump())


@programas_router.get("/")
def listar_programas(
    params: PageParams = Depends(get_page_params),
    service: ProgramaVisitaService = Depends(get_programa_visita_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=ProgramaVisita)


@programas_router.get("/rango-fecha", response_model=List[ProgramaVisita])
def programas_por_rango(
    inicio: date = Query(..., description="Fecha inicial (YYYY-MM-DD)"),
    fin: date = Query(..., description="Fecha final (YYYY-MM-DD)"),
    service: ProgramaVisitaService = Depends(get_programa_visita_service),
):
    return service.get_by_rango_fecha(inicio, fin)


@programas_router.get("/fecha/{fecha}", response_model=List[ProgramaVisita])
def programas_por_fecha(fecha: date, service: ProgramaVisitaService = Depends(get_programa_visita_service)):
    """Programas del día indicado (YYYY-MM-DD)."""
    return service.get_by_fecha(fecha)


@programas_router.get("/autoridad/{autoridad_id}", response_model=List[ProgramaVisita])
def programas_por_autoridad(autoridad_id: int, service: ProgramaVisitaService = Depends(get_programa_visita_service)):
    return service.get_by_autoridad(autoridad_id)


@programas_router.get("/institucion/{institucion_id}", response_model=List[ProgramaVisita])
def programas_por_institucion(
    institucion_id: int,
    service: ProgramaVisitaService = Depends(get_programa_visita_service),
):
    return service.get_by_institucion(institucion_id)


@programas_router.get("/{programa_id}", response_model=ProgramaVisita)
def obtener_programa(programa_id: int, service: ProgramaVisitaService = Depends(get_programa_visita_service)):
    return service.get_by_id_or_fail(programa_id)


@programas_router.put("/{programa_id}", response_model=ProgramaVisita)
def actualizar_programa(
    programa_id: int,
    body: ProgramaVisitaUpdate,
    service: ProgramaVisitaService = Depends(get_programa_visita_service),
):
    return service.update(programa_id, body.model_dump(exclude_unset=True))


@programas_router.delete("/{programa_id}")
def eliminar_programa(programa_id: int, service: ProgramaVisitaService = Depends(get_programa_visita_service)):
    service.delete(programa_id)
    return create_delete_response("Programa de visita eliminado exitosamente", programa_id)


# ==================== Detalles de visita ====================

@visita_detalles_router.post("/", response_model=VisitaDetalle, status_code=status.HTTP_201_CREATED)
def crear_detalle(body: VisitaDetalleCreate, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    return service.create(body.model_dump())


@visita_detalles_router.get("/")
def listar_detalles(
    params: PageParams = Depends(get_page_params),
    service: VisitaDetalleService = Depends(get_visita_detalle_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=VisitaDetalle)


@visita_detalles_router.get("/estadisticas", response_model=EstadisticasVisitas)
def estadisticas_visitas(service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    """Total de visitas, total de participantes y promedio por visita."""
    return service.get_estadisticas()


@visita_detalles_router.get("/participantes", response_model=List[VisitaDetalle])
def detalles_por_participantes(
    minimo: int = Query(0, alias="min", ge=0),
    maximo: int = Query(10000, alias="max", ge=0),
    service: VisitaDetalleService = Depends(get_visita_detalle_service),
):
    return service.get_by_participantes(minimo, maximo)


@visita_detalles_router.get("/estudiante/{estudiante_id}", response_model=List[VisitaDetalle])
def detalles_por_estudiante(estudiante_id: int, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    return service.get_by_estudiante(estudiante_id)


@visita_detalles_router.get("/actividad/{actividad_id}", response_model=List[VisitaDetalle])
def detalles_por_actividad(actividad_id: int, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    return service.get_by_actividad(actividad_id)


@visita_detalles_router.get("/programa/{programa_id}", response_model=List[VisitaDetalle])
def detalles_por_programa(programa_id: int, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    return service.get_by_programa(programa_id)


@visita_detalles_router.get("/{detalle_id}", response_model=VisitaDetalle)
def obtener_detalle(detalle_id: int, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    return service.get_by_id_or_fail(detalle_id)


@visita_detalles_router.put("/{detalle_id}", response_model=VisitaDetalle)
def actualizar_detalle(
    detalle_id: int,
    body: VisitaDetalleUpdate,
    service: VisitaDetalleService = Depends(get_visita_detalle_service),
):
    return service.update(detalle_id, body.model_dump(exclude_unset=True))


@visita_detalles_router.delete("/{detalle_id}")
def eliminar_detalle(detalle_id: int, service: VisitaDetalleService = Depends(get_visita_detalle_service)):
    service.delete(detalle_id)
    return create_delete_response("Detalle de visita eliminado exitosamente", detalle_id)


# ==================== Autoridades por programa ====================

@detalle_autoridad_router.post("/", response_model=DetalleAutoridad, status_code=status.HTTP_201_CREATED)
def asignar_autoridad(
    body: DetalleAutoridadCreate,
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    return service.create(body.model_dump())


@detalle_autoridad_router.get("/")
def listar_asignaciones(
    params: PageParams = Depends(get_page_params),
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=DetalleAutoridad)


@detalle_autoridad_router.get("/programa-visita/{programa_id}", response_model=List[DetalleAutoridad])
def asignaciones_por_programa(
    programa_id: int,
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    return service.get_by_programa(programa_id)


@detalle_autoridad_router.delete("/programa-visita/{programa_id}")
def eliminar_asignaciones_de_programa(
    programa_id: int,
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    total = service.delete_by_programa(programa_id)
    return {
        "success": True,
        "message": f"{total} asignaciones eliminadas del programa de visita",
        "programa_visita_id": programa_id,
        "eliminados": total,
    }


@detalle_autoridad_router.get("/autoridad/{autoridad_id}", response_model=List[DetalleAutoridad])
def asignaciones_por_autoridad(
    autoridad_id: int,
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    return service.get_by_autoridad(autoridad_id)


@detalle_autoridad_router.get("/{detalle_id}", response_model=DetalleAutoridad)
def obtener_asignacion(detalle_id: int, service: DetalleAutoridadService = Depends(get_detalle_autoridad_service)):
    return service.get_by_id_or_fail(detalle_id)


@detalle_autoridad_router.put("/{detalle_id}", response_model=DetalleAutoridad)
def actualizar_asignacion(
    detalle_id: int,
    body: DetalleAutoridadUpdate,
    service: DetalleAutoridadService = Depends(get_detalle_autoridad_service),
):
    return service.update(detalle_id, body.model_dump(exclude_unset=True))


@detalle_autoridad_router.delete("/{detalle_id}")
def eliminar_asignacion(detalle_id: int, service: DetalleAutoridadService = Depends(get_detalle_autoridad_service)):
    service.delete(detalle_id)
    return create_delete_response("Asignación eliminada exitosamente", detalle_id)
