"""
Rutas de administración de códigos de recuperación.

El listado completo está deshabilitado (403) y la consulta por usuario
no está disponible (501).
"""

from fastapi import APIRouter, Depends, status

from models.codigos import CodigoUsuario, CodigoUsuarioCreate, CodigoUsuarioUpdate, CodigoVerificar
from dependencies import get_codigo_usuario_service, get_auth_service
from services.codigo_usuario_service import CodigoUsuarioService
from services.auth_service import AuthService

router = APIRouter(prefix="/codigos", tags=["codigos"])


@router.post("/", response_model=CodigoUsuario, status_code=status.HTTP_201_CREATED)
def crear_codigo(body: CodigoUsuarioCreate, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    return service.create(body.model_dump())


@router.get("/")
def listar_codigos(service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    service.listar()


@router.get("/usuario/{usuario_id}")
def codigos_por_usuario(usuario_id: int, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    service.get_by_usuario(usuario_id)


@router.post("/verificar")
def verificar_codigo(body: CodigoVerificar, service: AuthService = Depends(get_auth_service)):
    result = service.verify_codigo(body.codigo)
    result.raise_for_estado()
    return {
        "success": True,
        "estado": result.estado,
        "usuario_id": result.usuario_id,
        "cedula": result.cedula,
        "codigo_id": result.codigo_id,
    }


@router.get("/{codigo_id}", response_model=CodigoUsuario)
def obtener_codigo(codigo_id: int, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    return service.get_by_id_or_fail(codigo_id)


@router.put("/{codigo_id}/verificar", response_model=CodigoUsuario)
def marcar_verificado(codigo_id: int, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    return service.verificar(codigo_id)


@router.put("/{codigo_id}/expirar", response_model=CodigoUsuario)
def marcar_expirado(codigo_id: int, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    return service.expirar(codigo_id)


@router.put("/{codigo_id}", response_model=CodigoUsuario)
def actualizar_codigo(
    codigo_id: int,
    body: CodigoUsuarioUpdate,
    service: CodigoUsuarioService = Depends(get_codigo_usuario_service),
):
    return service.update(codigo_id, body.model_dump(exclude_unset=True))


@router.delete("/{codigo_id}", response_model=CodigoUsuario)
def expirar_codigo(codigo_id: int, service: CodigoUsuarioService = Depends(get_codigo_usuario_service)):
    """Los códigos no se eliminan: quedan en estado ``expirado``."""
    return service.expirar(codigo_id)
