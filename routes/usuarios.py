"""
Rutas de tipos de usuario y de administración de usuarios.

Las respuestas nunca incluyen la contraseña.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from models.usuarios import (
    TipoUsuario, TipoUsuarioCreate, TipoUsuarioUpdate,
    Usuario, UsuarioCreate, UsuarioUpdate,
)
from models.common import create_delete_response
from core.pagination import PageParams, get_page_params, create_paginated_response
from dependencies import get_tipo_usuario_service, get_usuario_service
from services.usuario_service import TipoUsuarioService, UsuarioService

tipos_usuario_router = APIRouter(prefix="/tipos-usuario", tags=["tipos-usuario"])
usuarios_router = APIRouter(prefix="/usuarios", tags=["usuarios"])


# ==================== Tipos de usuario ====================

@tipos_usuario_router.post("/", response_model=TipoUsuario, status_code=status.HTTP_201_CREATED)
def crear_tipo_usuario(body: TipoUsuarioCreate, service: TipoUsuarioService = Depends(get_tipo_usuario_service)):
    return service.create(body.model_dump())


@tipos_usuario_router.get("/")
def listar_tipos_usuario(
    params: PageParams = Depends(get_page_params),
    service: TipoUsuarioService = Depends(get_tipo_usuario_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=TipoUsuario)


@tipos_usuario_router.get("/nombre/{nombre}", response_model=TipoUsuario)
def obtener_tipo_por_nombre(nombre: str, service: TipoUsuarioService = Depends(get_tipo_usuario_service)):
    return service.get_by_nombre(nombre)


@tipos_usuario_router.get("/{tipo_id}", response_model=TipoUsuario)
def obtener_tipo_usuario(tipo_id: int, service: TipoUsuarioService = Depends(get_tipo_usuario_service)):
    return service.get_by_id_or_fail(tipo_id)


@tipos_usuario_router.put("/{tipo_id}", response_model=TipoUsuario)
def actualizar_tipo_usuario(
    tipo_id: int,
    body: TipoUsuarioUpdate,
    service: TipoUsuarioService = Depends(get_tipo_usuario_service),
):
    return service.update(tipo_id, body.model_dump(exclude_unset=True))


@tipos_usuario_router.delete("/{tipo_id}")
def eliminar_tipo_usuario(tipo_id: int, service: TipoUsuarioService = Depends(get_tipo_usuario_service)):
    service.delete(tipo_id)
    return create_delete_response("Tipo de usuario eliminado exitosamente", tipo_id)


# ==================== Usuarios ====================

@usuarios_router.post("/", response_model=Usuario, status_code=status.HTTP_201_CREATED)
def crear_usuario(body: UsuarioCreate, service: UsuarioService = Depends(get_usuario_service)):
    """Crea un usuario; la contraseña se almacena como hash bcrypt."""
    return service.create(body.model_dump())


@usuarios_router.get("/")
def listar_usuarios(
    params: PageParams = Depends(get_page_params),
    service: UsuarioService = Depends(get_usuario_service),
):
    items, total = service.get_all(page=params.page, page_size=params.page_size)
    return create_paginated_response(items, params.page, params.page_size, total, schema=Usuario)


@usuarios_router.get("/username/{username}", response_model=Usuario)
def obtener_por_username(username: str, service: UsuarioService = Depends(get_usuario_service)):
    return service.get_by_username(username)


@usuarios_router.get("/tipo/{tipo_usuario_id}", response_model=List[Usuario])
def usuarios_por_tipo(tipo_usuario_id: int, service: UsuarioService = Depends(get_usuario_service)):
    return service.get_by_tipo(tipo_usuario_id)


@usuarios_router.get("/persona/{persona_id}", response_model=List[Usuario])
def usuarios_por_persona(persona_id: int, service: UsuarioService = Depends(get_usuario_service)):
    return service.get_by_persona(persona_id)


@usuarios_router.get("/{usuario_id}", response_model=Usuario)
def obtener_usuario(usuario_id: int, service: UsuarioService = Depends(get_usuario_service)):
    return service.get_by_id_or_fail(usuario_id)


@usuarios_router.put("/{usuario_id}", response_model=Usuario)
def actualizar_usuario(usuario_id: int, body: UsuarioUpdate, service: UsuarioService = Depends(get_usuario_service)):
    return service.update(usuario_id, body.model_dump(exclude_unset=True))


@usuarios_router.delete("/{usuario_id}")
def eliminar_usuario(usuario_id: int, service: UsuarioService = Depends(get_usuario_service)):
    service.delete(usuario_id)
    return create_delete_response("Usuario eliminado exitosamente", usuario_id)
