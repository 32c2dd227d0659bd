"""
Modelos comunes de respuesta para la API.

Estos modelos proporcionan respuestas consistentes y estandarizadas
para todos los endpoints de la API
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from utils.datetime_utils import get_local_now


class RegistroBase(BaseModel):
    """Campos de auditoría compartidos por todas las respuestas de entidades."""
    model_config = ConfigDict(from_attributes=True)

    fecha_creacion: Optional[datetime] = None
    fecha_actualizacion: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    is_deleted: bool = False


class DeleteResponse(BaseModel):
    """Respuesta estándar para operaciones de eliminación."""
    success: bool = Field(True, description="Indica si la eliminación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo")
    deleted_id: int = Field(..., description="ID del registro eliminado")
    soft_delete: bool = Field(True, description="Indica si fue soft delete (true) o hard delete (false)")
    timestamp: datetime = Field(default_factory=get_local_now)


def create_delete_response(message: str, deleted_id: int, soft_delete: bool = True) -> dict:
    """Helper para crear respuestas de eliminación."""
    return DeleteResponse(
        message=message,
        deleted_id=deleted_id,
        soft_delete=soft_delete
    ).model_dump(mode="json")
