from pydantic import BaseModel, Field
from typing import Optional

from models.common import RegistroBase


class AutoridadUTEQCreate(BaseModel):
    """El formato del cargo se valida en el servicio."""
    persona_id: int = Field(..., gt=0)
    cargo: str


class AutoridadUTEQUpdate(BaseModel):
    cargo: Optional[str] = None


class AutoridadUTEQ(RegistroBase):
    id: int
    persona_id: int
    cargo: str
