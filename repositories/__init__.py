"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .persona_repository import PersonaRepository
from .usuario_repository import UsuarioRepository
from .tipo_usuario_repository import TipoUsuarioRepository
from .provincia_repository import ProvinciaRepository
from .ciudad_repository import CiudadRepository
from .institucion_repository import InstitucionRepository
from .estudiante_repository import EstudianteRepository
from .estudiante_universitario_repository import EstudianteUniversitarioRepository
from .autoridad_uteq_repository import AutoridadUTEQRepository
from .tematica_repository import TematicaRepository
from .actividad_repository import ActividadRepository
from .programa_visita_repository import ProgramaVisitaRepository
from .detalle_autoridad_repository import DetalleAutoridadRepository
from .visita_detalle_repository import VisitaDetalleRepository
from .dudas_repository import DudasRepository
from .codigo_usuario_repository import CodigoUsuarioRepository

__all__ = [
    "BaseRepository",
    "PersonaRepository",
    "UsuarioRepository",
    "TipoUsuarioRepository",
    "ProvinciaRepository",
    "CiudadRepository",
    "InstitucionRepository",
    "EstudianteRepository",
    "EstudianteUniversitarioRepository",
    "AutoridadUTEQRepository",
    "TematicaRepository",
    "ActividadRepository",
    "ProgramaVisitaRepository",
    "DetalleAutoridadRepository",
    "VisitaDetalleRepository",
    "DudasRepository",
    "CodigoUsuarioRepository",
]
