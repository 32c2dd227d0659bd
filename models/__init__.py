from .common import RegistroBase, DeleteResponse, create_delete_response
from .personas import Persona, PersonaCreate, PersonaUpdate
from .ubicacion import Provincia, ProvinciaCreate, ProvinciaUpdate, Ciudad, CiudadCreate, CiudadUpdate
from .instituciones import Institucion, InstitucionCreate, InstitucionUpdate
from .usuarios import (
    TipoUsuario,
    TipoUsuarioCreate,
    TipoUsuarioUpdate,
    Usuario,
    UsuarioCreate,
    UsuarioUpdate,
)
from .estudiantes import (
    Estudiante,
    EstudianteCreate,
    EstudianteUpdate,
    EstudianteUniversitario,
    EstudianteUniversitarioCreate,
    EstudianteUniversitarioUpdate,
)
from .autoridades import AutoridadUTEQ, AutoridadUTEQCreate, AutoridadUTEQUpdate
from .actividades import Tematica, TematicaCreate, TematicaUpdate, Actividad, ActividadCreate, ActividadUpdate
from .programas import (
    ProgramaVisita,
    ProgramaVisitaCreate,
    ProgramaVisitaUpdate,
    VisitaDetalle,
    VisitaDetalleCreate,
    VisitaDetalleUpdate,
    EstadisticasVisitas,
    DetalleAutoridad,
    DetalleAutoridadCreate,
    DetalleAutoridadUpdate,
)
from .dudas import Duda, DudaCreate, DudaUpdate, DudaAsignar, DudaResponder
from .codigos import CodigoUsuario, CodigoUsuarioCreate, CodigoUsuarioUpdate, CodigoVerificar

__all__ = [
    # Comunes
    "RegistroBase", "DeleteResponse", "create_delete_response",
    # Personas y ubicación
    "Persona", "PersonaCreate", "PersonaUpdate",
    "Provincia", "ProvinciaCreate", "ProvinciaUpdate",
    "Ciudad", "CiudadCreate", "CiudadUpdate",
    "Institucion", "InstitucionCreate", "InstitucionUpdate",
    # Usuarios
    "TipoUsuario", "TipoUsuarioCreate", "TipoUsuarioUpdate",
    "Usuario", "UsuarioCreate", "UsuarioUpdate",
    # Estudiantes y autoridades
    "Estudiante", "EstudianteCreate", "EstudianteUpdate",
    "EstudianteUniversitario", "EstudianteUniversitarioCreate", "EstudianteUniversitarioUpdate",
    "AutoridadUTEQ", "AutoridadUTEQCreate", "AutoridadUTEQUpdate",
    # Programas de visita
    "Tematica", "TematicaCreate", "TematicaUpdate",
    "Actividad", "ActividadCreate", "ActividadUpdate",
    "ProgramaVisita", "ProgramaVisitaCreate", "ProgramaVisitaUpdate",
    "VisitaDetalle", "VisitaDetalleCreate", "VisitaDetalleUpdate", "EstadisticasVisitas",
    "DetalleAutoridad", "DetalleAutoridadCreate", "DetalleAutoridadUpdate",
    # Dudas y códigos
    "Duda", "DudaCreate", "DudaUpdate", "DudaAsignar", "DudaResponder",
    "CodigoUsuario", "CodigoUsuarioCreate", "CodigoUsuarioUpdate", "CodigoVerificar",
]
