"""
Inyección de dependencias para servicios y repositorios.

Cada servicio recibe repositorios construidos sobre la misma sesión del
request, de modo que un commit abarca todas sus operaciones.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from auth import JWTManager, get_jwt_manager
from config import Settings, get_settings
from database.db import get_db
from repositories import (
    PersonaRepository,
    UsuarioRepository,
    TipoUsuarioRepository,
    ProvinciaRepository,
    CiudadRepository,
    InstitucionRepository,
    EstudianteRepository,
    EstudianteUniversitarioRepository,
    AutoridadUTEQRepository,
    TematicaRepository,
    ActividadRepository,
    ProgramaVisitaRepository,
    DetalleAutoridadRepository,
    VisitaDetalleRepository,
    DudasRepository,
    CodigoUsuarioRepository,
)
from services.auth_service import AuthService
from services.persona_service import PersonaService
from services.ubicacion_service import ProvinciaService, CiudadService
from services.institucion_service import InstitucionService
from services.usuario_service import TipoUsuarioService, UsuarioService
from services.estudiante_service import EstudianteService, EstudianteUniversitarioService
from services.autoridad_uteq_service import AutoridadUTEQService
from services.actividad_service import TematicaService, ActividadService
from services.programa_visita_service import (
    ProgramaVisitaService,
    VisitaDetalleService,
    DetalleAutoridadService,
)
from services.dudas_service import DudasService
from services.codigo_usuario_service import CodigoUsuarioService


# ==================== Auth ====================

def get_auth_service(
    db: Session = Depends(get_db),
    jwt_manager: JWTManager = Depends(get_jwt_manager),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Devuelve un AuthService con sus repositorios y el JWTManager.

    Ejemplo:
        ```python
        @router.post("/login")
        def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
            return service.login(body.usuario, body.contrasena)
        ```
    """
    return AuthService(
        usuario_repo=UsuarioRepository(db),
        persona_repo=PersonaRepository(db),
        codigo_repo=CodigoUsuarioRepository(db),
        jwt_manager=jwt_manager,
        codigo_expira_minutos=settings.codigo_expira_minutos,
    )


# ==================== Personas y ubicación ====================

def get_persona_service(db: Session = Depends(get_db)) -> PersonaService:
    return PersonaService(PersonaRepository(db))


def get_provincia_service(db: Session = Depends(get_db)) -> ProvinciaService:
    return ProvinciaService(ProvinciaRepository(db))


def get_ciudad_service(db: Session = Depends(get_db)) -> CiudadService:
    return CiudadService(CiudadRepository(db), ProvinciaRepository(db))


def get_institucion_service(db: Session = Depends(get_db)) -> InstitucionService:
    return InstitucionService(InstitucionRepository(db))


# ==================== Usuarios ====================

def get_tipo_usuario_service(db: Session = Depends(get_db)) -> TipoUsuarioService:
    return TipoUsuarioService(TipoUsuarioRepository(db))


def get_usuario_service(db: Session = Depends(get_db)) -> UsuarioService:
    return UsuarioService(UsuarioRepository(db), PersonaRepository(db), TipoUsuarioRepository(db))


def get_codigo_usuario_service(db: Session = Depends(get_db)) -> CodigoUsuarioService:
    return CodigoUsuarioService(CodigoUsuarioRepository(db), UsuarioRepository(db))


# ==================== Estudiantes y autoridades ====================

def get_estudiante_service(db: Session = Depends(get_db)) -> EstudianteService:
    return EstudianteService(
        EstudianteRepository(db),
        PersonaRepository(db),
        InstitucionRepository(db),
        CiudadRepository(db),
    )


def get_estudiante_universitario_service(db: Session = Depends(get_db)) -> EstudianteUniversitarioService:
    return EstudianteUniversitarioService(EstudianteUniversitarioRepository(db), PersonaRepository(db))


def get_autoridad_uteq_service(db: Session = Depends(get_db)) -> AutoridadUTEQService:
    return AutoridadUTEQService(AutoridadUTEQRepository(db), PersonaRepository(db))


# ==================== Programas de visita ====================

def get_tematica_service(db: Session = Depends(get_db)) -> TematicaService:
    return TematicaService(TematicaRepository(db))


def get_actividad_service(db: Session = Depends(get_db)) -> ActividadService:
    return ActividadService(ActividadRepository(db), TematicaRepository(db))


def get_programa_visita_service(db: Session = Depends(get_db)) -> ProgramaVisitaService:
    return ProgramaVisitaService(
        ProgramaVisitaRepository(db),
        InstitucionRepository(db),
        AutoridadUTEQRepository(db),
    )


def get_visita_detalle_service(db: Session = Depends(get_db)) -> VisitaDetalleService:
    return VisitaDetalleService(
        VisitaDetalleRepository(db),
        ActividadRepository(db),
        ProgramaVisitaRepository(db),
        EstudianteUniversitarioRepository(db),
    )


def get_detalle_autoridad_service(db: Session = Depends(get_db)) -> DetalleAutoridadService:
    return DetalleAutoridadService(
        DetalleAutoridadRepository(db),
        ProgramaVisitaRepository(db),
        AutoridadUTEQRepository(db),
    )


def get_dudas_service(db: Session = Depends(get_db)) -> DudasService:
    return DudasService(DudasRepository(db), EstudianteRepository(db), AutoridadUTEQRepository(db))
