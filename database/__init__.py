from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    uow,
    CascadeStep,
    soft_delete_cascade,
    restore_cascade,
    Base,
    ProvinciaORM,
    CiudadORM,
    PersonaORM,
    TipoUsuarioORM,
    UsuarioORM,
    CodigoUsuarioORM,
    InstitucionORM,
    EstudianteORM,
    EstudianteUniversitarioORM,
    AutoridadUTEQORM,
    TematicaORM,
    ActividadORM,
    ProgramaVisitaORM,
    DetalleAutoridadDetallesVisitaORM,
    VisitaDetalleORM,
    DudasORM,
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "uow",
    "CascadeStep",
    "soft_delete_cascade",
    "restore_cascade",
    "Base",
    "ProvinciaORM",
    "CiudadORM",
    "PersonaORM",
    "TipoUsuarioORM",
    "UsuarioORM",
    "CodigoUsuarioORM",
    "InstitucionORM",
    "EstudianteORM",
    "EstudianteUniversitarioORM",
    "AutoridadUTEQORM",
    "TematicaORM",
    "ActividadORM",
    "ProgramaVisitaORM",
    "DetalleAutoridadDetallesVisitaORM",
    "VisitaDetalleORM",
    "DudasORM",
]
