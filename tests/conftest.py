"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from datetime import datetime, date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "clave-de-pruebas-apiescuela-0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"

from main import app
from auth import JWTManager
from config import settings
from core.security import hash_password
from database.db import get_db
from database.models import (
    Base,
    PersonaORM,
    TipoUsuarioORM,
    UsuarioORM,
    ProvinciaORM,
    CiudadORM,
    InstitucionORM,
    EstudianteORM,
    EstudianteUniversitarioORM,
    AutoridadUTEQORM,
    TematicaORM,
    ActividadORM,
    ProgramaVisitaORM,
)


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _add(db_session: Session, entity):
    db_session.add(entity)
    db_session.commit()
    db_session.refresh(entity)
    return entity


# ==================== Persona / Usuario Fixtures ====================

@pytest.fixture
def persona_data() -> Dict[str, Any]:
    return {
        "nombre": "María Fernanda Cedeño",
        "cedula": "1204567890",
        "correo": "maria.cedeno@uteq.edu.ec",
        "telefono": "0991234567",
        "fecha_nacimiento": date(1990, 5, 17),
    }


@pytest.fixture
def persona(db_session: Session, persona_data: Dict[str, Any]) -> PersonaORM:
    """Persona registrada en la base de datos."""
    return _add(db_session, PersonaORM(**persona_data))


@pytest.fixture
def otra_persona(db_session: Session) -> PersonaORM:
    return _add(db_session, PersonaORM(
        nombre="Carlos Andrés Mora",
        cedula="0923456781",
        correo="carlos.mora@colegio.edu.ec",
    ))


@pytest.fixture
def tipo_usuario(db_session: Session) -> TipoUsuarioORM:
    return _add(db_session, TipoUsuarioORM(nombre="administrador"))


@pytest.fixture
def usuario_password() -> str:
    return "Secreta123"


@pytest.fixture
def usuario(
    db_session: Session,
    persona: PersonaORM,
    tipo_usuario: TipoUsuarioORM,
    usuario_password: str,
) -> UsuarioORM:
    """Usuario con contraseña en hash bcrypt."""
    return _add(db_session, UsuarioORM(
        usuario="mcedeno",
        contrasena=hash_password(usuario_password),
        persona_id=persona.id,
        tipo_usuario_id=tipo_usuario.id,
        verificado=True,
    ))


@pytest.fixture
def usuario_legacy(
    db_session: Session,
    otra_persona: PersonaORM,
    tipo_usuario: TipoUsuarioORM,
) -> UsuarioORM:
    """Usuario heredado con la contraseña guardada en texto plano."""
    return _add(db_session, UsuarioORM(
        usuario="cmora",
        contrasena="clave123",
        persona_id=otra_persona.id,
        tipo_usuario_id=tipo_usuario.id,
        verificado=False,
    ))


# ==================== Token Fixtures ====================

@pytest.fixture
def jwt_manager() -> JWTManager:
    return JWTManager.from_settings(settings)


@pytest.fixture
def usuario_token(jwt_manager: JWTManager, usuario: UsuarioORM) -> str:
    return jwt_manager.create_access_token(
        user_id=usuario.id,
        username=usuario.usuario,
        tipo_usuario_id=usuario.tipo_usuario_id,
    )


@pytest.fixture
def auth_headers(usuario_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {usuario_token}"}


# ==================== Catálogos ====================

@pytest.fixture
def provincia(db_session: Session) -> ProvinciaORM:
    return _add(db_session, ProvinciaORM(nombre="Los Ríos"))


@pytest.fixture
def ciudad(db_session: Session, provincia: ProvinciaORM) -> CiudadORM:
    return _add(db_session, CiudadORM(nombre="Quevedo", provincia_id=provincia.id))


@pytest.fixture
def institucion(db_session: Session) -> InstitucionORM:
    return _add(db_session, InstitucionORM(
        nombre="Unidad Educativa Quevedo",
        autoridad="Lcda. Rosa Vera",
        contacto="052750123",
        direccion="Av. 7 de Octubre",
    ))


@pytest.fixture
def tematica(db_session: Session) -> TematicaORM:
    return _add(db_session, TematicaORM(nombre="Ingeniería en Software", descripcion="Talleres de programación"))


@pytest.fixture
def actividades(db_session: Session, tematica: TematicaORM) -> list:
    """Actividades de 15, 30, 90, 120 y 180 minutos."""
    result = []
    for nombre, duracion in (
        ("Bienvenida", 15),
        ("Charla de carreras", 30),
        ("Taller de robótica", 90),
        ("Recorrido por laboratorios", 120),
        ("Hackatón", 180),
    ):
        result.append(_add(db_session, ActividadORM(nombre=nombre, tematica_id=tematica.id, duracion=duracion)))
    return result


# ==================== Estudiantes / Autoridades ====================

@pytest.fixture
def autoridad(db_session: Session, persona: PersonaORM, usuario: UsuarioORM) -> AutoridadUTEQORM:
    """Autoridad UTEQ cuya persona también tiene usuario."""
    return _add(db_session, AutoridadUTEQORM(persona_id=persona.id, cargo="Decano"))


@pytest.fixture
def estudiante(
    db_session: Session,
    otra_persona: PersonaORM,
    institucion: InstitucionORM,
    ciudad: CiudadORM,
) -> EstudianteORM:
    return _add(db_session, EstudianteORM(
        persona_id=otra_persona.id,
        institucion_id=institucion.id,
        ciudad_id=ciudad.id,
        especialidad="Informática",
    ))


@pytest.fixture
def universitario(db_session: Session) -> EstudianteUniversitarioORM:
    persona = _add(db_session, PersonaORM(nombre="Luis Zambrano", cedula="1207654321"))
    return _add(db_session, EstudianteUniversitarioORM(persona_id=persona.id, semestre=5))


@pytest.fixture
def programas(db_session: Session, institucion: InstitucionORM) -> list:
    """Programas el 10, 15 (dos) y 20 de marzo de 2025."""
    fechas = [
        datetime(2025, 3, 10, 9, 0),
        datetime(2025, 3, 15, 0, 0),
        datetime(2025, 3, 15, 23, 59, 59),
        datetime(2025, 3, 20, 14, 30),
    ]
    return [
        _add(db_session, ProgramaVisitaORM(fecha=fecha, institucion_id=institucion.id))
        for fecha in fechas
    ]
