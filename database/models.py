from datetime import datetime

from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    Date,
    Text,
    Boolean,
    ForeignKey,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def get_current_time() -> datetime:
    """Hora local actual (naive) para columnas de auditoría."""
    from utils.datetime_utils import local_now_naive
    return local_now_naive()


class AuditMixin:
    """Columnas de auditoría y soft delete compartidas por todas las tablas."""
    fecha_creacion = Column(DateTime, default=get_current_time, nullable=False)
    fecha_actualizacion = Column(DateTime, default=get_current_time, onupdate=get_current_time, nullable=False)
    deleted_at = Column(DateTime, nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


#ORM: Ubicación
class ProvinciaORM(AuditMixin, Base):
    __tablename__ = "provincias"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False, unique=True)

    ciudades = relationship("CiudadORM", back_populates="provincia")


class CiudadORM(AuditMixin, Base):
    __tablename__ = "ciudades"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    provincia_id = Column(Integer, ForeignKey("provincias.id"), nullable=False, index=True)

    provincia = relationship("ProvinciaORM", back_populates="ciudades")


#ORM: Personas
class PersonaORM(AuditMixin, Base):
    __tablename__ = "personas"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    cedula = Column(String(10), nullable=False, unique=True)
    correo = Column(String(255), nullable=True, unique=True)
    telefono = Column(String(20), nullable=True)
    fecha_nacimiento = Column(Date, nullable=True)


#ORM: Usuarios
class TipoUsuarioORM(AuditMixin, Base):
    __tablename__ = "tipos_usuario"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(50), nullable=False, unique=True)


class UsuarioORM(AuditMixin, Base):
    __tablename__ = "usuarios"
    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario = Column(String(100), nullable=False, unique=True)
    # texto plano (datos heredados) o hash bcrypt de 60 caracteres
    contrasena = Column(String(255), nullable=False)
    persona_id = Column(Integer, ForeignKey("personas.id"), nullable=False, index=True)
    tipo_usuario_id = Column(Integer, ForeignKey("tipos_usuario.id"), nullable=False, index=True)
    verificado = Column(Boolean, nullable=False, default=False)

    persona = relationship("PersonaORM")
    tipo_usuario = relationship("TipoUsuarioORM")


class CodigoUsuarioORM(AuditMixin, Base):
    __tablename__ = "codigosusuarios"
    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False, index=True)
    codigo = Column(String(10), nullable=False, index=True)
    estado = Column(String(20), nullable=False, default="valido")
    expira_en = Column(DateTime, nullable=True, index=True)

    usuario = relationship("UsuarioORM")


#ORM: Instituciones y estudiantes
class InstitucionORM(AuditMixin, Base):
    __tablename__ = "instituciones"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(200), nullable=False)
    autoridad = Column(String(150), nullable=True)
    contacto = Column(String(100), nullable=True)
    direccion = Column(String(255), nullable=True)


class EstudianteORM(AuditMixin, Base):
    __tablename__ = "estudiantes"
    id = Column(Integer, primary_key=True, autoincrement=True)
    persona_id = Column(Integer, ForeignKey("personas.id"), nullable=False, unique=True)
    institucion_id = Column(Integer, ForeignKey("instituciones.id"), nullable=False, index=True)
    ciudad_id = Column(Integer, ForeignKey("ciudades.id"), nullable=False, index=True)
    especialidad = Column(String(100), nullable=True)

    persona = relationship("PersonaORM")
    institucion = relationship("InstitucionORM")
    ciudad = relationship("CiudadORM")


class EstudianteUniversitarioORM(AuditMixin, Base):
    __tablename__ = "estudiantes_universitarios"
    id = Column(Integer, primary_key=True, autoincrement=True)
    persona_id = Column(Integer, ForeignKey("personas.id"), nullable=False, unique=True)
    semestre = Column(Integer, nullable=False)

    persona = relationship("PersonaORM")


class AutoridadUTEQORM(AuditMixin, Base):
    __tablename__ = "autoridades_uteq"
    id = Column(Integer, primary_key=True, autoincrement=True)
    persona_id = Column(Integer, ForeignKey("personas.id"), nullable=False, unique=True)
    cargo = Column(String(100), nullable=False)

    persona = relationship("PersonaORM")


#ORM: Programas de visita
class TematicaORM(AuditMixin, Base):
    __tablename__ = "tematicas"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(150), nullable=False)
    descripcion = Column(Text, nullable=True)


class ActividadORM(AuditMixin, Base):
    __tablename__ = "actividades"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(150), nullable=False)
    tematica_id = Column(Integer, ForeignKey("tematicas.id"), nullable=False, index=True)
    duracion = Column(Integer, nullable=False)  # minutos

    tematica = relationship("TematicaORM")


class ProgramaVisitaORM(AuditMixin, Base):
    __tablename__ = "programas_visita"
    id = Column(Integer, primary_key=True, autoincrement=True)
    fecha = Column(DateTime, nullable=False, index=True)
    institucion_id = Column(Integer, ForeignKey("instituciones.id"), nullable=False, index=True)
    autoridad_uteq_id = Column(Integer, ForeignKey("autoridades_uteq.id"), nullable=True, index=True)

    institucion = relationship("InstitucionORM")
    autoridad_uteq = relationship("AutoridadUTEQORM")


class DetalleAutoridadDetallesVisitaORM(AuditMixin, Base):
    __tablename__ = "detalle_autoridad_detalles_visita"
    id = Column(Integer, primary_key=True, autoincrement=True)
    programa_visita_id = Column(Integer, ForeignKey("programas_visita.id"), nullable=False, index=True)
    autoridad_uteq_id = Column(Integer, ForeignKey("autoridades_uteq.id"), nullable=False, index=True)


class VisitaDetalleORM(AuditMixin, Base):
    __tablename__ = "visita_detalles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    actividad_id = Column(Integer, ForeignKey("actividades.id"), nullable=False, index=True)
    programa_visita_id = Column(Integer, ForeignKey("programas_visita.id"), nullable=False, index=True)
    estudiante_universitario_id = Column(
        Integer, ForeignKey("estudiantes_universitarios.id"), nullable=True, index=True
    )
    participantes = Column(Integer, nullable=False, default=0)


#ORM: Dudas
class DudasORM(AuditMixin, Base):
    __tablename__ = "dudas"
    id = Column(Integer, primary_key=True, autoincrement=True)
    pregunta = Column(Text, nullable=False)
    respuesta = Column(Text, nullable=True)
    estudiante_id = Column(Integer, ForeignKey("estudiantes.id"), nullable=False, index=True)
    autoridad_uteq_id = Column(Integer, ForeignKey("autoridades_uteq.id"), nullable=True, index=True)

    @property
    def estado(self) -> str:
        if self.respuesta and self.respuesta.strip():
            return "respondida"
        if self.autoridad_uteq_id is not None:
            return "asignada"
        return "sin_asignar"
