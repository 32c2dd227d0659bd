"""
Tests for the filtering queries of the entity repositories.

Tests cover:
- Actividad duration range
- ProgramaVisita by day and by date range
- VisitaDetalle statistics
- CodigoUsuario lifecycle queries
"""

import pytest
from datetime import date, timedelta
from sqlalchemy.orm import Session

from repositories.actividad_repository import ActividadRepository
from repositories.programa_visita_repository import ProgramaVisitaRepository
from repositories.visita_detalle_repository import VisitaDetalleRepository
from repositories.codigo_usuario_repository import (
    CodigoUsuarioRepository,
    ESTADO_VALIDO,
    ESTADO_VERIFICADO,
)
from database.models import UsuarioORM, VisitaDetalleORM
from utils.datetime_utils import local_now_naive


class TestActividadRepository:

    def test_find_by_duracion_rango_cerrado(self, db_session: Session, actividades: list):
        repo = ActividadRepository(db_session)

        result = repo.find_by_duracion(30, 120)

        assert [a.duracion for a in result] == [30, 90, 120]

    def test_find_by_duracion_valor_exacto(self, db_session: Session, actividades: list):
        repo = ActividadRepository(db_session)

        assert [a.duracion for a in repo.find_by_duracion(180, 180)] == [180]


class TestProgramaVisitaRepository:

    def test_find_by_fecha(self, db_session: Session, programas: list):
        repo = ProgramaVisitaRepository(db_session)

        result = repo.find_by_fecha(date(2025, 3, 15))

        assert [p.id for p in result] == [programas[1].id, programas[2].id]

    def test_find_by_rango_fecha(self, db_session: Session, programas: list):
        repo = ProgramaVisitaRepository(db_session)

        assert len(repo.find_by_rango_fecha(date(2025, 3, 15), date(2025, 3, 20))) == 3
        assert len(repo.find_by_rango_fecha(date(2025, 3, 11), date(2025, 3, 14))) == 0

    def test_find_by_institucion(self, db_session: Session, programas: list):
        repo = ProgramaVisitaRepository(db_session)

        assert len(repo.find_by_institucion(programas[0].institucion_id)) == 4


class TestVisitaDetalleRepository:

    def test_estadisticas_excluye_eliminados(
        self,
        db_session: Session,
        programas: list,
        actividades: list,
    ):
        repo = VisitaDetalleRepository(db_session)
        for participantes in (12, 18, 100):
            db_session.add(VisitaDetalleORM(
                actividad_id=actividades[0].id,
                programa_visita_id=programas[0].id,
                participantes=participantes,
            ))
        db_session.commit()
        eliminado = repo.find_by_participantes(100, 100)[0]
        repo.delete(eliminado)
        repo.commit()

        stats = repo.estadisticas()

        assert stats == {"total_visitas": 2, "total_participantes": 30, "promedio_participantes": 15.0}

    def test_promedio_redondeado(self, db_session: Session, programas: list, actividades: list):
        repo = VisitaDetalleRepository(db_session)
        for participantes in (1, 1, 2):
            db_session.add(VisitaDetalleORM(
                actividad_id=actividades[0].id,
                programa_visita_id=programas[0].id,
                participantes=participantes,
            ))
        db_session.commit()

        assert repo.estadisticas()["promedio_participantes"] == 1.33


class TestCodigoUsuarioRepository:

    def test_crear_codigo_vigente(self, db_session: Session, usuario: UsuarioORM):
        repo = CodigoUsuarioRepository(db_session)

        registro = repo.crear(usuario.id, "111222", 10)
        repo.commit()

        assert registro.estado == ESTADO_VALIDO
        assert registro.expira_en > local_now_naive()
        assert repo.existe_vigente_por_usuario(usuario.id) is True

    def test_codigo_vencido_no_es_vigente(self, db_session: Session, usuario: UsuarioORM):
        repo = CodigoUsuarioRepository(db_session)
        registro = repo.crear(usuario.id, "111222", 10)
        repo.update(registro, {"expira_en": local_now_naive() - timedelta(minutes=1)})
        repo.commit()

        assert repo.existe_vigente_por_usuario(usuario.id) is False

    def test_codigo_verificado_no_es_vigente(self, db_session: Session, usuario: UsuarioORM):
        repo = CodigoUsuarioRepository(db_session)
        registro = repo.crear(usuario.id, "111222", 10)
        repo.marcar_como_verificado(registro)
        repo.commit()

        assert registro.estado == ESTADO_VERIFICADO
        assert repo.existe_vigente_por_usuario(usuario.id) is False

    def test_find_latest_by_codigo(self, db_session: Session, usuario: UsuarioORM):
        repo = CodigoUsuarioRepository(db_session)
        primero = repo.crear(usuario.id, "333444", 10)
        repo.marcar_como_verificado(primero)
        segundo = repo.crear(usuario.id, "333444", 10)
        repo.commit()

        assert repo.find_latest_by_codigo("333444").id == segundo.id
        assert repo.find_latest_by_codigo("999999") is None
