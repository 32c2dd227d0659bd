"""
Tests for the unit of work and the cascade soft delete / restore helpers.

Tests cover:
- uow commits on success and rolls back on error
- A failing required step leaves every row untouched
- Optional steps with no rows are skipped
- Restore in reverse order
"""

import pytest
from sqlalchemy.orm import Session

from database.db import uow, CascadeStep, soft_delete_cascade, restore_cascade
from database.models import AutoridadUTEQORM, PersonaORM, UsuarioORM, TematicaORM
from repositories.autoridad_uteq_repository import AutoridadUTEQRepository
from core.exceptions import NotFoundException


class TestUnitOfWork:

    def test_uow_commit(self, db_session: Session):
        with uow(db_session):
            db_session.add(TematicaORM(nombre="Agronomía"))

        db_session.expire_all()
        assert db_session.query(TematicaORM).count() == 1

    def test_uow_rollback(self, db_session: Session):
        with pytest.raises(RuntimeError):
            with uow(db_session):
                db_session.add(TematicaORM(nombre="Agronomía"))
                db_session.flush()
                raise RuntimeError("fallo a mitad de la transacción")

        assert db_session.query(TematicaORM).count() == 0


class TestSoftDeleteCascade:

    def test_paso_requerido_inexistente_no_modifica_nada(
        self,
        db_session: Session,
        autoridad: AutoridadUTEQORM,
    ):
        """Test rows already marked in earlier steps are rolled back."""
        autoridad_id = autoridad.id
        persona_id = autoridad.persona_id

        with pytest.raises(NotFoundException):
            soft_delete_cascade(db_session, [
                CascadeStep(AutoridadUTEQORM, "id", autoridad_id),
                CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
                CascadeStep(PersonaORM, "id", 9999),
            ])

        db_session.expire_all()
        assert db_session.get(AutoridadUTEQORM, autoridad_id).deleted_at is None
        assert db_session.get(PersonaORM, persona_id).deleted_at is None
        assert all(
            u.deleted_at is None
            for u in db_session.query(UsuarioORM).filter(UsuarioORM.persona_id == persona_id)
        )

    def test_paso_opcional_sin_filas(self, db_session: Session, otra_persona: PersonaORM):
        persona_id = otra_persona.id

        soft_delete_cascade(db_session, [
            CascadeStep(UsuarioORM, "persona_id", persona_id, required=False),
            CascadeStep(PersonaORM, "id", persona_id),
        ])

        assert db_session.get(PersonaORM, persona_id).deleted_at is not None

    def test_restore_cascade(self, db_session: Session, autoridad: AutoridadUTEQORM):
        repo = AutoridadUTEQRepository(db_session)
        persona_id = autoridad.persona_id

        repo.delete_cascade(autoridad)
        assert repo.get_by_id(autoridad.id) is None

        restored = repo.restore_cascade(autoridad)

        assert restored.deleted_at is None
        assert db_session.get(PersonaORM, persona_id).deleted_at is None
        assert repo.count_by_persona(persona_id) == 1

    def test_restore_no_toca_registros_activos(self, db_session: Session, persona: PersonaORM):
        fecha = persona.fecha_actualizacion

        restore_cascade(db_session, [CascadeStep(PersonaORM, "id", persona.id)])

        assert persona.deleted_at is None
        assert persona.fecha_actualizacion == fecha
