"""
Tests for AutoridadUTEQ and Estudiante endpoints.

Tests cover:
- Creation rules (cargo format, persona already registered)
- Cascade soft delete: registro → usuario(s) → persona
- Cascade restore in reverse order
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from typing import Dict

from database.models import (
    AutoridadUTEQORM,
    EstudianteORM,
    PersonaORM,
    UsuarioORM,
)


class TestAutoridadCreation:
    """Tests for POST /autoridades-uteq/."""

    def test_crear_autoridad(
        self,
        client: TestClient,
        otra_persona: PersonaORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/autoridades-uteq/",
            json={"persona_id": otra_persona.id, "cargo": "  Director de Vinculación  "},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["cargo"] == "Director de Vinculación"

    def test_crear_autoridad_cargo_invalido(
        self,
        client: TestClient,
        otra_persona: PersonaORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/autoridades-uteq/",
            json={"persona_id": otra_persona.id, "cargo": "Decano #1"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["details"]["errors"][0]["field"] == "cargo"

    def test_crear_autoridad_persona_ya_registrada(
        self,
        client: TestClient,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        """Test a persona can be an authority only once."""
        response = client.post(
            "/autoridades-uteq/",
            json={"persona_id": autoridad.persona_id, "cargo": "Vicerrector"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "person_exists"

    def test_crear_autoridad_persona_inexistente(self, client: TestClient, auth_headers: Dict[str, str]):
        response = client.post(
            "/autoridades-uteq/",
            json={"persona_id": 9999, "cargo": "Rector"},
            headers=auth_headers,
        )

        assert response.status_code == 404


class TestAutoridadCascade:
    """Tests for DELETE and PUT /autoridades-uteq/{id}/restore."""

    def test_eliminar_autoridad_en_cascada(
        self,
        client: TestClient,
        db_session: Session,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        """Test delete marks authority, its users and its persona."""
        autoridad_id = autoridad.id
        persona_id = autoridad.persona_id

        response = client.delete(f"/autoridades-uteq/{autoridad_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["deleted_id"] == autoridad_id

        db_session.expire_all()
        assert db_session.get(AutoridadUTEQORM, autoridad_id).deleted_at is not None
        assert db_session.get(PersonaORM, persona_id).deleted_at is not None
        usuarios = db_session.query(UsuarioORM).filter(UsuarioORM.persona_id == persona_id).all()
        assert usuarios
        assert all(u.deleted_at is not None for u in usuarios)

        deleted = client.get("/autoridades-uteq/deleted", headers=auth_headers).json()
        assert [a["id"] for a in deleted] == [autoridad_id]
        assert client.get(f"/autoridades-uteq/{autoridad_id}", headers=auth_headers).status_code == 404

    def test_restaurar_autoridad_en_cascada(
        self,
        client: TestClient,
        db_session: Session,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        autoridad_id = autoridad.id
        persona_id = autoridad.persona_id
        client.delete(f"/autoridades-uteq/{autoridad_id}", headers=auth_headers)

        response = client.put(f"/autoridades-uteq/{autoridad_id}/restore", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["is_deleted"] is False

        db_session.expire_all()
        assert db_session.get(PersonaORM, persona_id).deleted_at is None
        usuarios = db_session.query(UsuarioORM).filter(UsuarioORM.persona_id == persona_id).all()
        assert all(u.deleted_at is None for u in usuarios)

    def test_restaurar_autoridad_no_eliminada(
        self,
        client: TestClient,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        response = client.put(f"/autoridades-uteq/{autoridad.id}/restore", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == "NOT_DELETED"

    def test_including_deleted(
        self,
        client: TestClient,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        client.delete(f"/autoridades-uteq/{autoridad.id}", headers=auth_headers)

        activos = client.get("/autoridades-uteq/", headers=auth_headers).json()
        todos = client.get("/autoridades-uteq/including-deleted", headers=auth_headers).json()

        assert activos["pagination"]["total_items"] == 0
        assert len(todos) == 1
        assert todos[0]["is_deleted"] is True


class TestEstudianteCascade:
    """Tests for cascade delete/restore of Estudiante."""

    def test_eliminar_y_restaurar_estudiante(
        self,
        client: TestClient,
        db_session: Session,
        estudiante: EstudianteORM,
        usuario_legacy: UsuarioORM,
        auth_headers: Dict[str, str],
    ):
        estudiante_id = estudiante.id
        persona_id = estudiante.persona_id
        usuario_id = usuario_legacy.id

        response = client.delete(f"/estudiantes/{estudiante_id}", headers=auth_headers)
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(EstudianteORM, estudiante_id).deleted_at is not None
        assert db_session.get(UsuarioORM, usuario_id).deleted_at is not None
        assert db_session.get(PersonaORM, persona_id).deleted_at is not None

        response = client.put(f"/estudiantes/{estudiante_id}/restore", headers=auth_headers)
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(EstudianteORM, estudiante_id).deleted_at is None
        assert db_session.get(UsuarioORM, usuario_id).deleted_at is None
        assert db_session.get(PersonaORM, persona_id).deleted_at is None

    def test_crear_estudiante_persona_ya_registrada(
        self,
        client: TestClient,
        estudiante: EstudianteORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/estudiantes/",
            json={
                "persona_id": estudiante.persona_id,
                "institucion_id": estudiante.institucion_id,
                "ciudad_id": estudiante.ciudad_id,
            },
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "person_exists"
