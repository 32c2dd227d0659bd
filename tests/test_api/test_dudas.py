"""
Tests for Dudas endpoints.

Tests cover:
- Creation for an existing / missing estudiante
- Assignment to an authority and answering
- Filters: sin-responder, respondidas, sin-asignar, buscar
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from typing import Dict

from database.models import AutoridadUTEQORM, DudasORM, EstudianteORM


@pytest.fixture
def duda(db_session: Session, estudiante: EstudianteORM) -> DudasORM:
    registro = DudasORM(pregunta="¿Qué requisitos hay para la beca?", estudiante_id=estudiante.id)
    db_session.add(registro)
    db_session.commit()
    db_session.refresh(registro)
    return registro


class TestDudaLifecycle:

    def test_crear_duda(
        self,
        client: TestClient,
        estudiante: EstudianteORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/dudas/",
            json={"pregunta": "¿Cuándo son las inscripciones?", "estudiante_id": estudiante.id},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["estado"] == "sin_asignar"

    def test_crear_duda_estudiante_inexistente(self, client: TestClient, auth_headers: Dict[str, str]):
        response = client.post(
            "/dudas/",
            json={"pregunta": "¿Hay transporte?", "estudiante_id": 9999},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_asignar_y_responder(
        self,
        client: TestClient,
        duda: DudasORM,
        autoridad: AutoridadUTEQORM,
        auth_headers: Dict[str, str],
    ):
        response = client.put(
            f"/dudas/{duda.id}/asignar",
            json={"autoridad_id": autoridad.id},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["estado"] == "asignada"
        assert response.json()["autoridad_uteq_id"] == autoridad.id

        response = client.put(
            f"/dudas/{duda.id}/responder",
            json={"respuesta": "  Promedio mínimo de 9/10.  "},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["estado"] == "respondida"
        assert response.json()["respuesta"] == "Promedio mínimo de 9/10."

    def test_asignar_autoridad_inexistente(
        self,
        client: TestClient,
        duda: DudasORM,
        auth_headers: Dict[str, str],
    ):
        response = client.put(f"/dudas/{duda.id}/asignar", json={"autoridad_id": 9999}, headers=auth_headers)

        assert response.status_code == 404

    def test_responder_en_blanco(
        self,
        client: TestClient,
        duda: DudasORM,
        auth_headers: Dict[str, str],
    ):
        response = client.put(f"/dudas/{duda.id}/responder", json={"respuesta": "   "}, headers=auth_headers)

        assert response.status_code == 400


class TestDudaFiltros:

    @pytest.fixture
    def dudas(
        self,
        db_session: Session,
        estudiante: EstudianteORM,
        autoridad: AutoridadUTEQORM,
    ) -> list:
        registros = [
            DudasORM(pregunta="¿Hay becas deportivas?", estudiante_id=estudiante.id),
            DudasORM(pregunta="¿Dónde queda el campus?", estudiante_id=estudiante.id, respuesta=""),
            DudasORM(
                pregunta="¿Qué carreras hay?",
                estudiante_id=estudiante.id,
                autoridad_uteq_id=autoridad.id,
                respuesta="Veintiséis carreras",
            ),
        ]
        db_session.add_all(registros)
        db_session.commit()
        return registros

    def test_sin_responder_incluye_respuesta_vacia(
        self,
        client: TestClient,
        dudas: list,
        auth_headers: Dict[str, str],
    ):
        response = client.get("/dudas/sin-responder", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_respondidas(self, client: TestClient, dudas: list, auth_headers: Dict[str, str]):
        response = client.get("/dudas/respondidas", headers=auth_headers)

        assert [d["respuesta"] for d in response.json()] == ["Veintiséis carreras"]

    def test_sin_asignar(self, client: TestClient, dudas: list, auth_headers: Dict[str, str]):
        response = client.get("/dudas/sin-asignar", headers=auth_headers)

        assert len(response.json()) == 2
        assert all(d["autoridad_uteq_id"] is None for d in response.json())

    def test_buscar_en_pregunta(self, client: TestClient, dudas: list, auth_headers: Dict[str, str]):
        response = client.get("/dudas/buscar/becas", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_buscar_termino_corto(self, client: TestClient, dudas: list, auth_headers: Dict[str, str]):
        response = client.get("/dudas/buscar/b", headers=auth_headers)

        assert response.status_code == 400
