"""
Tests for Tematica and Actividad endpoints.

Tests cover:
- Creation with an existing / missing tematica
- Duration range filter (closed interval)
- Name search
"""

import pytest
from fastapi.testclient import TestClient
from typing import Dict

from database.models import TematicaORM


class TestActividadCreation:
    """Tests for POST /actividades/."""

    def test_crear_actividad(
        self,
        client: TestClient,
        tematica: TematicaORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/actividades/",
            json={"nombre": "Feria de proyectos", "tematica_id": tematica.id, "duracion": 60},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["duracion"] == 60
        assert data["tematica_id"] == tematica.id

    def test_crear_actividad_tematica_inexistente(self, client: TestClient, auth_headers: Dict[str, str]):
        response = client.post(
            "/actividades/",
            json={"nombre": "Feria de proyectos", "tematica_id": 9999, "duracion": 60},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_crear_actividad_duracion_negativa(
        self,
        client: TestClient,
        tematica: TematicaORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/actividades/",
            json={"nombre": "Feria", "tematica_id": tematica.id, "duracion": -5},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestActividadDuracion:
    """Tests for GET /actividades/duracion."""

    def test_rango_cerrado_incluye_extremos(
        self,
        client: TestClient,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        """Test min and max are both inclusive."""
        response = client.get("/actividades/duracion?min=30&max=120", headers=auth_headers)

        assert response.status_code == 200
        duraciones = sorted(a["duracion"] for a in response.json())
        assert duraciones == [30, 90, 120]

    def test_rango_por_defecto(
        self,
        client: TestClient,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        response = client.get("/actividades/duracion", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == len(actividades)

    def test_minimo_mayor_que_maximo(
        self,
        client: TestClient,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        response = client.get("/actividades/duracion?min=120&max=30", headers=auth_headers)

        assert response.status_code == 400

    def test_rango_excluye_eliminadas(
        self,
        client: TestClient,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        taller = next(a for a in actividades if a.duracion == 90)
        client.delete(f"/actividades/{taller.id}", headers=auth_headers)

        response = client.get("/actividades/duracion?min=30&max=120", headers=auth_headers)

        assert sorted(a["duracion"] for a in response.json()) == [30, 120]


class TestActividadBusqueda:

    def test_buscar_por_nombre(
        self,
        client: TestClient,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        response = client.get("/actividades/nombre/TALLER", headers=auth_headers)

        assert response.status_code == 200
        assert [a["nombre"] for a in response.json()] == ["Taller de robótica"]

    def test_buscar_por_tematica(
        self,
        client: TestClient,
        tematica: TematicaORM,
        actividades: list,
        auth_headers: Dict[str, str],
    ):
        response = client.get(f"/actividades/tematica/{tematica.id}", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 5
