"""
Tests for entity validators and password helpers.

Tests cover:
- Persona field rules (all errors collected)
- Cargo and codigo formats
- Search term minimum length
- bcrypt hashing and legacy plaintext detection
"""

import pytest
from datetime import date, timedelta

from core.validators import (
    validate_persona,
    validate_cargo,
    validate_codigo,
    validate_codigo_string,
    validate_search_term,
    raise_if_errors,
)
from core.exceptions import ValidationException
from core.security import (
    hash_password,
    check_password,
    check_plaintext_password,
    is_legacy_plaintext,
    generar_codigo,
)
from utils.datetime_utils import local_now_naive


class TestValidatePersona:

    def test_persona_valida(self):
        errors = validate_persona({
            "nombre": "Ana Vera",
            "cedula": "1312345678",
            "correo": "ana@uteq.edu.ec",
            "telefono": "0991234567",
            "fecha_nacimiento": date(2005, 1, 1),
        })

        assert errors == []

    @pytest.mark.parametrize("cedula", ["123456789", "12345678901", "12345abcde", ""])
    def test_cedula_invalida(self, cedula):
        errors = validate_persona({"nombre": "Ana Vera", "cedula": cedula})

        assert [e["field"] for e in errors] == ["cedula"]

    def test_acumula_errores(self):
        errors = validate_persona({
            "nombre": "",
            "cedula": "1",
            "correo": "sin-arroba",
            "telefono": "abc",
        })

        assert {e["field"] for e in errors} == {"nombre", "cedula", "correo", "telefono"}
        assert all(set(e) == {"field", "message", "value"} for e in errors)

    def test_menor_de_un_anio(self):
        recien_nacido = local_now_naive().date() - timedelta(days=30)

        errors = validate_persona({"nombre": "Bebé", "cedula": "1312345678", "fecha_nacimiento": recien_nacido})

        assert errors[0]["field"] == "fecha_nacimiento"

    def test_mas_de_150_anios(self):
        errors = validate_persona({"nombre": "Ana", "cedula": "1312345678", "fecha_nacimiento": date(1800, 1, 1)})

        assert errors[0]["field"] == "fecha_nacimiento"

    def test_update_parcial_solo_valida_campos_presentes(self):
        assert validate_persona({"telefono": "0991234567"}, is_update=True) == []


class TestValidateCargo:

    @pytest.mark.parametrize("cargo", ["Decano", "Vicerrector Académico", "Jefe de Área - TIC", "Lcdo. Director"])
    def test_cargo_valido(self, cargo):
        assert validate_cargo(cargo) == []

    @pytest.mark.parametrize("cargo", ["", "D", "Decano 2", "Jefe/TIC", "x" * 101])
    def test_cargo_invalido(self, cargo):
        assert validate_cargo(cargo)[0]["field"] == "cargo"


class TestValidateCodigo:

    def test_codigo_string(self):
        assert validate_codigo_string("012345") == []
        assert validate_codigo_string("12345")
        assert validate_codigo_string("abcdef")

    def test_codigo_completo(self):
        errors = validate_codigo({
            "usuario_id": 1,
            "codigo": "123456",
            "estado": "valido",
            "expira_en": local_now_naive() + timedelta(minutes=10),
        })

        assert errors == []

    def test_expira_en_fuera_de_ventana(self):
        pasado = validate_codigo({
            "usuario_id": 1,
            "codigo": "123456",
            "estado": "valido",
            "expira_en": local_now_naive() - timedelta(days=400),
        })
        futuro = validate_codigo({
            "usuario_id": 1,
            "codigo": "123456",
            "estado": "valido",
            "expira_en": local_now_naive() + timedelta(days=2),
        })

        assert pasado[0]["field"] == "expira_en"
        assert futuro[0]["field"] == "expira_en"

    def test_estado_desconocido(self):
        errors = validate_codigo({"usuario_id": 1, "codigo": "123456", "estado": "usado"})

        assert [e["field"] for e in errors] == ["estado"]


class TestSearchTerm:

    def test_termino_recortado(self):
        assert validate_search_term("  beca ") == "beca"

    def test_termino_corto(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_search_term(" a ")

        assert exc_info.value.status_code == 400
        assert exc_info.value.errors[0]["field"] == "termino"

    def test_raise_if_errors(self):
        raise_if_errors([])
        with pytest.raises(ValidationException):
            raise_if_errors([{"field": "x", "message": "mal", "value": ""}])


class TestPasswordHelpers:

    def test_hash_y_verificacion(self):
        hashed = hash_password("Secreta123")

        assert len(hashed) == 60
        assert check_password("Secreta123", hashed) is True
        assert check_password("otra", hashed) is False

    def test_hash_invalido_nunca_coincide(self):
        assert check_password("clave123", "clave123") is False

    def test_texto_plano_heredado(self):
        assert is_legacy_plaintext("clave123") is True
        assert is_legacy_plaintext(hash_password("clave123")) is False
        assert check_plaintext_password("clave123", "clave123") is True
        assert check_plaintext_password("clave124", "clave123") is False

    def test_generar_codigo(self):
        codigo = generar_codigo()

        assert len(codigo) == 6
        assert codigo.isdigit()
