"""
Tests for Authentication endpoints and the token middleware.

Tests cover:
- Login with bcrypt and legacy plaintext passwords
- Token generation, validation and refresh
- Every Authorization header failure mode
- Password recovery: recover → verify → reset
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from typing import Dict
from datetime import timedelta
from jose import jwt

from auth import JWTManager, parse_authorization_header
from core.exceptions import AuthErrorCode, AuthException
from database.models import CodigoUsuarioORM, PersonaORM, TipoUsuarioORM, UsuarioORM
from repositories.codigo_usuario_repository import CodigoUsuarioRepository
from repositories.persona_repository import PersonaRepository
from repositories.usuario_repository import UsuarioRepository
from services.auth_service import AuthService, CODIGO_CADUCADO, MENSAJE_RECUPERACION


def _login(client: TestClient, usuario: str, contrasena: str):
    return client.post("/auth/login", json={"usuario": usuario, "contraseña": contrasena})


class TestLogin:
    """Tests for POST /auth/login and /auth/token."""

    def test_login_exitoso(
        self,
        client: TestClient,
        usuario: UsuarioORM,
        usuario_password: str,
        jwt_manager: JWTManager,
    ):
        """Test successful login returns token and user without password."""
        response = _login(client, "mcedeno", usuario_password)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login exitoso"
        assert data["requiere_cambio_password"] is False
        assert data["usuario"]["id"] == usuario.id
        assert "contrasena" not in data["usuario"]
        assert "contraseña" not in data["usuario"]

        claims = jwt_manager.decode_token(data["token"])
        assert claims["sub"] == "mcedeno"
        assert claims["user_id"] == usuario.id
        assert claims["tipo_usuario_id"] == usuario.tipo_usuario_id
        assert claims["iss"] == "ApiEscuela"

    def test_login_password_incorrecto_hash(self, client: TestClient, usuario: UsuarioORM):
        response = _login(client, "mcedeno", "otra-clave")

        assert response.status_code == 401
        body = response.json()
        assert body["error_code"] == "LOGIN_PASSWORD_INCORRECT_HASH"
        assert body["error"] == "Credenciales inválidas"

    def test_login_usuario_inexistente(self, client: TestClient):
        response = _login(client, "nadie", "clave123")

        assert response.status_code == 401
        assert response.json()["error_code"] == "LOGIN_USER_NOT_FOUND"

    def test_login_usuario_eliminado(
        self,
        client: TestClient,
        db_session: Session,
        usuario: UsuarioORM,
        usuario_password: str,
    ):
        repo = UsuarioRepository(db_session)
        repo.delete(usuario)
        repo.commit()

        response = _login(client, "mcedeno", usuario_password)

        assert response.status_code == 401
        assert response.json()["error_code"] == "LOGIN_USER_DELETED"

    def test_login_form_oauth2(self, client: TestClient, usuario: UsuarioORM, usuario_password: str):
        response = client.post("/auth/token", data={"username": "mcedeno", "password": usuario_password})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]


class TestLegacyPasswords:
    """Tests for users whose password is stored in plaintext."""

    def test_login_texto_plano_rehashea(
        self,
        client: TestClient,
        db_session: Session,
        usuario_legacy: UsuarioORM,
    ):
        """Test a plaintext match succeeds and upgrades the stored value to bcrypt."""
        response = _login(client, "cmora", "clave123")

        assert response.status_code == 200
        assert response.json()["requiere_cambio_password"] is True

        db_session.expire_all()
        stored = db_session.get(UsuarioORM, usuario_legacy.id).contrasena
        assert stored != "clave123"
        assert stored.startswith("$2")
        assert len(stored) == 60

        # el segundo login ya usa el hash
        assert _login(client, "cmora", "clave123").status_code == 200

    def test_login_texto_plano_incorrecto(self, client: TestClient, usuario_legacy: UsuarioORM):
        response = _login(client, "cmora", "clave124")

        assert response.status_code == 401
        assert response.json()["error_code"] == "LOGIN_PASSWORD_INCORRECT_PLAIN"


class TestRegister:

    def test_register(self, client: TestClient, otra_persona: PersonaORM, tipo_usuario: TipoUsuarioORM):
        response = client.post(
            "/auth/register",
            json={
                "usuario": "nuevo.usuario",
                "contraseña": "Segura2024",
                "persona_id": otra_persona.id,
                "tipo_usuario_id": tipo_usuario.id,
            },
        )

        assert response.status_code == 201
        assert response.json()["usuario"]["verificado"] is False
        assert _login(client, "nuevo.usuario", "Segura2024").status_code == 200

    def test_register_usuario_existente(
        self,
        client: TestClient,
        usuario: UsuarioORM,
        otra_persona: PersonaORM,
    ):
        response = client.post(
            "/auth/register",
            json={
                "usuario": usuario.usuario,
                "contraseña": "Segura2024",
                "persona_id": otra_persona.id,
                "tipo_usuario_id": usuario.tipo_usuario_id,
            },
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "REGISTER_USERNAME_TAKEN"


class TestTokenMiddleware:
    """Tests for the Bearer token dependency on protected routes."""

    def test_sin_header(self, client: TestClient):
        response = client.get("/instituciones/")

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_MISSING"

    def test_formato_invalido(self, client: TestClient, usuario_token: str):
        response = client.get("/instituciones/", headers={"Authorization": f"Bearer {usuario_token} extra"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_FORMAT_INVALID"

    def test_tipo_invalido(self, client: TestClient, usuario_token: str):
        response = client.get("/instituciones/", headers={"Authorization": f"Basic {usuario_token}"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_TYPE_INVALID"

    def test_token_vacio(self):
        with pytest.raises(AuthException) as exc_info:
            parse_authorization_header("Bearer ")

        assert exc_info.value.code == AuthErrorCode.AUTH_TOKEN_EMPTY
        assert exc_info.value.status_code == 401

    def test_token_expirado(self, client: TestClient, jwt_manager: JWTManager, usuario: UsuarioORM):
        token = jwt_manager.create_access_token(
            user_id=usuario.id,
            username=usuario.usuario,
            tipo_usuario_id=usuario.tipo_usuario_id,
            expires_delta=timedelta(minutes=-5),
        )

        response = client.get("/instituciones/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_EXPIRED"

    def test_firma_invalida(self, client: TestClient, usuario: UsuarioORM):
        otro = JWTManager(secret_key="otra-clave-secreta-de-al-menos-32-caracteres")
        token = otro.create_access_token(usuario.id, usuario.usuario, usuario.tipo_usuario_id)

        response = client.get("/instituciones/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_SIGNATURE_INVALID"

    def test_token_malformado(self, client: TestClient):
        response = client.get("/instituciones/", headers={"Authorization": "Bearer no-es-un-jwt"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_MALFORMED"

    def test_emisor_distinto(self, client: TestClient, jwt_manager: JWTManager, usuario: UsuarioORM):
        otro = JWTManager(secret_key=jwt_manager.secret_key, issuer="OtraAplicacion")
        token = otro.create_access_token(usuario.id, usuario.usuario, usuario.tipo_usuario_id)

        response = client.get("/instituciones/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"

    def test_token_valido(self, client: TestClient, auth_headers: Dict[str, str]):
        response = client.get("/instituciones/", headers=auth_headers)

        assert response.status_code == 200


class TestTokenEndpoints:

    def test_validate_token(self, client: TestClient, usuario: UsuarioORM, usuario_token: str):
        response = client.post("/auth/validate-token", json={"token": usuario_token})

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["user_id"] == usuario.id
        assert data["username"] == usuario.usuario

    def test_validate_token_invalido(self, client: TestClient):
        response = client.post("/auth/validate-token", json={"token": "no-es-un-jwt"})

        assert response.status_code == 401
        assert response.json()["valid"] is False

    def test_validate_token_sin_usuario(self, client: TestClient, jwt_manager: JWTManager):
        """Test a correctly signed token without user claims is reported as invalid."""
        token = jwt.encode(
            {"sub": "anonimo", "iss": jwt_manager.issuer},
            jwt_manager.secret_key,
            algorithm=jwt_manager.algorithm,
        )

        response = client.post("/auth/validate-token", json={"token": token})

        assert response.status_code == 401
        assert response.json() == {"valid": False, "error": "Token inválido o expirado"}

    def test_profile(self, client: TestClient, usuario: UsuarioORM, auth_headers: Dict[str, str]):
        response = client.get("/auth/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["usuario"] == usuario.usuario

    def test_refresh_token(
        self,
        client: TestClient,
        jwt_manager: JWTManager,
        usuario: UsuarioORM,
        auth_headers: Dict[str, str],
    ):
        response = client.post("/auth/refresh-token", headers=auth_headers)

        assert response.status_code == 200
        assert jwt_manager.decode_token(response.json()["token"])["user_id"] == usuario.id


class TestChangePassword:

    def test_cambiar_password(
        self,
        client: TestClient,
        db_session: Session,
        usuario: UsuarioORM,
        usuario_password: str,
        auth_headers: Dict[str, str],
    ):
        response = client.post(
            "/auth/change-password",
            json={"old_password": usuario_password, "new_password": "NuevaClave99"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert _login(client, "mcedeno", "NuevaClave99").status_code == 200
        db_session.expire_all()
        assert db_session.get(UsuarioORM, usuario.id).verificado is True

    def test_cambiar_password_actual_incorrecta(self, client: TestClient, auth_headers: Dict[str, str]):
        response = client.post(
            "/auth/change-password",
            json={"old_password": "incorrecta", "new_password": "NuevaClave99"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "CURRENT_PASSWORD_INCORRECT"


class TestPasswordRecovery:
    """Tests for the recover → verify → reset lifecycle."""

    def _codigo_de(self, db_session: Session, usuario_id: int) -> CodigoUsuarioORM:
        db_session.expire_all()
        return (
            db_session.query(CodigoUsuarioORM)
            .filter(CodigoUsuarioORM.usuario_id == usuario_id)
            .order_by(CodigoUsuarioORM.id.desc())
            .first()
        )

    def test_flujo_completo(
        self,
        client: TestClient,
        db_session: Session,
        persona: PersonaORM,
        usuario: UsuarioORM,
    ):
        response = client.post("/auth/recover-password", json={"cedula": persona.cedula})
        assert response.status_code == 200
        assert response.json()["message"] == MENSAJE_RECUPERACION

        registro = self._codigo_de(db_session, usuario.id)
        assert registro is not None
        assert registro.estado == "valido"
        assert len(registro.codigo) == 6

        response = client.post("/auth/verify-code", json={"codigo": registro.codigo})
        assert response.status_code == 200
        data = response.json()
        assert data["estado"] == "verificado"
        assert data["usuario_id"] == usuario.id
        assert data["cedula"] == persona.cedula
        assert data["codigo_id"] == registro.id

        response = client.post(
            "/auth/reset-password",
            json={"codigo_id": registro.id, "usuario_id": usuario.id, "clave": "Recuperada1"},
        )
        assert response.status_code == 200

        assert _login(client, "mcedeno", "Recuperada1").status_code == 200
        assert self._codigo_de(db_session, usuario.id).estado == "expirado"

        # un código ya usado queda caducado
        response = client.post("/auth/verify-code", json={"codigo": registro.codigo})
        assert response.status_code == 400
        assert response.json()["details"]["estado"] == "caducado"

    def test_cedula_desconocida_misma_respuesta(self, client: TestClient, db_session: Session):
        response = client.post("/auth/recover-password", json={"cedula": "0999999999"})

        assert response.status_code == 200
        assert response.json()["message"] == MENSAJE_RECUPERACION
        assert db_session.query(CodigoUsuarioORM).count() == 0

    def test_codigo_vigente(self, client: TestClient, persona: PersonaORM, usuario: UsuarioORM):
        client.post("/auth/recover-password", json={"cedula": persona.cedula})

        response = client.post("/auth/recover-password", json={"cedula": persona.cedula})

        assert response.status_code == 400
        assert response.json()["error_code"] == "CODIGO_VIGENTE"

    def test_codigo_caducado(
        self,
        db_session: Session,
        jwt_manager: JWTManager,
        persona: PersonaORM,
        usuario: UsuarioORM,
    ):
        """Test a code past its expiry is reported caducado and marked expirado."""
        codigo_repo = CodigoUsuarioRepository(db_session)
        service = AuthService(
            UsuarioRepository(db_session),
            PersonaRepository(db_session),
            codigo_repo,
            jwt_manager,
            codigo_expira_minutos=0,
        )
        service.recover_password(persona.cedula)
        registro = self._codigo_de(db_session, usuario.id)

        result = service.verify_codigo(registro.codigo)

        assert result.estado == CODIGO_CADUCADO
        assert self._codigo_de(db_session, usuario.id).estado == "expirado"

    def test_verify_code_formato_invalido(self, client: TestClient):
        response = client.post("/auth/verify-code", json={"codigo": "12a"})

        assert response.status_code == 400

    def test_reset_sin_verificar(
        self,
        client: TestClient,
        db_session: Session,
        persona: PersonaORM,
        usuario: UsuarioORM,
    ):
        client.post("/auth/recover-password", json={"cedula": persona.cedula})
        registro = self._codigo_de(db_session, usuario.id)

        response = client.post(
            "/auth/reset-password",
            json={"codigo_id": registro.id, "usuario_id": usuario.id, "clave": "Recuperada1"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "CODIGO_NOT_VERIFIED"

    def test_reset_usuario_distinto(
        self,
        client: TestClient,
        db_session: Session,
        persona: PersonaORM,
        usuario: UsuarioORM,
        usuario_legacy: UsuarioORM,
    ):
        client.post("/auth/recover-password", json={"cedula": persona.cedula})
        registro = self._codigo_de(db_session, usuario.id)
        client.post("/auth/verify-code", json={"codigo": registro.codigo})

        response = client.post(
            "/auth/reset-password",
            json={"codigo_id": registro.id, "usuario_id": usuario_legacy.id, "clave": "Recuperada1"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "CODIGO_USUARIO_MISMATCH"
