import logging
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWTClaimsError
from fastapi import Depends
from fastapi.security import APIKeyHeader

from config import Settings, get_settings
from core.exceptions import AuthErrorCode, AuthException

logger = logging.getLogger(__name__)

# El header se lee sin validar para poder distinguir cada caso de error
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

# jwt.decode relanza los JWSError como JWTError genérico; solo el mensaje
# distingue una firma inválida de un token mal formado.
_MALFORMED_MARKERS = ("segments", "padding", "header string", "payload string", "crypto")


class TokenData(NamedTuple):
    """Datos del usuario autenticado extraídos del token."""
    user_id: int
    username: str
    tipo_usuario_id: int


class JWTManager:
    """Emisión y validación de tokens JWT firmados con HS256."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440,
                 issuer: str = "ApiEscuela"):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self.issuer = issuer

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTManager":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.jwt_access_minutes,
            issuer=settings.jwt_issuer,
        )

    def create_access_token(
        self,
        user_id: int,
        username: str,
        tipo_usuario_id: int,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Crea un token con los claims sub, user_id, username, tipo_usuario_id, iat, nbf, exp e iss."""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else timedelta(minutes=self.expire_minutes))
        claims = {
            "sub": username,
            "user_id": user_id,
            "username": username,
            "tipo_usuario_id": tipo_usuario_id,
            "iat": now,
            "nbf": now,
            "exp": expire,
            "iss": self.issuer,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict:
        """
        Decodifica y valida un token.

        Raises:
            AuthException: con AUTH_TOKEN_EXPIRED, AUTH_TOKEN_SIGNATURE_INVALID,
                AUTH_TOKEN_MALFORMED o AUTH_TOKEN_INVALID según el fallo
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except ExpiredSignatureError:
            logger.info("Token expirado")
            raise AuthException(AuthErrorCode.AUTH_TOKEN_EXPIRED)
        except JWTClaimsError as e:
            logger.info(f"Claims inválidos: {e}")
            raise AuthException(AuthErrorCode.AUTH_TOKEN_INVALID)
        except JWTError as e:
            logger.info(f"Token inválido: {e}")
            raise AuthException(self._classify(str(e)))

    @staticmethod
    def _classify(reason: str) -> AuthErrorCode:
        reason = reason.lower()
        if "signature verification failed" in reason:
            return AuthErrorCode.AUTH_TOKEN_SIGNATURE_INVALID
        if any(marker in reason for marker in _MALFORMED_MARKERS):
            return AuthErrorCode.AUTH_TOKEN_MALFORMED
        return AuthErrorCode.AUTH_TOKEN_INVALID


def get_jwt_manager(settings: Settings = Depends(get_settings)) -> JWTManager:
    return JWTManager.from_settings(settings)


def parse_authorization_header(header: Optional[str]) -> str:
    """
    Extrae el token de un header ``Authorization: Bearer <token>``.

    Raises:
        AuthException: AUTH_TOKEN_MISSING, AUTH_TOKEN_FORMAT_INVALID,
            AUTH_TOKEN_TYPE_INVALID o AUTH_TOKEN_EMPTY
    """
    if not header:
        raise AuthException(AuthErrorCode.AUTH_TOKEN_MISSING)
    parts = header.split(" ")
    if len(parts) != 2:
        raise AuthException(AuthErrorCode.AUTH_TOKEN_FORMAT_INVALID)
    scheme, token = parts
    if scheme != "Bearer":
        raise AuthException(AuthErrorCode.AUTH_TOKEN_TYPE_INVALID)
    if not token.strip():
        raise AuthException(AuthErrorCode.AUTH_TOKEN_EMPTY)
    return token


def token_data_from_claims(claims: dict) -> TokenData:
    user_id = claims.get("user_id")
    username = claims.get("username")
    if user_id is None or not username:
        raise AuthException(AuthErrorCode.AUTH_TOKEN_INVALID)
    return TokenData(user_id=int(user_id), username=username, tipo_usuario_id=claims.get("tipo_usuario_id"))


def get_current_user_dep(
    authorization: Optional[str] = Depends(authorization_header),
    jwt_manager: JWTManager = Depends(get_jwt_manager),
) -> TokenData:
    """Dependencia de FastAPI que exige un Bearer token válido."""
    token = parse_authorization_header(authorization)
    claims = jwt_manager.decode_token(token)
    return token_data_from_claims(claims)
