"""
Servicio de autenticación.

Gestiona login (con soporte para contraseñas heredadas en texto plano),
registro, cambio de contraseña y el ciclo de vida de los códigos de
recuperación: ``valido`` → ``verificado`` → ``expirado``.
"""

from typing import NamedTuple, Optional, Tuple
import logging

from auth import JWTManager, TokenData
from models.usuarios import Usuario
from repositories.usuario_repository import UsuarioRepository
from repositories.persona_repository import PersonaRepository
from repositories.codigo_usuario_repository import (
    CodigoUsuarioRepository,
    ESTADO_VALIDO,
    ESTADO_VERIFICADO,
    ESTADO_EXPIRADO,
)
from database.models import UsuarioORM
from core.exceptions import AppException, AuthErrorCode, AuthException
from core.security import (
    hash_password,
    check_password,
    check_plaintext_password,
    is_legacy_plaintext,
    generar_codigo,
)
from core.validators import validate_codigo_string, raise_if_errors
from utils.datetime_utils import local_now_naive

logger = logging.getLogger(__name__)

MENSAJE_RECUPERACION = (
    "Si la cédula está registrada, se generó un código de recuperación. "
    "Revise su correo o contacte al administrador."
)

CODIGO_VERIFICADO = "verificado"
CODIGO_CADUCADO = "caducado"
CODIGO_NO_EXISTE = "no existe"


class VerificacionCodigo(NamedTuple):
    """Resultado de verificar un código de recuperación."""
    estado: str
    usuario_id: Optional[int] = None
    cedula: Optional[str] = None
    codigo_id: Optional[int] = None

    def raise_for_estado(self) -> None:
        """Convierte ``no existe`` (404) y ``caducado`` (400) en errores HTTP."""
        if self.estado == CODIGO_NO_EXISTE:
            raise AppException(
                message="El código no existe",
                status_code=404,
                error="Código inválido",
                error_code="CODIGO_NO_EXISTE",
                details={"estado": self.estado},
            )
        if self.estado == CODIGO_CADUCADO:
            raise AppException(
                message="El código ha caducado o ya fue utilizado",
                status_code=400,
                error="Código inválido",
                error_code="CODIGO_CADUCADO",
                details={"estado": self.estado},
            )


class AuthService:
    """Servicio con la lógica de autenticación y recuperación de contraseñas."""

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        persona_repo: PersonaRepository,
        codigo_repo: CodigoUsuarioRepository,
        jwt_manager: JWTManager,
        codigo_expira_minutos: int = 10,
    ):
        self.usuario_repo = usuario_repo
        self.persona_repo = persona_repo
        self.codigo_repo = codigo_repo
        self.jwt_manager = jwt_manager
        self.codigo_expira_minutos = codigo_expira_minutos

    # ==================== Login / registro ====================

    def login(self, usuario: str, contrasena: str) -> dict:
        """
        Autentica a un usuario y emite un token.

        Las contraseñas heredadas (más cortas que un hash bcrypt) se comparan
        en texto plano y, si coinciden, se reemplazan por su hash bcrypt.

        Raises:
            AuthException: LOGIN_USER_NOT_FOUND, LOGIN_USER_DELETED,
                LOGIN_PASSWORD_INCORRECT_PLAIN o LOGIN_PASSWORD_INCORRECT_HASH
        """
        user = self.usuario_repo.find_by_username(usuario)
        if user is None:
            if self.usuario_repo.find_by_username_including_deleted(usuario) is not None:
                logger.info(f"Intento de login de usuario eliminado: {usuario}")
                raise AuthException(AuthErrorCode.LOGIN_USER_DELETED)
            logger.info(f"Intento de login de usuario inexistente: {usuario}")
            raise AuthException(AuthErrorCode.LOGIN_USER_NOT_FOUND)

        if is_legacy_plaintext(user.contrasena):
            if not check_plaintext_password(contrasena, user.contrasena):
                raise AuthException(AuthErrorCode.LOGIN_PASSWORD_INCORRECT_PLAIN)
            logger.warning(f"Login con contraseña en texto plano para {usuario}; se re-hashea con bcrypt")
            self.usuario_repo.update(user, {"contrasena": hash_password(contrasena)})
            self.usuario_repo.commit()
        elif not check_password(contrasena, user.contrasena):
            raise AuthException(AuthErrorCode.LOGIN_PASSWORD_INCORRECT_HASH)

        token = self.jwt_manager.create_access_token(
            user_id=user.id,
            username=user.usuario,
            tipo_usuario_id=user.tipo_usuario_id,
        )
        logger.info(f"Login exitoso: {usuario}")
        return {
            "token": token,
            "usuario": Usuario.model_validate(user).model_dump(mode="json"),
            "message": "Login exitoso",
            "requiere_cambio_password": not user.verificado,
        }

    def register(self, usuario: str, contrasena: str, persona_id: int, tipo_usuario_id: int) -> UsuarioORM:
        """
        Registra un usuario con la contraseña hasheada.

        Raises:
            AuthException: REGISTER_USERNAME_TAKEN si el usuario ya existe
            NotFoundException: si la persona no existe
        """
        if self.usuario_repo.username_exists(usuario):
            raise AuthException(AuthErrorCode.REGISTER_USERNAME_TAKEN)
        self.persona_repo.get_by_id_or_fail(persona_id)

        nuevo = UsuarioORM(
            usuario=usuario,
            contrasena=hash_password(contrasena),
            persona_id=persona_id,
            tipo_usuario_id=tipo_usuario_id,
            verificado=False,
        )
        created = self.usuario_repo.create(nuevo)
        self.usuario_repo.commit()
        logger.info(f"Usuario registrado: {usuario} (id {created.id})")
        return self.usuario_repo.refresh(created)

    def get_profile(self, user_id: int) -> UsuarioORM:
        user = self.usuario_repo.get_by_id(user_id)
        if user is None:
            raise AuthException(AuthErrorCode.USER_NOT_FOUND)
        return user

    def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        """
        Cambia la contraseña verificando la actual y marca al usuario como verificado.

        Raises:
            AuthException: USER_NOT_FOUND o CURRENT_PASSWORD_INCORRECT
        """
        user = self.get_profile(user_id)
        if is_legacy_plaintext(user.contrasena):
            valid = check_plaintext_password(old_password, user.contrasena)
        else:
            valid = check_password(old_password, user.contrasena)
        if not valid:
            raise AuthException(AuthErrorCode.CURRENT_PASSWORD_INCORRECT)

        self.usuario_repo.update(user, {"contrasena": hash_password(new_password), "verificado": True})
        self.usuario_repo.commit()
        logger.info(f"Contraseña actualizada para el usuario {user_id}")

    # ==================== Recuperación de contraseña ====================

    def recover_password(self, cedula: str) -> dict:
        """
        Genera un código de recuperación para el usuario de la persona con esa cédula.

        La respuesta es la misma exista o no la cédula. El envío del código
        ocurre fuera de este sistema.

        Raises:
            AuthException: CODIGO_VIGENTE si el usuario ya tiene un código sin expirar
        """
        persona = self.persona_repo.find_by_cedula(cedula.strip())
        usuarios = self.usuario_repo.find_by_persona(persona.id) if persona else []
        if not usuarios:
            logger.info("Recuperación solicitada para una cédula sin usuario activo")
            return {"message": MENSAJE_RECUPERACION}

        usuario = usuarios[0]
        if self.codigo_repo.existe_vigente_por_usuario(usuario.id):
            raise AuthException(AuthErrorCode.CODIGO_VIGENTE)

        codigo = generar_codigo()
        self.codigo_repo.crear(usuario.id, codigo, self.codigo_expira_minutos)
        self.codigo_repo.commit()
        logger.info(f"Código de recuperación generado para el usuario {usuario.id}")
        logger.debug(f"Código generado para el usuario {usuario.id}: {codigo}")
        return {"message": MENSAJE_RECUPERACION}

    def verify_codigo(self, codigo: str) -> VerificacionCodigo:
        """
        Verifica un código de 6 dígitos tomando el registro más reciente.

        - sin registro → ``no existe``
        - estado distinto de ``valido`` o vencido → se marca ``expirado`` y devuelve ``caducado``
        - en otro caso → se marca ``verificado``

        Raises:
            ValidationException: si el código no tiene 6 dígitos
        """
        raise_if_errors(validate_codigo_string(codigo), "El código debe tener exactamente 6 dígitos")
        registro = self.codigo_repo.find_latest_by_codigo(codigo.strip())
        if registro is None:
            return VerificacionCodigo(estado=CODIGO_NO_EXISTE)

        vencido = registro.expira_en is not None and local_now_naive() >= registro.expira_en
        if registro.estado != ESTADO_VALIDO or vencido:
            if registro.estado != ESTADO_EXPIRADO:
                self.codigo_repo.marcar_como_expirado(registro)
                self.codigo_repo.commit()
            logger.info(f"Código {registro.id} caducado")
            return VerificacionCodigo(estado=CODIGO_CADUCADO, codigo_id=registro.id)

        self.codigo_repo.marcar_como_verificado(registro)
        self.codigo_repo.commit()

        usuario = self.usuario_repo.get_by_id_including_deleted(registro.usuario_id)
        cedula = usuario.persona.cedula if usuario is not None and usuario.persona is not None else None
        logger.info(f"Código {registro.id} verificado para el usuario {registro.usuario_id}")
        return VerificacionCodigo(
            estado=CODIGO_VERIFICADO,
            usuario_id=registro.usuario_id,
            cedula=cedula,
            codigo_id=registro.id,
        )

    def reset_password_by_codigo_id(self, codigo_id: int, usuario_id: int, clave: str) -> None:
        """
        Restablece la contraseña con un código previamente verificado.

        El código queda ``expirado`` y el usuario ``verificado``.

        Raises:
            AuthException: CODIGO_NOT_FOUND, CODIGO_USUARIO_MISMATCH,
                CODIGO_NOT_VERIFIED o USER_NOT_FOUND
        """
        registro = self.codigo_repo.get_by_id(codigo_id)
        if registro is None:
            raise AuthException(AuthErrorCode.CODIGO_NOT_FOUND)
        if registro.usuario_id != usuario_id:
            raise AuthException(AuthErrorCode.CODIGO_USUARIO_MISMATCH)
        if registro.estado != ESTADO_VERIFICADO:
            raise AuthException(AuthErrorCode.CODIGO_NOT_VERIFIED)

        user = self.usuario_repo.get_by_id(usuario_id)
        if user is None:
            raise AuthException(AuthErrorCode.USER_NOT_FOUND)

        self.usuario_repo.update(user, {"contrasena": hash_password(clave), "verificado": True})
        self.codigo_repo.marcar_como_expirado(registro)
        self.codigo_repo.commit()
        logger.info(f"Contraseña restablecida para el usuario {usuario_id} con el código {codigo_id}")

    # ==================== Tokens ====================

    def validate_token(self, token: str) -> Tuple[bool, Optional[dict]]:
        try:
            return True, self.jwt_manager.decode_token(token)
        except AuthException as e:
            logger.info(f"Token rechazado: {e.code.value}")
            return False, None

    def generate_new_token(self, current: TokenData) -> str:
        return self.jwt_manager.create_access_token(
            user_id=current.user_id,
            username=current.username,
            tipo_usuario_id=current.tipo_usuario_id,
        )
