"""
Utilidades de seguridad: hashing de contraseñas y códigos de recuperación.
"""

import hmac
import secrets

import bcrypt

from config import settings

# longitud de un hash bcrypt ("$2b$12$" + 53 caracteres)
BCRYPT_HASH_LENGTH = 60


def hash_password(password: str) -> str:
    """
    Genera un hash bcrypt para la contraseña.

    Args:
        password: Contraseña en texto plano

    Returns:
        Hash bcrypt como cadena
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    """
    Verifica una contraseña contra un hash bcrypt.

    Un valor almacenado que no es un hash bcrypt válido nunca coincide.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def is_legacy_plaintext(stored: str) -> bool:
    """Indica si la contraseña almacenada es texto plano heredado (no es un hash bcrypt)."""
    return len(stored or "") < BCRYPT_HASH_LENGTH


def check_plaintext_password(password: str, stored: str) -> bool:
    """Compara una contraseña heredada en texto plano en tiempo constante."""
    return hmac.compare_digest(password.encode("utf-8"), (stored or "").encode("utf-8"))


def generar_codigo() -> str:
    """Genera un código numérico de 6 dígitos para recuperación de contraseña."""
    return f"{secrets.randbelow(1_000_000):06d}"
